"""Field catalog: target fields, priorities, and known header variants.

New synonyms go here and nowhere else. The matching algorithm never needs
to change when the vocabulary grows.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from cargomap.core.exceptions import CatalogError, UnknownFieldError
from cargomap.models.fields import FieldDefinition, FieldId


class FieldCatalog:
    """Immutable, priority-ordered collection of field definitions."""

    def __init__(self, definitions: Iterable[FieldDefinition]) -> None:
        declared = list(definitions)
        if not declared:
            raise CatalogError("A field catalog needs at least one field")
        by_id: dict[FieldId, FieldDefinition] = {}
        for definition in declared:
            if definition.id in by_id:
                raise CatalogError(f"Duplicate field {definition.id.value!r} in catalog")
            by_id[definition.id] = definition
        self._by_id = by_id
        self._declared = tuple(declared)
        # sorted() is stable: equal priorities keep declaration order
        self._ordered = tuple(sorted(declared, key=lambda d: -d.priority))

    def __len__(self) -> int:
        return len(self._declared)

    def __contains__(self, field: object) -> bool:
        return field in self._by_id

    def get(self, field: FieldId) -> FieldDefinition:
        try:
            return self._by_id[field]
        except KeyError:
            raise UnknownFieldError(str(field)) from None

    def variants_for(self, field: FieldId) -> tuple[str, ...]:
        return self.get(field).variants

    def all_fields(self) -> tuple[FieldDefinition, ...]:
        """Definitions by descending priority, ties in declaration order."""
        return self._ordered

    def required_fields(self) -> tuple[FieldId, ...]:
        return tuple(d.id for d in self._ordered if d.required)

    def recommended_fields(self) -> tuple[FieldId, ...]:
        return tuple(d.id for d in self._ordered if d.recommended)

    def with_variants(self, field: FieldId, extra: Sequence[str]) -> FieldCatalog:
        """Return a new catalog with extra variants appended to one field."""
        current = self.get(field)
        updated = current.model_copy(update={"variants": current.variants + tuple(extra)})
        return FieldCatalog(updated if d.id == field else d for d in self._declared)

    def restricted_to(self, fields: Iterable[FieldId]) -> FieldCatalog:
        """Return a new catalog holding only the given fields."""
        wanted = set(fields)
        missing = wanted - set(self._by_id)
        if missing:
            raise UnknownFieldError(", ".join(sorted(f.value for f in missing)))
        return FieldCatalog(d for d in self._declared if d.id in wanted)


# ---------------------------------------------------------------------------
# Default vocabulary (English / Spanish, vendor abbreviations)
# ---------------------------------------------------------------------------

DEFAULT_FIELDS: tuple[FieldDefinition, ...] = (
    FieldDefinition(
        id=FieldId.MASTER_WAYBILL,
        priority=98,
        label="Master air waybill",
        variants=(
            "mawb", "master", "master awb", "master air waybill", "master airway bill",
            "master waybill", "master bill", "master number", "master no",
            "mawb no", "mawb number", "awb master", "air waybill master",
            "main awb", "m awb", "awb principal",
            "guia master", "guía master", "guia maestra", "guía maestra",
            "numero master", "número master", "numero mawb", "número mawb",
        ),
    ),
    FieldDefinition(
        id=FieldId.TRACKING_CODE,
        priority=100,
        required=True,
        label="Tracking code",
        variants=(
            "tracking", "tracking number", "tracking no", "tracking id", "tracking#",
            "track", "track number", "track no",
            "awb", "awb number", "air waybill", "airway bill", "waybill", "waybill number",
            "hawb", "hawb number", "house awb", "house air waybill", "house bill",
            "shipment number", "shipment id", "package id", "parcel", "parcel number",
            "reference", "ref", "reference number", "ref no",
            "courier tracking", "carrier tracking", "local tracking", "local tracking provider",
            "label number", "barcode", "bar code",
            "amazon tracking", "amazon id", "amazon shipment", "order id", "order number",
            "usps tracking", "fedex tracking", "ups tracking", "dhl tracking",
            "guia", "guía", "numero guia", "número guía", "nro guia", "guia aerea",
            "guía aérea", "guia hija", "rastreo", "numero rastreo", "seguimiento",
            "numero seguimiento", "numero envio", "número envío", "numero paquete",
            "referencia", "etiqueta", "codigo barras", "código barras", "casillero",
        ),
    ),
    FieldDefinition(
        id=FieldId.CONSIGNEE_NAME,
        priority=95,
        required=True,
        label="Consignee name",
        variants=(
            "consignee", "consignee name", "consignee full name", "cnee", "cnee name",
            "receiver", "receiver name", "recipient", "recipient name",
            "ship to", "ship to name", "deliver to", "deliver to name",
            "customer", "customer name", "name", "full name", "buyer", "buyer name",
            "addressee", "contact name", "merchant cs name", "importer",
            "consignatario", "nombre consignatario", "destinatario", "nombre destinatario",
            "receptor", "cliente", "nombre cliente", "nombre", "nombre completo",
            "comprador", "beneficiario", "importador", "titular",
        ),
    ),
    FieldDefinition(
        id=FieldId.IDENTIFICATION,
        priority=90,
        label="Identification number",
        variants=(
            "id", "identification", "id number", "identity", "identity number",
            "passport", "passport number", "national id", "tax id", "personal id",
            "document", "document number", "doc no", "ssn",
            "cedula", "cédula", "cedula identidad", "numero cedula", "nro cedula",
            "identificacion", "identificación", "numero identificacion",
            "documento", "numero documento", "nro doc", "pasaporte", "numero pasaporte",
            "ruc", "nit", "dni", "ci", "cpf", "curp", "rfc", "cuit",
        ),
    ),
    FieldDefinition(
        id=FieldId.PHONE_NUMBER,
        priority=85,
        recommended=True,
        label="Phone number",
        variants=(
            "phone", "phone number", "phone no", "telephone", "telephone number", "tel",
            "mobile", "mobile number", "mobile phone", "cell", "cell phone", "cellphone",
            "contact phone", "contact number", "whatsapp",
            "telefono", "teléfono", "numero telefono", "número teléfono", "telefono cliente",
            "celular", "numero celular", "cel", "movil", "móvil", "fono",
        ),
    ),
    FieldDefinition(
        id=FieldId.DECLARED_VALUE,
        priority=85,
        required=True,
        label="Declared value",
        variants=(
            "value", "declared value", "declared value usd", "declared amount",
            "item value", "goods value", "total value", "package value",
            "amount", "total amount", "price", "unit price", "cost", "item cost",
            "customs value", "invoice value", "commercial value", "insured value",
            "merchandise value", "fob", "fob value", "cif", "cif value",
            "usd", "value usd", "usd value",
            "valor", "valor declarado", "valor producto", "valor total", "valor usd",
            "valor aduana", "valor aduanero", "valor factura", "valor fob", "valor cif",
            "valor mercancia", "valor mercancía", "valor comercial",
            "monto", "monto total", "precio", "precio unitario", "importe",
            "costo", "dolares", "dólares",
        ),
    ),
    FieldDefinition(
        id=FieldId.ADDRESS,
        priority=80,
        recommended=True,
        label="Address",
        variants=(
            "address", "street address", "delivery address", "shipping address",
            "ship to address", "consignee address", "recipient address",
            "mailing address", "full address", "street", "address line",
            "address 1", "address1", "addr",
            "direccion", "dirección", "direccion entrega", "dirección entrega",
            "direccion completa", "direccion destino", "dir", "domicilio", "calle",
            "ubicacion", "ubicación", "lugar entrega",
        ),
    ),
    FieldDefinition(
        id=FieldId.DESCRIPTION,
        priority=75,
        recommended=True,
        label="Description",
        variants=(
            "description", "desc", "product description", "item description",
            "goods description", "cargo description", "commodity description",
            "nature of goods", "content", "contents", "package contents",
            "item", "items", "item name", "product", "product name",
            "goods", "merchandise", "commodity", "detail", "details",
            "descripcion", "descripción", "descripcion producto", "descripcion mercancia",
            "contenido", "contenido paquete", "producto", "nombre producto",
            "articulo", "artículo", "mercancia", "mercancía", "mercaderia", "detalle",
        ),
    ),
    FieldDefinition(
        id=FieldId.WEIGHT,
        priority=70,
        label="Weight",
        variants=(
            "weight", "gross weight", "net weight", "actual weight", "chargeable weight",
            "total weight", "package weight", "weight kg", "weight lb", "gross wt", "wt",
            "kg", "kgs", "kilos", "kilogramos", "lb", "lbs", "pounds", "libras",
            "peso", "peso bruto", "peso neto", "peso real", "peso cobrable",
            "peso total", "peso kg", "peso lb",
        ),
    ),
    FieldDefinition(
        id=FieldId.VOLUME,
        priority=65,
        label="Volume",
        variants=(
            "volume", "vol", "cbm", "m3", "cubic meters", "volume cbm",
            "volumetric weight", "dimensional weight", "dim weight", "cube",
            "volumen", "peso volumetrico", "peso volumétrico", "peso dimensional",
            "metros cubicos",
        ),
    ),
    FieldDefinition(
        id=FieldId.ORIGIN_COUNTRY,
        priority=60,
        label="Origin country",
        variants=(
            "origin", "origin country", "country of origin", "country", "coo",
            "made in", "shipper country",
            "pais", "país", "pais origen", "país origen", "pais de origen",
            "origen", "pais procedencia",
        ),
    ),
    FieldDefinition(
        id=FieldId.PROVINCE,
        priority=55,
        label="Province",
        variants=(
            "province", "state", "region", "state province", "delivery state",
            "shipping state", "provincia", "estado", "región", "departamento", "depto",
        ),
    ),
    FieldDefinition(
        id=FieldId.CITY,
        priority=55,
        label="City",
        variants=(
            "city", "town", "municipality", "delivery city", "destination city",
            "ciudad", "municipio", "localidad", "ciudad destino", "poblacion",
            "población", "canton", "cantón",
        ),
    ),
    FieldDefinition(
        id=FieldId.DISTRICT,
        priority=50,
        label="District",
        variants=(
            "district", "sub district", "neighborhood", "area", "zone",
            "distrito", "corregimiento", "barrio", "sector", "zona",
        ),
    ),
)

DEFAULT_CATALOG = FieldCatalog(DEFAULT_FIELDS)
