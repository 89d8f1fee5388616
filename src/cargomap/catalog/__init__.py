"""Static lookup tables: the field catalog and the carrier prefix table."""

from __future__ import annotations

from cargomap.catalog.carriers import CARRIER_PREFIXES, UNKNOWN_CARRIER, lookup_carrier
from cargomap.catalog.field_catalog import DEFAULT_CATALOG, DEFAULT_FIELDS, FieldCatalog

__all__ = [
    "CARRIER_PREFIXES",
    "DEFAULT_CATALOG",
    "DEFAULT_FIELDS",
    "FieldCatalog",
    "UNKNOWN_CARRIER",
    "lookup_carrier",
]
