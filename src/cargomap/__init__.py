"""cargomap: schema inference for heterogeneous air-cargo manifests.

Maps raw spreadsheet headers (English/Spanish, abbreviated, vendor-specific)
to a fixed set of semantic fields with explainable confidence scores, and
validates master air waybills against the IATA carrier prefix table.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from cargomap.catalog import DEFAULT_CATALOG, FieldCatalog
from cargomap.core.exceptions import CargoMapError, InvalidColumnsError
from cargomap.engine.inference import (
    SchemaInferenceEngine,
    build_columns,
    coerce_columns,
    default_engine,
    infer,
)
from cargomap.engine.reporter import MappingReporter
from cargomap.models.fields import FieldDefinition, FieldId
from cargomap.models.schema_mapping import MappingReport, RawColumn, SchemaMapping
from cargomap.models.waybill import WaybillRecord
from cargomap.validation.waybill import validate_waybill

__version__ = "0.1.0"


def analyze(
    columns: Sequence[RawColumn],
    engine: Optional[SchemaInferenceEngine] = None,
    reporter: Optional[MappingReporter] = None,
) -> MappingReport:
    """Infer the schema of a manifest and wrap it in a review report."""
    raw_columns = coerce_columns(columns)
    engine = engine or default_engine()
    mapping = engine.infer(raw_columns)
    reporter = reporter or MappingReporter(catalog=engine.catalog)
    return reporter.build(mapping, raw_columns)


__all__ = [
    "CargoMapError",
    "DEFAULT_CATALOG",
    "FieldCatalog",
    "FieldDefinition",
    "FieldId",
    "InvalidColumnsError",
    "MappingReport",
    "MappingReporter",
    "RawColumn",
    "SchemaInferenceEngine",
    "SchemaMapping",
    "WaybillRecord",
    "analyze",
    "build_columns",
    "infer",
    "validate_waybill",
]
