"""Master air waybill validator: IATA format plus carrier resolution.

Independent of schema inference; works on a single candidate string.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any, Optional

import structlog

from cargomap.catalog.carriers import UNKNOWN_CARRIER, lookup_carrier
from cargomap.models.fields import FieldId
from cargomap.models.schema_mapping import RawColumn, SchemaMapping
from cargomap.models.waybill import WaybillRecord

logger = structlog.get_logger(__name__)

WAYBILL_PATTERN = re.compile(r"^(\d{3})-(\d{8})$")


def validate_waybill(raw: Any) -> WaybillRecord:
    """Validate ``XXX-XXXXXXXX`` and resolve the carrier from its prefix.

    An unknown prefix is still a valid waybill ("Unknown Carrier"). Never
    raises; anything that does not match is returned with ``valid=False``.
    """
    text = "" if raw is None else str(raw)
    match = WAYBILL_PATTERN.match(text.strip())
    if match is None:
        return WaybillRecord(raw=text)

    prefix = match.group(1)
    carrier = lookup_carrier(prefix)
    return WaybillRecord(
        raw=text,
        valid=True,
        normalized=match.group(0),
        carrier_prefix=prefix,
        carrier_name=carrier.name if carrier else UNKNOWN_CARRIER,
        carrier_code=carrier.code if carrier else None,
    )


def locate_master_waybill(
    columns: Sequence[RawColumn],
    mapping: Optional[SchemaMapping] = None,
    scan_rows: int = 5,
) -> Optional[WaybillRecord]:
    """Find the manifest's master waybill.

    Looks at the column mapped to MasterWaybill first, then falls back to
    scanning every cell of the first ``scan_rows`` sample rows.
    """
    if mapping is not None and FieldId.MASTER_WAYBILL in mapping.column_indices:
        column = columns[mapping.column_indices[FieldId.MASTER_WAYBILL]]
        first = next((cell for cell in column.sample if cell.strip()), None)
        if first is not None:
            record = validate_waybill(first)
            if record.valid:
                return record

    depth = max((len(c.sample) for c in columns), default=0)
    for row in range(min(scan_rows, depth)):
        for column in columns:
            if row >= len(column.sample):
                continue
            record = validate_waybill(column.sample[row])
            if record.valid:
                logger.info("waybill_found_by_scan", header=column.header, row=row)
                return record

    logger.debug("waybill_not_found", columns=len(columns))
    return None
