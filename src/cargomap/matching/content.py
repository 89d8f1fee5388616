"""Content classifier: does a column's sample look like a given field?"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Optional

from cargomap.core.types import CellValue, Score, ShapePredicate
from cargomap.matching.normalizer import normalize_value
from cargomap.models.fields import FieldId

MASTER_WAYBILL_PATTERN = re.compile(r"^\d{3}-\d{8}$")
HOUSE_TRACKING_PATTERN = re.compile(r"^[A-Z0-9]{8,30}$", re.IGNORECASE)

_CURRENCY_AND_UNITS = re.compile(
    r"(?i)(us\$|b/\.|[$€£¥]|(?<![a-z])(?:usd|eur|pab|kgs?|lbs?|kilos?|libras?|grs?|g)(?![a-z])|\s+)"
)
_PLAIN_NUMBER = re.compile(r"^\d+(?:\.\d+)?$")


def parse_amount(value: str) -> Optional[float]:
    """Parse a money or weight cell into a non-negative float.

    Currency symbols, unit suffixes and thousands separators are ignored;
    a lone comma followed by one or two digits is read as a decimal comma.
    Negative or non-numeric values give None.
    """
    text = _CURRENCY_AND_UNITS.sub("", value or "")
    if "," in text and "." in text:
        text = text.replace(",", "")
    elif re.fullmatch(r"\d+,\d{1,2}", text):
        text = text.replace(",", ".")
    else:
        text = text.replace(",", "")
    if not _PLAIN_NUMBER.match(text):
        return None
    return float(text)


def _is_master_waybill(value: str) -> bool:
    return bool(MASTER_WAYBILL_PATTERN.match(value))


def _is_house_tracking(value: str) -> bool:
    return bool(HOUSE_TRACKING_PATTERN.match(value))


def _is_amount(value: str) -> bool:
    return parse_amount(value) is not None


def _is_long_text(value: str) -> bool:
    return len(value) > 10


def _is_person_name(value: str) -> bool:
    return len(value) >= 5 and any(ch.isalpha() for ch in value)


SHAPE_PREDICATES: Mapping[FieldId, ShapePredicate] = MappingProxyType({
    FieldId.MASTER_WAYBILL: _is_master_waybill,
    FieldId.TRACKING_CODE: _is_house_tracking,
    FieldId.WEIGHT: _is_amount,
    FieldId.DECLARED_VALUE: _is_amount,
    FieldId.DESCRIPTION: _is_long_text,
    FieldId.ADDRESS: _is_long_text,
    FieldId.CONSIGNEE_NAME: _is_person_name,
})

# Shapes specific enough to place a header-less column on content alone.
DISTINCTIVE_SHAPES: frozenset[FieldId] = frozenset({
    FieldId.MASTER_WAYBILL,
    FieldId.TRACKING_CODE,
    FieldId.WEIGHT,
    FieldId.DECLARED_VALUE,
})

# Shapes that identify the field outright: a column matching one belongs to
# that field unless another field names its header exactly.
DECISIVE_SHAPES: frozenset[FieldId] = frozenset({FieldId.MASTER_WAYBILL})


def _non_empty(sample: Iterable[CellValue]) -> list[str]:
    return [v for v in (normalize_value(cell) for cell in sample) if v]


def has_content_evidence(sample: Iterable[CellValue], field: FieldId) -> bool:
    """True when the classifier has an opinion: a shape and at least one value."""
    return field in SHAPE_PREDICATES and bool(_non_empty(sample))


def score_content(sample: Iterable[CellValue], field: FieldId) -> Score:
    """Fraction of non-empty sampled values matching the field's shape.

    Fields without a reliable shape, and empty samples, score 0.
    """
    predicate = SHAPE_PREDICATES.get(field)
    if predicate is None:
        return 0.0
    values = _non_empty(sample)
    if not values:
        return 0.0
    return sum(1 for v in values if predicate(v)) / len(values)
