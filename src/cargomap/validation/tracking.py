"""House tracking checks: catch master waybills used as package tracking.

Duties, consignee and value analysis run per individual package, so a
column of master waybills in the tracking slot is a selection error.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from cargomap.catalog.carriers import CARRIER_PREFIXES, lookup_carrier
from cargomap.models.waybill import TrackingBatchReport, TrackingCheck, TrackingKind
from cargomap.validation.waybill import WAYBILL_PATTERN

MIN_LENGTH = 5
MAX_LENGTH = 50

_UNDASHED_MASTER = re.compile(r"^(\d{3})\d{8}$")
_DASHED_PREFIX = re.compile(r"^\d{3}-\d+$")

HOUSE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^TBA\d{12,}$", re.IGNORECASE),  # Amazon
    re.compile(r"^1Z[A-Z0-9]{16}$", re.IGNORECASE),  # UPS
    re.compile(r"^\d{10,22}$"),  # FedEx, DHL, USPS
    re.compile(r"^[A-Z]{2}\d{9}[A-Z]{2}$", re.IGNORECASE),  # postal S10
    re.compile(r"^[A-Z0-9]{8,30}$", re.IGNORECASE),  # local couriers
)


def is_master_waybill(value: str) -> bool:
    """Dashed IATA format, or 11 digits starting with a known carrier prefix."""
    text = value.strip().upper()
    if WAYBILL_PATTERN.match(text):
        return True
    undashed = _UNDASHED_MASTER.match(text)
    return bool(undashed and undashed.group(1) in CARRIER_PREFIXES)


def _carrier_name(value: str) -> str | None:
    carrier = lookup_carrier(value.strip().replace("-", "")[:3])
    return carrier.name if carrier else None


def check_tracking(value: str) -> TrackingCheck:
    text = (value or "").strip()
    check = TrackingCheck(value=text)

    if len(text) < MIN_LENGTH:
        check.valid = False
        check.errors.append("Tracking value is empty or too short")
        return check
    if len(text) > MAX_LENGTH:
        check.valid = False
        check.errors.append(f"Tracking value exceeds {MAX_LENGTH} characters")
        return check

    if is_master_waybill(text):
        check.valid = False
        check.kind = TrackingKind.MASTER
        check.carrier_name = _carrier_name(text)
        carrier = f" from {check.carrier_name}" if check.carrier_name else ""
        check.errors.append(
            f"{text!r} is a master air waybill{carrier}; use the individual package tracking code"
        )
        check.confidence = 0.95
        return check

    if re.fullmatch(r"\d{11}", text):
        check.possible_master = True
        check.confidence = 0.70
        check.warnings.append(f"{text!r} has the 11-digit shape of an undashed master waybill")
    elif _DASHED_PREFIX.match(text) and len(text) >= 10:
        check.possible_master = True
        check.confidence = 0.90
        check.warnings.append(f"{text!r} has the XXX-XXXXXXXX shape of a master waybill")

    if any(p.match(text) for p in HOUSE_PATTERNS):
        check.kind = TrackingKind.HOUSE
        check.confidence = max(check.confidence, 0.85)
    elif not check.possible_master:
        check.confidence = 0.50
        check.warnings.append(f"{text!r} does not match any known tracking format")

    return check


def check_tracking_batch(values: Iterable[str]) -> TrackingBatchReport:
    """Check a column of tracking values for misuse and duplicates."""
    report = TrackingBatchReport()
    seen: set[str] = set()
    duplicates: dict[str, None] = {}
    masters: set[str] = set()
    master_rows = 0

    for value in values:
        report.total += 1
        key = (value or "").strip().upper()
        if key in seen:
            duplicates[key] = None
        seen.add(key)

        check = check_tracking(value)
        if check.valid:
            report.valid_count += 1
        else:
            report.invalid_count += 1
            report.errors.extend(e for e in check.errors if e not in report.errors)
        if check.kind is TrackingKind.MASTER:
            masters.add(key)
            master_rows += 1
        report.warnings.extend(w for w in check.warnings if w not in report.warnings)

    report.duplicates = list(duplicates)
    report.masters_detected = len(masters)

    if masters:
        report.errors.insert(
            0,
            f"{len(masters)} master air waybill(s) found where individual tracking codes are expected",
        )
    if report.duplicates_warning:
        report.warnings.append(report.duplicates_warning)
    if report.total > 1 and len(masters) == 1 and master_rows == report.total:
        report.errors.append(
            "Every row carries the same master waybill; the master column was likely selected as tracking"
        )
    return report
