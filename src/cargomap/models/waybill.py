"""Air waybill and house tracking validation results."""

from __future__ import annotations

from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, Field


class CarrierInfo(BaseModel):
    """Airline resolved from a 3-digit IATA prefix."""

    model_config = {"frozen": True}

    name: str
    code: Optional[str] = None  # IATA 2-character airline designator


class WaybillRecord(BaseModel):
    """Structural check of one master air waybill candidate."""

    raw: str
    valid: bool = False
    normalized: Optional[str] = None
    carrier_prefix: Optional[str] = None
    carrier_name: Optional[str] = None
    carrier_code: Optional[str] = None


class TrackingKind(StrEnum):
    HOUSE = "HOUSE"
    MASTER = "MASTER"
    UNKNOWN = "UNKNOWN"


class TrackingCheck(BaseModel):
    """Whether a value is usable as an individual package tracking code."""

    value: str
    valid: bool = True
    kind: TrackingKind = TrackingKind.UNKNOWN
    possible_master: bool = False
    carrier_name: Optional[str] = None
    confidence: float = 0.0
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class TrackingBatchReport(BaseModel):
    """Aggregate tracking check over a column of values."""

    total: int = 0
    valid_count: int = 0
    invalid_count: int = 0
    masters_detected: int = 0
    duplicates: list[str] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    @property
    def duplicates_warning(self) -> Optional[str]:
        if not self.duplicates:
            return None
        return (
            f"{len(self.duplicates)} duplicated tracking value(s); each package needs its own code"
        )
