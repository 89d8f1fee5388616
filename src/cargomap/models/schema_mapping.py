"""Inputs and outputs of manifest schema inference."""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from cargomap.core.types import Header
from cargomap.models.fields import FieldId
from cargomap.models.waybill import TrackingBatchReport, WaybillRecord


class RawColumn(BaseModel):
    """One uploaded spreadsheet column: its header and a few sampled cells."""

    model_config = {"frozen": True}

    header: str = ""
    sample: tuple[str, ...] = Field(default_factory=tuple)

    @field_validator("header", mode="before")
    @classmethod
    def _coerce_header(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("sample", mode="before")
    @classmethod
    def _coerce_sample(cls, value: Any) -> tuple[str, ...]:
        if value is None:
            return ()
        if isinstance(value, str):
            return (value,)
        return tuple("" if cell is None else str(cell) for cell in value)


class MatchBasis(StrEnum):
    NAME = "NAME"  # content abstained
    CONTENT = "CONTENT"  # placeholder header, content only
    COMBINED = "COMBINED"


class CandidateMatch(BaseModel):
    """Score of one (column, field) pair. Never persisted."""

    model_config = {"frozen": True}

    header: str
    field: FieldId
    column_index: int
    name_score: float = 0.0
    content_score: float = 0.0
    final_score: float = 0.0
    basis: MatchBasis = MatchBasis.NAME

    def qualifies(self, threshold: float) -> bool:
        """Whether this pair clears the acceptance threshold.

        Placeholder headers are judged on their content score alone.
        """
        if self.basis is MatchBasis.CONTENT:
            return self.content_score >= threshold
        return self.final_score >= threshold


class AlternateCandidate(BaseModel):
    """A runner-up header for an assigned field."""

    model_config = {"frozen": True}

    header: str
    score: float


class AssignmentResult(BaseModel):
    """Raw output of an assignment strategy."""

    accepted: dict[FieldId, CandidateMatch] = Field(default_factory=dict)
    alternates: dict[FieldId, list[CandidateMatch]] = Field(default_factory=dict)


class SchemaMapping(BaseModel):
    """Confidence-scored mapping from raw headers to semantic fields."""

    assignments: dict[FieldId, str] = Field(default_factory=dict)
    confidence: dict[FieldId, float] = Field(default_factory=dict)
    alternates: dict[FieldId, list[AlternateCandidate]] = Field(default_factory=dict)
    unmatched_required: set[FieldId] = Field(default_factory=set)
    column_indices: dict[FieldId, int] = Field(default_factory=dict)
    matches: dict[FieldId, CandidateMatch] = Field(default_factory=dict)

    def header_for(self, field: FieldId) -> Optional[Header]:
        return self.assignments.get(field)

    def field_for(self, header: Header) -> Optional[FieldId]:
        for field, assigned in self.assignments.items():
            if assigned == header:
                return field
        return None

    @property
    def is_complete(self) -> bool:
        """True when every required field was matched."""
        return not self.unmatched_required


class ConfidenceLevel(StrEnum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class MappingReport(BaseModel):
    """Mapping plus everything a reviewer needs to accept or override it."""

    mapping: SchemaMapping
    levels: dict[FieldId, ConfidenceLevel] = Field(default_factory=dict)
    overall_confidence: float = 0.0
    unmatched_recommended: set[FieldId] = Field(default_factory=set)
    master_waybill: Optional[WaybillRecord] = None
    tracking: Optional[TrackingBatchReport] = None
    warnings: list[str] = Field(default_factory=list)
    needs_review: bool = False
