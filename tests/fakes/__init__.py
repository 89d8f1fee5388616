"""Shared test doubles: small catalogs and a recording assignment strategy."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from cargomap.catalog.field_catalog import FieldCatalog
from cargomap.engine.assignment import GreedyAssignment
from cargomap.models.fields import FieldDefinition, FieldId
from cargomap.models.schema_mapping import AssignmentResult, CandidateMatch


def tie_catalog(
    variant: str = "referencia",
    tracking_priority: float = 100,
    description_priority: float = 75,
) -> FieldCatalog:
    """TrackingCode and Description sharing one variant, so any header ties."""
    return FieldCatalog([
        FieldDefinition(
            id=FieldId.DESCRIPTION,
            priority=description_priority,
            variants=(variant,),
        ),
        FieldDefinition(
            id=FieldId.TRACKING_CODE,
            priority=tracking_priority,
            variants=(variant,),
            required=True,
        ),
    ])


class RecordingStrategy:
    """IAssignmentStrategy that delegates to GreedyAssignment and keeps its inputs."""

    def __init__(self) -> None:
        self.calls: list[tuple[list[FieldId], float]] = []
        self._inner = GreedyAssignment()

    def assign(
        self,
        fields: Sequence[FieldDefinition],
        candidates: Mapping[FieldId, Sequence[CandidateMatch]],
        threshold: float,
    ) -> AssignmentResult:
        self.calls.append(([d.id for d in fields], threshold))
        return self._inner.assign(fields, candidates, threshold)


__all__ = ["RecordingStrategy", "tie_catalog"]
