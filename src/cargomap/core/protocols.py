"""Protocol interfaces for swappable engine parts.

Structural typing, no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from cargomap.models.fields import FieldDefinition, FieldId
    from cargomap.models.schema_mapping import AssignmentResult, CandidateMatch


# ---------------------------------------------------------------------------
# Assignment
# ---------------------------------------------------------------------------

@runtime_checkable
class IAssignmentStrategy(Protocol):
    """Turns a scored (field x column) grid into a one-to-one assignment."""

    def assign(
        self,
        fields: Sequence[FieldDefinition],
        candidates: Mapping[FieldId, Sequence[CandidateMatch]],
        threshold: float,
    ) -> AssignmentResult: ...
