"""Greedy, priority-ordered one-to-one assignment of headers to fields."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import structlog

from cargomap.models.fields import FieldDefinition, FieldId
from cargomap.models.schema_mapping import AssignmentResult, CandidateMatch

logger = structlog.get_logger(__name__)


def _best_per_header(candidates: Sequence[CandidateMatch]) -> list[CandidateMatch]:
    """Collapse duplicate headers to their best column (leftmost on ties)."""
    best: dict[str, CandidateMatch] = {}
    for candidate in sorted(candidates, key=lambda c: c.column_index):
        current = best.get(candidate.header)
        if current is None or candidate.final_score > current.final_score:
            best[candidate.header] = candidate
    return list(best.values())


class GreedyAssignment:
    """IAssignmentStrategy that walks fields by priority and never backtracks.

    Each field claims the best unclaimed header clearing the threshold; the
    header then leaves the pool. Fields are expected in priority order, so
    a header that ties across fields goes to the earlier one.
    """

    def __init__(self, max_alternates: int = 3) -> None:
        self._max_alternates = max_alternates

    def assign(
        self,
        fields: Sequence[FieldDefinition],
        candidates: Mapping[FieldId, Sequence[CandidateMatch]],
        threshold: float,
    ) -> AssignmentResult:
        result = AssignmentResult()
        claimed: set[str] = set()

        for definition in fields:
            pool = [c for c in candidates.get(definition.id, ()) if c.header not in claimed]
            qualifying = [c for c in _best_per_header(pool) if c.qualifies(threshold)]
            if not qualifying:
                logger.debug("field_unassigned", field=definition.id.value)
                continue

            # stable sort keeps column order among equal scores
            qualifying.sort(key=lambda c: -c.final_score)
            winner = qualifying[0]
            runners_up = qualifying[1:]
            claimed.add(winner.header)
            result.accepted[definition.id] = winner
            if runners_up and self._max_alternates:
                result.alternates[definition.id] = runners_up[: self._max_alternates]
            logger.debug(
                "field_assigned",
                field=definition.id.value,
                header=winner.header,
                score=round(winner.final_score, 4),
                basis=winner.basis.value,
            )

        return result
