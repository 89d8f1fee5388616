"""SchemaInferenceEngine: raw manifest columns in, SchemaMapping out."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Mapping, Sequence
from functools import lru_cache
from typing import Any, Optional

import structlog

from cargomap.catalog.field_catalog import DEFAULT_CATALOG, FieldCatalog
from cargomap.core.config import InferenceConfig
from cargomap.core.exceptions import InvalidColumnsError
from cargomap.core.protocols import IAssignmentStrategy
from cargomap.engine.assignment import GreedyAssignment
from cargomap.matching.content import (
    DECISIVE_SHAPES,
    DISTINCTIVE_SHAPES,
    has_content_evidence,
    score_content,
)
from cargomap.matching.normalizer import is_placeholder_header
from cargomap.matching.similarity import EXACT_SCORE, score_variants
from cargomap.models.fields import FieldDefinition, FieldId
from cargomap.models.schema_mapping import (
    AlternateCandidate,
    CandidateMatch,
    MatchBasis,
    RawColumn,
    SchemaMapping,
)

logger = structlog.get_logger(__name__)


def build_columns(
    headers: Sequence[Any],
    rows: Iterable[Sequence[Any]],
    sample_size: int = 10,
) -> list[RawColumn]:
    """Build RawColumns from a header row and data rows, keeping row order.

    Short rows are padded with empty cells; None becomes "".
    """
    samples: list[list[str]] = [[] for _ in headers]
    for taken, row in enumerate(rows):
        if taken >= sample_size:
            break
        for idx in range(len(headers)):
            cell = row[idx] if idx < len(row) else None
            samples[idx].append("" if cell is None else str(cell))
    return [RawColumn(header=h, sample=s) for h, s in zip(headers, samples)]


def coerce_columns(columns: Any) -> list[RawColumn]:
    if columns is None:
        raise InvalidColumnsError("columns must be a sequence of RawColumn, got None")
    if isinstance(columns, (str, bytes)) or not isinstance(columns, Iterable):
        raise InvalidColumnsError(f"columns must be a sequence of RawColumn, got {type(columns).__name__}")
    coerced: list[RawColumn] = []
    for idx, column in enumerate(columns):
        if isinstance(column, RawColumn):
            coerced.append(column)
        elif isinstance(column, Mapping):
            coerced.append(RawColumn.model_validate(column))
        else:
            raise InvalidColumnsError(
                f"column {idx} must be a RawColumn or mapping, got {type(column).__name__}"
            )
    return coerced


def reserve_headers(
    grid: Mapping[FieldId, Sequence[CandidateMatch]],
    threshold: float,
) -> dict[FieldId, list[CandidateMatch]]:
    """Drop candidates that another field has a stronger claim on.

    Rules, in order:

    * a header that exactly matches a variant of some field may only go to
      the fields that name it exactly;
    * a column whose content fits a decisive shape (master waybills) may only
      go to that field;
    * a header-less column accepted on content alone must fit exactly one
      field, so an unlabelled column of amounts stays unassigned.
    """
    exact: dict[str, set[FieldId]] = defaultdict(set)
    decisive: dict[str, set[FieldId]] = defaultdict(set)
    content_only: dict[str, set[FieldId]] = defaultdict(set)
    for field, matches in grid.items():
        for m in matches:
            if m.name_score >= EXACT_SCORE and m.qualifies(threshold):
                exact[m.header].add(field)
            if (
                field in DECISIVE_SHAPES
                and m.basis is not MatchBasis.NAME
                and m.content_score >= threshold
            ):
                decisive[m.header].add(field)
            if m.basis is MatchBasis.CONTENT and m.qualifies(threshold):
                content_only[m.header].add(field)

    def allowed(field: FieldId, m: CandidateMatch) -> bool:
        if m.header in exact:
            return field in exact[m.header]
        if m.header in decisive:
            return field in decisive[m.header]
        if m.basis is MatchBasis.CONTENT:
            return len(content_only[m.header]) == 1
        return True

    pruned = {field: [m for m in matches if allowed(field, m)] for field, matches in grid.items()}
    for header, fields in exact.items():
        logger.debug("header_reserved", header=header, fields=sorted(f.value for f in fields))
    return pruned


class SchemaInferenceEngine:
    """Scores every (column, field) pair and assigns headers to fields.

    Stateless between calls: the catalog, settings and strategy are fixed at
    construction, so one engine may serve concurrent callers.
    """

    def __init__(
        self,
        *,
        settings: InferenceConfig | None = None,
        catalog: FieldCatalog | None = None,
        strategy: IAssignmentStrategy | None = None,
    ) -> None:
        self._settings = settings or InferenceConfig()
        self._catalog = catalog or DEFAULT_CATALOG
        self._strategy = strategy or GreedyAssignment(max_alternates=self._settings.max_alternates)

    @property
    def catalog(self) -> FieldCatalog:
        return self._catalog

    @property
    def settings(self) -> InferenceConfig:
        return self._settings

    def score_pair(self, column: RawColumn, index: int, definition: FieldDefinition) -> CandidateMatch:
        """Blend name and content evidence for one column against one field."""
        cfg = self._settings
        sample = column.sample[: cfg.sample_size]
        content = score_content(sample, definition.id)
        evidence = has_content_evidence(sample, definition.id)

        if is_placeholder_header(column.header):
            name = 0.0
            if evidence and definition.id in DISTINCTIVE_SHAPES:
                final = cfg.content_weight * content
                basis = MatchBasis.CONTENT
            else:
                final = 0.0
                basis = MatchBasis.NAME
        else:
            name = score_variants(column.header, definition.variants, cfg.min_containment_length)
            if evidence:
                final = cfg.name_weight * name + cfg.content_weight * content
                basis = MatchBasis.COMBINED
            else:
                final = name
                basis = MatchBasis.NAME

        return CandidateMatch(
            header=column.header,
            field=definition.id,
            column_index=index,
            name_score=name,
            content_score=content,
            final_score=min(1.0, max(0.0, final)),
            basis=basis,
        )

    def score(self, columns: Sequence[RawColumn]) -> dict[FieldId, list[CandidateMatch]]:
        """Full score grid, field by field in priority order."""
        return {
            definition.id: [
                self.score_pair(column, idx, definition) for idx, column in enumerate(columns)
            ]
            for definition in self._catalog.all_fields()
        }

    def infer(self, columns: Sequence[RawColumn]) -> SchemaMapping:
        raw_columns = coerce_columns(columns)
        fields = self._catalog.all_fields()
        threshold = self._settings.acceptance_threshold
        grid = reserve_headers(self.score(raw_columns), threshold)
        result = self._strategy.assign(fields, grid, threshold)

        mapping = SchemaMapping()
        for field, match in result.accepted.items():
            mapping.assignments[field] = match.header
            mapping.confidence[field] = match.final_score
            mapping.column_indices[field] = match.column_index
            mapping.matches[field] = match
        for field, runners_up in result.alternates.items():
            mapping.alternates[field] = [
                AlternateCandidate(header=c.header, score=c.final_score) for c in runners_up
            ]
        mapping.unmatched_required = {
            d.id for d in fields if d.required and d.id not in mapping.assignments
        }

        logger.info(
            "schema_inferred",
            columns=len(raw_columns),
            assigned=len(mapping.assignments),
            unmatched_required=sorted(f.value for f in mapping.unmatched_required),
        )
        return mapping


@lru_cache(maxsize=1)
def default_engine() -> SchemaInferenceEngine:
    """Process-wide engine over the default catalog and settings."""
    return SchemaInferenceEngine()


def infer(columns: Sequence[RawColumn], engine: Optional[SchemaInferenceEngine] = None) -> SchemaMapping:
    return (engine or default_engine()).infer(columns)
