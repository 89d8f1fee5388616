"""Turns a SchemaMapping into a reviewable MappingReport."""

from __future__ import annotations

from collections.abc import Sequence

from cargomap.catalog.carriers import UNKNOWN_CARRIER
from cargomap.catalog.field_catalog import DEFAULT_CATALOG, FieldCatalog
from cargomap.core.config import ReportConfig
from cargomap.models.fields import FieldId
from cargomap.models.schema_mapping import (
    ConfidenceLevel,
    MappingReport,
    RawColumn,
    SchemaMapping,
)
from cargomap.validation.tracking import check_tracking_batch
from cargomap.validation.waybill import locate_master_waybill

# Weights for the manifest-level confidence; absent fields count as 0.
CRITICAL_WEIGHT = 2.0
IMPORTANT_WEIGHT = 1.0
OVERALL_WEIGHTS: dict[FieldId, float] = {
    FieldId.TRACKING_CODE: CRITICAL_WEIGHT,
    FieldId.DESCRIPTION: CRITICAL_WEIGHT,
    FieldId.CONSIGNEE_NAME: IMPORTANT_WEIGHT,
    FieldId.ADDRESS: IMPORTANT_WEIGHT,
    FieldId.DECLARED_VALUE: IMPORTANT_WEIGHT,
}


class MappingReporter:
    """Assembles warnings, levels and waybill findings around a mapping."""

    def __init__(
        self,
        *,
        settings: ReportConfig | None = None,
        catalog: FieldCatalog | None = None,
    ) -> None:
        self._settings = settings or ReportConfig()
        self._catalog = catalog or DEFAULT_CATALOG

    def level_for(self, score: float) -> ConfidenceLevel:
        if score >= self._settings.high_confidence:
            return ConfidenceLevel.HIGH
        if score >= self._settings.medium_confidence:
            return ConfidenceLevel.MEDIUM
        return ConfidenceLevel.LOW

    def overall_confidence(self, mapping: SchemaMapping) -> float:
        weights = {f: w for f, w in OVERALL_WEIGHTS.items() if f in self._catalog}
        total = sum(weights.values())
        if not total:
            return 0.0
        return sum(mapping.confidence.get(f, 0.0) * w for f, w in weights.items()) / total

    def _label(self, field: FieldId) -> str:
        return self._catalog.get(field).display_name if field in self._catalog else field.value

    def build(self, mapping: SchemaMapping, columns: Sequence[RawColumn]) -> MappingReport:
        report = MappingReport(mapping=mapping)
        report.levels = {f: self.level_for(s) for f, s in mapping.confidence.items()}
        report.overall_confidence = self.overall_confidence(mapping)
        report.unmatched_recommended = {
            f for f in self._catalog.recommended_fields() if f not in mapping.assignments
        }

        for field in self._catalog.required_fields():
            if field in mapping.unmatched_required:
                report.warnings.append(f"Required field '{self._label(field)}' was not detected")
        for field in self._catalog.recommended_fields():
            if field in report.unmatched_recommended:
                report.warnings.append(f"Recommended field '{self._label(field)}' was not detected")
        for definition in self._catalog.all_fields():
            if report.levels.get(definition.id) is ConfidenceLevel.LOW:
                report.warnings.append(
                    f"Low confidence for '{self._label(definition.id)}': column "
                    f"'{mapping.assignments[definition.id]}' scored "
                    f"{mapping.confidence[definition.id]:.0%}, please confirm"
                )

        report.master_waybill = locate_master_waybill(
            columns, mapping, scan_rows=self._settings.waybill_scan_rows
        )
        if report.master_waybill is None:
            report.warnings.append("No master air waybill in IATA format (XXX-XXXXXXXX) was found")
        elif report.master_waybill.carrier_name == UNKNOWN_CARRIER:
            report.warnings.append(
                f"Master waybill prefix {report.master_waybill.carrier_prefix} "
                "does not match a known carrier"
            )

        tracking_idx = mapping.column_indices.get(FieldId.TRACKING_CODE)
        if tracking_idx is not None:
            values = [v for v in columns[tracking_idx].sample if v.strip()]
            if values:
                report.tracking = check_tracking_batch(values)
                report.warnings.extend(report.tracking.errors)
                if report.tracking.duplicates_warning:
                    report.warnings.append(report.tracking.duplicates_warning)

        report.needs_review = bool(mapping.unmatched_required) or any(
            level is ConfidenceLevel.LOW for level in report.levels.values()
        )
        return report
