"""Tests for MappingReporter and the analyze() entry point."""

from __future__ import annotations

import pytest

from cargomap import analyze
from cargomap.core.config import ReportConfig
from cargomap.engine.inference import SchemaInferenceEngine, build_columns
from cargomap.engine.reporter import MappingReporter
from cargomap.models.fields import FieldId
from cargomap.models.schema_mapping import ConfidenceLevel, RawColumn, SchemaMapping


@pytest.fixture
def reporter() -> MappingReporter:
    return MappingReporter()


@pytest.fixture
def engine() -> SchemaInferenceEngine:
    return SchemaInferenceEngine()


class TestLevels:
    @pytest.mark.parametrize(
        "score, level",
        [
            (1.0, ConfidenceLevel.HIGH),
            (0.85, ConfidenceLevel.HIGH),
            (0.84, ConfidenceLevel.MEDIUM),
            (0.70, ConfidenceLevel.MEDIUM),
            (0.69, ConfidenceLevel.LOW),
            (0.0, ConfidenceLevel.LOW),
        ],
    )
    def test_level_for(self, reporter, score, level):
        assert reporter.level_for(score) is level

    def test_custom_bands(self):
        reporter = MappingReporter(settings=ReportConfig(high_confidence=0.95))
        assert reporter.level_for(0.9) is ConfidenceLevel.MEDIUM


class TestOverallConfidence:
    def test_empty_mapping(self, reporter):
        assert reporter.overall_confidence(SchemaMapping()) == 0.0

    def test_weighted_average(self, reporter):
        mapping = SchemaMapping(
            confidence={
                FieldId.TRACKING_CODE: 1.0,
                FieldId.CONSIGNEE_NAME: 1.0,
                FieldId.DECLARED_VALUE: 1.0,
                FieldId.WEIGHT: 1.0,
            }
        )
        assert reporter.overall_confidence(mapping) == pytest.approx(4 / 7)


class TestBuild:
    def test_exact_headers(self, engine, reporter):
        columns = [
            RawColumn(header="Tracking Number"),
            RawColumn(header="Consignee Name"),
            RawColumn(header="Declared Value (USD)"),
        ]
        report = reporter.build(engine.infer(columns), columns)

        assert set(report.levels.values()) == {ConfidenceLevel.HIGH}
        assert report.unmatched_recommended == {
            FieldId.PHONE_NUMBER,
            FieldId.ADDRESS,
            FieldId.DESCRIPTION,
        }
        assert "Recommended field 'Phone number' was not detected" in report.warnings
        assert any("No master air waybill" in w for w in report.warnings)
        assert report.master_waybill is None
        assert report.tracking is None
        assert not report.needs_review

    def test_missing_required_needs_review(self, engine, reporter):
        columns = [RawColumn(header="Foo123", sample=["xk1"])]
        report = reporter.build(engine.infer(columns), columns)
        assert "Required field 'Tracking code' was not detected" in report.warnings
        assert report.needs_review

    def test_placeholder_column_is_low_confidence(self, engine, reporter):
        columns = [RawColumn(header="Col1", sample=["230-87654321"])]
        report = reporter.build(engine.infer(columns), columns)
        assert report.levels[FieldId.MASTER_WAYBILL] is ConfidenceLevel.LOW
        assert any(w.startswith("Low confidence for 'Master air waybill'") for w in report.warnings)
        assert report.master_waybill.carrier_name == "Avianca Cargo"
        assert report.needs_review

    def test_unknown_carrier_warning(self, engine, reporter):
        columns = [RawColumn(header="MAWB", sample=["999-12345678"])]
        report = reporter.build(engine.infer(columns), columns)
        assert report.master_waybill.valid
        assert any("999" in w and "known carrier" in w for w in report.warnings)

    def test_master_waybills_in_tracking_column(self, engine, reporter):
        columns = [
            RawColumn(header="Tracking", sample=["230-87654321", "230-87654321"]),
            RawColumn(header="Consignee Name"),
            RawColumn(header="Declared Value"),
        ]
        mapping = engine.infer(columns)
        report = reporter.build(mapping, columns)

        assert mapping.assignments[FieldId.TRACKING_CODE] == "Tracking"
        assert report.levels[FieldId.TRACKING_CODE] is ConfidenceLevel.MEDIUM
        assert report.tracking.masters_detected == 1
        assert any("Every row carries the same master waybill" in w for w in report.warnings)
        assert any("duplicated" in w for w in report.warnings)
        assert report.master_waybill.normalized == "230-87654321"

    def test_duplicate_tracking_values_warned_once(self, engine, reporter):
        columns = [
            RawColumn(
                header="Tracking",
                sample=["TBA123456789012", "TBA123456789012", "AB#12-99/X"],
            ),
        ]
        report = reporter.build(engine.infer(columns), columns)

        assert report.tracking.duplicates == ["TBA123456789012"]
        assert report.warnings.count(report.tracking.duplicates_warning) == 1
        assert not any("known tracking format" in w for w in report.warnings)


class TestAnalyze:
    def test_clean_spanish_manifest(self):
        headers = ["MAWB", "Guia", "Destinatario", "Direccion", "Descripcion", "Valor", "Telefono"]
        rows = [
            [
                "230-87654321", "TBA123456789012", "Maria Perez",
                "Calle 50, Edificio Global, Piso 3", "Audifonos inalambricos Bluetooth",
                "45.99", "6123-4567",
            ],
            [
                "230-87654321", "TBA123456789013", "Jose Rodriguez",
                "Via Espana, Casa 12, San Francisco", "Zapatos deportivos talla 42",
                "120.00", "6987-6543",
            ],
        ]
        report = analyze(build_columns(headers, rows))

        assert report.mapping.is_complete
        assert report.overall_confidence == pytest.approx(1.0)
        assert report.master_waybill.carrier_name == "Avianca Cargo"
        assert report.tracking.valid_count == 2
        assert report.warnings == []
        assert not report.needs_review

    def test_accepts_generators(self):
        report = analyze(RawColumn(header=h) for h in ["Tracking Number", "Consignee Name"])
        assert set(report.mapping.assignments) == {FieldId.TRACKING_CODE, FieldId.CONSIGNEE_NAME}
