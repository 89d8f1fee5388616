"""Tests for the name similarity scorer."""

from __future__ import annotations

import pytest

from cargomap.catalog.field_catalog import DEFAULT_CATALOG
from cargomap.matching.similarity import (
    CONTAINMENT_SCORE,
    levenshtein,
    score_name,
    score_variants,
    similarity,
)
from cargomap.models.fields import FieldId


class TestLevenshtein:
    def test_classic_example(self):
        assert levenshtein("kitten", "sitting") == 3

    def test_empty_sides(self):
        assert levenshtein("", "abc") == 3
        assert levenshtein("abc", "") == 3
        assert levenshtein("", "") == 0

    def test_symmetric(self):
        assert levenshtein("peso", "pesos") == levenshtein("pesos", "peso") == 1

    def test_long_headers_stay_bounded(self):
        a = "x" * 99
        b = "y" * 99
        assert levenshtein(a, b) == 99


class TestSimilarity:
    def test_both_empty_is_zero(self):
        assert similarity("", "") == 0.0

    def test_one_typo(self):
        assert similarity("trackng", "tracking") == pytest.approx(1 - 1 / 8)


class TestScoreVariants:
    def test_exact_after_normalization(self):
        assert score_variants("Número de Guía", ["numero de guia"]) == 1.0

    def test_containment(self):
        assert score_variants("Consignee Name Full", ["consignee"]) == CONTAINMENT_SCORE

    def test_reverse_containment(self):
        assert score_variants("Consig", ["consignee"]) == CONTAINMENT_SCORE

    def test_short_variant_does_not_use_containment(self):
        assert score_variants("Unit Price", ["nit"]) == pytest.approx(1 - 6 / 9)

    def test_short_variant_matches_whole_word(self):
        assert score_variants("RUC Cliente", ["ruc"]) == CONTAINMENT_SCORE
        assert score_name("USD Amt", FieldId.DECLARED_VALUE) == CONTAINMENT_SCORE

    def test_short_variant_not_inside_a_word(self):
        assert score_variants("Direccion", ["ci", "id"]) == pytest.approx(2 / 9)

    def test_containment_minimum_is_configurable(self):
        assert score_variants("Unit Price", ["nit"], min_containment=3) == CONTAINMENT_SCORE

    def test_fuzzy_fallback(self):
        assert score_variants("Trackng", ["tracking"]) == pytest.approx(0.875)

    def test_takes_best_variant(self):
        assert score_variants("Peso", ["weight", "peso"]) == 1.0

    def test_empty_header_scores_zero(self):
        assert score_variants("", ["tracking", "awb"]) == 0.0

    def test_no_variants(self):
        assert score_variants("anything", []) == 0.0


class TestScoreName:
    def test_default_catalog_exact(self):
        assert score_name("Tracking Number", FieldId.TRACKING_CODE) == 1.0
        assert score_name("Peso Bruto", FieldId.WEIGHT) == 1.0

    @pytest.mark.parametrize("header", ["Peso Volumétrico", "N° Guía", "x", "Col. 9", "!!!", "Zz-Top"])
    def test_identity_when_header_is_a_variant(self, header):
        catalog = DEFAULT_CATALOG.with_variants(FieldId.DISTRICT, [header])
        assert score_name(header, FieldId.DISTRICT, catalog) == 1.0

    def test_bounded(self):
        for definition in DEFAULT_CATALOG.all_fields():
            for header in ["", "Foo123", "MAWB", "Dirección de entrega", "?" * 50]:
                assert 0.0 <= score_name(header, definition.id) <= 1.0
