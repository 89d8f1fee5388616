"""Tests for master air waybill validation and location."""

from __future__ import annotations

import pytest

from cargomap.catalog.carriers import UNKNOWN_CARRIER, lookup_carrier
from cargomap.models.fields import FieldId
from cargomap.models.schema_mapping import RawColumn, SchemaMapping
from cargomap.validation.waybill import locate_master_waybill, validate_waybill


class TestValidateWaybill:
    def test_known_carrier(self):
        record = validate_waybill("230-87654321")
        assert record.valid
        assert record.normalized == "230-87654321"
        assert record.carrier_prefix == "230"
        assert record.carrier_name == "Avianca Cargo"
        assert record.carrier_code == "AV"

    def test_unknown_prefix_is_still_valid(self):
        record = validate_waybill("999-12345678")
        assert record.valid
        assert record.carrier_name == UNKNOWN_CARRIER
        assert record.carrier_code is None

    def test_surrounding_whitespace(self):
        record = validate_waybill("  172-11112222 ")
        assert record.valid
        assert record.normalized == "172-11112222"
        assert record.raw == "  172-11112222 "
        assert record.carrier_name == "Copa Airlines"

    @pytest.mark.parametrize(
        "raw",
        ["AB-1234", "", "23087654321", "230-8765432", "230-876543210", "230 87654321", "2300-8765432"],
    )
    def test_invalid_formats(self, raw):
        record = validate_waybill(raw)
        assert not record.valid
        assert record.carrier_name is None
        assert record.normalized is None

    def test_never_raises(self):
        assert not validate_waybill(None).valid
        assert not validate_waybill(12345678).valid
        assert validate_waybill(None).raw == ""


class TestCarrierLookup:
    def test_lookup(self):
        assert lookup_carrier("876").name == "Amazon Prime Air"
        assert lookup_carrier("000") is None


class TestLocateMasterWaybill:
    def test_prefers_mapped_column(self):
        columns = [
            RawColumn(header="Other", sample=["172-11112222"]),
            RawColumn(header="MAWB", sample=["", "230-87654321"]),
        ]
        mapping = SchemaMapping(
            assignments={FieldId.MASTER_WAYBILL: "MAWB"},
            column_indices={FieldId.MASTER_WAYBILL: 1},
        )
        record = locate_master_waybill(columns, mapping)
        assert record.normalized == "230-87654321"

    def test_falls_back_to_scan(self):
        columns = [
            RawColumn(header="A", sample=["x", "y"]),
            RawColumn(header="B", sample=["z", "045-11223344"]),
        ]
        record = locate_master_waybill(columns)
        assert record.carrier_prefix == "045"
        assert record.carrier_name == UNKNOWN_CARRIER

    def test_scan_is_row_limited(self):
        sample = ["-"] * 5 + ["230-87654321"]
        columns = [RawColumn(header="A", sample=sample)]
        assert locate_master_waybill(columns) is None
        assert locate_master_waybill(columns, scan_rows=6).carrier_name == "Avianca Cargo"

    def test_nothing_found(self):
        assert locate_master_waybill([]) is None
        assert locate_master_waybill([RawColumn(header="A")]) is None
