"""Semantic target fields a manifest column can be mapped to."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class FieldId(StrEnum):
    TRACKING_CODE = "tracking_code"
    MASTER_WAYBILL = "master_waybill"
    CONSIGNEE_NAME = "consignee_name"
    IDENTIFICATION = "identification"
    PHONE_NUMBER = "phone_number"
    ADDRESS = "address"
    DESCRIPTION = "description"
    DECLARED_VALUE = "declared_value"
    WEIGHT = "weight"
    VOLUME = "volume"
    ORIGIN_COUNTRY = "origin_country"
    PROVINCE = "province"
    CITY = "city"
    DISTRICT = "district"


class FieldDefinition(BaseModel):
    """A catalog entry: one target field and its known header spellings."""

    model_config = {"frozen": True}

    id: FieldId
    priority: float
    variants: tuple[str, ...] = Field(default_factory=tuple)
    required: bool = False
    recommended: bool = False
    label: str = ""

    @property
    def display_name(self) -> str:
        return self.label or self.id.value.replace("_", " ").capitalize()
