"""Engine configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic import model_validator
from pydantic_settings import BaseSettings


class InferenceConfig(BaseSettings):
    """Scoring and assignment constants for schema inference."""

    model_config = {"env_prefix": "CARGOMAP_INFERENCE_"}

    sample_size: int = 10
    acceptance_threshold: float = 0.55
    name_weight: float = 0.7
    content_weight: float = 0.3
    max_alternates: int = 3
    min_containment_length: int = 4  # shorter variants only match exactly or by edit distance

    @model_validator(mode="after")
    def _check_bounds(self) -> InferenceConfig:
        if abs(self.name_weight + self.content_weight - 1.0) > 1e-9:
            raise ValueError("name_weight and content_weight must sum to 1")
        if not 0.0 < self.acceptance_threshold <= 1.0:
            raise ValueError("acceptance_threshold must be in (0, 1]")
        if self.sample_size < 0 or self.max_alternates < 0:
            raise ValueError("sample_size and max_alternates must be non-negative")
        return self


class ReportConfig(BaseSettings):
    """Thresholds used when turning a mapping into a report."""

    model_config = {"env_prefix": "CARGOMAP_REPORT_"}

    high_confidence: float = 0.85
    medium_confidence: float = 0.70
    waybill_scan_rows: int = 5


class AppSettings(BaseSettings):
    """Root settings aggregating all sub-configs."""

    model_config = {"env_prefix": "CARGOMAP_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"

    inference: InferenceConfig = InferenceConfig()
    report: ReportConfig = ReportConfig()
