"""Pydantic schema for AIRS configuration validation.

Mirrors the YAML structure in config/default.yaml. Used when
``validate=True`` is passed to ``AirsConfig.load()``.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator


class SystemConfig(BaseModel):
    name: str = "AIRS"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    validate_config: bool = False
    log_file: str | None = None
    log_json: bool = False


class HistorySettings(BaseModel):
    limit: int | str | None = "none"
    seed: Any = ""

    @field_validator("limit")
    @classmethod
    def _check_limit(cls, v: int | str | None) -> int | str | None:
        if isinstance(v, str) and v.strip().lower() not in ("none", "unbounded"):
            raise ValueError(f"limit must be an integer or 'none', got {v!r}")
        return v


class AirsRootConfig(BaseModel):
    system: SystemConfig = Field(default_factory=SystemConfig)
    history: HistorySettings = Field(default_factory=HistorySettings)

    model_config = {"extra": "allow"}


class AirsConfigSchema(BaseModel):
    """Top-level wrapper matching YAML root key ``airs:``."""

    airs: AirsRootConfig

    model_config = {"extra": "allow"}


def validate_config(cfg_dict: dict) -> AirsConfigSchema:
    """Validate a raw config dict (e.g. from OmegaConf) against the schema.

    Raises ``pydantic.ValidationError`` on invalid config.
    """
    return AirsConfigSchema.model_validate(cfg_dict)
