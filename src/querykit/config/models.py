"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class AverageDenominator(str, Enum):
    """Which element count avg() divides by."""

    TOTAL = "total"
    QUALIFYING = "qualifying"


class MissingSortPlacement(str, Enum):
    """Where order_by places elements whose selected field is missing."""

    LAST = "last"
    FIRST = "first"


class CollectionsConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    average_denominator: AverageDenominator = Field(
        default=AverageDenominator.TOTAL,
        description="Divide avg() by all elements or only numeric ones",
    )
    missing_sort_values: MissingSortPlacement = Field(
        default=MissingSortPlacement.LAST,
        description="Placement of elements lacking the sort field",
    )
    raise_on_duplicate_key: bool = Field(
        default=False,
        description="Raise DuplicateKeyError instead of returning a status",
    )
    duplicate_key_log_level: str = Field(
        default="WARNING",
        description="Log level used when a duplicate key is rejected",
    )

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("duplicate_key_log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def duplicate_key_log_level_number(self) -> int:
        return logging.getLevelName(self.duplicate_key_log_level)
