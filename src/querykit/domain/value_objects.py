"""
Value Objects for Domain Layer.

Value objects describe the outcome of an operation and carry no identity.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class _Missing:
    """Marker type for a field that a selector could not find."""

    _instance: Optional["_Missing"] = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


# Returned by field selectors when the element has no such field
MISSING = _Missing()


class OperationStatus(str, Enum):
    """Outcome of a map mutation."""

    OK = "OK"
    DUPLICATE_KEY = "DUPLICATE_KEY"
    NOT_FOUND = "NOT_FOUND"


class OperationResult(BaseModel):
    """Result of a map mutation that may be rejected without raising."""

    status: OperationStatus
    key: Any = Field(default=None, description="Key the operation targeted")
    message: str = Field(default="", description="Human readable outcome")

    model_config = {"frozen": True}

    @property
    def succeeded(self) -> bool:
        return self.status == OperationStatus.OK

    def __bool__(self) -> bool:
        return self.succeeded

    @classmethod
    def ok(cls, key: Any) -> "OperationResult":
        return cls(status=OperationStatus.OK, key=key)

    @classmethod
    def duplicate_key(cls, key: Any) -> "OperationResult":
        return cls(
            status=OperationStatus.DUPLICATE_KEY,
            key=key,
            message=f"Key {key!r} already exists",
        )

    @classmethod
    def not_found(cls, key: Any) -> "OperationResult":
        return cls(
            status=OperationStatus.NOT_FOUND,
            key=key,
            message=f"Key {key!r} not found",
        )
