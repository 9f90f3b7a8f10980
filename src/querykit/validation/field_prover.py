"""
Field Prover - Fluent Checks on a Single Value.

Each check records a ProofFailure on the prover's own ValidationResult and,
if the caller supplied one, hands it to that prover's on_error callback.

Example:
    >>> prover = StringProver(name, field="name").is_not_null_or_empty().max_length(40)
    >>> prover.raise_if_invalid()
"""

from __future__ import annotations

import logging
import os
import traceback
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Generic, List, Optional, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

ErrorCallback = Callable[["ProofFailure"], None]

# Frames kept from the code that created a prover
STACK_DEPTH = 10


def _caller_stack(skip: int) -> Tuple[str, ...]:
    """
    Describe the calling frames as 'function (file:line)', innermost last.

    Args:
        skip: Frames to drop from the inner end, besides this function's own
    """
    frames = traceback.extract_stack(limit=STACK_DEPTH + skip + 1)[: -(skip + 1)]
    return tuple(
        f"{frame.name} ({os.path.basename(frame.filename)}:{frame.lineno})"
        for frame in frames
    )


class ValidationError(Exception):
    """Raised when a prover holding failures is asked to raise."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


@dataclass(frozen=True)
class ProofFailure:
    """
    One failed check.

    call_stack holds the frames that created the prover, innermost last, so
    a failure collected far from its source still names where it came from.
    """

    check: str
    message: str
    field_name: Optional[str] = None
    occurred_at: datetime = field(default_factory=datetime.now)
    call_stack: Tuple[str, ...] = ()


@dataclass
class ValidationResult:
    """Failures collected by one prover."""

    is_valid: bool = True
    failures: List[ProofFailure] = field(default_factory=list)

    def add_failure(self, failure: ProofFailure) -> None:
        """Add a failure and mark as invalid."""
        self.failures.append(failure)
        self.is_valid = False

    @property
    def messages(self) -> List[str]:
        return [f.message for f in self.failures]


class FieldProver(Generic[T]):
    """
    Checks that apply to a value of any type.

    Checks return the prover so they can be chained.
    """

    def __init__(
        self,
        target: T,
        field: Optional[str] = None,
        on_error: Optional[ErrorCallback] = None,
    ) -> None:
        """
        Initialize prover.

        Args:
            target: Value under test
            field: Name reported with failures
            on_error: Called once per failure, in addition to collection
        """
        self.target = target
        self.field = field
        self._on_error = on_error
        self.result = ValidationResult()
        self.call_stack = _caller_stack(skip=1)

    @property
    def is_valid(self) -> bool:
        return self.result.is_valid

    def is_not_null(self) -> "FieldProver[T]":
        if self.target is None:
            self._fail("is_not_null", "Null value not allowed.")
        return self

    def raise_if_invalid(self) -> None:
        """
        Raises:
            ValidationError: If any check has failed
        """
        if self.result.is_valid:
            return
        message = "; ".join(self.result.messages)
        logger.debug(f"Validation failed for {self.field or 'value'}: {message}")
        raise ValidationError(message, field=self.field)

    def _fail(self, check: str, message: str) -> None:
        failure = ProofFailure(
            check=check,
            message=message,
            field_name=self.field,
            call_stack=self.call_stack,
        )
        self.result.add_failure(failure)
        if self._on_error is not None:
            self._on_error(failure)

    def _require_type(self, check: str, expected: type) -> bool:
        """Record a failure and return False if the target has the wrong type."""
        if not isinstance(self.target, expected):
            self._fail(check, f"Cannot run check on non {expected.__name__} type: {check}")
            return False
        return True


class StringProver(FieldProver[Any]):
    """Checks for string values."""

    def is_not_null_or_empty(self) -> "StringProver":
        # None is reported as empty, not as a type error
        if self.target is None:
            self._fail(
                "is_not_null_or_empty",
                "Null or Empty values are not permitted for this property.",
            )
            return self
        if not self._require_type("is_not_null_or_empty", str):
            return self
        if not self.target.strip():
            self._fail(
                "is_not_null_or_empty",
                "Null or Empty values are not permitted for this property.",
            )
        return self

    def max_length(self, maximum: int) -> "StringProver":
        if self._require_type("max_length", str) and len(self.target) > maximum:
            self._fail("max_length", f"Exceeded max allowed characters of {maximum}.")
        return self

    def min_length(self, minimum: int) -> "StringProver":
        if self._require_type("min_length", str) and len(self.target) < minimum:
            self._fail(
                "min_length",
                f"Did not reach minimum allowed characters of {minimum}.",
            )
        return self
