"""
Validation Package - Field-Level Checks.

This package provides small fluent checks for single values:
    - FieldProver: null checks for any value
    - StringProver: emptiness and length checks for strings

Design Principles:
    - Failures are collected on the prover, never in global state
    - An optional callback is passed per prover, not registered globally
    - raise_if_invalid() turns collected failures into ValidationError
"""

from querykit.validation.field_prover import (
    FieldProver,
    ProofFailure,
    StringProver,
    ValidationError,
    ValidationResult,
)

__all__ = [
    "FieldProver",
    "ProofFailure",
    "StringProver",
    "ValidationError",
    "ValidationResult",
]
