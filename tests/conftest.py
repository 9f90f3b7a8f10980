"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest
from pydantic import BaseModel

from querykit.config.models import CollectionsConfig


class Employee(BaseModel):
    """Attribute-style record used to exercise field-name selectors."""

    name: str
    age: int
    salary: Optional[float] = None

    model_config = {"frozen": True}


@pytest.fixture
def fixtures_path() -> Path:
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_config_path(fixtures_path: Path) -> Path:
    """Path to sample configuration file."""
    return fixtures_path / "sample_config.yaml"


@pytest.fixture
def default_config() -> CollectionsConfig:
    """Create default configuration."""
    return CollectionsConfig()


@pytest.fixture
def records() -> List[Dict[str, Any]]:
    """Mapping-style records with a gap and a non-numeric value."""
    return [
        {"name": "carol", "age": 35, "score": 7},
        {"name": "alice", "age": 30, "score": 0},
        {"name": "dave", "age": 41},
        {"name": "bob", "age": 25, "score": "n/a"},
        {"name": "erin", "age": 30, "score": 12},
    ]


@pytest.fixture
def employees() -> List[Employee]:
    """Attribute-style records."""
    return [
        Employee(name="grace", age=45, salary=120.0),
        Employee(name="linus", age=28, salary=95.5),
        Employee(name="ada", age=36),
    ]
