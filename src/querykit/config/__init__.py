"""
Configuration Package - Models and Loaders.

This package handles the tunable behaviour of the containers:
    - Pydantic model for type-safe configuration
    - YAML loader with validation
    - Support for configuration profiles

Configuration Structure:
    - CollectionsConfig: Root configuration object shared by all containers

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Defaults reproduce the documented container semantics
"""

from querykit.config.loader import ConfigLoader, load_config
from querykit.config.models import (
    AverageDenominator,
    CollectionsConfig,
    MissingSortPlacement,
)

__all__ = [
    "ConfigLoader",
    "load_config",
    "AverageDenominator",
    "CollectionsConfig",
    "MissingSortPlacement",
]
