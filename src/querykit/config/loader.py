"""
Configuration Loader - Collection Settings from YAML.

A settings file holds the CollectionsConfig fields either at the top level
or under a ``querykit`` section, so the settings can sit inside a larger
application config. Profiles are small overlay files kept in a directory
chosen by the caller; a profile only names the fields it changes.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from querykit.config.models import CollectionsConfig

logger = logging.getLogger(__name__)

SECTION = "querykit"

_PROFILE_NAME = re.compile(r"[A-Za-z0-9_-]+")


class ConfigLoader:
    """Reads CollectionsConfig from YAML files and optional profiles."""

    def __init__(self, profile_dir: Optional[Union[str, Path]] = None) -> None:
        """
        Initialize config loader.

        Args:
            profile_dir: Directory holding <profile>.yaml overlays
        """
        self._profile_dir = Path(profile_dir) if profile_dir is not None else None

    def load(
        self,
        config_path: Union[str, Path],
        profile: Optional[str] = None,
    ) -> CollectionsConfig:
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML settings file
            profile: Optional profile overlaid on top of the file

        Returns:
            Validated CollectionsConfig object

        Raises:
            FileNotFoundError: If the file or profile doesn't exist
            ValueError: If the file is not a mapping or the profile
                        name is unusable
            ValidationError: If a setting is unknown or invalid
        """
        settings = self._read_settings(Path(config_path))

        if profile:
            overlay = self._read_settings(self._profile_path(profile))
            logger.debug(
                f"Applying profile {profile!r}: {', '.join(sorted(overlay)) or 'no changes'}"
            )
            settings = {**settings, **overlay}

        return self.load_from_dict(settings)

    def load_from_dict(self, settings: Dict[str, Any]) -> CollectionsConfig:
        return CollectionsConfig.model_validate(settings)

    def _read_settings(self, path: Path) -> Dict[str, Any]:
        with open(path, encoding="utf-8") as f:
            document = yaml.safe_load(f) or {}

        if not isinstance(document, dict):
            raise ValueError(f"{path}: expected a mapping of settings")
        if SECTION not in document:
            return document

        section = document[SECTION] or {}
        if not isinstance(section, dict):
            raise ValueError(f"{path}: '{SECTION}' section must be a mapping")
        return dict(section)

    def _profile_path(self, profile: str) -> Path:
        if self._profile_dir is None:
            raise ValueError(
                f"Profile {profile!r} requested but no profile directory is set"
            )
        if not _PROFILE_NAME.fullmatch(profile):
            raise ValueError(f"Invalid profile name: {profile!r}")

        path = self._profile_dir / f"{profile}.yaml"
        if not path.exists():
            raise FileNotFoundError(f"Profile not found: {profile}")
        return path


def load_config(
    config_path: Union[str, Path],
    profile: Optional[str] = None,
    profile_dir: Optional[Union[str, Path]] = None,
) -> CollectionsConfig:
    """Convenience wrapper around ConfigLoader.load."""
    return ConfigLoader(profile_dir=profile_dir).load(config_path, profile)
