# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Runtime settings with environment-variable overrides."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

DEFAULT_INSTALLER_NAME: Final[str] = "cuckoo"
DEFAULT_COMMON_ROOT: Final[Path] = Path("/etc/cuckoo")
DEFAULT_RELOCATION_ORDINAL: Final[str] = "50"

COMMON_ROOT_ENV: Final[str] = "CUCKOO_COMMON_ROOT"
RELOCATION_ORDINAL_ENV: Final[str] = "CUCKOO_RELOCATION_ORDINAL"
DEBUG_ENV: Final[str] = "CUCKOO_DEBUG"

_TRUTHY: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class CuckooSettings(BaseModel):
    """Fixed locations and names used by both operating modes."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    installer_name: str = Field(default=DEFAULT_INSTALLER_NAME, min_length=1)
    common_root: Path = DEFAULT_COMMON_ROOT
    relocation_ordinal: str = DEFAULT_RELOCATION_ORDINAL
    debug: bool = False

    @field_validator("relocation_ordinal")
    @classmethod
    def _two_digits(cls, value: str) -> str:
        if len(value) != 2 or not value.isdigit():
            raise ValueError("relocation ordinal must be exactly two digits")
        return value

    @field_validator("common_root")
    @classmethod
    def _absolute_root(cls, value: Path) -> Path:
        if not value.is_absolute():
            raise ValueError("common hook root must be an absolute path")
        return value

    def relocation_name(self, name: str) -> str:
        """Return the name the original executable takes inside its hook directory."""

        return f"{self.relocation_ordinal}-{name}"


def load_settings(env: Mapping[str, str] | None = None) -> CuckooSettings:
    """Build settings from defaults overlaid with ``CUCKOO_*`` environment variables.

    Args:
        env: Environment mapping to read; defaults to ``os.environ``.

    Returns:
        CuckooSettings: Validated, immutable settings.

    Raises:
        ConfigError: If an override fails validation.
    """

    source = os.environ if env is None else env
    overrides: dict[str, object] = {}
    if common_root := source.get(COMMON_ROOT_ENV):
        overrides["common_root"] = Path(common_root)
    if ordinal := source.get(RELOCATION_ORDINAL_ENV):
        overrides["relocation_ordinal"] = ordinal
    if (debug := source.get(DEBUG_ENV)) is not None:
        overrides["debug"] = debug.strip().lower() in _TRUTHY
    try:
        return CuckooSettings(**overrides)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


__all__ = [
    "COMMON_ROOT_ENV",
    "ConfigError",
    "CuckooSettings",
    "DEBUG_ENV",
    "RELOCATION_ORDINAL_ENV",
    "load_settings",
]
