# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Session configuration for the denokit components."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

DEFAULT_EXECUTABLE: Final[str] = "deno"
DEFAULT_ROOT_ENV_VAR: Final[str] = "DENO_DIR"
EXECUTABLE_ENV_VAR: Final[str] = "DENOKIT_EXECUTABLE"
UNSTABLE_ENV_VAR: Final[str] = "DENOKIT_UNSTABLE"
_TRUTHY: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class DenoSettings(BaseModel):
    """Mutable settings shared by the components of one session.

    ``cache_root_override`` and ``unstable`` are the only values expected to
    change after construction. Neither is guarded by a lock; callers must not
    flip them while operations that read them are in flight.
    """

    model_config = ConfigDict(validate_assignment=True)

    executable: str = DEFAULT_EXECUTABLE
    cache_root_override: Path | None = None
    unstable: bool = False
    root_env_var: str = Field(default=DEFAULT_ROOT_ENV_VAR, min_length=1)

    @field_validator("executable")
    @classmethod
    def _require_executable(cls, value: str) -> str:
        """Return ``value`` stripped, rejecting blank executable names.

        Raises:
            ValueError: If ``value`` is empty after stripping.
        """

        stripped = value.strip()
        if not stripped:
            raise ValueError("executable must not be blank")
        return stripped

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides: object) -> DenoSettings:
        """Build settings from ``DENOKIT_*`` variables plus explicit overrides.

        Args:
            environ: Environment mapping; defaults to :data:`os.environ`.
            **overrides: Field values taking precedence over the environment.

        Returns:
            DenoSettings: Validated settings instance.

        Raises:
            ConfigError: If the combined values fail validation.
        """

        env = os.environ if environ is None else environ
        values: dict[str, object] = {}
        executable = env.get(EXECUTABLE_ENV_VAR)
        if executable:
            values["executable"] = executable
        unstable = env.get(UNSTABLE_ENV_VAR)
        if unstable is not None:
            values["unstable"] = unstable.strip().lower() in _TRUTHY
        values.update({key: value for key, value in overrides.items() if value is not None})
        try:
            return cls.model_validate(values)
        except ValidationError as exc:
            raise ConfigError(str(exc)) from exc


__all__ = [
    "DEFAULT_EXECUTABLE",
    "DEFAULT_ROOT_ENV_VAR",
    "EXECUTABLE_ENV_VAR",
    "UNSTABLE_ENV_VAR",
    "ConfigError",
    "DenoSettings",
]
