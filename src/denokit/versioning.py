# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Helpers for capturing and comparing toolchain versions."""

from __future__ import annotations

import json
import logging
from typing import Final

from packaging.version import InvalidVersion, Version
from pydantic import BaseModel, ConfigDict, ValidationError

LOGGER = logging.getLogger(__name__)

VERSION_PROBE_SCRIPT: Final[str] = "console.log(JSON.stringify(Deno.version))"
UNSTABLE_TYPES_MIN_VERSION: Final[str] = "0.43.0"


class ToolchainVersion(BaseModel):
    """Snapshot of the versions reported by the toolchain."""

    model_config = ConfigDict(frozen=True)

    deno: str
    v8: str
    typescript: str

    @property
    def raw(self) -> str:
        """Return the multi-line display string shown to users."""

        return f"deno: {self.deno}\nv8: {self.v8}\ntypescript: {self.typescript}"


def parse_version_payload(payload: str) -> ToolchainVersion | None:
    """Return the version parsed from the JSON printed by the probe script.

    Returns:
        ToolchainVersion | None: Parsed versions, or ``None`` when the
        payload is not a JSON object carrying all three fields as strings.
    """

    try:
        data = json.loads(payload)
    except json.JSONDecodeError:
        LOGGER.debug("version payload is not JSON: %r", payload)
        return None
    if not isinstance(data, dict):
        return None
    try:
        return ToolchainVersion.model_validate(
            {key: data.get(key) for key in ("deno", "v8", "typescript")},
        )
    except ValidationError:
        LOGGER.debug("version payload is missing fields: %r", data)
        return None


def is_compatible(actual: str | None, expected: str | None) -> bool:
    """Return ``True`` when ``actual`` is at least ``expected``.

    Unparsable versions never satisfy a floor.
    """

    if expected is None:
        return True
    if actual is None:
        return False
    try:
        return Version(actual) >= Version(expected)
    except InvalidVersion:
        return False


def supports_unstable_types(version: ToolchainVersion | None) -> bool:
    if version is None:
        return False
    return is_compatible(version.deno, UNSTABLE_TYPES_MIN_VERSION)


__all__ = [
    "UNSTABLE_TYPES_MIN_VERSION",
    "VERSION_PROBE_SCRIPT",
    "ToolchainVersion",
    "is_compatible",
    "parse_version_payload",
    "supports_unstable_types",
]
