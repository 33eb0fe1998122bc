# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Bridge between editor tooling and the Deno cache, type output and formatter."""

from __future__ import annotations

from .config import ConfigError, DenoSettings
from .declarations import SyncOutcome, TypeDeclarationSync
from .errors import (
    DeclarationSyncError,
    DenokitError,
    FormatterError,
    InvalidModuleURLError,
    ToolchainUnavailableError,
)
from .formatter import FormatterBridge
from .hashing import ModuleCacheKey, address_for, hash_url
from .locator import CacheLocator
from .probe import ExternalToolProbe
from .session import DenoSession
from .versioning import ToolchainVersion

__all__ = [
    "CacheLocator",
    "ConfigError",
    "DeclarationSyncError",
    "DenoSession",
    "DenoSettings",
    "DenokitError",
    "ExternalToolProbe",
    "FormatterBridge",
    "FormatterError",
    "InvalidModuleURLError",
    "ModuleCacheKey",
    "SyncOutcome",
    "ToolchainUnavailableError",
    "ToolchainVersion",
    "TypeDeclarationSync",
    "address_for",
    "hash_url",
]
