# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Session facade exposing the denokit operations to editor integrations."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from .config import DenoSettings
from .declarations import SyncOutcome, TypeDeclarationSync
from .formatter import FormatterBridge
from .hashing import address_for
from .locator import CacheLocator
from .probe import ExternalToolProbe
from .versioning import ToolchainVersion


class DenoSession:
    """Own the settings and the component cluster built on top of them.

    Lookups such as :meth:`cache_root` and :meth:`current_version` are
    recomputed on every call so they track the live environment and the
    currently installed toolchain.
    """

    def __init__(
        self,
        settings: DenoSettings | None = None,
        *,
        environ: Mapping[str, str] | None = None,
        platform: str | None = None,
    ) -> None:
        self.settings = settings if settings is not None else DenoSettings()
        self.locator = CacheLocator(self.settings, environ=environ, platform=platform)
        self.probe = ExternalToolProbe(self.settings)
        self.declarations = TypeDeclarationSync(self.locator, self.probe)
        self.formatter = FormatterBridge(self.probe)

    @property
    def unstable(self) -> bool:
        return self.settings.unstable

    def set_unstable_mode(self, unstable: bool) -> None:
        self.settings.unstable = unstable

    def cache_root(self) -> Path:
        return self.locator.root()

    def set_cache_root(self, path: str | os.PathLike[str]) -> None:
        self.locator.set_root(path)

    def deps_root(self) -> Path:
        return self.locator.deps_root()

    def declaration_file_path(self) -> Path:
        """Return the declaration file for the current unstable mode."""

        return self.locator.declaration_file_path(self.settings.unstable)

    def executable_path(self) -> Path | None:
        return self.probe.executable_path()

    def current_version(self) -> ToolchainVersion | None:
        return self.probe.version()

    def ensure_declarations_synchronized(self, unstable: bool | None = None) -> SyncOutcome:
        """Synchronise the declaration file, defaulting to the session's mode.

        Raises:
            ToolchainUnavailableError: If the toolchain produced no declarations.
            DeclarationSyncError: If the file cannot be written or protected.
        """

        mode = self.settings.unstable if unstable is None else unstable
        return self.declarations.synchronize(mode)

    def resolve_cache_path_for_url(self, url: str) -> Path:
        """Return where the toolchain caches the module at ``url``.

        Raises:
            InvalidModuleURLError: If ``url`` has no scheme or host.
        """

        return self.locator.deps_root() / address_for(url).relative_path

    def is_path_inside_cache(self, path: str | os.PathLike[str]) -> bool:
        return self.locator.is_within_cache(path)

    async def format(self, source: str) -> str | None:
        return await self.formatter.format(source)

    async def format_fragment(self, source: str) -> str | None:
        return await self.formatter.format_fragment(source)


__all__ = ["DenoSession"]
