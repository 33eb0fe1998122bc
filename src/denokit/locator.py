# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolution of the Deno cache root and the paths derived from it."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Final

from .config import DenoSettings
from .paths import is_within, normalize_filepath

DEPS_DIRNAME: Final[str] = "deps"
STABLE_DECLARATION_FILE: Final[str] = "lib.deno.d.ts"
UNSTABLE_DECLARATION_FILE: Final[str] = "lib.deno.unstable.d.ts"


def default_cache_root(environ: Mapping[str, str], platform: str) -> Path:
    """Return the toolchain's default cache root for ``platform``.

    Unset variables render as empty strings, so the result is always a path
    even when it cannot exist.

    Args:
        environ: Environment variables consulted for the platform rules.
        platform: Value shaped like :data:`sys.platform`.

    Returns:
        Path: Default cache root; never created.

    """

    home = environ.get("HOME", "")
    if platform == "win32":
        return Path(f"{environ.get('LOCALAPPDATA', '')}\\deno")
    if platform == "darwin":
        return Path(f"{home}/Library/Caches/deno")
    if platform.startswith("linux"):
        xdg_cache = environ.get("XDG_CACHE_HOME")
        if xdg_cache:
            return Path(f"{xdg_cache}/deno")
        return Path(f"{home}/.cache/deno")
    return Path(f"{home}/.deno")


class CacheLocator:
    """Compute the cache root on every read so environment changes are observed."""

    def __init__(
        self,
        settings: DenoSettings,
        *,
        environ: Mapping[str, str] | None = None,
        platform: str | None = None,
    ) -> None:
        self._settings = settings
        self._environ = environ
        self._platform = platform

    def root(self) -> Path:
        """Return the override, else ``$DENO_DIR``, else the platform default."""

        override = self._settings.cache_root_override
        if override is not None:
            return normalize_filepath(override)
        environ = os.environ if self._environ is None else self._environ
        env_root = environ.get(self._settings.root_env_var)
        if env_root:
            return normalize_filepath(env_root)
        platform = sys.platform if self._platform is None else self._platform
        return normalize_filepath(default_cache_root(environ, platform))

    def set_root(self, path: str | os.PathLike[str]) -> None:
        """Pin the cache root for the remainder of the session."""

        self._settings.cache_root_override = normalize_filepath(path)

    def deps_root(self) -> Path:
        return self.root() / DEPS_DIRNAME

    def declaration_file_path(self, unstable: bool) -> Path:
        """Return the declaration file used for the stable or unstable surface."""

        name = UNSTABLE_DECLARATION_FILE if unstable else STABLE_DECLARATION_FILE
        return self.root() / name

    def is_within_cache(self, path: str | os.PathLike[str]) -> bool:
        return is_within(path, self.root())


__all__ = [
    "DEPS_DIRNAME",
    "STABLE_DECLARATION_FILE",
    "UNSTABLE_DECLARATION_FILE",
    "CacheLocator",
    "default_cache_root",
]
