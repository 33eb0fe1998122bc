# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Keep the cached Deno declaration file in step with the installed toolchain."""

from __future__ import annotations

import logging
import os
import stat
from enum import Enum
from pathlib import Path
from typing import Final

from .errors import DeclarationSyncError, ToolchainUnavailableError
from .locator import CacheLocator
from .probe import ExternalToolProbe

LOGGER = logging.getLogger(__name__)

READ_ONLY_MODE: Final[int] = 0o444
WRITABLE_MODE: Final[int] = 0o666
_WRITE_BITS: Final[int] = stat.S_IWUSR | stat.S_IWGRP | stat.S_IWOTH


class SyncOutcome(str, Enum):
    """Enumerate what a synchronisation pass did to the declaration file."""

    CREATED = "created"
    UPDATED = "updated"
    UNCHANGED = "unchanged"


def _is_read_only(path: Path) -> bool:
    return not path.stat().st_mode & _WRITE_BITS


def _write_protected(path: Path, content: bytes) -> None:
    """Write ``content`` to ``path`` and leave the file read-only."""

    if path.exists():
        os.chmod(path, WRITABLE_MODE)
    path.write_bytes(content)
    os.chmod(path, READ_ONLY_MODE)


class TypeDeclarationSync:
    """Create, compare and refresh the read-only declaration snapshot.

    Passes are not serialised; concurrent passes for the same mode race on
    the compare-then-write sequence and the last writer wins.
    """

    def __init__(self, locator: CacheLocator, probe: ExternalToolProbe) -> None:
        self._locator = locator
        self._probe = probe

    def synchronize(self, unstable: bool) -> SyncOutcome:
        """Bring the declaration file for ``unstable`` in line with the toolchain.

        Args:
            unstable: Selects the unstable declaration surface and filename.

        Returns:
            SyncOutcome: Whether the file was created, rewritten or left alone.

        Raises:
            ToolchainUnavailableError: If the toolchain produced no declarations.
            DeclarationSyncError: If the file cannot be read, written or protected.
        """

        content = self._probe.type_declarations(unstable)
        if content is None:
            raise ToolchainUnavailableError("Unable to read type declarations from the Deno toolchain")

        path = self._locator.declaration_file_path(unstable)
        try:
            if not path.exists():
                path.parent.mkdir(parents=True, exist_ok=True)
                _write_protected(path, content)
                LOGGER.debug("created %s (%d bytes)", path, len(content))
                return SyncOutcome.CREATED

            if path.read_bytes() != content:
                _write_protected(path, content)
                LOGGER.debug("refreshed %s (%d bytes)", path, len(content))
                return SyncOutcome.UPDATED

            if not _is_read_only(path):
                os.chmod(path, READ_ONLY_MODE)
            return SyncOutcome.UNCHANGED
        except OSError as exc:
            raise DeclarationSyncError(path, exc.strerror or str(exc)) from exc


__all__ = ["READ_ONLY_MODE", "WRITABLE_MODE", "SyncOutcome", "TypeDeclarationSync"]
