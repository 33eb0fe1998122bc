# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy shared by the denokit components."""

from __future__ import annotations

from pathlib import Path


class DenokitError(Exception):
    """Base class for failures surfaced by denokit."""


class InvalidModuleURLError(DenokitError, ValueError):
    """Raised when a module URL lacks the scheme or host needed for caching."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Cannot derive a cache path for '{url}': scheme and host are required")
        self.url = url


class ToolchainUnavailableError(DenokitError):
    """Raised when requested work needs the toolchain and it cannot be queried."""


class FormatterError(DenokitError):
    """Raised when ``deno fmt`` fails to run or exits with a non-zero status.

    Attributes:
        stderr: Standard error captured from the formatter, empty when the
            process could not be spawned.
        returncode: Exit status of the formatter, ``None`` for spawn errors.
    """

    def __init__(self, stderr: str, *, returncode: int | None = None) -> None:
        detail = stderr.strip() or "<no stderr>"
        if returncode is None:
            message = f"Formatter could not be started: {detail}"
        else:
            message = f"Formatter exited with status {returncode}: {detail}"
        super().__init__(message)
        self.stderr = stderr
        self.returncode = returncode


class DeclarationSyncError(DenokitError):
    """Raised when the declaration file cannot be written or protected."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to synchronise {path}: {reason}")
        self.path = path
        self.reason = reason


__all__ = [
    "DeclarationSyncError",
    "DenokitError",
    "FormatterError",
    "InvalidModuleURLError",
    "ToolchainUnavailableError",
]
