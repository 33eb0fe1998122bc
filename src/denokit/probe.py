# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Discovery and metadata queries for the external Deno executable."""

from __future__ import annotations

import logging
import re
import shutil
from pathlib import Path
from subprocess import CompletedProcess
from typing import Final

from .config import DenoSettings
from .paths import normalize_filepath
from .process import SubprocessExecutionError, run_command
from .versioning import VERSION_PROBE_SCRIPT, ToolchainVersion, parse_version_payload, supports_unstable_types

LOGGER = logging.getLogger(__name__)

_QUOTED_PATH: Final[re.Pattern[str]] = re.compile(r'"([^"]+)"')
_LABELLED_PATH: Final[re.Pattern[str]] = re.compile(r"location:\s*(\S.*?)\s*$")
_ANSI_ESCAPE: Final[re.Pattern[str]] = re.compile(r"\x1b\[[0-9;]*m")


class ExternalToolProbe:
    """Query the toolchain on demand; nothing is cached between calls.

    Every query returns ``None`` rather than raising when the executable is
    missing, fails to start, exits non-zero or prints something unexpected.
    """

    def __init__(self, settings: DenoSettings) -> None:
        self._settings = settings

    def executable_path(self) -> Path | None:
        resolved = shutil.which(self._settings.executable)
        return Path(resolved) if resolved else None

    def _run(self, *args: str, text: bool = True) -> CompletedProcess[str] | CompletedProcess[bytes] | None:
        executable = self.executable_path()
        if executable is None:
            LOGGER.debug("%s not found on PATH", self._settings.executable)
            return None
        try:
            return run_command([str(executable), *args], text=text)
        except (OSError, ValueError, SubprocessExecutionError) as exc:
            LOGGER.debug("%s %s failed: %s", executable, " ".join(args), exc)
            return None

    def version(self) -> ToolchainVersion | None:
        """Return the toolchain versions, or ``None`` when they cannot be read."""

        completed = self._run("eval", VERSION_PROBE_SCRIPT)
        if completed is None:
            return None
        if completed.stderr:
            LOGGER.debug("version probe wrote to stderr: %s", completed.stderr)
            return None
        return parse_version_payload(completed.stdout)

    def type_arguments(self, unstable: bool, version: ToolchainVersion | None) -> list[str]:
        """Return the ``types`` arguments for the requested surface.

        ``--unstable`` is only added when the toolchain is recent enough to
        accept it; older toolchains silently get the stable surface.
        """

        if unstable and supports_unstable_types(version):
            return ["types", "--unstable"]
        return ["types"]

    def type_declarations(self, unstable: bool) -> bytes | None:
        """Return the raw declaration output for the requested surface."""

        version = self.version()
        if version is None:
            return None
        completed = self._run(*self.type_arguments(unstable, version), text=False)
        if completed is None:
            return None
        return bytes(completed.stdout)

    def reported_cache_root(self) -> Path | None:
        """Return the cache root printed on the first line of ``deno info``.

        Older releases quote the path; newer ones print it after a
        ``location:`` label.
        """

        completed = self._run("info")
        if completed is None:
            return None
        lines = _ANSI_ESCAPE.sub("", completed.stdout).splitlines()
        if not lines:
            return None
        match = _QUOTED_PATH.search(lines[0]) or _LABELLED_PATH.search(lines[0])
        if match is None:
            LOGGER.debug("no cache root in info output: %r", lines[0])
            return None
        return normalize_filepath(match.group(1))


__all__ = ["ExternalToolProbe"]
