# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run ``deno fmt -`` as a stdin/stdout formatter."""

from __future__ import annotations

import logging

from .errors import FormatterError
from .probe import ExternalToolProbe
from .process import stream_command

LOGGER = logging.getLogger(__name__)


class FormatterBridge:
    """Format source text by piping it through the toolchain.

    Each call spawns its own subprocess, so calls may run concurrently. No
    timeout is applied; wrap calls in :func:`asyncio.wait_for` when latency
    must be bounded.
    """

    def __init__(self, probe: ExternalToolProbe) -> None:
        self._probe = probe

    async def format(self, source: str) -> str | None:
        """Return ``source`` formatted by the toolchain.

        Returns:
            str | None: Formatted text, or ``None`` when no executable exists.

        Raises:
            FormatterError: If the formatter cannot start or exits non-zero.
        """

        executable = self._probe.executable_path()
        if executable is None:
            return None
        try:
            result = await stream_command([str(executable), "fmt", "-"], source)
        except OSError as exc:
            raise FormatterError(str(exc)) from exc
        if result.returncode != 0:
            LOGGER.debug("deno fmt exited with %s", result.returncode)
            raise FormatterError(result.stderr, returncode=result.returncode)
        return result.stdout

    async def format_fragment(self, source: str) -> str | None:
        """Format a partial document, dropping the surrounding whitespace.

        A formatted range is spliced back into a larger document, so the
        trailing newline the formatter appends must not be kept.
        """

        formatted = await self.format(source)
        if formatted is None:
            return None
        return formatted.strip()


__all__ = ["FormatterBridge"]
