# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Implementation of the ``denokit fmt`` command."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import typer

from ..errors import FormatterError
from ..logging import fail
from .shared import EMOJI_OPTION, build_session


def fmt_command(
    path: Path | None = typer.Argument(
        None,
        exists=True,
        dir_okay=False,
        readable=True,
        help="File to format; standard input is read when omitted.",
    ),
    fragment: bool = typer.Option(
        False,
        "--fragment",
        help="Strip surrounding whitespace from the result, as for a selected range.",
    ),
    emoji: bool = EMOJI_OPTION,
) -> None:
    """Format source through ``deno fmt`` and print the result."""

    session = build_session(cache_root=None, unstable=None, emoji=emoji, stderr=True)
    source = path.read_text(encoding="utf-8") if path is not None else sys.stdin.read()
    runner = session.format_fragment if fragment else session.format
    try:
        formatted = asyncio.run(runner(source))
    except FormatterError as exc:
        fail(str(exc), use_emoji=emoji, stderr=True)
        raise typer.Exit(code=1) from exc
    if formatted is None:
        fail(f"'{session.settings.executable}' was not found on PATH", use_emoji=emoji, stderr=True)
        raise typer.Exit(code=1)
    typer.echo(formatted, nl=False)
