# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Implementation of the ``denokit resolve`` command."""

from __future__ import annotations

from pathlib import Path

import typer

from ..errors import InvalidModuleURLError
from ..logging import fail
from .shared import CACHE_ROOT_OPTION, EMOJI_OPTION, build_session


def resolve_command(
    url: str = typer.Argument(..., help="Remote module URL, e.g. https://deno.land/std/path/mod.ts."),
    cache_root: Path | None = CACHE_ROOT_OPTION,
    emoji: bool = EMOJI_OPTION,
) -> None:
    """Print the file the toolchain uses to cache ``url``."""

    session = build_session(cache_root=cache_root, unstable=None, emoji=emoji)
    try:
        cached = session.resolve_cache_path_for_url(url)
    except InvalidModuleURLError as exc:
        fail(str(exc), use_emoji=emoji)
        raise typer.Exit(code=2) from exc
    typer.echo(str(cached))
