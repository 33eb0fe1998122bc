# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Implementation of the ``denokit info`` command."""

from __future__ import annotations

from pathlib import Path

import typer

from ..logging import fail, info, ok, section
from .shared import CACHE_ROOT_OPTION, EMOJI_OPTION, UNSTABLE_OPTION, build_session


def info_command(
    cache_root: Path | None = CACHE_ROOT_OPTION,
    unstable: bool | None = UNSTABLE_OPTION,
    emoji: bool = EMOJI_OPTION,
) -> None:
    """Show the toolchain location, its versions and the cache layout."""

    session = build_session(cache_root=cache_root, unstable=unstable, emoji=emoji)

    section("Cache", use_color=False)
    info(f"Cache root: {session.cache_root()}", use_emoji=emoji)
    info(f"Dependency cache: {session.deps_root()}", use_emoji=emoji)
    info(f"Declaration file: {session.declaration_file_path()}", use_emoji=emoji)

    section("Toolchain", use_color=False)
    executable = session.executable_path()
    if executable is None:
        fail(f"'{session.settings.executable}' was not found on PATH", use_emoji=emoji)
        raise typer.Exit(code=1)
    info(f"Executable: {executable}", use_emoji=emoji)

    version = session.current_version()
    if version is None:
        fail("Unable to query the toolchain version", use_emoji=emoji)
        raise typer.Exit(code=1)
    for line in version.raw.splitlines():
        ok(line, use_emoji=emoji)
