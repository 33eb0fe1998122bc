# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Helpers shared by the denokit commands."""

from __future__ import annotations

from pathlib import Path

import typer

from ..config import ConfigError, DenoSettings
from ..logging import fail
from ..session import DenoSession

CACHE_ROOT_OPTION = typer.Option(
    None,
    "--cache-root",
    help="Use this directory instead of DENO_DIR or the platform default.",
)
UNSTABLE_OPTION = typer.Option(
    None,
    "--unstable/--stable",
    help="Target the unstable declaration surface (defaults to DENOKIT_UNSTABLE).",
)
EMOJI_OPTION = typer.Option(
    True,
    "--emoji/--no-emoji",
    help="Toggle emoji in CLI output.",
)


def build_session(
    *,
    cache_root: Path | None,
    unstable: bool | None,
    emoji: bool,
    stderr: bool = False,
) -> DenoSession:
    """Return a session configured from the environment and CLI flags.

    Raises:
        typer.Exit: With code 2 when the configuration is invalid.
    """

    try:
        settings = DenoSettings.from_env(unstable=unstable)
    except ConfigError as exc:
        fail(f"Invalid configuration: {exc}", use_emoji=emoji, stderr=stderr)
        raise typer.Exit(code=2) from exc
    session = DenoSession(settings)
    if cache_root is not None:
        session.set_cache_root(cache_root.expanduser().resolve())
    return session


__all__ = ["CACHE_ROOT_OPTION", "EMOJI_OPTION", "UNSTABLE_OPTION", "build_session"]
