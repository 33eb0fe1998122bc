# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Implementation of the ``denokit types`` command."""

from __future__ import annotations

from pathlib import Path

import typer

from ..declarations import SyncOutcome
from ..errors import DeclarationSyncError, ToolchainUnavailableError
from ..logging import fail, info, ok, warn
from ..versioning import UNSTABLE_TYPES_MIN_VERSION, supports_unstable_types
from .shared import CACHE_ROOT_OPTION, EMOJI_OPTION, UNSTABLE_OPTION, build_session

_MESSAGES = {
    SyncOutcome.CREATED: "Created",
    SyncOutcome.UPDATED: "Refreshed",
    SyncOutcome.UNCHANGED: "Up to date:",
}


def types_command(
    cache_root: Path | None = CACHE_ROOT_OPTION,
    unstable: bool | None = UNSTABLE_OPTION,
    emoji: bool = EMOJI_OPTION,
) -> None:
    """Synchronise the cached declaration file with the installed toolchain."""

    session = build_session(cache_root=cache_root, unstable=unstable, emoji=emoji)
    target = session.declaration_file_path()
    info(f"Synchronising {target}", use_emoji=emoji)
    try:
        outcome = session.ensure_declarations_synchronized()
    except ToolchainUnavailableError as exc:
        fail(f"{exc}; is Deno installed?", use_emoji=emoji)
        raise typer.Exit(code=1) from exc
    except DeclarationSyncError as exc:
        fail(str(exc), use_emoji=emoji)
        raise typer.Exit(code=1) from exc
    ok(f"{_MESSAGES[outcome]} {target}", use_emoji=emoji)
    if session.unstable and not supports_unstable_types(session.current_version()):
        warn(
            f"Deno older than {UNSTABLE_TYPES_MIN_VERSION} has no unstable declarations; stable ones were written",
            use_emoji=emoji,
        )
