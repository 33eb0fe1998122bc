# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Environment diagnostics for denokit."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer
from rich import box
from rich.console import Console
from rich.rule import Rule
from rich.table import Table

from ..console import detect_tty, get_console_manager
from ..session import DenoSession
from .shared import CACHE_ROOT_OPTION, EMOJI_OPTION, build_session


@dataclass(slots=True)
class EnvironmentCheck:
    """Represents the outcome of a doctor probe."""

    name: str
    ok: bool
    detail: str


def collect_checks(session: DenoSession) -> list[EnvironmentCheck]:
    """Return the probes shown by ``denokit doctor``."""

    checks: list[EnvironmentCheck] = []
    executable = session.executable_path()
    checks.append(
        EnvironmentCheck("Executable", executable is not None, str(executable) if executable else "not on PATH"),
    )
    version = session.current_version()
    checks.append(
        EnvironmentCheck("Version", version is not None, version.deno if version else "unavailable"),
    )
    computed = session.cache_root()
    checks.append(EnvironmentCheck("Cache root", True, str(computed)))
    reported = session.probe.reported_cache_root()
    if reported is None:
        checks.append(EnvironmentCheck("Reported root", False, "deno info produced no cache root"))
    else:
        matches = reported == computed
        detail = str(reported) if matches else f"{reported} (computed {computed})"
        checks.append(EnvironmentCheck("Reported root", matches, detail))
    for unstable in (False, True):
        path = session.locator.declaration_file_path(unstable)
        checks.append(EnvironmentCheck(path.name, path.is_file(), str(path) if path.is_file() else "missing"))
    return checks


def run_doctor(session: DenoSession, *, console: Console) -> int:
    """Render the diagnostics table and return an exit status (0 healthy)."""

    console.print(Rule("[bold cyan]denokit Doctor[/bold cyan]"))
    table = Table(title="Environment", box=box.SIMPLE, expand=True)
    table.add_column("Check", style="bold")
    table.add_column("Status", style="bold")
    table.add_column("Details", overflow="fold")
    checks = collect_checks(session)
    for check in checks:
        style = "green" if check.ok else "red"
        table.add_row(check.name, f"[{style}]{'ok' if check.ok else 'not ok'}[/]", check.detail)
    console.print(table)
    required = [check for check in checks if check.name in {"Executable", "Version", "Reported root"}]
    return 0 if all(check.ok for check in required) else 1


def doctor_command(
    cache_root: Path | None = CACHE_ROOT_OPTION,
    emoji: bool = EMOJI_OPTION,
) -> None:
    """Check that the toolchain is usable and agrees on the cache root."""

    session = build_session(cache_root=cache_root, unstable=None, emoji=emoji)
    console = get_console_manager().get(color=detect_tty(), emoji=emoji)
    raise typer.Exit(code=run_doctor(session, console=console))
