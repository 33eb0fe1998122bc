# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring the denokit commands."""

from __future__ import annotations

import typer

from ..logging import configure_diagnostics
from .doctor import doctor_command
from .fmt import fmt_command
from .info import info_command
from .resolve import resolve_command
from .types_cmd import types_command

app = typer.Typer(
    help="Inspect and drive the Deno cache, declarations and formatter.",
    add_completion=False,
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log diagnostic details to stderr.",
    ),
) -> None:
    """Configure diagnostics shared by every command."""

    configure_diagnostics(verbose)


app.command("info")(info_command)
app.command("fmt")(fmt_command)
app.command("types")(types_command)
app.command("resolve")(resolve_command)
app.command("doctor")(doctor_command)

__all__ = ["app"]
