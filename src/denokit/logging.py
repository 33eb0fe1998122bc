# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers with optional colour and emoji support."""

from __future__ import annotations

import logging as _stdlib_logging

from rich.console import Console
from rich.logging import RichHandler
from rich.rule import Rule
from rich.text import Text

from .console import detect_tty, get_console_manager


def _print_line(
    msg: str,
    *,
    style: str | None,
    use_emoji: bool,
    use_color: bool | None = None,
    stderr: bool = False,
) -> None:
    color_enabled = detect_tty(stderr=stderr) if use_color is None else use_color
    console = get_console_manager().get(color=color_enabled, emoji=use_emoji, stderr=stderr)
    text = Text(msg)
    if style and color_enabled:
        text.stylize(style)
    console.print(text)


def section(title: str, *, use_color: bool) -> None:
    """Render a section header to delineate console output blocks."""

    console = get_console_manager().get(color=use_color, emoji=True)
    if use_color:
        console.print()
        console.print(Rule(title))
    else:
        console.print(f"\n--- {title} ---")


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an informational message."""

    prefix = "ℹ️ " if use_emoji else ""
    _print_line(f"{prefix}{msg}", style="cyan", use_emoji=use_emoji, use_color=use_color)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a success message."""

    prefix = "✅ " if use_emoji else ""
    _print_line(f"{prefix}{msg}", style="green", use_emoji=use_emoji, use_color=use_color)


def warn(
    msg: str,
    *,
    use_emoji: bool,
    use_color: bool | None = None,
    stderr: bool = False,
) -> None:
    """Emit a warning message.

    Set ``stderr`` to keep the message out of piped standard output.
    """

    prefix = "⚠️ " if use_emoji else ""
    _print_line(f"{prefix}{msg}", style="yellow", use_emoji=use_emoji, use_color=use_color, stderr=stderr)


def fail(
    msg: str,
    *,
    use_emoji: bool,
    use_color: bool | None = None,
    stderr: bool = False,
) -> None:
    """Emit an error message.

    Set ``stderr`` to keep the message out of piped standard output.
    """

    prefix = "❌ " if use_emoji else ""
    _print_line(f"{prefix}{msg}", style="red", use_emoji=use_emoji, use_color=use_color, stderr=stderr)


def configure_diagnostics(verbose: bool) -> None:
    """Route ``denokit`` diagnostic records to stderr through Rich.

    Args:
        verbose: Emit debug records when true, warnings and above otherwise.
    """

    logger = _stdlib_logging.getLogger("denokit")
    logger.setLevel(_stdlib_logging.DEBUG if verbose else _stdlib_logging.WARNING)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(console=Console(stderr=True), show_time=False, show_path=False)
        handler.setFormatter(_stdlib_logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)


__all__ = ["configure_diagnostics", "fail", "info", "ok", "section", "warn"]
