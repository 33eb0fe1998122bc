# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for console logging helpers."""

from __future__ import annotations

import logging

import pytest
from rich.logging import RichHandler

from denokit.logging import configure_diagnostics, fail, info, ok, section, warn


def test_helpers_honour_emoji_flag(capsys: pytest.CaptureFixture[str]) -> None:
    info("probing toolchain", use_emoji=False)
    ok("declarations up to date", use_emoji=True)
    warn("unstable flag ignored", use_emoji=False)
    fail("deno not found", use_emoji=True)

    out = capsys.readouterr().out
    assert "probing toolchain" in out
    assert "✅ declarations up to date" in out
    assert "⚠️" not in out
    assert "❌ deno not found" in out


def test_section_without_colour_uses_plain_header(capsys: pytest.CaptureFixture[str]) -> None:
    section("Toolchain", use_color=False)
    assert "--- Toolchain ---" in capsys.readouterr().out


def test_configure_diagnostics_installs_single_handler() -> None:
    logger = logging.getLogger("denokit")
    configure_diagnostics(verbose=True)
    configure_diagnostics(verbose=False)

    handlers = [handler for handler in logger.handlers if isinstance(handler, RichHandler)]
    assert len(handlers) == 1
    assert logger.level == logging.WARNING


def test_fail_can_target_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    fail("formatter exited", use_emoji=False, stderr=True)
    warn("old toolchain", use_emoji=False, stderr=True)

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "formatter exited" in captured.err
    assert "old toolchain" in captured.err
