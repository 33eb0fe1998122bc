# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Conformance checks against a real Deno installation, skipped when absent."""

from __future__ import annotations

import shutil

import pytest

from denokit import DenoSession

pytestmark = [
    pytest.mark.toolchain,
    pytest.mark.skipif(shutil.which("deno") is None, reason="deno is not installed"),
]


def test_computed_cache_root_matches_deno_info() -> None:
    session = DenoSession()
    assert session.probe.reported_cache_root() == session.cache_root()


def test_version_is_reported() -> None:
    version = DenoSession().current_version()
    assert version is not None
    assert version.raw.startswith(f"deno: {version.deno}\n")


def test_type_declarations_are_emitted() -> None:
    session = DenoSession()
    assert session.probe.type_declarations(False)
    assert session.probe.type_declarations(True)


@pytest.mark.asyncio
async def test_format_normalises_spacing_and_semicolons() -> None:
    formatted = await DenoSession().format('const test =     "hello world"')
    assert formatted == 'const test = "hello world";\n'
