# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the toolchain probe against a scripted executable."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from denokit.config import DenoSettings
from denokit.probe import ExternalToolProbe
from denokit.versioning import ToolchainVersion

if TYPE_CHECKING:
    from conftest import FakeDeno


def test_executable_path_finds_toolchain(fake_deno: FakeDeno) -> None:
    probe = ExternalToolProbe(DenoSettings())
    assert probe.executable_path() == fake_deno.executable


def test_executable_path_is_none_when_missing(empty_path: Path) -> None:
    probe = ExternalToolProbe(DenoSettings())
    assert probe.executable_path() is None
    assert probe.version() is None
    assert probe.type_declarations(False) is None
    assert probe.reported_cache_root() is None


def test_executable_path_is_searched_on_every_call(
    fake_deno: FakeDeno, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    probe = ExternalToolProbe(DenoSettings())
    assert probe.executable_path() == fake_deno.executable

    monkeypatch.setenv("PATH", str(tmp_path))
    assert probe.executable_path() is None


def test_version_is_parsed_from_eval(fake_deno: FakeDeno) -> None:
    version = ExternalToolProbe(DenoSettings()).version()
    assert version == ToolchainVersion(deno="1.2.0", v8="8.5.216", typescript="3.9.2")
    assert fake_deno.calls() == [["eval", "console.log(JSON.stringify(Deno.version))"]]


def test_version_reflects_the_installed_toolchain(fake_deno: FakeDeno) -> None:
    probe = ExternalToolProbe(DenoSettings())
    first = probe.version()
    fake_deno.set_version("1.3.0")
    second = probe.version()
    assert first is not None and first.deno == "1.2.0"
    assert second is not None and second.deno == "1.3.0"


def test_version_is_none_when_stderr_is_written(fake_deno: FakeDeno) -> None:
    fake_deno.configure(eval_stderr="warning: something odd\n")
    assert ExternalToolProbe(DenoSettings()).version() is None


def test_version_is_none_on_non_zero_exit(fake_deno: FakeDeno) -> None:
    fake_deno.configure(eval_exit=1)
    assert ExternalToolProbe(DenoSettings()).version() is None


def test_version_is_none_on_unparsable_output(fake_deno: FakeDeno) -> None:
    fake_deno.configure(eval_stdout="deno 1.2.0")
    assert ExternalToolProbe(DenoSettings()).version() is None


def test_type_arguments_gate_unstable_flag_on_version() -> None:
    probe = ExternalToolProbe(DenoSettings())
    recent = ToolchainVersion(deno="1.0.0", v8="", typescript="")
    old = ToolchainVersion(deno="0.42.0", v8="", typescript="")
    assert probe.type_arguments(True, recent) == ["types", "--unstable"]
    assert probe.type_arguments(False, recent) == ["types"]
    assert probe.type_arguments(True, old) == ["types"]
    assert probe.type_arguments(True, None) == ["types"]


def test_type_declarations_returns_raw_bytes(fake_deno: FakeDeno) -> None:
    probe = ExternalToolProbe(DenoSettings())
    assert probe.type_declarations(False) == b"declare namespace Deno {}\n"
    assert probe.type_declarations(True) == b"declare namespace Deno { export const unstable: true; }\n"
    type_calls = [call for call in fake_deno.calls() if call[0] == "types"]
    assert type_calls == [["types"], ["types", "--unstable"]]


def test_type_declarations_degrade_to_stable_on_old_toolchain(fake_deno: FakeDeno) -> None:
    fake_deno.set_version("0.42.0")
    assert ExternalToolProbe(DenoSettings()).type_declarations(True) == b"declare namespace Deno {}\n"


def test_type_declarations_none_on_failure(fake_deno: FakeDeno) -> None:
    fake_deno.configure(types_exit=1)
    assert ExternalToolProbe(DenoSettings()).type_declarations(False) is None


def test_reported_cache_root_reads_quoted_path(fake_deno: FakeDeno, tmp_path: Path) -> None:
    assert ExternalToolProbe(DenoSettings()).reported_cache_root() == tmp_path / "reported"


def test_reported_cache_root_reads_labelled_path(fake_deno: FakeDeno, tmp_path: Path) -> None:
    fake_deno.configure(info_line=f"\x1b[1mDENO_DIR location:\x1b[0m {tmp_path}/labelled")
    assert ExternalToolProbe(DenoSettings()).reported_cache_root() == tmp_path / "labelled"


def test_custom_executable_name(fake_deno: FakeDeno) -> None:
    probe = ExternalToolProbe(DenoSettings(executable=str(fake_deno.executable)))
    assert probe.executable_path() == fake_deno.executable
    assert probe.version() is not None
