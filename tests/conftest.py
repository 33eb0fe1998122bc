# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
import os
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

import pytest

_FAKE_DENO_BODY = r'''
import json
import os
import re
import sys

with open(os.environ["FAKE_DENO_STATE"], encoding="utf-8") as handle:
    state = json.load(handle)
args = sys.argv[1:]
with open(os.environ["FAKE_DENO_LOG"], "a", encoding="utf-8") as log:
    log.write(json.dumps(args) + "\n")

command = args[0] if args else ""
if command == "eval":
    if state.get("eval_stderr"):
        sys.stderr.write(state["eval_stderr"])
    sys.stdout.write(state["eval_stdout"] + "\n")
    sys.exit(state.get("eval_exit", 0))
if command == "types":
    key = "types_unstable" if "--unstable" in args else "types"
    sys.stdout.buffer.write(state[key].encode("utf-8"))
    sys.exit(state.get("types_exit", 0))
if command == "info":
    sys.stdout.write(state["info_line"] + "\n")
    sys.stdout.write("Remote modules cache: elsewhere\n")
    sys.exit(0)
if command == "fmt":
    source = sys.stdin.read()
    if state.get("fmt_error"):
        sys.stderr.write(state["fmt_error"])
        sys.exit(1)
    formatted = re.sub(r"\s+", " ", source.strip())
    if not formatted.endswith(";"):
        formatted += ";"
    sys.stdout.write(formatted + "\n")
    sys.exit(0)
sys.stderr.write("unknown command\n")
sys.exit(2)
'''

DEFAULT_VERSION = {"deno": "1.2.0", "v8": "8.5.216", "typescript": "3.9.2"}


@dataclass(slots=True)
class FakeDeno:
    """Handle for a scripted ``deno`` executable placed first on ``PATH``."""

    executable: Path
    state_path: Path
    log_path: Path

    def configure(self, **changes: object) -> None:
        state = json.loads(self.state_path.read_text(encoding="utf-8"))
        state.update(changes)
        self.state_path.write_text(json.dumps(state), encoding="utf-8")

    def set_version(self, deno: str) -> None:
        self.configure(eval_stdout=json.dumps({**DEFAULT_VERSION, "deno": deno}))

    def calls(self) -> list[list[str]]:
        if not self.log_path.exists():
            return []
        return [json.loads(line) for line in self.log_path.read_text(encoding="utf-8").splitlines()]


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop variables that would leak the developer's Deno setup into tests."""

    for name in ("DENO_DIR", "DENOKIT_EXECUTABLE", "DENOKIT_UNSTABLE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def empty_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``PATH`` at an empty directory so no toolchain can be found."""

    bin_dir = tmp_path / "empty-bin"
    bin_dir.mkdir()
    monkeypatch.setenv("PATH", str(bin_dir))
    return bin_dir


@pytest.fixture
def fake_deno(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[FakeDeno]:
    """Install a scripted ``deno`` that answers eval/types/info/fmt."""

    if os.name == "nt":
        pytest.skip("shebang-based fake executables require a POSIX platform")
    bin_dir = tmp_path / "fake-bin"
    bin_dir.mkdir()
    executable = bin_dir / "deno"
    executable.write_text(f"#!{sys.executable}\n{_FAKE_DENO_BODY}", encoding="utf-8")
    executable.chmod(0o755)

    state_path = tmp_path / "fake-deno-state.json"
    state_path.write_text(
        json.dumps(
            {
                "eval_stdout": json.dumps(DEFAULT_VERSION),
                "types": "declare namespace Deno {}\n",
                "types_unstable": "declare namespace Deno { export const unstable: true; }\n",
                "info_line": f'DENO_DIR location: "{tmp_path / "reported"}"',
            }
        ),
        encoding="utf-8",
    )
    log_path = tmp_path / "fake-deno-calls.jsonl"
    monkeypatch.setenv("FAKE_DENO_STATE", str(state_path))
    monkeypatch.setenv("FAKE_DENO_LOG", str(log_path))
    monkeypatch.setenv("PATH", str(bin_dir))
    yield FakeDeno(executable=executable, state_path=state_path, log_path=log_path)
