# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` and ``asyncio`` process execution."""

from __future__ import annotations

import asyncio
import shutil

# Bandit: subprocess usage is intentional; commands are argument lists and
# ``shell=True`` is never used.
import subprocess  # nosec B404
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from subprocess import CompletedProcess as _CompletedProcess  # nosec B404


class SubprocessExecutionError(RuntimeError):
    """Raised when a subprocess exits with a non-zero status while ``check`` is true."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int,
        stdout: str | bytes | None,
        stderr: str | bytes | None,
    ) -> None:
        super().__init__(
            f"Command '{command[0]}' exited with status {returncode}. stderr: {_ensure_text(stderr) or '<none>'}",
        )
        self.command = tuple(command)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


@dataclass(frozen=True, slots=True)
class StreamResult:
    """Output accumulated from a process driven through its standard streams."""

    returncode: int
    stdout: str
    stderr: str


def _ensure_text(value: str | bytes | None) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return value.decode(errors="ignore")


def _normalize_args(args: Sequence[str]) -> list[str]:
    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]

    resolved = shutil.which(head)
    if resolved is None:
        msg = f"Executable '{head}' was not found on PATH"
        raise FileNotFoundError(msg)
    return [resolved, *rest]


def run_command(
    args: Sequence[str],
    *,
    check: bool = True,
    text: bool = True,
) -> _CompletedProcess[str] | _CompletedProcess[bytes]:
    """Execute *args* to completion, capturing both output streams.

    The call blocks for the lifetime of the subprocess; no timeout is applied.

    Raises:
        ValueError: If ``args`` is empty.
        FileNotFoundError: If the executable cannot be resolved.
        OSError: If the process cannot be spawned.
        SubprocessExecutionError: If ``check`` is true and the exit status is non-zero.
    """

    normalized = _normalize_args(args)
    # Bandit: arguments are passed as a list without shell expansion.
    completed = subprocess.run(  # nosec B603
        normalized,
        check=False,
        capture_output=True,
        text=text,
        stdin=subprocess.DEVNULL,
    )
    if check and completed.returncode != 0:
        raise SubprocessExecutionError(normalized, completed.returncode, completed.stdout, completed.stderr)
    return completed


async def stream_command(
    args: Sequence[str],
    input_text: str,
) -> StreamResult:
    """Run *args* with ``input_text`` piped to stdin and return its output.

    Input is written in a single write and stdin is closed before output is
    drained; stdout and stderr are read concurrently by
    :meth:`asyncio.subprocess.Process.communicate`.

    Raises:
        ValueError: If ``args`` is empty.
        FileNotFoundError: If the executable cannot be resolved.
        OSError: If the process cannot be spawned.
    """

    normalized = _normalize_args(args)
    process = await asyncio.create_subprocess_exec(
        *normalized,
        stdin=asyncio.subprocess.PIPE,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    stdout, stderr = await process.communicate(input_text.encode("utf-8"))
    returncode = process.returncode if process.returncode is not None else await process.wait()
    return StreamResult(
        returncode=returncode,
        stdout=stdout.decode("utf-8", errors="replace"),
        stderr=stderr.decode("utf-8", errors="replace"),
    )


__all__ = ["StreamResult", "SubprocessExecutionError", "run_command", "stream_command"]
