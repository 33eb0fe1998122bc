# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers for normalising filesystem paths before comparison."""

from __future__ import annotations

import os
import re
from os import PathLike
from pathlib import Path
from typing import Final

_Pathish = str | PathLike[str] | Path
_LOWER_DRIVE_PATTERN: Final[re.Pattern[str]] = re.compile(r"^([a-z]):\\")


def normalize_filepath(path: _Pathish) -> Path:
    """Return ``path`` normalised for cross-platform comparison.

    Lower-case Windows drive letters are upper-cased, forward slashes are
    converted to the native separator and redundant segments are collapsed.
    The filesystem is never consulted, so the path does not need to exist.

    Args:
        path: Filesystem path supplied by the caller.

    Returns:
        Path: Normalised path.

    Raises:
        ValueError: If ``path`` is ``None`` or empty.

    """

    if path is None:
        raise ValueError("path must not be None")
    raw = os.fspath(path)
    if not raw:
        raise ValueError("path must not be empty")
    raw = _LOWER_DRIVE_PATTERN.sub(lambda match: f"{match.group(1).upper()}:\\", raw)
    raw = raw.replace("/", os.sep)
    return Path(os.path.normpath(raw))


def is_within(path: _Pathish, root: _Pathish) -> bool:
    """Return ``True`` when ``path`` equals ``root`` or lies beneath it.

    Both arguments are normalised first; the comparison is component-wise so
    ``/cache/deno2`` is not considered inside ``/cache/deno``. An empty
    ``path`` is never inside anything.

    """

    if not os.fspath(path):
        return False
    candidate = normalize_filepath(path)
    base = normalize_filepath(root)
    return candidate == base or base in candidate.parents


__all__ = ["is_within", "normalize_filepath"]
