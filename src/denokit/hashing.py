# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Content addressing for remote modules stored in the Deno dependency cache.

Deno names each cached remote module after the SHA-256 digest of the URL's
path and query, stored beneath ``deps/<scheme>/<host>``. The helpers below
reproduce that naming so callers can predict where the toolchain keeps a
module without asking it. The path is canonicalised the way a WHATWG URL
parser would (dot segments removed, unsafe characters percent-encoded)
because the toolchain hashes the parsed form, not the raw input.
"""

from __future__ import annotations

import hashlib
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Final
from urllib.parse import quote, urlsplit

from .errors import InvalidModuleURLError

_SPECIAL_SCHEMES: Final[frozenset[str]] = frozenset({"ftp", "file", "http", "https", "ws", "wss"})
_PATH_SAFE: Final[str] = "!$%&'()*+,-./:;=@[\\]^_|~"
_QUERY_SAFE: Final[str] = "!$%&()*+,-./:;=?@[\\]^_`{|}~"
_STRIPPED_CHARS: Final[re.Pattern[str]] = re.compile(r"[\t\n\r]")
_DOUBLE_DOT: Final[frozenset[str]] = frozenset({"..", ".%2e", "%2e.", "%2e%2e"})
_SINGLE_DOT: Final[frozenset[str]] = frozenset({".", "%2e"})


@dataclass(frozen=True, slots=True)
class ModuleCacheKey:
    """Location of a remote module relative to the dependency cache root."""

    scheme: str
    host: str
    content_hash: str

    @property
    def relative_path(self) -> Path:
        """Return ``scheme/host/content_hash`` as a relative path."""

        return Path(self.scheme, self.host, self.content_hash)


def _remove_dot_segments(path: str) -> str:
    segments = path.split("/")[1:]
    output: list[str] = []
    for index, segment in enumerate(segments):
        last = index == len(segments) - 1
        lowered = segment.lower()
        if lowered in _DOUBLE_DOT:
            if output:
                output.pop()
            if last:
                output.append("")
        elif lowered in _SINGLE_DOT:
            if last:
                output.append("")
        else:
            output.append(segment)
    return "/" + "/".join(output)


def canonical_resource(url: str) -> str:
    """Return the path-and-query string of ``url`` used as the hash input.

    Args:
        url: Absolute module URL.

    Returns:
        str: Canonical path followed by ``?query`` when a query is present.

    Raises:
        InvalidModuleURLError: If ``url`` has no scheme or host, or its port
            is not a number in range.

    """

    parts = urlsplit(_STRIPPED_CHARS.sub("", url.strip()))
    if not parts.scheme or not parts.hostname:
        raise InvalidModuleURLError(url)
    try:
        parts.port  # noqa: B018 - raises ValueError for out-of-range ports
    except ValueError as exc:
        raise InvalidModuleURLError(url) from exc
    path = parts.path
    if parts.scheme.lower() in _SPECIAL_SCHEMES:
        path = path.replace("\\", "/")
    if not path.startswith("/"):
        path = f"/{path}"
    resource = quote(_remove_dot_segments(path), safe=_PATH_SAFE)
    if parts.query:
        resource += "?" + quote(parts.query, safe=_QUERY_SAFE)
    return resource


def hash_url(url: str) -> str:
    """Return the hex SHA-256 digest naming ``url`` inside the cache."""

    return hashlib.sha256(canonical_resource(url).encode("utf-8")).hexdigest()


def _hostname(url: str) -> str:
    hostname = urlsplit(_STRIPPED_CHARS.sub("", url.strip())).hostname or ""
    if ":" in hostname:
        return f"[{hostname}]"
    if hostname.isascii():
        return hostname
    try:
        return hostname.encode("idna").decode("ascii")
    except UnicodeError:
        return hostname


def address_for(url: str) -> ModuleCacheKey:
    """Return the cache key the toolchain derives for ``url``.

    Args:
        url: Absolute module URL such as ``https://deno.land/std/path/mod.ts``.

    Returns:
        ModuleCacheKey: Scheme without its colon, bare hostname and digest.

    Raises:
        InvalidModuleURLError: If ``url`` has no scheme or host.

    """

    digest = hash_url(url)
    scheme = urlsplit(url.strip()).scheme.lower()
    return ModuleCacheKey(scheme=scheme, host=_hostname(url), content_hash=digest)


__all__ = ["ModuleCacheKey", "address_for", "canonical_resource", "hash_url"]
