# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""PEP 440 version string parser.

The parser walks the input left to right, matching one optional segment
at a time at the current position:

    [v] [N!] N(.N)* [pre] [post] [dev] [+local]

Each segment has its own small pattern. The patterns are compiled on first
use, exactly once, and kept in an immutable _Grammar tuple that every
thread shares read-only.

Normalization happens here, not at comparison time:

- "alpha" -> "a", "beta" -> "b", "c" / "pre" / "preview" -> "rc"
- a label with no number gets number 0 ("1.0rc" -> ("rc", 0))
- release numbers drop leading zeros ("1.05" -> (1, 5))
- the local label is lower-cased and "-" / "_" become "."

Example:
    ```python
    from pepver.versioning import parse_version

    v = parse_version("v1!2.0-Preview.3.post1+Ubuntu-1")
    v.epoch    # 1
    v.release  # (2, 0)
    v.pre      # ("rc", 3)
    v.post     # 1
    v.local    # "ubuntu.1"
    ```
"""

from __future__ import annotations

import re
import threading
from typing import NamedTuple

from pepver.exceptions import MalformedVersion
from pepver.logging import get_global_logger

from .version import Version

_PRE_ALIASES: dict[str, str] = {
    "a": "a",
    "alpha": "a",
    "b": "b",
    "beta": "b",
    "c": "rc",
    "rc": "rc",
    "pre": "rc",
    "preview": "rc",
}

_LOCAL_SEP = re.compile(r"[-_.]")


class _Grammar(NamedTuple):
    epoch: re.Pattern[str]
    release: re.Pattern[str]
    pre: re.Pattern[str]
    post: re.Pattern[str]
    dev: re.Pattern[str]
    local: re.Pattern[str]


_grammar: _Grammar | None = None
_grammar_lock = threading.Lock()


def _build_grammar() -> _Grammar:
    # Longer labels come first in each alternation ("alpha" before "a").
    # A separator before a number is only consumed when the number follows,
    # so "1.0a." leaves the "." behind and fails.
    return _Grammar(
        epoch=re.compile(r"(?P<epoch>[0-9]+)!", re.ASCII),
        release=re.compile(r"(?P<release>[0-9]+(?:\.[0-9]+)*)", re.ASCII),
        pre=re.compile(
            r"[-_.]?(?P<label>alpha|a|beta|b|preview|pre|c|rc)"
            r"(?:[-_.]?(?P<number>[0-9]+))?",
            re.IGNORECASE | re.ASCII,
        ),
        post=re.compile(
            r"-(?P<implicit>[0-9]+)"
            r"|[-_.]?(?P<label>post|rev|r)(?:[-_.]?(?P<number>[0-9]+))?",
            re.IGNORECASE | re.ASCII,
        ),
        dev=re.compile(
            r"[-_.]?(?P<label>dev)(?:[-_.]?(?P<number>[0-9]+))?",
            re.IGNORECASE | re.ASCII,
        ),
        local=re.compile(
            r"\+(?P<local>[a-z0-9]+(?:[-_.][a-z0-9]+)*)",
            re.IGNORECASE | re.ASCII,
        ),
    )


def _get_grammar() -> _Grammar:
    """Returns the shared grammar, compiling it on the first call only."""
    global _grammar
    if _grammar is None:
        with _grammar_lock:
            if _grammar is None:
                _grammar = _build_grammar()
    return _grammar


def _number(digits: str | None) -> int:
    return int(digits) if digits else 0


def parse_version(raw: str) -> Version:
    """Parses a PEP 440 version string into a Version.

    Args:
        raw: Version string, e.g. "1.5.3", "2!1.0.dev0", "1.5-preview1".
            Surrounding whitespace and a leading "v" are ignored.

    Returns:
        The parsed Version. Its raw attribute holds the input unchanged.

    Raises:
        MalformedVersion: If the input has no release segment, uses an
            unknown label, or has unconsumed trailing characters.
        TypeError: If raw is not a string.

    Example:
        ```python
        parse_version("1.05.3").release  # (1, 5, 3)
        parse_version("1.2.3-")          # raises MalformedVersion
        ```
    """
    if not isinstance(raw, str):
        raise TypeError(f"version must be a string, got {type(raw).__name__}")

    grammar = _get_grammar()
    text = raw.strip()
    pos = 1 if text[:1] in ("v", "V") else 0

    epoch: int | None = None
    m = grammar.epoch.match(text, pos)
    if m:
        epoch = int(m.group("epoch"))
        pos = m.end()

    m = grammar.release.match(text, pos)
    if not m:
        raise MalformedVersion(raw, "missing release segment")
    release = tuple(int(part) for part in m.group("release").split("."))
    pos = m.end()

    pre: tuple[str, int] | None = None
    m = grammar.pre.match(text, pos)
    if m:
        pre = (_PRE_ALIASES[m.group("label").lower()], _number(m.group("number")))
        pos = m.end()

    post: int | None = None
    m = grammar.post.match(text, pos)
    if m:
        post = _number(m.group("implicit") or m.group("number"))
        pos = m.end()

    dev: int | None = None
    m = grammar.dev.match(text, pos)
    if m:
        dev = _number(m.group("number"))
        pos = m.end()

    local: str | None = None
    m = grammar.local.match(text, pos)
    if m:
        local = _LOCAL_SEP.sub(".", m.group("local").lower())
        pos = m.end()

    if pos != len(text):
        raise MalformedVersion(raw, f"unexpected text {text[pos:]!r}")

    version = Version(
        release=release,
        epoch=epoch,
        pre=pre,
        post=post,
        dev=dev,
        local=local,
        raw=raw,
    )
    get_global_logger().debug("PARSE", f"{raw!r} -> {version}")
    return version
