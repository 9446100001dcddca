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

"""PEP 440 version comparison.

The comparator is a pure function of two Version values. It walks an
explicit, ordered chain of tie-break steps and returns at the first step
that tells the versions apart:

1. epoch (absent counts as 0)
2. release, after zero-padding the shorter tuple
3. pre-release (a dev-only version sorts below every pre-release)
4. post-release
5. dev-release
6. local label

Field declaration order on Version is never used to derive the ordering.

Example:
    ```python
    from pepver.versioning import compare_any, is_newer_any

    compare_any("1.0.dev0", "1.0a1")   # -1
    compare_any("1.5", "1.5.0")        # 0
    is_newer_any("1.3.9.post12", "1.3.9")  # True
    ```
"""

from __future__ import annotations

from enum import IntEnum
from functools import cmp_to_key
from typing import TYPE_CHECKING, Iterable, Union

if TYPE_CHECKING:
    from .version import Version

# Pre-release label ordering (lower = older)
_PRE_LABEL_RANK: dict[str, int] = {"a": 0, "b": 1, "rc": 2}


class Ordering(IntEnum):
    """Outcome of comparing two versions."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @property
    def symbol(self) -> str:
        return {-1: "<", 0: "==", 1: ">"}[self.value]


def _cmp(a, b) -> Ordering:
    return Ordering((a > b) - (a < b))


def _presence(a_present: bool, b_present: bool, *, present_sorts_first: bool) -> Ordering:
    """Order two versions when only one of them carries a segment."""
    if a_present == b_present:
        return Ordering.EQUAL
    if a_present:
        return Ordering.LESS if present_sorts_first else Ordering.GREATER
    return Ordering.GREATER if present_sorts_first else Ordering.LESS


# ----------------------------
# Tie-break steps
# ----------------------------


def _compare_epoch(a: Version, b: Version) -> Ordering:
    return _cmp(a.epoch or 0, b.epoch or 0)


def _compare_release(a: Version, b: Version) -> Ordering:
    """Compare release tuples element-wise with implied trailing zeros."""
    n = max(len(a.release), len(b.release))
    aa = a.release + (0,) * (n - len(a.release))
    bb = b.release + (0,) * (n - len(b.release))
    return _cmp(aa, bb)


def _is_bare_dev(v: Version) -> bool:
    # "1.0.dev0" sorts before "1.0a1"; "1.0.post1.dev0" does not.
    return v.pre is None and v.post is None and v.dev is not None


def _compare_pre(a: Version, b: Version) -> Ordering:
    a_bare, b_bare = _is_bare_dev(a), _is_bare_dev(b)
    if a_bare or b_bare:
        result = _presence(a_bare, b_bare, present_sorts_first=True)
        if result is not Ordering.EQUAL or a_bare:
            return result

    result = _presence(a.pre is not None, b.pre is not None, present_sorts_first=True)
    if result is not Ordering.EQUAL or a.pre is None:
        return result

    a_label, a_num = a.pre
    b_label, b_num = b.pre  # type: ignore[misc]
    result = _cmp(_PRE_LABEL_RANK[a_label], _PRE_LABEL_RANK[b_label])
    if result is not Ordering.EQUAL:
        return result
    return _cmp(a_num, b_num)


def _compare_post(a: Version, b: Version) -> Ordering:
    result = _presence(a.post is not None, b.post is not None, present_sorts_first=False)
    if result is not Ordering.EQUAL or a.post is None:
        return result
    return _cmp(a.post, b.post)


def _compare_dev(a: Version, b: Version) -> Ordering:
    result = _presence(a.dev is not None, b.dev is not None, present_sorts_first=True)
    if result is not Ordering.EQUAL or a.dev is None:
        return result
    return _cmp(a.dev, b.dev)


def local_key(local: str) -> tuple[tuple[int, int | str], ...]:
    """Build a sortable key for a normalized local label.

    Numeric segments are encoded as (1, int) and alphabetic ones as
    (0, str), so numbers compare numerically and sort after letters.
    Tuple comparison makes a shorter label with an equal prefix sort first.

    Example:
        ```python
        local_key("ubuntu.1")  # ((0, "ubuntu"), (1, 1))
        ```
    """
    return tuple(
        (1, int(part)) if part.isdigit() else (0, part) for part in local.split(".")
    )


def _compare_local(a: Version, b: Version) -> Ordering:
    result = _presence(a.local is not None, b.local is not None, present_sorts_first=False)
    if result is not Ordering.EQUAL or a.local is None:
        return result
    return _cmp(local_key(a.local), local_key(b.local))  # type: ignore[arg-type]


_STEPS = (
    _compare_epoch,
    _compare_release,
    _compare_pre,
    _compare_post,
    _compare_dev,
    _compare_local,
)


# ----------------------------
# Public API
# ----------------------------


def compare_versions(a: Version, b: Version) -> Ordering:
    """Compares two parsed versions under PEP 440 ordering.

    Args:
        a: Left-hand version.
        b: Right-hand version.

    Returns:
        Ordering.LESS, Ordering.EQUAL or Ordering.GREATER. Every pair of
        Version values is ordered; there is no "incomparable" result.
    """
    for step in _STEPS:
        result = step(a, b)
        if result is not Ordering.EQUAL:
            return result
    return Ordering.EQUAL


VersionLike = Union[str, "Version"]


def _coerce(value: VersionLike) -> Version:
    from .parser import parse_version
    from .version import Version

    if isinstance(value, Version):
        return value
    return parse_version(value)


def compare_any(a: VersionLike, b: VersionLike, *, verbose: bool = False) -> int:
    """Compares two versions given as strings or Version values.

    Args:
        a: Left-hand version (string or Version).
        b: Right-hand version (string or Version).
        verbose: If True, log the outcome through the global logger.

    Returns:
        -1 if a < b, 0 if equal, 1 if a > b.

    Raises:
        MalformedVersion: If either string is not a valid version.
    """
    va, vb = _coerce(a), _coerce(b)
    result = compare_versions(va, vb)

    if verbose:
        from pepver.logging import get_global_logger

        logger = get_global_logger()
        if result is Ordering.LESS:
            logger.verbose("COMPARE", f"{va.raw or str(va)!r} is older than {vb.raw or str(vb)!r}")
        elif result is Ordering.GREATER:
            logger.verbose("COMPARE", f"{va.raw or str(va)!r} is newer than {vb.raw or str(vb)!r}")
        else:
            logger.verbose("COMPARE", f"{va.raw or str(va)!r} is the same as {vb.raw or str(vb)!r}")
    return int(result)


def is_newer_any(remote: VersionLike, current: VersionLike | None) -> bool:
    """Decides if 'remote' should be considered newer than 'current'.

    Returns True iff remote > current. A current of None means nothing is
    installed yet, so any remote version counts as newer.
    """
    if current is None:
        return True
    return compare_any(remote, current) > 0


def sort_versions(items: Iterable[VersionLike], *, reverse: bool = False) -> list[Version]:
    """Parses (if needed) and sorts versions oldest first.

    Equal versions keep their input order (the sort is stable).
    """
    parsed = [_coerce(item) for item in items]
    return sorted(parsed, key=cmp_to_key(compare_versions), reverse=reverse)


def latest_version(items: Iterable[VersionLike]) -> Version | None:
    """Returns the newest version in 'items', or None when empty."""
    best: Version | None = None
    for item in items:
        candidate = _coerce(item)
        if best is None or compare_versions(candidate, best) is Ordering.GREATER:
            best = candidate
    return best
