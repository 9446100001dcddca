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

"""Structured PEP 440 version value.

A Version is produced once by the parser and afterwards only compared and
formatted. It is a frozen dataclass; equality, ordering and hashing look
at (epoch, release, pre, post, dev, local) and never at the raw input, so
"1.5.3" and "1.05.3" are the same version.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pepver.exceptions import MalformedVersion

from .compare import Ordering, compare_versions, local_key

# Canonical pre-release labels
PRE_LABELS: tuple[str, ...] = ("a", "b", "rc")


@dataclass(frozen=True, eq=False)
class Version:
    """A parsed PEP 440 version.

    Attributes:
        release: Release numbers, e.g. (1, 5, 3). Never empty, never padded.
        epoch: Epoch number, or None when the input had no "N!" prefix.
        pre: (label, number) with label in {"a", "b", "rc"}, or None.
        post: Post-release number, or None.
        dev: Dev-release number, or None.
        local: Normalized local label ("ubuntu.1"), or None.
        raw: The original input string. Diagnostic only.

    """

    release: tuple[int, ...]
    epoch: int | None = None
    pre: tuple[str, int] | None = None
    post: int | None = None
    dev: int | None = None
    local: str | None = None
    raw: str = field(default="", repr=False)

    def __post_init__(self) -> None:
        if not self.release:
            raise MalformedVersion(self.raw, "release segment is empty")
        if self.pre is not None and self.pre[0] not in PRE_LABELS:
            raise MalformedVersion(self.raw, f"unknown pre-release label {self.pre[0]!r}")

    # ----------------------------
    # Comparison
    # ----------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other) is Ordering.EQUAL

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other) is not Ordering.EQUAL

    def __lt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other) is Ordering.LESS

    def __le__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other) is not Ordering.GREATER

    def __gt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other) is Ordering.GREATER

    def __ge__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other) is not Ordering.LESS

    def __hash__(self) -> int:
        # Trailing zeros are dropped so that hash(1.5) == hash(1.5.0).
        release = self.release
        while len(release) > 1 and release[-1] == 0:
            release = release[:-1]
        local = local_key(self.local) if self.local is not None else None
        return hash((self.epoch or 0, release, self.pre, self.post, self.dev, local))

    # ----------------------------
    # Formatting
    # ----------------------------

    def __str__(self) -> str:
        local = f"+{self.local}" if self.local is not None else ""
        return self.public + local

    @property
    def base_version(self) -> str:
        """Epoch and release only, e.g. "1!2.0" for "1!2.0rc1.post3"."""
        epoch = f"{self.epoch}!" if self.epoch is not None else ""
        return epoch + ".".join(str(n) for n in self.release)

    @property
    def public(self) -> str:
        """Canonical form without the local label."""
        parts = [self.base_version]
        if self.pre is not None:
            parts.append(f"{self.pre[0]}{self.pre[1]}")
        if self.post is not None:
            parts.append(f".post{self.post}")
        if self.dev is not None:
            parts.append(f".dev{self.dev}")
        return "".join(parts)

    # ----------------------------
    # Convenience
    # ----------------------------

    @property
    def epoch_value(self) -> int:
        return self.epoch or 0

    @property
    def is_prerelease(self) -> bool:
        return self.pre is not None or self.dev is not None

    @property
    def is_postrelease(self) -> bool:
        return self.post is not None

    @property
    def is_devrelease(self) -> bool:
        return self.dev is not None

    def to_dict(self) -> dict[str, Any]:
        """Returns a JSON-ready mapping of all components."""
        return {
            "raw": self.raw,
            "normalized": str(self),
            "epoch": self.epoch,
            "release": list(self.release),
            "pre": list(self.pre) if self.pre is not None else None,
            "post": self.post,
            "dev": self.dev,
            "local": self.local,
        }
