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

"""Public API return types for pepver.

Domain types (Version, Metadata) live next to their logic; this module
only holds results that combine them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pepver.versioning import Ordering, Version, compare_versions


@dataclass(frozen=True)
class CompareResult:
    """Result from comparing two versions.

    Attributes:
        left: Left-hand version.
        right: Right-hand version.
        ordering: How left relates to right.
    """

    left: Version
    right: Version
    ordering: Ordering

    @classmethod
    def of(cls, left: Version, right: Version) -> CompareResult:
        return cls(left=left, right=right, ordering=compare_versions(left, right))

    @property
    def symbol(self) -> str:
        """Comparison operator for display: "<", "==" or ">"."""
        return self.ordering.symbol

    def to_dict(self) -> dict[str, Any]:
        return {
            "left": str(self.left),
            "right": str(self.right),
            "result": int(self.ordering),
            "symbol": self.symbol,
        }
