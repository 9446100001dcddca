"""
PEP 440 version parsing and comparison for pepver.

This package turns free-form version strings into structured Version
values and orders them under PEP 440's total ordering. It performs no
file or network I/O.

Modules
-------
version : module
    The immutable Version dataclass, canonical formatting and rich comparison.
parser : module
    Segment-by-segment grammar walk with alias normalization.
compare : module
    Ordered tie-break chain (epoch, release, pre, post, dev, local).

Public API
----------
Version : dataclass
    Parsed version with epoch, release, pre, post, dev, local and raw.
Ordering : IntEnum
    LESS (-1), EQUAL (0), GREATER (1).
parse_version : function
    Parse a string into a Version, raising MalformedVersion on bad input.
compare_versions : function
    Compare two Version values, returning an Ordering.
compare_any : function
    Compare two versions given as strings or Version values (-1, 0, 1).
is_newer_any : function
    Check if a remote version is newer than the current one.
sort_versions : function
    Sort versions oldest first.
latest_version : function
    Pick the newest version from an iterable.

Ordering Rules
--------------
1. **Epoch**: "1!1.0" > "2024.1.1" (absent epoch counts as 0)
2. **Release**: compared numerically, zero-padded: "1.5" == "1.5.0"
3. **Pre-release**: "1.0.dev0" < "1.0a1" < "1.0b1" < "1.0rc1" < "1.0"
4. **Post-release**: "1.0" < "1.0.post1"
5. **Dev-release**: "1.0a1.dev0" < "1.0a1"
6. **Local**: "1.0" < "1.0+abc" < "1.0+abc.5"

Examples
--------
    >>> from pepver.versioning import compare_any, parse_version
    >>> parse_version("1.05.3").release
    (1, 5, 3)
    >>> compare_any("1.5.3-preview1", "1.5.3rc1")
    0
    >>> parse_version("1.3.9.post12") > parse_version("1.3.9")
    True
"""

from .compare import (
    Ordering,
    compare_any,
    compare_versions,
    is_newer_any,
    latest_version,
    sort_versions,
)
from .parser import parse_version
from .version import PRE_LABELS, Version

__all__ = [
    "Version",
    "Ordering",
    "PRE_LABELS",
    "parse_version",
    "compare_versions",
    "compare_any",
    "is_newer_any",
    "sort_versions",
    "latest_version",
]
