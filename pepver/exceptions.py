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

"""Exception hierarchy for pepver.

This module defines a small exception hierarchy that allows library users
to distinguish between the kinds of failure pepver can report. All
exceptions inherit from PepverError, allowing users to catch every pepver
error with a single except clause if needed.

Example:
    Catching a malformed version:
        ```python
        from pepver.exceptions import MalformedVersion
        from pepver.versioning import parse_version

        try:
            version = parse_version("1.2.3-")
        except MalformedVersion as e:
            print(f"Bad version: {e.raw!r}")
        ```

    Catching all pepver errors:
        ```python
        from pepver.exceptions import PepverError
        from pepver.metadata import parse_metadata_file

        try:
            metadata = parse_metadata_file(Path("PKG-INFO"))
        except PepverError as e:
            print(f"pepver error: {e}")
        ```
"""

from __future__ import annotations

__all__ = [
    "PepverError",
    "MalformedVersion",
    "MetadataError",
    "ConfigError",
]


class PepverError(Exception):
    """Base exception for all pepver errors.

    All pepver-specific exceptions inherit from this class, allowing users
    to catch all pepver errors with a single except clause if needed.
    """

    pass


class MalformedVersion(PepverError, ValueError):
    """Raised when a string is not a well-formed PEP 440 version.

    This exception is raised when there are problems with:

    - A missing release segment (e.g., "", "abc", "v")
    - An unrecognized pre/post/dev label (e.g., "1.0gamma1")
    - A dangling separator or other trailing characters (e.g., "1.2.3-")
    - Non-numeric characters where a number is required (e.g., "1.x")

    It also subclasses ValueError so callers that treat bad input
    generically keep working.

    Attributes:
        raw: The offending input string, exactly as given.

    Example:
        Reporting the offending input:
            ```python
            try:
                parse_version("1.0.0-")
            except MalformedVersion as e:
                print(e.raw)  # Output: 1.0.0-
            ```
    """

    def __init__(self, raw: str, reason: str | None = None) -> None:
        self.raw = raw
        self.reason = reason
        message = f"Malformed version: {raw!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class MetadataError(PepverError):
    """Raised for problems reading a package metadata document.

    This exception is raised when there are problems with:

    - A required field missing from the document (e.g., no "Version:" line)
    - An empty required field value
    - A metadata file that cannot be found or read

    A malformed value inside the "Version" or "Metadata-Version" field is
    reported as MalformedVersion instead.

    Attributes:
        field: Name of the offending field, or None when the problem is not
            tied to a single field.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


class ConfigError(PepverError):
    """Raised for configuration-related errors.

    This exception is raised when there are problems with:

    - YAML parse errors (syntax errors, invalid structure)
    - An explicitly requested config file that does not exist
    - Empty config files or a top level that is not a mapping
    - Invalid values (unknown output format, required_fields not a list, unknown keys)

    Example:
        Catching configuration errors:
            ```python
            from pepver.exceptions import ConfigError

            try:
                config = load_effective_config(Path("pepver.yaml"))
            except ConfigError as e:
                print(f"Config error: {e}")
            ```
    """

    pass
