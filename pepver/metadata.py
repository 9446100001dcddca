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

"""Package metadata (PKG-INFO / METADATA) reading for pepver.

A metadata document is a block of "Field-Name: value" header lines,
optionally followed by a blank line and a free-form description body:

    Metadata-Version: 2.1
    Name: pandas
    Version: 1.5.3
    Classifier: Programming Language :: Python :: 3
    Classifier: Operating System :: OS Independent

    pandas is a fast, powerful, flexible ...

Only "Version" and "Metadata-Version" are interpreted; they go through
parse_version. Every other field is kept as an opaque string, or a tuple
of strings for fields that may appear more than once. Requirement
expressions ("Requires-Dist", "Requires-Python") are not parsed.

Example:
    ```python
    from pepver.metadata import parse_metadata

    meta = parse_metadata("Metadata-Version: 2.1\\nName: pandas\\nVersion: 1.5.3")
    meta.name              # "pandas"
    meta.version.release   # (1, 5, 3)
    meta.metadata_version  # Version(release=(2, 1), ...)
    ```
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
import re
from typing import Any, Iterable

from pepver.exceptions import MetadataError
from pepver.logging import get_global_logger
from pepver.versioning import Version, parse_version

__all__ = [
    "Metadata",
    "CORE_FIELDS",
    "extract_field",
    "extract_all",
    "parse_metadata",
    "parse_metadata_file",
]

# Fields every document must carry
CORE_FIELDS: tuple[str, ...] = ("Metadata-Version", "Name", "Version")

_SINGLE = "single"
_MULTI = "multi"
_KEYWORDS = "keywords"

# header name (lower-case) -> (Metadata attribute, value kind)
_FIELD_MAP: dict[str, tuple[str, str]] = {
    "metadata-version": ("metadata_version", _SINGLE),
    "name": ("name", _SINGLE),
    "version": ("version", _SINGLE),
    "dynamic": ("dynamic", _MULTI),
    "platform": ("platforms", _MULTI),
    "supported-platform": ("supported_platforms", _MULTI),
    "summary": ("summary", _SINGLE),
    "description": ("description", _SINGLE),
    "description-content-type": ("description_content_type", _SINGLE),
    "keywords": ("keywords", _KEYWORDS),
    "home-page": ("home_page", _SINGLE),
    "download-url": ("download_url", _SINGLE),
    "author": ("author", _SINGLE),
    "author-email": ("author_email", _SINGLE),
    "maintainer": ("maintainer", _SINGLE),
    "maintainer-email": ("maintainer_email", _SINGLE),
    "license": ("license", _SINGLE),
    "classifier": ("classifiers", _MULTI),
    "requires-dist": ("requires_dist", _MULTI),
    "requires-python": ("requires_python", _SINGLE),
    "requires-external": ("requires_external", _MULTI),
    "project-url": ("project_urls", _MULTI),
    "provides-extra": ("provides_extra", _MULTI),
}

_HEADER_LINE = re.compile(r"^(?P<name>[A-Za-z0-9][A-Za-z0-9_-]*):[ \t]*(?P<value>.*)$")
# Continuation lines carry an 8-column prefix: 8 spaces or 7 spaces and a "|"
_CONTINUATION_PREFIX = re.compile(r"^(?: {8}| {7}\|)")


@dataclass(frozen=True)
class Metadata:
    """Fields read from a package metadata document.

    Attributes:
        metadata_version: Parsed "Metadata-Version" (e.g., 2.1).
        name: Distribution name, as written.
        version: Parsed "Version".

    All remaining attributes are optional and hold raw strings or tuples of
    raw strings; they are None when the field is absent.
    """

    metadata_version: Version
    name: str
    version: Version
    dynamic: tuple[str, ...] | None = None
    platforms: tuple[str, ...] | None = None
    supported_platforms: tuple[str, ...] | None = None
    summary: str | None = None
    description: str | None = None
    description_content_type: str | None = None
    keywords: tuple[str, ...] | None = None
    home_page: str | None = None
    download_url: str | None = None
    author: str | None = None
    author_email: str | None = None
    maintainer: str | None = None
    maintainer_email: str | None = None
    license: str | None = None
    classifiers: tuple[str, ...] | None = None
    requires_dist: tuple[str, ...] | None = None
    requires_python: str | None = None
    requires_external: tuple[str, ...] | None = None
    project_urls: tuple[str, ...] | None = None
    provides_extra: tuple[str, ...] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Returns a JSON-ready mapping, skipping absent optional fields."""
        out: dict[str, Any] = {
            "metadata_version": str(self.metadata_version),
            "name": self.name,
            "version": str(self.version),
        }
        for f in fields(self):
            if f.name in out:
                continue
            value = getattr(self, f.name)
            if value is not None:
                out[f.name] = list(value) if isinstance(value, tuple) else value
        return out


# ----------------------------
# Header scanning
# ----------------------------


def _split_headers(text: str) -> tuple[list[tuple[str, str]], str]:
    """Splits a document into (name, value) header pairs and the body.

    Headers end at the first blank line. Continuation lines (starting with
    whitespace) are appended to the previous header's value on a new line.
    """
    logger = get_global_logger()
    headers: list[tuple[str, str]] = []
    lines = text.splitlines()

    for index, line in enumerate(lines):
        if not line.strip():
            return headers, "\n".join(lines[index + 1 :])

        if line[:1] in (" ", "\t"):
            if not headers:
                logger.warning("METADATA", f"Ignoring continuation line before any field: {line!r}")
                continue
            name, value = headers[-1]
            m = _CONTINUATION_PREFIX.match(line)
            extra = line[m.end() :] if m else line.strip()
            headers[-1] = (name, f"{value}\n{extra}")
            continue

        m = _HEADER_LINE.match(line)
        if not m:
            logger.warning("METADATA", f"Ignoring malformed header line: {line!r}")
            continue
        headers.append((m.group("name"), m.group("value").strip()))

    return headers, ""


def extract_field(text: str, field_name: str) -> str | None:
    """Returns the value of the first header named 'field_name'.

    Names match case-insensitively. Only the header block is searched; the
    description body after the first blank line is ignored.

    Args:
        text: Metadata document text.
        field_name: Header name, e.g. "Version".

    Returns:
        The stripped value, or None if the field is absent.
    """
    wanted = field_name.lower()
    headers, _ = _split_headers(text)
    for name, value in headers:
        if name.lower() == wanted:
            return value
    return None


def extract_all(text: str, field_name: str) -> list[str]:
    """Returns every value of a header that may repeat (e.g., "Classifier")."""
    wanted = field_name.lower()
    headers, _ = _split_headers(text)
    return [value for name, value in headers if name.lower() == wanted]


# ----------------------------
# Parsing
# ----------------------------


def _split_keywords(value: str) -> list[str]:
    parts = value.split(",") if "," in value else value.split()
    return [p.strip() for p in parts if p.strip()]


def parse_metadata(
    text: str,
    *,
    required_fields: Iterable[str] = CORE_FIELDS,
) -> Metadata:
    """Parses a metadata document into a Metadata record.

    Args:
        text: Full document text.
        required_fields: Field names that must be present with a non-empty
            value. "Metadata-Version", "Name" and "Version" are always
            checked too, since a Metadata record cannot exist without them.

    Returns:
        A Metadata record. Unknown header names are skipped.

    Raises:
        MetadataError: If a required field is missing or empty.
        MalformedVersion: If "Version" or "Metadata-Version" is not a valid
            PEP 440 version.
    """
    logger = get_global_logger()
    headers, body = _split_headers(text)

    seen: dict[str, str] = {}
    values: dict[str, Any] = {}
    for name, value in headers:
        key = name.lower()
        seen.setdefault(key, value)
        if key not in _FIELD_MAP:
            logger.debug("METADATA", f"Skipping field {name!r}")
            continue

        attr, kind = _FIELD_MAP[key]
        if kind == _MULTI:
            values.setdefault(attr, []).append(value)
        elif kind == _KEYWORDS:
            values.setdefault(attr, []).extend(_split_keywords(value))
        elif attr in values:
            logger.warning("METADATA", f"Duplicate field {name!r}; keeping the first value")
        else:
            values[attr] = value

    required = list(required_fields)
    listed = {name.lower() for name in required}
    required += [name for name in CORE_FIELDS if name.lower() not in listed]
    for field_name in required:
        if not seen.get(field_name.lower(), "").strip():
            raise MetadataError(f"missing required field: {field_name}", field=field_name)

    if "description" not in values and body.strip():
        values["description"] = body.strip("\n")

    for attr, value in values.items():
        if isinstance(value, list):
            values[attr] = tuple(value)

    values["metadata_version"] = parse_version(values["metadata_version"])
    values["version"] = parse_version(values["version"])

    logger.verbose(
        "METADATA",
        f"Parsed {values['name']} {values['version']} "
        f"(Metadata-Version {values['metadata_version']}, {len(headers)} header(s))",
    )
    return Metadata(**values)


def parse_metadata_file(
    path: Path,
    *,
    required_fields: Iterable[str] = CORE_FIELDS,
) -> Metadata:
    """Reads and parses a metadata file (UTF-8).

    Raises:
        MetadataError: If the file does not exist or cannot be read, or if
            a required field is missing.
        MalformedVersion: If a version field is malformed.
    """
    path = Path(path)
    get_global_logger().verbose("METADATA", f"Reading: {path}")
    if not path.is_file():
        raise MetadataError(f"metadata file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as err:
        raise MetadataError(f"could not read metadata file {path}: {err}") from err
    return parse_metadata(text, required_fields=required_fields)
