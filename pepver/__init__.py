"""
pepver - PEP 440 versions and package metadata

A Python library and CLI for parsing package version identifiers that
follow PEP 440 and ordering them under that scheme's total order. It also
reads the name and version fields of PKG-INFO / METADATA documents.

pepver provides:
  - A strict, segment-by-segment PEP 440 parser with alias normalization
  - An explicit six-step comparator (epoch, release, pre, post, dev, local)
  - Immutable, hashable Version values with canonical formatting
  - A metadata reader for "Field: value" documents
  - Optional YAML configuration (pepver.yaml)

Quick Start
-----------
Compare two versions:

    $ pepver compare 1.0.dev0 1.0a1

Read a metadata file:

    $ pepver metadata PKG-INFO

For full CLI documentation:

    $ pepver --help

Package Structure
-----------------
cli : module
    Command-line interface with argparse.
versioning : package
    Version parsing and comparison.
metadata : module
    Metadata document field extraction.
config : package
    YAML configuration loading and merging.
exceptions : module
    PepverError hierarchy.

Public API
----------
    from pepver import parse_version, compare_any, Version
    from pepver.metadata import parse_metadata

Project Information
-------------------
Author: Roger Cibrian
License: Apache-2.0
"""

__version__ = "0.1.0"
__author__ = "Roger Cibrian"
__license__ = "Apache-2.0"
__description__ = "PEP 440 version parsing, comparison and metadata reading"

# Re-export commonly used names for convenience
from pepver.exceptions import MalformedVersion, MetadataError, PepverError
from pepver.metadata import Metadata, parse_metadata
from pepver.versioning import (
    Ordering,
    Version,
    compare_any,
    compare_versions,
    is_newer_any,
    parse_version,
)

__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "__description__",
    "Version",
    "Ordering",
    "Metadata",
    "parse_version",
    "compare_versions",
    "compare_any",
    "is_newer_any",
    "parse_metadata",
    "PepverError",
    "MalformedVersion",
    "MetadataError",
]
