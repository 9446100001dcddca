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

"""Command-line interface for pepver.

Commands:

    parse: Show the components of one or more versions
    compare: Compare two versions
    sort: Print versions oldest first (or newest first with --reverse)
    metadata: Read name and versions from a PKG-INFO / METADATA file

Example:
    Parse a version:
        ```bash
        $ pepver parse 1.5-preview1
        ```

    Compare two versions:
        ```bash
        $ pepver compare 1.0.dev0 1.0a1
        1.0.dev0 < 1.0a1
        ```

    Sort versions as JSON:
        ```bash
        $ pepver sort 1.0 1.0rc1 1.0.post1 --format json
        ```

    Read a metadata file:
        ```bash
        $ pepver metadata pandas-1.5.3.dist-info/METADATA
        ```

Exit Codes:

- 0: Success
- 1: Error (malformed version, bad metadata file, or invalid config)

Note:
    The CLI uses argparse for command parsing. Each command has its own
    handler function (cmd_<command>). Output format comes from --format,
    falling back to output.format in pepver.yaml. Verbose mode shows full
    tracebacks on errors.
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path
import sys
from typing import Any

from pepver import __version__
from pepver.config import load_effective_config
from pepver.exceptions import PepverError
from pepver.logging import get_logger, set_global_logger
from pepver.metadata import parse_metadata_file
from pepver.results import CompareResult
from pepver.versioning import Version, parse_version, sort_versions


def _prepare(args: argparse.Namespace) -> dict[str, Any]:
    """Configures the global logger and loads the effective config."""
    set_global_logger(get_logger(verbose=args.verbose, debug=args.debug))
    config_path = Path(args.config) if args.config else None
    return load_effective_config(config_path)


def _output_format(args: argparse.Namespace, config: dict[str, Any]) -> str:
    return args.format or config["output"]["format"]


def _report_error(err: PepverError, args: argparse.Namespace) -> int:
    print(f"Error: {err}")
    if args.verbose or args.debug:
        import traceback

        traceback.print_exc()
    return 1


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2))


def _or_dash(value: Any) -> str:
    return "-" if value is None else str(value)


def _print_version(version: Version) -> None:
    pre = f"{version.pre[0]}{version.pre[1]}" if version.pre is not None else None
    print(version.raw)
    print(f"  Normalized:   {version}")
    print(f"  Epoch:        {_or_dash(version.epoch)}")
    print(f"  Release:      {'.'.join(str(n) for n in version.release)}")
    print(f"  Pre-release:  {_or_dash(pre)}")
    print(f"  Post-release: {_or_dash(version.post)}")
    print(f"  Dev-release:  {_or_dash(version.dev)}")
    print(f"  Local:        {_or_dash(version.local)}")


def cmd_parse(args: argparse.Namespace) -> int:
    """Handler for 'pepver parse' command.

    Args:
        args: Parsed command-line arguments containing the version strings
            and output flags.

    Returns:
        Exit code (0 if every version parsed, 1 on the first failure).
    """
    try:
        config = _prepare(args)
        versions = [parse_version(raw) for raw in args.versions]
    except PepverError as err:
        return _report_error(err, args)

    if _output_format(args, config) == "json":
        _print_json([v.to_dict() for v in versions])
        return 0

    for index, version in enumerate(versions):
        if index:
            print()
        _print_version(version)
    return 0


def cmd_compare(args: argparse.Namespace) -> int:
    """Handler for 'pepver compare' command.

    Prints "A < B", "A == B" or "A > B" using the inputs as given.

    Returns:
        Exit code (0 for success, 1 if either version is malformed).
    """
    try:
        config = _prepare(args)
        result = CompareResult.of(parse_version(args.left), parse_version(args.right))
    except PepverError as err:
        return _report_error(err, args)

    if _output_format(args, config) == "json":
        _print_json(result.to_dict())
    else:
        print(f"{result.left.raw} {result.symbol} {result.right.raw}")
    return 0


def cmd_sort(args: argparse.Namespace) -> int:
    """Handler for 'pepver sort' command.

    Returns:
        Exit code (0 for success, 1 if any version is malformed).
    """
    try:
        config = _prepare(args)
        ordered = sort_versions(args.versions, reverse=args.reverse)
    except PepverError as err:
        return _report_error(err, args)

    if _output_format(args, config) == "json":
        _print_json([{"raw": v.raw, "normalized": str(v)} for v in ordered])
    else:
        for version in ordered:
            print(version.raw)
    return 0


def cmd_metadata(args: argparse.Namespace) -> int:
    """Handler for 'pepver metadata' command.

    Reads a metadata document, checks the configured required fields and
    parses its version fields.

    Returns:
        Exit code (0 for success, 1 for a missing file, a missing field or a
        malformed version).
    """
    try:
        config = _prepare(args)
        metadata = parse_metadata_file(
            Path(args.file),
            required_fields=config["metadata"]["required_fields"],
        )
    except PepverError as err:
        return _report_error(err, args)

    if _output_format(args, config) == "json":
        _print_json(metadata.to_dict())
        return 0

    data = metadata.to_dict()
    print("=" * 70)
    print("METADATA")
    print("=" * 70)
    print(f"Name:             {metadata.name}")
    print(f"Version:          {metadata.version}")
    print(f"Metadata-Version: {metadata.metadata_version}")
    if metadata.summary:
        print(f"Summary:          {metadata.summary}")
    if metadata.requires_python:
        print(f"Requires-Python:  {metadata.requires_python}")
    print(f"Fields present:   {len(data)}")
    print("=" * 70)
    return 0


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a pepver.yaml file (default: search upward from the current directory)",
    )
    parser.add_argument(
        "--format",
        choices=("text", "json"),
        default=None,
        help="Output format (default: from config, else text)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show progress and high-level status updates",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Show detailed debugging output (implies --verbose)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Builds the argparse parser with all subcommands registered."""
    parser = argparse.ArgumentParser(
        prog="pepver",
        description="pepver - PEP 440 version parsing and comparison",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"pepver {__version__}",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
        required=True,
    )

    # 'parse' command
    parser_parse = subparsers.add_parser(
        "parse",
        help="Show the components of one or more versions",
        description="Parse PEP 440 version strings and print their normalized components.",
    )
    parser_parse.add_argument("versions", nargs="+", help="Version strings to parse")
    _add_common_args(parser_parse)
    parser_parse.set_defaults(func=cmd_parse)

    # 'compare' command
    parser_compare = subparsers.add_parser(
        "compare",
        help="Compare two versions",
        description="Compare two PEP 440 versions and print <, == or >.",
    )
    parser_compare.add_argument("left", help="Left-hand version")
    parser_compare.add_argument("right", help="Right-hand version")
    _add_common_args(parser_compare)
    parser_compare.set_defaults(func=cmd_compare)

    # 'sort' command
    parser_sort = subparsers.add_parser(
        "sort",
        help="Sort versions oldest first",
        description="Sort PEP 440 versions. Equal versions keep their input order.",
    )
    parser_sort.add_argument("versions", nargs="+", help="Version strings to sort")
    parser_sort.add_argument(
        "--reverse",
        action="store_true",
        help="Print newest first",
    )
    _add_common_args(parser_sort)
    parser_sort.set_defaults(func=cmd_sort)

    # 'metadata' command
    parser_metadata = subparsers.add_parser(
        "metadata",
        help="Read name and versions from a package metadata file",
        description="Parse a PKG-INFO or METADATA file and validate its version fields.",
    )
    parser_metadata.add_argument("file", help="Path to the metadata file")
    _add_common_args(parser_metadata)
    parser_metadata.set_defaults(func=cmd_metadata)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the pepver CLI.

    This function is registered as the 'pepver' console script in
    pyproject.toml.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    exit_code = args.func(args)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
