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

"""Command-line interface for vernorm.

Commands:

    normalize: Print the semantic form of a free-form version
    compare: Compare two free-form versions
    is-specific: Check whether a version string pins one release
    check-python: Check the running interpreter against a requirement

Example:
    Normalize a vendor version:
        ```bash
        $ vernorm normalize 1.2.3.patch1
        1.2.3-patch1
        ```

    Compare two versions:
        ```bash
        $ vernorm compare 1.2b1 1.2
        -1
        ```

    Gate a build script on the interpreter version:
        ```bash
        $ vernorm check-python ">=3.10"
        ```

Exit Codes:

- 0: Success (for is-specific: the version is specific)
- 1: Error, or the version is a range (is-specific)

Note:
    Verbose mode shows full tracebacks on errors for debugging.
    Debug mode implies verbose mode and traces every parse decision.

"""

from __future__ import annotations

import argparse
import sys

from vernorm import __version__
from vernorm.exceptions import UnparsableVersionError, VernormError
from vernorm.logging import get_logger, set_global_logger
from vernorm.runtime import check_python_version_satisfies
from vernorm.versioning import (
    compare_versions,
    get_semantic_version,
    is_specific_version,
)


def _report_error(err: Exception, args: argparse.Namespace) -> int:
    print(f"Error: {err}")
    if args.verbose or args.debug:
        import traceback

        traceback.print_exc()
    return 1


def cmd_normalize(args: argparse.Namespace) -> int:
    """Handler for 'vernorm normalize' command.

    Args:
        args: Parsed command-line arguments containing the version and the
            omit_pre_release flag.

    Returns:
        Exit code (0 for success, 1 if the version cannot be converted).

    """
    set_global_logger(get_logger(verbose=args.verbose, debug=args.debug))

    try:
        result = get_semantic_version(
            args.version, omit_pre_release=args.omit_pre_release
        )
    except UnparsableVersionError as err:
        return _report_error(err, args)

    print(result)
    return 0


def cmd_compare(args: argparse.Namespace) -> int:
    """Handler for 'vernorm compare' command.

    Prints -1, 0 or 1 depending on how the first version orders against
    the second.
    """
    set_global_logger(get_logger(verbose=args.verbose, debug=args.debug))

    try:
        result = compare_versions(args.v1, args.v2)
    except VernormError as err:
        return _report_error(err, args)

    print(result)
    return 0


def cmd_is_specific(args: argparse.Namespace) -> int:
    """Handler for 'vernorm is-specific' command.

    Returns:
        Exit code (0 if the version is specific, 1 if it is a range).

    """
    set_global_logger(get_logger(verbose=args.verbose, debug=args.debug))

    specific = is_specific_version(args.version)
    print("true" if specific else "false")
    return 0 if specific else 1


def cmd_check_python(args: argparse.Namespace) -> int:
    """Handler for 'vernorm check-python' command."""
    set_global_logger(get_logger(verbose=args.verbose, debug=args.debug))

    try:
        check_python_version_satisfies(args.requirements)
    except VernormError as err:
        return _report_error(err, args)

    if args.verbose or args.debug:
        print(f"[SUCCESS] Python satisfies {args.requirements}")
    return 0


def _add_output_flags(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show high-level status updates",
    )
    subparser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Show detailed debugging output (implies --verbose)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands registered."""
    parser = argparse.ArgumentParser(
        prog="vernorm",
        description="vernorm - normalize and compare loosely formatted versions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"vernorm {__version__}",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
        required=True,
    )

    # 'normalize' command
    parser_normalize = subparsers.add_parser(
        "normalize",
        help="Convert a version to major.minor.patch[-preRelease]",
        description="Print the semantic form of a free-form version string.",
    )
    parser_normalize.add_argument("version", help="Version to convert")
    parser_normalize.add_argument(
        "--omit-pre-release",
        action="store_true",
        help="Drop the pre-release tag from the output",
    )
    _add_output_flags(parser_normalize)
    parser_normalize.set_defaults(func=cmd_normalize)

    # 'compare' command
    parser_compare = subparsers.add_parser(
        "compare",
        help="Compare two versions (prints -1, 0 or 1)",
        description="Normalize both versions and compare them by semver precedence.",
    )
    parser_compare.add_argument("v1", help="Version to compare")
    parser_compare.add_argument("v2", help="The other version to compare")
    _add_output_flags(parser_compare)
    parser_compare.set_defaults(func=cmd_compare)

    # 'is-specific' command
    parser_specific = subparsers.add_parser(
        "is-specific",
        help="Check whether a version pins one release",
        description="Exit 0 if the version is specific, 1 if it is a range.",
    )
    parser_specific.add_argument("version", help="Version or range to check")
    _add_output_flags(parser_specific)
    parser_specific.set_defaults(func=cmd_is_specific)

    # 'check-python' command
    parser_check = subparsers.add_parser(
        "check-python",
        help="Check the running Python against a requirement",
        description=(
            "Fail unless the running interpreter satisfies the npm-style "
            "range. Set FORCE_PYTHON_VERSION to skip the check."
        ),
    )
    parser_check.add_argument("requirements", help='Range such as ">=3.10"')
    _add_output_flags(parser_check)
    parser_check.set_defaults(func=cmd_check_python)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the vernorm CLI.

    This function is registered as the 'vernorm' console script in
    pyproject.toml.
    """
    args = build_parser().parse_args(argv)
    exit_code = args.func(args)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
