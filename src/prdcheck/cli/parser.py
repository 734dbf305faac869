"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("prdcheck")
    except PackageNotFoundError:
        return "0.0.0"


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", default=None, help="Path to prdcheck.json (default: built-in .wile/ layout)")
    parser.add_argument("--path", default=None, help="PRD file to check (overrides the configured path)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="prdcheck")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    validate_parser = subparsers.add_parser("validate", help="Validate the PRD and report the runnable story")
    _add_common_arguments(validate_parser)
    validate_parser.add_argument(
        "--summary",
        action="store_true",
        help="Print a single JSON line with pendingCount, runnableStoryId and allDone",
    )

    status_parser = subparsers.add_parser("status", help="Show the backlog as a table")
    _add_common_arguments(status_parser)

    compact_parser = subparsers.add_parser("compact-check", help="Verify the workspace after a compaction step")
    _add_common_arguments(compact_parser)

    return parser


__all__ = ["build_parser"]
