"""Shared CLI helpers."""

from __future__ import annotations

import argparse
from pathlib import Path

from prdcheck import PrdCheckConfig


def format_ids_or_none(values: list[int]) -> str:
    if not values:
        return "none"
    return ", ".join(str(value) for value in values)


def format_story_breakdown(*, pending: int, done: int) -> str:
    parts: list[str] = []
    if pending:
        parts.append(f"{pending} pending")
    if done:
        parts.append(f"{done} done")
    return ", ".join(parts) if parts else "none"


def resolve_cli_config(args: argparse.Namespace) -> PrdCheckConfig:
    """Config from ``--config`` (or the default layout), with ``--path`` overriding the PRD file."""
    import prdcheck.cli as cli

    config = cli.load_config(args.config) if args.config else cli.default_config()
    if args.path:
        paths = config.paths.model_copy(update={"prd": Path(args.path).expanduser().resolve()})
        config = config.model_copy(update={"paths": paths})
    return config
