"""Validate command formatting."""

from __future__ import annotations

import argparse
import json

from prdcheck import PrdCheckConfig, ValidationResult
from prdcheck.cli.common import format_story_breakdown, resolve_cli_config


def format_validate_summary(result: ValidationResult, config: PrdCheckConfig) -> str:
    total = len(result.stories)
    pending = len(result.pending_stories)

    lines = [
        "",
        "prdcheck - backlog valid",
        "",
        f"  PRD:       {config.paths.prd}",
        f"  Stories:   {total} total ({format_story_breakdown(pending=pending, done=total - pending)})",
    ]

    if result.runnable_story is not None:
        lines.append(f"  Runnable:  story {result.runnable_story.id} - {result.runnable_story.title}")
    if result.all_done:
        lines.append("  Status:    all stories done")

    lines.append("")
    return "\n".join(lines)


def format_summary_json(result: ValidationResult) -> str:
    return json.dumps(result.summary().model_dump(mode="json", by_alias=True))


def run_validate(args: argparse.Namespace) -> ValidationResult:
    import prdcheck.cli as cli

    config = resolve_cli_config(args)
    result = cli.PrdCheck.from_config(config).validate()

    if args.summary:
        print(format_summary_json(result))
    else:
        print(cli._format_validate_summary(result, config))
    return result


__all__ = ["format_summary_json", "format_validate_summary", "run_validate"]
