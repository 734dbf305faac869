"""Compact-check command formatting."""

from __future__ import annotations

import argparse

from prdcheck import CompactionReport, PrdCheckConfig
from prdcheck.cli.common import format_ids_or_none, resolve_cli_config


def format_compaction_summary(report: CompactionReport, config: PrdCheckConfig) -> str:
    snapshot = str(config.paths.original_prd) if report.compared_snapshot else "not found (comparison skipped)"
    lines = [
        "",
        "prdcheck - compaction verified",
        "",
        f"  PRD:       {config.paths.prd}",
        f"  Snapshot:  {snapshot}",
        f"  Progress:  {config.paths.progress}",
        "",
        f"  Pending:   {report.pending_count} story(s) preserved",
        f"  Reserved:  {report.reserved_id_count} id(s)",
        f"  Summaries: {format_ids_or_none(report.summary_story_ids)}",
        "",
    ]
    return "\n".join(lines)


def run_compact_check(args: argparse.Namespace) -> CompactionReport:
    import prdcheck.cli as cli

    config = resolve_cli_config(args)
    report = cli.PrdCheck.from_config(config).check_compaction()
    print(cli._format_compaction_summary(report, config))
    return report


__all__ = ["format_compaction_summary", "run_compact_check"]
