"""Status command."""

from __future__ import annotations

import argparse

from prdcheck import ValidationResult
from prdcheck.cli.common import resolve_cli_config
from prdcheck.cli.display.rich import RichBacklogView


def run_status(args: argparse.Namespace) -> ValidationResult:
    import prdcheck.cli as cli

    config = resolve_cli_config(args)
    result = cli.PrdCheck.from_config(config).validate()
    RichBacklogView().print(result)
    return result


__all__ = ["run_status"]
