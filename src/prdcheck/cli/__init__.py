"""Command-line interface for prdcheck."""

from __future__ import annotations

import logging as logging

from prdcheck import PrdCheck as PrdCheck
from prdcheck import default_config as default_config
from prdcheck import load_config as load_config
from prdcheck.cli.app import main as main
from prdcheck.cli.commands import compact_check as compact_check_command
from prdcheck.cli.commands import status as status_command
from prdcheck.cli.commands import validate as validate_command
from prdcheck.cli.parser import build_parser as build_parser

_format_validate_summary = validate_command.format_validate_summary
_format_compaction_summary = compact_check_command.format_compaction_summary

_run_validate = validate_command.run_validate
_run_status = status_command.run_status
_run_compact_check = compact_check_command.run_compact_check
