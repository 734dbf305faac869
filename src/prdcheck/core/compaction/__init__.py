"""Compaction verification."""

from prdcheck.core.compaction.checker import CompactionChecker

__all__ = ["CompactionChecker"]
