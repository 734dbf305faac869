"""Core contracts-domain exports."""

from prdcheck.core.contracts.config import PrdCheckConfig, PrdPaths, ProgressLogConfig
from prdcheck.core.contracts.exceptions import (
    CompactionCheckError,
    ConfigError,
    PrdCheckError,
    PrdLoadError,
    PrdValidationError,
    ValidationErrorKind,
)
from prdcheck.core.contracts.ranges import IdInterval, IdRangeSet
from prdcheck.core.contracts.result import BacklogSummary, CompactionReport, ValidationResult
from prdcheck.core.contracts.story import DoneStory, PendingStory, Story, StoryStatus

__all__ = [
    "BacklogSummary",
    "CompactionCheckError",
    "CompactionReport",
    "ConfigError",
    "DoneStory",
    "IdInterval",
    "IdRangeSet",
    "PendingStory",
    "PrdCheckConfig",
    "PrdCheckError",
    "PrdLoadError",
    "PrdPaths",
    "PrdValidationError",
    "ProgressLogConfig",
    "Story",
    "StoryStatus",
    "ValidationErrorKind",
    "ValidationResult",
]
