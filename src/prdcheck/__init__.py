"""Public API surface for prdcheck."""

__version__ = "0.3.0"

from prdcheck.core.config import default_config, load_config
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
from prdcheck.core.prd import BacklogValidator, format_id_ranges, parse_id_ranges, validate_prd
from prdcheck.sdk import PrdCheck, load_prd, read_and_validate

__all__ = [
    "BacklogSummary",
    "BacklogValidator",
    "CompactionCheckError",
    "CompactionReport",
    "ConfigError",
    "DoneStory",
    "IdInterval",
    "IdRangeSet",
    "PendingStory",
    "PrdCheck",
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
    "__version__",
    "default_config",
    "format_id_ranges",
    "load_config",
    "load_prd",
    "parse_id_ranges",
    "read_and_validate",
    "validate_prd",
]
