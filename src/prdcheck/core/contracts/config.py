"""Configuration contracts."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

DEFAULT_WORKSPACE_DIR = Path(".wile")


class PrdPaths(BaseModel):
    prd: Path = DEFAULT_WORKSPACE_DIR / "prd.json"
    progress: Path = DEFAULT_WORKSPACE_DIR / "progress.txt"
    original_prd: Path = DEFAULT_WORKSPACE_DIR / "prd.json.original"

    model_config = {"frozen": True}


class ProgressLogConfig(BaseModel):
    title: str = "# Wile Progress Log"
    patterns_heading: str = "## Codebase Patterns"

    model_config = {"frozen": True}

    @field_validator("title", "patterns_heading")
    @classmethod
    def validate_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("progress log markers must be non-empty")
        return value


class PrdCheckConfig(BaseModel):
    paths: PrdPaths = Field(default_factory=PrdPaths)
    progress_log: ProgressLogConfig = Field(default_factory=ProgressLogConfig)

    model_config = {"frozen": True}
