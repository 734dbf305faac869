"""Shared test fixtures for prdcheck tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

StoryFactory = Callable[..., dict[str, Any]]


def _story(
    story_id: int,
    *,
    status: str = "pending",
    depends_on: list[int] | None = None,
    compacted_from: str | None = None,
    **overrides: Any,
) -> dict[str, Any]:
    record: dict[str, Any] = {
        "id": story_id,
        "title": f"Story {story_id}",
        "description": f"Description for story {story_id}",
        "acceptanceCriteria": ["works"],
        "dependsOn": depends_on or [],
        "status": status,
    }
    if compacted_from is not None:
        record["compactedFrom"] = compacted_from
    record.update(overrides)
    return record


@pytest.fixture
def story() -> StoryFactory:
    """Build a raw PRD story record with sensible defaults."""
    return _story


@pytest.fixture
def write_prd(tmp_path: Path) -> Callable[..., Path]:
    """Write a ``{"stories": [...]}`` document to ``tmp_path`` and return its path."""

    def _write(stories: list[dict[str, Any]], *, name: str = "prd.json") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps({"stories": stories}, indent=2) + "\n", encoding="utf-8")
        return path

    return _write
