"""Decode raw story records into typed story contracts."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from prdcheck.core.contracts.exceptions import (
    CompactionOnPendingStoryError,
    InvalidDocumentError,
    InvalidFieldError,
    InvalidIdError,
    InvalidStatusError,
)
from prdcheck.core.contracts.ranges import IdRangeSet
from prdcheck.core.contracts.story import DoneStory, PendingStory, StoryStatus
from prdcheck.core.prd.ranges import parse_id_ranges


@dataclass(frozen=True)
class DecodedStory:
    """A decoded story plus the reserved intervals parsed from its ``compactedFrom``."""

    story: PendingStory | DoneStory
    reserved: IdRangeSet | None = None


def _as_integer(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


class StoryDecoder:
    """Decode one story record independently of the rest of the document.

    Checks run in a fixed order and the first violation is raised.
    """

    def decode(self, raw: Any, index: int) -> DecodedStory:
        label = f"stories[{index}]"
        if not isinstance(raw, Mapping):
            raise InvalidDocumentError(f"{label} must be an object")

        story_id = self._decode_id(raw.get("id"), label)
        title = self._non_blank_string(raw.get("title"), label=label, field="title")
        description = self._non_blank_string(raw.get("description"), label=label, field="description")
        acceptance_criteria = self._acceptance_criteria(raw.get("acceptanceCriteria"), label)
        depends_on = self._depends_on(raw.get("dependsOn"), label)
        status = self._status(raw.get("status"), label)

        compacted = raw.get("compactedFrom")
        if compacted is None:
            reserved = None
        else:
            if status is not StoryStatus.DONE:
                raise CompactionOnPendingStoryError(f'{label}.compactedFrom is only allowed when status is "done"')
            reserved = parse_id_ranges(compacted)

        fields = {
            "id": story_id,
            "title": title,
            "description": description,
            "acceptance_criteria": acceptance_criteria,
            "depends_on": depends_on,
        }
        if status is StoryStatus.PENDING:
            return DecodedStory(story=PendingStory(**fields))
        return DecodedStory(
            story=DoneStory(**fields, compacted_from=reserved.text if reserved is not None else None),
            reserved=reserved,
        )

    @staticmethod
    def _decode_id(value: Any, label: str) -> int:
        story_id = _as_integer(value)
        if story_id is None or story_id < 0:
            raise InvalidIdError(f"{label}.id must be a non-negative integer, got {value!r}")
        return story_id

    @staticmethod
    def _non_blank_string(value: Any, *, label: str, field: str) -> str:
        if not isinstance(value, str) or not value.strip():
            raise InvalidFieldError(f"{label}.{field} must be a non-empty string", field=field)
        return value

    @staticmethod
    def _acceptance_criteria(value: Any, label: str) -> list[str]:
        message = f"{label}.acceptanceCriteria must be a non-empty array of non-empty strings"
        if not isinstance(value, list) or not value:
            raise InvalidFieldError(message, field="acceptanceCriteria")
        if not all(isinstance(item, str) and item.strip() for item in value):
            raise InvalidFieldError(message, field="acceptanceCriteria")
        return list(value)

    @staticmethod
    def _depends_on(value: Any, label: str) -> list[int]:
        message = f"{label}.dependsOn must be an array of integer story IDs"
        if not isinstance(value, list):
            raise InvalidFieldError(message, field="dependsOn")
        depends_on: list[int] = []
        for item in value:
            dep_id = _as_integer(item)
            if dep_id is None:
                raise InvalidFieldError(message, field="dependsOn")
            depends_on.append(dep_id)
        return depends_on

    @staticmethod
    def _status(value: Any, label: str) -> StoryStatus:
        if isinstance(value, str) and value in {status.value for status in StoryStatus}:
            return StoryStatus(value)
        raise InvalidStatusError(f'{label}.status must be "pending" or "done", got {value!r}')
