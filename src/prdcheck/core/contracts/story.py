"""Story contracts.

A decoded story is either a :class:`PendingStory` or a :class:`DoneStory`;
only done stories can carry ``compactedFrom``.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, TypeAdapter, field_validator

from prdcheck.core.contracts.exceptions import PrdValidationError


class StoryStatus(StrEnum):
    PENDING = "pending"
    DONE = "done"


class StoryBase(BaseModel):
    id: int = Field(ge=0)
    title: str
    description: str
    acceptance_criteria: list[str] = Field(alias="acceptanceCriteria", min_length=1)
    depends_on: list[int] = Field(default_factory=list, alias="dependsOn")

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("title", "description")
    @classmethod
    def validate_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must be a non-empty string")
        return value

    @field_validator("acceptance_criteria")
    @classmethod
    def validate_criteria_not_blank(cls, value: list[str]) -> list[str]:
        if not all(item.strip() for item in value):
            raise ValueError("acceptance criteria must be non-empty strings")
        return value

    @property
    def is_done(self) -> bool:
        return False

    def to_record(self) -> dict[str, Any]:
        """Serialize back to the camelCase PRD record shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class PendingStory(StoryBase):
    status: Literal[StoryStatus.PENDING] = StoryStatus.PENDING


class DoneStory(StoryBase):
    status: Literal[StoryStatus.DONE] = StoryStatus.DONE
    compacted_from: str | None = Field(default=None, alias="compactedFrom")

    @field_validator("compacted_from")
    @classmethod
    def validate_canonical_ranges(cls, value: str | None) -> str | None:
        if value is None:
            return value
        # core.prd.ranges imports the contracts package, so resolve it at call time.
        from prdcheck.core.prd.ranges import parse_id_ranges

        try:
            return parse_id_ranges(value).text
        except PrdValidationError as exc:
            raise ValueError(str(exc)) from exc

    @property
    def is_done(self) -> bool:
        return True

    @property
    def is_summary(self) -> bool:
        return self.compacted_from is not None


Story = Annotated[PendingStory | DoneStory, Field(discriminator="status")]

story_adapter: TypeAdapter[PendingStory | DoneStory] = TypeAdapter(Story)
