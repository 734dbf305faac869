"""Reserved-ID range contracts."""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, Field, model_validator


class IdInterval(BaseModel):
    """Closed interval ``[start, end]`` of story IDs."""

    start: int = Field(ge=0)
    end: int = Field(ge=0)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_bounds(self) -> IdInterval:
        if self.start > self.end:
            raise ValueError(f"interval start {self.start} exceeds end {self.end}")
        return self

    def contains(self, story_id: int) -> bool:
        return self.start <= story_id <= self.end

    def overlaps(self, other: IdInterval) -> bool:
        return self.start <= other.end and other.start <= self.end

    def render(self) -> str:
        if self.start == self.end:
            return str(self.start)
        return f"{self.start}..{self.end}"

    def __len__(self) -> int:
        return self.end - self.start + 1


class IdRangeSet(BaseModel):
    """Sorted, merged, non-empty set of reserved story IDs."""

    intervals: tuple[IdInterval, ...] = Field(min_length=1)

    model_config = {"frozen": True}

    @property
    def text(self) -> str:
        return ",".join(interval.render() for interval in self.intervals)

    def contains(self, story_id: int) -> bool:
        return any(interval.contains(story_id) for interval in self.intervals)

    def ids(self) -> Iterator[int]:
        for interval in self.intervals:
            yield from range(interval.start, interval.end + 1)

    def __len__(self) -> int:
        return sum(len(interval) for interval in self.intervals)

    def __str__(self) -> str:
        return self.text
