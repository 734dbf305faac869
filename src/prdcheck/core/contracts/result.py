"""Validation result contracts."""

from __future__ import annotations

from pydantic import BaseModel, Field

from prdcheck.core.contracts.story import DoneStory, PendingStory, Story


class BacklogSummary(BaseModel):
    pending_count: int = Field(alias="pendingCount")
    runnable_story_id: int | None = Field(alias="runnableStoryId")
    all_done: bool = Field(alias="allDone")

    model_config = {"frozen": True, "populate_by_name": True}


class ValidationResult(BaseModel):
    """Outcome of one successful validation pass over a PRD document."""

    stories: list[Story]
    pending_stories: list[PendingStory] = Field(default_factory=list)
    runnable_story: PendingStory | None = None
    all_done: bool

    model_config = {"frozen": True}

    def get_story(self, story_id: int) -> PendingStory | DoneStory | None:
        for story in self.stories:
            if story.id == story_id:
                return story
        return None

    def summary(self) -> BacklogSummary:
        return BacklogSummary(
            pending_count=len(self.pending_stories),
            runnable_story_id=self.runnable_story.id if self.runnable_story is not None else None,
            all_done=self.all_done,
        )


class CompactionReport(BaseModel):
    pending_count: int
    reserved_id_count: int
    summary_story_ids: list[int] = Field(default_factory=list)
    compared_snapshot: bool = False

    model_config = {"frozen": True}
