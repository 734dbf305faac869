"""Whole-document PRD validation and runnable-story selection."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from prdcheck.core.contracts.exceptions import (
    DependencyCycleError,
    DependsOnCompactedIdError,
    DuplicateStoryIdError,
    IdReservedByCompactionError,
    InvalidDocumentError,
    NoRunnableStoryError,
    UnknownDependencyError,
)
from prdcheck.core.contracts.result import ValidationResult
from prdcheck.core.contracts.story import DoneStory, PendingStory
from prdcheck.core.prd.graph import DependencyGraph
from prdcheck.core.prd.reservations import ReservationIndex
from prdcheck.core.prd.schema import DecodedStory, StoryDecoder

logger = logging.getLogger(__name__)


class BacklogValidator:
    """Validate a parsed PRD document and pick the next runnable story.

    Validation is fail-fast: the first violated invariant is raised as a
    :class:`~prdcheck.core.contracts.exceptions.PrdValidationError` subclass.
    The check order is fixed (document shape, story schema, id uniqueness,
    reservations, reserved ids, dependencies, cycles, runnability), so the
    same document always reports the same error.
    """

    def __init__(self, decoder: StoryDecoder | None = None) -> None:
        self._decoder = decoder or StoryDecoder()

    def validate(self, document: Any) -> ValidationResult:
        raw_stories = self._stories_payload(document)
        decoded = [self._decoder.decode(raw, index) for index, raw in enumerate(raw_stories)]
        stories = [item.story for item in decoded]
        logger.debug("decoded %d stories", len(stories))

        story_by_id = self._index_stories(stories)
        reservations = self._build_reservations(decoded)
        self._check_reserved_ids(stories, reservations)
        self._check_dependencies(stories, story_by_id, reservations)

        cycle = DependencyGraph(stories).find_cycle()
        if cycle is not None:
            raise DependencyCycleError(cycle)

        pending = [story for story in stories if isinstance(story, PendingStory)]
        runnable = next(
            (story for story in pending if all(story_by_id[dep_id].is_done for dep_id in story.depends_on)),
            None,
        )
        if pending and runnable is None:
            raise NoRunnableStoryError([story.id for story in pending])

        logger.debug(
            "validated backlog: %d pending, runnable=%s",
            len(pending),
            runnable.id if runnable is not None else None,
        )
        return ValidationResult(
            stories=stories,
            pending_stories=pending,
            runnable_story=runnable,
            all_done=not pending,
        )

    @staticmethod
    def _stories_payload(document: Any) -> list[Any]:
        if not isinstance(document, Mapping):
            raise InvalidDocumentError("prd document must be a JSON object")
        stories = document.get("stories")
        if not isinstance(stories, list):
            raise InvalidDocumentError('prd document must contain a top-level "stories" array')
        return stories

    @staticmethod
    def _index_stories(stories: list[PendingStory | DoneStory]) -> dict[int, PendingStory | DoneStory]:
        story_by_id: dict[int, PendingStory | DoneStory] = {}
        for story in stories:
            if story.id in story_by_id:
                raise DuplicateStoryIdError(story.id)
            story_by_id[story.id] = story
        return story_by_id

    @staticmethod
    def _build_reservations(decoded: list[DecodedStory]) -> ReservationIndex:
        index = ReservationIndex()
        for item in decoded:
            if item.reserved is not None:
                index.register(item.story.id, item.reserved)
        logger.debug("reserved %d ids across %d intervals", index.reserved_count(), len(index))
        return index

    @staticmethod
    def _check_reserved_ids(stories: list[PendingStory | DoneStory], reservations: ReservationIndex) -> None:
        for story in stories:
            owner = reservations.owner_of(story.id)
            if owner is not None:
                raise IdReservedByCompactionError(story.id, owner_id=owner)

    @staticmethod
    def _check_dependencies(
        stories: list[PendingStory | DoneStory],
        story_by_id: dict[int, PendingStory | DoneStory],
        reservations: ReservationIndex,
    ) -> None:
        for story in stories:
            for dep_id in dict.fromkeys(story.depends_on):
                owner = reservations.owner_of(dep_id)
                if owner is not None:
                    raise DependsOnCompactedIdError(story.id, dependency_id=dep_id, owner_id=owner)
                if dep_id not in story_by_id:
                    raise UnknownDependencyError(story.id, dependency_id=dep_id)


def validate_prd(document: Any) -> ValidationResult:
    """Validate a parsed PRD document with the default validator."""
    return BacklogValidator().validate(document)
