"""Exception hierarchy for prdcheck.

All prdcheck exceptions inherit from :class:`PrdCheckError`. Backlog
validation failures additionally inherit from :class:`PrdValidationError` and
carry a :class:`ValidationErrorKind` so callers can branch on the violated
rule without parsing messages.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum
from typing import ClassVar


class PrdCheckError(Exception):
    """Base exception for all prdcheck errors."""


class ConfigError(PrdCheckError):
    """Configuration loading or validation failure."""


class PrdLoadError(PrdCheckError):
    """PRD file missing, unreadable, or not valid JSON."""


class CompactionCheckError(PrdCheckError):
    """A compacted backlog does not preserve what compaction must preserve."""


class ValidationErrorKind(StrEnum):
    INVALID_DOCUMENT = "InvalidDocument"
    INVALID_ID = "InvalidId"
    INVALID_FIELD = "InvalidField"
    INVALID_STATUS = "InvalidStatus"
    MALFORMED_RANGE = "MalformedRange"
    NON_CANONICAL_RANGE = "NonCanonicalRange"
    COMPACTION_ON_PENDING_STORY = "CompactionOnPendingStory"
    DUPLICATE_STORY_ID = "DuplicateStoryId"
    DUPLICATE_COMPACTED_ID = "DuplicateCompactedId"
    ID_RESERVED_BY_COMPACTION = "IdReservedByCompaction"
    UNKNOWN_DEPENDENCY = "UnknownDependency"
    DEPENDS_ON_COMPACTED_ID = "DependsOnCompactedId"
    DEPENDENCY_CYCLE = "DependencyCycle"
    NO_RUNNABLE_STORY = "NoRunnableStory"


class PrdValidationError(PrdCheckError):
    """Backlog document violates one invariant.

    Attributes:
        kind: The violated rule.
    """

    kind: ClassVar[ValidationErrorKind]


class InvalidDocumentError(PrdValidationError):
    kind = ValidationErrorKind.INVALID_DOCUMENT


class InvalidIdError(PrdValidationError):
    kind = ValidationErrorKind.INVALID_ID


class InvalidFieldError(PrdValidationError):
    kind = ValidationErrorKind.INVALID_FIELD

    def __init__(self, message: str, *, field: str) -> None:
        super().__init__(message)
        self.field = field


class InvalidStatusError(PrdValidationError):
    kind = ValidationErrorKind.INVALID_STATUS


class MalformedRangeError(PrdValidationError):
    kind = ValidationErrorKind.MALFORMED_RANGE


class NonCanonicalRangeError(PrdValidationError):
    kind = ValidationErrorKind.NON_CANONICAL_RANGE

    def __init__(self, message: str, *, canonical: str) -> None:
        super().__init__(message)
        self.canonical = canonical


class CompactionOnPendingStoryError(PrdValidationError):
    kind = ValidationErrorKind.COMPACTION_ON_PENDING_STORY


class DuplicateStoryIdError(PrdValidationError):
    kind = ValidationErrorKind.DUPLICATE_STORY_ID

    def __init__(self, story_id: int) -> None:
        super().__init__(f"duplicate story id detected: {story_id}")
        self.story_id = story_id


class DuplicateCompactedIdError(PrdValidationError):
    kind = ValidationErrorKind.DUPLICATE_COMPACTED_ID

    def __init__(self, compacted_id: int, *, first_owner: int, second_owner: int) -> None:
        super().__init__(
            f"compacted story id {compacted_id} is listed multiple times "
            f"(stories {first_owner} and {second_owner})"
        )
        self.compacted_id = compacted_id
        self.first_owner = first_owner
        self.second_owner = second_owner


class IdReservedByCompactionError(PrdValidationError):
    kind = ValidationErrorKind.ID_RESERVED_BY_COMPACTION

    def __init__(self, story_id: int, *, owner_id: int) -> None:
        super().__init__(f"story id {story_id} is reserved by compactedFrom in story {owner_id}")
        self.story_id = story_id
        self.owner_id = owner_id


class UnknownDependencyError(PrdValidationError):
    kind = ValidationErrorKind.UNKNOWN_DEPENDENCY

    def __init__(self, story_id: int, *, dependency_id: int) -> None:
        super().__init__(f"story {story_id} depends on missing story id {dependency_id}")
        self.story_id = story_id
        self.dependency_id = dependency_id


class DependsOnCompactedIdError(PrdValidationError):
    kind = ValidationErrorKind.DEPENDS_ON_COMPACTED_ID

    def __init__(self, story_id: int, *, dependency_id: int, owner_id: int) -> None:
        super().__init__(
            f"story {story_id} depends on compacted story id {dependency_id} (compacted in story {owner_id})"
        )
        self.story_id = story_id
        self.dependency_id = dependency_id
        self.owner_id = owner_id


class DependencyCycleError(PrdValidationError):
    kind = ValidationErrorKind.DEPENDENCY_CYCLE

    def __init__(self, cycle: Sequence[int]) -> None:
        self.cycle = list(cycle)
        super().__init__(f"dependency cycle detected: {' -> '.join(str(story_id) for story_id in self.cycle)}")


class NoRunnableStoryError(PrdValidationError):
    kind = ValidationErrorKind.NO_RUNNABLE_STORY

    def __init__(self, blocked_ids: Sequence[int]) -> None:
        self.blocked_ids = list(blocked_ids)
        blocked = ", ".join(str(story_id) for story_id in self.blocked_ids)
        super().__init__(f"no runnable pending stories; pending stories are blocked: {blocked}")
