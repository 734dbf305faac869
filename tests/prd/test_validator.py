from __future__ import annotations

import copy

import pytest

from prdcheck.core.contracts.exceptions import (
    DependencyCycleError,
    DependsOnCompactedIdError,
    DuplicateCompactedIdError,
    DuplicateStoryIdError,
    IdReservedByCompactionError,
    InvalidDocumentError,
    InvalidFieldError,
    NoRunnableStoryError,
    PrdValidationError,
    UnknownDependencyError,
    ValidationErrorKind,
)
from prdcheck.core.contracts.story import DoneStory, PendingStory
from prdcheck.core.prd.validator import BacklogValidator, validate_prd


def test_picks_first_runnable_pending_story(story) -> None:
    result = validate_prd(
        {
            "stories": [
                story(1, status="done"),
                story(2, depends_on=[1]),
                story(3, depends_on=[2]),
            ]
        }
    )

    assert result.all_done is False
    assert [s.id for s in result.pending_stories] == [2, 3]
    assert result.runnable_story is not None
    assert result.runnable_story.id == 2


def test_document_order_is_the_priority(story) -> None:
    result = validate_prd({"stories": [story(9), story(1), story(5)]})

    assert result.runnable_story is not None
    assert result.runnable_story.id == 9


def test_skips_blocked_pending_story(story) -> None:
    result = validate_prd({"stories": [story(1, depends_on=[2]), story(2), story(3, status="done")]})

    assert result.runnable_story is not None
    assert result.runnable_story.id == 2


def test_forward_reference_to_done_story(story) -> None:
    result = validate_prd({"stories": [story(1, depends_on=[2]), story(2, status="done")]})

    assert result.runnable_story is not None
    assert result.runnable_story.id == 1


def test_duplicate_dependencies_are_tolerated(story) -> None:
    result = validate_prd({"stories": [story(1, status="done"), story(2, depends_on=[1, 1])]})

    assert result.runnable_story is not None
    assert result.runnable_story.id == 2


def test_all_done_reports_no_runnable_story(story) -> None:
    result = validate_prd({"stories": [story(1, status="done"), story(2, status="done", depends_on=[1])]})

    assert result.all_done is True
    assert result.runnable_story is None
    assert result.pending_stories == []


def test_empty_backlog_is_all_done() -> None:
    result = validate_prd({"stories": []})

    assert result.all_done is True
    assert result.stories == []


def test_result_holds_typed_stories(story) -> None:
    result = validate_prd({"stories": [story(1, status="done", compacted_from="5..7"), story(2)]})

    assert isinstance(result.stories[0], DoneStory)
    assert isinstance(result.stories[1], PendingStory)
    assert result.get_story(1) is result.stories[0]
    assert result.get_story(99) is None


def test_accepts_compacted_summary_story(story) -> None:
    result = validate_prd(
        {
            "stories": [
                story(10, status="done", compacted_from="2..4,8"),
                story(11, depends_on=[10]),
            ]
        }
    )

    assert result.runnable_story is not None
    assert result.runnable_story.id == 11


def test_summary_serializes_with_camel_case_keys(story) -> None:
    result = validate_prd({"stories": [story(1, status="done"), story(2, depends_on=[1]), story(3)]})

    assert result.summary().model_dump(mode="json", by_alias=True) == {
        "pendingCount": 2,
        "runnableStoryId": 2,
        "allDone": False,
    }


@pytest.mark.parametrize("document", [None, [], "stories", 3, {"items": []}, {"stories": {}}, {"stories": None}])
def test_invalid_document_shape(document: object) -> None:
    with pytest.raises(InvalidDocumentError) as exc_info:
        validate_prd(document)

    assert exc_info.value.kind is ValidationErrorKind.INVALID_DOCUMENT


def test_schema_errors_name_the_story_index(story) -> None:
    with pytest.raises(InvalidFieldError, match=r"stories\[1\]\.title"):
        validate_prd({"stories": [story(1), story(2, title="")]})


def test_duplicate_story_ids(story) -> None:
    with pytest.raises(DuplicateStoryIdError, match="duplicate story id detected: 1") as exc_info:
        validate_prd({"stories": [story(1), story(1, title="Duplicate")]})

    assert exc_info.value.story_id == 1


def test_overlapping_compactions_across_stories(story) -> None:
    with pytest.raises(DuplicateCompactedIdError) as exc_info:
        validate_prd(
            {
                "stories": [
                    story(10, status="done", compacted_from="2..4"),
                    story(11, status="done", compacted_from="4..6"),
                    story(12),
                ]
            }
        )

    assert (exc_info.value.compacted_id, exc_info.value.first_owner, exc_info.value.second_owner) == (4, 10, 11)


def test_live_story_id_inside_reserved_range(story) -> None:
    with pytest.raises(IdReservedByCompactionError, match="story id 3 is reserved by compactedFrom in story 10"):
        validate_prd({"stories": [story(10, status="done", compacted_from="2..4,8"), story(3)]})


def test_summary_story_cannot_reserve_its_own_id(story) -> None:
    with pytest.raises(IdReservedByCompactionError) as exc_info:
        validate_prd({"stories": [story(3, status="done", compacted_from="1..5")]})

    assert exc_info.value.owner_id == 3


def test_dependency_on_compacted_id(story) -> None:
    with pytest.raises(DependsOnCompactedIdError) as exc_info:
        validate_prd({"stories": [story(10, status="done", compacted_from="2..4,8"), story(11, depends_on=[3])]})

    error = exc_info.value
    assert (error.story_id, error.dependency_id, error.owner_id) == (11, 3, 10)
    assert str(error) == "story 11 depends on compacted story id 3 (compacted in story 10)"


def test_unknown_dependency(story) -> None:
    with pytest.raises(UnknownDependencyError, match="story 1 depends on missing story id 999"):
        validate_prd({"stories": [story(1, depends_on=[999])]})


def test_reserved_dependency_is_reported_before_missing_dependency(story) -> None:
    with pytest.raises(DependsOnCompactedIdError):
        validate_prd({"stories": [story(10, status="done", compacted_from="2..4"), story(11, depends_on=[3, 999])]})


def test_dependency_cycle(story) -> None:
    with pytest.raises(DependencyCycleError) as exc_info:
        validate_prd({"stories": [story(1, depends_on=[2]), story(2, depends_on=[1])]})

    assert exc_info.value.cycle == [1, 2, 1]
    assert "dependency cycle detected: 1 -> 2 -> 1" in str(exc_info.value)


def test_cycle_among_done_stories_is_still_rejected(story) -> None:
    with pytest.raises(DependencyCycleError):
        validate_prd({"stories": [story(1, status="done", depends_on=[2]), story(2, status="done", depends_on=[1])]})


def test_deadlocked_backlog_names_every_blocked_pending_story(story, monkeypatch: pytest.MonkeyPatch) -> None:
    # An acyclic, fully resolved graph always has a runnable pending story, so
    # reaching the deadlock check needs a cycle that slips past cycle detection.
    monkeypatch.setattr("prdcheck.core.prd.validator.DependencyGraph.find_cycle", lambda self: None)

    with pytest.raises(NoRunnableStoryError) as exc_info:
        validate_prd(
            {
                "stories": [
                    story(1, depends_on=[3]),
                    story(2, depends_on=[3]),
                    story(3, depends_on=[1]),
                    story(4, status="done"),
                ]
            }
        )

    assert exc_info.value.blocked_ids == [1, 2, 3]
    assert exc_info.value.kind is ValidationErrorKind.NO_RUNNABLE_STORY
    assert "pending stories are blocked: 1, 2, 3" in str(exc_info.value)


def test_transitively_blocked_stories_wait_for_the_chain_head(story) -> None:
    result = validate_prd(
        {
            "stories": [
                story(1, depends_on=[3]),
                story(2, depends_on=[3]),
                story(3, depends_on=[5]),
                story(5, depends_on=[6]),
                story(6, status="done"),
            ]
        }
    )

    assert result.runnable_story is not None
    assert result.runnable_story.id == 5


def test_validation_is_deterministic_and_does_not_mutate_input(story) -> None:
    document = {"stories": [story(1, status="done"), story(2, depends_on=[1, 1]), story(3, depends_on=[2])]}
    snapshot = copy.deepcopy(document)

    first = BacklogValidator().validate(document)
    second = BacklogValidator().validate(document)

    assert first == second
    assert first.model_dump_json() == second.model_dump_json()
    assert document == snapshot


def test_every_failure_is_a_prd_validation_error(story) -> None:
    with pytest.raises(PrdValidationError):
        validate_prd({"stories": [story(1, depends_on=[1])]})
