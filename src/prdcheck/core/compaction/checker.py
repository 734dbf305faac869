"""Post-compaction verification of a PRD workspace."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from prdcheck.core.contracts.config import PrdCheckConfig
from prdcheck.core.contracts.exceptions import CompactionCheckError
from prdcheck.core.contracts.result import CompactionReport, ValidationResult
from prdcheck.core.contracts.story import DoneStory
from prdcheck.core.prd.loader import PrdLoader
from prdcheck.core.prd.ranges import parse_id_ranges
from prdcheck.core.prd.validator import BacklogValidator

logger = logging.getLogger(__name__)


class CompactionChecker:
    """Verify the outcome of an external compaction step.

    The compacted PRD must still validate, must keep every pending story of
    the pre-compaction snapshot unchanged (compared as JSON values), and the
    progress log must keep its title and patterns section.
    """

    def __init__(
        self,
        config: PrdCheckConfig,
        *,
        loader: PrdLoader | None = None,
        validator: BacklogValidator | None = None,
    ) -> None:
        self._config = config
        self._loader = loader or PrdLoader()
        self._validator = validator or BacklogValidator()

    def check(self) -> CompactionReport:
        paths = self._config.paths
        if not paths.prd.exists():
            raise CompactionCheckError(f"missing compacted prd file: {paths.prd}")
        if not paths.progress.exists():
            raise CompactionCheckError(f"missing progress log: {paths.progress}")

        document = self._loader.load(paths.prd)
        result = self._validator.validate(document)

        compared_snapshot = paths.original_prd.exists()
        if compared_snapshot:
            original = self._loader.load(paths.original_prd)
            self._check_pending_preserved(original=original, compacted=document)
        else:
            logger.debug("no pre-compaction snapshot at %s; skipping pending comparison", paths.original_prd)

        self._check_progress_log()
        return self._report(result, compared_snapshot=compared_snapshot)

    def _check_pending_preserved(self, *, original: Any, compacted: Any) -> None:
        original_pending = self._pending_records(original, label="original")
        compacted_pending = {
            self._record_id(record, label="compacted"): record
            for record in self._pending_records(compacted, label="compacted")
        }

        if len(original_pending) != len(compacted_pending):
            raise CompactionCheckError(
                f"compaction must preserve all pending stories: {len(original_pending)} before, "
                f"{len(compacted_pending)} after"
            )
        for record in original_pending:
            story_id = self._record_id(record, label="original")
            current = compacted_pending.get(story_id)
            if current is None:
                raise CompactionCheckError(f"compaction removed pending story {story_id}")
            if current != record:
                raise CompactionCheckError(
                    f"compaction modified pending story {story_id}; pending stories must remain unchanged"
                )
        logger.debug("compaction preserved %d pending stories", len(original_pending))

    @staticmethod
    def _pending_records(document: Any, *, label: str) -> list[Mapping[str, Any]]:
        stories = document.get("stories") if isinstance(document, Mapping) else None
        if not isinstance(stories, list) or not all(isinstance(story, Mapping) for story in stories):
            raise CompactionCheckError(f'{label} prd must contain a top-level "stories" array of objects')
        pending: list[Mapping[str, Any]] = []
        for story in stories:
            status = story.get("status")
            if not isinstance(status, str):
                raise CompactionCheckError(f"{label} prd story {story.get('id')!r} has invalid status")
            if status == "pending":
                pending.append(story)
        return pending

    @staticmethod
    def _record_id(record: Mapping[str, Any], *, label: str) -> int:
        story_id = record.get("id")
        if isinstance(story_id, bool) or not isinstance(story_id, int):
            raise CompactionCheckError(f"{label} prd story has invalid id: {story_id!r}")
        return story_id

    def _check_progress_log(self) -> None:
        path = self._config.paths.progress
        markers = self._config.progress_log
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise CompactionCheckError(f"failed reading progress log: {path}") from exc
        except UnicodeDecodeError as exc:
            raise CompactionCheckError(f"progress log is not valid UTF-8: {path}") from exc
        if not text.startswith(markers.title):
            raise CompactionCheckError(f"compacted progress log must start with {markers.title!r}")
        if markers.patterns_heading not in text:
            raise CompactionCheckError(f"compacted progress log must include {markers.patterns_heading!r}")

    @staticmethod
    def _report(result: ValidationResult, *, compared_snapshot: bool) -> CompactionReport:
        summaries = [story for story in result.stories if isinstance(story, DoneStory) and story.is_summary]
        reserved = sum(len(parse_id_ranges(story.compacted_from)) for story in summaries)
        return CompactionReport(
            pending_count=len(result.pending_stories),
            reserved_id_count=reserved,
            summary_story_ids=[story.id for story in summaries],
            compared_snapshot=compared_snapshot,
        )
