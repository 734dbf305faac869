"""Reserved-ID range codec.

``compactedFrom`` holds a compact textual encoding of a set of story IDs,
e.g. ``"1..3,5"``. Parsing sorts and merges the tokens into closed intervals
and renders them back to canonical text. The strict parser rejects any input
that is not already in canonical form, so a writer cannot round-trip
duplicated or overlapping entries unnoticed.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any

from prdcheck.core.contracts.exceptions import MalformedRangeError, NonCanonicalRangeError
from prdcheck.core.contracts.ranges import IdInterval, IdRangeSet

_TOKEN_RE = re.compile(r"^([0-9]+)(?:\.\.([0-9]+))?$")


def _split_tokens(text: Any) -> list[str]:
    if not isinstance(text, str):
        raise MalformedRangeError(f"id ranges must be a string, got {type(text).__name__}")
    if not text.strip():
        raise MalformedRangeError("id ranges must not be empty")
    tokens = [token.strip() for token in text.split(",")]
    for position, token in enumerate(tokens):
        if not token:
            raise MalformedRangeError(f"blank token at position {position} in id ranges {text!r}")
    return tokens


def _parse_token(token: str) -> IdInterval:
    match = _TOKEN_RE.match(token)
    if match is None:
        raise MalformedRangeError(f"invalid id range token {token!r}: expected N or N..M")
    start = int(match.group(1))
    end = int(match.group(2)) if match.group(2) is not None else start
    if start > end:
        raise MalformedRangeError(f"invalid id range token {token!r}: start {start} exceeds end {end}")
    return IdInterval(start=start, end=end)


def merge_intervals(intervals: Iterable[IdInterval]) -> list[IdInterval]:
    """Sort by ``(start, end)`` and coalesce overlapping or adjacent intervals."""
    merged: list[IdInterval] = []
    for interval in sorted(intervals, key=lambda item: (item.start, item.end)):
        if merged and interval.start <= merged[-1].end + 1:
            previous = merged[-1]
            merged[-1] = IdInterval(start=previous.start, end=max(previous.end, interval.end))
            continue
        merged.append(interval)
    return merged


def canonicalize_id_ranges(text: Any) -> IdRangeSet:
    """Parse range text in any order, returning the merged canonical set.

    Raises:
        MalformedRangeError: If the text is empty, has a blank token, or a
            token is not ``N`` / ``N..M`` with ``N <= M``.
    """
    tokens = _split_tokens(text)
    return IdRangeSet(intervals=tuple(merge_intervals(_parse_token(token) for token in tokens)))


def parse_id_ranges(text: Any) -> IdRangeSet:
    """Parse range text that must already be in canonical form.

    Raises:
        MalformedRangeError: See :func:`canonicalize_id_ranges`.
        NonCanonicalRangeError: If the trimmed input differs from its
            canonical rendering (unsorted, unmerged, ``N..N``, leading zeros).
    """
    ranges = canonicalize_id_ranges(text)
    written = ",".join(_split_tokens(text))
    if written != ranges.text:
        raise NonCanonicalRangeError(
            f"id ranges {written!r} are not canonical; expected {ranges.text!r}",
            canonical=ranges.text,
        )
    return ranges


def ranges_from_ids(ids: Iterable[int]) -> IdRangeSet:
    """Build the canonical range set covering exactly ``ids``."""
    intervals: list[IdInterval] = []
    for story_id in ids:
        if isinstance(story_id, bool) or not isinstance(story_id, int) or story_id < 0:
            raise MalformedRangeError(f"reserved ids must be non-negative integers, got {story_id!r}")
        intervals.append(IdInterval(start=story_id, end=story_id))
    if not intervals:
        raise MalformedRangeError("id ranges must not be empty")
    return IdRangeSet(intervals=tuple(merge_intervals(intervals)))


def format_id_ranges(ids: Iterable[int]) -> str:
    """Render ``ids`` as canonical ``compactedFrom`` text, e.g. ``[5, 1, 2, 3]`` -> ``"1..3,5"``."""
    return ranges_from_ids(ids).text
