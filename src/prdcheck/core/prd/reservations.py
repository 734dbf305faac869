"""Global reserved-ID space built from every story's ``compactedFrom``."""

from __future__ import annotations

from dataclasses import dataclass

from prdcheck.core.contracts.exceptions import DuplicateCompactedIdError
from prdcheck.core.contracts.ranges import IdInterval, IdRangeSet


@dataclass(frozen=True)
class Reservation:
    interval: IdInterval
    owner_id: int


class ReservationIndex:
    """Non-overlapping reserved intervals, each tagged with its owning summary story.

    Registration compares each new interval against every registered one.
    """

    def __init__(self) -> None:
        self._reservations: list[Reservation] = []

    def register(self, owner_id: int, ranges: IdRangeSet) -> None:
        """Reserve ``ranges`` for story ``owner_id``.

        Raises:
            DuplicateCompactedIdError: If any interval overlaps one already
                registered; names the lowest shared id and both owners.
        """
        for interval in ranges.intervals:
            for existing in self._reservations:
                if existing.interval.overlaps(interval):
                    raise DuplicateCompactedIdError(
                        max(existing.interval.start, interval.start),
                        first_owner=existing.owner_id,
                        second_owner=owner_id,
                    )
            self._reservations.append(Reservation(interval=interval, owner_id=owner_id))

    def owner_of(self, story_id: int) -> int | None:
        """Return the summary story reserving ``story_id``, or ``None`` if it is not reserved."""
        for reservation in self._reservations:
            if reservation.interval.contains(story_id):
                return reservation.owner_id
        return None

    @property
    def reservations(self) -> list[Reservation]:
        return list(self._reservations)

    def reserved_count(self) -> int:
        return sum(len(reservation.interval) for reservation in self._reservations)

    def __len__(self) -> int:
        return len(self._reservations)
