"""Pure conflict detection for proposed blocks and breaks - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date, time, timedelta
from typing import Protocol, TypeVar

from .timeline import Dated, Occurrence, Recurring, is_active_on, overlaps


class Scheduled(Protocol):
    """Anything with a time range and an occurrence rule."""

    start: time
    end: time

    @property
    def occurrence(self) -> Occurrence: ...


S = TypeVar("S", bound=Scheduled)


@dataclass(frozen=True)
class ProposedInterval:
    """
    An interval the user wants to add.

    With weekday unset this is a one-off on `date`. With weekday set it is a
    weekly proposal whose first occurrence is on or after `date` and whose
    last is on or before `end_date`, if given.
    """

    start: time
    end: time
    date: date
    weekday: int | None = None
    end_date: date | None = None

    def first_occurrence(self) -> date:
        if self.weekday is None:
            return self.date
        return self.date + timedelta(days=(self.weekday - self.date.weekday()) % 7)


def _recurring_collides(proposed: ProposedInterval, occurrence: Occurrence) -> bool:
    first = proposed.first_occurrence()
    if proposed.end_date is not None and first > proposed.end_date:
        return False
    match occurrence:
        case Dated(date=d):
            return (
                d.weekday() == proposed.weekday
                and d >= first
                and (proposed.end_date is None or d <= proposed.end_date)
            )
        case Recurring(weekday=weekday, end_date=end_date):
            return weekday == proposed.weekday and (end_date is None or end_date >= first)
        case _:
            raise TypeError(f"Unknown occurrence: {occurrence!r}")


def is_active_for(proposed: ProposedInterval, occurrence: Occurrence) -> bool:
    """Check whether a candidate shares a day with the proposal."""
    if proposed.weekday is None:
        return is_active_on(occurrence, proposed.date)
    return _recurring_collides(proposed, occurrence)


def find_conflicts(proposed: ProposedInterval, candidates: list[S]) -> list[S]:
    """
    Find candidates that overlap a proposed interval.

    Pure function - no I/O. Returns conflicting candidates in input order;
    deciding whether to block or warn is up to the caller.
    """
    return [
        c
        for c in candidates
        if is_active_for(proposed, c.occurrence) and overlaps(proposed.start, proposed.end, c.start, c.end)
    ]
