"""Pure timetable domain logic - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date, time
from enum import Enum


class BlockKind(Enum):
    """What a scheduled block is for."""

    CLASS = "class"
    STUDY = "study"
    WORK = "work"
    BREAK = "break"
    OTHER = "other"

    @classmethod
    def parse(cls, value: str | None) -> "BlockKind":
        """Map a stored type string to a kind, defaulting to OTHER."""
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class Dated:
    """A block that happens on a single civil date."""

    date: date


@dataclass(frozen=True)
class Recurring:
    """A block that repeats weekly, optionally until an inclusive end date.

    weekday follows date.weekday(): Monday is 0.
    """

    weekday: int
    end_date: date | None = None


Occurrence = Dated | Recurring


@dataclass(frozen=True)
class ActivityBlock:
    """One scheduled commitment in a user's timetable."""

    title: str
    kind: BlockKind
    start: time
    end: time
    occurrence: Occurrence

    @property
    def is_break(self) -> bool:
        return self.kind is BlockKind.BREAK

    @property
    def is_recurring(self) -> bool:
        return isinstance(self.occurrence, Recurring)

    def duration_minutes(self) -> int:
        """Block length in minutes, zero for inverted intervals."""
        return minutes_between(self.start, self.end)

    def occurs_on(self, target_date: date) -> bool:
        return is_active_on(self.occurrence, target_date)

    def format(self) -> str:
        return f"{self.start.strftime('%H:%M')}-{self.end.strftime('%H:%M')} {self.title}"

    @classmethod
    def from_row(cls, row: dict) -> "ActivityBlock":
        """
        Create a block from a stored schedule row.

        Rows carry either `date` (ISO) or `day_of_week` (0 = Sunday) with an
        optional `end_date`.
        """
        occurrence: Occurrence
        if row.get("day_of_week") is not None:
            end_date = row.get("end_date")
            occurrence = Recurring(
                weekday=(int(row["day_of_week"]) - 1) % 7,
                end_date=date.fromisoformat(end_date) if end_date else None,
            )
        else:
            occurrence = Dated(date.fromisoformat(row["date"]))
        return cls(
            title=row.get("title", ""),
            kind=BlockKind.parse(row.get("type")),
            start=parse_time(row.get("start_time")),
            end=parse_time(row.get("end_time")),
            occurrence=occurrence,
        )

    def to_row(self) -> dict:
        """Serialize to the stored schedule row shape."""
        row = {
            "title": self.title,
            "type": self.kind.value,
            "start_time": self.start.strftime("%H:%M"),
            "end_time": self.end.strftime("%H:%M"),
            "date": None,
            "day_of_week": None,
            "end_date": None,
        }
        match self.occurrence:
            case Dated(date=d):
                row["date"] = d.isoformat()
            case Recurring(weekday=weekday, end_date=end_date):
                row["day_of_week"] = (weekday + 1) % 7
                row["end_date"] = end_date.isoformat() if end_date else None
        return row


def is_active_on(occurrence: Occurrence, target_date: date) -> bool:
    """Check whether an occurrence applies to a civil date."""
    match occurrence:
        case Dated(date=d):
            return d == target_date
        case Recurring(weekday=weekday, end_date=end_date):
            if weekday != target_date.weekday():
                return False
            return end_date is None or target_date <= end_date
        case _:
            raise TypeError(f"Unknown occurrence: {occurrence!r}")


def resolve_for_date(blocks: list[ActivityBlock], target_date: date) -> list[ActivityBlock]:
    """
    Filter blocks to those that apply on a date.

    Pure function - no I/O. Input order is preserved.
    """
    return [b for b in blocks if is_active_on(b.occurrence, target_date)]


def overlaps(a_start: time, a_end: time, b_start: time, b_end: time) -> bool:
    """Half-open overlap check. Touching endpoints do not overlap."""
    return a_start < b_end and b_start < a_end


def to_minutes(t: time) -> int:
    """Minutes since midnight."""
    return t.hour * 60 + t.minute


def from_minutes(minutes: int) -> time:
    """Build a time from minutes since midnight, clamped to the civil day."""
    minutes = max(0, min(minutes, 23 * 60 + 59))
    return time(minutes // 60, minutes % 60)


def minutes_between(start: time, end: time) -> int:
    """Clock-minute difference, never negative."""
    return max(0, to_minutes(end) - to_minutes(start))


def parse_time(value: str | None) -> time:
    """
    Parse "HH:MM" or "HH:MM:SS" into a time.

    Unparseable or out-of-range parts become 0 rather than raising.
    """
    parts = (value or "").strip().split(":")

    def _part(index: int, upper: int) -> int:
        try:
            n = int(parts[index])
        except (IndexError, ValueError):
            return 0
        return n if 0 <= n < upper else 0

    return time(_part(0, 24), _part(1, 60))


def format_time_12h(t: time) -> str:
    """Format a time for display, e.g. "2:05 PM"."""
    period = "PM" if t.hour >= 12 else "AM"
    hour = t.hour % 12 or 12
    return f"{hour}:{t.minute:02d} {period}"


def sort_by_start(blocks: list[ActivityBlock]) -> list[ActivityBlock]:
    """Sort blocks by start time."""
    return sorted(blocks, key=lambda b: b.start)
