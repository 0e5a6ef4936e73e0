"""Pure schedule load analysis - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date

from .timeline import ActivityBlock, resolve_for_date, sort_by_start, to_minutes

# Gaps shorter than this do not count as recovery.
CONTINUOUS_GAP_MINUTES = 30
LATE_HOUR = 22


@dataclass(frozen=True)
class DayAnalysis:
    """Load figures for a single day."""

    total_minutes: int = 0
    max_continuous_minutes: int = 0
    has_late_block: bool = False

    @property
    def total_hours(self) -> float:
        return self.total_minutes / 60

    @property
    def is_empty(self) -> bool:
        return self.total_minutes == 0


def load_blocks(blocks: list[ActivityBlock]) -> list[ActivityBlock]:
    """Drop breaks; they relieve load rather than add to it."""
    return [b for b in blocks if not b.is_break]


def continuous_streaks(blocks: list[ActivityBlock]) -> list[int]:
    """
    Group blocks into continuous-load streaks.

    Blocks separated by less than CONTINUOUS_GAP_MINUTES are summed into one
    streak. Zero-length blocks are skipped. Returns streak lengths in minutes,
    in start order.
    """
    timed = sort_by_start([b for b in blocks if b.duration_minutes() > 0])

    streaks: list[int] = []
    prev: ActivityBlock | None = None
    for block in timed:
        duration = block.duration_minutes()
        if prev is not None and to_minutes(block.start) - to_minutes(prev.end) < CONTINUOUS_GAP_MINUTES:
            streaks[-1] += duration
        else:
            streaks.append(duration)
        prev = block
    return streaks


def analyze_blocks(blocks: list[ActivityBlock]) -> DayAnalysis:
    """
    Compute load figures for blocks already resolved to one day.

    Pure function - no I/O.
    """
    load = load_blocks(blocks)
    if not load:
        return DayAnalysis()

    total = sum(b.duration_minutes() for b in load)
    streaks = continuous_streaks(load)
    return DayAnalysis(
        total_minutes=total,
        max_continuous_minutes=max(streaks, default=0),
        has_late_block=any(b.end.hour >= LATE_HOUR for b in load),
    )


def analyze_day(blocks: list[ActivityBlock], target_date: date) -> DayAnalysis:
    """Resolve blocks for a date, then analyze the day's load."""
    return analyze_blocks(resolve_for_date(blocks, target_date))
