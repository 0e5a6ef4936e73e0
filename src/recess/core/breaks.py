"""Pure break planning logic - no I/O dependencies."""

from dataclasses import dataclass, field
from datetime import date, time

from .analysis import CONTINUOUS_GAP_MINUTES, load_blocks
from .timeline import (
    ActivityBlock,
    BlockKind,
    Dated,
    from_minutes,
    minutes_between,
    resolve_for_date,
    sort_by_start,
    to_minutes,
)

LONG_BLOCK_MINUTES = 90
VERY_LONG_BLOCK_MINUTES = 150
MIN_GAP_MINUTES = 15
MAX_GAP_MINUTES = 120
MIN_BREAK_MINUTES = 10
GAP_BREAK_OFFSET_MINUTES = 5

RECHARGE_TITLE = "Recharge Break"
STRETCH_TITLE = "Quick Stretch"
SHORT_TITLE = "Short Break"


@dataclass(frozen=True)
class SuggestedBreak:
    """A proposed break, always for a single date."""

    title: str
    start: time
    end: time
    date: date
    kind: BlockKind = field(default=BlockKind.BREAK, init=False)

    @property
    def occurrence(self) -> Dated:
        return Dated(self.date)

    def duration_minutes(self) -> int:
        return minutes_between(self.start, self.end)

    def format(self) -> str:
        return f"{self.start.strftime('%H:%M')}-{self.end.strftime('%H:%M')} {self.title} ({self.duration_minutes()} min)"

    def to_block(self) -> ActivityBlock:
        """Convert to a dated break block for persistence."""
        return ActivityBlock(
            title=self.title,
            kind=BlockKind.BREAK,
            start=self.start,
            end=self.end,
            occurrence=self.occurrence,
        )


def _from_seconds(seconds: int) -> time:
    # Drop the seconds component, matching HH:MM display.
    return from_minutes(seconds // 60)


def mid_block_breaks(blocks: list[ActivityBlock], target_date: date) -> list[SuggestedBreak]:
    """
    Recovery pauses centered inside long blocks.

    Blocks of 90+ minutes get a 10 minute stretch; 150+ minutes get a
    15 minute recharge.
    """
    suggestions = []
    for block in blocks:
        duration = block.duration_minutes()
        if duration < LONG_BLOCK_MINUTES:
            continue

        very_long = duration >= VERY_LONG_BLOCK_MINUTES
        length = 15 if very_long else 10
        # Work in seconds so odd lengths centre exactly before truncation.
        start_sec = to_minutes(block.start) * 60 + duration * 30 - length * 30
        suggestions.append(
            SuggestedBreak(
                title=RECHARGE_TITLE if very_long else STRETCH_TITLE,
                start=_from_seconds(start_sec),
                end=_from_seconds(start_sec + length * 60),
                date=target_date,
            )
        )
    return suggestions


def continuous_load_before(blocks: list[ActivityBlock], index: int) -> int:
    """
    Minutes of unbroken load ending with blocks[index].

    Walks backward while the gap to the previous block is under 30 minutes.
    """
    load = 0
    for j in range(index, -1, -1):
        load += blocks[j].duration_minutes()
        if j > 0:
            gap = to_minutes(blocks[j].start) - to_minutes(blocks[j - 1].end)
            if gap >= CONTINUOUS_GAP_MINUTES:
                break
    return load


def gap_break_length(gap_minutes: int, continuous_load: int) -> int:
    """Break length for a gap, scaled by the load that precedes it."""
    if continuous_load >= 120:
        return min(25, int(gap_minutes * 0.6))
    if continuous_load >= 60:
        return min(15, int(gap_minutes * 0.5))
    return MIN_BREAK_MINUTES


def gap_breaks(blocks: list[ActivityBlock], target_date: date) -> list[SuggestedBreak]:
    """
    Breaks placed in gaps between consecutive blocks.

    blocks must be sorted by start. Only gaps of 15-120 minutes qualify, and
    breaks shorter than 10 minutes are dropped.
    """
    suggestions = []
    for i in range(len(blocks) - 1):
        current_end = to_minutes(blocks[i].end)
        gap = to_minutes(blocks[i + 1].start) - current_end
        if not MIN_GAP_MINUTES <= gap <= MAX_GAP_MINUTES:
            continue

        load = continuous_load_before(blocks, i)
        length = gap_break_length(gap, load)
        if length < MIN_BREAK_MINUTES:
            continue

        start = current_end + GAP_BREAK_OFFSET_MINUTES
        suggestions.append(
            SuggestedBreak(
                title=RECHARGE_TITLE if load >= 120 else SHORT_TITLE,
                start=from_minutes(start),
                end=from_minutes(start + length),
                date=target_date,
            )
        )
    return suggestions


def plan_breaks(blocks: list[ActivityBlock], target_date: date) -> list[SuggestedBreak]:
    """
    Suggest breaks for a day's timetable.

    Pure function - no I/O. Mid-block suggestions come first, then gap
    suggestions; the two passes are not deduplicated against each other.
    """
    day = sort_by_start(
        [b for b in load_blocks(resolve_for_date(blocks, target_date)) if b.duration_minutes() > 0]
    )
    if not day:
        return []
    return mid_block_breaks(day, target_date) + gap_breaks(day, target_date)
