"""Pure burnout risk classification - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from .analysis import DayAnalysis, analyze_day
from .timeline import ActivityBlock

HIGH_TOTAL_HOURS = 7
HIGH_CONTINUOUS_MINUTES = 180
MEDIUM_TOTAL_HOURS = 5
MEDIUM_CONTINUOUS_MINUTES = 120

NO_ACTIVITY_REASON = "No scheduled activities today"


class RiskLevel(Enum):
    """Three-tier burnout risk."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class BurnoutRisk:
    """A risk level with the sentence that justifies it."""

    level: RiskLevel
    reason: str

    def with_reason(self, reason: str) -> "BurnoutRisk":
        """Copy with a different reason; the level never changes."""
        return BurnoutRisk(level=self.level, reason=reason)


def classify_level(
    total_hours: float,
    max_continuous_minutes: float,
    has_late_block: bool,
) -> RiskLevel:
    """
    Map load figures to a risk tier.

    Pure function - no I/O.
    """
    if total_hours >= HIGH_TOTAL_HOURS or max_continuous_minutes >= HIGH_CONTINUOUS_MINUTES:
        return RiskLevel.HIGH
    if (
        total_hours >= MEDIUM_TOTAL_HOURS
        or max_continuous_minutes >= MEDIUM_CONTINUOUS_MINUTES
        or has_late_block
    ):
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def describe(level: RiskLevel, total_hours: float, has_late_block: bool) -> str:
    """Deterministic reason text for a tier."""
    hours = f"{total_hours:.1f}"
    match level:
        case RiskLevel.HIGH:
            return f"{hours} hours of continuous academic load detected"
        case RiskLevel.MEDIUM if has_late_block:
            return f"{hours} hours scheduled — late night blocks detected"
        case RiskLevel.MEDIUM:
            return f"{hours} hours scheduled — consider adding breaks"
        case _:
            return "Schedule looks balanced"


def classify(analysis: DayAnalysis) -> BurnoutRisk:
    """Classify an analyzed day."""
    if analysis.is_empty:
        return BurnoutRisk(level=RiskLevel.LOW, reason=NO_ACTIVITY_REASON)

    level = classify_level(
        analysis.total_hours,
        analysis.max_continuous_minutes,
        analysis.has_late_block,
    )
    return BurnoutRisk(
        level=level,
        reason=describe(level, analysis.total_hours, analysis.has_late_block),
    )


def assess_burnout(blocks: list[ActivityBlock], target_date: date) -> BurnoutRisk:
    """Resolve, analyze and classify a day in one step."""
    return classify(analyze_day(blocks, target_date))
