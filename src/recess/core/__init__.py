"""Functional core - pure business logic with no I/O."""

from .timeline import (
    ActivityBlock,
    BlockKind,
    Dated,
    Recurring,
    minutes_between,
    overlaps,
    parse_time,
    resolve_for_date,
)
from .analysis import DayAnalysis, analyze_blocks, analyze_day
from .burnout import BurnoutRisk, RiskLevel, assess_burnout, classify, classify_level
from .breaks import SuggestedBreak, plan_breaks
from .conflicts import ProposedInterval, find_conflicts

__all__ = [
    # Timeline
    "ActivityBlock",
    "BlockKind",
    "Dated",
    "Recurring",
    "minutes_between",
    "overlaps",
    "parse_time",
    "resolve_for_date",
    # Analysis
    "DayAnalysis",
    "analyze_blocks",
    "analyze_day",
    # Burnout
    "BurnoutRisk",
    "RiskLevel",
    "assess_burnout",
    "classify",
    "classify_level",
    # Breaks
    "SuggestedBreak",
    "plan_breaks",
    # Conflicts
    "ProposedInterval",
    "find_conflicts",
]
