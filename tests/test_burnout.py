"""Tests for core burnout classification."""

from datetime import date

import pytest

from recess.core.analysis import DayAnalysis
from recess.core.burnout import (
    NO_ACTIVITY_REASON,
    BurnoutRisk,
    RiskLevel,
    assess_burnout,
    classify,
    classify_level,
)
from recess.core.timeline import ActivityBlock, BlockKind, Dated, parse_time


@pytest.fixture
def today():
    return date(2025, 1, 15)


@pytest.fixture
def make_block(today):
    def _make(start: str, end: str) -> ActivityBlock:
        return ActivityBlock(
            title="Block",
            kind=BlockKind.STUDY,
            start=parse_time(start),
            end=parse_time(end),
            occurrence=Dated(today),
        )
    return _make


class TestClassifyLevel:
    def test_total_hours_high(self):
        assert classify_level(7.0, 60, False) is RiskLevel.HIGH

    def test_continuous_high(self):
        assert classify_level(3.0, 180, False) is RiskLevel.HIGH

    def test_total_hours_medium(self):
        assert classify_level(5.0, 60, False) is RiskLevel.MEDIUM

    def test_continuous_medium(self):
        assert classify_level(2.0, 120, False) is RiskLevel.MEDIUM

    def test_late_block_medium(self):
        assert classify_level(1.0, 60, True) is RiskLevel.MEDIUM

    def test_low(self):
        assert classify_level(4.9, 119, False) is RiskLevel.LOW

    def test_high_beats_late(self):
        assert classify_level(8.0, 60, True) is RiskLevel.HIGH


class TestClassify:
    def test_no_load(self):
        assert classify(DayAnalysis()) == BurnoutRisk(RiskLevel.LOW, NO_ACTIVITY_REASON)

    def test_seven_hours_without_gaps_is_high(self):
        risk = classify(DayAnalysis(total_minutes=420, max_continuous_minutes=420))
        assert risk.level is RiskLevel.HIGH
        assert risk.reason == "7.0 hours of continuous academic load detected"

    def test_just_under_five_hours_split_up_is_low(self):
        risk = classify(DayAnalysis(total_minutes=294, max_continuous_minutes=100))
        assert risk.level is RiskLevel.LOW
        assert risk.reason == "Schedule looks balanced"

    def test_medium_late_reason(self):
        risk = classify(DayAnalysis(total_minutes=90, max_continuous_minutes=90, has_late_block=True))
        assert risk.level is RiskLevel.MEDIUM
        assert risk.reason == "1.5 hours scheduled — late night blocks detected"

    def test_medium_reason(self):
        risk = classify(DayAnalysis(total_minutes=330, max_continuous_minutes=100))
        assert risk.reason == "5.5 hours scheduled — consider adding breaks"


class TestBurnoutRisk:
    def test_with_reason_keeps_level(self):
        risk = BurnoutRisk(RiskLevel.HIGH, "original")
        updated = risk.with_reason("new")
        assert updated.level is RiskLevel.HIGH
        assert updated.reason == "new"
        assert risk.reason == "original"

    def test_frozen(self):
        risk = BurnoutRisk(RiskLevel.LOW, "ok")
        with pytest.raises(AttributeError):
            risk.level = RiskLevel.HIGH


class TestAssessBurnout:
    def test_back_to_back_blocks(self, make_block, today):
        risk = assess_burnout([make_block("09:00", "11:00"), make_block("11:10", "13:00")], today)
        assert risk.level is RiskLevel.HIGH

    def test_spread_out_blocks(self, make_block, today):
        blocks = [make_block("08:00", "09:40"), make_block("10:30", "12:10"), make_block("13:00", "14:34")]
        risk = assess_burnout(blocks, today)
        assert risk.level is RiskLevel.LOW

    def test_nothing_scheduled(self, today):
        assert assess_burnout([], today).reason == NO_ACTIVITY_REASON
