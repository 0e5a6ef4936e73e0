"""Natural-language burnout explanations with a deterministic fallback."""

import logging
import random
import re
import threading
import time
from typing import Callable

from .core.analysis import DayAnalysis
from .core.burnout import BurnoutRisk, RiskLevel
from .ports.llm_service import LLMService, LLMServiceError

logger = logging.getLogger(__name__)

FAILURE_COOLDOWN_SECONDS = 60.0

EXPLANATION_SYSTEM_PROMPT = (
    "You are a caring student wellness advisor inside the Recess app. "
    "Respond with exactly ONE short sentence (max 18 words). "
    "Be warm, specific, and actionable. No quotes, no bullet points, no emojis."
)

TIP_SYSTEM_PROMPT = (
    "You are a student wellness coach inside the Recess app. "
    "Respond with exactly ONE short, actionable tip (max 15 words). "
    "Be specific, friendly, and motivating. No quotes, no emojis."
)

FALLBACK_EXPLANATIONS: dict[RiskLevel, list[str]] = {
    RiskLevel.HIGH: [
        "Heavy workload detected — your brain needs recovery time.",
        "Extended focus periods without breaks increase burnout risk.",
        "Long continuous sessions drain cognitive energy fast.",
        "Back-to-back commitments leave no room to recharge.",
    ],
    RiskLevel.MEDIUM: [
        "Moderate load today — regular breaks will keep you sharp.",
        "A few strategic pauses will help you stay energized.",
        "Solid schedule, but adding short breaks boosts focus.",
        "Your day is filling up — plan a break before fatigue hits.",
    ],
    RiskLevel.LOW: [
        "Great balance! Your schedule leaves room to breathe.",
        "Well-paced day — keep up the healthy rhythm.",
        "Light schedule today — a good opportunity to recharge.",
        "Your schedule allows for natural recovery.",
    ],
}

FALLBACK_TIPS = {
    "social": "Connect with a friend for 10 minutes to recharge your social batteries.",
    "walk": "A quick walk outside can clear your mind and boost creativity.",
    "gym": "Physical activity releases endorphins that fight stress.",
    "quiet": "Find a peaceful spot to rest your mind and breathe deeply.",
    "coffee": "Enjoy a mindful coffee break away from screens.",
}
DEFAULT_TIP = "Take a moment to breathe and step away from your work."

_QUOTES = re.compile(r"^[\"']|[\"']$")


class FailureCooldown:
    """
    Suppresses calls to a flaky service for a while after it fails.

    Thread-safe. The clock is injectable so tests can move time.
    """

    def __init__(
        self,
        seconds: float = FAILURE_COOLDOWN_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.seconds = seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._last_failure: float | None = None

    def can_attempt(self) -> bool:
        with self._lock:
            if self._last_failure is None:
                return True
            return self._clock() - self._last_failure >= self.seconds

    def record_failure(self) -> None:
        with self._lock:
            self._last_failure = self._clock()

    def reset(self) -> None:
        with self._lock:
            self._last_failure = None


def clean_reply(text: str | None, min_length: int, max_length: int) -> str | None:
    """Strip wrapping quotes and whitespace; None if the reply is out of bounds."""
    if not text:
        return None
    cleaned = _QUOTES.sub("", text.strip()).strip()
    if min_length <= len(cleaned) <= max_length:
        return cleaned
    return None


def explanation_prompt(
    total_hours: float,
    max_continuous_minutes: float,
    has_late_block: bool,
    level: RiskLevel,
) -> str:
    """User prompt describing the day's load."""
    return (
        "Analyze this student's burnout risk and give a concise insight:\n"
        f"- Total scheduled hours today: {total_hours:.1f}\n"
        f"- Longest continuous work period: {round(max_continuous_minutes)} minutes\n"
        f"- Has late-night activities (after 10 PM): {'yes' if has_late_block else 'no'}\n"
        f"- Burnout risk level: {level.value}"
    )


class BurnoutExplainer:
    """
    Decorates a burnout reason with text from a language service.

    Never changes the risk level and never raises: every failure path returns
    a line from the fallback bank and starts the cooldown.
    """

    def __init__(
        self,
        llm: LLMService | None = None,
        cooldown: FailureCooldown | None = None,
        rng: random.Random | None = None,
    ):
        self.llm = llm
        self.cooldown = cooldown or FailureCooldown()
        self._rng = rng or random.Random()

    def fallback(self, level: RiskLevel) -> str:
        return self._rng.choice(FALLBACK_EXPLANATIONS[level])

    def _ask(
        self,
        system: str,
        prompt: str,
        max_tokens: int,
        temperature: float,
        min_length: int,
        max_length: int,
    ) -> str | None:
        """One guarded call to the service. None means use the fallback."""
        if self.llm is None:
            return None
        if not self.cooldown.can_attempt():
            logger.debug("Language service cooling down, using fallback")
            return None

        try:
            reply = self.llm.complete(system, prompt, max_tokens=max_tokens, temperature=temperature)
        except LLMServiceError as e:
            logger.warning(f"Language service failed: {e}")
            self.cooldown.record_failure()
            return None
        except Exception as e:
            logger.exception(f"Unexpected language service error: {e}")
            self.cooldown.record_failure()
            return None

        cleaned = clean_reply(reply, min_length, max_length)
        if cleaned is None:
            logger.warning(f"Discarding language service reply: {reply!r}")
            self.cooldown.record_failure()
        return cleaned

    def explain(
        self,
        total_hours: float,
        max_continuous_minutes: float,
        has_late_block: bool,
        level: RiskLevel,
    ) -> str:
        """One-sentence explanation for a classified day."""
        prompt = explanation_prompt(total_hours, max_continuous_minutes, has_late_block, level)
        reply = self._ask(EXPLANATION_SYSTEM_PROMPT, prompt, 60, 0.7, 10, 120)
        return reply or self.fallback(level)

    def enrich(self, risk: BurnoutRisk, analysis: DayAnalysis) -> BurnoutRisk:
        """Return risk with an enriched reason. Empty days keep their reason."""
        if analysis.is_empty:
            return risk
        reason = self.explain(
            analysis.total_hours,
            analysis.max_continuous_minutes,
            analysis.has_late_block,
            risk.level,
        )
        return risk.with_reason(reason)

    def suggest_break_tip(self, break_type: str, minutes: int) -> str:
        """One actionable tip for a break the user is about to take."""
        prompt = f"Give a quick tip for a {minutes}-minute {break_type} break a college student is about to take."
        reply = self._ask(TIP_SYSTEM_PROMPT, prompt, 40, 0.8, 10, 100)
        return reply or FALLBACK_TIPS.get(break_type.lower(), DEFAULT_TIP)
