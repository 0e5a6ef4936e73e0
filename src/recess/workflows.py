"""Shared workflow layer between the CLI and other front ends.

Wires configured adapters to the functional core.
"""

import logging
from datetime import date

from .adapters.claude_cli import ClaudeCLIService
from .adapters.grok_api import GrokChatService
from .adapters.json_blocks import JsonBlockStore
from .config import RECESS_HOME, Config
from .core.analysis import analyze_day
from .core.breaks import SuggestedBreak, plan_breaks
from .core.burnout import BurnoutRisk, classify
from .core.conflicts import ProposedInterval, find_conflicts
from .core.timeline import ActivityBlock, resolve_for_date, sort_by_start
from .explainer import BurnoutExplainer, FailureCooldown
from .ports.llm_service import LLMService

logger = logging.getLogger(__name__)


def get_block_store(config: Config) -> JsonBlockStore:
    """Resolve the block file from config."""
    return JsonBlockStore(config.blocks_path)


def get_llm_service(config: Config) -> LLMService | None:
    """Build the configured language service, or None if unavailable."""
    match config.llm_provider:
        case "grok":
            if not config.llm_api_key:
                logger.info("No LLM_API_KEY configured, explanations use fallback text")
                return None
            return GrokChatService(
                api_key=config.llm_api_key,
                api_url=config.llm_api_url,
                model=config.llm_model,
                timeout=config.llm_timeout,
            )
        case "claude":
            return ClaudeCLIService(cwd=RECESS_HOME, timeout=config.llm_timeout)
        case "none" | "":
            return None
        case other:
            logger.warning(f"Unknown LLM_PROVIDER {other!r}, explanations use fallback text")
            return None


def get_explainer(config: Config) -> BurnoutExplainer:
    return BurnoutExplainer(
        llm=get_llm_service(config),
        cooldown=FailureCooldown(config.llm_failure_cooldown),
    )


def blocks_for_day(config: Config, target_date: date) -> list[ActivityBlock]:
    """Stored blocks that apply on a date, sorted by start."""
    blocks = get_block_store(config).fetch_blocks()
    return sort_by_start(resolve_for_date(blocks, target_date))


def assess_day(config: Config, target_date: date, explain: bool = False) -> BurnoutRisk:
    """Classify a stored day, optionally with an enriched reason."""
    blocks = get_block_store(config).fetch_blocks()
    analysis = analyze_day(blocks, target_date)
    risk = classify(analysis)
    if explain:
        risk = get_explainer(config).enrich(risk, analysis)
    return risk


def suggest_breaks(config: Config, target_date: date) -> list[SuggestedBreak]:
    blocks = get_block_store(config).fetch_blocks()
    return plan_breaks(blocks, target_date)


def check_proposal(config: Config, proposed: ProposedInterval) -> list[ActivityBlock]:
    """Stored blocks that collide with a proposed interval."""
    blocks = get_block_store(config).fetch_blocks()
    return find_conflicts(proposed, blocks)


def accept_breaks(config: Config, breaks: list[SuggestedBreak]) -> dict[SuggestedBreak, list[ActivityBlock]]:
    """
    Persist suggested breaks.

    Returns, for each break that overlaps something already stored, the
    blocks it collides with. Breaks are saved regardless.
    """
    store = get_block_store(config)
    existing = store.fetch_blocks()
    report = {}
    for b in breaks:
        clashes = find_conflicts(ProposedInterval(b.start, b.end, b.date), existing)
        if clashes:
            report[b] = clashes
    store.add_breaks(breaks)
    return report
