"""Background reason enrichment with a latest-request-wins guard."""

import logging
import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from datetime import date
from typing import Callable

from .core.analysis import analyze_day
from .core.burnout import BurnoutRisk, classify
from .core.timeline import ActivityBlock
from .explainer import BurnoutExplainer

logger = logging.getLogger(__name__)


class RiskEnricher:
    """
    Shows the pure classification now and the enriched one later.

    Each assess() call takes a new request token. An enriched result is
    delivered only if its token is still the latest when it completes;
    older pending requests are cancelled.
    """

    def __init__(self, explainer: BurnoutExplainer, executor: Executor | None = None):
        self.explainer = explainer
        self._executor = executor or ThreadPoolExecutor(max_workers=2, thread_name_prefix="recess-enrich")
        self._lock = threading.Lock()
        self._latest = 0
        self._pending: Future | None = None

    @property
    def latest_token(self) -> int:
        with self._lock:
            return self._latest

    def is_current(self, token: int) -> bool:
        return token == self.latest_token

    def assess(
        self,
        blocks: list[ActivityBlock],
        target_date: date,
        on_enriched: Callable[[BurnoutRisk], None],
    ) -> tuple[BurnoutRisk, Future]:
        """
        Classify immediately and enrich in the background.

        Returns the pure risk and a future resolving to the enriched risk.
        on_enriched runs on the worker thread, only for the latest request.
        """
        analysis = analyze_day(blocks, target_date)
        risk = classify(analysis)

        def _run(token: int) -> BurnoutRisk:
            enriched = self.explainer.enrich(risk, analysis)
            if self.is_current(token):
                on_enriched(enriched)
            else:
                logger.debug(f"Dropping stale enrichment for request {token}")
            return enriched

        with self._lock:
            self._latest += 1
            token = self._latest
            stale, self._pending = self._pending, None
        if stale is not None:
            stale.cancel()

        # The executor may run _run inline, so submit without holding the lock.
        future = self._executor.submit(_run, token)
        with self._lock:
            if self._latest == token:
                self._pending = future

        return risk, future

    def shutdown(self) -> None:
        self._executor.shutdown(wait=False, cancel_futures=True)
