"""Retry a query against a changing document until a decision succeeds."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable

from nodematch.config import get_settings
from nodematch.outcome import Outcome, Success
from nodematch.queries.base import Query, Result

Decide = Callable[[Result], Outcome]


class SynchronizedEvaluator:
    """Poll ``query.resolve_for(scope)`` until ``decide`` succeeds or time runs out.

    Each attempt resolves the query fresh. The pause between attempts is
    clamped to what is left of the budget, so the last attempt happens at
    the deadline and its result is the one reported. A budget of zero means
    one attempt and no sleep.

    ``clock`` and ``sleep`` are injectable so timing can be driven by tests.
    """

    def __init__(
        self,
        interval: float | None = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Any] = time.sleep,
        logger: logging.Logger | None = None,
    ):
        self.interval = interval
        self.clock = clock
        self.sleep = sleep
        self.logger = logger or logging.getLogger("nodematch.synchronize")

    def run(
        self, wait: float, scope: Any, query: Query, decide: Decide
    ) -> tuple[Outcome, Result]:
        if wait < 0:
            raise ValueError(f"wait must not be negative, got {wait}")

        interval = self.interval
        if interval is None:
            interval = get_settings().retry_interval

        deadline = self.clock() + wait
        attempt = 0
        while True:
            attempt += 1
            result = query.resolve_for(scope)
            outcome = decide(result)
            self.logger.debug(
                f"Attempt {attempt} for {query!r}: size={result.size} "
                f"passed={isinstance(outcome, Success)}"
            )
            if isinstance(outcome, Success):
                return outcome, result

            remaining = deadline - self.clock()
            if remaining <= 0:
                self.logger.info(
                    f"Gave up on {query!r} after {attempt} attempt(s) in {wait}s"
                )
                return outcome, result

            self.sleep(min(interval, remaining))

