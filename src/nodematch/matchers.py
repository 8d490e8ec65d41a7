"""Assertions and predicates for document nodes.

Mix :class:`Matchers` into a page or element class that implements the
:class:`~nodematch.queries.base.Scope` protocol. Every ``assert_*`` method
waits for its condition and raises :class:`ExpectationNotMet` when time runs
out; every ``has_*`` method is the same assertion turned into a boolean.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from nodematch.config import LocatorKind
from nodematch.count import count_satisfied
from nodematch.errors import ExpectationNotMet
from nodematch.outcome import Failure, Outcome, Success
from nodematch.queries.base import Query, Result
from nodematch.queries.match import MatchQuery
from nodematch.queries.selector import SelectorQuery
from nodematch.queries.text import TextQuery
from nodematch.synchronize import SynchronizedEvaluator

logger = logging.getLogger("nodematch.matchers")


def _decision(expect_success: bool, holds: Callable[[Result], bool]):
    """Build a decision that passes when ``holds(result)`` equals ``expect_success``.

    Positive and negative assertions share the same condition and differ only
    in which answer counts as done and which message is attached.
    """

    def decide(result: Result) -> Outcome:
        if holds(result) == expect_success:
            return Success()
        if expect_success:
            return Failure(result.failure_message)
        return Failure(result.negative_failure_message)

    return decide


def _predicate(assertion_name: str):
    def check(self, *args: Any, **options: Any) -> bool:
        try:
            return getattr(self, assertion_name)(*args, **options)
        except ExpectationNotMet:
            return False

    check.__doc__ = f"Return ``{assertion_name}(...)`` as a boolean."
    return check


def _derived(kind: LocatorKind, negate: bool = False, **overlay: Any):
    """A ``has_*`` check for one locator kind with fixed extra options."""

    def check(self, locator: str, **options: Any) -> bool:
        merged = {**options, **overlay}
        if negate:
            return self.has_no_selector(kind, locator, **merged)
        return self.has_selector(kind, locator, **merged)

    return check


class Matchers:
    #: Evaluator used for every assertion; ``None`` builds a default one per call.
    evaluator: SynchronizedEvaluator | None = None

    def _synchronize(self, query: Query, scope: Any, decide) -> bool:
        evaluator = self.evaluator or SynchronizedEvaluator()
        outcome, _ = evaluator.run(query.wait, scope, query, decide)
        if isinstance(outcome, Failure):
            message = outcome.message
            logger.info(f"Expectation not met: {message}")
            raise ExpectationNotMet(message)
        return True

    def _assert_count(self, query: SelectorQuery | TextQuery, present: bool) -> bool:
        def holds(result: Result) -> bool:
            return count_satisfied(result.size, query.options)

        return self._synchronize(query, self, _decision(present, holds))

    def _assert_match(self, query: MatchQuery, present: bool) -> bool:
        def holds(result) -> bool:
            return self in result

        return self._synchronize(query, self.query_scope, _decision(present, holds))

    def assert_selector(self, *args: Any, **options: Any) -> bool:
        """Assert that a selector is present, by default at least once.

            page.assert_selector("p#foo")
            page.assert_selector("xpath", './/p[@id="foo"]', count=4)
            page.assert_selector("li", text="Horse", between=(2, 4))

        A ``count`` of 0 behaves like :meth:`assert_no_selector`.
        """
        return self._assert_count(SelectorQuery(*args, **options), present=True)

    def assert_no_selector(self, *args: Any, **options: Any) -> bool:
        """Assert that a selector, with its count options, is not present.

        Count options are part of what is being ruled out. With four anchors
        on the page::

            page.assert_no_selector("a", minimum=1)  # raises
            page.assert_no_selector("a", count=4)    # raises
            page.assert_no_selector("a", count=5)    # passes
        """
        return self._assert_count(SelectorQuery(*args, **options), present=False)

    refute_selector = assert_no_selector

    def assert_matches_selector(self, *args: Any, **options: Any) -> bool:
        """Assert that this node is among the selector's matches in its container."""
        return self._assert_match(MatchQuery(*args, **options), present=True)

    def assert_not_matches_selector(self, *args: Any, **options: Any) -> bool:
        """Assert that this node is not among the selector's matches in its container."""
        return self._assert_match(MatchQuery(*args, **options), present=False)

    refute_matches_selector = assert_not_matches_selector

    def assert_text(self, *args: Any, **options: Any) -> bool:
        """Assert that this node's text contains a string or matches a regex.

        Pass ``"all"`` or ``"visible"`` before the text to choose which text
        is searched. Count options apply to the number of occurrences.
        """
        return self._assert_count(TextQuery(*args, **options), present=True)

    def assert_no_text(self, *args: Any, **options: Any) -> bool:
        """Assert that this node's text does not contain the text the given number of times."""
        return self._assert_count(TextQuery(*args, **options), present=False)

    has_selector = _predicate("assert_selector")
    has_no_selector = _predicate("assert_no_selector")
    matches_selector = _predicate("assert_matches_selector")
    not_matches_selector = _predicate("assert_not_matches_selector")
    has_text = _predicate("assert_text")
    has_no_text = _predicate("assert_no_text")
    has_content = has_text
    has_no_content = has_no_text

    has_css = _derived(LocatorKind.CSS)
    has_no_css = _derived(LocatorKind.CSS, negate=True)
    has_xpath = _derived(LocatorKind.XPATH)
    has_no_xpath = _derived(LocatorKind.XPATH, negate=True)
    has_link = _derived(LocatorKind.LINK)
    has_no_link = _derived(LocatorKind.LINK, negate=True)
    has_button = _derived(LocatorKind.BUTTON)
    has_no_button = _derived(LocatorKind.BUTTON, negate=True)
    has_field = _derived(LocatorKind.FIELD)
    has_no_field = _derived(LocatorKind.FIELD, negate=True)
    has_checked_field = _derived(LocatorKind.FIELD, checked=True)
    has_no_checked_field = _derived(LocatorKind.FIELD, negate=True, checked=True)
    has_unchecked_field = _derived(LocatorKind.FIELD, unchecked=True)
    has_no_unchecked_field = _derived(LocatorKind.FIELD, negate=True, unchecked=True)
    has_select = _derived(LocatorKind.SELECT)
    has_no_select = _derived(LocatorKind.SELECT, negate=True)
    has_table = _derived(LocatorKind.TABLE)
    has_no_table = _derived(LocatorKind.TABLE, negate=True)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        base = getattr(self, "base", None)
        return base is not None and base == getattr(other, "base", None)

    def __hash__(self) -> int:
        base = getattr(self, "base", None)
        return hash(base) if base is not None else id(self)
