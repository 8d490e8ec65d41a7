"""Match queries: does a node satisfy a selector from its container?"""

from __future__ import annotations

from typing import Any

from nodematch.queries.selector import SelectorQuery, SelectorResult


class MatchQuery(SelectorQuery):
    """A selector query resolved against a node's ``query_scope``.

    Visibility is not filtered unless asked for, since the node under test
    was already found.
    """

    def _default_visible(self) -> bool:
        return False

    def resolve_for(self, scope: Any) -> MatchResult:
        nodes = list(scope.find_all(self.kind, self.locator, self.options))
        return MatchResult(self, nodes)


class MatchResult(SelectorResult):
    def failure_message(self) -> str:
        return "Item does not match the provided selector"

    def negative_failure_message(self) -> str:
        return "Item matched the provided selector"
