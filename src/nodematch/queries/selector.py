"""Selector queries: find nodes of a locator kind and count them."""

from __future__ import annotations

from typing import Any, Iterator

from nodematch.config import LocatorKind, default_wait_time, get_settings
from nodematch.count import describe_count, describe_matches
from nodematch.queries.options import SelectorOptions, options_for


def split_locator(args: tuple[Any, ...]) -> tuple[LocatorKind, str]:
    """Turn ``("p.foo",)`` or ``("xpath", "//p")`` into a kind and locator."""
    if len(args) == 1:
        kind, locator = get_settings().default_selector, args[0]
    elif len(args) == 2:
        kind, locator = LocatorKind(args[0]), args[1]
    else:
        raise TypeError(
            f"expected a locator or a (kind, locator) pair, got {len(args)} arguments"
        )
    if not isinstance(locator, str):
        raise TypeError(f"locator must be a string, got {type(locator).__name__}")
    return kind, locator


class SelectorQuery:
    def __init__(self, *args: Any, **options: Any):
        self.kind, self.locator = split_locator(args)
        parsed = options_for(self.kind, options)
        if parsed.visible is None:
            parsed = parsed.model_copy(update={"visible": self._default_visible()})
        self.options: SelectorOptions = parsed
        self.wait: float = (
            parsed.wait if parsed.wait is not None else default_wait_time()
        )

    def _default_visible(self) -> bool:
        return get_settings().ignore_hidden_elements

    def resolve_for(self, scope: Any) -> SelectorResult:
        nodes = list(scope.find_all(self.kind, self.locator, self.options))
        return SelectorResult(self, nodes)

    def description(self) -> str:
        desc = f'{self.kind.value} "{self.locator}"'
        text = self.options.text
        if text is not None:
            shown = text if isinstance(text, str) else f"/{text.pattern}/"
            desc += f' with text "{shown}"'
        return desc

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.description()}>"


class SelectorResult:
    def __init__(self, query: SelectorQuery, nodes: list[Any]):
        self.query = query
        self.nodes = nodes

    @property
    def size(self) -> int:
        return len(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.nodes)

    def __contains__(self, node: Any) -> bool:
        return any(candidate == node for candidate in self.nodes)

    def _expected(self) -> str:
        wanted = describe_count(self.query.options)
        desc = self.query.description()
        return f"{desc} {wanted}" if wanted else desc

    def failure_message(self) -> str:
        if not describe_count(self.query.options) and self.size == 0:
            return f"expected to find {self._expected()} but there were no matches"
        return f"expected to find {self._expected()}, found {describe_matches(self.size)}"

    def negative_failure_message(self) -> str:
        return (
            f"expected not to find {self._expected()}, "
            f"found {describe_matches(self.size)}"
        )
