"""Pytest configuration and fixtures."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from nodematch.config import reset_settings
from nodematch.matchers import Matchers
from nodematch.synchronize import SynchronizedEvaluator


@pytest.fixture(autouse=True)
def clean_state():
    """Restore default settings around each test."""
    reset_settings()
    yield
    reset_settings()


# ---------------------------------------------------------------------------
# Fake time
# ---------------------------------------------------------------------------


class FakeClock:
    """Monotonic clock that only advances when the evaluator sleeps."""

    def __init__(self):
        self.now = 0.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def evaluator(clock) -> SynchronizedEvaluator:
    return SynchronizedEvaluator(interval=0.01, clock=clock, sleep=clock.sleep)


# ---------------------------------------------------------------------------
# Fake documents
# ---------------------------------------------------------------------------


class FakeNode(Matchers):
    """A node whose matches and text come from callables of the fake time."""

    def __init__(
        self,
        name: str = "node",
        clock: FakeClock | None = None,
        parent: "FakeNode | None" = None,
        base: Any = None,
    ):
        self.name = name
        self.clock = clock or FakeClock()
        self.parent = parent
        self.base = base
        self.matches: dict[tuple[str, str], Callable[[float], list[Any]]] = {}
        self.text_at: Callable[[float], str] = lambda t: ""
        self.hidden_text_at: Callable[[float], str] | None = None
        self.calls: list[tuple[Any, str, Any]] = []
        self.text_calls: list[bool] = []

    def set_matches(self, kind: str, locator: str, nodes) -> None:
        if callable(nodes):
            self.matches[(kind, locator)] = nodes
        else:
            self.matches[(kind, locator)] = lambda t, nodes=nodes: list(nodes)

    def find_all(self, kind, locator, options):
        self.calls.append((kind, locator, options))
        producer = self.matches.get((kind.value, locator))
        if producer is None:
            return []
        return producer(self.clock())

    def text(self, visible_only: bool = True) -> str:
        self.text_calls.append(visible_only)
        if not visible_only and self.hidden_text_at is not None:
            return self.hidden_text_at(self.clock())
        return self.text_at(self.clock())

    @property
    def query_scope(self):
        return self.parent if self.parent is not None else self

    def __repr__(self) -> str:
        return f"<FakeNode {self.name}>"


@pytest.fixture
def page(clock, evaluator) -> FakeNode:
    node = FakeNode("page", clock=clock)
    node.evaluator = evaluator
    return node


@pytest.fixture
def make_node(clock, evaluator):
    """Build extra nodes that share the page's clock and evaluator."""

    def _make(name: str, parent: FakeNode | None = None, base: Any = None) -> FakeNode:
        node = FakeNode(name, clock=clock, parent=parent, base=base)
        node.evaluator = evaluator
        return node

    return _make
