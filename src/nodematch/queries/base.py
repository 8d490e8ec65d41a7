"""Protocols for the document side of an assertion.

nodematch never looks inside a document itself. A ``Scope`` is whatever the
caller's driver exposes (a page, an element); queries ask it for matching
nodes or for its text and wrap the answer in a ``Result``.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable

from nodematch.config import LocatorKind
from nodematch.count import CountOptions


@runtime_checkable
class Result(Protocol):
    @property
    def size(self) -> int: ...

    def failure_message(self) -> str: ...

    def negative_failure_message(self) -> str: ...


class Query(Protocol):
    @property
    def options(self) -> CountOptions: ...

    @property
    def wait(self) -> float: ...

    def resolve_for(self, scope: Any) -> Result: ...


class Scope(Protocol):
    """What a document node must provide for queries to resolve against it.

    ``find_all`` applies the locator and every filter in ``options`` (text,
    visibility, field state) and returns the current matches. ``query_scope``
    is the container a node is matched from, usually its parent document.
    """

    def find_all(
        self, kind: LocatorKind, locator: str, options: CountOptions
    ) -> Sequence[Any]: ...

    def text(self, visible_only: bool = True) -> str: ...

    @property
    def query_scope(self) -> Any: ...
