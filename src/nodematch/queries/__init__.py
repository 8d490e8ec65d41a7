"""Queries that resolve against a document scope."""

from nodematch.queries.base import Query, Result, Scope
from nodematch.queries.match import MatchQuery, MatchResult
from nodematch.queries.selector import SelectorQuery, SelectorResult
from nodematch.queries.text import TextQuery, TextResult

__all__ = [
    "MatchQuery",
    "MatchResult",
    "Query",
    "Result",
    "Scope",
    "SelectorQuery",
    "SelectorResult",
    "TextQuery",
    "TextResult",
]
