"""Text queries: count occurrences of a string or regex in a node's text."""

from __future__ import annotations

import re
from typing import Any

from nodematch.config import default_wait_time, get_settings
from nodematch.count import describe_count, describe_matches
from nodematch.queries.options import TextOptions

_TEXT_TYPES = frozenset({"all", "visible"})


def normalize_whitespace(text: str) -> str:
    return " ".join(text.split())


class TextQuery:
    """Count how often ``text`` occurs in a scope's text.

    Strings are compared with whitespace collapsed on both sides. Regexes are
    applied to the normalised document text unchanged.
    """

    def __init__(self, *args: Any, **options: Any):
        if len(args) == 1:
            text_type, expected = None, args[0]
        elif len(args) == 2:
            text_type, expected = args
        else:
            raise TypeError(
                f"expected text or a (type, text) pair, got {len(args)} arguments"
            )

        if text_type is not None and text_type not in _TEXT_TYPES:
            raise ValueError(f"text type must be 'all' or 'visible', got {text_type!r}")
        if isinstance(expected, str):
            expected = normalize_whitespace(expected)
            if not expected:
                raise ValueError("expected text must not be blank")
        elif not isinstance(expected, re.Pattern):
            raise TypeError(
                f"expected a string or compiled regex, got {type(expected).__name__}"
            )

        if text_type is None:
            text_type = "visible" if get_settings().ignore_hidden_elements else "all"

        self.type: str = text_type
        self.expected: str | re.Pattern = expected
        self.options = TextOptions(**options)
        self.wait: float = (
            self.options.wait if self.options.wait is not None else default_wait_time()
        )

    def count_in(self, text: str) -> int:
        if isinstance(self.expected, re.Pattern):
            return sum(1 for _ in self.expected.finditer(text))
        return text.count(self.expected)

    def resolve_for(self, scope: Any) -> TextResult:
        actual = normalize_whitespace(scope.text(visible_only=self.type == "visible"))
        return TextResult(self, actual, self.count_in(actual))

    def description(self) -> str:
        if isinstance(self.expected, re.Pattern):
            return f"text matching /{self.expected.pattern}/"
        return f'text "{self.expected}"'

    def __repr__(self) -> str:
        return f"<TextQuery {self.description()}>"


class TextResult:
    def __init__(self, query: TextQuery, actual_text: str, size: int):
        self.query = query
        self.actual_text = actual_text
        self.size = size

    def _expected(self) -> str:
        wanted = describe_count(self.query.options)
        desc = self.query.description()
        return f"{desc} {wanted}" if wanted else desc

    def failure_message(self) -> str:
        return (
            f'expected to find {self._expected()} in "{self.actual_text}", '
            f"found {describe_matches(self.size)}"
        )

    def negative_failure_message(self) -> str:
        return (
            f'expected not to find {self._expected()} in "{self.actual_text}", '
            f"found {describe_matches(self.size)}"
        )
