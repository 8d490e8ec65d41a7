"""Outcome of a single decision made on a resolved query."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class Success:
    pass


@dataclass(frozen=True)
class Failure:
    """A failed decision.

    The message is produced on demand because building it can mean walking
    the document again; retries that fail along the way never pay for it.
    """

    describe: Callable[[], str]

    @property
    def message(self) -> str:
        return self.describe()


Outcome = Success | Failure


def as_bool(outcome: Outcome) -> bool:
    return isinstance(outcome, Success)
