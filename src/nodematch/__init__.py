"""Synchronized count assertions for documents that keep changing."""

from nodematch.config import (
    LocatorKind,
    Settings,
    configure,
    get_settings,
    load_settings,
    reset_settings,
    using_wait_time,
)
from nodematch.count import CountOptions, expects_none, matches_count
from nodematch.errors import ExpectationNotMet, NodematchError
from nodematch.matchers import Matchers
from nodematch.outcome import Failure, Outcome, Success, as_bool
from nodematch.synchronize import SynchronizedEvaluator

__all__ = [
    "CountOptions",
    "ExpectationNotMet",
    "Failure",
    "LocatorKind",
    "Matchers",
    "NodematchError",
    "Outcome",
    "Settings",
    "Success",
    "SynchronizedEvaluator",
    "as_bool",
    "configure",
    "expects_none",
    "get_settings",
    "load_settings",
    "matches_count",
    "reset_settings",
    "using_wait_time",
]
