"""Count constraints shared by selector and text queries."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, NonNegativeInt, field_validator


class CountOptions(BaseModel):
    """How many matches an assertion accepts.

    Every constraint that is set must hold. When none is set the count
    itself is unconstrained and the caller decides what zero means.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    count: NonNegativeInt | None = None
    minimum: NonNegativeInt | None = None
    maximum: NonNegativeInt | None = None
    between: tuple[NonNegativeInt, NonNegativeInt] | None = None

    @field_validator("between", mode="before")
    @classmethod
    def normalize_between(cls, v):
        if isinstance(v, range):
            if v.step != 1 or len(v) == 0:
                raise ValueError("between range must be non-empty with step 1")
            return (v.start, v.stop - 1)
        return v

    @field_validator("between")
    @classmethod
    def between_must_be_ordered(cls, v):
        if v is not None and v[0] > v[1]:
            raise ValueError(f"between lower bound {v[0]} exceeds upper bound {v[1]}")
        return v


def matches_count(actual: int, options: CountOptions) -> bool:
    if options.count is not None and actual != options.count:
        return False
    if options.minimum is not None and actual < options.minimum:
        return False
    if options.maximum is not None and actual > options.maximum:
        return False
    if options.between is not None:
        lo, hi = options.between
        if not lo <= actual <= hi:
            return False
    return True


def expects_none(options: CountOptions) -> bool:
    """Return True when some count constraint is set and zero satisfies all of them."""
    constrained = any(
        v is not None
        for v in (options.count, options.minimum, options.maximum, options.between)
    )
    return constrained and matches_count(0, options)


def count_satisfied(actual: int, options: CountOptions) -> bool:
    """The condition a positive assertion waits for (and a negative one fails on)."""
    return matches_count(actual, options) and (actual > 0 or expects_none(options))


def _times(n: int) -> str:
    return "1 time" if n == 1 else f"{n} times"


def describe_count(options: CountOptions) -> str:
    parts: list[str] = []
    if options.count is not None:
        parts.append(_times(options.count))
    if options.between is not None:
        lo, hi = options.between
        parts.append(f"between {lo} and {_times(hi)}")
    if options.minimum is not None:
        parts.append(f"at least {_times(options.minimum)}")
    if options.maximum is not None:
        parts.append(f"at most {_times(options.maximum)}")
    return " and ".join(parts)


def describe_matches(actual: int) -> str:
    return f"{actual} match" if actual == 1 else f"{actual} matches"
