"""Validated option sets, one per locator kind.

Unknown keys are rejected when the query is built, so a typo such as
``cuont=3`` fails loudly instead of being ignored.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import ConfigDict, Field, NonNegativeFloat, field_validator, model_validator

from nodematch.config import LocatorKind
from nodematch.count import CountOptions


def _check_text_or_pattern(v: Any) -> Any:
    if v is None or isinstance(v, (str, re.Pattern)):
        return v
    raise ValueError(f"expected a string or compiled regex, got {type(v).__name__}")


class SelectorOptions(CountOptions):
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    text: Any = None
    visible: bool | None = None
    wait: NonNegativeFloat | None = None

    @field_validator("text")
    @classmethod
    def text_must_be_string_or_pattern(cls, v):
        return _check_text_or_pattern(v)


class LinkOptions(SelectorOptions):
    href: Any = None

    @field_validator("href")
    @classmethod
    def href_must_be_string_or_pattern(cls, v):
        return _check_text_or_pattern(v)


class FieldOptions(SelectorOptions):
    with_: str | None = Field(default=None, alias="with")
    type: str | None = None
    checked: bool | None = None
    unchecked: bool | None = None

    @model_validator(mode="after")
    def checked_and_unchecked_are_exclusive(self) -> "FieldOptions":
        if self.checked and self.unchecked:
            raise ValueError("a field cannot be both checked and unchecked")
        return self


class SelectOptions(SelectorOptions):
    options: list[str] | None = None
    with_options: list[str] | None = None
    selected: str | list[str] | None = None


class TextOptions(CountOptions):
    model_config = ConfigDict(extra="forbid", frozen=True)

    wait: NonNegativeFloat | None = None


OPTIONS_BY_KIND: dict[LocatorKind, type[SelectorOptions]] = {
    LocatorKind.CSS: SelectorOptions,
    LocatorKind.XPATH: SelectorOptions,
    LocatorKind.ID: SelectorOptions,
    LocatorKind.LINK: LinkOptions,
    LocatorKind.BUTTON: SelectorOptions,
    LocatorKind.FIELD: FieldOptions,
    LocatorKind.SELECT: SelectOptions,
    LocatorKind.TABLE: SelectorOptions,
}


def options_for(kind: LocatorKind, raw: dict[str, Any]) -> SelectorOptions:
    return OPTIONS_BY_KIND[kind](**raw)
