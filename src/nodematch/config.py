"""Settings, locator kinds and the process-wide default wait budget."""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from enum import Enum
from pathlib import Path
from typing import Iterator

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, NonNegativeFloat, PositiveFloat


class LocatorKind(str, Enum):
    CSS = "css"
    XPATH = "xpath"
    ID = "id"
    LINK = "link"
    BUTTON = "button"
    FIELD = "field"
    SELECT = "select"
    TABLE = "table"


class Settings(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    default_max_wait_time: NonNegativeFloat = 2.0
    retry_interval: PositiveFloat = 0.05
    ignore_hidden_elements: bool = True
    default_selector: LocatorKind = LocatorKind.CSS


_DEFAULT_SETTINGS = Settings()
_settings: Settings = _DEFAULT_SETTINGS
_wait_override: ContextVar[float | None] = ContextVar(
    "nodematch_wait_override", default=None
)


def get_settings() -> Settings:
    return _settings


def configure(**changes) -> Settings:
    """Replace process-wide settings, validating the merged result."""
    global _settings
    _settings = Settings(**{**_settings.model_dump(), **changes})
    return _settings


def reset_settings() -> Settings:
    global _settings
    _settings = _DEFAULT_SETTINGS
    return _settings


def default_wait_time() -> float:
    """Wait budget for queries that do not pass an explicit ``wait``."""
    override = _wait_override.get()
    if override is not None:
        return override
    return _settings.default_max_wait_time


@contextmanager
def using_wait_time(seconds: float) -> Iterator[None]:
    """Temporarily change the default wait budget for the current context."""
    if seconds < 0:
        raise ValueError(f"wait time must not be negative, got {seconds}")
    token = _wait_override.set(seconds)
    try:
        yield
    finally:
        _wait_override.reset(token)


def load_settings(path: Path) -> Settings:
    """Load settings from a YAML file, expanding ${VAR} references first."""
    with open(path) as f:
        raw = yaml.safe_load(expandvars(f.read())) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"settings file {path} must contain a mapping")

    return Settings(**raw)
