"""Generate JSON Schema and docs for settings and per-kind query options."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from nodematch.config import LocatorKind, Settings
from nodematch.queries.options import OPTIONS_BY_KIND, TextOptions


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def generate_json_schema() -> dict:
    return {
        "$schema": "https://json-schema.org/draft/2020-12/schema",
        "title": "nodematch",
        "settings": Settings.model_json_schema(),
        "selector_options": {
            kind.value: OPTIONS_BY_KIND[kind].model_json_schema(by_alias=True)
            for kind in LocatorKind
        },
        "text_options": TextOptions.model_json_schema(),
    }


def write_json_schema(path: Path) -> None:
    _ensure_parent(path)
    schema = generate_json_schema()
    path.write_text(json.dumps(schema, indent=2) + "\n")


def _format_fields(fields: Iterable[str]) -> str:
    return ", ".join(f"`{name}`" for name in fields)


def generate_schema_doc() -> str:
    schema = generate_json_schema()

    lines: list[str] = []
    lines.append("# nodematch options")
    lines.append("")
    lines.append("This doc is generated from the Pydantic models.")
    lines.append("")
    lines.append("## Settings")
    for name, prop in schema["settings"]["properties"].items():
        default = prop.get("default")
        lines.append(f"- `{name}`: default `{default}`")
    lines.append("")
    lines.append("## Selector options by locator kind")
    for kind, kind_schema in schema["selector_options"].items():
        fields = kind_schema.get("properties", {}).keys()
        lines.append(f"- `{kind}`: {_format_fields(fields)}")
    lines.append("")
    lines.append("## Text options")
    lines.append(f"- {_format_fields(schema['text_options']['properties'].keys())}")
    lines.append("")
    return "\n".join(lines)


def write_schema_doc(path: Path) -> None:
    _ensure_parent(path)
    path.write_text(generate_schema_doc())
