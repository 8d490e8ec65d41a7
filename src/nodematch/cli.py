from __future__ import annotations

import json
from pathlib import Path

import typer

app = typer.Typer(name="nodematch", help="Inspect nodematch settings and options")
config_app = typer.Typer(name="config", help="Show and validate settings files")
schema_app = typer.Typer(name="schema", help="Generate option schema and docs")
app.add_typer(config_app, name="config")
app.add_typer(schema_app, name="schema")


@config_app.command("show")
def config_show(
    config: str | None = typer.Option(
        None, "--config", "-c", help="Path to a settings YAML file"
    ),
):
    """Print the effective settings as JSON."""
    import yaml

    from nodematch.config import Settings, load_settings

    if config is None:
        settings = Settings()
    else:
        config_path = Path(config)
        if not config_path.exists():
            typer.echo(f"Error: config file not found: {config}", err=True)
            raise typer.Exit(1)
        try:
            settings = load_settings(config_path)
        except (ValueError, yaml.YAMLError) as e:
            typer.echo(f"Error: invalid settings in {config}:\n{e}", err=True)
            raise typer.Exit(1)

    typer.echo(json.dumps(settings.model_dump(mode="json"), indent=2))


@config_app.command("validate")
def config_validate(
    config: str = typer.Argument(help="Path to a settings YAML file"),
):
    """Check that a settings file loads and validates."""
    import yaml

    from nodematch.config import load_settings

    config_path = Path(config)
    if not config_path.exists():
        typer.echo(f"Error: config file not found: {config}", err=True)
        raise typer.Exit(1)
    try:
        load_settings(config_path)
    except (ValueError, yaml.YAMLError) as e:
        typer.echo(f"Error: invalid settings in {config}:\n{e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"{config}: OK")


@schema_app.command("generate")
def schema_generate(
    dir: str = typer.Option(
        ".", "--dir", help="Project directory for default schema/doc outputs"
    ),
    out: str | None = typer.Option(
        None,
        help="Output path for JSON Schema (defaults to <dir>/schemas/nodematch.schema.json)",
    ),
    doc: str | None = typer.Option(
        None, help="Output path for schema docs (defaults to <dir>/docs/options.md)"
    ),
):
    """Generate JSON Schema and docs for settings and query options."""
    from nodematch.schema import write_json_schema, write_schema_doc

    base = Path(dir)
    out_path = Path(out) if out else base / "schemas" / "nodematch.schema.json"
    doc_path = Path(doc) if doc else base / "docs" / "options.md"

    write_json_schema(out_path)
    write_schema_doc(doc_path)
    typer.echo(f"Wrote schema: {out_path}")
    typer.echo(f"Wrote docs: {doc_path}")


if __name__ == "__main__":
    app()
