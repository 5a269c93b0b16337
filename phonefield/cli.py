"""
phonefield CLI.

Commands:
  - resolve: match a number to its country and render it
  - catalog: print or export the built catalog
  - check-table: cross-check dial codes against libphonenumber
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError

from phonefield import __version__
from phonefield.config import PhoneFieldSettings, load_settings
from phonefield.core.catalog import build_catalog
from phonefield.core.formatter import render
from phonefield.core.matcher import resolve
from phonefield.core.parser import digits_only
from phonefield.core.records import load_raw_countries, load_raw_territories
from phonefield.core.validate import check_table
from phonefield.errors import PhoneFieldError
from phonefield.io.export import catalog_rows, export_csv, export_json
from phonefield.logging_config import configure_logging

logger = logging.getLogger(__name__)


def _load(config_path: Path | None) -> PhoneFieldSettings:
    try:
        settings = load_settings(yaml_path=config_path)
    except (PhoneFieldError, ValidationError) as exc:
        raise click.ClickException(str(exc)) from exc
    configure_logging(level=settings.log_level, json_logging=settings.json_logging)
    return settings


def resolve_number(number: str, settings: PhoneFieldSettings, country: str | None) -> dict[str, Any]:
    catalog = build_catalog(settings.catalog)
    digits = digits_only(number)
    record = resolve(digits, catalog, country or settings.default_country)
    return {
        "input": number,
        "digits": digits,
        "country": record.to_dict() if record is not None else None,
        "formatted": render(digits, record, settings.render),
    }


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__)
def main() -> None:
    """Dial-code resolution and phone number masks."""


_config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML config path.",
)


@main.command("resolve")
@click.argument("number", type=str)
@_config_option
@click.option("--country", default=None, help="Fallback iso2 code when no dial code matches.")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
def resolve_cmd(number: str, config_path: Path | None, country: str | None, as_json: bool) -> None:
    """Resolve NUMBER to a country and print it formatted."""

    settings = _load(config_path)
    try:
        result = resolve_number(number, settings, country.lower() if country else None)
    except PhoneFieldError as exc:
        raise click.ClickException(str(exc)) from exc

    if as_json:
        click.echo(json.dumps(result, indent=2, ensure_ascii=False))
        return

    record = result["country"]
    click.echo(result["formatted"])
    if record is None:
        click.echo("Country: (none)")
    else:
        click.echo(f"Country: {record['name']} ({record['iso2']}, +{record['dial_code']})")


@main.command("catalog")
@_config_option
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["text", "json", "csv"], case_sensitive=False),
    default="text",
    show_default=True,
)
@click.option("--output", "output_path", type=click.Path(path_type=Path), default=None)
def catalog_cmd(config_path: Path | None, fmt: str, output_path: Path | None) -> None:
    """Print or export the catalog built from configuration."""

    settings = _load(config_path)
    catalog = build_catalog(settings.catalog)
    fmt = fmt.lower()

    if output_path is not None:
        if fmt == "csv":
            export_csv(catalog, output_path)
        else:
            export_json(catalog, output_path)
        click.echo(str(output_path))
        return

    if fmt == "json":
        click.echo(json.dumps(catalog_rows(catalog), indent=2, ensure_ascii=False))
        return
    if fmt == "csv":
        raise click.ClickException("CSV output needs --output.")

    for row in catalog_rows(catalog):
        click.echo(f"{row['section']:<10} {row['iso2']}  +{row['dial_code']:<7} {row['local_name']}")


@main.command("check-table")
@click.option("--territories", is_flag=True, help="Also check the territory table.")
def check_table_cmd(territories: bool) -> None:
    """Cross-check the dial-code table against libphonenumber."""

    entries = load_raw_countries()
    if territories:
        entries += load_raw_territories()

    mismatches = check_table(entries)
    for m in mismatches:
        click.echo(f"{m.iso2} {m.name}: +{m.dial_code} (libphonenumber: +{m.expected})")
    if mismatches:
        raise SystemExit(1)
    click.echo(f"{len(entries)} entries OK")
