"""
Catalog export helpers.

Rows are plain dictionaries so the same data feeds JSON, CSV and the CLI.
"""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any, Iterable

from phonefield.core.catalog import Catalog
from phonefield.core.records import CountryRecord

FIELDNAMES = [
    "row_index",
    "section",
    "iso2",
    "name",
    "local_name",
    "dial_code",
    "country_code",
    "format",
    "priority",
    "regions",
    "main_code",
    "has_area_codes",
    "is_area_code",
]


def _section_rows(section: str, records: Iterable[CountryRecord]) -> list[dict[str, Any]]:
    rows: list[dict[str, Any]] = []
    for record in records:
        row = record.to_dict()
        row["section"] = section
        rows.append(row)
    return rows


def catalog_rows(catalog: Catalog) -> list[dict[str, Any]]:
    """Flatten a catalog: preferred, then visible, then hidden records."""

    rows: list[dict[str, Any]] = []
    rows.extend(_section_rows("preferred", catalog.preferred_countries))
    rows.extend(_section_rows("countries", catalog.countries))
    rows.extend(_section_rows("hidden", catalog.hidden_area_codes))
    return rows


def export_json(catalog: Catalog, path: Path) -> None:
    """Write the catalog rows to disk as pretty-printed JSON."""

    path.write_text(
        json.dumps(catalog_rows(catalog), indent=2, ensure_ascii=False), encoding="utf-8"
    )


def _csv_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, list):
        return "|".join(str(v) for v in value)
    return str(value)


def export_csv(catalog: Catalog, path: Path) -> None:
    """Export the catalog as one CSV row per record."""

    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDNAMES, extrasaction="ignore")
        writer.writeheader()
        for i, row in enumerate(catalog_rows(catalog)):
            out = {k: _csv_value(row.get(k)) for k in FIELDNAMES}
            out["row_index"] = str(i)
            writer.writerow(out)
