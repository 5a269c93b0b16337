"""
Catalog construction.

Building a catalog runs in a fixed order:

1. merge user overrides into a copy of the raw table (`phonefield.core.settings`),
2. expand raw entries into country and area-code records (`init_countries`),
3. curate: territory merge, region filter, inclusion, exclusion, preferred
   extraction and localization.

A `Catalog` is an immutable snapshot. Configuration changes mean building a new
one; each build gets a fresh `version` so memoized lookups keyed on it go stale.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field, replace
from typing import Iterable, Mapping, Sequence, cast

from phonefield.config import CatalogConfig
from phonefield.core.records import (
    AreaCodeRecord,
    CountryRecord,
    RawCountryEntry,
    load_raw_countries,
    load_raw_territories,
)
from phonefield.core.settings import build_custom_settings, extend_raw_countries

logger = logging.getLogger(__name__)

_versions = itertools.count(1)


def get_mask(
    prefix: str,
    dial_code: str,
    predefined_mask: str | None,
    default_mask: str,
    always_default_mask: bool = False,
) -> str:
    """
    Build the display mask for a dial code.

    One `.` is reserved per dial-code digit, followed by a space and the
    national mask (the predefined one unless missing or `always_default_mask`).
    """

    national = default_mask if not predefined_mask or always_default_mask else predefined_mask
    return prefix + "." * len(dial_code) + " " + national


def _area_codes_enabled(enable_area_codes: bool | Sequence[str], iso2: str) -> bool:
    # A bare True enables everything; a list only enables the codes it names.
    if isinstance(enable_area_codes, bool):
        return enable_area_codes
    return iso2 in enable_area_codes


def init_countries(
    entries: Iterable[RawCountryEntry],
    enable_area_codes: bool | Sequence[str],
    prefix: str,
    default_mask: str,
    always_default_mask: bool = False,
) -> tuple[list[CountryRecord], list[AreaCodeRecord]]:
    """
    Expand raw entries into records.

    Returns:
        `(visible, hidden_area_codes)`. Visible records keep the table order with
        enabled area codes right after their parent; area codes of countries
        without enabled area codes go to the hidden list.
    """

    visible: list[CountryRecord] = []
    hidden: list[AreaCodeRecord] = []

    for entry in entries:
        area_codes = list(dict.fromkeys(entry.area_codes or ()))
        base = CountryRecord(
            name=entry.name,
            local_name=entry.name,
            iso2=entry.iso2,
            regions=entry.regions,
            dial_code=entry.dial_code,
            country_code=entry.dial_code,
            format=get_mask(prefix, entry.dial_code, entry.mask, default_mask, always_default_mask),
            priority=entry.priority or 0,
        )

        if not area_codes:
            visible.append(base)
            continue

        area_items = [
            AreaCodeRecord(
                name=base.name,
                local_name=base.local_name,
                iso2=base.iso2,
                regions=base.regions,
                dial_code=entry.dial_code + code,
                country_code=entry.dial_code,
                format=get_mask(
                    prefix, entry.dial_code + code, entry.mask, default_mask, always_default_mask
                ),
                priority=base.priority,
                area_code_length=len(code),
            )
            for code in area_codes
        ]

        if _area_codes_enabled(enable_area_codes, entry.iso2):
            visible.append(replace(base, main_code=True, has_area_codes=True))
            visible.extend(area_items)
        else:
            visible.append(replace(base, main_code=True))
            hidden.extend(area_items)

    return visible, hidden


def sort_territories(
    territories: Sequence[CountryRecord], countries: Sequence[CountryRecord]
) -> list[CountryRecord]:
    """Merge territories into the country list, ordered by English name."""

    return sorted([*territories, *countries], key=lambda c: c.name)


def dedupe_records(records: Iterable[CountryRecord]) -> list[CountryRecord]:
    """Drop records repeating an `(iso2, dial_code)` pair already seen."""

    seen: set[tuple[str, str]] = set()
    out: list[CountryRecord] = []
    for record in records:
        key = (record.iso2, record.dial_code)
        if key in seen:
            logger.debug("Dropping duplicate record %s/%s", record.iso2, record.dial_code)
            continue
        seen.add(key)
        out.append(record)
    return out


def filter_regions(
    regions: str | Sequence[str] | None, countries: Sequence[CountryRecord]
) -> list[CountryRecord]:
    if not regions:
        return list(countries)
    wanted = {regions} if isinstance(regions, str) else set(regions)
    return [c for c in countries if wanted.intersection(c.regions)]


def filter_country_list(
    country_codes: Sequence[str],
    source: Sequence[CountryRecord],
    preserve_order: bool = False,
) -> list[CountryRecord]:
    """
    Narrow `source` to the given iso2 codes.

    With `preserve_order` the result follows `country_codes` (first record per
    code, unknown codes dropped); otherwise it keeps the order of `source`. An
    empty code list means no filter.
    """

    if not country_codes:
        return list(source)

    if preserve_order:
        first_by_iso2: dict[str, CountryRecord] = {}
        for record in source:
            first_by_iso2.setdefault(record.iso2, record)
        return [first_by_iso2[code] for code in country_codes if code in first_by_iso2]

    wanted = set(country_codes)
    return [c for c in source if c.iso2 in wanted]


def exclude_countries(
    countries: Sequence[CountryRecord], excluded: Sequence[str]
) -> list[CountryRecord]:
    if not excluded:
        return list(countries)
    dropped = set(excluded)
    return [c for c in countries if c.iso2 not in dropped]


def localize_countries(
    countries: Sequence[CountryRecord],
    localization: Mapping[str, str],
    preserve_order: bool = False,
) -> list[CountryRecord]:
    """
    Relabel records with localized names, then sort by them.

    Lookup is by iso2 first, then by English name. Relabelled records are new
    objects; records without a translation are passed through as-is.
    """

    out: list[CountryRecord] = []
    for record in countries:
        local_name = localization.get(record.iso2)
        if local_name is None:
            local_name = localization.get(record.name)
        if local_name is not None and local_name != record.local_name:
            record = replace(record, local_name=local_name)
        out.append(record)

    if not preserve_order:
        out.sort(key=lambda c: c.local_name)
    return out


@dataclass(frozen=True)
class Catalog:
    """
    Built country lists for one configuration.

    `preferred_countries` may repeat records that are also in `countries`.
    `hidden_area_codes` are never displayed; they only sharpen dial-code matching.
    """

    countries: tuple[CountryRecord, ...]
    preferred_countries: tuple[CountryRecord, ...] = ()
    hidden_area_codes: tuple[AreaCodeRecord, ...] = ()
    version: int = field(default_factory=lambda: next(_versions), compare=False)
    strict: bool = field(default=False, compare=False)

    @property
    def searchable(self) -> tuple[CountryRecord, ...]:
        """Visible records followed by hidden area codes, in matching order."""

        return self.countries + self.hidden_area_codes

    def find(self, iso2: str | None) -> CountryRecord | None:
        """Return the first visible record for `iso2`."""

        if not iso2:
            return None
        for record in self.countries:
            if record.iso2 == iso2:
                return record
        return None

    def find_main_code(self, iso2: str) -> CountryRecord | None:
        """Return the visible base record of a country that declares area codes."""

        for record in self.countries:
            if record.iso2 == iso2 and record.main_code:
                return record
        return None


def build_catalog(config: CatalogConfig | None = None) -> Catalog:
    """Build a catalog from configuration (a fresh, independent build every call)."""

    config = config or CatalogConfig()

    user_settings = build_custom_settings(config.masks, config.area_codes, config.priorities)
    raw_countries = extend_raw_countries(load_raw_countries(), user_settings)

    countries, hidden_area_codes = init_countries(
        raw_countries,
        config.enable_area_codes,
        config.prefix,
        config.default_mask,
        config.always_default_mask,
    )

    if config.enable_territories:
        raw_territories = extend_raw_countries(load_raw_territories(), user_settings)
        territories, _ = init_countries(
            raw_territories,
            config.enable_area_codes,
            config.prefix,
            config.default_mask,
            config.always_default_mask,
        )
        countries = sort_territories(territories, countries)

    countries = dedupe_records(countries)
    countries = filter_regions(config.regions, countries)

    preserve_only = config.preserves("only_countries")
    preserve_preferred = config.preserves("preferred_countries")

    visible = localize_countries(
        exclude_countries(
            filter_country_list(config.only_countries, countries, preserve_only),
            config.exclude_countries,
        ),
        config.localization,
        preserve_only,
    )

    preferred: list[CountryRecord] = []
    if config.preferred_countries:
        preferred = localize_countries(
            filter_country_list(config.preferred_countries, countries, preserve_preferred),
            config.localization,
            preserve_preferred,
        )

    hidden = exclude_countries(
        filter_country_list(config.only_countries, hidden_area_codes),
        config.exclude_countries,
    )

    catalog = Catalog(
        countries=tuple(visible),
        preferred_countries=tuple(preferred),
        hidden_area_codes=cast("tuple[AreaCodeRecord, ...]", tuple(hidden)),
        strict=config.strict,
    )
    logger.debug(
        "Built catalog v%d: %d countries, %d preferred, %d hidden area codes",
        catalog.version,
        len(catalog.countries),
        len(catalog.preferred_countries),
        len(catalog.hidden_area_codes),
    )
    return catalog
