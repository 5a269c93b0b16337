"""Country lookup by free text, for dropdown search boxes."""

from __future__ import annotations

import re

from phonefield.core.catalog import Catalog
from phonefield.core.records import CountryRecord

_ALL_DIGITS = re.compile(r"[0-9]+")


def search_countries(query: str, catalog: Catalog) -> list[CountryRecord]:
    """
    Filter preferred + visible countries by `query`.

    Digits match anywhere in the dial code. Anything else matches iso2 codes
    first, then English or localized names; all case-insensitive.
    """

    all_countries = [*catalog.preferred_countries, *catalog.countries]
    q = query.strip().lower()
    if not q:
        return all_countries

    if _ALL_DIGITS.fullmatch(q):
        return [c for c in all_countries if q in c.dial_code]

    iso2_hits = [c for c in all_countries if q in c.iso2.lower()]
    name_hits = [
        c for c in all_countries if q in c.name.lower() or q in (c.local_name or "").lower()
    ]
    return list(dict.fromkeys([*iso2_hits, *name_hits]))


def probable_candidate(query: str, catalog: Catalog) -> CountryRecord | None:
    """First visible country whose English name starts with `query` (type-ahead)."""

    q = query.lower()
    if not q:
        return None
    for record in catalog.countries:
        if record.name.lower().startswith(q):
            return record
    return None
