"""
Dial-code matching.

`resolve` picks the record whose dial code is the longest prefix of the typed
digits, breaking length ties by priority (lower wins, earliest record on a full
tie). Callers normally pass only the first few digits (see
`PhoneFieldSettings.guess_prefix_length`), but full numbers work too.
"""

from __future__ import annotations

import logging
from typing import Sequence

from phonefield.cache import CacheStats, MemoCache, make_cache_key
from phonefield.core.catalog import Catalog
from phonefield.core.records import CountryRecord
from phonefield.errors import CatalogIntegrityError

logger = logging.getLogger(__name__)

# Any real match beats this.
_NO_MATCH_PRIORITY = 10001


def _best_match(digits: str, records: Sequence[CountryRecord]) -> CountryRecord | None:
    best: CountryRecord | None = None
    best_len = 0
    best_priority = _NO_MATCH_PRIORITY

    for record in records:
        if not digits.startswith(record.dial_code):
            continue
        length = len(record.dial_code)
        if length > best_len or (length == best_len and record.priority < best_priority):
            best, best_len, best_priority = record, length, record.priority
    return best


def _visible_parent(
    record: CountryRecord, digits: str, catalog: Catalog, fallback: CountryRecord | None
) -> CountryRecord | None:
    parent = catalog.find_main_code(record.iso2)
    if parent is not None:
        return parent

    message = f"No main-code record for hidden area code {record.iso2}/{record.dial_code}"
    if catalog.strict:
        raise CatalogIntegrityError(message)
    logger.warning("%s; matching visible countries only", message)
    return _best_match(digits, catalog.countries) or fallback


def resolve(
    prefix_digits: str, catalog: Catalog, default_iso2: str | None = None
) -> CountryRecord | None:
    """
    Find the record matching the start of `prefix_digits`.

    Empty input, or input no dial code is a prefix of, resolves to the visible
    record for `default_iso2` (or None). A hidden area-code match resolves to its
    visible main-code parent, so the result is always displayable. When that
    parent is missing (e.g. filtered out by region), only visible records are
    matched.

    Raises:
        CatalogIntegrityError: strict catalogs only, when that parent is missing.
    """

    fallback = catalog.find(default_iso2)
    digits = prefix_digits.strip()
    if not digits:
        return fallback

    best = _best_match(digits, catalog.searchable)
    if best is None:
        return fallback

    if best.is_area_code and best in catalog.hidden_area_codes:
        return _visible_parent(best, digits, catalog, fallback)
    return best


class DialCodeMatcher:
    """`resolve` with a memo cache in front of it."""

    def __init__(self, *, max_entries: int = 4096) -> None:
        self._cache: MemoCache[CountryRecord | None] = MemoCache(max_entries)

    def resolve(
        self, prefix_digits: str, catalog: Catalog, default_iso2: str | None = None
    ) -> CountryRecord | None:
        key = make_cache_key(prefix_digits, catalog.version, default_iso2)
        hit, value = self._cache.lookup(key)
        if hit:
            return value
        value = resolve(prefix_digits, catalog, default_iso2)
        self._cache.store(key, value)
        return value

    def invalidate(self, catalog: Catalog | None = None) -> None:
        """Forget cached results (all, or those not computed against `catalog`)."""

        if catalog is None:
            self._cache.clear()
        else:
            self._cache.discard_stale(catalog.version)

    def stats(self) -> CacheStats:
        return self._cache.stats()
