from __future__ import annotations

import pytest

from phonefield.config import CatalogConfig
from phonefield.core.catalog import Catalog, build_catalog, init_countries
from phonefield.core.matcher import DialCodeMatcher, resolve
from phonefield.core.records import RawCountryEntry
from phonefield.errors import CatalogIntegrityError


def _catalog(*entries: RawCountryEntry, strict: bool = False) -> Catalog:
    visible, hidden = init_countries(entries, False, "+", "... ...")
    return Catalog(countries=tuple(visible), hidden_area_codes=tuple(hidden), strict=strict)


def test_empty_input_resolves_to_default_country() -> None:
    catalog = build_catalog()
    assert resolve("", catalog, "us") == catalog.find("us")
    assert resolve("   ", catalog, "fr") == catalog.find("fr")
    assert resolve("", catalog, "zz") is None
    assert resolve("", catalog) is None


def test_longer_dial_code_wins() -> None:
    catalog = _catalog(
        RawCountryEntry("Aland", (), "aa", "1"),
        RawCountryEntry("Bland", (), "bb", "1242"),
    )
    record = resolve("1242555", catalog)
    assert record is not None and record.iso2 == "bb"

    record = resolve("1243", catalog)
    assert record is not None and record.iso2 == "aa"


def test_equal_length_lower_priority_wins() -> None:
    catalog = _catalog(
        RawCountryEntry("Xland", (), "xx", "7", None, 1),
        RawCountryEntry("Yland", (), "yy", "7", None, 0),
    )
    record = resolve("7", catalog)
    assert record is not None and record.iso2 == "yy"


def test_full_tie_keeps_first_record() -> None:
    catalog = _catalog(
        RawCountryEntry("Xland", (), "xx", "7"),
        RawCountryEntry("Yland", (), "yy", "7"),
    )
    record = resolve("79", catalog)
    assert record is not None and record.iso2 == "xx"


def test_shared_prefixes_in_default_catalog() -> None:
    catalog = build_catalog()

    def iso2(prefix: str) -> str | None:
        record = resolve(prefix, catalog, "us")
        return record.iso2 if record else None

    assert iso2("1242") == "bs"
    assert iso2("12") == "us"
    assert iso2("7") == "ru"
    assert iso2("7310") == "kz"
    assert iso2("1204555") == "ca"
    assert iso2("1809") == "do"
    assert iso2("39") == "it"
    assert iso2("44") == "gb"


def test_priority_override_changes_the_winner() -> None:
    catalog = build_catalog(CatalogConfig(priorities={"it": 2}))
    record = resolve("39", catalog)
    assert record is not None and record.iso2 == "va"


def test_unmatched_prefix_falls_back_to_default() -> None:
    catalog = build_catalog()
    assert resolve("999999", catalog, "fr") == catalog.find("fr")
    assert resolve("999999", catalog) is None


def test_hidden_area_code_resolves_to_parent() -> None:
    catalog = build_catalog(CatalogConfig(area_codes={"us": ["300"]}))
    record = resolve("1300555", catalog, "fr")
    assert record is not None
    assert record == catalog.find("us")
    assert record.is_area_code is False
    assert record.main_code is True


def test_visible_area_code_is_returned_directly() -> None:
    catalog = build_catalog(CatalogConfig(enable_area_codes=["us"], area_codes={"us": ["300"]}))
    record = resolve("1300555", catalog)
    assert record is not None
    assert record.is_area_code is True
    assert record.dial_code == "1300"


def test_hidden_area_code_without_parent() -> None:
    area_only = _catalog(RawCountryEntry("Testland", (), "tl", "99", None, 0, ("1",)))
    fr = _catalog(RawCountryEntry("France", (), "fr", "33"))

    broken = Catalog(countries=fr.countries, hidden_area_codes=area_only.hidden_area_codes)
    assert resolve("991", broken, "fr") == broken.find("fr")

    strict = Catalog(
        countries=fr.countries, hidden_area_codes=area_only.hidden_area_codes, strict=True
    )
    with pytest.raises(CatalogIntegrityError):
        resolve("991", strict, "fr")


def test_region_filtered_parent_falls_back_to_visible_match() -> None:
    catalog = build_catalog(CatalogConfig(regions="europe"))
    record = resolve("7310", catalog, "fr")
    assert record is not None and record.iso2 == "ru"


def test_full_length_input_matches_like_a_prefix() -> None:
    catalog = build_catalog()
    record = resolve("447911123456", catalog)
    assert record is not None and record.iso2 == "gb"


def test_matcher_memoizes_per_catalog_version() -> None:
    matcher = DialCodeMatcher()
    catalog = build_catalog()

    first = matcher.resolve("1242", catalog, "us")
    second = matcher.resolve("1242", catalog, "us")
    assert first is second
    assert matcher.stats().hits == 1
    assert matcher.stats().misses == 1

    rebuilt = build_catalog()
    assert matcher.resolve("1242", rebuilt, "us") == first
    assert matcher.stats().misses == 2

    matcher.invalidate(rebuilt)
    assert matcher.stats().size == 1
    matcher.invalidate()
    assert matcher.stats().size == 0


def test_matcher_caches_misses_too() -> None:
    matcher = DialCodeMatcher()
    catalog = build_catalog()
    assert matcher.resolve("999", catalog) is None
    assert matcher.resolve("999", catalog) is None
    assert matcher.stats().hits == 1
