from __future__ import annotations

from phonefield.config import CatalogConfig
from phonefield.core.catalog import build_catalog
from phonefield.core.search import probable_candidate, search_countries


def test_blank_query_returns_everything() -> None:
    catalog = build_catalog(CatalogConfig(preferred_countries=["gb"]))
    results = search_countries("  ", catalog)
    assert results[0].iso2 == "gb"
    assert len(results) == len(catalog.countries) + 1


def test_digit_query_matches_dial_codes() -> None:
    results = search_countries("44", build_catalog())
    assert "gb" in [r.iso2 for r in results]
    assert all("44" in r.dial_code for r in results)


def test_text_query_lists_iso2_matches_first() -> None:
    results = search_countries("US", build_catalog())
    iso2s = [r.iso2 for r in results]
    assert iso2s[0] == "us"
    assert "ru" in iso2s  # "Russia"
    assert len(iso2s) == len(set(iso2s))


def test_search_matches_localized_names() -> None:
    catalog = build_catalog(CatalogConfig(localization={"de": "Deutschland"}))
    assert [r.iso2 for r in search_countries("deutsch", catalog)] == ["de"]


def test_preferred_duplicates_collapse() -> None:
    catalog = build_catalog(CatalogConfig(preferred_countries=["fr"]))
    assert [r.iso2 for r in search_countries("france", catalog)] == ["fr"]


def test_probable_candidate() -> None:
    catalog = build_catalog()
    candidate = probable_candidate("ger", catalog)
    assert candidate is not None and candidate.iso2 == "de"
    assert probable_candidate("", catalog) is None
    assert probable_candidate("xyz", catalog) is None
