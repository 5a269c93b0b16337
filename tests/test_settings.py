from __future__ import annotations

from phonefield.core.records import RawCountryEntry, load_raw_countries
from phonefield.core.settings import CustomSetting, build_custom_settings, extend_raw_countries


def _by_iso2(entries: list[RawCountryEntry], iso2: str) -> RawCountryEntry:
    return next(e for e in entries if e.iso2 == iso2)


def test_build_custom_settings_merges_maps_per_iso2() -> None:
    settings = build_custom_settings(
        {"fr": "(...) ..-..-..", "at": "(....) ...-...."},
        {"gr": ["2694", "2647"], "fr": ["369", "463"], "us": ["300"]},
        {"fr": 1, "ca": 0, "us": 1, "kz": 0, "ru": 1},
    )
    assert [s.iso2 for s in settings] == ["fr", "at", "gr", "us", "ca", "kz", "ru"]
    assert settings[0] == CustomSetting(
        iso2="fr", mask="(...) ..-..-..", area_codes=("369", "463"), priority=1
    )
    assert settings[1] == CustomSetting(iso2="at", mask="(....) ...-....")
    assert settings[3] == CustomSetting(iso2="us", area_codes=("300",), priority=1)
    assert settings[4] == CustomSetting(iso2="ca", priority=0)


def test_build_custom_settings_accepts_missing_maps() -> None:
    assert build_custom_settings(None, None, None) == []


def test_extend_raw_countries_overrides_without_touching_source() -> None:
    source = load_raw_countries()
    original_us = _by_iso2(source, "us")

    extended = extend_raw_countries(
        source, build_custom_settings({"fr": "(...) ..-..-.."}, {"us": ["300"]}, {"us": 4})
    )

    us = _by_iso2(extended, "us")
    assert us.area_codes == ("300",)
    assert us.priority == 4
    assert _by_iso2(extended, "fr").mask == "(...) ..-..-.."

    # Neither the list passed in nor a fresh load see the override.
    assert _by_iso2(source, "us") is original_us
    assert _by_iso2(load_raw_countries(), "us").area_codes != ("300",)


def test_extend_raw_countries_ignores_falsy_values() -> None:
    source = load_raw_countries()
    extended = extend_raw_countries(
        source, build_custom_settings({"fr": ""}, {"kz": []}, {"ca": 0})
    )

    assert _by_iso2(extended, "fr").mask == _by_iso2(source, "fr").mask
    assert _by_iso2(extended, "kz").area_codes == _by_iso2(source, "kz").area_codes
    assert _by_iso2(extended, "ca").priority == 1


def test_extend_raw_countries_ignores_unknown_iso2() -> None:
    source = load_raw_countries()
    extended = extend_raw_countries(source, build_custom_settings({"zz": "..."}, {}, {}))
    assert extended == source
