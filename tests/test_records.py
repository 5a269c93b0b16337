from __future__ import annotations

import pytest

from phonefield.core.records import (
    AreaCodeRecord,
    CountryRecord,
    RawCountryEntry,
    load_raw_countries,
    load_raw_territories,
)
from phonefield.errors import RawTableError


def test_from_row_fills_optional_fields() -> None:
    entry = RawCountryEntry.from_row(("Testland", ["europe"], "tl", "99", "... ...", 2, ["1", "22"]))
    assert entry.regions == ("europe",)
    assert entry.mask == "... ..."
    assert entry.priority == 2
    assert entry.area_codes == ("1", "22")

    short = RawCountryEntry.from_row(("Testland", ("europe",), "tl", "99"))
    assert short.mask is None
    assert short.priority is None
    assert short.area_codes is None


@pytest.mark.parametrize(
    "row",
    [
        ("Testland", ("europe",), "tl"),
        ("", ("europe",), "tl", "99"),
        ("Testland", ("europe",), "TL", "99"),
        ("Testland", ("europe",), "tl", "+99"),
        ("Testland", "europe", "tl", "99"),
        ("Testland", ("europe",), "tl", "99", "...", "1"),
        ("Testland", ("europe",), "tl", "99", "...", 0, ("12a",)),
    ],
)
def test_from_row_rejects_malformed_rows(row: tuple[object, ...]) -> None:
    with pytest.raises(RawTableError):
        RawCountryEntry.from_row(row)


def test_compiled_tables_load_with_unique_iso2_and_dial_code() -> None:
    countries = load_raw_countries()
    territories = load_raw_territories()
    assert len(countries) > 200
    assert territories

    iso2_codes = [e.iso2 for e in countries]
    assert len(iso2_codes) == len(set(iso2_codes))

    pairs = [(e.iso2, e.dial_code) for e in countries + territories]
    assert len(pairs) == len(set(pairs))


def test_tables_are_fresh_lists() -> None:
    first = load_raw_countries()
    first.clear()
    assert load_raw_countries()


def test_area_code_record_to_dict() -> None:
    record = AreaCodeRecord(
        name="United States",
        local_name="United States",
        iso2="us",
        regions=("america",),
        dial_code="1907",
        country_code="1",
        format="+.... ... ...",
        area_code_length=3,
    )
    data = record.to_dict()
    assert data["is_area_code"] is True
    assert data["area_code_length"] == 3
    assert data["country_code"] == "1"
    assert isinstance(record, CountryRecord)
