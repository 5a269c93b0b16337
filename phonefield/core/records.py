"""
Country record types.

`RawCountryEntry` is the validated form of one row of the compiled-in tables.
`CountryRecord` / `AreaCodeRecord` are what the catalog, matcher and formatter
work with. All of them are immutable; overrides and localization produce new
objects.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable, Sequence

from phonefield.data.countries import RAW_COUNTRIES
from phonefield.data.territories import RAW_TERRITORIES
from phonefield.errors import RawTableError

_ISO2 = re.compile(r"^[a-z]{2}$")
_DIGITS = re.compile(r"^\d+$")


@dataclass(frozen=True, slots=True)
class RawCountryEntry:
    name: str
    regions: tuple[str, ...]
    iso2: str
    dial_code: str
    mask: str | None = None
    priority: int | None = None
    area_codes: tuple[str, ...] | None = None

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> RawCountryEntry:
        """
        Validate a positional table row.

        Raises:
            RawTableError: if a required field is missing or malformed.
        """

        if len(row) < 4 or len(row) > 7:
            raise RawTableError(f"Expected 4 to 7 fields, got {len(row)}: {row!r}")

        name, regions, iso2, dial_code = row[0], row[1], row[2], row[3]
        mask = row[4] if len(row) > 4 else None
        priority = row[5] if len(row) > 5 else None
        area_codes = row[6] if len(row) > 6 else None

        if not isinstance(name, str) or not name:
            raise RawTableError(f"Missing country name: {row!r}")
        if not isinstance(iso2, str) or not _ISO2.match(iso2):
            raise RawTableError(f"{name}: invalid iso2 code {iso2!r}")
        if not isinstance(dial_code, str) or not _DIGITS.match(dial_code):
            raise RawTableError(f"{name}: invalid dial code {dial_code!r}")
        if isinstance(regions, str) or not all(isinstance(r, str) for r in regions):
            raise RawTableError(f"{name}: regions must be a sequence of strings")
        if mask is not None and not isinstance(mask, str):
            raise RawTableError(f"{name}: mask must be a string")
        if priority is not None and (isinstance(priority, bool) or not isinstance(priority, int)):
            raise RawTableError(f"{name}: priority must be an integer")
        if area_codes is not None:
            if isinstance(area_codes, str) or not all(
                isinstance(a, str) and _DIGITS.match(a) for a in area_codes
            ):
                raise RawTableError(f"{name}: area codes must be digit strings")
            area_codes = tuple(area_codes)

        return cls(
            name=name,
            regions=tuple(regions),
            iso2=iso2,
            dial_code=dial_code,
            mask=mask,
            priority=priority,
            area_codes=area_codes,
        )


@dataclass(frozen=True, slots=True)
class CountryRecord:
    """
    A selectable country (or area code, see `AreaCodeRecord`).

    Fields:
        name: English name from the raw table.
        local_name: Display name after localization (defaults to `name`).
        dial_code: Full numeric prefix; for area codes this is parent + area code.
        country_code: The parent country's dial code.
        format: Display mask; `.` marks a digit position.
        priority: Tie-break between records of equal dial-code length (lower wins).
        main_code: The country declares area codes.
        has_area_codes: Its area codes are visible in the catalog.
    """

    name: str
    local_name: str
    iso2: str
    regions: tuple[str, ...]
    dial_code: str
    country_code: str
    format: str
    priority: int = 0
    main_code: bool = False
    has_area_codes: bool = False

    @property
    def is_area_code(self) -> bool:
        return False

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "local_name": self.local_name,
            "iso2": self.iso2,
            "regions": list(self.regions),
            "dial_code": self.dial_code,
            "country_code": self.country_code,
            "format": self.format,
            "priority": self.priority,
            "main_code": self.main_code,
            "has_area_codes": self.has_area_codes,
            "is_area_code": self.is_area_code,
        }


@dataclass(frozen=True, slots=True)
class AreaCodeRecord(CountryRecord):
    area_code_length: int = 0

    @property
    def is_area_code(self) -> bool:
        return True

    def to_dict(self) -> dict[str, Any]:
        out = CountryRecord.to_dict(self)
        out["area_code_length"] = self.area_code_length
        return out


def load_raw_entries(rows: Iterable[Sequence[Any]]) -> list[RawCountryEntry]:
    return [RawCountryEntry.from_row(row) for row in rows]


def load_raw_countries() -> list[RawCountryEntry]:
    """Return the validated country table (a new list on every call)."""

    return load_raw_entries(RAW_COUNTRIES)


def load_raw_territories() -> list[RawCountryEntry]:
    """Return the validated territory table (a new list on every call)."""

    return load_raw_entries(RAW_TERRITORIES)
