"""
Cross-check of the raw table against libphonenumber metadata.

All functions in this module are pure and do not perform network I/O. They use
metadata embedded in the `phonenumbers` library.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import phonenumbers

from phonefield.core.records import RawCountryEntry


@dataclass(frozen=True, slots=True)
class TableMismatch:
    iso2: str
    name: str
    dial_code: str
    expected: str

    def to_dict(self) -> dict[str, str]:
        return {
            "iso2": self.iso2,
            "name": self.name,
            "dial_code": self.dial_code,
            "expected": self.expected,
        }


def expected_country_code(iso2: str) -> str | None:
    """Country calling code libphonenumber assigns to `iso2`, or None if unknown."""

    code = phonenumbers.country_code_for_region(iso2.upper())
    return str(code) if code else None


def check_table(entries: Iterable[RawCountryEntry]) -> list[TableMismatch]:
    """
    Report entries whose dial code does not start with libphonenumber's code.

    Shared-plan codes such as `1242` (Bahamas, NANP `1`) are consistent because
    only the leading calling code is compared.
    """

    mismatches: list[TableMismatch] = []
    for entry in entries:
        expected = expected_country_code(entry.iso2)
        if expected is None:
            continue
        if not entry.dial_code.startswith(expected):
            mismatches.append(
                TableMismatch(
                    iso2=entry.iso2,
                    name=entry.name,
                    dial_code=entry.dial_code,
                    expected=expected,
                )
            )
    return mismatches
