"""
Input sanitizing.

Typed or pasted values carry whatever punctuation the mask (or the user) added;
matching and formatting only ever look at the digits.
"""

from __future__ import annotations

import re

_NON_DIGITS = re.compile(r"[^0-9]+")
_MASK_PUNCTUATION = re.compile(r"[\s()\-]+")


def digits_only(raw: str | None) -> str:
    """Strip everything but ASCII digits."""

    if not raw:
        return ""
    return _NON_DIGITS.sub("", raw)


def guess_prefix(digits: str, length: int = 6) -> str:
    """
    Leading digits used to guess the country.

    No dial code plus area code is longer than six digits, and a short key keeps
    the matcher's memo cache small during typing.
    """

    if length <= 0:
        return digits
    return digits[:length]


def unformat(formatted: str) -> str:
    """Remove mask punctuation (spaces, brackets, dashes) but keep the prefix symbol."""

    return _MASK_PUNCTUATION.sub("", formatted)
