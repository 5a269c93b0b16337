"""
Mask formatting.

A mask is a template where `.` takes the next digit and every other character
is copied as-is, e.g. `+. (...) ...-....` renders `15551234567` as
`+1 (555) 123-4567`. Rendering stops at the last digit so partial input never
ends in dangling punctuation, except that an opening bracket is always closed.
"""

from __future__ import annotations

from phonefield.config import RenderOptions
from phonefield.core.records import CountryRecord

PLACEHOLDER = "."


def strip_country_code(mask: str) -> str:
    """Drop the leading dial-code block (`+..`) from a mask."""

    _, _, national = mask.partition(" ")
    return national


def apply_mask(digits: str, mask: str) -> tuple[str, str]:
    """
    Walk `mask`, filling placeholders from `digits`.

    Returns:
        `(formatted, leftover_digits)`.
    """

    out: list[str] = []
    pos = 0
    for ch in mask:
        if pos >= len(digits):
            break
        if ch == PLACEHOLDER:
            out.append(digits[pos])
            pos += 1
        else:
            out.append(ch)
    return "".join(out), digits[pos:]


def _overflow(leftover: str, used: int, enable_long_numbers: bool | int) -> str:
    if enable_long_numbers is True:
        return leftover
    if enable_long_numbers is False:
        return ""
    # Numeric cap on the total digit count.
    return leftover[: max(enable_long_numbers - used, 0)]


def format_number(text: str, mask: str | None, options: RenderOptions | None = None) -> str:
    """
    Render `text` (digits, including the dial code) through `mask`.

    Empty input gives the bare prefix (or "" when the country code is hidden).
    One digit, a missing mask or disabled auto-formatting give the digits as-is.
    """

    options = options or RenderOptions()

    pattern = mask
    if options.disable_country_code and mask:
        pattern = strip_country_code(mask)

    if not text:
        return "" if options.disable_country_code else options.prefix

    if len(text) < 2 or not pattern or not options.auto_format:
        return text if options.disable_country_code else f"{options.prefix}{text}"

    formatted, leftover = apply_mask(text, pattern)
    formatted += _overflow(leftover, len(text) - len(leftover), options.enable_long_numbers)

    # Always close brackets.
    if "(" in formatted and ")" not in formatted:
        formatted += ")"
    return formatted


def render(
    digits: str, record: CountryRecord | None = None, options: RenderOptions | None = None
) -> str:
    """Render digits with the mask of `record` (verbatim when there is no record)."""

    return format_number(digits, record.format if record is not None else None, options)
