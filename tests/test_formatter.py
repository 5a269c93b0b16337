from __future__ import annotations

import pytest

from phonefield.config import RenderOptions
from phonefield.core.catalog import build_catalog
from phonefield.core.formatter import apply_mask, format_number, render, strip_country_code
from phonefield.errors import InvalidDigitCapError

US_MASK = "+. (...) ...-...."


def test_mask_fills_placeholders() -> None:
    assert format_number("5551234", "(...) ..-..") == "(555) 12-34"


def test_overflow_digits_dropped_by_default() -> None:
    assert format_number("55512345", "(...) ..-..") == "(555) 12-34"


def test_overflow_digits_kept_with_long_numbers() -> None:
    options = RenderOptions(enable_long_numbers=True)
    assert format_number("55512345", "(...) ..-..", options) == "(555) 12-345"


def test_overflow_respects_numeric_cap() -> None:
    options = RenderOptions(enable_long_numbers=9)
    assert format_number("5551234567", "(...) ..-..", options) == "(555) 12-3456"


def test_empty_input_gives_bare_prefix() -> None:
    assert format_number("", US_MASK) == "+"
    assert format_number("", US_MASK, RenderOptions(disable_country_code=True)) == ""
    assert format_number("", None, RenderOptions(prefix="00")) == "00"


def test_short_or_unmasked_input_is_verbatim() -> None:
    assert format_number("1", US_MASK) == "+1"
    assert format_number("1", US_MASK, RenderOptions(disable_country_code=True)) == "1"
    assert format_number("4412", None) == "+4412"
    assert format_number("4412", "") == "+4412"
    assert format_number("15551234567", US_MASK, RenderOptions(auto_format=False)) == "+15551234567"


def test_partial_input_has_no_trailing_punctuation() -> None:
    assert format_number("1555123", US_MASK) == "+1 (555) 123"
    assert format_number("15551234567", US_MASK) == "+1 (555) 123-4567"


def test_truncated_brackets_are_closed() -> None:
    assert format_number("1555", US_MASK) == "+1 (555)"
    assert format_number("15", US_MASK) == "+1 (5)"


def test_disable_country_code_strips_dial_block() -> None:
    assert strip_country_code(US_MASK) == "(...) ...-...."
    options = RenderOptions(disable_country_code=True)
    assert format_number("5551234567", US_MASK, options) == "(555) 123-4567"


def test_apply_mask_returns_leftover() -> None:
    assert apply_mask("123456", "..-..") == ("12-34", "56")
    assert apply_mask("12", "..-..") == ("12", "")


def test_render_uses_record_mask() -> None:
    catalog = build_catalog()
    us = catalog.find("us")
    fr = catalog.find("fr")
    assert render("15551234567", us) == "+1 (555) 123-4567"
    assert render("33612345678", fr) == "+33 6 12 34 56 78"
    assert render("33612345678", None) == "+33612345678"


def test_invalid_digit_cap_is_ignored_unless_strict() -> None:
    assert RenderOptions(enable_long_numbers=-1).enable_long_numbers is False
    assert RenderOptions(enable_long_numbers="abc").enable_long_numbers is False
    assert RenderOptions(enable_long_numbers="12").enable_long_numbers == 12
    assert RenderOptions(enable_long_numbers=True).enable_long_numbers is True

    with pytest.raises(InvalidDigitCapError):
        RenderOptions(strict=True, enable_long_numbers=-1)
    with pytest.raises(InvalidDigitCapError):
        RenderOptions(strict=True, enable_long_numbers=2.5)
