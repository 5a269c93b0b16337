"""
Input session.

`PhoneInput` keeps what a phone field needs between edits: the catalog, the
selected country and the displayed number. Each edit (typing, deleting,
pasting, picking a country) is one method call that returns the new state.
Caret handling, focus and dropdown rendering belong to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from phonefield.config import CatalogConfig, PhoneFieldSettings
from phonefield.core.catalog import Catalog, build_catalog
from phonefield.core.formatter import format_number
from phonefield.core.matcher import DialCodeMatcher
from phonefield.core.parser import digits_only, guess_prefix, unformat
from phonefield.core.records import CountryRecord
from phonefield.core.search import probable_candidate, search_countries

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InputChange:
    digits: str
    formatted_number: str
    country: CountryRecord | None


class PhoneInput:
    def __init__(
        self,
        settings: PhoneFieldSettings | None = None,
        *,
        matcher: DialCodeMatcher | None = None,
    ) -> None:
        self.settings = settings or PhoneFieldSettings()
        self.matcher = matcher or DialCodeMatcher()
        self.catalog: Catalog = build_catalog(self.settings.catalog)
        self.default_country = self.settings.default_country
        self.freeze_selection = False
        self.selected_country: CountryRecord | None = None
        self.formatted_number = ""
        self._init_from_value(self.settings.value)

    @property
    def prefix(self) -> str:
        return self.settings.render.prefix

    @property
    def all_countries(self) -> list[CountryRecord]:
        """Dropdown order: preferred countries first."""

        return [*self.catalog.preferred_countries, *self.catalog.countries]

    def _format(self, text: str, country: CountryRecord | None) -> str:
        return format_number(text, country.format if country else None, self.settings.render)

    def _guess(self, digits: str) -> CountryRecord | None:
        return self.matcher.resolve(
            guess_prefix(digits, self.settings.guess_prefix_length),
            self.catalog,
            self.default_country,
        )

    def _with_dial_code(self, digits: str, country: CountryRecord | None) -> str:
        if country is None or self.settings.render.disable_country_code:
            return digits
        if digits.startswith(country.dial_code):
            return digits
        return country.dial_code + digits

    def _init_from_value(self, value: str) -> None:
        digits = digits_only(value)

        guess: CountryRecord | None
        if self.settings.disable_initial_country_guess:
            guess = None
        elif len(digits) > 1:
            guess = self._guess(digits)
        else:
            guess = self.catalog.find(self.default_country)

        self.selected_country = guess
        if guess is None:
            self.formatted_number = ""
            return

        # A single typed digit is treated as the start of a national number.
        text = self._with_dial_code(digits, guess) if len(digits) < 2 else digits
        self.formatted_number = self._format(text, guess)

    def _change(self) -> InputChange:
        return InputChange(
            digits=digits_only(self.formatted_number),
            formatted_number=self.formatted_number,
            country=self.selected_country,
        )

    def _exceeds_digit_limit(self, digits: str) -> bool:
        if len(digits) <= self.settings.max_digits:
            return False
        cap = self.settings.render.enable_long_numbers
        if cap is True:
            return False
        if cap is False:
            return True
        return len(digits) > cap

    def handle_input(self, value: str) -> InputChange | None:
        """
        Apply a new raw input value (typed, deleted or pasted).

        Returns None when the edit is rejected or changes nothing.
        """

        selected = self.selected_country
        if not self.settings.country_code_editable and selected is not None:
            # The main dial code (not an area code) must stay in place.
            if not value.startswith(f"{self.prefix}{selected.country_code}"):
                return None

        if value == self.prefix:
            self.formatted_number = ""
            return self._change()

        digits = digits_only(value)
        if self._exceeds_digit_limit(digits):
            logger.debug("Rejecting input with %d digits", len(digits))
            return None

        if value == self.formatted_number:
            return None

        if not value:
            self.formatted_number = "" if self.settings.render.disable_country_code else self.prefix
            return self._change()

        new_selected = selected
        frozen_and_covered = self.freeze_selection and not (
            selected is not None and len(selected.dial_code) > len(digits)
        )
        if not frozen_and_covered:
            if not self.settings.disable_country_guess:
                new_selected = self._guess(digits)
            self.freeze_selection = False

        self.formatted_number = self._format(digits, new_selected)
        self.selected_country = new_selected if new_selected is not None else selected
        return self._change()

    def select_country(self, country: CountryRecord) -> InputChange | None:
        """Switch to `country`, swapping its dial code into the current number."""

        if country not in self.catalog.countries:
            logger.debug("Ignoring selection of unknown country %s", country.iso2)
            return None

        current = self.selected_country
        unformatted = unformat(self.formatted_number)
        if len(unformatted) > 1:
            old_code = current.dial_code if current is not None else ""
            new_number = unformatted.replace(old_code, country.dial_code, 1)
        else:
            new_number = country.dial_code

        self.selected_country = country
        self.freeze_selection = True
        self.formatted_number = self._format(digits_only(new_number), country)
        return self._change()

    def update_default_country(self, iso2: str | None) -> InputChange:
        """Select the default country and reset the number to its dial code."""

        country = self.catalog.find(iso2)
        self.default_country = iso2
        self.selected_country = country
        if self.settings.render.disable_country_code:
            self.formatted_number = ""
        else:
            self.formatted_number = f"{self.prefix}{country.dial_code if country else '1'}"
        return self._change()

    def update_value(self, number: str) -> InputChange:
        """
        Set the number from outside (e.g. a stored value).

        Numbers without the prefix symbol are read as national numbers of the
        default country; with it, the country is guessed from the dial code.
        """

        digits = digits_only(number)
        if self.prefix and number.startswith(self.prefix):
            country = self._guess(digits)
            self.formatted_number = self._format(digits, country)
        else:
            country = self.catalog.find(self.default_country)
            self.formatted_number = self._format(self._with_dial_code(digits, country), country)
        self.selected_country = country
        return self._change()

    def reconfigure(self, catalog_config: CatalogConfig) -> None:
        """Rebuild the catalog for new configuration and re-resolve the selection."""

        catalog = build_catalog(catalog_config)
        self.settings = self.settings.model_copy(update={"catalog": catalog_config})
        self.catalog = catalog
        self.matcher.invalidate(catalog)
        self.freeze_selection = False

        digits = digits_only(self.formatted_number)
        if digits:
            self.selected_country = self._guess(digits)
        else:
            self.selected_country = catalog.find(self.default_country)

    def country_data(self) -> dict[str, str]:
        country = self.selected_country
        if country is None:
            return {}
        return {
            "name": country.name,
            "dial_code": country.dial_code,
            "country_code": country.iso2,
            "format": country.format,
        }

    def search(self, query: str) -> list[CountryRecord]:
        return search_countries(query, self.catalog)

    def probable_candidate(self, query: str) -> CountryRecord | None:
        return probable_candidate(query, self.catalog)
