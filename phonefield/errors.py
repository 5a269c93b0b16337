"""Exception types raised by phonefield."""

from __future__ import annotations


class PhoneFieldError(Exception):
    """Base class for phonefield errors."""


class RawTableError(PhoneFieldError, ValueError):
    """Raised when a compiled-in country row is malformed."""


class CatalogIntegrityError(PhoneFieldError):
    """Raised (strict mode only) when an area-code record has no main-code parent in the catalog."""


class InvalidDigitCapError(PhoneFieldError):
    """Raised (strict mode only) when the overflow digit cap is negative or not an integer."""
