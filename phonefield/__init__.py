"""
phonefield - dial-code resolution and mask formatting for phone inputs.

This package builds a filtered, ordered catalog of countries and area codes,
resolves partially typed numbers to the matching record and renders them
through the record's display mask.
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
