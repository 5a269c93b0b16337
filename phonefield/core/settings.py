"""
User overrides for the raw country table.

Masks, priorities and area codes supplied per iso2 code are collapsed into one
`CustomSetting` per country and folded into a copy of the raw table. The
compiled-in table is never modified.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Mapping, Sequence

from phonefield.core.records import RawCountryEntry


@dataclass(frozen=True, slots=True)
class CustomSetting:
    iso2: str
    mask: str | None = None
    area_codes: tuple[str, ...] | None = None
    priority: int | None = None


def build_custom_settings(
    masks: Mapping[str, str] | None,
    area_codes: Mapping[str, Sequence[str]] | None,
    priorities: Mapping[str, int] | None,
) -> list[CustomSetting]:
    """
    Merge the three override maps into one setting per iso2 code.

    Order follows first appearance: masks, then area codes, then priorities.

    Example: masks `{"fr": "(...) ..-..-.."}`, area codes `{"us": ["300"]}` and
    priorities `{"us": 1, "fr": 1}` give two settings, `fr` (mask + priority)
    and `us` (area codes + priority).
    """

    masks = masks or {}
    area_codes = area_codes or {}
    priorities = priorities or {}

    # dict.fromkeys keeps first-seen order while dropping duplicates.
    iso2_codes = dict.fromkeys([*masks, *area_codes, *priorities])

    out: list[CustomSetting] = []
    for iso2 in iso2_codes:
        codes = area_codes.get(iso2)
        out.append(
            CustomSetting(
                iso2=iso2,
                mask=masks.get(iso2),
                area_codes=tuple(codes) if codes is not None else None,
                priority=priorities.get(iso2),
            )
        )
    return out


def extend_raw_countries(
    entries: Sequence[RawCountryEntry], settings: Sequence[CustomSetting]
) -> list[RawCountryEntry]:
    """
    Apply custom settings to raw entries, returning a new list.

    A field is only overridden when the setting's value is truthy, so an empty
    mask, an empty area-code list or a zero priority leave the table value alone.
    """

    if not settings:
        return list(entries)

    by_iso2: dict[str, CustomSetting] = {}
    for s in settings:
        by_iso2.setdefault(s.iso2, s)

    out: list[RawCountryEntry] = []
    for entry in entries:
        setting = by_iso2.get(entry.iso2)
        if setting is None:
            out.append(entry)
            continue

        changes: dict[str, object] = {}
        if setting.mask:
            changes["mask"] = setting.mask
        if setting.priority:
            changes["priority"] = setting.priority
        if setting.area_codes:
            changes["area_codes"] = tuple(setting.area_codes)
        out.append(replace(entry, **changes) if changes else entry)
    return out
