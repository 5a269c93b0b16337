"""
Low-population territory table.

Same row layout as `phonefield.data.countries`; merged into the catalog only
when territories are enabled.
"""

from __future__ import annotations

RAW_TERRITORIES: tuple[tuple[object, ...], ...] = (
    ("American Samoa", ("oceania",), "as", "1684"),
    ("Anguilla", ("america", "caribbean"), "ai", "1264"),
    ("Bermuda", ("america", "north-america"), "bm", "1441"),
    ("British Virgin Islands", ("america", "caribbean"), "vg", "1284"),
    ("Cayman Islands", ("america", "caribbean"), "ky", "1345"),
    ("Cook Islands", ("oceania",), "ck", "682"),
    ("Falkland Islands", ("america", "south-america"), "fk", "500"),
    ("Faroe Islands", ("europe",), "fo", "298"),
    ("Gibraltar", ("europe",), "gi", "350"),
    ("Greenland", ("america",), "gl", "299"),
    ("Montserrat", ("america", "caribbean"), "ms", "1664"),
    ("Norfolk Island", ("oceania",), "nf", "672"),
    ("Northern Mariana Islands", ("oceania",), "mp", "1670"),
    ("Saint Barthélemy", ("america", "caribbean"), "bl", "590", "", 1),
    ("Saint Helena", ("africa",), "sh", "290"),
    ("Saint Martin", ("america", "caribbean"), "mf", "590", "", 2),
    ("Saint Pierre and Miquelon", ("america", "north-america"), "pm", "508"),
    ("Sint Maarten", ("america", "caribbean"), "sx", "1721"),
    ("Tokelau", ("oceania",), "tk", "690"),
    ("Turks and Caicos Islands", ("america", "caribbean"), "tc", "1649"),
    ("U.S. Virgin Islands", ("america", "caribbean"), "vi", "1340"),
    ("Wallis and Futuna", ("oceania",), "wf", "681"),
)
