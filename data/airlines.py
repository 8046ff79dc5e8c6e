"""Carrier helpers shared across the project.

The carrier lookup itself lives next to this module in `airlines.csv` and is read
by `src/load_data.py`.
"""

import re

_SUFFIXES = re.compile(r"\s+(inc\.?|co\.?|corporation|corp\.?)$", re.IGNORECASE)


def normalize_code(code):
    if not isinstance(code, str):
        return ""
    return code.strip().strip('"').upper()


def short_name(name):
    """Drop corporate suffixes so chart labels stay readable."""
    if not isinstance(name, str):
        return ""
    cleaned = name.strip()
    previous = None
    while previous != cleaned:
        previous = cleaned
        cleaned = _SUFFIXES.sub("", cleaned).strip()
    return cleaned
