"""
Date helpers shared by the experience extractor and the advanced scorer.
"""

import re
from datetime import date
from typing import Optional

MONTHS = ("jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec")

_MONTH_TOKEN = r"(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Sept|Oct|Nov|Dec)[a-z]*\s+\d{4}"
_DATE_TOKEN = rf"{_MONTH_TOKEN}|\d{{1,2}}[/.\-]\d{{4}}|\d{{4}}"

# e.g. "Jan 2020 - Present", "2018–2021", "03/2019 — 06/2020", "2015 to 2017"
DATE_RANGE_PATTERN = re.compile(
    rf"({_DATE_TOKEN})\s*(?:[\-–—]+|to)\s*({_DATE_TOKEN}|present|current)",
    re.IGNORECASE,
)

ONGOING_PATTERN = re.compile(r"present|current", re.IGNORECASE)

_YEAR_ONLY = re.compile(r"^\d{4}$")
_NUMERIC_MONTH_YEAR = re.compile(r"^(\d{1,2})[/.\-](\d{4})$")
_NAMED_MONTH_YEAR = re.compile(r"^([A-Za-z]+)\s+(\d{4})$")
_NORMALIZED = re.compile(r"^(\d{4})(?:-(\d{2}))?$")


def normalize_date(raw: str) -> str:
    """
    Normalize a date token to ``YYYY`` or ``YYYY-MM``.

    Unrecognized input is returned trimmed but otherwise verbatim; no
    range validation is done (``13/2020`` becomes ``2020-13``).
    """
    s = raw.strip()
    if _YEAR_ONLY.match(s):
        return s

    m = _NUMERIC_MONTH_YEAR.match(s)
    if m:
        return f"{m.group(2)}-{int(m.group(1)):02d}"

    m = _NAMED_MONTH_YEAR.match(s)
    if m:
        prefix = m.group(1)[:3].lower()
        if prefix in MONTHS:
            return f"{m.group(2)}-{MONTHS.index(prefix) + 1:02d}"

    return s


def parse_normalized_date(value: Optional[str]) -> Optional[date]:
    """Turn a ``YYYY``/``YYYY-MM`` string into the first day of that month."""
    if not value:
        return None
    m = _NORMALIZED.match(value.strip())
    if not m:
        return None
    month = int(m.group(2)) if m.group(2) else 1
    if not 1 <= month <= 12:
        return None
    return date(int(m.group(1)), month, 1)


def months_between(start: date, end: date) -> int:
    """Whole calendar months from ``start`` to ``end`` (may be negative)."""
    return (end.year - start.year) * 12 + (end.month - start.month)
