from __future__ import annotations

import calendar
import re

from .types import HeaderLine

MONTHS = {
    "january": 1,
    "february": 2,
    "march": 3,
    "april": 4,
    "may": 5,
    "june": 6,
    "july": 7,
    "august": 8,
    "september": 9,
    "october": 10,
    "november": 11,
    "december": 12,
}

WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")

# "21st" -> "21". Purely textual: "2024th" and "1th" are stripped too.
ORDINAL_RE = re.compile(r"\b(\d+)(st|nd|rd|th)\b", re.ASCII)

_YEAR = r"(?P<year>\d{4})"
_ZERO_MONTH = r"(?P<month>\d{2})"
_ZERO_DAY = r"(?P<day>\d{2})"
_DAY = r"(?P<day>\d{1,2})"
_LONG_MONTH = r"(?P<month_name>" + "|".join(MONTHS) + ")"
_SHORT_MONTH = r"(?P<month_name>" + "|".join(m[:3] for m in MONTHS) + ")"
_WEEKDAY = r"(?P<dow>" + "|".join(WEEKDAYS) + ")"
_SP = r" +"


def _layout(*parts: str) -> re.Pattern[str]:
    return re.compile("".join(parts), re.IGNORECASE | re.ASCII)


# Tried in order; the first layout that matches the whole title wins.
DATE_LAYOUTS: list[tuple[str, re.Pattern[str]]] = [
    ("2006-01-02", _layout(_YEAR, "-", _ZERO_MONTH, "-", _ZERO_DAY)),
    ("Monday, January 2, 2006", _layout(_WEEKDAY, ",", _SP, _LONG_MONTH, _SP, _DAY, ",", _SP, _YEAR)),
    ("January 2, 2006", _layout(_LONG_MONTH, _SP, _DAY, ",", _SP, _YEAR)),
    ("Jan 2, 2006", _layout(_SHORT_MONTH, _SP, _DAY, ",", _SP, _YEAR)),
    ("Jan 2 2006", _layout(_SHORT_MONTH, _SP, _DAY, _SP, _YEAR)),
    ("02 Jan 2006", _layout(_ZERO_DAY, _SP, _SHORT_MONTH, _SP, _YEAR)),
    ("2 Jan 2006", _layout(_DAY, _SP, _SHORT_MONTH, _SP, _YEAR)),
]


def strip_ordinals(text: str) -> str:
    return ORDINAL_RE.sub(r"\1", text)


def _month_number(m: re.Match[str]) -> int:
    name = m.groupdict().get("month_name")
    if name is None:
        return int(m.group("month"))
    name = name.lower()
    for full, num in MONTHS.items():
        if full.startswith(name):
            return num
    return 0


DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _days_in(month: int, year: int) -> int:
    if month == 2 and calendar.isleap(year):
        return 29
    return DAYS_IN_MONTH[month - 1]


def _canonical(m: re.Match[str]) -> str | None:
    """Render a layout match as YYYY-MM-DD, or None if it is not a calendar date.

    Year 0000 is a valid (proleptic Gregorian, leap) year.
    """
    year = int(m.group("year"))
    month = _month_number(m)
    day = int(m.group("day"))
    if not 1 <= month <= 12:
        return None
    if not 1 <= day <= _days_in(month, year):
        return None
    return f"{year:04d}-{month:02d}-{day:02d}"


def extract_date(header_text: str) -> str | None:
    """Return the header's date as canonical YYYY-MM-DD, or None.

    The header marker and surrounding whitespace are removed, ordinal suffixes
    are stripped from numbers, and the remaining title must match one of
    DATE_LAYOUTS in full. The weekday of the long layout is not cross-checked
    against the date. Never raises.
    """

    title = strip_ordinals(HeaderLine(header_text).title)
    if not title:
        return None

    for _name, patt in DATE_LAYOUTS:
        m = patt.fullmatch(title)
        if not m:
            continue
        d = _canonical(m)
        if d is not None:
            return d
    return None
