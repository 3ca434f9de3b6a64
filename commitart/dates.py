"""
Calendar alignment for the contribution graph.

Every week column starts on a Sunday (weekday index 0 in the Sunday-first
convention used by the graph). Start dates are rounded *down* to that day,
never forward.
"""

import re
from datetime import date, datetime, timedelta
from typing import NamedTuple

from .errors import CommitArtError, InvalidInput
from .matrix import build_matrix

ANCHOR_WEEKDAY = 0  # Sunday
NOMINAL_WEEKS = 52
FALLBACK_MONTH_DAY = (6, 15)

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
YEAR_PATTERN = re.compile(r"^\d{4}$")


class DateRange(NamedTuple):
    start: date
    end: date
    weeks: int
    autocorrected: bool


def as_date(d) -> date:
    if isinstance(d, datetime):
        return d.date()
    if not isinstance(d, date):
        raise InvalidInput(f"Expected a date, got {type(d).__name__}")
    return d


def sunday_weekday(d: date) -> int:
    # Python weekday: Mon=0..Sun=6. Shift so Sun=0..Sat=6.
    return (d.weekday() + 1) % 7


def shift_days(d: date, days: int) -> date:
    try:
        return d + timedelta(days=days)
    except OverflowError:
        raise InvalidInput("Date range falls outside the supported calendar") from None


def normalize_to_anchor_weekday(d) -> date:
    d = as_date(d)
    return shift_days(d, -((sunday_weekday(d) - ANCHOR_WEEKDAY) % 7))


def next_anchor_weekday(d=None) -> date:
    d = as_date(d) if d is not None else date.today()
    return shift_days(d, (ANCHOR_WEEKDAY - sunday_weekday(d)) % 7)


def first_anchor_of_year(year: int) -> date:
    return next_anchor_weekday(date(year, 1, 1))


def fallback_anchor(year: int) -> date:
    month, day = FALLBACK_MONTH_DAY
    return normalize_to_anchor_weekday(date(year, month, day))


def compute_optimal_anchor(word, year=None) -> date:
    """
    Pick a start date that centers `word` inside a nominal 52-week year.

    Falls back to the Sunday on or before June 15 of `year` when the word
    cannot be measured.
    """
    if year is None:
        year = date.today().year
    try:
        weeks = len(build_matrix(word)[0])
        offset = (NOMINAL_WEEKS - weeks) // 2
        start = shift_days(first_anchor_of_year(year), offset * 7)
        return normalize_to_anchor_weekday(start)
    except (CommitArtError, ValueError, OverflowError):
        return fallback_anchor(year)


def validate_date_range(word, start) -> DateRange:
    start = as_date(start)
    weeks = len(build_matrix(word)[0])
    anchored = normalize_to_anchor_weekday(start)
    end = shift_days(anchored, weeks * 7 - 1)
    return DateRange(anchored, end, weeks, anchored != start)


def parse_date(text: str) -> date:
    if not isinstance(text, str) or not DATE_PATTERN.match(text):
        raise InvalidInput(f"Invalid date '{text}', expected YYYY-MM-DD")
    try:
        return datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError:
        raise InvalidInput(f"Invalid date '{text}', expected YYYY-MM-DD") from None


def parse_year(text: str) -> int:
    if not isinstance(text, str) or not YEAR_PATTERN.match(text):
        raise InvalidInput(f"Invalid year '{text}'")
    year = int(text)
    if year < 1:
        raise InvalidInput(f"Invalid year '{text}'")
    return year
