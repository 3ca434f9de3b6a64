"""
Turn a word matrix into an ordered list of commit descriptors.

Columns are weeks and rows are days of the week, so the cell at
(row, column) lands on ``start + column*7 + row`` days. Descriptors are
emitted week by week, top to bottom, and every day's commits are in
chronological order.
"""

import random
from collections import OrderedDict
from datetime import date, datetime
from typing import NamedTuple, Tuple

from .dates import as_date, normalize_to_anchor_weekday, shift_days
from .errors import InvalidInput
from .intensity import DEFAULT_INTENSITY, commit_count
from .matrix import build_matrix, check_width

# Commit times fall inside 09:00-16:59.
WORK_START_HOUR = 9
WORK_HOURS = 8


class CommitDescriptor(NamedTuple):
    day: date
    hour: int
    minute: int
    label: str

    @property
    def when(self) -> datetime:
        return datetime(self.day.year, self.day.month, self.day.day, self.hour, self.minute, 0)


class Plan(NamedTuple):
    word: str
    intensity: int
    requested_start: date
    start: date
    end: date
    matrix: Tuple[Tuple[int, ...], ...]
    descriptors: Tuple[CommitDescriptor, ...]

    @property
    def total(self) -> int:
        return len(self.descriptors)

    @property
    def autocorrected(self) -> bool:
        return self.start != self.requested_start

    @property
    def weeks(self) -> int:
        return len(self.matrix[0]) if self.matrix else 0

    def counts_by_day(self):
        counts = OrderedDict()
        for d in self.descriptors:
            counts[d.day] = counts.get(d.day, 0) + 1
        return counts

    def active_days(self):
        return set(self.counts_by_day())


def commit_label(word: str, index: int) -> str:
    return f"Contribution for {word} #{index}"


def _random_times(count, rng):
    times = [(WORK_START_HOUR + rng.randrange(WORK_HOURS), rng.randrange(60)) for _ in range(count)]
    times.sort()
    return times


def plan_commits(matrix, start, intensity=DEFAULT_INTENSITY, word="", rng=None) -> Plan:
    """
    Plan commits for `matrix` beginning on the week of `start`.

    A start that is not a Sunday is moved back to the previous Sunday;
    ``Plan.autocorrected`` tells the caller it happened. Only the commit
    counts and times are random; which days get commits depends solely on
    the matrix and the start date.
    """
    if not matrix or not matrix[0]:
        raise InvalidInput("Matrix must have at least one column")
    if any(len(row) != len(matrix[0]) for row in matrix):
        raise InvalidInput("Matrix rows must all have the same length")
    width = len(matrix[0])
    check_width(width, word or None)

    requested = as_date(start)
    anchor = normalize_to_anchor_weekday(requested)
    rng = rng if rng is not None else random.Random()

    descriptors = []
    for col in range(width):
        for row in range(len(matrix)):
            if not matrix[row][col]:
                continue
            day = shift_days(anchor, col * 7 + row)
            times = _random_times(commit_count(intensity, rng), rng)
            for i, (hour, minute) in enumerate(times, 1):
                descriptors.append(CommitDescriptor(day, hour, minute, commit_label(word, i)))

    end = shift_days(anchor, width * 7 - 1)
    frozen = tuple(tuple(row) for row in matrix)
    return Plan(word, intensity, requested, anchor, end, frozen, tuple(descriptors))


def plan_word(word, start, intensity=DEFAULT_INTENSITY, rng=None) -> Plan:
    matrix = build_matrix(word)
    return plan_commits(matrix, start, intensity, word.upper(), rng)
