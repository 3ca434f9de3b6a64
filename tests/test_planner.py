"""Tests for turning a word matrix into dated commit descriptors."""

import random
from datetime import date, timedelta

import pytest

from commitart.errors import InvalidInput, WidthExceeded
from commitart.matrix import build_matrix, count_active
from commitart.planner import plan_commits, plan_word


def expected_days(word, start):
    m = build_matrix(word)
    return {
        start + timedelta(days=col * 7 + row)
        for col in range(len(m[0]))
        for row in range(len(m))
        if m[row][col]
    }


class TestPlanWord:
    def test_intensity_1_total(self, sunday, rng):
        plan = plan_word("HI", sunday, 1, rng)
        assert plan.total == 2 * count_active(build_matrix("HI")) == 56

    def test_day_offset_is_column_weeks_plus_row(self, sunday, rng):
        # Row 0 is the anchor Sunday itself, not the Monday after it.
        plan = plan_word("HI", sunday, 1, rng)
        assert plan.descriptors[0].day == sunday
        # H's crossbar: row 3, column 1
        assert date(2024, 1, 17) in plan.active_days()
        assert plan.active_days() == expected_days("HI", sunday)

    def test_active_days_do_not_depend_on_randomness(self, sunday):
        a = plan_word("HELLO", sunday, 4, random.Random(1))
        b = plan_word("HELLO", sunday, 4, random.Random(2))
        assert a.active_days() == b.active_days()

    def test_intensity_1_counts_are_identical(self, sunday):
        a = plan_word("HELLO", sunday, 1, random.Random(1))
        b = plan_word("HELLO", sunday, 1, random.Random(2))
        assert a.counts_by_day() == b.counts_by_day()

    def test_same_seed_same_plan(self, sunday):
        a = plan_word("HI", sunday, 4, random.Random(7))
        b = plan_word("HI", sunday, 4, random.Random(7))
        assert a.descriptors == b.descriptors

    def test_counts_per_day_follow_intensity(self, sunday, rng):
        plan = plan_word("HI", sunday, 3, rng)
        assert set(plan.counts_by_day().values()) <= {12, 15}

    def test_days_are_in_order(self, sunday, rng):
        plan = plan_word("HELLO", sunday, 2, rng)
        days = [d.day for d in plan.descriptors]
        assert days == sorted(days)

    def test_same_day_commits_are_chronological_and_numbered(self, sunday, rng):
        plan = plan_word("HI", sunday, 4, rng)
        by_day = {}
        for d in plan.descriptors:
            by_day.setdefault(d.day, []).append(d)
        for group in by_day.values():
            assert [d.when for d in group] == sorted(d.when for d in group)
            assert [d.label for d in group] == [f"Contribution for HI #{i}" for i in range(1, len(group) + 1)]

    def test_times_are_working_hours(self, sunday, rng):
        plan = plan_word("HELLO", sunday, 3, rng)
        for d in plan.descriptors:
            assert 9 <= d.hour <= 16
            assert 0 <= d.minute < 60
            assert d.when.date() == d.day

    def test_non_sunday_start_is_corrected(self, rng):
        plan = plan_word("HI", date(2024, 1, 10), 1, rng)
        assert plan.autocorrected
        assert plan.requested_start == date(2024, 1, 10)
        assert plan.start == date(2024, 1, 7)
        assert plan.active_days() == expected_days("HI", date(2024, 1, 7))

    def test_range_and_word(self, sunday, rng):
        plan = plan_word("hi", sunday, 2, rng)
        assert plan.word == "HI"
        assert plan.end == date(2024, 3, 23)
        assert plan.weeks == 11
        assert not plan.autocorrected

    def test_too_long_word_fails_before_planning(self, sunday):
        with pytest.raises(WidthExceeded):
            plan_word("ABCDEFGHIJK", sunday, 1)


class TestPlanCommits:
    def test_rejects_wide_matrix(self, sunday):
        wide = [[1] * 61 for _ in range(7)]
        with pytest.raises(WidthExceeded):
            plan_commits(wide, sunday)

    def test_rejects_ragged_matrix(self, sunday):
        with pytest.raises(InvalidInput):
            plan_commits([[1, 0], [1]], sunday)

    def test_rejects_empty_matrix(self, sunday):
        with pytest.raises(InvalidInput):
            plan_commits([], sunday)

    def test_blank_matrix_has_no_commits(self, sunday):
        plan = plan_commits([[0] * 3 for _ in range(7)], sunday, 1)
        assert plan.total == 0
        assert plan.end == sunday + timedelta(days=20)
