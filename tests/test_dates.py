"""Tests for Sunday alignment and start-date selection."""

from datetime import date, datetime, timedelta

import pytest

from commitart.dates import (
    compute_optimal_anchor,
    fallback_anchor,
    next_anchor_weekday,
    normalize_to_anchor_weekday,
    parse_date,
    parse_year,
    validate_date_range,
)
from commitart.errors import InvalidInput, UnknownGlyph

SUNDAY = 6  # date.weekday()


class TestNormalize:
    def test_wednesday_rounds_back(self):
        assert normalize_to_anchor_weekday(date(2024, 1, 10)) == date(2024, 1, 7)

    def test_sunday_unchanged(self):
        assert normalize_to_anchor_weekday(date(2024, 1, 7)) == date(2024, 1, 7)

    def test_saturday_rounds_back_six_days(self):
        assert normalize_to_anchor_weekday(date(2024, 1, 13)) == date(2024, 1, 7)

    def test_accepts_datetime(self):
        assert normalize_to_anchor_weekday(datetime(2024, 1, 10, 15, 30)) == date(2024, 1, 7)

    def test_before_calendar_start(self):
        with pytest.raises(InvalidInput):
            normalize_to_anchor_weekday(date(1, 1, 1))

    def test_rejects_strings(self):
        with pytest.raises(InvalidInput):
            normalize_to_anchor_weekday("2024-01-10")

    def test_properties_over_two_years(self):
        d = date(2023, 1, 1)
        while d < date(2025, 1, 1):
            n = normalize_to_anchor_weekday(d)
            assert n.weekday() == SUNDAY
            assert n <= d
            assert d - n < timedelta(days=7)
            assert normalize_to_anchor_weekday(n) == n
            d += timedelta(days=1)


class TestNextAnchor:
    def test_rounds_forward(self):
        assert next_anchor_weekday(date(2024, 1, 10)) == date(2024, 1, 14)

    def test_sunday_is_its_own_next(self):
        assert next_anchor_weekday(date(2024, 1, 14)) == date(2024, 1, 14)

    def test_saturday(self):
        assert next_anchor_weekday(date(2024, 1, 13)) == date(2024, 1, 14)

    def test_past_calendar_end(self):
        with pytest.raises(InvalidInput):
            next_anchor_weekday(date(9999, 12, 31))

    def test_defaults_to_today(self):
        nxt = next_anchor_weekday()
        assert nxt.weekday() == SUNDAY
        assert 0 <= (nxt - date.today()).days < 7


class TestOptimalAnchor:
    def test_hi_centered_in_2024(self):
        # first Sunday is Jan 7, offset (52 - 11) // 2 = 20 weeks
        assert compute_optimal_anchor("HI", 2024) == date(2024, 5, 26)

    @pytest.mark.parametrize("year", [1999, 2020, 2023, 2024, 2025, 2030])
    @pytest.mark.parametrize("word", ["A", "HI", "HELLO", "ABCDEFGHIJ"])
    def test_always_a_sunday(self, word, year):
        anchor = compute_optimal_anchor(word, year)
        assert anchor.weekday() == SUNDAY
        assert date(year - 1, 12, 1) <= anchor <= date(year, 12, 31)

    def test_wide_words_start_before_the_year(self):
        # 59 columns: (52 - 59) // 2 = -4 weeks from the first Sunday
        assert compute_optimal_anchor("ABCDEFGHIJ", 2024) == date(2023, 12, 10)
        # 53 columns: -1 week
        assert compute_optimal_anchor("ABCDEFGHI", 2024) == date(2023, 12, 31)

    def test_narrower_words_start_inside_the_year(self):
        assert compute_optimal_anchor("ABCDEFGH", 2024) == date(2024, 1, 21)

    def test_first_year_wide_word_falls_back(self):
        assert compute_optimal_anchor("ABCDEFGHIJ", 1) == fallback_anchor(1)

    def test_unknown_word_falls_back_mid_year(self):
        assert compute_optimal_anchor("H@", 2024) == date(2024, 6, 9)
        assert fallback_anchor(2024) == date(2024, 6, 9)

    def test_too_wide_word_falls_back(self):
        assert compute_optimal_anchor("ABCDEFGHIJK", 2024) == date(2024, 6, 9)

    def test_current_year_default(self):
        assert compute_optimal_anchor("HI") == compute_optimal_anchor("HI", date.today().year)


class TestDateRange:
    def test_autocorrected_range(self):
        r = validate_date_range("HI", date(2024, 1, 10))
        assert r.start == date(2024, 1, 7)
        assert r.end == date(2024, 3, 23)
        assert r.weeks == 11
        assert r.autocorrected

    def test_aligned_range(self):
        assert not validate_date_range("HI", date(2024, 1, 7)).autocorrected

    def test_end_past_calendar(self):
        with pytest.raises(InvalidInput):
            validate_date_range("HI", date(9999, 12, 26))

    def test_errors_propagate(self):
        with pytest.raises(UnknownGlyph):
            validate_date_range("H@", date(2024, 1, 7))


class TestParsing:
    def test_parse_date(self):
        assert parse_date("2024-01-10") == date(2024, 1, 10)

    @pytest.mark.parametrize("text", ["2024-02-30", "2024/01/01", "24-01-01", "2024-1-1", ""])
    def test_parse_date_rejects(self, text):
        with pytest.raises(InvalidInput):
            parse_date(text)

    def test_parse_year(self):
        assert parse_year("2024") == 2024
        with pytest.raises(InvalidInput):
            parse_year("0000")
