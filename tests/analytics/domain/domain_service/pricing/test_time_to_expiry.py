"""
到期时间换算测试
"""
from datetime import date, datetime

import pytest

from src.analytics.domain.domain_service.pricing.time_to_expiry import (
    days_to_expiry,
    parse_expiry,
    today_pacific,
    years_to_expiry,
)

TODAY = date(2026, 1, 1)


class TestParseExpiry:

    def test_iso_string(self):
        assert parse_expiry("2026-03-20") == date(2026, 3, 20)

    def test_iso_string_with_time_suffix(self):
        assert parse_expiry("2026-03-20T16:00:00") == date(2026, 3, 20)

    def test_date_and_datetime(self):
        assert parse_expiry(date(2026, 3, 20)) == date(2026, 3, 20)
        assert parse_expiry(datetime(2026, 3, 20, 13, 30)) == date(2026, 3, 20)

    @pytest.mark.parametrize("bad", ["", "20-03-2026", "not a date", None])
    def test_invalid(self, bad):
        with pytest.raises(ValueError):
            parse_expiry(bad)


class TestDaysToExpiry:

    def test_calendar_day_difference(self):
        assert days_to_expiry("2026-01-31", TODAY) == 30
        assert days_to_expiry(date(2026, 3, 2), TODAY) == 60

    def test_past_date_is_negative(self):
        assert days_to_expiry("2025-12-25", TODAY) == -7

    def test_numeric_passthrough(self):
        assert days_to_expiry(45, TODAY) == 45
        assert days_to_expiry(12.5) == 12.5

    def test_bool_and_nan_rejected(self):
        with pytest.raises(ValueError):
            days_to_expiry(True)
        with pytest.raises(ValueError):
            days_to_expiry(float("nan"))

    def test_default_today_is_pacific(self):
        assert days_to_expiry(today_pacific()) == 0


class TestYearsToExpiry:

    def test_days_over_365(self):
        assert years_to_expiry("2026-01-31", TODAY) == pytest.approx(30 / 365)
        assert years_to_expiry(73) == pytest.approx(0.2)

    def test_floored_at_zero(self):
        assert years_to_expiry("2025-12-01", TODAY) == 0.0
        assert years_to_expiry(-3) == 0.0

    def test_custom_day_count(self):
        assert years_to_expiry(36, days_per_year=360) == pytest.approx(0.1)
