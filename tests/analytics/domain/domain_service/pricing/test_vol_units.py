"""
波动率单位换算测试
"""
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from src.analytics.domain.domain_service.pricing.vol_units import (
    decimal_to_percent,
    percent_to_decimal,
)


def test_percent_to_decimal():
    assert percent_to_decimal(30) == pytest.approx(0.30)
    assert percent_to_decimal(0) == 0.0


def test_decimal_to_percent():
    assert decimal_to_percent(0.35) == pytest.approx(35.0)


@given(value=st.floats(min_value=0.0, max_value=500.0, allow_nan=False))
@settings(max_examples=100)
def test_conversions_are_inverse(value):
    assert decimal_to_percent(percent_to_decimal(value)) == pytest.approx(value)
