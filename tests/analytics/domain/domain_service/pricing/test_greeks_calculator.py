"""
GreeksCalculator 单元测试

验证 Black-Scholes 价格、Greeks 单位约定 (Theta 每日 / Vega 每 1%)、
到期与零波动率边界、以及输入校验。
"""
import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from src.analytics.domain.domain_service.pricing.greeks_calculator import (
    VEGA_PER_VOL_POINT,
    GreeksCalculator,
    validate_option_parameters,
)
from src.analytics.domain.exceptions import InvalidOptionParametersError
from src.analytics.domain.value_object.pricing.greeks import GreeksInput


@pytest.fixture
def calc():
    return GreeksCalculator()


def _make_input(
    spot_price=100.0,
    strike_price=100.0,
    time_to_expiry=0.5,
    risk_free_rate=0.05,
    volatility=0.2,
    option_type="call",
) -> GreeksInput:
    return GreeksInput(
        spot_price=spot_price,
        strike_price=strike_price,
        time_to_expiry=time_to_expiry,
        risk_free_rate=risk_free_rate,
        volatility=volatility,
        option_type=option_type,
    )


# ========== 1. 价格 ==========

class TestPricing:

    def test_atm_call_reference_value(self, calc):
        result = calc.price_and_greeks(100.0, 100.0, 0.5, 0.05, 0.2, "call")
        assert result.success
        assert result.price == pytest.approx(6.8887, abs=2e-3)

    def test_atm_put_reference_value(self, calc):
        result = calc.price_and_greeks(100.0, 100.0, 0.5, 0.05, 0.2, "put")
        assert result.price == pytest.approx(4.4197, abs=2e-3)

    def test_bs_price_matches_price_and_greeks(self, calc):
        params = _make_input(spot_price=105.0, option_type="put")
        assert calc.bs_price(params) == calc.price_and_greeks(
            105.0, 100.0, 0.5, 0.05, 0.2, "put"
        ).price

    def test_deep_otm_call_near_zero(self, calc):
        result = calc.price_and_greeks(50.0, 200.0, 0.5, 0.05, 0.2, "call")
        assert 0.0 <= result.price < 1e-6

    def test_price_never_negative(self, calc):
        result = calc.price_and_greeks(500.0, 10.0, 1.0, 0.05, 0.1, "put")
        assert result.price >= 0.0


# ========== 2. Greeks ==========

class TestGreeks:

    def test_atm_call_delta_above_half(self, calc):
        result = calc.price_and_greeks(100.0, 100.0, 0.5, 0.05, 0.2, "call")
        assert 0.5 < result.delta < 1.0

    def test_put_delta_is_call_delta_minus_one(self, calc):
        call = calc.price_and_greeks(100.0, 95.0, 0.5, 0.05, 0.3, "call")
        put = calc.price_and_greeks(100.0, 95.0, 0.5, 0.05, 0.3, "put")
        assert put.delta == pytest.approx(call.delta - 1.0)

    def test_gamma_and_vega_same_for_call_and_put(self, calc):
        call = calc.price_and_greeks(100.0, 110.0, 0.25, 0.03, 0.35, "call")
        put = calc.price_and_greeks(100.0, 110.0, 0.25, 0.03, 0.35, "put")
        assert call.gamma == put.gamma
        assert call.vega == put.vega
        assert call.gamma > 0
        assert call.vega > 0

    def test_vega_is_per_one_vol_point(self, calc):
        """Vega 应近似等于 σ 变动 0.01 带来的价格变化"""
        base = calc.price_and_greeks(100.0, 100.0, 0.5, 0.05, 0.3, "call")
        up = calc.price_and_greeks(100.0, 100.0, 0.5, 0.05, 0.31, "call").price
        down = calc.price_and_greeks(100.0, 100.0, 0.5, 0.05, 0.29, "call").price
        assert base.vega == pytest.approx((up - down) / 2.0, abs=1e-3)

    def test_scaled_vega_is_price_derivative(self, calc):
        """vega × VEGA_PER_VOL_POINT 即牛顿步使用的 dPrice/dSigma"""
        h = 1e-4
        base = calc.price_and_greeks(100.0, 95.0, 0.25, 0.05, 0.4, "put")
        up = calc.price_and_greeks(100.0, 95.0, 0.25, 0.05, 0.4 + h, "put").price
        down = calc.price_and_greeks(100.0, 95.0, 0.25, 0.05, 0.4 - h, "put").price
        assert base.vega * VEGA_PER_VOL_POINT == pytest.approx((up - down) / (2 * h), rel=1e-4)

    def test_theta_is_per_calendar_day(self, calc):
        """Theta 应近似等于经过一天后的价格变化"""
        base = calc.price_and_greeks(100.0, 100.0, 0.5, 0.05, 0.3, "call")
        next_day = calc.price_and_greeks(100.0, 100.0, 0.5 - 1.0 / 365.0, 0.05, 0.3, "call")
        assert base.theta < 0
        assert base.theta == pytest.approx(next_day.price - base.price, abs=1e-3)

    def test_gamma_matches_delta_difference(self, calc):
        base = calc.price_and_greeks(100.0, 100.0, 0.5, 0.05, 0.3, "call")
        up = calc.price_and_greeks(100.5, 100.0, 0.5, 0.05, 0.3, "call").delta
        down = calc.price_and_greeks(99.5, 100.0, 0.5, 0.05, 0.3, "call").delta
        assert base.gamma == pytest.approx(up - down, rel=1e-2)


# ========== 3. 边界 ==========

class TestExpiryLimit:

    @pytest.mark.parametrize("spot, opt, price, delta", [
        (110.0, "call", 10.0, 1.0),
        (90.0, "call", 0.0, 0.0),
        (100.0, "call", 0.0, 0.5),
        (90.0, "put", 10.0, -1.0),
        (110.0, "put", 0.0, 0.0),
        (100.0, "put", 0.0, -0.5),
    ])
    def test_intrinsic_and_step_delta(self, calc, spot, opt, price, delta):
        result = calc.price_and_greeks(spot, 100.0, 0.0, 0.05, 0.3, opt)
        assert result.price == price
        assert result.delta == delta
        assert result.gamma == 0.0
        assert result.theta == 0.0
        assert result.vega == 0.0

    def test_negative_time_treated_as_expired(self, calc):
        result = calc.price_and_greeks(120.0, 100.0, -0.1, 0.05, 0.3, "call")
        assert result.price == 20.0
        assert result.delta == 1.0


class TestZeroVolatility:

    def test_itm_call_is_discounted_intrinsic(self, calc):
        result = calc.price_and_greeks(100.0, 90.0, 1.0, 0.05, 0.0, "call")
        discounted_strike = 90.0 * math.exp(-0.05)
        assert result.price == pytest.approx(100.0 - discounted_strike)
        assert result.delta == 1.0
        assert result.gamma == 0.0
        assert result.vega == 0.0
        assert result.theta == pytest.approx(-0.05 * discounted_strike / 365.0)

    def test_otm_call_is_worthless(self, calc):
        result = calc.price_and_greeks(80.0, 90.0, 1.0, 0.05, 0.0, "call")
        assert result.price == 0.0
        assert result.delta == 0.0
        assert result.theta == 0.0

    def test_itm_put(self, calc):
        result = calc.price_and_greeks(80.0, 100.0, 1.0, 0.05, 0.0, "put")
        assert result.price == pytest.approx(100.0 * math.exp(-0.05) - 80.0)
        assert result.delta == -1.0
        assert result.theta > 0


# ========== 4. 校验 ==========

class TestValidation:

    @pytest.mark.parametrize("field, kwargs", [
        ("spot_price", {"spot_price": 0.0}),
        ("spot_price", {"spot_price": -1.0}),
        ("strike_price", {"strike_price": 0.0}),
        ("time_to_expiry", {"time_to_expiry": -0.01}),
        ("volatility", {"volatility": -0.1}),
    ])
    def test_calculate_greeks_rejects_invalid_input(self, calc, field, kwargs):
        result = calc.calculate_greeks(_make_input(**kwargs))
        assert not result.success
        assert field in result.error_message

    def test_calculate_greeks_valid_input(self, calc):
        result = calc.calculate_greeks(_make_input())
        assert result.success
        assert result.price == pytest.approx(6.8887, abs=2e-3)

    def test_zero_time_and_zero_vol_are_valid(self, calc):
        assert calc.calculate_greeks(_make_input(time_to_expiry=0.0)).success
        assert calc.calculate_greeks(_make_input(volatility=0.0)).success

    def test_validate_raises_named_error(self):
        with pytest.raises(InvalidOptionParametersError) as exc_info:
            validate_option_parameters(100.0, -5.0)
        assert exc_info.value.field == "strike_price"
        assert exc_info.value.value == -5.0

    def test_validate_error_is_value_error(self):
        with pytest.raises(ValueError):
            validate_option_parameters(0.0, 100.0)

    def test_validate_rejects_nan(self):
        with pytest.raises(InvalidOptionParametersError):
            validate_option_parameters(float("nan"), 100.0)


# ---------------------------------------------------------------------------
# Property-Based Tests (hypothesis)
# ---------------------------------------------------------------------------

_spot = st.floats(min_value=1.0, max_value=1000.0, allow_nan=False, allow_infinity=False)
_strike = st.floats(min_value=1.0, max_value=1000.0, allow_nan=False, allow_infinity=False)
_time = st.floats(min_value=0.001, max_value=5.0, allow_nan=False, allow_infinity=False)
_rate = st.floats(min_value=0.0, max_value=0.2, allow_nan=False, allow_infinity=False)
_vol = st.floats(min_value=0.01, max_value=3.0, allow_nan=False, allow_infinity=False)

_calc = GreeksCalculator()


class TestPutCallParityProperty:
    """
    *For any* 有效 (S, K, T, r, σ)，call - put ≈ S - K·e^(-rT)
    """

    @given(spot=_spot, strike=_strike, t=_time, rate=_rate, vol=_vol)
    @settings(max_examples=200)
    def test_put_call_parity(self, spot, strike, t, rate, vol):
        call = _calc.price_and_greeks(spot, strike, t, rate, vol, "call").price
        put = _calc.price_and_greeks(spot, strike, t, rate, vol, "put").price
        expected = spot - strike * math.exp(-rate * t)
        assert call - put == pytest.approx(expected, abs=1e-6 * (spot + strike))


class TestExpiryLimitProperty:

    @given(spot=_spot, strike=_strike, rate=_rate, vol=_vol, opt=st.sampled_from(["call", "put"]))
    @settings(max_examples=200)
    def test_expiry_equals_intrinsic(self, spot, strike, rate, vol, opt):
        result = _calc.price_and_greeks(spot, strike, 0.0, rate, vol, opt)
        intrinsic = max(spot - strike, 0.0) if opt == "call" else max(strike - spot, 0.0)
        assert result.price == intrinsic
        assert (result.gamma, result.theta, result.vega) == (0.0, 0.0, 0.0)
