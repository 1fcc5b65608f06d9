"""
GreeksCalculator 领域服务

基于 Black-Scholes 模型计算欧式期权价格与 Greeks (Delta, Gamma, Theta, Vega)。
纯计算服务，无副作用。

- price_and_greeks: 不做校验的原始公式，T<=0 与 sigma<=0 两种边界显式处理
- calculate_greeks: 校验输入后再计算，非法参数返回 success=False
"""
import math

from ...exceptions import InvalidOptionParametersError
from ...value_object.pricing.greeks import GreeksInput, GreeksResult
from .normal_distribution import norm_cdf, norm_pdf

_DAYS_PER_YEAR = 365.0

# GreeksResult.vega 以每 1 个波动率百分点计，乘以该值得到 dPrice/dSigma
VEGA_PER_VOL_POINT = 100.0


def validate_option_parameters(
    spot_price: float,
    strike_price: float,
    time_to_expiry: float = 0.0,
    volatility: float = 0.0,
) -> None:
    """
    校验期权参数，非法时抛出 InvalidOptionParametersError

    Raises:
        InvalidOptionParametersError: spot/strike 非正，或 T/sigma 为负，或任一值为 NaN
    """
    for field, value in (
        ("spot_price", spot_price),
        ("strike_price", strike_price),
        ("time_to_expiry", time_to_expiry),
        ("volatility", volatility),
    ):
        if math.isnan(value):
            raise InvalidOptionParametersError(field, value, "不能为 NaN")
    if spot_price <= 0:
        raise InvalidOptionParametersError("spot_price", spot_price, "必须大于 0")
    if strike_price <= 0:
        raise InvalidOptionParametersError("strike_price", strike_price, "必须大于 0")
    if time_to_expiry < 0:
        raise InvalidOptionParametersError("time_to_expiry", time_to_expiry, "不能为负数")
    if volatility < 0:
        raise InvalidOptionParametersError("volatility", volatility, "不能为负数")


class GreeksCalculator:
    """
    Black-Scholes 价格与 Greeks 计算器

    Theta 以每自然日计，Vega 以每 1 个波动率百分点计。
    """

    def price_and_greeks(
        self,
        spot_price: float,
        strike_price: float,
        time_to_expiry: float,
        risk_free_rate: float,
        volatility: float,
        option_type: str,
    ) -> GreeksResult:
        """
        计算价格与 Greeks，不做参数校验

        Args:
            spot_price: 标的价格
            strike_price: 行权价
            time_to_expiry: 剩余到期时间 (年化)
            risk_free_rate: 无风险利率
            volatility: 波动率 (小数)
            option_type: "call" | "put"

        Returns:
            GreeksResult，price 不小于 0
        """
        S = spot_price
        K = strike_price
        T = time_to_expiry
        r = risk_free_rate
        sigma = volatility
        is_call = option_type == "call"

        # 到期时边界处理: 内在价值 + 阶跃 Delta
        if T <= 0:
            if is_call:
                price = max(S - K, 0.0)
                delta = 1.0 if S > K else (0.0 if S < K else 0.5)
            else:
                price = max(K - S, 0.0)
                delta = -1.0 if S < K else (0.0 if S > K else -0.5)
            return GreeksResult(price=price, delta=delta)

        discount = math.exp(-r * T)

        # 零波动率: 标的按无风险利率确定性增长，期权价值为折现内在价值
        if sigma <= 0:
            forward_intrinsic = S - K * discount
            carry = r * K * discount / _DAYS_PER_YEAR
            if is_call:
                price = max(forward_intrinsic, 0.0)
                if forward_intrinsic > 0:
                    return GreeksResult(price=price, delta=1.0, theta=-carry)
                delta = 0.5 if forward_intrinsic == 0 else 0.0
                return GreeksResult(price=price, delta=delta)
            price = max(-forward_intrinsic, 0.0)
            if forward_intrinsic < 0:
                return GreeksResult(price=price, delta=-1.0, theta=carry)
            delta = -0.5 if forward_intrinsic == 0 else 0.0
            return GreeksResult(price=price, delta=delta)

        sqrt_T = math.sqrt(T)
        d1 = (math.log(S / K) + (r + 0.5 * sigma ** 2) * T) / (sigma * sqrt_T)
        d2 = d1 - sigma * sqrt_T

        pdf_d1 = norm_pdf(d1)
        cdf_d1 = norm_cdf(d1)

        # Gamma 和 Vega 对 call/put 相同
        gamma = pdf_d1 / (S * sigma * sqrt_T)
        vega = S * sqrt_T * pdf_d1 / VEGA_PER_VOL_POINT

        if is_call:
            cdf_d2 = norm_cdf(d2)
            price = S * cdf_d1 - K * discount * cdf_d2
            delta = cdf_d1
            theta_annual = -S * pdf_d1 * sigma / (2.0 * sqrt_T) - r * K * discount * cdf_d2
        else:
            cdf_neg_d2 = norm_cdf(-d2)
            price = K * discount * cdf_neg_d2 - S * norm_cdf(-d1)
            delta = cdf_d1 - 1.0
            theta_annual = -S * pdf_d1 * sigma / (2.0 * sqrt_T) + r * K * discount * cdf_neg_d2

        return GreeksResult(
            price=max(price, 0.0),
            delta=delta,
            gamma=gamma,
            theta=theta_annual / _DAYS_PER_YEAR,
            vega=vega,
        )

    def calculate_greeks(self, params: GreeksInput) -> GreeksResult:
        """
        校验输入后计算价格与 Greeks

        Args:
            params: 定价输入参数

        Returns:
            GreeksResult；参数非法时 success=False 并附带错误描述
        """
        try:
            validate_option_parameters(
                params.spot_price,
                params.strike_price,
                params.time_to_expiry,
                params.volatility,
            )
        except InvalidOptionParametersError as e:
            return GreeksResult(success=False, error_message=str(e))

        try:
            return self.price_and_greeks(
                params.spot_price,
                params.strike_price,
                params.time_to_expiry,
                params.risk_free_rate,
                params.volatility,
                params.option_type,
            )
        except (OverflowError, ValueError) as e:
            return GreeksResult(success=False, error_message=f"计算溢出: {e}")

    def bs_price(self, params: GreeksInput) -> float:
        """Black-Scholes 理论价格"""
        return self.price_and_greeks(
            params.spot_price,
            params.strike_price,
            params.time_to_expiry,
            params.risk_free_rate,
            params.volatility,
            params.option_type,
        ).price
