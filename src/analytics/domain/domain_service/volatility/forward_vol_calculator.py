"""
ForwardVolatilityCalculator 领域服务

由两个到期日的隐含波动率推导两者之间区间的远期波动率:

    V = (σ2² · T2 - σ1² · T1) / (T2 - T1),   forward_vol = √V

以及远期因子 (近月 IV 相对远期波动率的溢价):

    forward_factor = (σ1 - forward_vol) / forward_vol

错误约定:
- T2 <= T1 → InvalidTermStructureError
- V < 0   → NegativeForwardVarianceError
两者均为 ForwardVolatilityError 子类，调用方可分别识别。
"""
import logging
import math
from datetime import date
from typing import Optional, Union

from ...exceptions import InvalidTermStructureError, NegativeForwardVarianceError
from ...value_object.pricing.forward_vol import (
    ForwardFactorResult,
    ForwardVolatilityInput,
    ForwardVolatilityResult,
)
from ..pricing.iv_solver import IVSolver
from ..pricing.time_to_expiry import DAYS_PER_YEAR, days_to_expiry, today_pacific

logger = logging.getLogger(__name__)


class ForwardVolatilityCalculator:
    """远期波动率 / 远期因子计算服务"""

    def __init__(self, iv_solver: Optional[IVSolver] = None):
        self._iv_solver = iv_solver or IVSolver()

    def forward_vol_from_ivs(
        self,
        front_iv: float,
        back_iv: float,
        front_years: float,
        back_years: float,
    ) -> ForwardVolatilityResult:
        """
        由两个 IV 与年化到期时间计算远期波动率

        Raises:
            InvalidTermStructureError: back_years <= front_years
            NegativeForwardVarianceError: 远期方差为负
        """
        if back_years <= front_years:
            raise InvalidTermStructureError(front_years, back_years)

        forward_variance = (
            back_iv * back_iv * back_years - front_iv * front_iv * front_years
        ) / (back_years - front_years)

        if forward_variance < 0:
            logger.warning(
                "远期方差为负: front_iv=%.4f back_iv=%.4f T1=%.6f T2=%.6f V=%.6f",
                front_iv, back_iv, front_years, back_years, forward_variance,
            )
            raise NegativeForwardVarianceError(forward_variance, front_iv, back_iv)

        return ForwardVolatilityResult(
            front_iv=front_iv,
            back_iv=back_iv,
            forward_variance=forward_variance,
            forward_vol=math.sqrt(forward_variance),
        )

    def forward_vol_from_prices(self, params: ForwardVolatilityInput) -> ForwardVolatilityResult:
        """
        先由两个期权价格反推 IV，再计算远期波动率

        Raises:
            InvalidTermStructureError: back_dte <= front_dte
            NegativeForwardVarianceError: 远期方差为负
        """
        front_years = params.front_dte / DAYS_PER_YEAR
        back_years = params.back_dte / DAYS_PER_YEAR
        if back_years <= front_years:
            raise InvalidTermStructureError(front_years, back_years)

        front_iv = self._iv_solver.implied_vol(
            params.front_price,
            params.underlying_price,
            params.front_strike,
            front_years,
            params.risk_free_rate,
            params.option_type,
        )
        back_iv = self._iv_solver.implied_vol(
            params.back_price,
            params.underlying_price,
            params.back_strike,
            back_years,
            params.risk_free_rate,
            params.option_type,
        )
        return self.forward_vol_from_ivs(front_iv, back_iv, front_years, back_years)

    def forward_factor(
        self,
        front_iv: float,
        back_iv: float,
        front_dte: float,
        back_dte: float,
    ) -> ForwardFactorResult:
        """
        远期因子，纯函数，不涉及期权定价

        Args:
            front_iv: 近月 IV (小数)
            back_iv: 远月 IV (小数)
            front_dte: 近月剩余天数
            back_dte: 远月剩余天数

        Raises:
            InvalidTermStructureError: back_dte <= front_dte
            NegativeForwardVarianceError: 远期方差为负
        """
        result = self.forward_vol_from_ivs(
            front_iv,
            back_iv,
            front_dte / DAYS_PER_YEAR,
            back_dte / DAYS_PER_YEAR,
        )
        if result.forward_vol == 0:
            # 远期方差恰为 0 时远期因子无定义
            raise NegativeForwardVarianceError(0.0, front_iv, back_iv)

        return ForwardFactorResult(
            forward_vol=result.forward_vol,
            forward_factor=(front_iv - result.forward_vol) / result.forward_vol,
            front_dte=front_dte,
            back_dte=back_dte,
        )

    def forward_factor_from_dates(
        self,
        front_iv: float,
        back_iv: float,
        front_expiry: Union[str, date],
        back_expiry: Union[str, date],
        today: Optional[date] = None,
    ) -> ForwardFactorResult:
        """
        以日历日期给出到期日的远期因子

        Raises:
            InvalidTermStructureError: 任一到期日不晚于今日，或远月不晚于近月
        """
        today = today or today_pacific()
        front_dte = days_to_expiry(front_expiry, today)
        back_dte = days_to_expiry(back_expiry, today)
        if front_dte <= 0 or back_dte <= 0:
            raise InvalidTermStructureError(
                front_dte / DAYS_PER_YEAR,
                back_dte / DAYS_PER_YEAR,
                f"到期日必须晚于今日: front_dte={front_dte}, back_dte={back_dte}",
            )
        return self.forward_factor(front_iv, back_iv, front_dte, back_dte)
