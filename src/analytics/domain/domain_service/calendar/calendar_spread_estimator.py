"""
CalendarSpreadEstimator 领域服务

回答 "若标的移动到价格 P、和/或波动率回归到目标水平，这个日历价差值多少":
1. 到期日换算为年化时间 max(0, days/365)
2. 在当前标的价格下由各腿当前价格反推 IV
3. 确定新情景 IV: 目标 IV 优先，否则按压缩比例调整
4. 时间向前推进 days_forward 天后，在新标的价格下重新定价两条腿
5. 价差 = 远月 - 近月，净 Greeks 同理
6. 预估盈亏 = (新价差 - 当前模型价差) × 数量 × 合约乘数

当前价差与新价差用同一模型计算，标的不变且不推进时间时盈亏恰为 0。
"""
import logging
from datetime import date
from typing import Optional

from ...exceptions import InvalidOptionParametersError
from ...value_object.calendar.calendar_spread import (
    CalendarSpreadEstimate,
    CalendarSpreadOptions,
)
from ...value_object.config.calendar_spread_config import CalendarSpreadConfig
from ..pricing.greeks_calculator import GreeksCalculator, validate_option_parameters
from ..pricing.iv_solver import IVSolver
from ..pricing.time_to_expiry import ExpiryLike, today_pacific, years_to_expiry
from .spread_greeks_calculator import SpreadGreeksCalculator

logger = logging.getLogger(__name__)


class CalendarSpreadEstimator:
    """日历价差情景估值服务"""

    def __init__(
        self,
        config: Optional[CalendarSpreadConfig] = None,
        iv_solver: Optional[IVSolver] = None,
        calculator: Optional[GreeksCalculator] = None,
    ):
        self._config = config or CalendarSpreadConfig()
        self._calculator = calculator or GreeksCalculator()
        self._iv_solver = iv_solver or IVSolver(calculator=self._calculator)
        self._spread_calculator = SpreadGreeksCalculator()

    @property
    def config(self) -> CalendarSpreadConfig:
        return self._config

    def post_earnings_options(self) -> CalendarSpreadOptions:
        """按配置生成财报后估值选项"""
        return CalendarSpreadOptions.post_earnings(
            front_target_iv=self._config.post_earnings_front_target_iv,
            back_target_iv=self._config.post_earnings_back_target_iv,
            days_forward=self._config.post_earnings_days_forward,
        )

    def estimate(
        self,
        current_underlying: float,
        new_underlying: float,
        strike: float,
        front_expiry: ExpiryLike,
        back_expiry: ExpiryLike,
        front_price: float,
        back_price: float,
        quantity: float,
        option_type: str = "call",
        options: Optional[CalendarSpreadOptions] = None,
        today: Optional[date] = None,
    ) -> CalendarSpreadEstimate:
        """
        估算日历价差在新情景下的价值与盈亏

        Args:
            current_underlying: 当前标的价格
            new_underlying: 情景标的价格
            strike: 行权价 (两腿相同)
            front_expiry: 近月到期日 ('YYYY-MM-DD' / date / 剩余天数)
            back_expiry: 远月到期日
            front_price: 近月当前价格
            back_price: 远月当前价格
            quantity: 价差数量
            option_type: "call" | "put"
            options: 估值选项，默认沿用当前 IV
            today: 计算剩余天数的基准日，默认太平洋时间今日

        Returns:
            CalendarSpreadEstimate

        Raises:
            InvalidOptionParametersError: 标的价格或行权价非正
        """
        options = options or CalendarSpreadOptions()
        validate_option_parameters(current_underlying, strike)
        if not new_underlying > 0:
            raise InvalidOptionParametersError("new_underlying", new_underlying, "必须大于 0")

        cfg = self._config
        rate = cfg.risk_free_rate if options.risk_free_rate is None else options.risk_free_rate
        today = today or today_pacific()

        front_years = years_to_expiry(front_expiry, today, cfg.days_per_year)
        back_years = years_to_expiry(back_expiry, today, cfg.days_per_year)
        shift = options.days_forward / cfg.days_per_year
        front_years_new = max(0.0, front_years - shift)
        back_years_new = max(0.0, back_years - shift)

        front_iv = self._iv_solver.solve(
            front_price, current_underlying, strike, front_years, rate, option_type,
        )
        back_iv = self._iv_solver.solve(
            back_price, current_underlying, strike, back_years, rate, option_type,
        )

        front_iv_new = (
            options.front_target_iv
            if options.front_target_iv is not None
            else front_iv.implied_volatility * (1.0 - options.front_iv_crush)
        )
        back_iv_new = (
            options.back_target_iv
            if options.back_target_iv is not None
            else back_iv.implied_volatility * (1.0 - options.back_iv_crush)
        )

        current_spread = self._spread_calculator.calculate(
            self._calculator.price_and_greeks(
                current_underlying, strike, front_years, rate,
                front_iv.implied_volatility, option_type,
            ),
            self._calculator.price_and_greeks(
                current_underlying, strike, back_years, rate,
                back_iv.implied_volatility, option_type,
            ),
        )

        front_new = self._calculator.price_and_greeks(
            new_underlying, strike, front_years_new, rate, front_iv_new, option_type,
        )
        back_new = self._calculator.price_and_greeks(
            new_underlying, strike, back_years_new, rate, back_iv_new, option_type,
        )
        new_spread = self._spread_calculator.calculate(front_new, back_new)

        estimated_pnl = (
            (new_spread.price - current_spread.price) * quantity * cfg.contract_multiplier
        )

        logger.debug(
            "日历价差估值: mode=%s S=%.4f->%.4f K=%.4f iv_front=%.4f->%.4f "
            "iv_back=%.4f->%.4f spread=%.4f->%.4f pnl=%.2f",
            options.mode.value, current_underlying, new_underlying, strike,
            front_iv.implied_volatility, front_iv_new,
            back_iv.implied_volatility, back_iv_new,
            current_spread.price, new_spread.price, estimated_pnl,
        )

        return CalendarSpreadEstimate(
            front_price=front_new.price,
            back_price=back_new.price,
            spread_price=new_spread.price,
            spread_delta=new_spread.delta,
            spread_gamma=new_spread.gamma,
            spread_theta=new_spread.theta,
            spread_vega=new_spread.vega,
            estimated_pnl=estimated_pnl,
            price_change=new_underlying - current_underlying,
            price_change_pct=(new_underlying - current_underlying) / current_underlying * 100.0,
            current_spread_price=current_spread.price,
            front_iv_used=front_iv_new,
            back_iv_used=back_iv_new,
            front_iv_estimated=front_iv.implied_volatility,
            back_iv_estimated=back_iv.implied_volatility,
            front_iv_converged=front_iv.converged,
            back_iv_converged=back_iv.converged,
        )

    def pnl_versus_entry(
        self,
        estimate: CalendarSpreadEstimate,
        front_entry_price: float,
        back_entry_price: float,
        quantity: float,
    ) -> float:
        """相对开仓价差的盈亏: (估算价差 - 开仓价差) × 数量 × 合约乘数"""
        entry_spread = back_entry_price - front_entry_price
        return (estimate.spread_price - entry_spread) * quantity * self._config.contract_multiplier
