"""
ScenarioSweepGenerator 领域服务

在百分比变动网格上逐点调用 CalendarSpreadEstimator，生成盈亏曲线:
    new_underlying = current_underlying × (1 + pct / 100)

纯函数: 相同输入 (含基准日) 总是得到逐位相同的序列。
"""
from datetime import date
from typing import Optional

from ...value_object.calendar.calendar_spread import CalendarSpreadOptions
from ...value_object.calendar.scenario import PriceRange, ScenarioPoint, ScenarioSweep
from ...value_object.config.calendar_spread_config import ScenarioSweepConfig
from ..pricing.time_to_expiry import ExpiryLike, today_pacific
from .calendar_spread_estimator import CalendarSpreadEstimator


class ScenarioSweepGenerator:
    """情景扫描生成器"""

    def __init__(
        self,
        estimator: Optional[CalendarSpreadEstimator] = None,
        config: Optional[ScenarioSweepConfig] = None,
    ):
        self._estimator = estimator or CalendarSpreadEstimator()
        self._config = config or ScenarioSweepConfig()

    def default_range(self) -> PriceRange:
        return PriceRange(
            min_pct=self._config.min_pct,
            max_pct=self._config.max_pct,
            step_pct=self._config.step_pct,
        )

    def generate(
        self,
        current_underlying: float,
        strike: float,
        front_expiry: ExpiryLike,
        back_expiry: ExpiryLike,
        front_price: float,
        back_price: float,
        quantity: float,
        option_type: str = "call",
        price_range: Optional[PriceRange] = None,
        options: Optional[CalendarSpreadOptions] = None,
        today: Optional[date] = None,
    ) -> ScenarioSweep:
        """
        生成情景扫描

        基准日在扫描开始时确定一次，所有网格点共用。
        """
        price_range = price_range or self.default_range()
        today = today or today_pacific()

        points = []
        for pct in price_range.grid():
            new_underlying = current_underlying * (1.0 + pct / 100.0)
            estimate = self._estimator.estimate(
                current_underlying,
                new_underlying,
                strike,
                front_expiry,
                back_expiry,
                front_price,
                back_price,
                quantity,
                option_type=option_type,
                options=options,
                today=today,
            )
            points.append(
                ScenarioPoint(pct_change=pct, underlying_price=new_underlying, estimate=estimate)
            )
        return ScenarioSweep(points=tuple(points))
