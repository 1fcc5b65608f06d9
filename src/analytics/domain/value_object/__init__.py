"""
Value Object Module

领域层值对象定义。

子模块分类:
- pricing/: 定价相关 (Black-Scholes 输入/结果、IV 求解结果、远期波动率)
- calendar/: 日历价差相关 (估值选项、估值结果、情景扫描)
- config/: 配置相关 (IV 求解器、估值器、情景扫描)
"""

from .pricing.greeks import GreeksInput, GreeksResult, IVResult, IVQuote
from .pricing.forward_vol import (
    ForwardVolatilityInput,
    ForwardVolatilityResult,
    ForwardFactorResult,
)
from .calendar.calendar_spread import (
    CalendarSpreadEstimate,
    CalendarSpreadOptions,
    EstimationMode,
    SpreadGreeks,
)
from .calendar.scenario import PriceRange, ScenarioPoint, ScenarioSweep
from .config.iv_solver_config import IVSolverConfig
from .config.calendar_spread_config import CalendarSpreadConfig, ScenarioSweepConfig

__all__ = [
    # 定价相关
    "GreeksInput",
    "GreeksResult",
    "IVResult",
    "IVQuote",
    "ForwardVolatilityInput",
    "ForwardVolatilityResult",
    "ForwardFactorResult",
    # 日历价差相关
    "CalendarSpreadEstimate",
    "CalendarSpreadOptions",
    "EstimationMode",
    "PriceRange",
    "ScenarioPoint",
    "ScenarioSweep",
    "SpreadGreeks",
    # 配置相关
    "IVSolverConfig",
    "CalendarSpreadConfig",
    "ScenarioSweepConfig",
]
