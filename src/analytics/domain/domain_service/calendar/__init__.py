"""
Calendar Module

日历价差估值领域服务。

- SpreadGreeksCalculator: 两腿价格与 Greeks 的方向加权汇总
- CalendarSpreadEstimator: 单一情景估值
- ScenarioSweepGenerator: 百分比网格情景扫描
"""
from .spread_greeks_calculator import SpreadGreeksCalculator
from .calendar_spread_estimator import CalendarSpreadEstimator
from .scenario_sweep_generator import ScenarioSweepGenerator

__all__ = [
    "SpreadGreeksCalculator",
    "CalendarSpreadEstimator",
    "ScenarioSweepGenerator",
]
