"""
Calendar 子模块 - 日历价差估值与情景扫描值对象
"""
from .calendar_spread import (
    CalendarSpreadEstimate,
    CalendarSpreadOptions,
    EstimationMode,
    SpreadGreeks,
)
from .scenario import PriceRange, ScenarioPoint, ScenarioSweep

__all__ = [
    "CalendarSpreadEstimate",
    "CalendarSpreadOptions",
    "EstimationMode",
    "PriceRange",
    "ScenarioPoint",
    "ScenarioSweep",
    "SpreadGreeks",
]
