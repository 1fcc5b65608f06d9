from .iv_solver_config import IVSolverConfig
from .calendar_spread_config import CalendarSpreadConfig, ScenarioSweepConfig

__all__ = [
    "IVSolverConfig",
    "CalendarSpreadConfig",
    "ScenarioSweepConfig",
]
