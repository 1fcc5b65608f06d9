"""
service_factory.py - 领域服务装配

按配置文件创建一组共享同一 GreeksCalculator / IVSolver 的分析服务。
"""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from src.analytics.domain.domain_service.calendar.calendar_spread_estimator import (
    CalendarSpreadEstimator,
)
from src.analytics.domain.domain_service.calendar.scenario_sweep_generator import (
    ScenarioSweepGenerator,
)
from src.analytics.domain.domain_service.pricing.greeks_calculator import GreeksCalculator
from src.analytics.domain.domain_service.pricing.iv_solver import IVSolver
from src.analytics.domain.domain_service.volatility.forward_vol_calculator import (
    ForwardVolatilityCalculator,
)
from src.main.config.domain_service_config_loader import (
    load_calendar_spread_config,
    load_iv_solver_config,
    load_scenario_sweep_config,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalyticsServices:
    """装配完成的分析服务"""
    greeks_calculator: GreeksCalculator
    iv_solver: IVSolver
    forward_vol_calculator: ForwardVolatilityCalculator
    calendar_spread_estimator: CalendarSpreadEstimator
    scenario_sweep_generator: ScenarioSweepGenerator


def create_analytics_services(
    overrides: Optional[dict] = None,
    config_dir: Optional[Path] = None,
    use_env: bool = True,
) -> AnalyticsServices:
    """
    加载配置并装配分析服务

    Args:
        overrides: 按节覆盖配置，键为 "iv_solver" / "calendar_spread" / "scenario_sweep"
        config_dir: 领域服务配置目录，默认 config/domain_service
        use_env: 是否读取环境变量中的市场参数
    """
    overrides = overrides or {}

    iv_config = load_iv_solver_config(overrides.get("iv_solver"), config_dir)
    calendar_config = load_calendar_spread_config(
        overrides.get("calendar_spread"), config_dir, use_env=use_env,
    )
    sweep_config = load_scenario_sweep_config(overrides.get("scenario_sweep"), config_dir)

    calculator = GreeksCalculator()
    iv_solver = IVSolver(config=iv_config, calculator=calculator)
    estimator = CalendarSpreadEstimator(
        config=calendar_config, iv_solver=iv_solver, calculator=calculator,
    )

    logger.info(
        "分析服务已装配: sigma_bounds=[%s, %s] risk_free_rate=%s sweep=[%s, %s]/%s",
        iv_config.min_volatility, iv_config.max_volatility,
        calendar_config.risk_free_rate,
        sweep_config.min_pct, sweep_config.max_pct, sweep_config.step_pct,
    )

    return AnalyticsServices(
        greeks_calculator=calculator,
        iv_solver=iv_solver,
        forward_vol_calculator=ForwardVolatilityCalculator(iv_solver=iv_solver),
        calendar_spread_estimator=estimator,
        scenario_sweep_generator=ScenarioSweepGenerator(estimator=estimator, config=sweep_config),
    )
