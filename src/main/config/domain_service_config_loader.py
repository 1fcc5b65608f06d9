"""
domain_service_config_loader.py - 领域服务 TOML 配置加载器

从 config/domain_service/ 目录下的 TOML 文件加载领域服务配置，
并转换为对应的配置值对象。
"""
import logging
from pathlib import Path
from typing import Optional

from src.analytics.domain.value_object.config.calendar_spread_config import (
    CalendarSpreadConfig,
    ScenarioSweepConfig,
)
from src.analytics.domain.value_object.config.iv_solver_config import IVSolverConfig
from src.main.config.config_loader import PROJECT_ROOT, ConfigLoader

logger = logging.getLogger(__name__)

_DOMAIN_SERVICE_CONFIG_DIR = PROJECT_ROOT / "config" / "domain_service"


def _load_toml(path: Path) -> dict:
    """加载 TOML 文件，文件不存在时返回空字典"""
    if not path.exists():
        return {}
    logger.info("加载领域服务配置: %s", path)
    return ConfigLoader.load_toml(path)


def load_iv_solver_config(
    overrides: Optional[dict] = None,
    config_dir: Optional[Path] = None,
) -> IVSolverConfig:
    """
    加载隐含波动率求解器配置

    优先级: overrides > TOML 文件 > dataclass 默认值
    """
    config_dir = config_dir or _DOMAIN_SERVICE_CONFIG_DIR
    data = _load_toml(config_dir / "pricing" / "iv_solver.toml")
    overrides = overrides or {}

    newton = data.get("newton", {})
    bounds = data.get("bounds", {})

    kwargs = {}

    # newton
    _map_field(kwargs, "initial_guess", overrides, "initial_guess", newton, "initial_guess")
    _map_field(kwargs, "fallback_volatility", overrides, "fallback_volatility", newton, "fallback")
    _map_field(kwargs, "max_iterations", overrides, "max_iterations", newton, "max_iterations")
    _map_field(kwargs, "tolerance", overrides, "tolerance", newton, "tolerance")
    _map_field(kwargs, "min_vega", overrides, "min_vega", newton, "min_vega")

    # bounds
    _map_field(kwargs, "min_volatility", overrides, "min_volatility", bounds, "min_volatility")
    _map_field(kwargs, "max_volatility", overrides, "max_volatility", bounds, "max_volatility")

    config = IVSolverConfig(**kwargs)
    if not 0 < config.min_volatility < config.max_volatility:
        raise ValueError(
            f"波动率区间非法: [{config.min_volatility}, {config.max_volatility}]"
        )
    if config.max_iterations <= 0:
        raise ValueError(f"max_iterations 必须大于 0: {config.max_iterations}")
    return config


def load_calendar_spread_config(
    overrides: Optional[dict] = None,
    config_dir: Optional[Path] = None,
    use_env: bool = True,
) -> CalendarSpreadConfig:
    """
    加载日历价差估值器配置

    优先级: overrides > 环境变量 > TOML 文件 > dataclass 默认值
    """
    config_dir = config_dir or _DOMAIN_SERVICE_CONFIG_DIR
    data = _load_toml(config_dir / "calendar" / "calendar_spread.toml")
    env = ConfigLoader.load_market_env() if use_env else {}
    overrides = {**env, **(overrides or {})}

    market = data.get("market", {})
    post_earnings = data.get("post_earnings", {})

    kwargs = {}

    # market
    _map_field(kwargs, "risk_free_rate", overrides, "risk_free_rate", market, "risk_free_rate")
    _map_field(kwargs, "contract_multiplier", overrides, "contract_multiplier", market, "contract_multiplier")
    _map_field(kwargs, "days_per_year", overrides, "days_per_year", market, "days_per_year")

    # post_earnings
    _map_field(
        kwargs, "post_earnings_front_target_iv",
        overrides, "post_earnings_front_target_iv", post_earnings, "front_target_iv",
    )
    _map_field(
        kwargs, "post_earnings_back_target_iv",
        overrides, "post_earnings_back_target_iv", post_earnings, "back_target_iv",
    )
    _map_field(
        kwargs, "post_earnings_days_forward",
        overrides, "post_earnings_days_forward", post_earnings, "days_forward",
    )

    return CalendarSpreadConfig(**kwargs)


def load_scenario_sweep_config(
    overrides: Optional[dict] = None,
    config_dir: Optional[Path] = None,
) -> ScenarioSweepConfig:
    """
    加载情景扫描配置

    优先级: overrides > TOML 文件 > dataclass 默认值
    """
    config_dir = config_dir or _DOMAIN_SERVICE_CONFIG_DIR
    data = _load_toml(config_dir / "calendar" / "scenario_sweep.toml")
    overrides = overrides or {}

    price_range = data.get("price_range", {})

    kwargs = {}
    _map_field(kwargs, "min_pct", overrides, "min_pct", price_range, "min_pct")
    _map_field(kwargs, "max_pct", overrides, "max_pct", price_range, "max_pct")
    _map_field(kwargs, "step_pct", overrides, "step_pct", price_range, "step_pct")

    return ScenarioSweepConfig(**kwargs)


def _map_field(
    kwargs: dict,
    config_key: str,
    overrides: dict,
    override_key: str,
    toml_section: dict,
    toml_key: str,
) -> None:
    """辅助: 按优先级填充字段 (overrides > toml > 默认值)"""
    if override_key in overrides:
        kwargs[config_key] = overrides[override_key]
    elif toml_key in toml_section:
        kwargs[config_key] = toml_section[toml_key]
