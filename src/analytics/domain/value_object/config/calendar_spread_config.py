"""CalendarSpreadConfig / ScenarioSweepConfig 配置值对象"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CalendarSpreadConfig:
    """日历价差估值器配置"""

    risk_free_rate: float = 0.05            # 默认无风险利率
    contract_multiplier: int = 100          # 每张合约对应股数
    days_per_year: int = 365                # 年化天数

    # ── 财报后预设 ──
    post_earnings_front_target_iv: float = 0.35
    post_earnings_back_target_iv: float = 0.40
    post_earnings_days_forward: int = 1


@dataclass(frozen=True)
class ScenarioSweepConfig:
    """情景扫描默认网格 (单位: %)"""

    min_pct: float = -15.0
    max_pct: float = 15.0
    step_pct: float = 1.0
