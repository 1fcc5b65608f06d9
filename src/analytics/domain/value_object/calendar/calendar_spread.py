"""
Calendar 价差值对象

定义日历价差估值相关的枚举、值对象:
- EstimationMode: 估值模式 (沿用当前 IV / 使用目标 IV)
- CalendarSpreadOptions: 估值选项 (时间推进、目标 IV、IV 压缩、利率)
- CalendarSpreadEstimate: 单一情景下的价差估值与净 Greeks

约定: 策略恒为卖出近月、买入远月，所有 spread_* 字段均为 远月 - 近月。
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class EstimationMode(str, Enum):
    """估值模式"""
    CURRENT_IV = "current_iv"   # 由当前价格反推 IV 并保持不变
    TARGET_IV = "target_iv"     # 用目标 IV 覆盖 (如财报后 IV 回归)


@dataclass(frozen=True)
class CalendarSpreadOptions:
    """
    日历价差估值选项

    Attributes:
        days_forward: 向前推进的自然日数 (0 = 今日, 1 = 下一日)
        front_target_iv: 近月目标 IV，设置后直接使用
        back_target_iv: 远月目标 IV，设置后直接使用
        front_iv_crush: 未设目标 IV 时近月 IV 的压缩比例 (0.3 = 下降 30%)
        back_iv_crush: 未设目标 IV 时远月 IV 的压缩比例
        risk_free_rate: 无风险利率，None 时使用估值器配置
    """
    days_forward: int = 0
    front_target_iv: Optional[float] = None
    back_target_iv: Optional[float] = None
    front_iv_crush: float = 0.0
    back_iv_crush: float = 0.0
    risk_free_rate: Optional[float] = None

    def __post_init__(self) -> None:
        if self.days_forward < 0:
            raise ValueError(f"days_forward 不能为负数: {self.days_forward}")
        for name in ("front_target_iv", "back_target_iv"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ValueError(f"{name} 不能为负数: {value}")
        for name in ("front_iv_crush", "back_iv_crush"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} 必须在 [0, 1] 区间内: {value}")

    @property
    def mode(self) -> EstimationMode:
        if self.front_target_iv is not None or self.back_target_iv is not None:
            return EstimationMode.TARGET_IV
        return EstimationMode.CURRENT_IV

    @classmethod
    def realtime(cls) -> "CalendarSpreadOptions":
        """实时模式: 沿用当前 IV，不推进时间"""
        return cls()

    @classmethod
    def post_earnings(
        cls,
        front_target_iv: float = 0.35,
        back_target_iv: float = 0.40,
        days_forward: int = 1,
    ) -> "CalendarSpreadOptions":
        """财报后模式: IV 回归到目标水平，并推进到下一交易日"""
        return cls(
            days_forward=days_forward,
            front_target_iv=front_target_iv,
            back_target_iv=back_target_iv,
        )


@dataclass(frozen=True)
class CalendarSpreadEstimate:
    """
    日历价差估值结果

    Attributes:
        front_price: 近月在新情景下的理论价
        back_price: 远月在新情景下的理论价
        spread_price: 新情景下价差 (远月 - 近月)
        spread_delta: 净 Delta
        spread_gamma: 净 Gamma
        spread_theta: 净 Theta (每日)
        spread_vega: 净 Vega (每 1 个波动率百分点)
        estimated_pnl: 相对当前价差的预估盈亏 (已乘数量与合约乘数)
        price_change: 标的价格变动
        price_change_pct: 标的价格变动百分比
        current_spread_price: 当前情景下的模型价差
        front_iv_used: 新情景中近月使用的 IV
        back_iv_used: 新情景中远月使用的 IV
        front_iv_estimated: 由近月当前价格反推的 IV
        back_iv_estimated: 由远月当前价格反推的 IV
        front_iv_converged: 近月 IV 求解是否收敛
        back_iv_converged: 远月 IV 求解是否收敛
    """
    front_price: float
    back_price: float
    spread_price: float
    spread_delta: float
    spread_gamma: float
    spread_theta: float
    spread_vega: float
    estimated_pnl: float
    price_change: float
    price_change_pct: float
    current_spread_price: float = 0.0
    front_iv_used: float = 0.0
    back_iv_used: float = 0.0
    front_iv_estimated: float = 0.0
    back_iv_estimated: float = 0.0
    front_iv_converged: bool = True
    back_iv_converged: bool = True


@dataclass(frozen=True)
class SpreadGreeks:
    """按方向加权汇总后的价差价格与 Greeks"""
    price: float = 0.0
    delta: float = 0.0
    gamma: float = 0.0
    theta: float = 0.0
    vega: float = 0.0
