"""
远期波动率相关值对象

- ForwardVolatilityInput: 由两个期权报价推导远期波动率的输入
- ForwardVolatilityResult: 近月/远月 IV 与两者之间区间的远期波动率
- ForwardFactorResult: 远期因子 (近月 IV 相对远期波动率的溢价)

所有波动率均为小数 (0.35 = 35%)。
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class ForwardVolatilityInput:
    """
    由价格反推远期波动率的输入

    Attributes:
        front_strike: 近月行权价
        front_price: 近月期权价格
        front_dte: 近月剩余天数
        back_strike: 远月行权价
        back_price: 远月期权价格
        back_dte: 远月剩余天数
        underlying_price: 标的价格
        risk_free_rate: 无风险利率
        option_type: 期权类型，默认 "call"
    """
    front_strike: float
    front_price: float
    front_dte: float
    back_strike: float
    back_price: float
    back_dte: float
    underlying_price: float
    risk_free_rate: float = 0.05
    option_type: str = "call"


@dataclass(frozen=True)
class ForwardVolatilityResult:
    front_iv: float
    back_iv: float
    forward_variance: float
    forward_vol: float


@dataclass(frozen=True)
class ForwardFactorResult:
    """
    远期因子结果

    forward_factor = (front_iv - forward_vol) / forward_vol，以小数表示，
    百分比视图见 forward_factor_pct。
    """
    forward_vol: float
    forward_factor: float
    front_dte: float
    back_dte: float

    @property
    def forward_factor_pct(self) -> float:
        return self.forward_factor * 100.0
