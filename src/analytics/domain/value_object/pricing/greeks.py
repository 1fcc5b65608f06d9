"""
Greeks 相关值对象

定义 Black-Scholes 定价的输入参数、价格与 Greeks 结果，以及隐含波动率求解结果。
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class GreeksInput:
    """
    单个欧式期权的定价输入

    Attributes:
        spot_price: 标的价格
        strike_price: 行权价
        time_to_expiry: 剩余到期时间 (年化)
        risk_free_rate: 无风险利率
        volatility: 波动率 (小数, 0.30 = 30%)
        option_type: 期权类型 ("call" | "put")
    """
    spot_price: float
    strike_price: float
    time_to_expiry: float
    risk_free_rate: float
    volatility: float
    option_type: str

    @property
    def is_call(self) -> bool:
        return self.option_type == "call"


@dataclass(frozen=True)
class GreeksResult:
    """
    价格与 Greeks 计算结果

    Attributes:
        price: 理论价格 (不小于 0)
        delta: Delta
        gamma: Gamma
        theta: Theta (每自然日)
        vega: Vega (每 1 个波动率百分点)
        success: 计算是否成功
        error_message: 失败时的错误描述
    """
    price: float = 0.0
    delta: float = 0.0
    gamma: float = 0.0
    theta: float = 0.0
    vega: float = 0.0
    success: bool = True
    error_message: str = ""


@dataclass(frozen=True)
class IVResult:
    """
    隐含波动率求解结果

    求解器总会给出一个估计值；converged 区分"已收敛"与"放弃后的最后估计"。

    Attributes:
        implied_volatility: 隐含波动率 (小数)
        iterations: 实际迭代次数
        converged: 价格残差是否落入容差
        residual: 最后一次的价格残差 (模型价 - 市场价)
        success: 输入是否可求解 (非退化输入)
        error_message: 退化输入或未收敛时的描述
    """
    implied_volatility: float = 0.0
    iterations: int = 0
    converged: bool = False
    residual: float = 0.0
    success: bool = True
    error_message: str = ""


@dataclass(frozen=True)
class IVQuote:
    """
    批量 IV 求解的单个报价输入

    Attributes:
        market_price: 期权市场价格
        spot_price: 标的价格
        strike_price: 行权价
        time_to_expiry: 剩余到期时间（年化）
        risk_free_rate: 无风险利率
        option_type: 期权类型 ("call" | "put")
    """
    market_price: float
    spot_price: float
    strike_price: float
    time_to_expiry: float
    risk_free_rate: float
    option_type: str
