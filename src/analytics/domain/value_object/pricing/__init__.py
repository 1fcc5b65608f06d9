"""
Pricing 子模块 - 定价相关值对象

包含 Black-Scholes 输入/结果、隐含波动率求解结果以及远期波动率结果。
"""
from .greeks import GreeksInput, GreeksResult, IVResult, IVQuote
from .forward_vol import ForwardVolatilityInput, ForwardVolatilityResult, ForwardFactorResult

__all__ = [
    "GreeksInput",
    "GreeksResult",
    "IVResult",
    "IVQuote",
    "ForwardVolatilityInput",
    "ForwardVolatilityResult",
    "ForwardFactorResult",
]
