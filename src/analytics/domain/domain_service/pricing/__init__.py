"""
Pricing Module

期权定价领域服务。

- GreeksCalculator: Black-Scholes 价格与 Greeks 计算器
- IVSolver: 隐含波动率求解器
- norm_cdf / norm_pdf: 共用的标准正态分布
"""
from .normal_distribution import norm_cdf, norm_pdf
from .greeks_calculator import VEGA_PER_VOL_POINT, GreeksCalculator, validate_option_parameters
from .iv_solver import IVSolver

__all__ = [
    "norm_cdf",
    "norm_pdf",
    "GreeksCalculator",
    "VEGA_PER_VOL_POINT",
    "validate_option_parameters",
    "IVSolver",
]
