"""
StandardNormal 标准正态分布

定价器与 IV 求解器共用的唯一实现。
CDF 使用 Abramowitz & Stegun 7.1.26 近似，绝对误差约 1.5e-7。
"""
import math

_A1 = 0.254829592
_A2 = -0.284496736
_A3 = 1.421413741
_A4 = -1.453152027
_A5 = 1.061405429
_P = 0.3275911

_INV_SQRT_2 = 1.0 / math.sqrt(2.0)
_INV_SQRT_2PI = 1.0 / math.sqrt(2.0 * math.pi)


def norm_cdf(x: float) -> float:
    """标准正态分布累积分布函数 P(Z <= x)"""
    sign = -1.0 if x < 0 else 1.0
    z = abs(x) * _INV_SQRT_2
    t = 1.0 / (1.0 + _P * z)
    y = 1.0 - (((((_A5 * t + _A4) * t) + _A3) * t + _A2) * t + _A1) * t * math.exp(-z * z)
    return 0.5 * (1.0 + sign * y)


def norm_pdf(x: float) -> float:
    """标准正态分布概率密度函数"""
    return math.exp(-0.5 * x * x) * _INV_SQRT_2PI
