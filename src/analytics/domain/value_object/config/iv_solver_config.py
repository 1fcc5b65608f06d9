"""IVSolverConfig 配置值对象"""

from dataclasses import dataclass


@dataclass(frozen=True)
class IVSolverConfig:
    """
    隐含波动率求解器配置

    波动率统一夹在 [min_volatility, max_volatility] 区间内。
    """

    initial_guess: float = 0.30          # 牛顿法初始猜测
    fallback_volatility: float = 0.30    # 退化输入 (T<=0 或价格<=0) 时的返回值
    max_iterations: int = 100            # 最大迭代次数
    tolerance: float = 1e-4              # 价格残差容差
    min_volatility: float = 0.01         # 波动率下限
    max_volatility: float = 5.0          # 波动率上限
    min_vega: float = 1e-8               # 原始 Vega 低于此值时停止迭代
