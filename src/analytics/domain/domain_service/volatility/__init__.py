"""波动率期限结构相关领域服务。"""

from .forward_vol_calculator import ForwardVolatilityCalculator

__all__ = ["ForwardVolatilityCalculator"]
