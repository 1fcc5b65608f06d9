"""
领域异常

区分三类可被调用方识别的错误:
- InvalidOptionParametersError: 期权参数非法（标的价格/行权价非正等）
- InvalidTermStructureError: 期限结构非法（远月到期日不晚于近月）
- NegativeForwardVarianceError: 远期方差为负（近月 IV 相对远月过高）

后两者同属 ForwardVolatilityError，但类型不同，调用方可分别捕获。
"""


class AnalyticsError(Exception):
    """分析核心异常基类"""


class InvalidOptionParametersError(AnalyticsError, ValueError):
    """期权参数非法"""

    def __init__(self, field: str, value: float, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"期权参数非法: {field}={value} ({reason})")


class ForwardVolatilityError(AnalyticsError, ValueError):
    """远期波动率计算错误基类"""


class InvalidTermStructureError(ForwardVolatilityError):
    """远月到期时间必须严格晚于近月"""

    def __init__(self, front_years: float, back_years: float, message: str = ""):
        self.front_years = front_years
        self.back_years = back_years
        super().__init__(
            message
            or f"远月到期时间必须晚于近月: front={front_years:.6f}, back={back_years:.6f}"
        )


class NegativeForwardVarianceError(ForwardVolatilityError):
    """远期方差为负: 近月 IV 过高或远月 IV 过低"""

    def __init__(self, forward_variance: float, front_iv: float, back_iv: float):
        self.forward_variance = forward_variance
        self.front_iv = front_iv
        self.back_iv = back_iv
        super().__init__(
            f"远期方差为负 ({forward_variance:.6f}): "
            f"近月 IV={front_iv:.4f} 过高或远月 IV={back_iv:.4f} 过低"
        )
