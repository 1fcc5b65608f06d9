"""
波动率单位换算

核心接口一律使用小数 (0.30 = 30%)。展示层以百分数 (30) 输入或输出时，
只在此处换算一次。
"""


def percent_to_decimal(value: float) -> float:
    """30 -> 0.30"""
    return value / 100.0


def decimal_to_percent(value: float) -> float:
    """0.30 -> 30"""
    return value * 100.0
