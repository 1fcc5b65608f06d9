"""
SpreadGreeksCalculator 领域服务

将日历价差两条腿的价格与 Greeks 按方向加权求和:
    total += value × direction_sign
- 近月为卖出腿 (sign = -1)，远月为买入腿 (sign = +1)
因此结果恒为 远月 - 近月。
"""
from ...value_object.calendar.calendar_spread import SpreadGreeks
from ...value_object.pricing.greeks import GreeksResult

SHORT_SIGN = -1.0
LONG_SIGN = 1.0


class SpreadGreeksCalculator:
    """价差级价格与 Greeks 聚合"""

    def calculate(self, front: GreeksResult, back: GreeksResult) -> SpreadGreeks:
        """
        Args:
            front: 近月 (卖出腿) 估值
            back: 远月 (买入腿) 估值

        Returns:
            SpreadGreeks，各字段为 远月 - 近月
        """
        price = 0.0
        delta = 0.0
        gamma = 0.0
        theta = 0.0
        vega = 0.0

        for greeks, sign in ((back, LONG_SIGN), (front, SHORT_SIGN)):
            price += greeks.price * sign
            delta += greeks.delta * sign
            gamma += greeks.gamma * sign
            theta += greeks.theta * sign
            vega += greeks.vega * sign

        return SpreadGreeks(price=price, delta=delta, gamma=gamma, theta=theta, vega=vega)
