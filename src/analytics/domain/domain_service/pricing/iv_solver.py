"""
IVSolver 隐含波动率求解器

从市场价格反推隐含波动率。阻尼牛顿法:
- 初始猜测 σ=0.30，最多 100 次迭代，价格残差 < 1e-4 视为收敛
- 牛顿步使用原始 Vega (每 1% Vega × 100)
- 维护价格区间 [low, high]，牛顿步越界时改为二分步
- 每步后 σ 夹在 [0.01, 5.0]
- Vega 过小时停止迭代，返回最后一次的 σ

求解器不抛异常：总会返回一个估计值，并通过 IVResult.converged 标明是否收敛。
"""
import logging
from typing import List, Optional

from ...value_object.config.iv_solver_config import IVSolverConfig
from ...value_object.pricing.greeks import IVQuote, IVResult
from .greeks_calculator import VEGA_PER_VOL_POINT, GreeksCalculator

logger = logging.getLogger(__name__)


class IVSolver:
    """隐含波动率求解器"""

    def __init__(
        self,
        config: Optional[IVSolverConfig] = None,
        calculator: Optional[GreeksCalculator] = None,
    ):
        self._config = config or IVSolverConfig()
        self._calculator = calculator or GreeksCalculator()

    @property
    def config(self) -> IVSolverConfig:
        return self._config

    def solve(
        self,
        market_price: float,
        spot_price: float,
        strike_price: float,
        time_to_expiry: float,
        risk_free_rate: float,
        option_type: str,
    ) -> IVResult:
        """
        求解单个期权的隐含波动率

        Args:
            market_price: 期权市场价格
            spot_price: 标的价格
            strike_price: 行权价
            time_to_expiry: 剩余到期时间 (年化)
            risk_free_rate: 无风险利率
            option_type: "call" | "put"

        Returns:
            IVResult；退化输入返回默认波动率且 success=False，
            未收敛时返回最后估计且 converged=False
        """
        cfg = self._config

        # ---- 退化输入: 不迭代，直接返回默认值 ----
        if time_to_expiry <= 0 or market_price <= 0:
            return IVResult(
                implied_volatility=cfg.fallback_volatility,
                success=False,
                error_message="到期时间或市场价格非正，返回默认波动率",
            )

        sigma = self._clamp(cfg.initial_guess)
        sigma_low = cfg.min_volatility
        sigma_high = cfg.max_volatility
        diff = 0.0
        iterations = 0

        try:
            for i in range(cfg.max_iterations):
                iterations = i + 1
                result = self._calculator.price_and_greeks(
                    spot_price, strike_price, time_to_expiry,
                    risk_free_rate, sigma, option_type,
                )
                diff = result.price - market_price

                if abs(diff) < cfg.tolerance:
                    return IVResult(
                        implied_volatility=sigma,
                        iterations=iterations,
                        converged=True,
                        residual=diff,
                    )

                # 价格随 σ 单调递增，据此收窄区间
                if diff > 0:
                    sigma_high = sigma
                else:
                    sigma_low = sigma

                vega_raw = result.vega * VEGA_PER_VOL_POINT
                if vega_raw < cfg.min_vega:
                    break

                new_sigma = sigma - diff / vega_raw
                if not sigma_low < new_sigma < sigma_high:
                    new_sigma = (sigma_low + sigma_high) / 2.0
                sigma = self._clamp(new_sigma)
        except (OverflowError, ValueError, ZeroDivisionError) as e:
            logger.debug("IV 求解计算异常: %s", e)
            return IVResult(
                implied_volatility=sigma,
                iterations=iterations,
                residual=diff,
                success=False,
                error_message=f"计算异常: {e}",
            )

        logger.debug(
            "IV 求解未收敛: price=%.6f S=%.4f K=%.4f T=%.6f sigma=%.6f residual=%.6g iterations=%d",
            market_price, spot_price, strike_price, time_to_expiry, sigma, diff, iterations,
        )
        return IVResult(
            implied_volatility=sigma,
            iterations=iterations,
            converged=False,
            residual=diff,
            error_message=f"在 {iterations} 次迭代内未收敛",
        )

    def implied_vol(
        self,
        market_price: float,
        spot_price: float,
        strike_price: float,
        time_to_expiry: float,
        risk_free_rate: float,
        option_type: str,
    ) -> float:
        """只返回隐含波动率数值"""
        return self.solve(
            market_price, spot_price, strike_price,
            time_to_expiry, risk_free_rate, option_type,
        ).implied_volatility

    def solve_batch(self, quotes: List[IVQuote]) -> List[IVResult]:
        """
        批量求解隐含波动率

        每个报价独立求解，单个失败不影响其他。
        返回列表与输入列表保持相同顺序和长度。
        """
        return [
            self.solve(
                market_price=quote.market_price,
                spot_price=quote.spot_price,
                strike_price=quote.strike_price,
                time_to_expiry=quote.time_to_expiry,
                risk_free_rate=quote.risk_free_rate,
                option_type=quote.option_type,
            )
            for quote in quotes
        ]

    def _clamp(self, sigma: float) -> float:
        return min(max(sigma, self._config.min_volatility), self._config.max_volatility)
