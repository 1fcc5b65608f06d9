"""
情景扫描值对象

- PriceRange: 标的价格百分比变动网格 (默认 -15% ~ +15%，步长 1%)
- ScenarioPoint: 网格上的单个情景
- ScenarioSweep: 有序、不可变、可重复迭代的情景序列
"""
from dataclasses import dataclass, asdict
from typing import Iterator, Tuple

import pandas as pd

from .calendar_spread import CalendarSpreadEstimate


@dataclass(frozen=True)
class PriceRange:
    """百分比变动网格 (单位: %)"""
    min_pct: float = -15.0
    max_pct: float = 15.0
    step_pct: float = 1.0

    def __post_init__(self) -> None:
        if self.step_pct <= 0:
            raise ValueError(f"step_pct 必须大于 0: {self.step_pct}")
        # 标的价格必须保持为正
        if self.min_pct <= -100.0:
            raise ValueError(f"min_pct 必须大于 -100: {self.min_pct}")
        if self.max_pct < self.min_pct:
            raise ValueError(
                f"max_pct 不能小于 min_pct: min={self.min_pct}, max={self.max_pct}"
            )

    def grid(self) -> Tuple[float, ...]:
        """按索引生成网格点，避免浮点累加误差"""
        count = int((self.max_pct - self.min_pct) / self.step_pct + 1e-9) + 1
        return tuple(self.min_pct + i * self.step_pct for i in range(count))


@dataclass(frozen=True)
class ScenarioPoint:
    pct_change: float
    underlying_price: float
    estimate: CalendarSpreadEstimate


@dataclass(frozen=True)
class ScenarioSweep:
    """情景扫描结果，按 pct_change 升序排列"""
    points: Tuple[ScenarioPoint, ...] = ()

    def __iter__(self) -> Iterator[ScenarioPoint]:
        return iter(self.points)

    def __len__(self) -> int:
        return len(self.points)

    def __getitem__(self, index: int) -> ScenarioPoint:
        return self.points[index]

    def to_dataframe(self) -> pd.DataFrame:
        """
        展开为 DataFrame，每个情景一行

        列: pct_change, underlying_price 以及 CalendarSpreadEstimate 的全部字段
        """
        records = [
            {
                "pct_change": point.pct_change,
                "underlying_price": point.underlying_price,
                **asdict(point.estimate),
            }
            for point in self.points
        ]
        return pd.DataFrame(records) if records else pd.DataFrame()
