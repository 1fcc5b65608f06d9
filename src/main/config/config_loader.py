"""
config_loader.py - 配置加载器

支持:
1. TOML 配置文件 (领域服务配置)
2. 环境变量 (.env) 中的市场参数覆盖
"""
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Union

from dotenv import load_dotenv

# Python 3.11+ 内置 tomllib，之前版本使用 tomli
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

logger = logging.getLogger(__name__)

# 从 src/main/config/config_loader.py 到项目根目录需要 4 级 parent
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent

# 环境变量名 → 配置字段名
_MARKET_ENV_KEYS = {
    "RISK_FREE_RATE": "risk_free_rate",
    "CONTRACT_MULTIPLIER": "contract_multiplier",
}


class ConfigLoader:
    """
    配置加载器

    - 领域服务配置: 从 TOML 文件加载
    - 市场参数: 从环境变量加载 (.env)
    """

    @staticmethod
    def load_toml(path: Union[str, Path]) -> Dict[str, Any]:
        """加载 TOML 配置文件"""
        with open(path, "rb") as f:
            try:
                return tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"TOML 配置解析失败: {path}: {e}") from e

    @staticmethod
    def load_market_env(env_path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
        """
        从环境变量加载市场参数覆盖

        读取 RISK_FREE_RATE (小数) 与 CONTRACT_MULTIPLIER (整数)。
        未设置的变量不出现在返回字典中。

        Raises:
            ValueError: 变量存在但无法解析为数值
        """
        env_path = Path(env_path) if env_path else PROJECT_ROOT / ".env"
        if env_path.exists():
            load_dotenv(dotenv_path=env_path)

        overrides: Dict[str, Any] = {}
        for env_key, field in _MARKET_ENV_KEYS.items():
            raw = os.getenv(env_key)
            if not raw:
                continue
            try:
                overrides[field] = int(raw) if field == "contract_multiplier" else float(raw)
            except ValueError as e:
                raise ValueError(f"环境变量 {env_key} 不是有效数值: {raw!r}") from e

        if overrides:
            logger.info("已从环境变量加载市场参数: %s", sorted(overrides))
        return overrides
