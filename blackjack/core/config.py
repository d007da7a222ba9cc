"""
ConfigService - 配置管理

集中管理牌组和日志配置，包括：
- 牌组配置（副数、随机种子）
- 日志配置（级别、格式、控制台输出）

每类配置按名称保存多个预设，未知预设回退到default.
"""

import logging
import random
from dataclasses import dataclass, asdict, replace
from enum import Enum
from typing import Any, Dict, List, Optional

from .deck.deck import Deck
from .exceptions import ConfigError

_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ConfigType(Enum):
    """配置类型枚举"""
    DECK = "deck"
    LOGGING = "logging"


@dataclass
class DeckConfig:
    """牌组配置"""
    set_count: int = 1
    random_seed: Optional[int] = None  # 固定种子用于可重现的洗牌

    def __post_init__(self):
        """验证配置的有效性"""
        if isinstance(self.set_count, bool) or not isinstance(self.set_count, int):
            raise ConfigError(f"set_count必须是整数: {self.set_count!r}")
        if self.set_count < 1:
            raise ConfigError(f"set_count必须为正整数: {self.set_count}")
        if self.random_seed is not None and (
                isinstance(self.random_seed, bool) or not isinstance(self.random_seed, int)):
            raise ConfigError(f"random_seed必须是整数或None: {self.random_seed!r}")

    def create_deck(self) -> Deck:
        """
        按配置创建牌组

        Returns:
            Deck: 未洗牌的新牌组；设置了种子时使用独立的随机数生成器
        """
        rng = random.Random(self.random_seed) if self.random_seed is not None else None
        return Deck(self.set_count, rng)


@dataclass
class LoggingConfig:
    """日志配置"""
    log_level: str = 'INFO'
    enable_console_logging: bool = True
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    def __post_init__(self):
        """验证日志级别和格式"""
        if not isinstance(self.log_level, str) or self.log_level.upper() not in _LOG_LEVELS:
            raise ConfigError(f"无效的日志级别: {self.log_level!r}")
        self.log_level = self.log_level.upper()
        if not self.log_format:
            raise ConfigError("log_format不能为空")


_CONFIG_CLASSES = {
    ConfigType.DECK: DeckConfig,
    ConfigType.LOGGING: LoggingConfig,
}


def configure_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    为blackjack包配置日志

    库本身导入时不配置日志，由调用方显式调用.

    Args:
        config: 日志配置，None时使用默认配置

    Returns:
        logging.Logger: blackjack包的根日志器
    """
    config = config or LoggingConfig()
    package_logger = logging.getLogger('blackjack')
    package_logger.setLevel(config.log_level)

    for handler in list(package_logger.handlers):
        if getattr(handler, '_blackjack_handler', False):
            package_logger.removeHandler(handler)

    if config.enable_console_logging:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(config.log_format))
        handler._blackjack_handler = True
        package_logger.addHandler(handler)

    return package_logger


class ConfigService:
    """配置管理服务"""

    def __init__(self):
        """初始化配置服务"""
        self.logger = logging.getLogger(__name__)
        self._configs: Dict[ConfigType, Dict[str, Any]] = {}
        self._load_default_configs()

    def _load_default_configs(self):
        """加载默认配置"""
        self._configs[ConfigType.DECK] = {
            'default': DeckConfig(),
            'six_deck_shoe': DeckConfig(set_count=6),
            'deterministic': DeckConfig(set_count=1, random_seed=42),
        }
        self._configs[ConfigType.LOGGING] = {
            'default': LoggingConfig(),
            'debug': LoggingConfig(log_level='DEBUG'),
            'quiet': LoggingConfig(log_level='WARNING', enable_console_logging=False),
        }
        self.logger.debug("默认配置加载完成")

    def _get(self, config_type: ConfigType, profile: str) -> Any:
        profiles = self._configs[config_type]
        if profile not in profiles:
            self.logger.warning(f"未找到{config_type.value}配置 '{profile}'，使用默认配置")
            profile = 'default'
        return profiles[profile]

    def get_deck_config(self, profile: str = "default") -> DeckConfig:
        """
        获取牌组配置

        Args:
            profile: 预设名称 (default, six_deck_shoe, deterministic)

        Returns:
            DeckConfig: 牌组配置
        """
        return self._get(ConfigType.DECK, profile)

    def get_logging_config(self, profile: str = "default") -> LoggingConfig:
        """
        获取日志配置

        Args:
            profile: 预设名称 (default, debug, quiet)

        Returns:
            LoggingConfig: 日志配置
        """
        return self._get(ConfigType.LOGGING, profile)

    def update_config(self, config_type: ConfigType, profile: str, updates: Dict[str, Any]) -> Any:
        """
        更新或新增一个预设

        通过重新构造数据类完成校验，校验失败时原配置保持不变.

        Args:
            config_type: 配置类型
            profile: 预设名称
            updates: 要修改的字段

        Returns:
            更新后的配置对象

        Raises:
            ConfigError: 字段不存在或取值无效时
        """
        config_class = _CONFIG_CLASSES[config_type]
        base = self._configs[config_type].get(profile, config_class())
        known_fields = set(asdict(base))
        unknown = set(updates) - known_fields
        if unknown:
            raise ConfigError(f"未知的配置项: {sorted(unknown)}")

        updated = replace(base, **updates)
        self._configs[config_type][profile] = updated
        self.logger.info(f"配置已更新: {config_type.value}/{profile} {updates}")
        return updated

    def list_available_profiles(self, config_type: ConfigType) -> List[str]:
        """列出可用的预设名称"""
        return list(self._configs[config_type].keys())


# 全局单例
_config_service_instance: Optional[ConfigService] = None


def get_config_service() -> ConfigService:
    """
    获取配置服务的全局单例

    Returns:
        ConfigService: 配置服务实例
    """
    global _config_service_instance
    if _config_service_instance is None:
        _config_service_instance = ConfigService()
    return _config_service_instance
