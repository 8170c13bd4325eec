#!filepath: tea_timer/config/app_config.py
import os
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from .log_config import LogConfig
from .timer_config import TimerConfig
from tea_timer.utils.errors import ConfigError
from tea_timer.utils.logger import init_logging

ENV_LOG_LEVEL = "TEA_TIMER_LOG_LEVEL"
ENV_PRECISION = "TEA_TIMER_PRECISION"

_timer_config = TimerConfig()


def default_config_path() -> str:
    """
    tea_timer/config/base.yml（不依赖当前工作目录）
    """
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    timer: TimerConfig = Field(default_factory=TimerConfig)

    @classmethod
    def load(cls, path: Optional[str] = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用 tea_timer/config/base.yml
        - 环境变量优先级高于 YAML
        """
        # 1) 当前工作目录下的 .env（不存在时忽略）
        load_dotenv(os.path.join(os.getcwd(), ".env"))

        # 2) 决定配置文件路径
        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise ConfigError(f"Config file not found: {path}")

        # 3) 读取 YAML
        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Cannot read config {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigError(f"Config root must be a mapping: {path}")

        # 4) env 覆盖
        level = os.getenv(ENV_LOG_LEVEL)
        if level:
            raw["log"] = _override(raw, "log", "level", level.upper(), path)
        precision = os.getenv(ENV_PRECISION)
        if precision:
            raw["timer"] = _override(raw, "timer", "precision", precision, path)

        try:
            return cls(**raw)
        except (ValidationError, TypeError) as e:
            raise ConfigError(f"Invalid config {path}: {e}") from e


def _override(raw: dict, section: str, key: str, value: str, path: str) -> dict:
    current = raw.get(section) or {}
    if not isinstance(current, dict):
        raise ConfigError(f"Config section '{section}' must be a mapping: {path}")
    return {**current, key: value}


def configure(config: AppConfig) -> AppConfig:
    """
    进程级生效：安装日志后端 + Timer 默认值
    """
    global _timer_config
    init_logging(config.log)
    _timer_config = config.timer
    return config


def current_timer_config() -> TimerConfig:
    return _timer_config


def reset_timer_config() -> None:
    global _timer_config
    _timer_config = TimerConfig()
