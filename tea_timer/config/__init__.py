#!filepath: tea_timer/config/__init__.py
from .app_config import AppConfig, configure, current_timer_config
from .log_config import LogConfig
from .timer_config import TimerConfig

__all__ = ["AppConfig", "LogConfig", "TimerConfig", "configure", "current_timer_config"]
