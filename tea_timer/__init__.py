#!filepath: tea_timer/__init__.py

from .utils.logger import Logging, init_logging, get_logs, reset_logging
from .utils.errors import TimerStoppedError, ConfigError
from .config import AppConfig, configure
from .display import format_duration
from .timer import Timer
from .took import took, ltook, took_block, timed

__version__ = "0.1.0"

__all__ = [
    "Timer",
    "format_duration",
    "took", "ltook", "took_block", "timed",
    "Logging", "init_logging", "get_logs", "reset_logging",
    "AppConfig", "configure",
    "TimerStoppedError", "ConfigError",
]
