#!filepath: tea_timer/config/log_config.py
from typing import Optional

from pydantic import BaseModel

from tea_timer.utils.logger import DEFAULT_FORMAT


class LogConfig(BaseModel):
    # dir 为空时日志写到 stderr，不落盘
    dir: Optional[str] = None
    rotation: str = "1 day"
    retention: str = "30 days"
    level: str = "INFO"
    format: str = DEFAULT_FORMAT
