#!filepath: tea_timer/config/timer_config.py
from pydantic import BaseModel, Field


class TimerConfig(BaseModel):
    precision: int = Field(default=1, ge=0)
    default_task_name: str = ""
