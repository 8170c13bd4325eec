# tests/conftest.py
from __future__ import annotations

import pytest
from loguru import logger

from tea_timer.config.app_config import reset_timer_config
from tea_timer.utils.logger import reset_logging


@pytest.fixture(autouse=True)
def disable_file_logger():
    reset_logging()
    reset_timer_config()
    logger.remove()
    logger.add(lambda msg: None)  # or sys.stderr
    yield
    reset_logging()
    reset_timer_config()


class FakeClock:
    """
    可手动推进的单调时钟，让耗时断言完全确定
    """

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def captured():
    """
    loguru 输出捕获：init_logging(sink=captured.sink)
    """

    class _Captured(list):
        def sink(self, msg):
            self.append(str(msg))

        @property
        def text(self) -> str:
            return "".join(self)

    return _Captured()
