#!filepath: tea_timer/timer.py
import time
from typing import Callable, Optional, TextIO

from tea_timer.config.app_config import current_timer_config
from tea_timer.display import format_duration
from tea_timer.utils.errors import TimerStoppedError
from tea_timer.utils.logger import Logging, get_logs


class Timer:
    """
    命名计时器
    - Timer(name)      → 记录单调时钟起点
    - elapsed()        → 打印 "<name>: 2.0s"，返回秒数，可重复调用
    - log()            → 同 elapsed()，但走日志后端（未配置时静默）
    - restart(name)    → 新名字 + 新起点
    - stop()           → 打印 "<name> took 2.0s"，之后该实例不可再用

    Example::

        timer = Timer("load")
        ...
        timer.elapsed()
        timer.restart("parse")
        ...
        timer.stop()
    """

    def __init__(
        self,
        task_name: str = "",
        *,
        logger: Optional[Logging] = None,
        clock: Callable[[], float] = time.perf_counter,
        stream: Optional[TextIO] = None,
        precision: Optional[int] = None,
    ):
        self._clock = clock
        self._logger = logger
        self.stream = stream
        self.precision = current_timer_config().precision if precision is None else precision
        self._stopped = False

        self.task_name = task_name
        self.start_time = self._clock()

    @property
    def stopped(self) -> bool:
        return self._stopped

    def _ensure_active(self) -> None:
        if self._stopped:
            raise TimerStoppedError(f"Timer {self.task_name!r} has already been stopped")

    def _emit(self, msg: str) -> None:
        # stream=None → 调用时的 sys.stdout
        print(msg, file=self.stream)

    # ---------- 读数 ----------
    def duration(self) -> float:
        self._ensure_active()
        return self._clock() - self.start_time

    def duration_str(self) -> str:
        return format_duration(self.duration(), self.precision)

    def _elapsed_msg(self, seconds: float) -> str:
        text = format_duration(seconds, self.precision)
        return f"{self.task_name}: {text}" if self.task_name else text

    def _took_msg(self, seconds: float) -> str:
        text = format_duration(seconds, self.precision)
        return f"{self.task_name} took {text}" if self.task_name else f"took {text}"

    def elapsed_str(self) -> str:
        return self._elapsed_msg(self.duration())

    def took_str(self) -> str:
        return self._took_msg(self.duration())

    # ---------- 操作 ----------
    def restart(self, task_name: str) -> None:
        self._ensure_active()
        self.task_name = task_name
        self.start_time = self._clock()

    def elapsed(self) -> float:
        seconds = self.duration()
        self._emit(self._elapsed_msg(seconds))
        return seconds

    def log(self) -> float:
        """
        INFO 级别写入日志后端：优先构造时注入的 logger，其次全局 init_logging() 安装的。
        两者都没有时不输出，也不报错。
        """
        seconds = self.duration()
        sink = self._logger if self._logger is not None else get_logs()
        if sink is not None:
            sink.info(self._elapsed_msg(seconds))
        return seconds

    def stop(self) -> float:
        seconds = self.duration()
        self._emit(self._took_msg(seconds))
        self._stopped = True
        return seconds

    # ---------- with Timer(...) ----------
    def __enter__(self) -> "Timer":
        self._ensure_active()
        return self

    def __exit__(self, exc_type, exc, tb):
        # 异常时同样报告到失败点为止的耗时，异常继续抛出
        if not self._stopped:
            self.stop()
        return False

    def __str__(self) -> str:
        return self.elapsed_str()

    def __repr__(self) -> str:
        state = "stopped" if self._stopped else "running"
        return f"Timer(task_name={self.task_name!r}, {state})"
