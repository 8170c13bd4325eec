#!filepath: tea_timer/took.py
from contextlib import contextmanager
from functools import wraps
from typing import Callable, Iterator, Optional, TypeVar

from tea_timer.config.app_config import current_timer_config
from tea_timer.timer import Timer

R = TypeVar("R")


def _resolve_name(task_name: Optional[str]) -> str:
    return current_timer_config().default_task_name if task_name is None else task_name


def _report(timer: Timer, use_log: bool) -> None:
    if use_log:
        timer.log()
    else:
        timer.stop()


def took(func: Callable[[], R], task_name: Optional[str] = None) -> R:
    """
    执行 func()，打印耗时，原样返回结果。
    func 抛出异常时仍打印到失败点为止的耗时，异常原样抛出。
    """
    timer = Timer(_resolve_name(task_name))
    try:
        return func()
    finally:
        timer.stop()


def ltook(func: Callable[[], R], task_name: Optional[str] = None) -> R:
    """同 took()，但耗时写入日志后端（未配置时静默）。"""
    timer = Timer(_resolve_name(task_name))
    try:
        return func()
    finally:
        timer.log()


@contextmanager
def took_block(task_name: Optional[str] = None, *, use_log: bool = False) -> Iterator[Timer]:
    """
    代码块计时：

        with took_block("build"):
            ...
    """
    timer = Timer(_resolve_name(task_name))
    try:
        yield timer
    finally:
        # 块内可能已经手动 stop()
        if not timer.stopped:
            _report(timer, use_log)


def timed(task_name: Optional[str] = None, *, use_log: bool = False) -> Callable:
    """
    装饰器版本，默认以函数 __qualname__ 作为任务名。
    """

    def decorator(func: Callable):
        name = func.__qualname__ if task_name is None else task_name

        @wraps(func)
        def wrapper(*args, **kwargs):
            with took_block(name, use_log=use_log):
                return func(*args, **kwargs)

        return wrapper

    return decorator
