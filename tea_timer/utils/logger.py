#!filepath: tea_timer/utils/logger.py
import itertools
import os
import sys
from typing import Any, Optional

from loguru import logger

DEFAULT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}"

# 全局 sink：None 表示宿主程序未配置日志后端，Timer.log() 静默
logs: Optional["Logging"] = None

_tokens = itertools.count(1)
_default_removed = False


def _remove_default_handler() -> None:
    """loguru 自带的 stderr handler（id 0）只移除一次"""
    global _default_removed
    if _default_removed:
        return
    _default_removed = True
    try:
        logger.remove(0)
    except ValueError:
        # 宿主程序已自行移除
        pass


class Logging:
    """
    loguru 日志封装
    ---------------------------------------
    - log_dir 非空：按日期切割的文件日志 + 保留周期
    - 否则写入 sink（sys.stderr / 文件对象 / callable）
    - 只暴露分级方法，Timer.log() 使用 info
    ---------------------------------------
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "INFO",
        sink: Any = None,
        fmt: str = DEFAULT_FORMAT,
    ):
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level
        self.sink = sink
        self.fmt = fmt
        self._handler_id: Optional[int] = None

        # 每个实例一个 bound logger，handler 只接收带自己 token 的记录
        self._token = next(_tokens)
        self._logger = logger.bind(tea_sink=self._token)

        if self.log_dir:
            os.makedirs(self.log_dir, exist_ok=True)
        self._configure()

    def _accepts(self, record) -> bool:
        return record["extra"].get("tea_sink") == self._token

    def _configure(self) -> None:
        """
        移除 loguru 默认 handler（只一次），再挂本实例的 sink；
        其他 Logging 实例的 handler 不受影响
        """
        _remove_default_handler()

        if self.log_dir:
            self._handler_id = logger.add(
                sink=f"{self.log_dir}/{{time:YYYY-MM-DD}}.log",
                rotation=self.rotation,
                retention=self.retention,
                level=self.level,
                format=self.fmt,
                filter=self._accepts,
                enqueue=True,  # 多进程安全
                backtrace=True,
                diagnose=True,
            )
        else:
            self._handler_id = logger.add(
                sink=self.sink if self.sink is not None else sys.stderr,
                level=self.level,
                format=self.fmt,
                filter=self._accepts,
            )

    def close(self) -> None:
        if self._handler_id is None:
            return
        handler_id, self._handler_id = self._handler_id, None
        try:
            logger.remove(handler_id)
        except ValueError:
            # handler 已被外部 logger.remove() 清掉
            pass

    # ----------- 日志方法 -----------
    def debug(self, msg: str, *args, **kwargs):
        self._logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        self._logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        self._logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        self._logger.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        self._logger.exception(msg, *args, **kwargs)


def init_logging(config=None, sink: Any = None) -> Logging:
    """
    安装全局 logs（替换已有的）。

    config 为 LogConfig；为空时使用默认值。
    """
    global logs
    from tea_timer.config.log_config import LogConfig

    cfg = config if config is not None else LogConfig()

    if logs is not None:
        logs.close()

    logs = Logging(
        log_dir=cfg.dir,
        rotation=cfg.rotation,
        retention=cfg.retention,
        log_level=cfg.level,
        sink=sink,
        fmt=cfg.format,
    )
    return logs


def get_logs() -> Optional[Logging]:
    return logs


def reset_logging() -> None:
    global logs
    if logs is not None:
        logs.close()
    logs = None
