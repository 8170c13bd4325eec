#!filepath: tea_timer/display.py
import math
from datetime import timedelta
from typing import Union

NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MILLI = 1_000_000
NANOS_PER_MICRO = 1_000

Duration = Union[float, int, timedelta]


def _to_nanos(duration: Duration) -> int:
    if isinstance(duration, timedelta):
        # timedelta 精度为微秒，按整数换算避免浮点误差
        micros = (duration.days * 86_400 + duration.seconds) * 1_000_000 + duration.microseconds
        return micros * NANOS_PER_MICRO
    if not math.isfinite(duration):
        raise ValueError(f"duration must be finite, got {duration!r}")
    return int(round(duration * NANOS_PER_SECOND))


def format_duration(duration: Duration, precision: int = 1) -> str:
    """
    耗时 → 可读字符串，选择使数值 >= 1 的最粗单位

        2.5      -> "2.5s"
        0.5      -> "500ms"
        0.00025  -> "250µs"
        0        -> "0ms"

    秒以下的单位按整数截断（999.9ms -> "999ms"）。
    """
    if precision < 0:
        raise ValueError(f"precision must be >= 0, got {precision}")

    nanos = _to_nanos(duration)
    if nanos < 0:
        raise ValueError(f"duration must be >= 0, got {duration!r}")

    if nanos >= NANOS_PER_SECOND:
        return f"{nanos / NANOS_PER_SECOND:.{precision}f}s"
    if nanos >= NANOS_PER_MILLI:
        return f"{nanos // NANOS_PER_MILLI}ms"
    if nanos >= NANOS_PER_MICRO:
        return f"{nanos // NANOS_PER_MICRO}µs"
    if nanos > 0:
        return f"{nanos}ns"
    return "0ms"
