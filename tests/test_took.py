#!filepath: tests/test_took.py
import re
import time

import pytest

from tea_timer import AppConfig, configure, init_logging, ltook, timed, took, took_block
from tea_timer.config import TimerConfig

REPORT = r"\d+(\.\d+)?(s|ms|µs|ns)"


def test_took_returns_result_unchanged(capsys):
    payload = {"rows": [1, 2, 3]}

    result = took(lambda: payload, "compute")

    assert result is payload
    assert re.fullmatch(rf"compute took {REPORT}\n", capsys.readouterr().out)


def test_took_measures_work(capsys):
    took(lambda: time.sleep(0.01), "sleep")
    out = capsys.readouterr().out
    assert out.startswith("sleep took ")
    assert not out.startswith("sleep took 0ms")


def test_took_default_name(capsys):
    assert took(lambda: 42) == 42
    assert re.fullmatch(rf"took {REPORT}\n", capsys.readouterr().out)


def test_took_configured_default_name(capsys):
    configure(AppConfig(timer=TimerConfig(default_task_name="work")))

    took(lambda: None)

    assert capsys.readouterr().out.startswith("work took ")


def test_took_propagates_failure_and_reports(capsys):
    err = KeyError("missing")

    def fail():
        raise err

    with pytest.raises(KeyError) as info:
        took(fail, "broken")

    assert info.value is err
    assert capsys.readouterr().out.startswith("broken took ")


def test_ltook_without_backend(capsys):
    assert ltook(lambda: "ok", "quiet") == "ok"
    assert capsys.readouterr().out == ""


def test_ltook_with_backend(captured, capsys):
    init_logging(sink=captured.sink)

    assert ltook(lambda: 7, "job") == 7

    assert "job: " in captured.text
    assert "INFO" in captured.text
    assert capsys.readouterr().out == ""


def test_ltook_propagates_failure(captured):
    init_logging(sink=captured.sink)

    def fail():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        ltook(fail, "job")

    assert "job: " in captured.text


def test_took_block(capsys):
    with took_block("block") as t:
        assert t.task_name == "block"

    assert t.stopped
    assert capsys.readouterr().out.startswith("block took ")


def test_took_block_failure(capsys):
    with pytest.raises(ZeroDivisionError):
        with took_block("divide"):
            1 / 0

    assert capsys.readouterr().out.startswith("divide took ")


def test_took_block_use_log(captured, capsys):
    init_logging(sink=captured.sink)

    with took_block("logged", use_log=True):
        pass

    assert "logged: " in captured.text
    assert capsys.readouterr().out == ""


def test_timed_decorator(capsys):
    @timed()
    def add(a, b, *, scale=1):
        return (a + b) * scale

    assert add(1, 2, scale=3) == 9
    assert add.__name__ == "add"
    assert "add took " in capsys.readouterr().out


def test_timed_decorator_custom_name_and_failure(capsys):
    @timed("loader")
    def load():
        raise ValueError("bad file")

    with pytest.raises(ValueError, match="bad file"):
        load()

    assert capsys.readouterr().out.startswith("loader took ")


def test_timed_decorator_use_log(captured):
    init_logging(sink=captured.sink)

    @timed("fetch", use_log=True)
    def fetch():
        return "data"

    assert fetch() == "data"
    assert "fetch: " in captured.text
