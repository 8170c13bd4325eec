#!filepath: tea_timer/cli.py
import math
import subprocess
from typing import List, Optional

import typer
from rich import print

from tea_timer import __version__
from tea_timer.config import AppConfig, configure
from tea_timer.display import format_duration
from tea_timer.took import ltook, took
from tea_timer.utils.errors import ConfigError
from tea_timer.utils.logger import init_logging

app = typer.Typer(help="Tea Timer CLI")


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
def run(
    command: List[str] = typer.Argument(..., help="要计时的命令，放在 -- 之后"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="任务名，默认为命令本身"),
    log: bool = typer.Option(False, "--log", help="耗时写入日志而不是 stdout"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="YAML 配置文件"),
):
    """
    运行外部命令并报告耗时，退出码与子进程一致
    """
    if config is not None:
        try:
            configure(AppConfig.load(config))
        except ConfigError as e:
            print(f"[red]{e}[/red]")
            raise typer.Exit(code=2)
    elif log:
        init_logging()

    task = name if name is not None else " ".join(command)
    runner = ltook if log else took

    try:
        proc = runner(lambda: subprocess.run(command), task)
    except FileNotFoundError:
        print(f"[red]Command not found: {command[0]}[/red]")
        raise typer.Exit(code=127)

    raise typer.Exit(code=proc.returncode)


@app.command("format")
def format_cmd(
    seconds: float,
    precision: int = typer.Option(1, "--precision", "-p", min=0),
):
    """
    格式化一个秒数，例如 2.5 → 2.5s
    """
    if not math.isfinite(seconds) or seconds < 0:
        print("[red]seconds must be a finite number >= 0[/red]")
        raise typer.Exit(code=2)
    print(format_duration(seconds, precision))


def main():
    app()


if __name__ == "__main__":
    main()

# python -m tea_timer.cli run -- sleep 1
