from enum import Enum
from pathlib import Path
from typing import Optional

import typer

from sysfetch.cli import core
from sysfetch.cli.commands import doctor, show, version
from sysfetch.internal.constants import ENV_HARDWARE, ENV_LOG_FILE, ENV_LOG_LEVEL, ENV_LOGO_DIR
from sysfetch.internal.logging import setup_logging


class LogLevel(str, Enum):
    debug = "DEBUG"
    info = "INFO"
    warning = "WARNING"
    error = "ERROR"


app = typer.Typer(
    name="sysfetch",
    help="Show system information next to your distribution's logo.",
    add_completion=False,
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    logo_dir: Optional[Path] = typer.Option(
        None, "--logo-dir", envvar=ENV_LOGO_DIR,
        help="Directory holding <distro>.txt logos and unknown.txt.",
    ),
    hardware: bool = typer.Option(
        False, "--hardware/--no-hardware", envvar=ENV_HARDWARE,
        help="Also show CPU model and memory usage.",
    ),
    color: Optional[bool] = typer.Option(
        None, "--color/--no-color",
        help="Force colors on or off. Default: only on a terminal.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level", envvar=ENV_LOG_LEVEL,
        case_sensitive=False,
        help="Log level for messages written to stderr.",
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", envvar=ENV_LOG_FILE,
        help="Also write logs to this file (JSON lines if it ends in .json).",
    ),
):
    setup_logging(log_level_name=log_level.value, log_file_path=log_file, console_output=True)
    ctx.obj = core.load_settings(logo_dir=logo_dir, hardware=hardware, color=color)
    if ctx.invoked_subcommand is None:
        show.show(ctx.obj)


app.command("doctor")(doctor.doctor)
app.command("version")(version.version)

if __name__ == "__main__":
    app()
