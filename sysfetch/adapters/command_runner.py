"""
A CommandRunner that executes programs with subprocess.
"""
import subprocess
from typing import Iterable

from sysfetch.internal.constants import COMMAND_ERROR_PREFIX
from sysfetch.internal.logging import get_logger
from sysfetch.kernel.contracts import CommandRunner


class SubprocessCommandRunner(CommandRunner):
    """
    Runs each command to completion and returns its trimmed stdout.
    Blocks until the program exits; there is no timeout.
    """
    def __init__(self):
        self.logger = get_logger(self.__class__.__name__)

    def run(self, name: str, args: Iterable[str] = ()) -> str:
        command = [name, *args]
        try:
            completed = subprocess.run(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                encoding="utf-8",
                errors="replace",
                check=True,
            )
        except (OSError, subprocess.SubprocessError) as e:
            self.logger.warning("Command failed", command=command, error=str(e))
            return f"{COMMAND_ERROR_PREFIX}{e}"
        return completed.stdout.strip()
