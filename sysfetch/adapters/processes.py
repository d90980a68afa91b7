from typing import Iterator

import psutil

from sysfetch.kernel.contracts import ProcessLister


class PsutilProcessLister(ProcessLister):
    """Lists running process names in pid order via psutil."""

    def process_names(self) -> Iterator[str]:
        for proc in psutil.process_iter(["name"]):
            try:
                name = proc.info.get("name") or proc.name()
            except (psutil.NoSuchProcess, psutil.AccessDenied, psutil.ZombieProcess):
                continue
            if name:
                yield name
