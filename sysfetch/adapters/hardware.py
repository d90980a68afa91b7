import platform
from pathlib import Path
from typing import Optional

import psutil

from sysfetch.adapters.storage_fs import LocalFileReader
from sysfetch.internal.logging import get_logger
from sysfetch.kernel.contracts import FileReader, HardwareProbe

logger = get_logger(__name__)

CPUINFO_PATH = Path("/proc/cpuinfo")
GIB = 1024 ** 3


class PsutilHardwareProbe(HardwareProbe):
    """
    CPU model from /proc/cpuinfo (platform.processor() elsewhere) and
    memory usage from psutil.
    """
    def __init__(self, reader: Optional[FileReader] = None):
        self._reader = reader or LocalFileReader()

    def cpu_model(self) -> str:
        try:
            data = self._reader.read_file(CPUINFO_PATH)
        except OSError as e:
            logger.debug("Could not read cpuinfo", error=str(e))
            data = None
        if data:
            for line in data.decode("utf-8", errors="replace").splitlines():
                key, sep, value = line.partition(":")
                if sep and key.strip() == "model name":
                    return value.strip()
        return platform.processor() or platform.machine()

    def memory_usage(self) -> str:
        mem = psutil.virtual_memory()
        used = mem.total - mem.available
        return f"{used / GIB:.2f} GiB / {mem.total / GIB:.2f} GiB ({used / mem.total * 100:.0f}%)"
