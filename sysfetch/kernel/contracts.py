"""
Data contracts and ports of the sysfetch kernel.

The kernel never touches processes or files directly; it talks to the
outside world only through the protocols defined here. Concrete
implementations live in sysfetch.adapters.
"""
from abc import abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Protocol


@dataclass(frozen=True)
class PackageManagerBinding:
    """
    A package manager and the shell command that counts its installed packages.
    An empty count_command means the manager is not supported.
    """
    name: str
    count_command: str

    @property
    def is_supported(self) -> bool:
        return bool(self.count_command)


@dataclass(frozen=True)
class LogoAsset:
    """
    ASCII art for a distribution, as resolved from a logo resource.
    """
    distro_id: str
    text: str
    location: Optional[Path] = None
    is_fallback: bool = False

    @property
    def lines(self) -> list[str]:
        # Rows break on "\n" only; a single trailing newline adds no row.
        lines = self.text.split("\n")
        if lines[-1] == "":
            lines.pop()
        return lines


@dataclass(frozen=True)
class InfoField:
    """One labelled host fact, rendered as a single info line."""
    icon: str
    label: str
    value: str


@dataclass(frozen=True)
class HostFacts:
    """
    Everything gathered about the host in a single run.
    Values are display text; failed lookups carry their error string.
    """
    hostname: str
    username: str
    kernel: str
    distro: str
    uptime: str
    shell: str
    window_manager: str
    package_manager: str
    package_count: str
    extra: tuple[InfoField, ...] = field(default_factory=tuple)


class CommandRunner(Protocol):
    """
    The port for executing external programs.
    """

    @abstractmethod
    def run(self, name: str, args: Iterable[str] = ()) -> str:
        """
        Run `name` with `args` and return its trimmed standard output.

        Must never raise: any failure is returned as "Error: <description>".
        """
        ...


class FileReader(Protocol):
    """
    The port for reading raw file contents.
    """

    @abstractmethod
    def read_file(self, path: Path) -> Optional[bytes]:
        """
        Return the bytes at `path`, or None when it does not exist.
        """
        ...


class ProcessLister(Protocol):
    """
    The port for listing the names of running processes, in pid order.
    """

    @abstractmethod
    def process_names(self) -> Iterable[str]:
        ...


class LogoResolver(Protocol):
    """
    The port for turning a distribution id into ASCII art.
    """

    @abstractmethod
    def resolve(self, distro_id: str) -> LogoAsset:
        """
        Resolve the logo for `distro_id`.

        Falls back to the "unknown" logo when no dedicated art exists, and
        to a one-line error message when nothing can be read. Never raises.
        """
        ...


class HardwareProbe(Protocol):
    """
    The port for optional hardware facts (CPU model, memory usage).
    """

    @abstractmethod
    def cpu_model(self) -> str:
        ...

    @abstractmethod
    def memory_usage(self) -> str:
        ...
