"""
Package manager lookup and package counting.

Public API:
    resolve_package_manager(distro_id) -> PackageManagerBinding
    count_packages(binding, runner) -> str
"""
from typing import Dict

from sysfetch.internal.constants import PACKAGE_MANAGER_NOT_SUPPORTED, UNKNOWN_PACKAGE_MANAGER
from sysfetch.internal.logging import get_logger
from sysfetch.kernel.contracts import CommandRunner, PackageManagerBinding

logger = get_logger(__name__)

# ---------------- Registry ----------------

DPKG = PackageManagerBinding("dpkg", "dpkg -l | wc -l")
RPM = PackageManagerBinding("rpm", "rpm -qa | wc -l")
PACMAN = PackageManagerBinding("pacman", "pacman -Q | wc -l")
UNSUPPORTED = PackageManagerBinding(UNKNOWN_PACKAGE_MANAGER, "")

# Exact, case-sensitive distribution ids. Aliases share one binding.
PACKAGE_MANAGERS: Dict[str, PackageManagerBinding] = {
    "ubuntu":  DPKG,
    "debian":  DPKG,
    "fedora":  RPM,
    "centos":  RPM,
    "arch":    PACMAN,
    "artix":   PACMAN,
    "cachyos": PACMAN,
}


def resolve_package_manager(distro_id: str) -> PackageManagerBinding:
    return PACKAGE_MANAGERS.get(distro_id, UNSUPPORTED)


def count_packages(binding: PackageManagerBinding, runner: CommandRunner) -> str:
    """
    Count installed packages with the binding's command.
    Unsupported managers short-circuit to a fixed message without running anything.
    """
    if not binding.is_supported:
        logger.info("No package manager for this distribution", manager=binding.name)
        return PACKAGE_MANAGER_NOT_SUPPORTED
    return runner.run("sh", ["-c", binding.count_command])
