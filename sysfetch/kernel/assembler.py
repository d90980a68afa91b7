"""
The presentation pipeline of the sysfetch kernel.

Gathers host facts through the ports in sysfetch.kernel.contracts, resolves
the distribution, package manager and logo, and lays everything out with
the compositor. Runs once, sequentially, in a fixed order.
"""
import re
from pathlib import PurePosixPath
from typing import Iterable, Optional, Sequence

import typer

from sysfetch.internal.constants import (
    ACCENT_COLOR,
    KNOWN_WINDOW_MANAGERS,
    OS_RELEASE_PATH,
    SWATCH_CELL,
    SWATCH_COLORS,
)
from sysfetch.internal.logging import get_logger
from sysfetch.kernel.contracts import (
    CommandRunner,
    HardwareProbe,
    HostFacts,
    InfoField,
    LogoResolver,
    ProcessLister,
)
from sysfetch.kernel.distro import detect_distribution
from sysfetch.kernel.layout import compose
from sysfetch.kernel.packages import count_packages, resolve_package_manager

logger = get_logger(__name__)

# Nerd Font glyphs
ICON_USER = "\uf007"
ICON_DISTRO = "\uf013"
ICON_KERNEL = "\U000f033d"
ICON_WM = "\uf2d2"
ICON_SHELL = "\uf4b5"
ICON_PACKAGES = "\ueb29"
ICON_UPTIME = "\U000f0176"
ICON_PALETTE = "\ue22b"
ICON_CPU = "\uf4bc"
ICON_MEMORY = "\uefc5"

_WM_PATTERN = re.compile("|".join(re.escape(name) for name in KNOWN_WINDOW_MANAGERS))


def detect_window_manager(process_names: Iterable[str]) -> str:
    """
    Return the known window manager found in the first matching process name,
    or an empty string when none is running.
    """
    for name in process_names:
        match = _WM_PATTERN.search(name)
        if match:
            return match.group(0)
    logger.debug("No known window manager in process list")
    return ""


def shell_name(shell_env: Optional[str]) -> str:
    return PurePosixPath(shell_env).name if shell_env else ""


def color_swatches() -> str:
    return "".join(typer.style(SWATCH_CELL, bg=code) for code in SWATCH_COLORS)


def format_info_line(field: InfoField) -> str:
    return f"{typer.style(field.icon, fg=ACCENT_COLOR, bold=True)} {field.value}"


def build_info_fields(facts: HostFacts) -> list[InfoField]:
    fields = [
        InfoField(ICON_USER, "identity", f"{facts.username}@{facts.hostname}"),
        InfoField(ICON_DISTRO, "distro", facts.distro),
        InfoField(ICON_KERNEL, "kernel", facts.kernel),
        InfoField(ICON_WM, "wm", facts.window_manager),
        InfoField(ICON_SHELL, "shell", facts.shell),
        InfoField(ICON_PACKAGES, "packages", f"{facts.package_count} ({facts.package_manager})"),
        InfoField(ICON_UPTIME, "uptime", facts.uptime),
    ]
    fields.extend(facts.extra)
    return fields


def hardware_fields(probe: HardwareProbe) -> list[InfoField]:
    return [
        InfoField(ICON_CPU, "cpu", probe.cpu_model()),
        InfoField(ICON_MEMORY, "memory", probe.memory_usage()),
    ]


def build_info_lines(facts: HostFacts) -> list[str]:
    """The right-hand column: one line per fact, swatches last."""
    lines = [format_info_line(f) for f in build_info_fields(facts)]
    lines.append(format_info_line(InfoField(ICON_PALETTE, "colors", color_swatches())))
    return lines


class PresentationAssembler:
    """
    Orchestrates fact gathering, logo resolution and layout.
    """
    def __init__(
        self,
        runner: CommandRunner,
        logo_resolver: LogoResolver,
        process_lister: ProcessLister,
    ):
        self.runner = runner
        self.logo_resolver = logo_resolver
        self.process_lister = process_lister

    def gather_facts(
        self,
        shell_env: Optional[str],
        extra: Sequence[InfoField] = (),
    ) -> HostFacts:
        hostname = self.runner.run("hostname")
        username = self.runner.run("whoami")
        kernel = self.runner.run("uname", ["-r"])
        distro = detect_distribution(self.runner.run("cat", [OS_RELEASE_PATH]))
        uptime = self.runner.run("uptime", ["-p"])
        shell = shell_name(shell_env)
        window_manager = detect_window_manager(self.process_lister.process_names())

        binding = resolve_package_manager(distro)
        package_count = count_packages(binding, self.runner)

        logger.debug("Host facts gathered", distro=distro, package_manager=binding.name)

        return HostFacts(
            hostname=hostname,
            username=username,
            kernel=kernel,
            distro=distro,
            uptime=uptime,
            shell=shell,
            window_manager=window_manager,
            package_manager=binding.name,
            package_count=package_count,
            extra=tuple(extra),
        )

    def layout(self, facts: HostFacts) -> list[str]:
        logo = self.logo_resolver.resolve(facts.distro)
        return compose(logo.lines, build_info_lines(facts), art_color=ACCENT_COLOR)

    def render(
        self,
        shell_env: Optional[str],
        extra: Sequence[InfoField] = (),
    ) -> list[str]:
        return self.layout(self.gather_facts(shell_env, extra))
