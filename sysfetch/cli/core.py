"""
Core, reusable logic for CLI commands, decoupled from Typer.
Responsible ONLY for wiring adapters into the kernel.
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from sysfetch.adapters.command_runner import SubprocessCommandRunner
from sysfetch.adapters.hardware import PsutilHardwareProbe
from sysfetch.adapters.processes import PsutilProcessLister
from sysfetch.adapters.storage_fs import FileSystemLogoResolver
from sysfetch.internal import paths
from sysfetch.internal.constants import ENV_SHELL
from sysfetch.internal.logging import get_logger
from sysfetch.kernel.assembler import PresentationAssembler, hardware_fields

logger = get_logger(__name__)


@dataclass
class Settings:
    logo_dir: Path
    hardware: bool = False
    color: Optional[bool] = None
    shell: Optional[str] = None


def load_settings(
    logo_dir: Optional[Path] = None,
    hardware: bool = False,
    color: Optional[bool] = None,
) -> Settings:
    """Resolve settings from options and the environment, once per run."""
    return Settings(
        logo_dir=paths.get_logo_dir(logo_dir),
        hardware=hardware,
        color=color,
        shell=os.environ.get(ENV_SHELL),
    )


def build_assembler(settings: Settings) -> PresentationAssembler:
    return PresentationAssembler(
        runner=SubprocessCommandRunner(),
        logo_resolver=FileSystemLogoResolver(settings.logo_dir),
        process_lister=PsutilProcessLister(),
    )


def render(settings: Settings, assembler: Optional[PresentationAssembler] = None) -> list[str]:
    """
    Gather host facts and lay them out next to the logo.
    """
    assembler = assembler or build_assembler(settings)
    extra = hardware_fields(PsutilHardwareProbe()) if settings.hardware else []
    logger.debug("Rendering", logo_dir=str(settings.logo_dir), hardware=settings.hardware)
    return assembler.render(settings.shell, extra)
