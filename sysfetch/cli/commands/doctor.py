import shutil
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from sysfetch.adapters.storage_fs import FileSystemLogoResolver, LocalFileReader
from sysfetch.internal import paths
from sysfetch.internal.constants import OS_RELEASE_PATH
from sysfetch.internal.logging import get_logger
from sysfetch.kernel.distro import detect_distribution
from sysfetch.kernel.packages import resolve_package_manager

logger = get_logger(__name__)

REQUIRED_COMMANDS = ("hostname", "whoami", "uname", "uptime", "sh", "cat")


def doctor(ctx: typer.Context):
    """
    Check that sysfetch can gather facts and find its logos.
    """
    settings = ctx.obj
    console = Console()
    results = []

    def check(description: str, func):
        passed, detail = func()
        results.append((description, passed, detail))
        if not passed:
            logger.warning("Doctor check failed", check=description, detail=detail)

    # --- External utilities ---
    for name in REQUIRED_COMMANDS:
        def check_command(name=name):
            location = shutil.which(name)
            return location is not None, location or f"'{name}' not found on PATH"
        check(f"command: {name}", check_command)

    # --- Distribution ---
    def check_os_release():
        data = LocalFileReader().read_file(Path(OS_RELEASE_PATH))
        if data is None:
            return False, f"{OS_RELEASE_PATH} not found"
        distro = detect_distribution(data.decode("utf-8", errors="replace"))
        binding = resolve_package_manager(distro)
        return True, f"{distro} ({binding.name})"
    check("os-release", check_os_release)

    # --- Logos ---
    logo_dir = settings.logo_dir

    def check_logo_dir():
        return logo_dir.is_dir(), str(logo_dir)
    check("logo directory", check_logo_dir)

    def check_fallback_logo():
        fallback = paths.get_fallback_logo_path(logo_dir)
        return fallback.is_file(), str(fallback)
    check("fallback logo", check_fallback_logo)

    def check_logos():
        available = FileSystemLogoResolver(logo_dir).list_available()
        return bool(available), ", ".join(available) or "no distribution logos"
    check("distribution logos", check_logos)

    table = Table(title="sysfetch doctor")
    table.add_column("Check", style="cyan", no_wrap=True)
    table.add_column("Status")
    table.add_column("Detail")
    for description, passed, detail in results:
        status = "[green]PASSED[/green]" if passed else "[red]FAILED[/red]"
        table.add_row(description, status, detail)
    console.print(table)

    if all(passed for _, passed, _ in results):
        console.print("[bold green]All checks PASSED![/bold green]")
        return
    console.print("[bold red]Some checks FAILED. Please review the output above.[/bold red]")
    raise typer.Exit(1)
