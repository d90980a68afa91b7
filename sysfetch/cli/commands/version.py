import importlib.metadata

import typer

from sysfetch.internal.constants import APP_NAME
from sysfetch.internal.logging import get_logger

logger = get_logger(__name__)


def version():
    """
    Show the sysfetch version.
    """
    try:
        # Only available once the package is installed
        package_version = importlib.metadata.version(APP_NAME)
        typer.echo(f"{APP_NAME} version: {package_version}")
    except importlib.metadata.PackageNotFoundError:
        typer.echo(f"{APP_NAME} is not installed or version metadata not found.")
        typer.echo("Please install the package first (e.g., pip install . or pip install -e .)")
        logger.warning("sysfetch package version not found.")
        raise typer.Exit(1)


if __name__ == "__main__":
    typer.run(version)
