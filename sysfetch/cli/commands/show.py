import typer

from sysfetch.cli import core


def show(settings: core.Settings):
    """
    Print the logo and host facts side by side.
    """
    for row in core.render(settings):
        typer.echo(row, color=settings.color)
