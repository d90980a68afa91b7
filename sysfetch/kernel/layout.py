from typing import Optional, Sequence

import typer

from sysfetch.internal.constants import ART_COLUMN_WIDTH


def compose(
    art_lines: Sequence[str],
    info_lines: Sequence[str],
    width: int = ART_COLUMN_WIDTH,
    art_color: Optional[str] = None,
) -> list[str]:
    """
    Merge the logo column and the info column into rows.

    Produces max(len(art_lines), len(info_lines)) rows. Art cells are padded
    to `width` but never cut; the shorter column is filled with blanks.
    Coloring is applied after padding so escape codes don't eat into the width.
    """
    rows = []
    for i in range(max(len(art_lines), len(info_lines))):
        art = art_lines[i].ljust(width) if i < len(art_lines) else " " * width
        if art_color and i < len(art_lines):
            art = typer.style(art, fg=art_color, bold=True)
        info = info_lines[i] if i < len(info_lines) else ""
        rows.append(f"{art} {info}")
    return rows
