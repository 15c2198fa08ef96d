"""ASCII rendering of a grid with a search result drawn on it."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, TextIO

from ..core.grid import Grid
from ..core.node import GridNode


WALL = "#"
OPEN = "."
PATH = "*"
START = "S"
END = "E"


def render_path(
    grid: Grid,
    path: Iterable[GridNode],
    start: Optional[GridNode] = None,
    end: Optional[GridNode] = None,
) -> str:
    """Return one line per outer row of ``grid`` with ``path`` marked.

    Endpoints take precedence over path marks.
    """

    on_path = {id(node) for node in path}
    lines: list[str] = []
    for row in grid.grid:
        glyphs: list[str] = []
        for node in row:
            if node is start:
                glyph = START
            elif node is end:
                glyph = END
            elif id(node) in on_path:
                glyph = PATH
            elif node.is_wall():
                glyph = WALL
            else:
                glyph = OPEN
            glyphs.append(glyph)
        lines.append("".join(glyphs))
    return "\n".join(lines)


def print_path(
    grid: Grid,
    path: Iterable[GridNode],
    start: Optional[GridNode] = None,
    end: Optional[GridNode] = None,
    stream: TextIO | None = None,
) -> None:
    """Write :func:`render_path` output to ``stream`` (``stdout`` by default)."""

    out = stream or sys.stdout
    out.write(render_path(grid, path, start, end) + "\n")
    out.flush()


__all__ = ["render_path", "print_path", "WALL", "OPEN", "PATH", "START", "END"]
