"""Render resolved grids back to newline-delimited text."""
from __future__ import annotations

import logging
import os
from typing import TextIO, Union

from .sampler import TileGrid

LOGGER = logging.getLogger(__name__)

DEFAULT_LINE_TERMINATOR = "\r\n"

Destination = Union[str, os.PathLike, TextIO]


def render_grid(grid: TileGrid, line_terminator: str = DEFAULT_LINE_TERMINATOR) -> str:
    # //1.- Every row, including the last, is followed by the terminator.
    return "".join(row + line_terminator for row in grid.rows())


def write_grid(
    grid: TileGrid,
    destination: Destination,
    *,
    line_terminator: str = DEFAULT_LINE_TERMINATOR,
    encoding: str = "utf-8",
) -> None:
    """Write the whole grid in one go; ``OSError`` propagates to the caller."""

    # //1.- Render fully before touching the destination so a failure never leaves half a grid behind.
    payload = render_grid(grid, line_terminator=line_terminator)
    if hasattr(destination, "write"):
        destination.write(payload)  # type: ignore[union-attr]
    else:
        # //2.- Disable newline translation so the terminator is written verbatim.
        with open(destination, "w", encoding=encoding, newline="") as handle:
            handle.write(payload)
    LOGGER.debug("Wrote %dx%d grid (%d characters)", grid.height, grid.width, len(payload))
