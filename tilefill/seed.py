"""Seed loading: turn seed text into a sparse, partially filled grid."""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, TextIO, Tuple, Union

from .errors import ConfigurationError

LOGGER = logging.getLogger(__name__)

SeedSource = Union[str, os.PathLike, TextIO]

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass
class SeedGrid:
    """Sparse grid of fixed cells keyed by row then column."""

    cells: Dict[int, Dict[int, str]] = field(default_factory=dict)

    def get(self, row: int, col: int) -> Optional[str]:
        return self.cells.get(row, {}).get(col)

    def set(self, row: int, col: int, symbol: str) -> None:
        self.cells.setdefault(row, {})[col] = symbol

    @property
    def height(self) -> int:
        return max(self.cells, default=-1) + 1

    @property
    def width(self) -> int:
        return max((max(row) + 1 for row in self.cells.values() if row), default=0)

    def items(self) -> Iterator[Tuple[int, int, str]]:
        for row in sorted(self.cells):
            for col in sorted(self.cells[row]):
                yield row, col, self.cells[row][col]

    def __len__(self) -> int:
        return sum(len(row) for row in self.cells.values())


def _split_rows(text: str, line_separator: Optional[str]) -> List[str]:
    # //1.- Without an explicit separator accept \r\n, \n and \r alike, and nothing else.
    if line_separator is None:
        rows = _LINE_BREAK.split(text)
    elif not line_separator:
        raise ConfigurationError("line_separator must be a non-empty string")
    else:
        rows = text.split(line_separator)
    # //2.- A trailing separator terminates the final row rather than opening an empty one.
    if rows and rows[-1] == "":
        rows.pop()
    return rows


def parse_seed(text: str, line_separator: Optional[str] = None) -> SeedGrid:
    """Parse seed text so each line becomes a row and each character a cell."""

    grid = SeedGrid()
    for row_index, line in enumerate(_split_rows(text, line_separator)):
        # //1.- Register the row even when blank so later rows keep their index.
        grid.cells.setdefault(row_index, {})
        for col_index, symbol in enumerate(line):
            grid.set(row_index, col_index, symbol)
    return grid


def load_seed(
    source: SeedSource,
    *,
    encoding: str = "utf-8",
    line_separator: Optional[str] = None,
) -> SeedGrid:
    """Read a seed from a path or text stream; ``OSError`` propagates to the caller."""

    # //1.- Streams are read as-is; paths are opened without newline translation so separators survive.
    if hasattr(source, "read"):
        text = source.read()  # type: ignore[union-attr]
    else:
        with open(source, "r", encoding=encoding, newline="") as handle:
            text = handle.read()
    grid = parse_seed(text, line_separator=line_separator)
    LOGGER.debug("Loaded seed with %d fixed cell(s) across %d row(s)", len(grid), grid.height)
    return grid
