"""Neighbour-conditioned stochastic grid fill.

Cells are visited in row-major order. For every unset cell the alphabet's
weighting functions are evaluated against the west, north-west, north and
north-east neighbours, which row-major order guarantees are already
resolved. The raw weights are normalised, sorted ascending, accumulated and
a single uniform draw selects the first entry whose cumulative value reaches
it.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .alphabet import Alphabet, Neighborhood
from .errors import ConfigurationError
from .seed import SeedGrid

LOGGER = logging.getLogger(__name__)


def _positive_dimension(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value <= 0:
        raise ConfigurationError(f"Grid {name} must be a positive integer, got {value!r}")
    return int(value)


# //1.- Fully resolved grid handed to serialisation once sampling completes.
@dataclass(frozen=True)
class TileGrid:
    height: int
    width: int
    cells: Tuple[Tuple[str, ...], ...]

    def cell(self, row: int, col: int) -> str:
        return self.cells[row][col]

    def rows(self) -> List[str]:
        return ["".join(row) for row in self.cells]


# //2.- Transient per-cell distribution kept public so callers can inspect normalisation.
@dataclass(frozen=True)
class CellDistribution:
    symbols: Tuple[str, ...]
    raw_weights: Tuple[float, ...]
    total: float
    order: Tuple[int, ...]
    cumulative: Tuple[float, ...]

    @property
    def degenerate(self) -> bool:
        return not self.total > 0.0

    @property
    def probabilities(self) -> Tuple[float, ...]:
        """Normalised probabilities in alphabet order (raw weights when degenerate)."""

        if self.degenerate:
            return self.raw_weights
        return tuple(weight / self.total for weight in self.raw_weights)

    def select(self, draw: float) -> str:
        """Resolve a draw in ``[0, 1)`` to a symbol."""

        # //1.- Degenerate totals cannot be normalised; fall back to the first alphabet symbol.
        if self.degenerate:
            return self.symbols[0]
        # //2.- Pick the first sorted entry whose cumulative value reaches the draw.
        cumulative = np.asarray(self.cumulative)
        matches = np.flatnonzero(cumulative >= draw)
        if matches.size:
            return self.symbols[self.order[int(matches[0])]]
        # //3.- Rounding can leave the last cumulative value just below the draw.
        return self.symbols[self.order[-1]]


def build_distribution(symbols: Sequence[str], raw_weights: Sequence[float]) -> CellDistribution:
    """Normalise, sort ascending (stable) and accumulate raw weights."""

    weights = np.asarray(raw_weights, dtype=float)
    total = float(weights.sum())
    if not total > 0.0:
        # //1.- Leave degenerate weights untouched in alphabet order.
        order = tuple(range(len(weights)))
        return CellDistribution(
            symbols=tuple(symbols),
            raw_weights=tuple(float(w) for w in weights),
            total=total,
            order=order,
            cumulative=tuple(float(w) for w in weights),
        )
    normalized = weights / total
    # //2.- Stable sort keeps alphabet order as the tie-break between equal probabilities.
    order = np.argsort(normalized, kind="stable")
    cumulative = np.cumsum(normalized[order])
    return CellDistribution(
        symbols=tuple(symbols),
        raw_weights=tuple(float(w) for w in weights),
        total=total,
        order=tuple(int(index) for index in order),
        cumulative=tuple(float(value) for value in cumulative),
    )


class GridSampler:
    """Fill every unset cell of a ``height`` x ``width`` target from a seed."""

    def __init__(self, alphabet: Alphabet, rng: np.random.Generator) -> None:
        self._alphabet = alphabet
        self._rng = rng

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    def validate_seed(self, seed: SeedGrid) -> None:
        # //1.- Unknown seed symbols would feed undefined neighbours into the weighting functions.
        for row, col, symbol in seed.items():
            if symbol not in self._alphabet:
                raise ConfigurationError(
                    f"Seed cell ({row}, {col}) holds {symbol!r}, which is not in the alphabet {self._alphabet!r}"
                )

    @staticmethod
    def neighborhood(cells: Sequence[Sequence[Optional[str]]], row: int, col: int, width: int) -> Neighborhood:
        """Collect the causal neighbours of ``(row, col)``; out-of-bounds neighbours are ``None``."""

        def lookup(r: int, c: int) -> Optional[str]:
            if r < 0 or c < 0 or c >= width:
                return None
            return cells[r][c]

        return Neighborhood(
            west=lookup(row, col - 1),
            northwest=lookup(row - 1, col - 1),
            north=lookup(row - 1, col),
            northeast=lookup(row - 1, col + 1),
        )

    def distribution(self, neighborhood: Neighborhood) -> CellDistribution:
        raw = self._alphabet.raw_weights(neighborhood)
        return build_distribution(self._alphabet.symbols, raw)

    def fill(self, seed: SeedGrid, height: int, width: int) -> TileGrid:
        height = _positive_dimension("height", height)
        width = _positive_dimension("width", width)
        self.validate_seed(seed)

        # //1.- Seed cells inside the target are fixed; anything beyond the target is ignored.
        cells: List[List[Optional[str]]] = [
            [seed.get(row, col) for col in range(width)] for row in range(height)
        ]
        sampled = 0
        degenerate = 0
        # //2.- Row-major scan so west, north-west, north and north-east are always resolved.
        for row in range(height):
            for col in range(width):
                if cells[row][col] is not None:
                    continue
                distribution = self.distribution(self.neighborhood(cells, row, col, width))
                # //3.- Exactly one draw per unset cell keeps the random stream aligned with scan order.
                draw = float(self._rng.random())
                if distribution.degenerate:
                    degenerate += 1
                    LOGGER.debug("Degenerate weights at (%d, %d); using %r", row, col, distribution.symbols[0])
                cells[row][col] = distribution.select(draw)
                sampled += 1

        LOGGER.debug(
            "Sampled %d cell(s) of %dx%d grid (%d degenerate)", sampled, height, width, degenerate
        )
        return TileGrid(
            height=height,
            width=width,
            cells=tuple(tuple(row) for row in cells),  # type: ignore[arg-type]
        )
