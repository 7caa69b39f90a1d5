"""Tile frequency summaries for inspecting what a theme produces."""
from __future__ import annotations

import json
from collections import Counter
from dataclasses import dataclass
from typing import Dict, Optional, Sequence

from .alphabet import Alphabet
from .sampler import TileGrid


# //1.- Per-symbol share of a generated grid.
@dataclass(frozen=True)
class TileFrequency:
    symbol: str
    count: int
    fraction: float


# //2.- Summary of an entire grid, listed in alphabet order when an alphabet is known.
@dataclass(frozen=True)
class TileFrequencies:
    height: int
    width: int
    frequencies: Sequence[TileFrequency]

    def as_dict(self) -> Dict[str, float]:
        return {entry.symbol: entry.fraction for entry in self.frequencies}


def collect_tile_frequencies(grid: TileGrid, alphabet: Optional[Alphabet] = None) -> TileFrequencies:
    counts = Counter(symbol for row in grid.cells for symbol in row)
    total = grid.height * grid.width
    # //1.- Include zero-count symbols when the alphabet is supplied so summaries line up across runs.
    if alphabet is not None:
        symbols = list(alphabet.symbols)
    else:
        symbols = sorted(counts)
    frequencies = tuple(
        TileFrequency(symbol=symbol, count=counts.get(symbol, 0), fraction=counts.get(symbol, 0) / total)
        for symbol in symbols
    )
    return TileFrequencies(height=grid.height, width=grid.width, frequencies=frequencies)


# //3.- Export the summary to JSON for comparing themes side by side.
def export_tile_frequencies(summary: TileFrequencies, *, filepath: str) -> None:
    payload = {
        "height": summary.height,
        "width": summary.width,
        "frequencies": [
            {"symbol": entry.symbol, "count": entry.count, "fraction": entry.fraction}
            for entry in summary.frequencies
        ],
    }
    with open(filepath, "w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2)
