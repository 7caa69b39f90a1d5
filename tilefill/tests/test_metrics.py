"""Tests validating tile frequency summaries and export."""
from __future__ import annotations

import json

import pytest

from tilefill import (
    Alphabet,
    ConstantWeight,
    TileGrid,
    collect_tile_frequencies,
    export_tile_frequencies,
)


def _grid() -> TileGrid:
    return TileGrid(height=2, width=2, cells=(("a", "b"), ("a", "a")))


def test_collect_tile_frequencies_without_alphabet():
    summary = collect_tile_frequencies(_grid())
    assert [(entry.symbol, entry.count) for entry in summary.frequencies] == [("a", 3), ("b", 1)]
    assert summary.as_dict() == {"a": pytest.approx(0.75), "b": pytest.approx(0.25)}


# //1.- Unused alphabet symbols still appear, in alphabet order, with zero counts.
def test_collect_tile_frequencies_with_alphabet(tmp_path):
    alphabet = Alphabet({"c": ConstantWeight(1), "b": ConstantWeight(1), "a": ConstantWeight(1)})
    summary = collect_tile_frequencies(_grid(), alphabet)
    assert [entry.symbol for entry in summary.frequencies] == ["c", "b", "a"]
    assert summary.frequencies[0].count == 0

    output_path = tmp_path / "frequencies.json"
    export_tile_frequencies(summary, filepath=str(output_path))
    with output_path.open("r", encoding="utf-8") as handle:
        payload = json.load(handle)
    assert payload["height"] == 2
    assert payload["width"] == 2
    assert [item["symbol"] for item in payload["frequencies"]] == ["c", "b", "a"]
    assert sum(item["fraction"] for item in payload["frequencies"]) == pytest.approx(1.0)
