"""Tests for grid serialisation."""
from __future__ import annotations

import io

import pytest

from tilefill import TileGrid, render_grid, write_grid


def _grid() -> TileGrid:
    return TileGrid(height=2, width=3, cells=(("a", "b", "c"), ("d", "e", "f")))


def test_render_grid_terminates_every_row():
    assert render_grid(_grid()) == "abc\r\ndef\r\n"
    assert render_grid(_grid(), line_terminator="\n") == "abc\ndef\n"


# //1.- Terminators are written verbatim regardless of the platform newline.
def test_write_grid_to_path_preserves_terminator(tmp_path):
    path = tmp_path / "out.txt"
    write_grid(_grid(), str(path))
    assert path.read_bytes() == b"abc\r\ndef\r\n"


def test_write_grid_to_stream():
    buffer = io.StringIO()
    write_grid(_grid(), buffer, line_terminator="\n")
    assert buffer.getvalue() == "abc\ndef\n"


def test_write_grid_propagates_write_failure(tmp_path):
    with pytest.raises(OSError):
        write_grid(_grid(), tmp_path)
