"""Tests for seed parsing and loading."""
from __future__ import annotations

import io

import pytest

from tilefill import ConfigurationError, load_seed, parse_seed


@pytest.mark.parametrize("text", ["ab\r\ncd\r\n", "ab\ncd\n", "ab\rcd", "ab\ncd"])
def test_parse_seed_splits_rows_on_any_line_break(text):
    grid = parse_seed(text)
    assert grid.height == 2
    assert grid.width == 2
    assert [grid.get(0, 0), grid.get(0, 1), grid.get(1, 0), grid.get(1, 1)] == ["a", "b", "c", "d"]


def test_parse_seed_keeps_blank_and_ragged_rows():
    grid = parse_seed("abc\n\nd")
    # //1.- The blank row still occupies index 1 so later rows keep their position.
    assert grid.height == 3
    assert grid.width == 3
    assert grid.get(1, 0) is None
    assert grid.get(2, 0) == "d"
    assert grid.get(2, 1) is None
    assert len(grid) == 4


def test_parse_seed_with_explicit_separator():
    grid = parse_seed("ab|c|", line_separator="|")
    assert grid.height == 2
    assert list(grid.items()) == [(0, 0, "a"), (0, 1, "b"), (1, 0, "c")]


# Form feeds and other Unicode line boundaries are cell content, not row breaks.
@pytest.mark.parametrize("symbol", ["\x0c", "\x0b", "\x1c", "\x85", "\u2028"])
def test_parse_seed_only_breaks_rows_on_cr_and_lf(symbol):
    grid = parse_seed(f"a{symbol}a\nbb")
    assert grid.height == 2
    assert grid.width == 3
    assert [grid.get(0, 0), grid.get(0, 1), grid.get(0, 2)] == ["a", symbol, "a"]
    assert grid.get(1, 1) == "b"


def test_empty_separator_is_rejected():
    with pytest.raises(ConfigurationError):
        parse_seed("ab", line_separator="")


def test_empty_seed_has_no_cells():
    grid = parse_seed("")
    assert grid.height == 0
    assert grid.width == 0
    assert len(grid) == 0


# //2.- Files are read without newline translation so CRLF separators reach the parser intact.
def test_load_seed_from_path_with_crlf(tmp_path):
    path = tmp_path / "seed.txt"
    path.write_bytes(b"`.\r\n,,\r\n")
    grid = load_seed(str(path), line_separator="\r\n")
    assert grid.height == 2
    assert grid.get(0, 0) == "`"
    assert grid.get(1, 1) == ","
    assert grid.get(0, 2) is None


def test_load_seed_from_stream():
    grid = load_seed(io.StringIO("xy\nz"))
    assert list(grid.items()) == [(0, 0, "x"), (0, 1, "y"), (1, 0, "z")]


def test_load_seed_propagates_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_seed(tmp_path / "missing.txt")
