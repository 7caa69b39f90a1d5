"""Loader for the bundled theme presets.

Themes are plain JSON documents so new tilesets can be authored without
touching the sampler. Each document lists its tiles in alphabet order and
gives, per tile, the increment added for every neighbour direction and
neighbour symbol.
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Dict, List, Mapping, Tuple

from .alphabet import DIRECTIONS, Alphabet, NeighborRule
from .errors import ConfigurationError

LOGGER = logging.getLogger(__name__)


# //1.- Capture the metadata of one tile alongside its weighting rule.
@dataclass(frozen=True)
class TileSpec:
    symbol: str
    label: str
    rule: NeighborRule


# //2.- Aggregate a named theme so callers can inspect labels before sampling.
@dataclass(frozen=True)
class ThemeSpec:
    name: str
    description: str
    tiles: Tuple[TileSpec, ...]

    def to_alphabet(self) -> Alphabet:
        return Alphabet({tile.symbol: tile.rule for tile in self.tiles})

    def labels(self) -> Dict[str, str]:
        return {tile.symbol: tile.label for tile in self.tiles}


# //3.- Resolve the bundled preset directory lazily.
def _default_preset_directory() -> str:
    return os.path.join(os.path.dirname(__file__), "presets")


# //4.- Load a single JSON document and coerce to dictionary.
def _read_json_theme(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as handle:
        try:
            payload = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"Theme file {path} is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise ConfigurationError(f"Theme file {path} must contain a JSON object")
    return payload


# //5.- Convert the direction tables into floats while rejecting unknown directions.
def _parse_contributions(symbol: str, raw: object) -> Dict[str, Dict[str, float]]:
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"Tile {symbol!r} contributions must be an object")
    contributions: Dict[str, Dict[str, float]] = {}
    for direction, table in raw.items():
        if direction not in DIRECTIONS:
            raise ConfigurationError(f"Tile {symbol!r} uses unknown direction {direction!r}")
        if not isinstance(table, Mapping):
            raise ConfigurationError(f"Tile {symbol!r} direction {direction!r} must map symbols to weights")
        try:
            contributions[direction] = {str(neighbor): float(value) for neighbor, value in table.items()}
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"Tile {symbol!r} direction {direction!r} has a non-numeric weight") from exc
    return contributions


def parse_theme(payload: Mapping[str, object], *, default_name: str = "custom") -> ThemeSpec:
    """Build a :class:`ThemeSpec` from a decoded JSON document."""

    raw_tiles = payload.get("tiles")
    if not isinstance(raw_tiles, list) or not raw_tiles:
        raise ConfigurationError("Theme must define a non-empty 'tiles' list")
    tiles: List[TileSpec] = []
    seen = set()
    for entry in raw_tiles:
        if not isinstance(entry, Mapping) or "symbol" not in entry:
            raise ConfigurationError("Every theme tile needs a 'symbol'")
        symbol = str(entry["symbol"])
        if symbol in seen:
            raise ConfigurationError(f"Theme lists symbol {symbol!r} more than once")
        seen.add(symbol)
        rule = NeighborRule(_parse_contributions(symbol, entry.get("contributions", {})))
        tiles.append(TileSpec(symbol=symbol, label=str(entry.get("label", symbol)), rule=rule))
    spec = ThemeSpec(
        name=str(payload.get("name", default_name)),
        description=str(payload.get("description", "")),
        tiles=tuple(tiles),
    )
    # //1.- Building the alphabet once validates symbols before the theme is handed out.
    spec.to_alphabet()
    return spec


def available_themes(preset_dir: str | None = None) -> List[str]:
    directory = preset_dir or _default_preset_directory()
    return sorted(
        os.path.splitext(entry)[0] for entry in os.listdir(directory) if entry.endswith(".json")
    )


def load_theme_spec(name_or_path: str, *, preset_dir: str | None = None) -> ThemeSpec:
    """Load a bundled preset by name, or any theme JSON file by path."""

    # //1.- Treat anything that exists on disk as a path, otherwise look the name up among presets.
    if os.path.isfile(name_or_path):
        path = name_or_path
    else:
        directory = preset_dir or _default_preset_directory()
        path = os.path.join(directory, f"{name_or_path}.json")
        if not os.path.isfile(path):
            known = ", ".join(available_themes(directory))
            raise ConfigurationError(f"Unknown theme {name_or_path!r}; available themes: {known}")
    default_name = os.path.splitext(os.path.basename(path))[0]
    spec = parse_theme(_read_json_theme(path), default_name=default_name)
    LOGGER.debug("Loaded theme %s with symbols %s", spec.name, "".join(t.symbol for t in spec.tiles))
    return spec


def load_theme(name_or_path: str, *, preset_dir: str | None = None) -> Alphabet:
    return load_theme_spec(name_or_path, preset_dir=preset_dir).to_alphabet()
