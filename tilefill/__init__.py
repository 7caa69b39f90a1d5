"""Neighbour-conditioned terrain tile generator.

A seed text file is parsed into a partially filled grid, every unset cell is
sampled in row-major order from weights computed on its already resolved
neighbours, and the finished grid is written back out as text. Themes are
data: see :mod:`tilefill.themes` for the bundled presets.
"""

from .errors import ConfigurationError, TileFillError
from .alphabet import (
    Alphabet,
    CallableWeight,
    ConstantWeight,
    Neighborhood,
    NeighborRule,
    WeightingFunction,
)
from .seed import SeedGrid, load_seed, parse_seed
from .sampler import CellDistribution, GridSampler, TileGrid, build_distribution
from .serializer import DEFAULT_LINE_TERMINATOR, render_grid, write_grid
from .config import LINE_ENDINGS, GenerationConfig, load_generation_config, make_rng
from .generator import generate_from_seed, generate_grid
from .themes import ThemeSpec, TileSpec, available_themes, load_theme, load_theme_spec
from .metrics import TileFrequencies, TileFrequency, collect_tile_frequencies, export_tile_frequencies

__all__ = [
    "ConfigurationError",
    "TileFillError",
    "Alphabet",
    "CallableWeight",
    "ConstantWeight",
    "Neighborhood",
    "NeighborRule",
    "WeightingFunction",
    "SeedGrid",
    "load_seed",
    "parse_seed",
    "CellDistribution",
    "GridSampler",
    "TileGrid",
    "build_distribution",
    "DEFAULT_LINE_TERMINATOR",
    "render_grid",
    "write_grid",
    "GenerationConfig",
    "LINE_ENDINGS",
    "load_generation_config",
    "make_rng",
    "generate_from_seed",
    "generate_grid",
    "ThemeSpec",
    "TileSpec",
    "available_themes",
    "load_theme",
    "load_theme_spec",
    "TileFrequencies",
    "TileFrequency",
    "collect_tile_frequencies",
    "export_tile_frequencies",
]
