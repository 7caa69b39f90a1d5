"""High-level generation run: load a seed, fill the grid, write it out."""
from __future__ import annotations

import logging
from typing import Mapping, Optional, Union

import numpy as np

from .alphabet import Alphabet, WeightingLike
from .config import make_rng
from .errors import ConfigurationError
from .sampler import GridSampler, TileGrid
from .seed import SeedGrid, SeedSource, load_seed
from .serializer import DEFAULT_LINE_TERMINATOR, Destination, write_grid

LOGGER = logging.getLogger(__name__)

Theme = Union[Alphabet, Mapping[str, WeightingLike]]


# //1.- Pick the caller's generator when supplied, otherwise derive one from the optional seed.
def _resolve_rng(rng: Optional[np.random.Generator], rng_seed: Optional[int]) -> np.random.Generator:
    if rng is not None and rng_seed is not None:
        raise ConfigurationError("Pass either rng or rng_seed, not both")
    if rng is not None:
        return rng
    return make_rng(rng_seed)


def generate_grid(
    seed: SeedGrid,
    theme: Theme,
    height: int,
    width: int,
    *,
    rng: Optional[np.random.Generator] = None,
    rng_seed: Optional[int] = None,
) -> TileGrid:
    """Fill a ``height`` x ``width`` grid from an already parsed seed."""

    alphabet = Alphabet.coerce(theme)
    sampler = GridSampler(alphabet, _resolve_rng(rng, rng_seed))
    return sampler.fill(seed, height, width)


def generate_from_seed(
    seed_path: SeedSource,
    destination_path: Destination,
    theme: Theme,
    height: int,
    width: int,
    *,
    rng: Optional[np.random.Generator] = None,
    rng_seed: Optional[int] = None,
    line_separator: Optional[str] = None,
    line_terminator: Optional[str] = None,
) -> TileGrid:
    """Generate a terrain grid from a seed file and write it to ``destination_path``.

    Read failures surface before any sampling happens. Write failures surface
    after the grid has been generated, and the grid is lost with them.
    Without an explicit ``line_terminator`` the output reuses ``line_separator``
    so it follows the seed's convention, falling back to CRLF.
    """

    # //1.- Validate the theme before touching the filesystem.
    alphabet = Alphabet.coerce(theme)
    LOGGER.info(
        "Generating %sx%s grid from seed %s with alphabet %s",
        height,
        width,
        seed_path,
        "".join(alphabet.symbols),
    )
    # //2.- Read the seed fully before sampling starts.
    seed = load_seed(seed_path, line_separator=line_separator)
    # //3.- Fill the grid in scan order with the shared random stream.
    grid = generate_grid(seed, alphabet, height, width, rng=rng, rng_seed=rng_seed)
    # //4.- Serialise only once every cell is resolved.
    terminator = line_terminator or line_separator or DEFAULT_LINE_TERMINATOR
    write_grid(grid, destination_path, line_terminator=terminator)
    LOGGER.info("Wrote %dx%d grid to %s", grid.height, grid.width, destination_path)
    return grid
