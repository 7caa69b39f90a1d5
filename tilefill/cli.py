"""Command line interface for generating a terrain grid from a seed file."""
from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from .config import DEFAULT_THEME, LINE_ENDINGS, load_generation_config
from .errors import ConfigurationError
from .generator import generate_from_seed
from .themes import load_theme

LOGGER = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    # //1.- Construct the parser shared across tests and runtime execution.
    parser = argparse.ArgumentParser(
        description="Fill a seed grid with neighbour-conditioned terrain tiles",
        epilog="Unset options fall back to TILEFILL_HEIGHT, TILEFILL_WIDTH, TILEFILL_THEME, "
        "TILEFILL_RNG_SEED and TILEFILL_LINE_ENDING.",
    )
    parser.add_argument("seed", help="Path to the seed text file")
    parser.add_argument("destination", help="Path the generated grid is written to")
    parser.add_argument("--theme", default=None, help=f"Preset name or path to a theme JSON file (default: {DEFAULT_THEME})")
    parser.add_argument("--height", type=int, default=None, help="Number of rows to generate")
    parser.add_argument("--width", type=int, default=None, help="Number of characters per row")
    parser.add_argument("--rng-seed", type=int, default=None, help="Seed for a reproducible random stream")
    parser.add_argument(
        "--line-ending",
        choices=sorted(LINE_ENDINGS),
        default=None,
        help="Terminator written after every output row (default: crlf)",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    return parser


def _execute(parsed: argparse.Namespace) -> int:
    # //2.- Merge flags over the environment, then run one generation pass mapping failures to exit codes.
    try:
        config = load_generation_config(
            {
                "height": parsed.height,
                "width": parsed.width,
                "theme": parsed.theme,
                "rng_seed": parsed.rng_seed,
                "line_ending": parsed.line_ending,
            }
        )
        alphabet = load_theme(config.theme)
        generate_from_seed(
            parsed.seed,
            parsed.destination,
            alphabet,
            config.height,
            config.width,
            rng=config.create_generator(),
            line_terminator=config.line_terminator,
        )
    except ConfigurationError as exc:
        LOGGER.error("Invalid configuration: %s", exc)
        return 2
    except OSError as exc:
        LOGGER.error("I/O failure: %s", exc)
        return 1
    return 0


def run(args: Optional[Sequence[str]] = None) -> int:
    # //3.- Parse arguments without touching logging so tests can capture records themselves.
    return _execute(create_parser().parse_args(args))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Console script entry point."""

    parsed = create_parser().parse_args(argv)
    # //4.- Enable a default logging configuration suitable for stdout capture.
    logging.basicConfig(
        level=getattr(logging, str(parsed.log_level).upper(), logging.INFO),
        format="[%(asctime)s] %(levelname)s %(message)s",
    )
    return _execute(parsed)


if __name__ == "__main__":  # pragma: no cover - exercised via ``python -m tilefill.cli``
    raise SystemExit(main())
