"""Configuration helpers for reproducible grid generation."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

import numpy as np

from .errors import ConfigurationError

DEFAULT_THEME = "polar"

LINE_ENDINGS = {"crlf": "\r\n", "lf": "\n", "cr": "\r"}


def make_rng(seed: Optional[int]) -> np.random.Generator:
    """
    Create a numpy Generator without polluting global RNG state.
    """
    if seed is None:
        return np.random.default_rng()
    # Accept wide Python int; fold into uint64 for numpy
    return np.random.default_rng(np.uint64(int(seed) & ((1 << 64) - 1)))


def _parse_int(name: str, raw: object) -> int:
    try:
        return int(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc


# Named endings keep CR and LF out of environment variables and command lines.
def _parse_line_ending(payload: Mapping[str, object]) -> Optional[str]:
    name = payload.get("line_ending")
    if name is None:
        raw = payload.get("line_terminator")
        return None if raw is None else str(raw)
    try:
        return LINE_ENDINGS[str(name).lower()]
    except KeyError as exc:
        known = ", ".join(sorted(LINE_ENDINGS))
        raise ConfigurationError(f"line_ending must be one of {known}, got {name!r}") from exc


def _environment_mapping(prefix: str, env: Optional[Mapping[str, str]]) -> Dict[str, Optional[str]]:
    source = env if env is not None else os.environ
    return {
        "height": source.get(f"{prefix}_HEIGHT"),
        "width": source.get(f"{prefix}_WIDTH"),
        "theme": source.get(f"{prefix}_THEME"),
        "rng_seed": source.get(f"{prefix}_RNG_SEED"),
        "line_ending": source.get(f"{prefix}_LINE_ENDING"),
    }


# //1.- Define dataclass to encapsulate the parameters of one generation run.
@dataclass(frozen=True)
class GenerationConfig:
    """Target dimensions, theme and random seed for a generation run."""

    height: int
    width: int
    theme: str = DEFAULT_THEME
    rng_seed: Optional[int] = None
    line_terminator: Optional[str] = None

    # //2.- Reject non-positive dimensions as soon as the configuration is built.
    def __post_init__(self) -> None:
        if self.height <= 0 or self.width <= 0:
            raise ConfigurationError(
                f"Grid dimensions must be positive, got {self.height}x{self.width}"
            )

    # //3.- Build configuration from a plain mapping such as a parsed JSON document.
    @classmethod
    def from_mapping(cls, payload: Mapping[str, object]) -> "GenerationConfig":
        missing = [key for key in ("height", "width") if payload.get(key) is None]
        if missing:
            raise ConfigurationError(f"Missing generation setting(s): {', '.join(missing)}")
        rng_seed = payload.get("rng_seed")
        return cls(
            height=_parse_int("height", payload["height"]),
            width=_parse_int("width", payload["width"]),
            theme=str(payload.get("theme") or DEFAULT_THEME),
            rng_seed=None if rng_seed is None else _parse_int("rng_seed", rng_seed),
            line_terminator=_parse_line_ending(payload),
        )

    # //4.- Allow overriding settings through environment variables for scripted runs.
    @classmethod
    def from_environment(
        cls,
        prefix: str = "TILEFILL",
        env: Optional[Mapping[str, str]] = None,
    ) -> "GenerationConfig":
        return cls.from_mapping(_environment_mapping(prefix, env))

    # //5.- Random source consumed once per unset cell during sampling.
    def create_generator(self) -> np.random.Generator:
        return make_rng(self.rng_seed)


# //6.- Canonical accessor used by the command line entry point; explicit values win over the environment.
def load_generation_config(
    mapping: Optional[Mapping[str, object]] = None,
    *,
    env_prefix: str = "TILEFILL",
    env: Optional[Mapping[str, str]] = None,
) -> GenerationConfig:
    merged: Dict[str, object] = dict(_environment_mapping(env_prefix, env))
    if mapping is not None:
        merged.update({key: value for key, value in mapping.items() if value is not None})
    return GenerationConfig.from_mapping(merged)
