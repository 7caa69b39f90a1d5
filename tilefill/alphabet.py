"""Weighting functions and the ordered alphabet they are attached to.

Every symbol a grid may contain owns one weighting function. The function
receives the four causal neighbours of the cell being sampled (west,
north-west, north and north-east) and returns a raw, unnormalised weight.
Neighbours that fall outside the grid are passed as ``None``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import (
    Callable,
    Dict,
    Iterator,
    List,
    Mapping,
    NamedTuple,
    Optional,
    Protocol,
    Tuple,
    Union,
    runtime_checkable,
)

from .errors import ConfigurationError

DIRECTIONS: Tuple[str, ...] = ("west", "northwest", "north", "northeast")


class Neighborhood(NamedTuple):
    """Causal neighbours of a cell under row-major scan order."""

    west: Optional[str] = None
    northwest: Optional[str] = None
    north: Optional[str] = None
    northeast: Optional[str] = None


@runtime_checkable
class WeightingFunction(Protocol):
    """Anything that scores a symbol given its already resolved neighbours."""

    def weight(
        self,
        west: Optional[str],
        northwest: Optional[str],
        north: Optional[str],
        northeast: Optional[str],
    ) -> float:
        ...


# //1.- Fixed weight regardless of neighbourhood, mostly useful for tests and uniform themes.
@dataclass(frozen=True)
class ConstantWeight:
    value: float

    def weight(self, west, northwest, north, northeast) -> float:
        return float(self.value)


# //2.- Sum of per-direction increments applied when a neighbour equals a given symbol.
@dataclass(frozen=True)
class NeighborRule:
    """Additive neighbour table.

    ``contributions`` maps a direction name to a mapping of neighbour symbol
    to increment, e.g. ``{"north": {"`": 0.23}}`` adds ``0.23`` whenever the
    northern neighbour is snow.
    """

    contributions: Mapping[str, Mapping[str, float]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        unknown = sorted(set(self.contributions) - set(DIRECTIONS))
        if unknown:
            raise ConfigurationError(f"Unknown neighbour direction(s): {', '.join(unknown)}")

    def weight(self, west, northwest, north, northeast) -> float:
        total = 0.0
        for direction, neighbor in zip(DIRECTIONS, (west, northwest, north, northeast)):
            if neighbor is None:
                continue
            total += float(self.contributions.get(direction, {}).get(neighbor, 0.0))
        return total


# //3.- Adapter so plain functions can be supplied wherever a weighting object is expected.
@dataclass(frozen=True)
class CallableWeight:
    func: Callable[[Optional[str], Optional[str], Optional[str], Optional[str]], float]

    def weight(self, west, northwest, north, northeast) -> float:
        return float(self.func(west, northwest, north, northeast))


WeightingLike = Union[WeightingFunction, Callable[..., float]]


def as_weighting(candidate: WeightingLike) -> WeightingFunction:
    """Return ``candidate`` as an object exposing ``weight``."""

    if isinstance(candidate, WeightingFunction):
        return candidate
    if callable(candidate):
        return CallableWeight(candidate)
    raise ConfigurationError(f"Weighting for a symbol must be callable, got {type(candidate).__name__}")


class Alphabet:
    """Ordered mapping of symbol to weighting function.

    Iteration order is insertion order and is the tie-break order used when
    two symbols end up with the same probability.
    """

    def __init__(self, weights: Mapping[str, WeightingLike]) -> None:
        # //1.- Reject empty alphabets up front so sampling always has a candidate.
        if not weights:
            raise ConfigurationError("Alphabet must contain at least one symbol")
        self._weights: Dict[str, WeightingFunction] = {}
        for symbol, weighting in weights.items():
            # //2.- Seeds are parsed per character, so every symbol must be a single non-newline character.
            if not isinstance(symbol, str) or len(symbol) != 1:
                raise ConfigurationError(f"Alphabet symbols must be single characters, got {symbol!r}")
            if symbol in "\r\n":
                raise ConfigurationError("Line break characters cannot be alphabet symbols")
            self._weights[symbol] = as_weighting(weighting)
        self._symbols: Tuple[str, ...] = tuple(self._weights)

    @classmethod
    def coerce(cls, theme: Union["Alphabet", Mapping[str, WeightingLike]]) -> "Alphabet":
        if isinstance(theme, Alphabet):
            return theme
        return cls(theme)

    @property
    def symbols(self) -> Tuple[str, ...]:
        return self._symbols

    def raw_weights(self, neighborhood: Neighborhood) -> List[float]:
        """Evaluate every weighting function in alphabet order."""

        return [float(self._weights[symbol].weight(*neighborhood)) for symbol in self._symbols]

    def weighting_for(self, symbol: str) -> WeightingFunction:
        return self._weights[symbol]

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._weights

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __len__(self) -> int:
        return len(self._symbols)

    def __repr__(self) -> str:
        return f"Alphabet({''.join(self._symbols)!r})"
