"""Tests for weighting functions and alphabet validation."""
from __future__ import annotations

import pytest

from tilefill import (
    Alphabet,
    CallableWeight,
    ConfigurationError,
    ConstantWeight,
    Neighborhood,
    NeighborRule,
    WeightingFunction,
)


def test_alphabet_preserves_insertion_order():
    alphabet = Alphabet({"z": ConstantWeight(1), "a": ConstantWeight(2), "m": ConstantWeight(3)})
    assert alphabet.symbols == ("z", "a", "m")
    assert list(alphabet) == ["z", "a", "m"]
    assert "a" in alphabet and "q" not in alphabet
    assert alphabet.raw_weights(Neighborhood()) == [1.0, 2.0, 3.0]


@pytest.mark.parametrize("weights", [{}, {"ab": ConstantWeight(1)}, {"\n": ConstantWeight(1)}, {"a": 3}])
def test_invalid_alphabets_are_rejected(weights):
    with pytest.raises(ConfigurationError):
        Alphabet(weights)


# //1.- Plain callables are wrapped, weighting objects are used as-is.
def test_callables_are_adapted():
    rule = NeighborRule({"west": {"a": 0.5}})
    alphabet = Alphabet({"a": lambda w, nw, n, ne: 2.0 if n == "a" else 0.0, "b": rule})
    assert isinstance(alphabet.weighting_for("a"), CallableWeight)
    assert alphabet.weighting_for("b") is rule
    assert isinstance(rule, WeightingFunction)
    assert alphabet.raw_weights(Neighborhood(west="a", north="a")) == [2.0, 0.5]


def test_neighbor_rule_sums_matching_directions():
    rule = NeighborRule(
        {
            "west": {"x": 0.3},
            "northwest": {"x": 0.2, "y": 0.1},
            "north": {"x": 0.2},
            "northeast": {"y": 0.05},
        }
    )
    assert rule.weight("x", "y", "x", "y") == pytest.approx(0.3 + 0.1 + 0.2 + 0.05)
    assert rule.weight(None, None, None, None) == 0.0


def test_neighbor_rule_rejects_unknown_direction():
    with pytest.raises(ConfigurationError):
        NeighborRule({"south": {"x": 1.0}})


def test_alphabet_coerce_returns_existing_instance():
    alphabet = Alphabet({"a": ConstantWeight(1)})
    assert Alphabet.coerce(alphabet) is alphabet
    assert Alphabet.coerce({"b": ConstantWeight(1)}).symbols == ("b",)
