"""
Shared fixtures: cat and state builders, and a random source that counts draws.
"""

import pytest

from cat_breeder.core.genetics import TRAITS, Cat, Genotype
from cat_breeder.core.random_source import create_seeded_random
from cat_breeder.economy.market import MarketState
from cat_breeder.game.state import GameState
from cat_breeder.habitat.furniture import OwnedFurniture


class CountingRandom:
    """Wraps a random source and counts how many draws were taken."""

    def __init__(self, source):
        self.source = source
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.source()


def _genotype(dominant=True):
    pairs = {}
    for trait in TRAITS:
        allele = trait.dominant if dominant else trait.recessive
        pairs[trait.name] = (allele, allele)
    return Genotype(**pairs)


@pytest.fixture
def make_cat():
    """Factory for cats with all-dominant or all-recessive homozygous genotypes."""
    counter = {"n": 0}

    def _make(name=None, dominant=True, age=10, happiness=100, favourite=False,
              cat_id=None, genotype=None):
        counter["n"] += 1
        return Cat(
            id=cat_id or f"cat_test{counter['n']:02d}",
            name=name or f"Cat {counter['n']}",
            genotype=genotype or _genotype(dominant),
            age=age,
            happiness=happiness,
            favourite=favourite,
        )

    return _make


@pytest.fixture
def make_state():
    """Factory for a bare game state around the given cats."""

    def _make(cats=(), money=500, day=1, furniture=None, market_inventory=(), **kwargs):
        return GameState(
            day=day,
            money=money,
            cats=tuple(cats),
            market=MarketState(),
            market_inventory=tuple(market_inventory),
            furniture=furniture or OwnedFurniture(),
            **kwargs
        )

    return _make


@pytest.fixture
def counting_random():
    """Factory for draw-counting seeded sources."""

    def _make(seed=1):
        return CountingRandom(create_seeded_random(seed))

    return _make
