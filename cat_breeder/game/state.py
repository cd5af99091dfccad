"""
Cat Breeder - Game State
The aggregate root. Every transition produces a new GameState; only the
fields a transition touches are replaced, the rest are shared.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple
import logging

from ..config import GAME, MARKET, TransactionKind, GameConfig, MarketConfig, PRICING, PricingPolicy
from ..core.collection import TraitCollection
from ..core.genetics import Cat, random_cat
from ..core.random_source import RandomFn, resolve
from ..economy.market import MarketListing, MarketState, create_market_state, generate_inventory
from ..habitat.furniture import OwnedFurniture

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BreedingPair:
    """Two cats queued to breed at the next turn boundary."""
    parent_a_id: str
    parent_b_id: str

    def ids(self) -> Tuple[str, str]:
        return (self.parent_a_id, self.parent_b_id)


@dataclass(frozen=True)
class Transaction:
    """Ledger entry. ``subject_id`` is a cat id or a synthetic furniture id."""
    kind: TransactionKind
    subject_id: str
    amount: int
    day: int


@dataclass(frozen=True)
class GameState:
    """Complete state of one game."""
    day: int
    money: int
    cats: Tuple[Cat, ...]
    market: MarketState
    market_inventory: Tuple[MarketListing, ...]
    furniture: OwnedFurniture = field(default_factory=OwnedFurniture)
    trait_collection: TraitCollection = field(default_factory=TraitCollection)

    # Pending actions for the next turn
    breeding_pairs: Tuple[BreedingPair, ...] = ()
    cats_for_sale: Tuple[str, ...] = ()

    transactions: Tuple[Transaction, ...] = ()

    total_cats_bred: int = 0
    total_cats_sold: int = 0

    def find_cat(self, cat_id: str) -> Optional[Cat]:
        for cat in self.cats:
            if cat.id == cat_id:
                return cat
        return None

    def has_cat(self, cat_id: str) -> bool:
        return self.find_cat(cat_id) is not None

    def is_paired(self, cat_id: str) -> bool:
        return any(cat_id in pair.ids() for pair in self.breeding_pairs)


def create_initial_game_state(random: Optional[RandomFn] = None,
                              config: GameConfig = GAME,
                              market_config: MarketConfig = MARKET,
                              policy: PricingPolicy = PRICING) -> GameState:
    """New game: starter cats, starting money, and a fresh market."""
    rng = resolve(random)
    starters = tuple(random_cat(name, rng, config=config) for name in config.starter_names)
    market = create_market_state(market_config)

    state = GameState(
        day=config.starting_day,
        money=config.starting_money,
        cats=starters,
        market=market,
        market_inventory=generate_inventory(market, rng, policy, market_config),
    )
    logger.info(f"New game: {len(starters)} starter cats, ${state.money}")
    return state
