"""
Cat Breeder - Game Session
Owns the authoritative GameState for one player and serializes access to it.

Each turn draws from its own generator seeded with ``seed + day``, so any
turn can be replayed from the saved seed and the state before it.
"""

from typing import Callable, Dict, List, Optional
import logging
import random as _system_random

from .actions import GameAction, apply_action
from .state import GameState, create_initial_game_state
from .turn import TurnReport, process_turn
from ..config import PRICING, PricingPolicy
from ..core.random_source import RandomFn, create_seeded_random
from ..persistence.save import SaveStore, load_game, save_game

logger = logging.getLogger(__name__)

MAX_SEED = 2147483647


def generate_seed() -> int:
    """Fresh seed for a new game."""
    return _system_random.randrange(MAX_SEED)


class GameSession:
    """
    A running game: state, seed, and the last turn's report.

    Manages:
    - Applying player actions
    - Turn resolution with a per-turn seeded stream
    - Saving and restoring
    """

    def __init__(self, state: GameState, seed: int, policy: PricingPolicy = PRICING):
        self.state = state
        self.seed = seed
        self.policy = policy
        self.last_report: Optional[TurnReport] = None
        self.history: List[TurnReport] = []

        # Callbacks
        self.on_turn_complete: Optional[Callable[[TurnReport], None]] = None

    @classmethod
    def new_game(cls, seed: Optional[int] = None, policy: PricingPolicy = PRICING) -> "GameSession":
        """Start a new game. The starting state is derived from the seed too."""
        if seed is None:
            seed = generate_seed()
        state = create_initial_game_state(create_seeded_random(seed), policy=policy)
        logger.info(f"Starting new game with seed {seed}")
        return cls(state, seed, policy)

    @classmethod
    def load_or_new(cls, store: SaveStore, policy: PricingPolicy = PRICING) -> "GameSession":
        """Resume the saved game, or start fresh if none can be loaded."""
        loaded = load_game(store)
        if loaded is None:
            return cls.new_game(policy=policy)
        return cls(loaded.state, loaded.seed, policy)

    def turn_random(self) -> RandomFn:
        """Random stream for the current day's turn."""
        return create_seeded_random(self.seed + self.state.day)

    def dispatch(self, action: GameAction) -> bool:
        """Apply an action. Returns True if the state changed."""
        new_state = apply_action(self.state, action)
        changed = new_state is not self.state
        self.state = new_state
        return changed

    def end_turn(self) -> TurnReport:
        """Resolve the current turn."""
        self.state, report = process_turn(self.state, self.turn_random(), self.policy)
        self.last_report = report
        self.history.append(report)

        if self.on_turn_complete:
            self.on_turn_complete(report)

        return report

    def run(self, turns: int) -> List[TurnReport]:
        """Resolve several turns with no player actions in between."""
        return [self.end_turn() for _ in range(turns)]

    def save(self, store: SaveStore) -> bool:
        return save_game(self.state, self.seed, store)

    def status(self) -> Dict:
        """Current game summary."""
        return {
            "day": self.state.day,
            "money": self.state.money,
            "cats": len(self.state.cats),
            "pending_pairs": len(self.state.breeding_pairs),
            "pending_sales": len(self.state.cats_for_sale),
            "traits_collected": len(self.state.trait_collection),
            "total_cats_bred": self.state.total_cats_bred,
            "total_cats_sold": self.state.total_cats_sold,
            "seed": self.seed,
        }
