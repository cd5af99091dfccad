"""
Cat Breeder - Game Package
Game state, player actions, turn resolution, and the session wrapper.
"""

from .state import (
    BreedingPair,
    Transaction,
    GameState,
    create_initial_game_state,
)
from .actions import (
    AddBreedingPair,
    RemoveBreedingPair,
    ListForSale,
    UnlistFromSale,
    BuyCat,
    BuyFurniture,
    SellFurniture,
    ToggleFavourite,
    EndTurn,
    GameAction,
    apply_action,
)
from .turn import (
    SaleRecord,
    TurnReport,
    process_turn,
    available_for_breeding,
    available_for_sale,
)
from .session import GameSession

__all__ = [
    # State
    "BreedingPair",
    "Transaction",
    "GameState",
    "create_initial_game_state",

    # Actions
    "AddBreedingPair",
    "RemoveBreedingPair",
    "ListForSale",
    "UnlistFromSale",
    "BuyCat",
    "BuyFurniture",
    "SellFurniture",
    "ToggleFavourite",
    "EndTurn",
    "GameAction",
    "apply_action",

    # Turn
    "SaleRecord",
    "TurnReport",
    "process_turn",
    "available_for_breeding",
    "available_for_sale",

    # Session
    "GameSession",
]
