"""
Cat Breeder - Turn-Based Breeding Simulation
Mendelian cat genetics, a trait-driven market, and a room whose furniture
keeps the cats happy.

Every turn is a pure function of the previous state and a seeded random
stream, so a whole game can be replayed from its seed.
"""

__version__ = "1.0.0"

from .config import (
    GAME,
    MARKET,
    HABITAT,
    HAPPINESS,
    PRICING,
    GameConfig,
    MarketConfig,
    HabitatConfig,
    HappinessRules,
    PricingPolicy,
    FurnitureKind,
    TransactionKind,
)

from .core import (
    Cat,
    Genotype,
    Phenotype,
    TRAITS,
    create_seeded_random,
    breed,
    random_cat,
    TraitCollection,
)

from .game import (
    GameState,
    GameSession,
    TurnReport,
    create_initial_game_state,
    apply_action,
    process_turn,
)

from .persistence import (
    SaveStore,
    MemorySaveStore,
    FileSaveStore,
    save_game,
    load_game,
)

__all__ = [
    # Version info
    "__version__",

    # Config
    "GAME",
    "MARKET",
    "HABITAT",
    "HAPPINESS",
    "PRICING",
    "GameConfig",
    "MarketConfig",
    "HabitatConfig",
    "HappinessRules",
    "PricingPolicy",
    "FurnitureKind",
    "TransactionKind",

    # Core
    "Cat",
    "Genotype",
    "Phenotype",
    "TRAITS",
    "create_seeded_random",
    "breed",
    "random_cat",
    "TraitCollection",

    # Game
    "GameState",
    "GameSession",
    "TurnReport",
    "create_initial_game_state",
    "apply_action",
    "process_turn",

    # Persistence
    "SaveStore",
    "MemorySaveStore",
    "FileSaveStore",
    "save_game",
    "load_game",
]
