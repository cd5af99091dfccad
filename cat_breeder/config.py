"""
Cat Breeder - Configuration
Game constants, market parameters, habitat rules, and the shop catalogue.
"""

from dataclasses import dataclass
from typing import Dict, Tuple
from enum import Enum


class FurnitureKind(Enum):
    """Purchasable furniture item types."""
    TOY = "toy"
    BED = "bed"
    CAT_TREE = "cat_tree"


class TransactionKind(Enum):
    """Direction of money flow for a ledger entry."""
    BUY = "buy"
    SELL = "sell"


@dataclass(frozen=True)
class FurnitureItem:
    """A furniture item available in the shop."""
    kind: FurnitureKind
    name: str
    price: int
    capacity_bonus: int


@dataclass
class GameConfig:
    """New-game parameters and founder generation ranges."""

    starting_money: int = 500
    starting_day: int = 1
    starter_names: Tuple[str, ...] = ("Whiskers", "Mittens")

    # Founders (starter and market cats)
    founder_min_age: int = 30
    founder_max_age: int = 394    # ~1 year
    founder_min_happiness: int = 70
    founder_max_happiness: int = 100

    # Furniture sold back to the shop returns this fraction of its price
    furniture_resale_rate: float = 0.5


@dataclass
class MarketConfig:
    """Pricing and market inventory parameters."""

    base_price: int = 100
    buy_premium: float = 0.20
    inventory_size: int = 3

    # Kittens sell at a premium
    kitten_age_threshold: int = 4
    kitten_premium: float = 1.2

    # 3 sigma ~= +/-10% swing per trait
    fluctuation_std_dev: float = 0.1 / 3

    food_cost_per_cat: int = 1


@dataclass
class HabitatConfig:
    """Room capacity parameters."""
    base_capacity: int = 2


@dataclass
class HappinessRules:
    """Daily happiness changes based on where a cat spends the day."""

    base_decay: int = -5
    toy_bonus: int = 5
    bed_bonus: int = 8
    cat_tree_bonus: int = 5
    floor_penalty: int = -5
    alone_penalty: int = -5
    overcrowd_penalty_per_cat: int = -1    # applied to every cat

    min_happiness: int = 0
    max_happiness: int = 100


@dataclass
class PricingPolicy:
    """
    Where price fluctuation is applied.

    Sale proceeds and live market prices fluctuate by default; values shown
    for owned cats are stable unless explicitly enabled.
    """
    fluctuate_sale_prices: bool = True
    fluctuate_inventory_prices: bool = True
    fluctuate_display_values: bool = False


# Rarer recessive phenotypes are worth more
TRAIT_VALUES: Dict[str, Dict[str, float]] = {
    "size": {"small": 1.5, "large": 1.0},
    "tail_length": {"short": 1.3, "long": 1.0},
    "ear_shape": {"folded": 2.0, "pointed": 1.0},
    "fur_color": {"white": 1.4, "orange": 1.0},
}

SHOP_ITEMS: Dict[FurnitureKind, FurnitureItem] = {
    FurnitureKind.TOY: FurnitureItem(FurnitureKind.TOY, "Cat Toy", 50, 1),
    FurnitureKind.BED: FurnitureItem(FurnitureKind.BED, "Cat Bed", 100, 1),
    FurnitureKind.CAT_TREE: FurnitureItem(FurnitureKind.CAT_TREE, "Cat Tree", 200, 3),
}

CAT_NAMES: Tuple[str, ...] = (
    "Whiskers", "Mittens", "Shadow", "Luna", "Mochi",
    "Ginger", "Oreo", "Cleo", "Felix", "Simba",
    "Nala", "Oliver", "Bella", "Max", "Chloe",
    "Tiger", "Smokey", "Patches", "Pumpkin", "Snowball",
)


# Default configurations
GAME = GameConfig()
MARKET = MarketConfig()
HABITAT = HabitatConfig()
HAPPINESS = HappinessRules()
PRICING = PricingPolicy()
