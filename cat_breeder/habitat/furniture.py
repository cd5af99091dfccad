"""
Cat Breeder - Furniture
Owned furniture, room capacity, and the overall mood of the room.
"""

from dataclasses import dataclass, replace
from typing import Dict
from enum import Enum, auto

from ..config import HABITAT, SHOP_ITEMS, FurnitureKind, HabitatConfig


class RoomMood(Enum):
    """Summary of how the cats feel about their room."""
    HAPPY = auto()
    NEUTRAL = auto()
    STRESSED = auto()


@dataclass(frozen=True)
class OwnedFurniture:
    """Counts of each furniture item the player owns."""
    toys: int = 0
    beds: int = 0
    cat_trees: int = 0

    def count(self, kind: FurnitureKind) -> int:
        return getattr(self, _COUNTER_FIELDS[kind])


_COUNTER_FIELDS: Dict[FurnitureKind, str] = {
    FurnitureKind.TOY: "toys",
    FurnitureKind.BED: "beds",
    FurnitureKind.CAT_TREE: "cat_trees",
}


def adjust_furniture(furniture: OwnedFurniture, kind: FurnitureKind, delta: int) -> OwnedFurniture:
    """Copy with one counter changed by ``delta`` (never below zero)."""
    name = _COUNTER_FIELDS[kind]
    return replace(furniture, **{name: max(0, getattr(furniture, name) + delta)})


def capacity(furniture: OwnedFurniture, config: HabitatConfig = HABITAT) -> int:
    """Base capacity plus every item's capacity bonus. Purely additive."""
    return config.base_capacity + sum(
        furniture.count(kind) * item.capacity_bonus for kind, item in SHOP_ITEMS.items()
    )


def total_furniture(furniture: OwnedFurniture) -> int:
    return furniture.toys + furniture.beds + furniture.cat_trees


def happiness_status(cat_count: int, furniture: OwnedFurniture,
                     config: HabitatConfig = HABITAT) -> Dict:
    """Room mood for display: overcrowding first, then comfort."""
    if cat_count > capacity(furniture, config):
        return {
            "status": RoomMood.STRESSED,
            "description": "Your cats are stressed from overcrowding!",
        }
    if total_furniture(furniture) > 0 and cat_count >= 2:
        return {
            "status": RoomMood.HAPPY,
            "description": "Your cats are thriving!",
        }
    return {
        "status": RoomMood.NEUTRAL,
        "description": "Your cats are content.",
    }
