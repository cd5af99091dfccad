"""
Cat Breeder - Habitat Package
Furniture, room capacity, cat positions, and daily happiness.
"""

from .furniture import (
    RoomMood,
    OwnedFurniture,
    adjust_furniture,
    capacity,
    total_furniture,
    happiness_status,
)
from .positions import (
    SpotType,
    Position,
    CatPosition,
    available_positions,
    assign_positions,
)
from .happiness import (
    happiness_delta,
    apply_daily_happiness,
)

__all__ = [
    # Furniture
    "RoomMood",
    "OwnedFurniture",
    "adjust_furniture",
    "capacity",
    "total_furniture",
    "happiness_status",

    # Positions
    "SpotType",
    "Position",
    "CatPosition",
    "available_positions",
    "assign_positions",

    # Happiness
    "happiness_delta",
    "apply_daily_happiness",
]
