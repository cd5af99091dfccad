"""
Cat Breeder - Room Positions
Assigns each cat a spot in the room. Cats prefer furniture, then the fixed
room elements, then bare floor. Coordinates are percentages of room size.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
from enum import Enum, auto

from .furniture import OwnedFurniture
from ..core.random_source import RandomFn, resolve


class SpotType(Enum):
    """What a cat is sitting on."""
    TOY = auto()
    BED = auto()
    CAT_TREE = auto()
    ROOM_ELEMENT = auto()
    FLOOR = auto()


FURNITURE_SPOTS = (SpotType.TOY, SpotType.BED, SpotType.CAT_TREE)


@dataclass(frozen=True)
class Position:
    x: float
    y: float
    spot_type: SpotType


@dataclass(frozen=True)
class CatPosition:
    """Where a cat spends the day."""
    cat_id: str
    spot_type: SpotType
    x: float
    y: float


def _spots(spot_type: SpotType, coordinates: Sequence[Tuple[float, float]]) -> Tuple[Position, ...]:
    return tuple(Position(x, y, spot_type) for x, y in coordinates)


TOY_POSITIONS = _spots(SpotType.TOY, [
    (25, 80), (75, 80), (50, 70), (15, 75), (85, 75),
])

BED_POSITIONS = _spots(SpotType.BED, [
    (35, 82), (65, 82), (20, 90), (80, 90), (50, 88),
])

CAT_TREE_POSITIONS = _spots(SpotType.CAT_TREE, [
    (10, 55), (90, 55), (30, 50),
])

# Always present: fireplace rug, built-in beds, bookshelf, plant
ROOM_ELEMENT_POSITIONS = _spots(SpotType.ROOM_ELEMENT, [
    (50, 75), (40, 78), (60, 78), (45, 72), (55, 72),
    (18, 82), (82, 82),
    (70, 65),
    (25, 70),
])

FLOOR_POSITIONS = _spots(SpotType.FLOOR, [
    (35, 85), (65, 85), (30, 90), (70, 90), (50, 92), (15, 75),
])

# Half-widths of the cosmetic jitter, in percent
JITTER_X = 1.5
JITTER_Y = 1.0


def available_positions(furniture: OwnedFurniture) -> List[Position]:
    """Spots in order of preference for the furniture owned."""
    positions: List[Position] = []
    positions.extend(TOY_POSITIONS[:furniture.toys])
    positions.extend(BED_POSITIONS[:furniture.beds])
    positions.extend(CAT_TREE_POSITIONS[:furniture.cat_trees])
    positions.extend(ROOM_ELEMENT_POSITIONS)
    positions.extend(FLOOR_POSITIONS)
    return positions


def assign_positions(cat_ids: Sequence[str], furniture: OwnedFurniture,
                     random: Optional[RandomFn] = None) -> List[CatPosition]:
    """
    Place cats in preference order, cycling when cats outnumber spots.

    Every cat consumes two draws (x then y) for its jitter so the random
    stream advances identically regardless of where cats land.
    """
    rng = resolve(random)
    positions = available_positions(furniture)

    placed = []
    for index, cat_id in enumerate(cat_ids):
        spot = positions[index % len(positions)]
        dx = (rng() - 0.5) * 2 * JITTER_X
        dy = (rng() - 0.5) * 2 * JITTER_Y
        placed.append(CatPosition(cat_id, spot.spot_type, spot.x + dx, spot.y + dy))
    return placed
