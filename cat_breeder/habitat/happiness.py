"""
Cat Breeder - Happiness
Daily happiness change per cat, from its spot and how crowded the room is.

Additive per-spot formula: base decay, plus the bonus or penalty of the cat's
spot, plus an alone penalty for a single cat, plus one point per cat over
capacity applied to everyone.
"""

from dataclasses import replace
from typing import Dict, List, Optional, Sequence, Tuple
import logging

from .furniture import OwnedFurniture, capacity
from .positions import CatPosition, SpotType, assign_positions
from ..config import HABITAT, HAPPINESS, HabitatConfig, HappinessRules
from ..core.genetics import Cat
from ..core.random_source import RandomFn

logger = logging.getLogger(__name__)


def spot_modifier(spot_type: SpotType, rules: HappinessRules = HAPPINESS) -> int:
    modifiers: Dict[SpotType, int] = {
        SpotType.TOY: rules.toy_bonus,
        SpotType.BED: rules.bed_bonus,
        SpotType.CAT_TREE: rules.cat_tree_bonus,
        SpotType.ROOM_ELEMENT: 0,
        SpotType.FLOOR: rules.floor_penalty,
    }
    return modifiers[spot_type]


def happiness_delta(spot_type: SpotType, cat_count: int, room_capacity: int,
                    rules: HappinessRules = HAPPINESS) -> int:
    """Change in happiness for one cat over one turn."""
    delta = rules.base_decay + spot_modifier(spot_type, rules)

    if cat_count == 1:
        delta += rules.alone_penalty

    overcrowding = max(0, cat_count - room_capacity)
    delta += overcrowding * rules.overcrowd_penalty_per_cat

    return delta


def clamp_happiness(value: int, rules: HappinessRules = HAPPINESS) -> int:
    return max(rules.min_happiness, min(rules.max_happiness, value))


def apply_daily_happiness(cats: Sequence[Cat], furniture: OwnedFurniture,
                          random: Optional[RandomFn] = None,
                          rules: HappinessRules = HAPPINESS,
                          habitat: HabitatConfig = HABITAT) -> Tuple[List[Cat], List[CatPosition]]:
    """
    Place every cat and apply its happiness change.

    Returns:
        (updated cats in roster order, positions used)
    """
    positions = assign_positions([cat.id for cat in cats], furniture, random)
    room_capacity = capacity(furniture, habitat)

    updated = []
    for cat, position in zip(cats, positions):
        delta = happiness_delta(position.spot_type, len(cats), room_capacity, rules)
        updated.append(replace(cat, happiness=clamp_happiness(cat.happiness + delta, rules)))

    if len(cats) > room_capacity:
        logger.debug(f"Room over capacity: {len(cats)} cats, capacity {room_capacity}")

    return updated, positions
