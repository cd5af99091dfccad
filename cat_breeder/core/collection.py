"""
Cat Breeder - Trait Collection
Tracks which of the 2^4 = 16 phenotype combinations have been bred, and the
first cat to achieve each one.
"""

from dataclasses import dataclass, field
from itertools import product
from typing import Dict, List, Optional, Tuple
import logging

from .genetics import TRAITS, Cat, Phenotype

logger = logging.getLogger(__name__)

TOTAL_COMBINATIONS = 2 ** len(TRAITS)


@dataclass(frozen=True)
class CollectedTrait:
    """First discovery of a phenotype combination."""
    key: str
    phenotype: Phenotype
    cat_id: str
    cat_name: str
    day: int


@dataclass(frozen=True)
class TraitCollection:
    """
    Discovered combinations keyed by phenotype key.

    Never mutated: registering a discovery returns a new collection.
    Insertion order is discovery order.
    """
    collected: Dict[str, CollectedTrait] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.collected)

    def __contains__(self, key: str) -> bool:
        return key in self.collected


def phenotype_key(phenotype: Phenotype) -> str:
    """Canonical key, e.g. ``small-short-folded-white``."""
    return "-".join(phenotype.labels())


def all_phenotype_combinations() -> List[Phenotype]:
    """Every combination of the four traits' labels (16)."""
    label_options = [(trait.recessive_label, trait.dominant_label) for trait in TRAITS]
    return [
        Phenotype(**{trait.name: label for trait, label in zip(TRAITS, labels)})
        for labels in product(*label_options)
    ]


def is_trait_collected(collection: TraitCollection, phenotype: Phenotype) -> bool:
    return phenotype_key(phenotype) in collection.collected


def collected_trait_info(collection: TraitCollection,
                         phenotype: Phenotype) -> Optional[CollectedTrait]:
    """The cat that first bred this combination, if any."""
    return collection.collected.get(phenotype_key(phenotype))


def register_bred_cat(collection: TraitCollection, cat: Cat,
                      day: int) -> Tuple[bool, TraitCollection]:
    """
    Record a newborn's phenotype. First discovery wins.

    Returns:
        (is_new_discovery, collection) - the original collection is returned
        untouched when the combination was already known.
    """
    key = phenotype_key(cat.phenotype)
    if key in collection.collected:
        return False, collection

    collected = dict(collection.collected)
    collected[key] = CollectedTrait(
        key=key,
        phenotype=cat.phenotype,
        cat_id=cat.id,
        cat_name=cat.name,
        day=day,
    )
    logger.info(f"New trait combination {key} discovered by {cat.name} on day {day}")
    return True, TraitCollection(collected=collected)


def collection_progress(collection: TraitCollection) -> Dict[str, int]:
    """Collected count, total and rounded percentage."""
    collected = len(collection.collected)
    return {
        "collected": collected,
        "total": TOTAL_COMBINATIONS,
        "percentage": int(collected * 100 / TOTAL_COMBINATIONS + 0.5),
    }
