"""
Cat Breeder - Genetics
Mendelian inheritance for four independent, biallelic traits.

Trait        Dominant        Recessive
-----------  --------------  --------------
size         S  (large)      s  (small)
tail_length  T  (long)       t  (short)
ear_shape    E  (pointed)    f  (folded)
fur_color    O  (orange)     w  (white)

Breeding draws one allele from each parent per trait, always in the order
above, so a replayed breeding with the same random stream is bit-identical.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple
import logging
import math

from .random_source import RandomFn, coin_flip, pick_random, random_int, resolve
from ..config import CAT_NAMES, GAME, GameConfig

logger = logging.getLogger(__name__)

AllelePair = Tuple[str, str]

ID_SUFFIX_SPACE = 36 ** 6
_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


# =============================================================================
# TRAITS
# =============================================================================

@dataclass(frozen=True)
class TraitSpec:
    """Allele symbols and phenotype labels for one trait."""
    name: str
    dominant: str
    recessive: str
    dominant_label: str
    recessive_label: str
    noun: str  # used in value breakdown labels, e.g. "folded ears"


SIZE = TraitSpec("size", "S", "s", "large", "small", "size")
TAIL_LENGTH = TraitSpec("tail_length", "T", "t", "long", "short", "tail")
EAR_SHAPE = TraitSpec("ear_shape", "E", "f", "pointed", "folded", "ears")
FUR_COLOR = TraitSpec("fur_color", "O", "w", "orange", "white", "fur")

# Fixed order: breeding, genotype generation and price fluctuation all
# consume random draws trait by trait in this sequence.
TRAITS: Tuple[TraitSpec, ...] = (SIZE, TAIL_LENGTH, EAR_SHAPE, FUR_COLOR)


@dataclass(frozen=True)
class Genotype:
    """Allele pairs for all four traits."""
    size: AllelePair
    tail_length: AllelePair
    ear_shape: AllelePair
    fur_color: AllelePair

    def pair(self, trait: TraitSpec) -> AllelePair:
        return getattr(self, trait.name)


@dataclass(frozen=True)
class Phenotype:
    """Observable trait labels."""
    size: str
    tail_length: str
    ear_shape: str
    fur_color: str

    def label(self, trait: TraitSpec) -> str:
        return getattr(self, trait.name)

    def labels(self) -> Tuple[str, ...]:
        return tuple(self.label(trait) for trait in TRAITS)


@dataclass(frozen=True)
class Cat:
    """
    A cat owned by the player or offered on the market.

    The phenotype is always derived from the genotype, never stored.
    """
    id: str
    name: str
    genotype: Genotype
    age: int = 0          # turns since birth
    happiness: int = 100  # 0-100
    favourite: bool = False

    @property
    def phenotype(self) -> Phenotype:
        return full_phenotype(self.genotype)


# =============================================================================
# PHENOTYPE
# =============================================================================

def phenotype_of_trait(trait: TraitSpec, alleles: AllelePair) -> str:
    """Dominant label if either allele is dominant, otherwise recessive."""
    return trait.dominant_label if trait.dominant in alleles else trait.recessive_label


def full_phenotype(genotype: Genotype) -> Phenotype:
    """Apply dominance to every trait independently."""
    labels: Dict[str, str] = {
        trait.name: phenotype_of_trait(trait, genotype.pair(trait)) for trait in TRAITS
    }
    return Phenotype(**labels)


# =============================================================================
# BREEDING
# =============================================================================

def generate_cat_id(random: Optional[RandomFn] = None) -> str:
    """Identifier with a 6-character base-36 suffix drawn from ``random``."""
    value = math.floor(resolve(random)() * ID_SUFFIX_SPACE)
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36[remainder])
    suffix = "".join(reversed(digits)).rjust(6, "0")
    return f"cat_{suffix}"


def breed_allele_pair(parent_a: AllelePair, parent_b: AllelePair,
                      random: Optional[RandomFn] = None) -> AllelePair:
    """One allele from each parent, parent A first."""
    rng = resolve(random)
    from_a = coin_flip(parent_a[0], parent_a[1], rng)
    from_b = coin_flip(parent_b[0], parent_b[1], rng)
    return (from_a, from_b)


def breed(parent_a: Cat, parent_b: Cat, name: str,
          random: Optional[RandomFn] = None, cat_id: Optional[str] = None) -> Cat:
    """
    Breed two cats into a newborn.

    Args:
        parent_a: First parent
        parent_b: Second parent
        name: Name for the offspring
        random: Random source (shared turn stream for replayable results)
        cat_id: Explicit id; when omitted one is drawn from ``random``

    Returns:
        Offspring aged 0 with full happiness.
    """
    rng = resolve(random)
    pairs = {
        trait.name: breed_allele_pair(
            parent_a.genotype.pair(trait), parent_b.genotype.pair(trait), rng
        )
        for trait in TRAITS
    }
    genotype = Genotype(**pairs)

    offspring = Cat(
        id=cat_id if cat_id is not None else generate_cat_id(rng),
        name=name,
        genotype=genotype,
        age=0,
        happiness=100,
        favourite=False,
    )
    logger.debug(f"Bred {offspring.name} ({offspring.id}) from {parent_a.id} x {parent_b.id}")
    return offspring


def random_genotype(random: Optional[RandomFn] = None) -> Genotype:
    """
    Random genotype for founders.

    Each slot is an independent coin flip between the dominant and recessive
    allele, giving all four zygosity outcomes with equal probability.
    """
    rng = resolve(random)
    pairs = {
        trait.name: (
            coin_flip(trait.dominant, trait.recessive, rng),
            coin_flip(trait.dominant, trait.recessive, rng),
        )
        for trait in TRAITS
    }
    return Genotype(**pairs)


def random_cat(name: str, random: Optional[RandomFn] = None, cat_id: Optional[str] = None,
               age: Optional[int] = None, happiness: Optional[int] = None,
               config: GameConfig = GAME) -> Cat:
    """
    Create a founder cat with random genetics.

    Age and happiness are drawn from the configured founder ranges unless
    overridden; overrides consume no random draws.
    """
    rng = resolve(random)
    genotype = random_genotype(rng)
    new_id = cat_id if cat_id is not None else generate_cat_id(rng)

    if age is None:
        age = random_int(config.founder_min_age, config.founder_max_age, rng)
    if happiness is None:
        happiness = random_int(config.founder_min_happiness, config.founder_max_happiness, rng)

    return Cat(id=new_id, name=name, genotype=genotype, age=age, happiness=happiness)


def random_cat_name(random: Optional[RandomFn] = None) -> str:
    """Pick a name from the name pool."""
    return pick_random(CAT_NAMES, random)
