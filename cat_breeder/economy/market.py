"""
Cat Breeder - Market
Cat valuation, purchase pricing, and daily market inventory.

Trait values are a static multiplier table. Sale prices can fluctuate by a
normally distributed factor per trait; see PricingPolicy for where that
applies.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
import logging
import math

from ..config import MARKET, PRICING, TRAIT_VALUES, MarketConfig, PricingPolicy
from ..core.genetics import TRAITS, Cat, Phenotype, random_cat, random_cat_name
from ..core.random_source import RandomFn, normal_random, resolve

logger = logging.getLogger(__name__)

TraitValues = Dict[str, Dict[str, float]]


def default_trait_values() -> TraitValues:
    """Fresh copy of the configured multiplier table."""
    return {trait: dict(values) for trait, values in TRAIT_VALUES.items()}


@dataclass(frozen=True)
class MarketState:
    """Base price and per-trait value multipliers. Constant at runtime."""
    base_price: int = MARKET.base_price
    trait_values: TraitValues = field(default_factory=default_trait_values)


@dataclass(frozen=True)
class MarketListing:
    """A cat offered for purchase today."""
    cat: Cat
    price: int


@dataclass(frozen=True)
class ValueFactor:
    """One above-parity contributor to a cat's value."""
    label: str
    multiplier: float


def round_half_up(value: float) -> int:
    """Round to nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def create_market_state(config: MarketConfig = MARKET) -> MarketState:
    return MarketState(base_price=config.base_price, trait_values=default_trait_values())


def trait_multiplier(phenotype: Phenotype, trait_values: TraitValues,
                     fluctuate: bool = False, random: Optional[RandomFn] = None,
                     config: MarketConfig = MARKET) -> float:
    """
    Product of the four trait coefficients.

    With ``fluctuate`` each coefficient is scaled by its own normal draw
    centred on 1.0, taken in trait order.
    """
    rng = resolve(random)
    multiplier = 1.0
    for trait in TRAITS:
        coefficient = trait_values[trait.name][phenotype.label(trait)]
        if fluctuate:
            coefficient *= normal_random(1.0, config.fluctuation_std_dev, rng)
        multiplier *= coefficient
    return multiplier


def cat_value(cat: Cat, market: MarketState, fluctuate: bool = False,
              random: Optional[RandomFn] = None, config: MarketConfig = MARKET) -> int:
    """
    Market value of a cat.

    base price x trait multiplier x happiness fraction x kitten premium,
    rounded once at the end. Zero happiness means zero value.
    """
    multiplier = trait_multiplier(cat.phenotype, market.trait_values, fluctuate, random, config)
    happiness_fraction = cat.happiness / 100
    kitten_premium = config.kitten_premium if cat.age < config.kitten_age_threshold else 1.0

    value = market.base_price * multiplier * happiness_fraction * kitten_premium
    return round_half_up(value)


def display_value(cat: Cat, market: MarketState, policy: PricingPolicy = PRICING,
                  random: Optional[RandomFn] = None, config: MarketConfig = MARKET) -> int:
    """Value shown for an owned cat, fluctuating only if the policy says so."""
    return cat_value(cat, market, policy.fluctuate_display_values, random, config)


def value_breakdown(cat: Cat, market: MarketState,
                    config: MarketConfig = MARKET) -> List[ValueFactor]:
    """Factors that raise a cat's value above parity, for display."""
    breakdown = []
    phenotype = cat.phenotype
    for trait in TRAITS:
        label = phenotype.label(trait)
        multiplier = market.trait_values[trait.name][label]
        if multiplier > 1:
            breakdown.append(ValueFactor(f"{label} {trait.noun}", multiplier))

    if cat.age < config.kitten_age_threshold:
        breakdown.append(ValueFactor("kitten", config.kitten_premium))

    return breakdown


def purchase_price(cat: Cat, market: MarketState, fluctuate: bool = False,
                   random: Optional[RandomFn] = None, config: MarketConfig = MARKET) -> int:
    """Value plus the market's buy premium."""
    value = cat_value(cat, market, fluctuate, random, config)
    return round_half_up(value * (1 + config.buy_premium))


def generate_inventory(market: MarketState, random: Optional[RandomFn] = None,
                       policy: PricingPolicy = PRICING,
                       config: MarketConfig = MARKET) -> Tuple[MarketListing, ...]:
    """
    Fresh market inventory.

    Always regenerated in full; each listing draws its name, then the cat,
    then (if fluctuating) its price from ``random``.
    """
    rng = resolve(random)
    listings = []
    for _ in range(config.inventory_size):
        name = random_cat_name(rng)
        cat = random_cat(name, rng)
        price = purchase_price(cat, market, policy.fluctuate_inventory_prices, rng, config)
        listings.append(MarketListing(cat=cat, price=price))

    logger.debug(f"Generated market inventory: {[(l.cat.name, l.price) for l in listings]}")
    return tuple(listings)
