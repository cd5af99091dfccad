"""
Cat Breeder - Economy Package
Valuation, purchase pricing, and market inventory.
"""

from .market import (
    TraitValues,
    default_trait_values,
    MarketState,
    MarketListing,
    ValueFactor,
    create_market_state,
    trait_multiplier,
    cat_value,
    display_value,
    value_breakdown,
    purchase_price,
    generate_inventory,
)

__all__ = [
    "TraitValues",
    "default_trait_values",
    "MarketState",
    "MarketListing",
    "ValueFactor",
    "create_market_state",
    "trait_multiplier",
    "cat_value",
    "display_value",
    "value_breakdown",
    "purchase_price",
    "generate_inventory",
]
