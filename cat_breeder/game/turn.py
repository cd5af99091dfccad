"""
Cat Breeder - Turn Resolution
End-of-turn pipeline and read-only roster queries.

Steps run in a fixed order and share one random stream:
breeding -> sales -> aging -> happiness -> food cost -> clear queues ->
advance day -> market refresh -> report.
"""

from dataclasses import dataclass, field, replace
from typing import List, Optional, Tuple
import logging

from .state import GameState, Transaction
from ..config import (
    HABITAT, HAPPINESS, MARKET, PRICING, TransactionKind,
    HabitatConfig, HappinessRules, MarketConfig, PricingPolicy,
)
from ..core.collection import register_bred_cat
from ..core.genetics import Cat, breed, random_cat_name
from ..core.random_source import RandomFn, resolve
from ..economy.market import cat_value, generate_inventory
from ..habitat.happiness import apply_daily_happiness

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SaleRecord:
    cat: Cat
    price: int


@dataclass
class TurnReport:
    """What happened during one turn, for the player."""
    day: int
    births: List[Cat] = field(default_factory=list)
    sales: List[SaleRecord] = field(default_factory=list)
    food_cost: int = 0
    discoveries: List[str] = field(default_factory=list)  # names of discoverers
    events: List[str] = field(default_factory=list)

    @property
    def sale_total(self) -> int:
        return sum(sale.price for sale in self.sales)


def _breed_pending(state: GameState, report: TurnReport, rng: RandomFn) -> GameState:
    cats = state.cats
    collection = state.trait_collection
    total_bred = state.total_cats_bred

    for pair in state.breeding_pairs:
        parent_a = state.find_cat(pair.parent_a_id)
        parent_b = state.find_cat(pair.parent_b_id)
        if parent_a is None or parent_b is None:
            logger.debug(f"Skipping breeding pair {pair.ids()}: parent missing")
            continue

        offspring = breed(parent_a, parent_b, random_cat_name(rng), rng)
        report.births.append(offspring)
        cats = cats + (offspring,)
        total_bred += 1

        discovered, collection = register_bred_cat(collection, offspring, state.day)
        if discovered:
            report.discoveries.append(offspring.name)

    return replace(state, cats=cats, trait_collection=collection, total_cats_bred=total_bred)


def _sell_pending(state: GameState, report: TurnReport, rng: RandomFn,
                  policy: PricingPolicy, market_config: MarketConfig) -> GameState:
    money = state.money
    transactions = state.transactions
    total_sold = state.total_cats_sold
    sold_ids = set()

    for cat_id in state.cats_for_sale:
        cat = state.find_cat(cat_id)
        if cat is None or cat.favourite or cat_id in sold_ids:
            logger.debug(f"Skipping sale of {cat_id}")
            continue

        price = cat_value(cat, state.market, policy.fluctuate_sale_prices, rng, market_config)
        report.sales.append(SaleRecord(cat=cat, price=price))
        sold_ids.add(cat_id)
        money += price
        total_sold += 1
        transactions = transactions + (Transaction(TransactionKind.SELL, cat.id, price, state.day),)

    return replace(
        state,
        cats=tuple(cat for cat in state.cats if cat.id not in sold_ids),
        money=money,
        transactions=transactions,
        total_cats_sold=total_sold,
    )


def _report_events(report: TurnReport) -> List[str]:
    events = []
    if report.births:
        events.append(f"{len(report.births)} kitten(s) were born!")
    if report.discoveries:
        events.append(f"New trait discovered by {', '.join(report.discoveries)}!")
    if report.sales:
        events.append(f"Sold {len(report.sales)} cat(s) for ${report.sale_total}!")
    if report.food_cost > 0:
        events.append(f"Food expenses: ${report.food_cost}")
    return events


def process_turn(state: GameState, random: Optional[RandomFn] = None,
                 policy: PricingPolicy = PRICING,
                 rules: HappinessRules = HAPPINESS,
                 market_config: MarketConfig = MARKET,
                 habitat: HabitatConfig = HABITAT) -> Tuple[GameState, TurnReport]:
    """
    Resolve the end of a turn.

    Args:
        state: State with pending breeding pairs and sale listings
        random: Turn random stream; a seeded source makes the turn replayable

    Returns:
        (new state, turn report)
    """
    rng = resolve(random)
    report = TurnReport(day=state.day)

    # 1. Breeding
    new_state = _breed_pending(state, report, rng)

    # 2. Sales
    new_state = _sell_pending(new_state, report, rng, policy, market_config)

    # 3. Aging
    aged = [replace(cat, age=cat.age + 1) for cat in new_state.cats]

    # 4. Happiness
    content, _ = apply_daily_happiness(aged, new_state.furniture, rng, rules, habitat)
    new_state = replace(new_state, cats=tuple(content))

    # 5. Food
    report.food_cost = len(new_state.cats) * market_config.food_cost_per_cat

    # 6-8. Clear queues, advance the day, restock the market
    new_state = replace(
        new_state,
        money=new_state.money - report.food_cost,
        breeding_pairs=(),
        cats_for_sale=(),
        day=new_state.day + 1,
    )
    new_state = replace(
        new_state,
        market_inventory=generate_inventory(new_state.market, rng, policy, market_config),
    )

    # 9. Report
    report.events = _report_events(report)

    logger.info(
        f"Day {report.day} resolved: {len(report.births)} born, {len(report.sales)} sold, "
        f"food ${report.food_cost}, balance ${new_state.money}"
    )
    return new_state, report


# =============================================================================
# QUERIES
# =============================================================================

def available_for_breeding(state: GameState, min_age: Optional[int] = None) -> List[Cat]:
    """Cats not already in a pending pair, optionally old enough to breed."""
    paired = {cat_id for pair in state.breeding_pairs for cat_id in pair.ids()}
    return [
        cat for cat in state.cats
        if cat.id not in paired and (min_age is None or cat.age >= min_age)
    ]


def available_for_sale(state: GameState) -> List[Cat]:
    """Cats not already listed for sale."""
    return [cat for cat in state.cats if cat.id not in state.cats_for_sale]
