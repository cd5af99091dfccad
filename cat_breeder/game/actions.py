"""
Cat Breeder - Player Actions
Actions applied immediately between turns.

``apply_action`` is pure and total: an action that is not allowed right now
(unknown cat, already paired, not enough money) returns the state unchanged
rather than raising. Callers detect rejection by comparing states.
"""

from dataclasses import dataclass, replace
from typing import Union
import logging

from .state import BreedingPair, GameState, Transaction
from ..config import GAME, SHOP_ITEMS, FurnitureKind, GameConfig, TransactionKind
from ..core.genetics import Cat
from ..economy.market import round_half_up
from ..habitat.furniture import adjust_furniture

logger = logging.getLogger(__name__)


# =============================================================================
# ACTIONS
# =============================================================================

@dataclass(frozen=True)
class AddBreedingPair:
    parent_a_id: str
    parent_b_id: str


@dataclass(frozen=True)
class RemoveBreedingPair:
    parent_a_id: str
    parent_b_id: str


@dataclass(frozen=True)
class ListForSale:
    cat_id: str


@dataclass(frozen=True)
class UnlistFromSale:
    cat_id: str


@dataclass(frozen=True)
class BuyCat:
    cat: Cat
    price: int


@dataclass(frozen=True)
class BuyFurniture:
    kind: FurnitureKind


@dataclass(frozen=True)
class SellFurniture:
    kind: FurnitureKind


@dataclass(frozen=True)
class ToggleFavourite:
    cat_id: str


@dataclass(frozen=True)
class EndTurn:
    """Marker only; turns are resolved by ``process_turn``."""


GameAction = Union[
    AddBreedingPair,
    RemoveBreedingPair,
    ListForSale,
    UnlistFromSale,
    BuyCat,
    BuyFurniture,
    SellFurniture,
    ToggleFavourite,
    EndTurn,
]


# =============================================================================
# HANDLERS
# =============================================================================

def add_breeding_pair(state: GameState, action: AddBreedingPair) -> GameState:
    a, b = action.parent_a_id, action.parent_b_id
    if a == b or not state.has_cat(a) or not state.has_cat(b):
        return state
    if state.is_paired(a) or state.is_paired(b):
        return state
    return replace(state, breeding_pairs=state.breeding_pairs + (BreedingPair(a, b),))


def remove_breeding_pair(state: GameState, action: RemoveBreedingPair) -> GameState:
    target = BreedingPair(action.parent_a_id, action.parent_b_id)
    if target not in state.breeding_pairs:
        return state
    return replace(state, breeding_pairs=tuple(p for p in state.breeding_pairs if p != target))


def list_for_sale(state: GameState, action: ListForSale) -> GameState:
    if action.cat_id in state.cats_for_sale:
        return state
    cat = state.find_cat(action.cat_id)
    if cat is None or cat.favourite:
        return state
    return replace(state, cats_for_sale=state.cats_for_sale + (action.cat_id,))


def unlist_from_sale(state: GameState, action: UnlistFromSale) -> GameState:
    if action.cat_id not in state.cats_for_sale:
        return state
    return replace(state, cats_for_sale=tuple(i for i in state.cats_for_sale if i != action.cat_id))


def buy_cat(state: GameState, action: BuyCat) -> GameState:
    if state.money < action.price or state.has_cat(action.cat.id):
        return state

    return replace(
        state,
        money=state.money - action.price,
        cats=state.cats + (action.cat,),
        market_inventory=tuple(
            listing for listing in state.market_inventory if listing.cat.id != action.cat.id
        ),
        transactions=state.transactions + (
            Transaction(TransactionKind.BUY, action.cat.id, action.price, state.day),
        ),
    )


def _furniture_transaction_id(state: GameState, kind: FurnitureKind) -> str:
    # Ledger position keeps ids unique and reproducible
    return f"furniture-{kind.value}-{state.day}-{len(state.transactions)}"


def buy_furniture(state: GameState, action: BuyFurniture) -> GameState:
    item = SHOP_ITEMS.get(action.kind)
    if item is None or state.money < item.price:
        return state

    return replace(
        state,
        money=state.money - item.price,
        furniture=adjust_furniture(state.furniture, action.kind, 1),
        transactions=state.transactions + (
            Transaction(TransactionKind.BUY, _furniture_transaction_id(state, action.kind),
                        item.price, state.day),
        ),
    )


def sell_furniture(state: GameState, action: SellFurniture, config: GameConfig = GAME) -> GameState:
    item = SHOP_ITEMS.get(action.kind)
    if item is None or state.furniture.count(action.kind) == 0:
        return state

    refund = round_half_up(item.price * config.furniture_resale_rate)
    return replace(
        state,
        money=state.money + refund,
        furniture=adjust_furniture(state.furniture, action.kind, -1),
        transactions=state.transactions + (
            Transaction(TransactionKind.SELL, _furniture_transaction_id(state, action.kind),
                        refund, state.day),
        ),
    )


def toggle_favourite(state: GameState, action: ToggleFavourite) -> GameState:
    cat = state.find_cat(action.cat_id)
    if cat is None:
        return state

    favourite = not cat.favourite
    cats = tuple(replace(c, favourite=favourite) if c.id == cat.id else c for c in state.cats)
    # Favourites cannot be sold
    cats_for_sale = state.cats_for_sale
    if favourite:
        cats_for_sale = tuple(i for i in cats_for_sale if i != cat.id)

    return replace(state, cats=cats, cats_for_sale=cats_for_sale)


# =============================================================================
# REDUCER
# =============================================================================

def apply_action(state: GameState, action: GameAction) -> GameState:
    """Apply one player action. Never raises; rejected actions are no-ops."""
    if isinstance(action, AddBreedingPair):
        new_state = add_breeding_pair(state, action)
    elif isinstance(action, RemoveBreedingPair):
        new_state = remove_breeding_pair(state, action)
    elif isinstance(action, ListForSale):
        new_state = list_for_sale(state, action)
    elif isinstance(action, UnlistFromSale):
        new_state = unlist_from_sale(state, action)
    elif isinstance(action, BuyCat):
        new_state = buy_cat(state, action)
    elif isinstance(action, BuyFurniture):
        new_state = buy_furniture(state, action)
    elif isinstance(action, SellFurniture):
        new_state = sell_furniture(state, action)
    elif isinstance(action, ToggleFavourite):
        new_state = toggle_favourite(state, action)
    elif isinstance(action, EndTurn):
        new_state = state
    else:
        logger.warning(f"Ignoring unknown action: {action!r}")
        return state

    if new_state is state and not isinstance(action, EndTurn):
        logger.debug(f"Action rejected: {action!r}")
    return new_state
