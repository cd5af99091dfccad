"""
Test: Player Actions
Every action applies immediately, and rejected actions leave the state untouched.
"""

from cat_breeder.config import FurnitureKind, TransactionKind
from cat_breeder.economy.market import MarketListing
from cat_breeder.game.actions import (
    AddBreedingPair,
    BuyCat,
    BuyFurniture,
    EndTurn,
    ListForSale,
    RemoveBreedingPair,
    SellFurniture,
    ToggleFavourite,
    UnlistFromSale,
    apply_action,
)
from cat_breeder.game.state import BreedingPair
from cat_breeder.habitat.furniture import OwnedFurniture


# =============================================================================
# BREEDING PAIRS
# =============================================================================

class TestBreedingPairs:
    """Tests for queuing and removing breeding pairs."""

    def test_add_pair(self, make_cat, make_state):
        """A valid pair is queued."""
        a, b = make_cat(), make_cat()
        state = apply_action(make_state([a, b]), AddBreedingPair(a.id, b.id))
        assert state.breeding_pairs == (BreedingPair(a.id, b.id),)

    def test_same_pair_twice_is_noop(self, make_cat, make_state):
        """Queuing the same pair again changes nothing."""
        a, b = make_cat(), make_cat()
        once = apply_action(make_state([a, b]), AddBreedingPair(a.id, b.id))
        twice = apply_action(once, AddBreedingPair(a.id, b.id))

        assert twice is once
        assert len(twice.breeding_pairs) == 1

    def test_cat_in_two_pairs_rejected(self, make_cat, make_state):
        """A cat can only be in one pending pair."""
        a, b, c = make_cat(), make_cat(), make_cat()
        state = apply_action(make_state([a, b, c]), AddBreedingPair(a.id, b.id))
        assert apply_action(state, AddBreedingPair(c.id, b.id)) is state

    def test_missing_cat_rejected(self, make_cat, make_state):
        """Both cats must be owned."""
        a = make_cat()
        state = make_state([a])
        assert apply_action(state, AddBreedingPair(a.id, "cat_nobody")) is state

    def test_self_pair_rejected(self, make_cat, make_state):
        """A cat cannot breed with itself."""
        a = make_cat()
        state = make_state([a, make_cat()])
        assert apply_action(state, AddBreedingPair(a.id, a.id)) is state

    def test_remove_exact_pair(self, make_cat, make_state):
        """Removal needs the pair in its queued order."""
        a, b = make_cat(), make_cat()
        state = apply_action(make_state([a, b]), AddBreedingPair(a.id, b.id))

        assert apply_action(state, RemoveBreedingPair(b.id, a.id)) is state
        assert apply_action(state, RemoveBreedingPair(a.id, b.id)).breeding_pairs == ()


# =============================================================================
# SALE LISTINGS
# =============================================================================

class TestSaleListings:
    """Tests for listing and unlisting cats."""

    def test_list_and_unlist(self, make_cat, make_state):
        """Listing appends, unlisting removes."""
        a = make_cat()
        listed = apply_action(make_state([a]), ListForSale(a.id))
        assert listed.cats_for_sale == (a.id,)

        unlisted = apply_action(listed, UnlistFromSale(a.id))
        assert unlisted.cats_for_sale == ()

    def test_list_twice_is_noop(self, make_cat, make_state):
        """A cat is listed once."""
        a = make_cat()
        listed = apply_action(make_state([a]), ListForSale(a.id))
        assert apply_action(listed, ListForSale(a.id)) is listed

    def test_list_unknown_cat_is_noop(self, make_state):
        """Only owned cats can be listed."""
        state = make_state()
        assert apply_action(state, ListForSale("cat_ghost")) is state

    def test_unlist_unlisted_is_noop(self, make_cat, make_state):
        """Nothing to remove."""
        state = make_state([make_cat()])
        assert apply_action(state, UnlistFromSale(state.cats[0].id)) is state

    def test_favourite_cannot_be_listed(self, make_cat, make_state):
        """Favourites are not for sale."""
        a = make_cat(favourite=True)
        state = make_state([a])
        assert apply_action(state, ListForSale(a.id)) is state


# =============================================================================
# BUYING CATS
# =============================================================================

class TestBuyCat:
    """Tests for buying from the market."""

    def test_buy(self, make_cat, make_state):
        """Money is paid, the cat joins the roster and leaves the market."""
        offered, other = make_cat(), make_cat()
        state = make_state(market_inventory=(MarketListing(offered, 120), MarketListing(other, 200)))

        bought = apply_action(state, BuyCat(offered, 120))

        assert bought.money == 380
        assert bought.cats == (offered,)
        assert [l.cat.id for l in bought.market_inventory] == [other.id]
        assert bought.transactions[-1].kind == TransactionKind.BUY
        assert bought.transactions[-1].subject_id == offered.id
        assert bought.transactions[-1].amount == 120

    def test_exact_money_is_enough(self, make_cat, make_state):
        """A price equal to the balance can be paid."""
        bought = apply_action(make_state(money=120), BuyCat(make_cat(), 120))
        assert bought.money == 0

    def test_insufficient_money(self, make_cat, make_state):
        """Cannot go into debt to buy a cat."""
        state = make_state(money=100)
        assert apply_action(state, BuyCat(make_cat(), 120)) is state

    def test_already_owned(self, make_cat, make_state):
        """The same cat cannot be bought twice."""
        a = make_cat()
        state = make_state([a])
        assert apply_action(state, BuyCat(a, 50)) is state


# =============================================================================
# FURNITURE
# =============================================================================

class TestFurnitureActions:
    """Tests for buying and selling furniture."""

    def test_buy_toy(self, make_state):
        """Buying increments the counter and records a transaction."""
        state = apply_action(make_state(), BuyFurniture(FurnitureKind.TOY))

        assert state.money == 450
        assert state.furniture.toys == 1
        assert state.transactions[-1].subject_id == "furniture-toy-1-0"

    def test_buy_cat_tree(self, make_state):
        """Cat trees are tracked like every other item."""
        state = apply_action(make_state(), BuyFurniture(FurnitureKind.CAT_TREE))
        assert state.furniture.cat_trees == 1
        assert state.money == 300

    def test_transaction_ids_unique(self, make_state):
        """Two identical purchases get different ledger ids."""
        state = make_state()
        for _ in range(2):
            state = apply_action(state, BuyFurniture(FurnitureKind.BED))

        ids = [t.subject_id for t in state.transactions]
        assert len(set(ids)) == 2

    def test_cannot_afford(self, make_state):
        """Not enough money is a no-op."""
        state = make_state(money=150)
        assert apply_action(state, BuyFurniture(FurnitureKind.CAT_TREE)) is state

    def test_sell_refunds_half(self, make_state):
        """Selling returns half the price."""
        state = make_state(furniture=OwnedFurniture(beds=1))
        sold = apply_action(state, SellFurniture(FurnitureKind.BED))

        assert sold.money == 550
        assert sold.furniture.beds == 0
        assert sold.transactions[-1].kind == TransactionKind.SELL

    def test_sell_none_owned(self, make_state):
        """Nothing to sell is a no-op."""
        state = make_state()
        assert apply_action(state, SellFurniture(FurnitureKind.TOY)) is state


# =============================================================================
# FAVOURITES AND MISC
# =============================================================================

class TestFavourites:
    """Tests for ToggleFavourite, EndTurn and unknown actions."""

    def test_toggle(self, make_cat, make_state):
        """Toggling flips the flag both ways."""
        a = make_cat()
        on = apply_action(make_state([a]), ToggleFavourite(a.id))
        assert on.cats[0].favourite is True

        off = apply_action(on, ToggleFavourite(a.id))
        assert off.cats[0].favourite is False

    def test_favouriting_unlists(self, make_cat, make_state):
        """A listed cat made favourite is taken off sale."""
        a = make_cat()
        listed = apply_action(make_state([a]), ListForSale(a.id))
        assert apply_action(listed, ToggleFavourite(a.id)).cats_for_sale == ()

    def test_toggle_unknown_cat(self, make_state):
        """Unknown ids are ignored."""
        state = make_state()
        assert apply_action(state, ToggleFavourite("cat_ghost")) is state

    def test_end_turn_is_noop(self, make_cat, make_state):
        """Turns are resolved elsewhere."""
        state = make_state([make_cat()])
        assert apply_action(state, EndTurn()) is state

    def test_unknown_action(self, make_state):
        """Anything unrecognised leaves the state alone."""
        state = make_state()
        assert apply_action(state, object()) is state

    def test_input_state_untouched(self, make_cat, make_state):
        """Actions return a new state and never mutate the old one."""
        a, b = make_cat(), make_cat()
        state = make_state([a, b])
        apply_action(state, AddBreedingPair(a.id, b.id))
        apply_action(state, BuyFurniture(FurnitureKind.TOY))

        assert state.breeding_pairs == ()
        assert state.money == 500
        assert state.furniture.toys == 0
