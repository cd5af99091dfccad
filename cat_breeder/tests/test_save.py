"""
Test: Save / Load
Snapshot round-trips, tolerant loading, and storage backends.
"""

import json

from cat_breeder.config import FurnitureKind
from cat_breeder.core.random_source import create_seeded_random
from cat_breeder.game.actions import AddBreedingPair, BuyFurniture, ListForSale, ToggleFavourite, apply_action
from cat_breeder.game.state import create_initial_game_state
from cat_breeder.game.turn import process_turn
from cat_breeder.persistence.save import (
    SAVE_KEY,
    SAVE_VERSION,
    FileSaveStore,
    MemorySaveStore,
    delete_save,
    deserialize_state,
    get_save_info,
    has_saved_game,
    load_game,
    save_game,
    serialize_state,
)


def _played_state():
    """A few turns in: bred kittens, furniture, a favourite, pending actions."""
    state = create_initial_game_state(create_seeded_random(10))
    a, b = state.cats
    state = apply_action(state, BuyFurniture(FurnitureKind.BED))
    state = apply_action(state, AddBreedingPair(a.id, b.id))
    state, _ = process_turn(state, create_seeded_random(11))
    state = apply_action(state, AddBreedingPair(a.id, b.id))
    state, _ = process_turn(state, create_seeded_random(12))
    state = apply_action(state, ToggleFavourite(a.id))
    state = apply_action(state, ListForSale(state.cats[-1].id))
    return state


class TestRoundTrip:
    """Tests for serialize_state / deserialize_state."""

    def test_state_round_trip(self):
        """A played state survives JSON unchanged."""
        state = _played_state()
        restored = deserialize_state(json.loads(json.dumps(serialize_state(state))))

        assert restored == state

    def test_collection_order_preserved(self):
        """Discovery order survives the round trip."""
        state = _played_state()
        restored = deserialize_state(json.loads(json.dumps(serialize_state(state))))

        assert list(restored.trait_collection.collected) == list(state.trait_collection.collected)

    def test_missing_furniture_defaults_to_zero(self):
        """Older snapshots without furniture still load."""
        data = serialize_state(_played_state())
        del data["furniture"]
        assert deserialize_state(data).furniture.beds == 0

    def test_partial_furniture(self):
        """Missing counters default to zero."""
        data = serialize_state(_played_state())
        data["furniture"] = {"toys": 2}
        furniture = deserialize_state(data).furniture
        assert (furniture.toys, furniture.beds, furniture.cat_trees) == (2, 0, 0)


class TestSaveLoad:
    """Tests for save_game / load_game against a store."""

    def test_save_and_load(self):
        """The state and seed come back."""
        store = MemorySaveStore()
        state = _played_state()

        assert save_game(state, 1234, store) is True
        loaded = load_game(store)

        assert loaded.state == state
        assert loaded.seed == 1234

    def test_no_save(self):
        """An empty store loads nothing."""
        store = MemorySaveStore()
        assert load_game(store) is None
        assert has_saved_game(store) is False

    def test_corrupt_blob(self):
        """Unparseable data is a failed load, not an exception."""
        store = MemorySaveStore()
        store.write(SAVE_KEY, "{not json")
        assert load_game(store) is None

    def test_non_object_snapshot(self):
        """A JSON value that is not an object fails to load."""
        store = MemorySaveStore()
        store.write(SAVE_KEY, "[1, 2, 3]")
        assert load_game(store) is None

    def _write_tampered(self, store, field, value):
        save_game(_played_state(), 1, store)
        snapshot = json.loads(store.read(SAVE_KEY))
        snapshot["state"][field] = value
        store.write(SAVE_KEY, json.dumps(snapshot))

    def test_non_object_fields(self):
        """Furniture, collection or market of the wrong shape fail to load."""
        for field, value in [
            ("furniture", [1]),
            ("furniture", "beds"),
            ("trait_collection", ["x"]),
            ("trait_collection", "collected"),
            ("market", [100]),
        ]:
            store = MemorySaveStore()
            self._write_tampered(store, field, value)
            assert load_game(store) is None, field

    def test_incomplete_trait_values(self):
        """A market missing trait multipliers fails to load."""
        for trait_values in [{"size": {}}, {}, [1], None]:
            store = MemorySaveStore()
            self._write_tampered(store, "market", {"base_price": 100, "trait_values": trait_values})
            assert load_game(store) is None

    def test_non_numeric_trait_value(self):
        """Every multiplier must be a number."""
        store = MemorySaveStore()
        save_game(_played_state(), 1, store)
        snapshot = json.loads(store.read(SAVE_KEY))
        snapshot["state"]["market"]["trait_values"]["ear_shape"]["folded"] = "2.0"
        store.write(SAVE_KEY, json.dumps(snapshot))

        assert load_game(store) is None

    def test_loaded_state_plays_a_turn(self):
        """A restored state can be resolved straight away."""
        store = MemorySaveStore()
        save_game(_played_state(), 1, store)

        loaded = load_game(store)
        new_state, _ = process_turn(loaded.state, create_seeded_random(2))

        assert new_state.day == loaded.state.day + 1

    def test_invalid_alleles(self):
        """Unknown allele symbols fail the whole load."""
        store = MemorySaveStore()
        save_game(_played_state(), 1, store)
        snapshot = json.loads(store.read(SAVE_KEY))
        snapshot["state"]["cats"][0]["genotype"]["size"] = ["X", "s"]
        store.write(SAVE_KEY, json.dumps(snapshot))

        assert load_game(store) is None

    def test_missing_required_field(self):
        """Snapshots without a roster fail to load."""
        store = MemorySaveStore()
        save_game(_played_state(), 1, store)
        snapshot = json.loads(store.read(SAVE_KEY))
        del snapshot["state"]["cats"]
        store.write(SAVE_KEY, json.dumps(snapshot))

        assert load_game(store) is None

    def test_version_mismatch_still_loads(self):
        """Other versions are loaded on a best-effort basis."""
        store = MemorySaveStore()
        state = _played_state()
        save_game(state, 5, store)
        snapshot = json.loads(store.read(SAVE_KEY))
        snapshot["version"] = SAVE_VERSION + 1
        store.write(SAVE_KEY, json.dumps(snapshot))

        assert load_game(store).state == state

    def test_save_info(self):
        """Metadata is readable without restoring the state."""
        store = MemorySaveStore()
        state = _played_state()
        save_game(state, 77, store, timestamp=1700000000.0)

        info = get_save_info(store)
        assert (info.day, info.money, info.cat_count, info.seed, info.timestamp) == (
            state.day, state.money, len(state.cats), 77, 1700000000.0
        )

    def test_delete(self):
        """Deleting removes the save."""
        store = MemorySaveStore()
        save_game(_played_state(), 1, store)
        delete_save(store)

        assert has_saved_game(store) is False
        assert get_save_info(store) is None


class TestFileSaveStore:
    """Tests for the directory-backed store."""

    def test_round_trip_on_disk(self, tmp_path):
        """Saves land in a JSON file and load back."""
        store = FileSaveStore(tmp_path / "saves")
        state = _played_state()
        save_game(state, 9, store)

        assert (tmp_path / "saves" / f"{SAVE_KEY}.json").exists()
        assert load_game(FileSaveStore(tmp_path / "saves")).state == state

    def test_missing_file(self, tmp_path):
        """No file, no save."""
        store = FileSaveStore(tmp_path)
        assert store.read(SAVE_KEY) is None
        assert not has_saved_game(store)

    def test_delete_file(self, tmp_path):
        """Deleting removes the file and is safe to repeat."""
        store = FileSaveStore(tmp_path)
        save_game(_played_state(), 1, store)
        delete_save(store)
        delete_save(store)

        assert not (tmp_path / f"{SAVE_KEY}.json").exists()
