"""
Cat Breeder - Save / Load
Snapshot serialization and an opaque key/blob store.

Snapshots are JSON documents carrying a format version, the game seed, and
every GameState field as plain data. Loading is best-effort across versions:
missing optional fields fall back to defaults. Any failure to load is
reported as ``None`` so the caller can start a fresh game; a partially
restored state is never returned.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional
import json
import logging
import os
import time

from ..config import TransactionKind
from ..core.collection import CollectedTrait, TraitCollection
from ..core.genetics import TRAITS, Cat, Genotype, Phenotype
from ..economy.market import MarketListing, MarketState
from ..game.state import BreedingPair, GameState, Transaction
from ..habitat.furniture import OwnedFurniture

logger = logging.getLogger(__name__)

SAVE_KEY = "catbreeder_save"
SAVE_VERSION = 1


# =============================================================================
# EXCEPTIONS
# =============================================================================

class SaveError(Exception):
    """Snapshot is malformed or cannot be restored."""
    pass


# =============================================================================
# STORAGE BACKENDS
# =============================================================================

class SaveStore(ABC):
    """Opaque key/blob storage."""

    @abstractmethod
    def read(self, key: str) -> Optional[str]:
        """Blob stored under ``key``, or None."""

    @abstractmethod
    def write(self, key: str, blob: str) -> None:
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        pass

    def exists(self, key: str) -> bool:
        return self.read(key) is not None


class MemorySaveStore(SaveStore):
    """Dictionary-backed store, for tests and embedding."""

    def __init__(self):
        self.blobs: Dict[str, str] = {}

    def read(self, key: str) -> Optional[str]:
        return self.blobs.get(key)

    def write(self, key: str, blob: str) -> None:
        self.blobs[key] = blob

    def delete(self, key: str) -> None:
        self.blobs.pop(key, None)


class FileSaveStore(SaveStore):
    """One ``<key>.json`` file per key in a directory, replaced atomically on write."""

    def __init__(self, directory):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def read(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def write(self, key: str, blob: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self._path(key)
        tmp = path.with_suffix(path.suffix + ".tmp")
        tmp.write_text(blob, encoding="utf-8")
        os.replace(tmp, path)

    def delete(self, key: str) -> None:
        path = self._path(key)
        if path.exists():
            path.unlink()

    def exists(self, key: str) -> bool:
        return self._path(key).exists()


# =============================================================================
# SERIALIZATION
# =============================================================================

def _cat_to_dict(cat: Cat) -> Dict[str, Any]:
    return {
        "id": cat.id,
        "name": cat.name,
        "genotype": {trait.name: list(cat.genotype.pair(trait)) for trait in TRAITS},
        # Informational only; recomputed from the genotype on load
        "phenotype": {trait.name: cat.phenotype.label(trait) for trait in TRAITS},
        "age": cat.age,
        "happiness": cat.happiness,
        "favourite": cat.favourite,
    }


def _cat_from_dict(data: Dict[str, Any]) -> Cat:
    pairs = {}
    for trait in TRAITS:
        alleles = data["genotype"][trait.name]
        if len(alleles) != 2 or any(a not in (trait.dominant, trait.recessive) for a in alleles):
            raise SaveError(f"Invalid {trait.name} alleles for cat {data.get('id')}: {alleles}")
        pairs[trait.name] = (alleles[0], alleles[1])

    return Cat(
        id=str(data["id"]),
        name=str(data["name"]),
        genotype=Genotype(**pairs),
        age=int(data["age"]),
        happiness=int(data["happiness"]),
        favourite=bool(data.get("favourite", False)),
    )


def serialize_state(state: GameState) -> Dict[str, Any]:
    """GameState as plain JSON-compatible data."""
    return {
        "day": state.day,
        "money": state.money,
        "cats": [_cat_to_dict(cat) for cat in state.cats],
        "market": {
            "base_price": state.market.base_price,
            "trait_values": state.market.trait_values,
        },
        "market_inventory": [
            {"cat": _cat_to_dict(listing.cat), "price": listing.price}
            for listing in state.market_inventory
        ],
        "furniture": {
            "toys": state.furniture.toys,
            "beds": state.furniture.beds,
            "cat_trees": state.furniture.cat_trees,
        },
        "trait_collection": {
            "collected": [
                [key, {
                    "key": entry.key,
                    "phenotype": {trait.name: entry.phenotype.label(trait) for trait in TRAITS},
                    "cat_id": entry.cat_id,
                    "cat_name": entry.cat_name,
                    "day": entry.day,
                }]
                for key, entry in state.trait_collection.collected.items()
            ],
        },
        "breeding_pairs": [
            {"parent_a_id": pair.parent_a_id, "parent_b_id": pair.parent_b_id}
            for pair in state.breeding_pairs
        ],
        "cats_for_sale": list(state.cats_for_sale),
        "transactions": [
            {"kind": t.kind.value, "subject_id": t.subject_id, "amount": t.amount, "day": t.day}
            for t in state.transactions
        ],
        "total_cats_bred": state.total_cats_bred,
        "total_cats_sold": state.total_cats_sold,
    }


def _require_object(value: Any, field_name: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise SaveError(f"{field_name} must be an object, got {type(value).__name__}")
    return value


def _furniture_from_dict(data: Optional[Dict[str, Any]]) -> OwnedFurniture:
    # Older saves predate furniture, or only some item types
    data = _require_object(data or {}, "furniture")
    return OwnedFurniture(
        toys=int(data.get("toys", 0)),
        beds=int(data.get("beds", 0)),
        cat_trees=int(data.get("cat_trees", 0)),
    )


def _collection_from_entries(entries: List[List[Any]]) -> TraitCollection:
    collected = {}
    for key, entry in entries:
        collected[key] = CollectedTrait(
            key=entry["key"],
            phenotype=Phenotype(**{trait.name: entry["phenotype"][trait.name] for trait in TRAITS}),
            cat_id=entry["cat_id"],
            cat_name=entry["cat_name"],
            day=int(entry["day"]),
        )
    return TraitCollection(collected=collected)


def _trait_values_from_dict(data: Any) -> Dict[str, Dict[str, float]]:
    """Multiplier table with a numeric value for both labels of every trait."""
    data = _require_object(data, "trait_values")
    values = {}
    for trait in TRAITS:
        labels = _require_object(data.get(trait.name), f"trait_values.{trait.name}")
        values[trait.name] = {}
        for label in (trait.dominant_label, trait.recessive_label):
            multiplier = labels.get(label)
            if isinstance(multiplier, bool) or not isinstance(multiplier, (int, float)):
                raise SaveError(f"Missing or non-numeric {trait.name} multiplier for {label!r}")
            values[trait.name][label] = float(multiplier)
    return values


def deserialize_state(data: Dict[str, Any]) -> GameState:
    """
    Rebuild a GameState from plain data.

    Raises:
        SaveError, KeyError, TypeError, ValueError: malformed snapshot
    """
    if not isinstance(data, dict):
        raise SaveError(f"State must be an object, got {type(data).__name__}")

    market_data = _require_object(data.get("market") or {}, "market")
    market = MarketState()
    if market_data:
        market = MarketState(
            base_price=int(market_data["base_price"]),
            trait_values=_trait_values_from_dict(market_data["trait_values"]),
        )

    return GameState(
        day=int(data["day"]),
        money=int(data["money"]),
        cats=tuple(_cat_from_dict(c) for c in data["cats"]),
        market=market,
        market_inventory=tuple(
            MarketListing(cat=_cat_from_dict(item["cat"]), price=int(item["price"]))
            for item in data.get("market_inventory", [])
        ),
        furniture=_furniture_from_dict(data.get("furniture")),
        trait_collection=_collection_from_entries(
            _require_object(data.get("trait_collection") or {}, "trait_collection").get("collected", [])
        ),
        breeding_pairs=tuple(
            BreedingPair(p["parent_a_id"], p["parent_b_id"])
            for p in data.get("breeding_pairs", [])
        ),
        cats_for_sale=tuple(data.get("cats_for_sale", [])),
        transactions=tuple(
            Transaction(TransactionKind(t["kind"]), t["subject_id"], int(t["amount"]), int(t["day"]))
            for t in data.get("transactions", [])
        ),
        total_cats_bred=int(data.get("total_cats_bred", 0)),
        total_cats_sold=int(data.get("total_cats_sold", 0)),
    )


# =============================================================================
# SAVE / LOAD
# =============================================================================

@dataclass(frozen=True)
class LoadedGame:
    state: GameState
    seed: int


@dataclass(frozen=True)
class SaveInfo:
    """Save metadata, readable without restoring the state."""
    day: int
    money: int
    cat_count: int
    seed: int
    timestamp: float


def save_game(state: GameState, seed: int, store: SaveStore,
              timestamp: Optional[float] = None) -> bool:
    """Write a snapshot. Returns False if it could not be written."""
    snapshot = {
        "version": SAVE_VERSION,
        "timestamp": time.time() if timestamp is None else timestamp,
        "seed": seed,
        "state": serialize_state(state),
    }
    try:
        store.write(SAVE_KEY, json.dumps(snapshot))
    except (OSError, TypeError, ValueError) as e:
        logger.error(f"Failed to save game: {e}")
        return False

    logger.info(f"Saved game on day {state.day} (seed {seed})")
    return True


def _read_snapshot(store: SaveStore) -> Optional[Dict[str, Any]]:
    blob = store.read(SAVE_KEY)
    if blob is None:
        return None
    snapshot = json.loads(blob)
    if not isinstance(snapshot, dict):
        raise SaveError("Snapshot is not an object")
    return snapshot


def load_game(store: SaveStore) -> Optional[LoadedGame]:
    """Restore the saved game, or None if there is none or it is unreadable."""
    try:
        snapshot = _read_snapshot(store)
        if snapshot is None:
            return None

        version = snapshot.get("version")
        if version != SAVE_VERSION:
            logger.warning(f"Save version mismatch: {version} vs {SAVE_VERSION}, attempting load")

        state = deserialize_state(snapshot["state"])
        seed = int(snapshot["seed"])
    except (SaveError, OSError, KeyError, TypeError, ValueError) as e:
        logger.error(f"Failed to load game: {e}")
        return None

    logger.info(f"Loaded saved game from day {state.day}")
    return LoadedGame(state=state, seed=seed)


def has_saved_game(store: SaveStore) -> bool:
    return store.exists(SAVE_KEY)


def delete_save(store: SaveStore) -> None:
    store.delete(SAVE_KEY)


def get_save_info(store: SaveStore) -> Optional[SaveInfo]:
    try:
        snapshot = _read_snapshot(store)
        if snapshot is None:
            return None
        state = snapshot["state"]
        return SaveInfo(
            day=int(state["day"]),
            money=int(state["money"]),
            cat_count=len(state["cats"]),
            seed=int(snapshot["seed"]),
            timestamp=float(snapshot["timestamp"]),
        )
    except (SaveError, OSError, KeyError, TypeError, ValueError) as e:
        logger.error(f"Failed to read save info: {e}")
        return None
