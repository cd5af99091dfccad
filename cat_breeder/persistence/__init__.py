"""
Cat Breeder - Persistence Package
Snapshot serialization and save storage backends.
"""

from .save import (
    SAVE_KEY,
    SAVE_VERSION,
    SaveError,
    SaveStore,
    MemorySaveStore,
    FileSaveStore,
    LoadedGame,
    SaveInfo,
    serialize_state,
    deserialize_state,
    save_game,
    load_game,
    has_saved_game,
    delete_save,
    get_save_info,
)

__all__ = [
    "SAVE_KEY",
    "SAVE_VERSION",
    "SaveError",
    "SaveStore",
    "MemorySaveStore",
    "FileSaveStore",
    "LoadedGame",
    "SaveInfo",
    "serialize_state",
    "deserialize_state",
    "save_game",
    "load_game",
    "has_saved_game",
    "delete_save",
    "get_save_info",
]
