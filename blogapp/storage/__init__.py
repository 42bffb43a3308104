from .collection import CollectionStore, StoragePort
from .json_store import JsonStore
from .memory_store import MemoryStore

__all__ = ["CollectionStore", "StoragePort", "JsonStore", "MemoryStore"]
