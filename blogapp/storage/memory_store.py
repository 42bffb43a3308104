import copy
from typing import Any, Dict, List


class MemoryStore:
    """In-process stand-in for JsonStore, mainly for tests.

    Records are deep-copied on the way in and out so callers can't mutate
    what is "on disk" without going through save().
    """

    def __init__(self, initial: Dict[str, List[Dict[str, Any]]] | None = None):
        self.collections: Dict[str, List[Dict[str, Any]]] = copy.deepcopy(initial or {})
        self.saves = 0

    def load(self, collection: str) -> List[Dict[str, Any]]:
        return copy.deepcopy(self.collections.get(collection, []))

    def save(self, collection: str, records: List[Dict[str, Any]]):
        if not isinstance(records, list):
            raise TypeError("records must be a list")
        self.collections[collection] = copy.deepcopy(records)
        self.saves += 1
