from __future__ import annotations

import copy
import threading
from typing import Any


class ItemStore:
    """
    Superseded single-key get/set API (`setItem` / `getItem`).

    Kept for callers of the older surface. It has its own map and does not
    share keys, ids or query semantics with InMemoryDocumentStore; new code
    should use the document store.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._items: dict[str, Any] = {}

    def set_item(self, key: str, value: Any) -> None:
        with self._lock:
            self._items[key] = copy.deepcopy(value)

    def get_item(self, key: str) -> Any | None:
        with self._lock:
            return copy.deepcopy(self._items.get(key))
