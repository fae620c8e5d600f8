from __future__ import annotations

import logging
import threading

from .memory_store import InMemoryDocumentStore

logger = logging.getLogger(__name__)


class StoreRegistry:
    """
    Provides one store per collection name. Each store owns its own map and
    lock; the registry guard only protects the name -> store table.

    Only `store_for` creates collections; `get` never does.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._stores: dict[str, InMemoryDocumentStore] = {}

    def get(self, name: str) -> InMemoryDocumentStore | None:
        with self._guard:
            return self._stores.get(name)

    def store_for(self, name: str) -> InMemoryDocumentStore:
        with self._guard:
            store = self._stores.get(name)
            if store is None:
                store = InMemoryDocumentStore()
                self._stores[name] = store
                logger.debug("DOCSTORE REGISTRY: created collection %r", name)
            return store

    def names(self) -> list[str]:
        with self._guard:
            return sorted(self._stores)

    def drop(self, name: str) -> bool:
        with self._guard:
            dropped = self._stores.pop(name, None) is not None
        if dropped:
            logger.debug("DOCSTORE REGISTRY: dropped collection %r", name)
        return dropped
