from __future__ import annotations

import asyncio
from typing import Any, Mapping

from .query import DeleteQuery, FindQuery, FindResult, coerce_delete_query, coerce_find_query
from .registry import StoreRegistry


class AsyncDocumentRepository:
    """
    Async wrapper around per-collection in-memory stores.
    Uses asyncio.to_thread so a contended store lock never blocks the event loop.

    Only `insert` creates a collection. Reads, deletes and clears on an
    unknown collection behave as on an empty one and leave no trace.
    """

    def __init__(self, registry: StoreRegistry | None = None) -> None:
        self._registry = registry if registry is not None else StoreRegistry()

    @property
    def registry(self) -> StoreRegistry:
        return self._registry

    async def insert(self, collection: str, documents: list[Any]) -> None:
        store = self._registry.store_for(collection)
        await asyncio.to_thread(store.insert, documents)

    async def delete(self, collection: str, query: DeleteQuery | Mapping[str, Any] | None) -> int:
        q = coerce_delete_query(query)
        store = self._registry.get(collection)
        if store is None:
            return 0
        return await asyncio.to_thread(store.delete, q)

    async def find(self, collection: str, query: FindQuery | Mapping[str, Any] | None = None) -> FindResult:
        q = coerce_find_query(query)
        store = self._registry.get(collection)
        if store is None:
            return FindResult()
        return await asyncio.to_thread(store.find, q)

    async def clear(self, collection: str) -> None:
        store = self._registry.get(collection)
        if store is None:
            return
        await asyncio.to_thread(store.clear)

    async def size(self, collection: str) -> int:
        store = self._registry.get(collection)
        if store is None:
            return 0
        return await asyncio.to_thread(store.size)

    async def drop(self, collection: str) -> bool:
        return self._registry.drop(collection)

    async def collections(self) -> list[str]:
        return self._registry.names()
