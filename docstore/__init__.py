from __future__ import annotations

from .errors import DocumentStoreError, DuplicateKeyError
from .item_store import ItemStore
from .matcher import matches
from .memory_store import InMemoryDocumentStore
from .query import DeleteQuery, FindQuery, FindResult
from .registry import StoreRegistry
from .repositories import AsyncDocumentRepository

__all__ = [
    "AsyncDocumentRepository",
    "DeleteQuery",
    "DocumentStoreError",
    "DuplicateKeyError",
    "FindQuery",
    "FindResult",
    "InMemoryDocumentStore",
    "ItemStore",
    "StoreRegistry",
    "matches",
]
