from __future__ import annotations

from typing import Any, Iterable, Mapping, Protocol

from .query import DeleteQuery, FindQuery, FindResult


class DocumentStore(Protocol):
    """
    Keyed collection of JSON-like documents with exact-match queries.
    """

    def insert(self, documents: Iterable[Any]) -> None:
        """Store each document under its string `id`, or a generated key."""
        ...

    def delete(self, query: DeleteQuery | Mapping[str, Any] | None) -> int:
        """Remove every document matching `where`; no-op when `where` is absent."""
        ...

    def find(self, query: FindQuery | Mapping[str, Any] | None = None) -> FindResult:
        ...

    def clear(self) -> None:
        ...

    def size(self) -> int:
        ...
