from __future__ import annotations

import copy
import logging
import threading
import uuid
from typing import Any, Iterable, Mapping

from .errors import DuplicateKeyError
from .interfaces import DocumentStore
from .matcher import matches
from .query import (
    DeleteQuery,
    FindQuery,
    FindResult,
    coerce_delete_query,
    coerce_find_query,
)
from .values import MISSING, canonical_json, field_of

logger = logging.getLogger(__name__)


def document_key(document: Any) -> str:
    """
    Storage key for a document: its `id` when that is a string on an object
    document, otherwise a fresh uuid4.
    """
    explicit = field_of(document, "id")
    if isinstance(explicit, str):
        return explicit
    return str(uuid.uuid4())


def _sort_key(field: str):
    def key(document: Any) -> str:
        value = field_of(document, field)
        return canonical_json(None if value is MISSING else value)

    return key


class InMemoryDocumentStore(DocumentStore):
    """
    Documents held in a dict guarded by a single lock.

    - Every operation, reads included, holds the lock for its whole duration.
    - Lookups and filters are full scans; there are no indexes.
    - Values are deep-copied on the way in and out so callers never share
      mutable state with the store.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._docs: dict[str, Any] = {}

    def insert(self, documents: Iterable[Any]) -> None:
        # Not atomic across the batch: documents written before a duplicate
        # key stay committed.
        inserted = 0
        with self._lock:
            for document in documents:
                key = document_key(document)
                if key in self._docs:
                    logger.debug("DOCSTORE INSERT: duplicate key %r after %d inserted", key, inserted)
                    raise DuplicateKeyError(key)
                self._docs[key] = copy.deepcopy(document)
                inserted += 1
        logger.debug("DOCSTORE INSERT: %d documents", inserted)

    def delete(self, query: DeleteQuery | Mapping[str, Any] | None) -> int:
        q = coerce_delete_query(query)
        if q.where is None:
            return 0
        with self._lock:
            doomed = [k for k, v in self._docs.items() if matches(v, q.where)]
            for k in doomed:
                del self._docs[k]
        logger.debug("DOCSTORE DELETE: where=%r removed=%d", q.where, len(doomed))
        return len(doomed)

    def find(self, query: FindQuery | Mapping[str, Any] | None = None) -> FindResult:
        q = coerce_find_query(query)
        with self._lock:
            if q.where is None:
                selected = list(self._docs.values())
            else:
                selected = [v for v in self._docs.values() if matches(v, q.where)]
            total = len(selected)

            if q.sort is not None:
                selected.sort(key=_sort_key(q.sort))

            if q.paginated:
                start = q.page * q.size
                selected = selected[start : start + q.size]

            documents = copy.deepcopy(selected)
        logger.debug(
            "DOCSTORE FIND: where=%r sort=%s page=%s size=%s total=%d returned=%d",
            q.where,
            q.sort,
            q.page,
            q.size,
            total,
            len(documents),
        )
        return FindResult(documents=documents, total_count=total)

    def clear(self) -> None:
        with self._lock:
            self._docs.clear()
        logger.debug("DOCSTORE CLEAR")

    def size(self) -> int:
        with self._lock:
            return len(self._docs)
