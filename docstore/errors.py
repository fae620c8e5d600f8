from __future__ import annotations


class DocumentStoreError(Exception):
    pass


class DuplicateKeyError(DocumentStoreError):
    """Raised by insert when a document's explicit `id` is already stored."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Document with key '{key}' already exists.")
