from __future__ import annotations

import importlib
from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def store():
    from docstore import InMemoryDocumentStore

    return InMemoryDocumentStore()


@pytest.fixture
def reload_endpoints(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Endpoints create the shared repository at import time; reload so every test
    starts with empty collections and the current environment's settings.
    """
    monkeypatch.setenv("DOCSTORE_DEFAULT_COLLECTION", "default")
    import endpoints.store_endpoints as store_endpoints
    import endpoints.mcp_endpoints as mcp_endpoints

    importlib.reload(store_endpoints)
    importlib.reload(mcp_endpoints)
