from __future__ import annotations

import logging
from typing import Any, Literal

from pydantic import ValidationError
from typing_extensions import NotRequired, TypedDict

from mcp.server.fastmcp import FastMCP
from mcp.server.transport_security import TransportSecuritySettings

from docstore import DeleteQuery, DuplicateKeyError, FindQuery
from endpoints.store_endpoints import DOCUMENT_REPO
from settings import get_settings

SETTINGS = get_settings()
DEFAULT_COLLECTION = SETTINGS.default_collection

logger = logging.getLogger(__name__)


class ToolTextContent(TypedDict):
    type: Literal["text"]
    text: str


class CollectionSummary(TypedDict):
    collection: str
    size: int
    totalCount: NotRequired[int]


class StoreToolResponse(TypedDict, total=False):
    content: list[ToolTextContent]
    structuredContent: dict[str, Any]


def _collection_name(value: Any) -> str | None:
    if value is None:
        return DEFAULT_COLLECTION
    if not isinstance(value, str) or not value.strip():
        return None
    return value.strip()


def _validation_message(e: ValidationError) -> str:
    first = e.errors()[0] if e.errors() else {}
    loc = ".".join(str(p) for p in first.get("loc", ()))
    return f"Invalid input: `{loc}` {first.get('msg', 'is invalid')}."


def _reply(
    message: str | None = None,
    *,
    documents: list[Any] | None = None,
    summary: CollectionSummary | None = None,
) -> StoreToolResponse:
    structured: dict[str, Any] = {}
    if documents is not None:
        structured["documents"] = documents
    if summary is not None:
        structured["summary"] = summary
    return {
        "content": ([{"type": "text", "text": message}] if message else []),
        "structuredContent": structured,
    }


mcp = FastMCP(
    "Document store",
    stateless_http=True,
    json_response=True,
    transport_security=TransportSecuritySettings(
        enable_dns_rebinding_protection=SETTINGS.mcp_dns_rebinding_protection
    ),
)


@mcp.tool()
async def insert_documents(documents: list[Any], collection: str | None = None) -> StoreToolResponse:
    """
    Inserts JSON documents. A document's string `id` becomes its key; others get a generated id.
    """
    name = _collection_name(collection)
    if name is None:
        return _reply("Invalid input: `collection` must be a non-empty string.")
    if not isinstance(documents, list):
        return _reply("Invalid input: `documents` must be a list.")
    try:
        await DOCUMENT_REPO.insert(name, documents)
    except DuplicateKeyError as e:
        # Earlier documents of the batch are already stored.
        logger.info("MCP INSERT %s: duplicate key %r", name, e.key)
        size = await DOCUMENT_REPO.size(name)
        return _reply(str(e), summary={"collection": name, "size": size})
    size = await DOCUMENT_REPO.size(name)
    return _reply(
        f"Inserted {len(documents)} documents into {name}.",
        summary={"collection": name, "size": size},
    )


@mcp.tool()
async def find_documents(
    where: dict[str, Any] | None = None,
    sort: str | None = None,
    page: int | None = None,
    size: int | None = None,
    collection: str | None = None,
) -> StoreToolResponse:
    """
    Finds documents whose top-level fields equal every field of `where`,
    optionally sorted by a field and paged with `page`/`size`.
    """
    name = _collection_name(collection)
    if name is None:
        return _reply("Invalid input: `collection` must be a non-empty string.")
    try:
        query = FindQuery(where=where, sort=sort, page=page, size=size)
    except ValidationError as e:
        return _reply(_validation_message(e))
    if SETTINGS.debug_log_queries:
        logger.info("MCP FIND %s: %s", name, query.model_dump(exclude_none=True))
    result = await DOCUMENT_REPO.find(name, query)
    return _reply(
        f"Found {result.total_count} documents in {name}; returning {len(result.documents)}.",
        documents=result.documents,
        summary={
            "collection": name,
            "size": await DOCUMENT_REPO.size(name),
            "totalCount": result.total_count,
        },
    )


@mcp.tool()
async def delete_documents(where: dict[str, Any] | None = None, collection: str | None = None) -> StoreToolResponse:
    """
    Deletes documents matching `where`. Without `where` nothing is deleted; use clear_collection instead.
    """
    name = _collection_name(collection)
    if name is None:
        return _reply("Invalid input: `collection` must be a non-empty string.")
    if SETTINGS.debug_log_queries:
        logger.info("MCP DELETE %s: where=%r", name, where)
    deleted = await DOCUMENT_REPO.delete(name, DeleteQuery(where=where))
    size = await DOCUMENT_REPO.size(name)
    msg = f"Deleted {deleted} documents from {name}." if where is not None else "No `where` given; nothing deleted."
    return _reply(msg, summary={"collection": name, "size": size})


@mcp.tool()
async def clear_collection(collection: str | None = None) -> StoreToolResponse:
    """
    Removes every document from a collection.
    """
    name = _collection_name(collection)
    if name is None:
        return _reply("Invalid input: `collection` must be a non-empty string.")
    await DOCUMENT_REPO.clear(name)
    return _reply(f"Cleared {name}.", summary={"collection": name, "size": 0})


@mcp.tool()
async def collection_size(collection: str | None = None) -> StoreToolResponse:
    """
    Returns the number of documents stored in a collection.
    """
    name = _collection_name(collection)
    if name is None:
        return _reply("Invalid input: `collection` must be a non-empty string.")
    size = await DOCUMENT_REPO.size(name)
    return _reply(f"{name} holds {size} documents.", summary={"collection": name, "size": size})


@mcp.tool()
async def drop_collection(collection: str) -> StoreToolResponse:
    """
    Removes a collection and all of its documents.
    """
    name = _collection_name(collection)
    if name is None:
        return _reply("Invalid input: `collection` must be a non-empty string.")
    if not await DOCUMENT_REPO.drop(name):
        return _reply(f"Collection {name} was not found.")
    return _reply(f"Dropped {name}.", summary={"collection": name, "size": 0})
