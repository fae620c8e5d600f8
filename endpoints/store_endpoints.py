from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from docstore import AsyncDocumentRepository, DeleteQuery, DuplicateKeyError, FindQuery, FindResult
from settings import get_settings

router = APIRouter(prefix="/collections", tags=["collections"])
logger = logging.getLogger(__name__)

SETTINGS = get_settings()
DEBUG_LOG_QUERIES = SETTINGS.debug_log_queries

# Shared with the MCP tools so both surfaces see the same collections.
DOCUMENT_REPO = AsyncDocumentRepository()


class InsertRequest(BaseModel):
    documents: list[Any] = Field(default_factory=list)


@router.get("")
async def list_collections() -> dict[str, Any]:
    return {"collections": await DOCUMENT_REPO.collections()}


@router.post("/{name}/documents")
async def insert_documents(name: str, body: InsertRequest) -> dict[str, Any]:
    try:
        await DOCUMENT_REPO.insert(name, body.documents)
    except DuplicateKeyError as e:
        logger.info("INSERT %s: duplicate key %r", name, e.key)
        raise HTTPException(status_code=409, detail=str(e)) from e
    return {"inserted": len(body.documents)}


@router.post("/{name}/find", response_model=FindResult)
async def find_documents(name: str, query: FindQuery) -> FindResult:
    if DEBUG_LOG_QUERIES:
        logger.info("FIND %s: %s", name, query.model_dump(exclude_none=True))
    return await DOCUMENT_REPO.find(name, query)


@router.post("/{name}/delete")
async def delete_documents(name: str, query: DeleteQuery) -> dict[str, Any]:
    if DEBUG_LOG_QUERIES:
        logger.info("DELETE %s: %s", name, query.model_dump(exclude_none=True))
    deleted = await DOCUMENT_REPO.delete(name, query)
    return {"deleted": deleted}


@router.delete("/{name}")
async def clear_collection(name: str, drop: bool = False) -> dict[str, Any]:
    if drop:
        return {"dropped": await DOCUMENT_REPO.drop(name)}
    await DOCUMENT_REPO.clear(name)
    return {"cleared": True}


@router.get("/{name}/size")
async def collection_size(name: str) -> dict[str, Any]:
    return {"size": await DOCUMENT_REPO.size(name)}
