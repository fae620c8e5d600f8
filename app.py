from __future__ import annotations

import contextlib
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    from endpoints.mcp_endpoints import mcp

    async with mcp.session_manager.run():
        yield


def create_app() -> FastAPI:
    load_dotenv("local.env")

    from endpoints.mcp_endpoints import mcp
    from endpoints.store_endpoints import router as store_router
    from settings import get_settings

    settings = get_settings()
    mcp.settings.streamable_http_path = "/"

    app = FastAPI(lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.post("/mcp")
    async def mcp_redirect_post():
        return RedirectResponse(url="/mcp/", status_code=307)

    @app.get("/mcp")
    async def mcp_redirect_get():
        return RedirectResponse(url="/mcp/", status_code=307)

    @app.get("/healthz")
    async def healthz():
        return JSONResponse({"status": "ok", "defaultCollection": settings.default_collection})

    app.include_router(store_router)

    app.mount("/mcp", mcp.streamable_http_app())

    logger.debug("DOCSTORE APP: created (default collection %s)", settings.default_collection)
    return app


app = create_app()
