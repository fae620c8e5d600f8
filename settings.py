from __future__ import annotations

import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: str) -> list[str]:
    raw = os.getenv(name, default)
    return [part.strip() for part in raw.split(",") if part.strip()]


@dataclass(frozen=True)
class Settings:
    # Collections
    default_collection: str

    # HTTP
    cors_origins: list[str]

    # Debug
    debug_log_queries: bool

    # MCP transport
    mcp_dns_rebinding_protection: bool


def get_settings() -> Settings:
    default_collection = os.getenv("DOCSTORE_DEFAULT_COLLECTION", "default").strip() or "default"

    cors_origins = _env_list("DOCSTORE_CORS_ORIGINS", "*")

    debug_log_queries = _env_bool("DEBUG_LOG_QUERIES", False)

    # Off by default so the server is reachable through tunnels/proxies that rewrite Host.
    mcp_dns_rebinding_protection = _env_bool("MCP_DNS_REBINDING_PROTECTION", False)

    return Settings(
        default_collection=default_collection,
        cors_origins=cors_origins,
        debug_log_queries=debug_log_queries,
        mcp_dns_rebinding_protection=mcp_dns_rebinding_protection,
    )
