from __future__ import annotations

import asyncio


def test_mcp_tools_basic_flow(reload_endpoints):
    async def _run():
        import endpoints.mcp_endpoints as mcp

        r = await mcp.insert_documents([{"id": "a", "n": 9}, {"id": "b", "n": 10}, {"n": 1}])
        assert r["structuredContent"]["summary"] == {"collection": "default", "size": 3}

        r = await mcp.find_documents(sort="n", page=0, size=2)
        assert [d["n"] for d in r["structuredContent"]["documents"]] == [1, 10]
        assert r["structuredContent"]["summary"]["totalCount"] == 3

        r = await mcp.insert_documents([{"id": "a"}])
        assert "already exists" in r["content"][0]["text"]

        r = await mcp.delete_documents()
        assert "nothing deleted" in r["content"][0]["text"]

        r = await mcp.delete_documents(where={"id": "a"})
        assert r["structuredContent"]["summary"]["size"] == 2

        r = await mcp.collection_size()
        assert r["structuredContent"]["summary"]["size"] == 2

        r = await mcp.clear_collection()
        r = await mcp.collection_size()
        assert r["structuredContent"]["summary"]["size"] == 0

    asyncio.run(_run())


def test_mcp_tools_validate_input(reload_endpoints):
    async def _run():
        import endpoints.mcp_endpoints as mcp

        r = await mcp.find_documents(page=-1, size=2)
        assert r["content"][0]["text"].startswith("Invalid input")

        r = await mcp.collection_size(collection="  ")
        assert "collection" in r["content"][0]["text"]

    asyncio.run(_run())


def test_mcp_and_http_share_collections(reload_endpoints):
    async def _run():
        import endpoints.mcp_endpoints as mcp
        import endpoints.store_endpoints as store_endpoints

        await mcp.insert_documents([{"id": "x"}], collection="shared")
        assert await store_endpoints.DOCUMENT_REPO.size("shared") == 1

    asyncio.run(_run())


def test_mcp_drop_collection(reload_endpoints):
    async def _run():
        import endpoints.mcp_endpoints as mcp
        import endpoints.store_endpoints as store_endpoints

        r = await mcp.collection_size(collection="nothing")
        assert r["structuredContent"]["summary"]["size"] == 0
        assert await store_endpoints.DOCUMENT_REPO.collections() == []

        await mcp.insert_documents([{"id": "x"}], collection="tmp")
        r = await mcp.drop_collection("tmp")
        assert r["content"][0]["text"] == "Dropped tmp."
        assert await store_endpoints.DOCUMENT_REPO.collections() == []

        r = await mcp.drop_collection("tmp")
        assert "not found" in r["content"][0]["text"]

    asyncio.run(_run())
