# tests/test_smoke.py
import httpx
import pytest

from bentogrid.main import app


def _client() -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://testserver")


@pytest.mark.asyncio
async def test_health():
    async with _client() as c:
        r = await c.get("/health")
        assert r.status_code == 200
        j = r.json()
        assert j.get("ok") is True


@pytest.mark.asyncio
async def test_sample_layout():
    async with _client() as c:
        r = await c.get("/api/layout/sample", params={"seed": 5})
        assert r.status_code == 200
        j = r.json()
        assert j["columns"] == 6
        assert len(j["items"]) == 12
        assert j["stats"]["max_overlap"] == 1
        # тот же seed: та же раскладка
        r2 = await c.get("/api/layout/sample", params={"seed": 5})
        assert r2.json() == j


@pytest.mark.asyncio
async def test_sample_layout_without_shuffle_keeps_order():
    async with _client() as c:
        r = await c.get("/api/layout/sample", params={"shuffle": "false", "columns": 4})
        assert r.status_code == 200
        j = r.json()
        assert j["columns"] == 4
        assert [it["id"] for it in j["items"]] == [str(i) for i in range(1, 13)]
