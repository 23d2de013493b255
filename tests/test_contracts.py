import asyncio

import httpx
import pytest
from fastapi.testclient import TestClient

from app import create_app
from config import Settings
from routes import route_table

CONTRACT_ROUTES = [
    (contract, route.path)
    for contract in ("json", "text")
    for route in route_table(contract)
]


@pytest.fixture(scope="module")
def clients():
    apps = {contract: create_app(Settings(contract=contract)) for contract in ("json", "text")}
    with TestClient(apps["json"]) as json_client, TestClient(apps["text"]) as text_client:
        yield {"json": json_client, "text": text_client}


@pytest.mark.parametrize("contract,path", CONTRACT_ROUTES)
def test_repeated_calls_are_identical(clients, contract, path):
    responses = [clients[contract].get(path) for _ in range(10)]
    assert all(r.status_code == 200 for r in responses)
    assert len({r.content for r in responses}) == 1


@pytest.mark.parametrize("contract,path", CONTRACT_ROUTES)
def test_wrong_method_is_405(clients, contract, path):
    assert clients[contract].post(path).status_code == 405
    assert clients[contract].delete(path).status_code == 405


@pytest.mark.parametrize("contract", ["json", "text"])
def test_concurrent_health_checks(contract):
    app = create_app(Settings(contract=contract))

    async def hammer():
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as ac:
            return await asyncio.gather(*(ac.get("/health") for _ in range(100)))

    responses = asyncio.run(hammer())
    assert len(responses) == 100
    assert all(r.status_code == 200 for r in responses)
    assert len({r.content for r in responses}) == 1
