import pytest
from fastapi.testclient import TestClient

from app import create_app
from config import Settings


@pytest.fixture
def json_app():
    return create_app(Settings(contract="json"))


@pytest.fixture
def text_app():
    return create_app(Settings(contract="text"))


@pytest.fixture
def client(json_app):
    with TestClient(json_app) as c:
        yield c


@pytest.fixture
def text_client(text_app):
    with TestClient(text_app) as c:
        yield c
