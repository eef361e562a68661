import pytest
from fastapi.testclient import TestClient
from config import FormOptions
from main import create_app

@pytest.fixture
def options():
    return FormOptions.from_lists(
        countries=["USA", "Canada"],
        languages=["Java", "Go"],
        operating_systems=["Linux", "Windows"],
    )

@pytest.fixture
def client(options):
    return TestClient(create_app(options))
