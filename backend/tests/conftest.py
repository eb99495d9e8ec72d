# conftest.py
# Shared fixtures: a TestClient over a freshly built app and the mock dataset.

import pytest
from fastapi.testclient import TestClient

from app.models.school_hierarchy import load_mock_dataset
from main import create_app


@pytest.fixture
def client():
    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture
def dataset():
    return load_mock_dataset()
