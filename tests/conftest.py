"""Pytest fixtures: an in-memory campground store and a client bound to it."""

import pytest
from fastapi.testclient import TestClient

from src.api.app import create_app
from src.db.database import CampgroundStore
from src.models.campground import CampgroundIn


@pytest.fixture
def store():
    store = CampgroundStore("sqlite://")
    store.create_tables()
    return store


@pytest.fixture
def client(store):
    with TestClient(create_app(store)) as client:
        yield client


@pytest.fixture
def pine_ridge():
    return CampgroundIn(title="Pine Ridge", price=25, description="quiet", location="CO")
