"""Pytest configuration and shared fixtures for provider service tests."""

from collections.abc import Generator
from datetime import datetime, timedelta, timezone

import pytest
from flask import Flask
from flask.testing import FlaskClient

from provider_service.app import create_app
from provider_service.data_store import DataStore

FIXED_NOW = datetime(2024, 1, 1, 10, 0, 5, 250000, tzinfo=timezone(timedelta(hours=10)))


@pytest.fixture
def data_store() -> DataStore:
    return DataStore()


@pytest.fixture
def app(data_store: DataStore) -> Flask:
    provider_app = create_app(data_store, enable_state_change=True)
    provider_app.config["TESTING"] = True
    return provider_app


@pytest.fixture
def client(app: Flask) -> Generator[FlaskClient, None, None]:
    with app.test_client() as client:
        yield client


@pytest.fixture
def fixed_clock() -> datetime:
    return FIXED_NOW
