"""Pytest configuration and shared fixtures for provider/consumer tests."""

import socket
import threading
import time
from dataclasses import dataclass

import pytest
import requests
from provider_service.app import create_app
from provider_service.data_store import DEFAULT_DATA_COUNT, DataStore


@dataclass
class LiveProvider:
    """A provider application serving real HTTP on localhost."""

    url: str
    data_store: DataStore


def _start_provider(data_store: DataStore) -> str:
    app = create_app(data_store, enable_state_change=True)

    # Use port 0 to let the OS assign a free port
    sock = socket.socket()
    sock.bind(("", 0))
    port = sock.getsockname()[1]
    sock.close()

    def run_app() -> None:
        app.run(port=port, debug=False, use_reloader=False)

    # Daemon threads terminate with the test process, so no explicit cleanup
    thread = threading.Thread(target=run_app, daemon=True)
    thread.start()

    # Wait for server to be ready by polling the health endpoint
    url = f"http://localhost:{port}"
    max_retries = 20
    retry_delay = 0.1  # 100ms between retries

    for _ in range(max_retries):
        try:
            response = requests.get(f"{url}/health", timeout=1)
            if response.status_code == 200:
                break
        except requests.exceptions.RequestException:
            # Server not ready yet, wait and retry
            time.sleep(retry_delay)
    else:
        raise RuntimeError(f"Flask server failed to start on {url}")

    return url


@pytest.fixture(scope="module")
def live_provider() -> LiveProvider:
    """Start the provider in a separate thread with its own data store.

    This fixture is used by tests that need to make real HTTP requests
    to the provider (e.g., contract verification, integration, schema tests).
    """
    data_store = DataStore()
    return LiveProvider(url=_start_provider(data_store), data_store=data_store)


@pytest.fixture
def provider_url(live_provider: LiveProvider) -> str:
    """URL of the live provider, reset to its default data count."""
    live_provider.data_store.set(DEFAULT_DATA_COUNT)
    return live_provider.url
