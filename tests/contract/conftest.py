"""Pytest configuration and shared fixtures for Pact contract tests."""

from collections.abc import Generator
from pathlib import Path

import pytest
from pact import Pact

CONSUMER_NAME = "OurLittleConsumer"
PROVIDER_NAME = "OurProvider"
PACT_DIR = Path(__file__).parent / "pacts"
PACT_FILE = PACT_DIR / f"{CONSUMER_NAME}-{PROVIDER_NAME}.json"


@pytest.fixture(scope="module")
def fresh_pact_file() -> Path:
    """Remove the contract left by a previous run before consumer tests add to it."""
    PACT_FILE.unlink(missing_ok=True)
    return PACT_FILE


@pytest.fixture
def pact(fresh_pact_file: Path) -> Generator[Pact, None, None]:
    """A consumer contract whose interactions are merged into the pact file."""
    pact = Pact(consumer=CONSUMER_NAME, provider=PROVIDER_NAME).with_specification(
        "V4"
    )
    yield pact
    pact.write_file(fresh_pact_file.parent)
