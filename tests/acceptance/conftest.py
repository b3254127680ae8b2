"""Fixtures shared by the acceptance scenarios."""

from dataclasses import dataclass

import pytest
from consumer_client import ConsumerResult
from requests import Response


@dataclass
class ResponseContext:
    """What the last When step observed, on the wire and in the consumer."""

    response: Response | None = None
    result: ConsumerResult | None = None


@pytest.fixture
def response_context() -> ResponseContext:
    return ResponseContext()
