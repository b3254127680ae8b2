"""Consumer of the provider service."""

from consumer_client.client import (
    ConsumerResult,
    ProviderClient,
    ProviderTransportError,
)

__all__ = ["ConsumerResult", "ProviderClient", "ProviderTransportError"]
