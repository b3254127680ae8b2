"""
Module: consumer_client.client

This module contains the ProviderClient class, a small client for the
provider service's ``GET /provider.json`` endpoint.

Usage:
    Instantiate a ProviderClient with:
        - base_url: The provider's base URL, e.g. ``http://localhost:8080``.
        - timeout: Seconds to wait for the provider before giving up.

    Use the `fetch_and_process_data` method to load the provider data:
        Parameters:
            - date_time (str | None): Sent as the ``validDate`` query parameter.
              Omitted from the request when empty.

    Returns:
        A ConsumerResult holding the derived ratio and the provider timestamp.
        Any non-200 answer from the provider gives the degraded result
        ``ConsumerResult(ratio=0, timestamp=None)``.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Any

import requests
from contract import parse_offset_timestamp
from requests import RequestException, Response

logger = logging.getLogger(__name__)

PROVIDER_PATH = "/provider.json"
DEFAULT_TIMEOUT = 10

GetCallable = Callable[..., Response]
get: GetCallable = requests.get


class ProviderTransportError(Exception):
    """
    Exception raised when the provider cannot be reached or its answer cannot be
    decoded.
    """


@dataclass(frozen=True)
class ConsumerResult:
    """
    Values derived from a provider response.

    :param ratio: ``100 // count``, or ``0`` when the provider had no data.
    :param timestamp: The provider's ``validDate``, or ``None`` when the provider
        had no data.
    """

    ratio: int
    timestamp: datetime | None = None


NO_DATA = ConsumerResult(ratio=0, timestamp=None)


class ProviderClient:
    """
    A client for the provider service.

    Attributes:
        base_url (str): The provider's base URL without a trailing slash.
        timeout (float): Request timeout in seconds.

    Methods:
        load_provider_json(date_time: str | None) -> dict[str, Any] | None:
            Fetch the raw provider document.
        fetch_and_process_data(date_time: str | None) -> ConsumerResult:
            Fetch the provider document and derive the consumer values.
    """

    def __init__(self, base_url: str, *, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def load_provider_json(self, date_time: str | None) -> dict[str, Any] | None:
        """
        Request the provider document.

        Args:
            date_time (str | None): Value for the ``validDate`` query parameter.

        Returns:
            dict[str, Any] | None: The decoded body of a 200 response, otherwise
            ``None``.

        Raises:
            ProviderTransportError: If the request fails or a 200 body is not a
            JSON object.
        """
        params = {"validDate": date_time} if date_time else None

        try:
            response = get(
                f"{self.base_url}{PROVIDER_PATH}",
                params=params,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
        except RequestException as err:
            raise ProviderTransportError(
                f"Provider request to {self.base_url} failed: {err}"
            ) from err

        logger.debug(
            "Provider responded: status=%s body=%r", response.status_code, response.text
        )

        if response.status_code != 200:
            return None

        try:
            body = response.json()
        except ValueError as err:
            raise ProviderTransportError(
                "Provider returned a body that is not valid JSON"
            ) from err

        if not isinstance(body, dict):
            raise ProviderTransportError(
                "Provider returned a body that is not an object"
            )
        return body

    def fetch_and_process_data(self, date_time: str | None) -> ConsumerResult:
        """
        Fetch the provider document and derive the ratio and timestamp.

        Args:
            date_time (str | None): Value for the ``validDate`` query parameter.

        Returns:
            ConsumerResult: ``100 // count`` and the parsed ``validDate``, or the
            degraded result when the provider did not answer 200.

        Raises:
            ProviderTransportError: If the provider is unreachable or its answer
            is malformed.
        """
        data = self.load_provider_json(date_time)
        logger.info("data=%s", data)

        if data is None:
            return NO_DATA

        count = data.get("count")
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise ProviderTransportError(
                f"Provider returned an invalid count: {count!r}"
            )

        if count == 0:
            # A provider with no data answers 404, so this is a malformed 200
            logger.warning("Provider returned a zero count with a 200 response")
            return NO_DATA

        valid_date = data.get("validDate")
        try:
            timestamp = parse_offset_timestamp(valid_date)  # type: ignore[arg-type]
        except (TypeError, ValueError) as err:
            raise ProviderTransportError(
                f"Provider returned an invalid validDate: {valid_date!r}"
            ) from err

        value = 100 // count
        logger.info("value=%d", value)
        logger.info("date=%s", timestamp.isoformat())
        return ConsumerResult(ratio=value, timestamp=timestamp)
