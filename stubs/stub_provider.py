"""
Minimal in-memory stub for the provider service, implementing only
``GET /provider.json``.

Contract elements:
    - Method: GET
    - Path: /provider.json
    - Query: validDate, a local date-time such as 2024-01-01T10:00:00

Responses:
    200: {"test": "NO", "validDate": "<offset timestamp>", "count": <int>}
    400: {"error": "validDate is required"} or {"error": "'<value>' is not a date"}
    404: empty body when the stub holds no data
"""

import json
from typing import Any
from urllib.parse import urlsplit

from contract import ErrorResponse, ProviderResponse, parse_local_datetime
from requests import Response
from requests.structures import CaseInsensitiveDict

REASONS = {200: "OK", 400: "Bad Request", 404: "Not Found"}


def stub_response(status_code: int, content: bytes = b"") -> Response:
    """
    Build the :class:`requests.Response` the consumer would receive from the
    provider.

    A non-empty body is labelled as JSON whatever it contains. An empty body
    carries no headers.
    """
    response = Response()
    response.status_code = status_code
    response.reason = REASONS.get(status_code, "")
    response.headers = CaseInsensitiveDict(
        {"Content-Type": "application/json"} if content else {}
    )
    response._content = content  # noqa: SLF001
    response.encoding = "utf-8"
    return response


def _json_response(
    status_code: int, body: ProviderResponse | ErrorResponse
) -> Response:
    return stub_response(status_code, json.dumps(body).encode("utf-8"))


class ProviderStub:
    """
    A minimal in-memory stub for the provider service.

    Seeded with a fixed ``validDate`` so tests can assert on the parsed value.
    """

    VALID_DATE = "2013-08-16T15:31:20+10:00"

    def __init__(self, data_count: int = 100, valid_date: str = VALID_DATE) -> None:
        self.data_count = data_count
        self.valid_date = valid_date
        self.requests: list[dict[str, Any]] = []

    def provider_json(self, valid_date: str | None) -> Response:
        """
        Simulate ``GET /provider.json``.

        returns:
            Response: The stub document or error wrapped in a Response object.
        """
        if not valid_date:
            body = ErrorResponse(error="validDate is required")
            return _json_response(400, body)

        if self.data_count == 0:
            return stub_response(404)

        try:
            parse_local_datetime(valid_date)
        except ValueError:
            body = ErrorResponse(error=f"'{valid_date}' is not a date")
            return _json_response(400, body)

        document = ProviderResponse(
            test="NO", validDate=self.valid_date, count=self.data_count
        )
        return _json_response(200, document)

    def get(
        self,
        url: str,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> Response:
        """A stubbed requests.get function that routes to :meth:`provider_json`."""
        self.requests.append(
            {"url": url, "params": params, "headers": headers, "timeout": timeout}
        )
        if not urlsplit(url).path.endswith("/provider.json"):
            return stub_response(404)
        return self.provider_json((params or {}).get("validDate"))

