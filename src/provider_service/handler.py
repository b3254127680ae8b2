"""
Request handling for ``GET /provider.json``.

Validation is a pure function of the query parameter, the current data count
and the clock. It returns either a :class:`Snapshot` or one of the error
results, and :func:`to_flask_response` maps that outcome onto HTTP.
"""

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from contract import (
    ErrorResponse,
    ProviderResponse,
    format_offset_timestamp,
    parse_local_datetime,
)

from provider_service.common import FlaskResponse

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


@dataclass(frozen=True)
class Snapshot:
    """Successful outcome: the data the provider has for the requested date."""

    valid_date: datetime
    count: int

    def to_json(self) -> ProviderResponse:
        return ProviderResponse(
            test="NO",
            validDate=format_offset_timestamp(self.valid_date),
            count=self.count,
        )


@dataclass(frozen=True)
class ParameterRequired:
    """A required query parameter was missing or empty."""

    message: str


@dataclass(frozen=True)
class InvalidParameter:
    """A query parameter was present but could not be parsed."""

    message: str


@dataclass(frozen=True)
class NoData:
    """The provider has no data to serve."""


type ValidationResult = Snapshot | ParameterRequired | InvalidParameter | NoData


def _now() -> datetime:
    return datetime.now().astimezone()


def validate_provider_request(
    valid_date: str | None,
    data_count: int,
    clock: Callable[[], datetime] = _now,
) -> ValidationResult:
    """
    Decide the outcome of a ``GET /provider.json`` request.

    Checks short-circuit in this order: missing parameter, no data,
    unparsable date. A zero data count therefore yields :class:`NoData` whether
    or not the date is valid.

    :param valid_date: The raw ``validDate`` query parameter, if supplied.
    :param data_count: Current data availability count.
    :param clock: Returns the current, timezone-aware time.
    :returns: The outcome of the request.
    """
    if not valid_date:
        return ParameterRequired("validDate is required")

    if data_count <= 0:
        return NoData()

    try:
        parse_local_datetime(valid_date)
    except ValueError:
        return InvalidParameter(f"'{valid_date}' is not a date")

    return Snapshot(valid_date=clock(), count=data_count)


def to_flask_response(result: ValidationResult) -> FlaskResponse:
    """
    Map a validation outcome onto its HTTP representation.

    :param result: Outcome from :func:`validate_provider_request`.
    :returns: 200 with the snapshot, 400 with an error body, or 404 with no body.
    """
    match result:
        case Snapshot():
            return FlaskResponse(
                status_code=200,
                data=json.dumps(result.to_json()),
                headers=dict(JSON_HEADERS),
            )
        case ParameterRequired(message) | InvalidParameter(message):
            logger.info("Rejected provider request: %s", message)
            return FlaskResponse(
                status_code=400,
                data=json.dumps(ErrorResponse(error=message)),
                headers=dict(JSON_HEADERS),
            )
        case NoData():
            logger.info("No data available for provider request")
            return FlaskResponse(status_code=404)
