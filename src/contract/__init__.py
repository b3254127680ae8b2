"""Wire types and formats shared by the provider service and its consumer."""

from contract.provider_response import (
    DATA_COUNT_POSITIVE,
    DATA_COUNT_ZERO,
    ErrorResponse,
    ProviderResponse,
    StateChangeRequest,
)
from contract.timestamps import (
    DATE_FORMAT,
    format_offset_timestamp,
    parse_local_datetime,
    parse_offset_timestamp,
)

__all__ = [
    "DATA_COUNT_POSITIVE",
    "DATA_COUNT_ZERO",
    "DATE_FORMAT",
    "ErrorResponse",
    "ProviderResponse",
    "StateChangeRequest",
    "format_offset_timestamp",
    "parse_local_datetime",
    "parse_offset_timestamp",
]
