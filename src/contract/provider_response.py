"""Provider JSON documents."""

from typing import Literal, NotRequired, TypedDict

# Provider states named by consumer contracts
DATA_COUNT_POSITIVE = "data count > 0"
DATA_COUNT_ZERO = "data count == 0"


class ProviderResponse(TypedDict):
    test: str
    validDate: str
    count: int


class ErrorResponse(TypedDict):
    error: str


class StateChangeRequest(TypedDict):
    state: str
    action: NotRequired[Literal["setup", "teardown"]]
    params: NotRequired[dict[str, object]]
