"""
Provider-state handling for contract verification.

Consumer contracts name the state the provider must be in before an
interaction is replayed. These helpers put the :class:`DataStore` into that
state.
"""

import logging
from typing import cast

from contract import DATA_COUNT_POSITIVE, DATA_COUNT_ZERO, StateChangeRequest

from provider_service.data_store import DEFAULT_DATA_COUNT, DataStore

logger = logging.getLogger(__name__)

STATE_DATA_COUNTS: dict[str, int] = {
    DATA_COUNT_POSITIVE: DEFAULT_DATA_COUNT,
    DATA_COUNT_ZERO: 0,
}


class StateChangeError(Exception):
    """Raised when a state change request body is not usable."""


def apply_state_change(store: DataStore, body: object) -> None:
    """
    Apply a state change request to the data store.

    Unknown states are ignored, as are teardown requests.

    :param store: The provider's data store.
    :param body: Decoded JSON request body.
    :raises StateChangeError: If the body has no string ``state``.
    """
    if not isinstance(body, dict) or not isinstance(body.get("state"), str):
        raise StateChangeError('State change body must contain a "state" string')

    request = cast("StateChangeRequest", body)
    if request.get("action", "setup") == "teardown":
        return

    state = request["state"]
    data_count = STATE_DATA_COUNTS.get(state)
    if data_count is None:
        logger.warning("Ignoring unknown provider state %r", state)
        return

    logger.info("Provider state %r: data count %d", state, data_count)
    store.set(data_count)
