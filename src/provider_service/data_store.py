"""
Process-wide data availability for the provider service.

The store is created once per application and handed to the request handlers,
so tests can run several isolated providers in one process.
"""

import logging
import threading

logger = logging.getLogger(__name__)

DEFAULT_DATA_COUNT = 1000


class DataStore:
    """
    Lock-protected counter of how much data the provider has available.

    :param data_count: Initial count, must not be negative.
    """

    def __init__(self, data_count: int = DEFAULT_DATA_COUNT) -> None:
        self._lock = threading.Lock()
        self._data_count = self._check(data_count)

    def get(self) -> int:
        with self._lock:
            return self._data_count

    def set(self, data_count: int) -> None:
        """
        Replace the current data count.

        :param data_count: New count.
        :raises ValueError: If ``data_count`` is negative or not an integer.
        """
        value = self._check(data_count)
        with self._lock:
            self._data_count = value
        logger.debug("Data count set to %d", value)

    @staticmethod
    def _check(data_count: int) -> int:
        # bool is an int subclass but never a meaningful count
        if isinstance(data_count, bool) or not isinstance(data_count, int):
            raise ValueError("Data count must be an integer")
        if data_count < 0:
            raise ValueError("Data count must not be negative")
        return data_count
