import logging
import os
import sys
from datetime import datetime

from consumer_client.client import DEFAULT_TIMEOUT, ConsumerResult, ProviderClient

DEFAULT_PROVIDER_URL = "http://localhost:8080"


def get_provider_url() -> str:
    return os.getenv("PROVIDER_URL", DEFAULT_PROVIDER_URL)


def get_provider_timeout() -> float:
    timeout = os.getenv("PROVIDER_TIMEOUT")
    if timeout is None:
        return DEFAULT_TIMEOUT
    try:
        return float(timeout)
    except ValueError as err:
        raise RuntimeError(
            f"PROVIDER_TIMEOUT must be a number of seconds, got {timeout!r}"
        ) from err


def main(argv: list[str] | None = None) -> ConsumerResult:
    """
    Fetch and print the provider data once.

    :param argv: Command line arguments. The first, if any, is the date-time sent
        as ``validDate``; defaults to the current local date-time.
    :returns: The derived consumer result.
    """
    args = sys.argv[1:] if argv is None else argv
    date_time = args[0] if args else datetime.now().isoformat()

    client = ProviderClient(get_provider_url(), timeout=get_provider_timeout())
    result = client.fetch_and_process_data(date_time)
    print([result.ratio, result.timestamp])
    return result


if __name__ == "__main__":
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    main()
