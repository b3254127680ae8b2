"""
Types shared by the provider service's handlers and routes.
"""

from dataclasses import dataclass


@dataclass
class FlaskResponse:
    """
    Status, body and headers of a provider answer, built without touching Flask.

    :param status_code: 200 with a snapshot, 400 for a bad ``validDate``, 404 when
        there is no data.
    :param data: Serialised JSON body. ``None`` for a 404.
    :param headers: Response headers. ``None`` for a 404.
    """

    status_code: int
    data: str | None = None
    headers: dict[str, str] | None = None
