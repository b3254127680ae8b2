import logging
import os
from typing import TypedDict

from flask import Flask, Response, request

from provider_service.common import FlaskResponse
from provider_service.data_store import DataStore
from provider_service.handler import to_flask_response, validate_provider_request
from provider_service.state_change import StateChangeError, apply_state_change

logger = logging.getLogger(__name__)

STATE_CHANGE_PROFILE = "test"


class HealthStatus(TypedDict):
    status: str


def get_app_host() -> str:
    host = os.getenv("FLASK_HOST")
    if host is None:
        raise RuntimeError("FLASK_HOST environment variable is not set.")
    return host


def get_app_port() -> int:
    port = os.getenv("FLASK_PORT")
    if port is None:
        raise RuntimeError("FLASK_PORT environment variable is not set.")
    return int(port)


def state_change_enabled() -> bool:
    """The state change endpoint is only exposed under the ``test`` profile."""
    return os.getenv("PROVIDER_PROFILE", "").strip().lower() == STATE_CHANGE_PROFILE


def _build_response(flask_response: FlaskResponse) -> Response:
    return Response(
        response=flask_response.data or "",
        status=flask_response.status_code,
        headers=flask_response.headers,
    )


def create_app(
    store: DataStore | None = None, *, enable_state_change: bool | None = None
) -> Flask:
    """
    Build the provider application.

    :param store: Data availability shared by the handlers. A fresh
        :class:`DataStore` with the default count is used when omitted.
    :param enable_state_change: Register ``POST /pactStateChange``. Defaults to
        whether ``PROVIDER_PROFILE`` is ``test``.
    :returns: The configured Flask application.
    """
    app = Flask(__name__)
    data_store = store if store is not None else DataStore()
    app.extensions["data_store"] = data_store

    @app.route("/provider.json", methods=["GET"])
    def provider_json() -> Response:
        """Answer with the current data snapshot or a validation error."""
        valid_date = request.args.get("validDate")
        result = validate_provider_request(valid_date, data_store.get())
        return _build_response(to_flask_response(result))

    @app.route("/health", methods=["GET"])
    def health_check() -> HealthStatus:
        """Health check endpoint."""
        return HealthStatus(status="healthy")

    if enable_state_change is None:
        enable_state_change = state_change_enabled()

    if enable_state_change:

        @app.route("/pactStateChange", methods=["POST"])
        def provider_state() -> tuple[dict[str, str], int] | dict[str, str]:
            """Put the data store into the state named by a consumer contract."""
            try:
                apply_state_change(data_store, request.get_json(silent=True))
            except StateChangeError as err:
                return {"error": str(err)}, 400
            return {}

        logger.info("State change endpoint enabled")

    return app


app = create_app()


if __name__ == "__main__":
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    app.run(host=get_app_host(), port=get_app_port())
