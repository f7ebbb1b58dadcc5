from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    SerializationError,
    ValidationError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
)


def register_error_handlers(app: Flask) -> None:
    def _handler(status: int):
        def handle(e):
            return jsonify({"error": str(e)}), status

        return handle

    for exc_type, status in STATUS_BY_ERROR:
        app.register_error_handler(exc_type, _handler(status))

    @app.errorhandler(SerializationError)
    def handle_serialization(e: SerializationError):
        logger.error("stored data unreadable: %s", e)
        return jsonify({"error": "Stored data is unreadable", "collection": e.collection}), 500
