"""Flask application factory and error boundary."""

from __future__ import annotations

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from taskflow_api.adapters.memory import InMemoryTaskRepository
from taskflow_api.config import ServerConfig
from taskflow_api.errors import TaskFlowError
from taskflow_api.models import ApiResponse
from taskflow_api.server.middleware import install_pipeline
from taskflow_api.server.routes import SERVICE_KEY, bp
from taskflow_api.services import TaskService
from taskflow_api.utils.logger import get_logger

NOT_FOUND_RESPONSE = ApiResponse(
    success=False,
    error="Not found",
    message="The requested resource was not found",
)

INTERNAL_ERROR_RESPONSE = ApiResponse(
    success=False,
    error="Internal server error",
    message="Something went wrong. Please try again later.",
)


def register_error_handlers(app: Flask) -> None:
    """Convert every failure into a response envelope."""
    logger = get_logger()

    @app.errorhandler(TaskFlowError)
    def handle_taskflow_error(e: TaskFlowError):
        return jsonify(e.to_envelope()), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        # A known path with an unsupported method is an unmatched route too.
        if e.code in (404, 405):
            return jsonify(NOT_FOUND_RESPONSE.to_json()), 404
        envelope = ApiResponse(success=False, error=e.name, message=e.description)
        return jsonify(envelope.to_json()), e.code or 500

    @app.errorhandler(Exception)
    def handle_unexpected_error(e: Exception):
        logger.exception("Unhandled error: %s", e)
        return jsonify(INTERNAL_ERROR_RESPONSE.to_json()), 500


def create_app(
    service: TaskService | None = None,
    server_config: ServerConfig | None = None,
) -> Flask:
    """Build the TaskFlow Flask application.

    Args:
        service: TaskService to serve; a freshly seeded in-memory store is
            created when omitted
        server_config: Server settings; defaults are used when omitted

    Returns:
        Configured Flask application
    """
    if server_config is None:
        server_config = ServerConfig()
    if service is None:
        service = TaskService(InMemoryTaskRepository())

    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = server_config.max_content_length
    app.json.sort_keys = False
    app.extensions[SERVICE_KEY] = service

    install_pipeline(app, server_config)
    app.register_blueprint(bp)
    register_error_handlers(app)
    return app
