"""Request pipeline stages shared by every route.

Stages run in this order for each request:

1. ``start_timer`` (before request) records when handling began.
2. The route handler, or an error handler, produces the response.
3. ``apply_security_headers`` hardens the response.
4. CORS headers are added by flask-cors.
5. ``log_access`` writes one combined-format access line.

A before-request stage may short-circuit by returning a response; any
exception is turned into an envelope by the error handlers in
``taskflow_api.server.app``.
"""

from __future__ import annotations

import time
from datetime import UTC, datetime

from flask import Flask, Response, g, request
from flask_cors import CORS

from taskflow_api.config import ServerConfig
from taskflow_api.utils.logger import get_logger

SECURITY_HEADERS = {
    "Content-Security-Policy": (
        "default-src 'self';base-uri 'self';font-src 'self' https: data:;"
        "form-action 'self';frame-ancestors 'self';img-src 'self' data:;"
        "object-src 'none';script-src 'self';script-src-attr 'none';"
        "style-src 'self' https: 'unsafe-inline';upgrade-insecure-requests"
    ),
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Origin-Agent-Cluster": "?1",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Frame-Options": "SAMEORIGIN",
    "X-Permitted-Cross-Domain-Policies": "none",
    "X-XSS-Protection": "0",
}


def start_timer() -> None:
    g.request_started = time.monotonic()


def apply_security_headers(response: Response) -> Response:
    for name, value in SECURITY_HEADERS.items():
        response.headers.setdefault(name, value)
    return response


def combined_log_line(response: Response) -> str:
    """Format the request/response pair in Apache combined log format."""
    timestamp = datetime.now(UTC).strftime("%d/%b/%Y:%H:%M:%S +0000")
    path = request.full_path if request.query_string else request.path
    protocol = request.environ.get("SERVER_PROTOCOL", "HTTP/1.1")
    length = response.content_length
    return (
        f'{request.remote_addr or "-"} - - [{timestamp}] '
        f'"{request.method} {path} {protocol}" {response.status_code} '
        f'{length if length is not None else "-"} '
        f'"{request.referrer or "-"}" "{request.user_agent.string or "-"}"'
    )


def log_access(response: Response) -> Response:
    logger = get_logger()
    logger.info(combined_log_line(response))
    started = g.get("request_started")
    if started is not None:
        logger.debug(
            "%s %s handled in %.3fs",
            request.method,
            request.path,
            time.monotonic() - started,
        )
    return response


def install_pipeline(app: Flask, server_config: ServerConfig) -> None:
    """Register the pipeline stages on ``app`` in order."""
    app.before_request(start_timer)
    # after_request hooks run in reverse order of registration
    app.after_request(log_access)
    CORS(app, origins=server_config.cors_origins, send_wildcard=True)
    app.after_request(apply_security_headers)
