import logging
import time

from flask import Flask, g, request

logger = logging.getLogger("julaaz.request")


def register_request_logging(app: Flask) -> None:

    @app.before_request
    def _request_start():
        if request.path.startswith("/api"):
            g.request_start = time.monotonic()

    @app.after_request
    def _request_after(response):
        _record(response.status_code)
        return response

    @app.teardown_request
    def _request_teardown(exc):
        if exc is not None and not getattr(g, "_request_logged", False):
            _record(500)


def _record(status_code: int) -> None:
    start = getattr(g, "request_start", None)
    if start is None or getattr(g, "_request_logged", False):
        return
    g._request_logged = True
    duration_ms = int((time.monotonic() - start) * 1000)
    level = logging.WARNING if status_code >= 500 else logging.INFO
    logger.log(level, f"{request.method} {request.path} {status_code} {duration_ms}ms")
