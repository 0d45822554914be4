"""Write a leveled error line plus a JSON error body to an HTTP response."""

from __future__ import annotations

import json
from typing import Any, Protocol

from flask import Response
from werkzeug.http import HTTP_STATUS_CODES


class _ErrorLogger(Protocol):
    def errorln(self, *args: Any) -> None: ...


def status_text(status_code: int) -> str:
    """Reason phrase for ``status_code``, or an empty string when unknown."""
    return HTTP_STATUS_CODES.get(status_code, "")


def error_body(status_code: int) -> bytes:
    payload = {"error": status_text(status_code), "status": "error"}
    return (json.dumps(payload, indent="\t") + "\n").encode("utf-8")


def http_error(log: _ErrorLogger, response: Any, status_code: int) -> None:
    """Log the reason phrase at error level and write the envelope to ``response``.

    ``response`` is a Flask/Werkzeug response (anything exposing
    ``status_code``, ``mimetype`` and ``set_data``). Write failures propagate.
    """
    log.errorln(status_text(status_code))
    response.status_code = status_code
    response.mimetype = "application/json"
    response.set_data(error_body(status_code))


def error_response(log: _ErrorLogger, status_code: int) -> Response:
    response = Response()
    http_error(log, response, status_code)
    return response
