"""Uniform response envelope.

Success bodies look like ``{"success": true, "data": ...}``; error bodies
look like ``{"success": false, "message": <label>, "extraMessage": <detail>}``
where ``extraMessage`` is left out when there is no detail to give.
"""
from http import HTTPStatus
from typing import Any, Optional

from flask import jsonify

DEFAULT_ERROR_MESSAGE = "An error occurred."

_ERROR_LABELS = {
    HTTPStatus.BAD_REQUEST: "Bad Request.",
    HTTPStatus.UNAUTHORIZED: "Unauthorized.",
    HTTPStatus.FORBIDDEN: "You don't have permissions to access this resource.",
    HTTPStatus.NOT_FOUND: "Not Found.",
}

_DEFAULT_DETAILS = {
    HTTPStatus.NOT_FOUND: "Resource not found.",
}


def error_body(status: int, extra_message: Optional[str] = None) -> dict:
    status = HTTPStatus(status)
    body = {"success": False, "message": _ERROR_LABELS.get(status, DEFAULT_ERROR_MESSAGE)}
    extra_message = extra_message or _DEFAULT_DETAILS.get(status)
    if extra_message:
        body["extraMessage"] = extra_message
    return body


def success_body(data: Any) -> dict:
    return {"success": True, "data": data}


def error_response(status: int, extra_message: Optional[str] = None):
    return jsonify(error_body(status, extra_message)), int(status)


def success_response(data: Any, status: int = HTTPStatus.OK):
    return jsonify(success_body(data)), int(status)


def route_not_found():
    return jsonify(success=False, message="Route not found."), int(HTTPStatus.NOT_FOUND)
