# librarydesk/utils/errors.py
from __future__ import annotations

from flask import jsonify


class ServiceError(Exception):
    """Servis katmanının fırlattığı, HTTP koduna eşlenen hata."""

    status_code = 500

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationFailed(ServiceError):
    status_code = 400

    def __init__(self, message: str, errors: list[dict] | None = None):
        super().__init__(message)
        self.errors = errors or []


class NotFound(ServiceError):
    status_code = 404


class Conflict(ServiceError):
    status_code = 409


class RevokeBlocked(ServiceError):
    # bilinçli olarak 200: istemci body'deki "err" alanına bakar
    status_code = 200


class UpstreamError(ServiceError):
    status_code = 502


def json_error(e: ServiceError):
    if isinstance(e, RevokeBlocked):
        return jsonify({"success": False, "err": e.message, "message": e.message}), e.status_code

    body = {"success": False, "message": e.message}
    if isinstance(e, ValidationFailed) and e.errors:
        body["errors"] = e.errors
    if e.details:
        body["details"] = e.details
    return jsonify(body), e.status_code
