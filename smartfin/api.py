# smartfin/api.py

import logging

import requests

from smartfin import config
from smartfin.errors import ApiError

logger = logging.getLogger(config.LOGGER_NAME)

UNKNOWN_ERROR = "An unknown error occurred"


def safe_json(resp):
    try:
        return resp.json()
    except ValueError:
        return None


def is_empty_response(resp):
    return resp.status_code == 204 or resp.headers.get("Content-Length") == "0"


def error_message(resp):
    """Server-supplied message of a failed response, or a generic fallback"""
    payload = safe_json(resp)
    if payload is None:
        payload = {"message": UNKNOWN_ERROR}
    message = payload.get("message") if isinstance(payload, dict) else None
    return message or f"HTTP error! status: {resp.status_code}"


def api_request(path, method="GET", json=None, params=None, token=None, timeout=None):
    """Call the SmartFin API and return the decoded JSON body.

    ``token`` is the caller's credential and goes out as a bearer header;
    without one the request is anonymous. Empty responses come back as
    None; failures raise ApiError with the server's message.
    """
    headers = {"Content-Type": "application/json"}
    if token:
        headers["Authorization"] = f"Bearer {token}"

    url = config.API_BASE_URL.rstrip("/") + path
    method = method.upper()

    try:
        resp = requests.request(
            method,
            url,
            headers=headers,
            json=json,
            params=params,
            timeout=timeout or config.REQUEST_TIMEOUT,
        )
    except requests.RequestException as e:
        logger.error(f"{method} {path} failed: {e}")
        raise ApiError(f"Connection failed: {e}") from e

    if not resp.ok:
        message = error_message(resp)
        logger.warning(f"{method} {path} -> {resp.status_code}: {message}")
        raise ApiError(message, status_code=resp.status_code)

    if is_empty_response(resp):
        return None

    try:
        return resp.json()
    except ValueError as e:
        raise ApiError(f"Invalid JSON in response from {path}", status_code=resp.status_code) from e
