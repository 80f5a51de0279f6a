from unittest.mock import patch

import pytest
import requests

from smartfin import config
from smartfin.api import UNKNOWN_ERROR, api_request
from smartfin.errors import ApiError
from tests.helpers import make_response


@pytest.fixture
def mock_request():
    with patch("smartfin.api.requests.request") as mocked:
        yield mocked


def test_attaches_bearer_token(mock_request):
    mock_request.return_value = make_response(200, payload=[{"_id": "t1"}])

    result = api_request("/api/transactions", token="tok-123")

    assert result == [{"_id": "t1"}]
    args, kwargs = mock_request.call_args
    assert args == ("GET", config.API_BASE_URL.rstrip("/") + "/api/transactions")
    assert kwargs["headers"]["Authorization"] == "Bearer tok-123"
    assert kwargs["headers"]["Content-Type"] == "application/json"
    assert kwargs["timeout"] == config.REQUEST_TIMEOUT


def test_no_header_without_token(mock_request):
    mock_request.return_value = make_response(200, payload={"token": "new"})

    api_request("/api/auth/login", method="post", json={"email": "a"})

    kwargs = mock_request.call_args.kwargs
    assert "Authorization" not in kwargs["headers"]
    assert kwargs["json"] == {"email": "a"}
    assert mock_request.call_args.args[0] == "POST"


def test_error_carries_server_message(mock_request):
    mock_request.return_value = make_response(400, payload={"message": "Invalid credentials"})

    with pytest.raises(ApiError) as exc_info:
        api_request("/api/auth/login", method="POST")

    assert str(exc_info.value) == "Invalid credentials"
    assert exc_info.value.status_code == 400


def test_error_without_json_body_uses_generic_message(mock_request):
    mock_request.return_value = make_response(500, body=b"<html>Server Error</html>")

    with pytest.raises(ApiError) as exc_info:
        api_request("/api/transactions", token="tok-123")

    assert str(exc_info.value) == UNKNOWN_ERROR
    assert exc_info.value.status_code == 500


def test_error_json_without_message_reports_status(mock_request):
    mock_request.return_value = make_response(404, payload={"error": "nope"})

    with pytest.raises(ApiError) as exc_info:
        api_request("/api/goals/missing", method="PUT", token="tok-123")

    assert str(exc_info.value) == "HTTP error! status: 404"


@pytest.mark.parametrize("status_code, headers", [
    (204, {}),
    (200, {"Content-Length": "0"}),
])
def test_empty_body_is_none(mock_request, status_code, headers):
    mock_request.return_value = make_response(status_code, headers=headers)

    assert api_request("/api/budget", method="POST", json={}, token="tok-123") is None


def test_invalid_json_body_raises_api_error(mock_request):
    mock_request.return_value = make_response(200, body=b"not json")

    with pytest.raises(ApiError) as exc_info:
        api_request("/api/goals", token="tok-123")

    assert "Invalid JSON" in str(exc_info.value)


def test_connection_failure_raises_api_error(mock_request):
    mock_request.side_effect = requests.ConnectionError("refused")

    with pytest.raises(ApiError) as exc_info:
        api_request("/api/transactions", token="tok-123")

    assert "Connection failed" in str(exc_info.value)
    assert exc_info.value.status_code is None
