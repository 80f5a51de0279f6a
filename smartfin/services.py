# smartfin/services.py
"""One function per SmartFin API call, returning records from models.

Calls that need a signed-in user take that user's ``token`` first.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import date

from smartfin import config
from smartfin.api import api_request
from smartfin.errors import ApiError
from smartfin.models import Budget, Goal, Prediction, Transaction, User

logger = logging.getLogger(config.LOGGER_NAME)

# what a record parser raises on a missing, null or mistyped field
RECORD_ERRORS = (KeyError, TypeError, ValueError, AttributeError)


def parse_response(path, parse, data):
    """Turn a response body into records, or raise ApiError if it is malformed"""
    try:
        return parse(data)
    except RECORD_ERRORS as e:
        logger.error(f"Malformed response from {path}: {e!r}")
        raise ApiError(f"Unexpected response from {path}") from e


def parse_list(parse_record):
    def parse(rows):
        if not isinstance(rows, list):
            raise TypeError(f"expected a list, got {type(rows).__name__}")
        return [parse_record(row) for row in rows]
    return parse


# ---------------- Auth ----------------
def login(email, password):
    """Returns (token, User) for valid credentials"""
    payload = api_request(
        "/api/auth/login",
        method="POST",
        json={"email": email, "password": password},
        token=None,
    )
    if not payload or not payload.get("token"):
        raise ApiError("Login response did not include a token")
    try:
        user = User.from_dict(payload.get("user"))
    except ValueError as e:
        raise ApiError(f"Login response has an invalid user profile: {e}") from e
    return payload["token"], user


def register(username, email, password):
    # the API names the username field "name"
    return api_request(
        "/api/auth/register",
        method="POST",
        json={"name": username, "email": email, "password": password},
        token=None,
    )


# ---------------- Transactions ----------------
def list_transactions(token):
    """All transactions, newest first"""
    data = api_request("/api/transactions", token=token) or []
    transactions = parse_response("/api/transactions", parse_list(Transaction.from_dict), data)
    transactions.sort(key=lambda t: t.date or date.min, reverse=True)
    return transactions


def create_transaction(token, payload):
    logger.info(f"Creating {payload.get('type')} transaction '{payload.get('title')}'")
    return api_request("/api/transactions", method="POST", json=payload, token=token)


def update_transaction(token, transaction_id, payload):
    logger.info(f"Updating transaction {transaction_id}")
    return api_request(f"/api/transactions/{transaction_id}", method="PUT", json=payload, token=token)


# ---------------- Goals ----------------
def list_goals(token):
    data = api_request("/api/goals", token=token) or []
    return parse_response("/api/goals", parse_list(Goal.from_dict), data)


def create_goal(token, payload):
    logger.info(f"Creating goal '{payload.get('title')}'")
    return api_request("/api/goals", method="POST", json=payload, token=token)


def update_goal(token, goal_id, payload):
    logger.info(f"Updating goal {goal_id}")
    return api_request(f"/api/goals/{goal_id}", method="PUT", json=payload, token=token)


# ---------------- Budgets ----------------
def get_budget(token, month):
    """Budget for ``month`` (YYYY-MM), or None if none has been set"""
    try:
        data = api_request("/api/budget", params={"month": month}, token=token)
    except ApiError as e:
        if "not found" in e.message.lower():
            return None
        raise
    if not data:
        return None
    return parse_response("/api/budget", Budget.from_dict, data)


def set_budget(token, month, amount):
    logger.info(f"Setting budget for {month}")
    return api_request("/api/budget", method="POST", json={"month": month, "amount": amount}, token=token)


# ---------------- Analytics ----------------
def get_prediction(token):
    data = api_request("/api/analytics/predict", token=token)
    return parse_response("/api/analytics/predict", Prediction.from_dict, data)


def fetch_parallel(*calls):
    """Run independent zero-argument calls concurrently.

    Results come back in call order once every call has finished. If any
    call failed, the first failure (in call order) is raised.
    """
    if not calls:
        return []
    with ThreadPoolExecutor(max_workers=len(calls)) as executor:
        futures = [executor.submit(call) for call in calls]
    return [future.result() for future in futures]
