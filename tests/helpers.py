"""Shared builders for the test suite."""

import json

import requests

from smartfin.models import Budget, Goal, Transaction, User


def make_response(status_code=200, payload=None, body=None, headers=None):
    """A real requests.Response carrying ``payload`` as JSON (or raw ``body``)"""
    resp = requests.Response()
    resp.status_code = status_code
    if payload is not None:
        body = json.dumps(payload).encode("utf-8")
    resp._content = body if body is not None else b""
    resp.headers.update(headers or {})
    return resp


USER_DATA = {
    "_id": "u1",
    "username": "asha",
    "email": "asha@example.com",
    "createdAt": "2024-01-15T10:30:00.000Z",
    "updatedAt": "2024-02-01T08:00:00.000Z",
}


def make_user(**overrides):
    data = dict(USER_DATA)
    data.update(overrides)
    return User.from_dict(data)


def make_transaction(id, amount, tx_type, category, tx_date, title=None):
    return Transaction(
        id=id,
        amount=amount,
        type=tx_type,
        category=category,
        title=title or f"tx {id}",
        date=tx_date,
    )


def make_goal(saved, target, **kwargs):
    return Goal(id=kwargs.get("id", "g1"), title=kwargs.get("title", "Vacation"),
                target_amount=target, saved_amount=saved, deadline=kwargs.get("deadline"),
                status=kwargs.get("status"))


def make_budget(spent, amount, month="2024-03"):
    return Budget(id="b1", month=month, amount=amount, spent=spent)
