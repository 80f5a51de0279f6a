"""Form submission handlers, exercised without a running Streamlit app."""

from datetime import date
from unittest.mock import MagicMock

import pytest

from smartfin.errors import ApiError, StorageError
from smartfin.session import Session
from smartfin.views import budgets, goals, login, register, transactions
from tests.helpers import make_transaction, make_user


@pytest.fixture
def signed_in():
    session = Session()
    session.login("tok-123", make_user())
    return session


@pytest.fixture
def mock_services(monkeypatch):
    mocked = MagicMock()
    for module in (transactions, goals, budgets, login, register):
        monkeypatch.setattr(module, "services", mocked)
    return mocked


def test_non_positive_transaction_never_hits_the_network(mock_services, signed_in):
    form = {"title": "Coffee", "category": "Food", "amount": "0", "type": "expense", "date": date(2024, 3, 1)}

    error = transactions.submit_transaction(signed_in, form)

    assert error == "Please enter a valid, positive amount."
    mock_services.create_transaction.assert_not_called()
    mock_services.update_transaction.assert_not_called()


def test_new_transaction_is_created(mock_services, signed_in):
    form = {"title": "Coffee", "category": "Food", "amount": "90", "type": "expense", "date": date(2024, 3, 1)}

    assert transactions.submit_transaction(signed_in, form) is None
    mock_services.create_transaction.assert_called_once_with("tok-123", {
        "title": "Coffee", "category": "Food", "amount": 90.0, "type": "expense", "date": "2024-03-01",
    })


def test_edited_transaction_is_updated(mock_services, signed_in):
    form = {"title": "Coffee", "category": "Food", "amount": "90", "type": "income", "date": "2024-03-01"}

    assert transactions.submit_transaction(signed_in, form, editing_id="t7") is None
    mock_services.update_transaction.assert_called_once()
    assert mock_services.update_transaction.call_args.args[:2] == ("tok-123", "t7")


def test_transaction_api_error_becomes_message(mock_services, signed_in):
    mock_services.create_transaction.side_effect = ApiError("Category too long", status_code=400)
    form = {"title": "Coffee", "category": "Food", "amount": "90", "type": "expense", "date": "2024-03-01"}

    assert transactions.submit_transaction(signed_in, form) == "Category too long"


def test_unknown_transaction_type_starts_on_expense():
    assert transactions.type_index("income") == 0
    assert transactions.type_index("expense") == 1
    assert transactions.type_index("transfer") == 1
    assert transactions.type_index(None) == 1


def test_filter_transactions():
    txs = [
        make_transaction("1", 10, "income", "Salary", date(2024, 1, 1)),
        make_transaction("2", 5, "expense", "Food", date(2024, 1, 2)),
    ]
    assert [t.id for t in transactions.filter_transactions(txs, None)] == ["1", "2"]
    assert [t.id for t in transactions.filter_transactions(txs, "income")] == ["1"]
    assert [t.id for t in transactions.filter_transactions(txs, "expense")] == ["2"]


def test_goal_saved_over_target_never_hits_the_network(mock_services, signed_in):
    form = {"title": "Bike", "targetAmount": "100", "savedAmount": "101", "deadline": date(2025, 1, 1)}

    error = goals.submit_goal(signed_in, form)

    assert error == "Saved amount cannot be greater than the target amount."
    mock_services.create_goal.assert_not_called()
    mock_services.update_goal.assert_not_called()


def test_goal_update(mock_services, signed_in):
    form = {"title": "Bike", "targetAmount": "100", "savedAmount": "20", "deadline": date(2025, 1, 1)}

    assert goals.submit_goal(signed_in, form, editing_id="g1") is None
    mock_services.update_goal.assert_called_once_with("tok-123", "g1", {
        "title": "Bike", "targetAmount": 100.0, "savedAmount": 20.0, "deadline": "2025-01-01",
    })


def test_budget_submission(mock_services, signed_in):
    assert budgets.submit_budget(signed_in, "2024-03", "abc") == "Please enter a valid, positive budget amount."
    mock_services.set_budget.assert_not_called()

    assert budgets.submit_budget(signed_in, "2024-03", "2500") is None
    mock_services.set_budget.assert_called_once_with("tok-123", "2024-03", 2500.0)


def test_month_options_walk_back_across_years():
    options = budgets.month_options(today=date(2024, 2, 10), months_back=3)
    assert options == ["2024-02", "2024-01", "2023-12", "2023-11"]


def test_login_signs_session_in(mock_services, storage):
    mock_services.login.return_value = ("tok-123", make_user())
    session = Session(storage=storage)

    assert login.handle_login(session, "asha@example.com", "secret1") is None
    assert session.is_authenticated
    assert storage.get_item("token") == "tok-123"


def test_failed_login_leaves_session_signed_out(mock_services, storage):
    mock_services.login.side_effect = ApiError("Invalid credentials", status_code=401)
    session = Session(storage=storage)

    assert login.handle_login(session, "asha@example.com", "wrong") == "Invalid credentials"
    assert not session.is_authenticated
    assert storage.get_item("token") is None


def test_unwritable_storage_fails_login(mock_services):
    mock_services.login.return_value = ("tok-123", make_user())
    storage = MagicMock()
    storage.get_item.return_value = None
    storage.set_item.side_effect = StorageError("Could not write local storage at /ro/local_storage.json")
    session = Session(storage=storage)

    error = login.handle_login(session, "asha@example.com", "secret1")

    assert error.startswith("Could not write local storage")
    assert not session.is_authenticated
    assert session.user is None


def test_short_password_is_rejected_before_registering(mock_services):
    assert register.handle_register("asha", "asha@example.com", "123") == \
        "Password must be at least 6 characters long."
    mock_services.register.assert_not_called()


def test_register_calls_api(mock_services):
    assert register.handle_register("asha", "asha@example.com", "secret1") is None
    mock_services.register.assert_called_once_with("asha", "asha@example.com", "secret1")
