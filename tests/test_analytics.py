import math
from datetime import date

import pytest

from smartfin.analytics import (
    UNCATEGORIZED,
    budget_progress,
    category_expenses,
    goal_progress,
    income_expense_totals,
    monthly_expenses,
)
from tests.helpers import make_budget, make_goal, make_transaction


@pytest.fixture
def transactions():
    return [
        make_transaction("1", 50000, "income", "Salary", date(2024, 1, 1)),
        make_transaction("2", 1200, "expense", "Food", date(2024, 2, 14)),
        make_transaction("3", 800, "expense", "Transport", date(2023, 12, 5)),
        make_transaction("4", 300, "expense", "Food", date(2024, 2, 20)),
        make_transaction("5", 150, "expense", "  ", date(2024, 1, 9)),
    ]


def test_income_expense_totals(transactions):
    assert income_expense_totals(transactions) == (50000.0, 2450.0)


def test_totals_of_nothing():
    assert income_expense_totals([]) == (0.0, 0.0)


def test_monthly_expenses_are_chronological(transactions):
    monthly = monthly_expenses(transactions)

    assert list(monthly["name"]) == ["Dec 23", "Jan 24", "Feb 24"]
    assert list(monthly["expense"]) == [800.0, 150.0, 1500.0]


def test_monthly_expenses_empty_without_expenses():
    income_only = [make_transaction("1", 10, "income", "Salary", date(2024, 1, 1))]
    assert monthly_expenses(income_only).empty


def test_category_expenses(transactions):
    categories = category_expenses(transactions)

    assert list(categories["name"]) == ["Food", "Transport", UNCATEGORIZED]
    assert list(categories["value"]) == [1500.0, 800.0, 150.0]


def test_category_expenses_empty():
    assert category_expenses([]).empty


def test_budget_bar_is_clamped_but_ratio_is_not():
    progress = budget_progress(make_budget(spent=1500, amount=1000))

    assert progress.percent == pytest.approx(150.0)
    assert progress.bar_percent == 100.0
    assert progress.bar_fraction == 1.0
    assert progress.exceeded


def test_budget_within_limit():
    progress = budget_progress(make_budget(spent=250, amount=1000))

    assert progress.percent == pytest.approx(25.0)
    assert progress.bar_percent == pytest.approx(25.0)
    assert not progress.exceeded
    assert progress.label() == "25.0%"


def test_budget_exactly_spent_is_not_exceeded():
    assert not budget_progress(make_budget(spent=1000, amount=1000)).exceeded


def test_zero_budget():
    assert budget_progress(make_budget(spent=0, amount=0)).percent == 0.0

    overspent = budget_progress(make_budget(spent=10, amount=0))
    assert math.isinf(overspent.percent)
    assert overspent.exceeded
    assert overspent.bar_percent == 100.0


def test_goal_progress():
    progress = goal_progress(make_goal(saved=333, target=1000))
    assert progress.label() == "33.3%"
    assert progress.bar_fraction == pytest.approx(0.333)
