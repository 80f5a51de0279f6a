# smartfin/analytics.py
"""Aggregations over already-fetched records, for cards and charts."""

import math

import pandas as pd

from smartfin.models import EXPENSE, INCOME

UNCATEGORIZED = "Uncategorized"


def transactions_frame(transactions):
    """DataFrame with one row per transaction"""
    columns = ["id", "title", "amount", "type", "category", "date"]
    if not transactions:
        return pd.DataFrame(columns=columns)
    df = pd.DataFrame([{
        "id": t.id,
        "title": t.title,
        "amount": t.amount,
        "type": t.type,
        "category": t.category,
        "date": t.date,
    } for t in transactions], columns=columns)
    df["date"] = pd.to_datetime(df["date"], errors="coerce")
    df["amount"] = pd.to_numeric(df["amount"], errors="coerce").fillna(0.0)
    return df


def income_expense_totals(transactions):
    """Returns (total income, total expense)"""
    df = transactions_frame(transactions)
    if df.empty:
        return 0.0, 0.0
    income = df.loc[df["type"] == INCOME, "amount"].sum()
    expense = df.loc[df["type"] == EXPENSE, "amount"].sum()
    return float(income), float(expense)


def monthly_expenses(transactions):
    """Expense totals per calendar month, oldest first.

    Columns: ``month`` (period), ``name`` ('Jan 24') and ``expense``.
    """
    df = transactions_frame(transactions)
    expenses = df[df["type"] == EXPENSE].dropna(subset=["date"])
    if expenses.empty:
        return pd.DataFrame(columns=["month", "name", "expense"])

    expenses = expenses.assign(month=expenses["date"].dt.to_period("M"))
    monthly = expenses.groupby("month")["amount"].sum().sort_index().reset_index()
    monthly = monthly.rename(columns={"amount": "expense"})
    monthly["name"] = monthly["month"].dt.strftime("%b %y")
    return monthly[["month", "name", "expense"]]


def category_expenses(transactions):
    """Expense totals per category, in order of first appearance"""
    df = transactions_frame(transactions)
    expenses = df[df["type"] == EXPENSE]
    if expenses.empty:
        return pd.DataFrame(columns=["name", "value"])

    categories = expenses["category"].fillna("").astype(str).str.strip()
    expenses = expenses.assign(category=categories.where(categories != "", UNCATEGORIZED))
    totals = expenses.groupby("category", sort=False)["amount"].sum().reset_index()
    return totals.rename(columns={"category": "name", "amount": "value"})


class Progress:
    """Ratio of a current value to a target.

    ``percent`` is the true ratio and may exceed 100; ``bar_percent`` is
    what a progress bar may draw and never does.
    """

    def __init__(self, current, target):
        self.current = current
        self.target = target
        if target > 0:
            self.percent = current / target * 100
        else:
            self.percent = math.inf if current > 0 else 0.0

    @property
    def bar_percent(self):
        return max(0.0, min(self.percent, 100.0))

    @property
    def bar_fraction(self):
        """Value for ``st.progress``"""
        return self.bar_percent / 100

    @property
    def exceeded(self):
        return self.percent > 100

    def label(self):
        if math.isinf(self.percent):
            return "∞%"
        return f"{self.percent:.1f}%"


def budget_progress(budget):
    return Progress(budget.spent, budget.amount)


def goal_progress(goal):
    return Progress(goal.saved_amount, goal.target_amount)
