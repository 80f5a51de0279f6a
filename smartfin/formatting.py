# smartfin/formatting.py
from datetime import date

from smartfin import config


def format_currency(amount):
    symbol = config.CURRENCY_SYMBOL
    if amount < 0:
        return f"-{symbol}{abs(amount):,.2f}"
    return f"{symbol}{amount:,.2f}"


def format_signed_amount(transaction):
    """Expenses get a leading minus in lists"""
    prefix = "- " if transaction.is_expense else ""
    return prefix + format_currency(transaction.amount)


def format_date(value):
    return value.strftime("%d %b %Y") if value else ""


def month_title(month):
    """'2024-03' -> 'March 2024'"""
    year, mon = month.split("-")
    return date(int(year), int(mon), 1).strftime("%B %Y")
