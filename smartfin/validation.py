# smartfin/validation.py
"""Client-side form checks.

Every validator returns ``(payload, error)``: the JSON body to send, or the
message to show instead of sending anything.
"""

import math
import re
from datetime import date, datetime

from smartfin.models import TRANSACTION_TYPES

MIN_PASSWORD_LENGTH = 6
MONTH_RE = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def parse_amount(value):
    """Float value of a form amount, or None if it is not a finite number"""
    if value is None:
        return None
    if isinstance(value, bool):
        return None
    try:
        amount = float(str(value).strip())
    except ValueError:
        return None
    return amount if math.isfinite(amount) else None


def format_form_date(value):
    """Form dates as YYYY-MM-DD, or None when missing or unparseable"""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    s = str(value or "").strip()
    if not s:
        return None
    try:
        return date.fromisoformat(s[:10]).isoformat()
    except ValueError:
        return None


def validate_transaction(title, category, amount, tx_type, tx_date):
    title = (title or "").strip()
    category = (category or "").strip()
    if not title or not category:
        return None, "Title and category are required."

    amount_value = parse_amount(amount)
    if amount_value is None or amount_value <= 0:
        return None, "Please enter a valid, positive amount."

    if tx_type not in TRANSACTION_TYPES:
        return None, "Type must be income or expense."

    date_value = format_form_date(tx_date)
    if not date_value:
        return None, "Please enter a valid date."

    return {
        "title": title,
        "category": category,
        "amount": amount_value,
        "type": tx_type,
        "date": date_value,
    }, None


def validate_goal(title, target_amount, saved_amount, deadline):
    title = (title or "").strip()
    if not title:
        return None, "Goal title is required."

    target = parse_amount(target_amount)
    saved = parse_amount(saved_amount)
    if target is None or saved is None:
        return None, "Target and saved amounts must be numbers."
    if target <= 0:
        return None, "Target amount must be greater than 0."
    if saved < 0:
        return None, "Saved amount cannot be negative."
    if saved > target:
        return None, "Saved amount cannot be greater than the target amount."

    deadline_value = format_form_date(deadline)
    if not deadline_value:
        return None, "Please enter a valid deadline."

    return {
        "title": title,
        "targetAmount": target,
        "savedAmount": saved,
        "deadline": deadline_value,
    }, None


def validate_budget(month, amount):
    month = (month or "").strip()
    if not MONTH_RE.match(month):
        return None, "Month must be in YYYY-MM format."
    amount_value = parse_amount(amount)
    if amount_value is None or amount_value <= 0:
        return None, "Please enter a valid, positive budget amount."
    return {"month": month, "amount": amount_value}, None


def validate_registration(username, email, password):
    username = (username or "").strip()
    email = (email or "").strip()
    if not username or not email or not password:
        return None, "Username, email and password are required."
    if len(password) < MIN_PASSWORD_LENGTH:
        return None, f"Password must be at least {MIN_PASSWORD_LENGTH} characters long."
    return {"username": username, "email": email, "password": password}, None


def validate_login(email, password):
    email = (email or "").strip()
    if not email or not password:
        return None, "Please enter both email and password."
    return {"email": email, "password": password}, None
