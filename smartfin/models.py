# smartfin/models.py
# lightweight records mirrored from the API (not bound to any storage)
from datetime import date, datetime

INCOME = "income"
EXPENSE = "expense"
TRANSACTION_TYPES = (INCOME, EXPENSE)

GOAL_IN_PROGRESS = "In Progress"
GOAL_COMPLETED = "Completed"


def parse_api_date(value):
    """Parse an ISO date or datetime string from the API into a date"""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    s = str(value).strip()
    if not s:
        return None
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(s).date()
    except ValueError:
        return date.fromisoformat(s[:10])


class User:
    def __init__(self, id, username, email, created_at=None, updated_at=None):
        self.id = id
        self.username = username
        self.email = email
        self.created_at = created_at
        self.updated_at = updated_at

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            raise ValueError("user record must be an object")
        missing = [k for k in ("_id", "username", "email") if k not in data]
        if missing:
            raise ValueError(f"user record missing keys: {missing}")
        return cls(
            id=str(data["_id"]),
            username=data["username"],
            email=data["email"],
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        )

    def to_dict(self):
        return {
            "_id": self.id,
            "username": self.username,
            "email": self.email,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    @property
    def member_since(self):
        try:
            return parse_api_date(self.created_at)
        except ValueError:
            return None

    def __eq__(self, other):
        return isinstance(other, User) and self.to_dict() == other.to_dict()

    def __repr__(self):
        return f"User(id={self.id!r}, username={self.username!r})"


class Transaction:
    def __init__(self, id, amount, type, category, title, date, user=None):
        self.id = id
        self.user = user
        self.amount = amount
        self.type = type
        self.category = category
        self.title = title
        self.date = date

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=str(data["_id"]),
            user=data.get("user"),
            amount=float(data["amount"]),
            type=data["type"],
            category=data.get("category") or "",
            title=data.get("title") or "",
            date=parse_api_date(data["date"]),
        )

    @property
    def is_income(self):
        return self.type == INCOME

    @property
    def is_expense(self):
        return self.type == EXPENSE

    def to_form(self):
        """Field values used to prefill the edit form"""
        return {
            "title": self.title,
            "category": self.category,
            "amount": str(self.amount),
            "type": self.type,
            "date": self.date.isoformat() if self.date else "",
        }

    def __repr__(self):
        return f"Transaction(id={self.id!r}, {self.type} {self.amount} on {self.date})"


class Goal:
    def __init__(self, id, title, target_amount, saved_amount, deadline, status=None, user=None):
        self.id = id
        self.user = user
        self.title = title
        self.target_amount = target_amount
        self.saved_amount = saved_amount
        self.deadline = deadline
        self.status = status or derive_goal_status(saved_amount, target_amount)

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=str(data["_id"]),
            user=data.get("user"),
            title=data.get("title") or "",
            target_amount=float(data["targetAmount"]),
            saved_amount=float(data.get("savedAmount") or 0),
            deadline=parse_api_date(data.get("deadline")),
            status=data.get("status"),
        )

    @property
    def is_completed(self):
        return self.status == GOAL_COMPLETED

    def to_form(self):
        return {
            "title": self.title,
            "targetAmount": str(self.target_amount),
            "savedAmount": str(self.saved_amount),
            "deadline": self.deadline.isoformat() if self.deadline else "",
        }

    def __repr__(self):
        return f"Goal(id={self.id!r}, title={self.title!r}, status={self.status!r})"


def derive_goal_status(saved_amount, target_amount):
    return GOAL_COMPLETED if saved_amount >= target_amount else GOAL_IN_PROGRESS


class Budget:
    def __init__(self, id, month, amount, spent=0.0, user=None):
        self.id = id
        self.user = user
        self.month = month
        self.amount = amount
        self.spent = spent

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=str(data.get("_id", "")),
            user=data.get("user"),
            month=data["month"],
            amount=float(data["amount"]),
            spent=float(data.get("spent") or 0),
        )

    def __repr__(self):
        return f"Budget(month={self.month!r}, amount={self.amount}, spent={self.spent})"


class Prediction:
    def __init__(self, next_month_prediction):
        self.next_month_prediction = next_month_prediction

    @classmethod
    def from_dict(cls, data):
        data = data or {}
        return cls(next_month_prediction=float(data.get("nextMonthPrediction") or 0))
