"""Domain objects for the budget tracker.

Holds the transaction record mirrored from the backend, the editable
form draft, the result wrappers returned by store operations and the
error hierarchy raised by the API client.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Generic, Mapping, Optional, TypeVar

INCOME = 'income'
EXPENSE = 'expense'
TRANSACTION_TYPES = (EXPENSE, INCOME)
TYPE_LABELS = {EXPENSE: 'Expense', INCOME: 'Income'}

CATEGORIES = ('Food', 'Transport', 'Utilities', 'Entertainment', 'Salary', 'Other')
CATEGORY_LABELS = {
    'Food': 'Food & Dining',
    'Transport': 'Transportation',
    'Utilities': 'Utilities',
    'Entertainment': 'Entertainment',
    'Salary': 'Salary',
    'Other': 'Other',
}

DEFAULT_TYPE = EXPENSE
DEFAULT_CATEGORY = 'Food'

_WIRE_FIELDS = ('_id', 'description', 'amount', 'type', 'category', 'date')


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class BudgetBuddyError(Exception):
    """Base class for every failure surfaced by the store."""


class NetworkFailure(BudgetBuddyError):
    """The request failed, timed out or came back with an error status."""


class DecodeFailure(BudgetBuddyError):
    """The response body was not JSON or did not look like a transaction."""


class ValidationSkip(BudgetBuddyError):
    """Description or amount was empty, so nothing was sent."""


class InvalidAmount(BudgetBuddyError):
    """The amount text could not be read as a number."""


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

T = TypeVar('T')


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True

    @property
    def skipped(self) -> bool:
        return False


@dataclass(frozen=True)
class Err:
    error: BudgetBuddyError

    @property
    def ok(self) -> bool:
        return False

    @property
    def skipped(self) -> bool:
        """True when the operation was a silent no-op rather than a failure."""
        return isinstance(self.error, ValidationSkip)


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


def utc_now_iso() -> str:
    """Current time as an ISO-8601 string with millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def _coerce_amount(value: Any) -> float:
    if isinstance(value, bool):
        raise DecodeFailure(f"Amount must be numeric, got {value!r}")
    try:
        amount = float(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise DecodeFailure(f"Amount must be numeric, got {value!r}") from exc
    if not math.isfinite(amount):
        raise DecodeFailure(f"Amount must be finite, got {value!r}")
    return amount


@dataclass(frozen=True)
class NewTransaction:
    """A transaction that has not been persisted yet (no id)."""

    description: str
    amount: float
    type: str
    category: str
    date: str

    def to_wire(self) -> Dict[str, Any]:
        return {
            'description': self.description,
            'amount': self.amount,
            'type': self.type,
            'category': self.category,
            'date': self.date,
        }


@dataclass(frozen=True)
class Transaction:
    """A persisted income or expense record.

    ``amount`` is always a positive magnitude; whether it adds to or
    subtracts from the balance depends on ``type``.
    """

    id: str
    description: str
    amount: float
    type: str
    category: str
    date: str

    @property
    def is_income(self) -> bool:
        return self.type == INCOME

    @classmethod
    def from_wire(cls, payload: Mapping[str, Any]) -> 'Transaction':
        """Build a transaction from a backend JSON object.

        Raises:
            DecodeFailure: if the payload is not a mapping, a field is
                missing, or the amount is not a finite number.
        """
        if not isinstance(payload, Mapping):
            raise DecodeFailure(f"Expected a transaction object, got {type(payload).__name__}")
        missing = [name for name in _WIRE_FIELDS if name not in payload]
        if missing:
            raise DecodeFailure(f"Transaction is missing fields: {', '.join(missing)}")
        return cls(
            id=str(payload['_id']),
            description=str(payload['description']),
            amount=_coerce_amount(payload['amount']),
            type=str(payload['type']),
            category=str(payload['category']),
            date=str(payload['date']),
        )

    def to_wire(self) -> Dict[str, Any]:
        return {
            '_id': self.id,
            'description': self.description,
            'amount': self.amount,
            'type': self.type,
            'category': self.category,
            'date': self.date,
        }


@dataclass
class FormDraft:
    """Values currently typed into the add-transaction form.

    ``amount`` is kept as the raw text the user entered.
    """

    description: str = ''
    amount: str = ''
    type: str = DEFAULT_TYPE
    category: str = DEFAULT_CATEGORY

    def is_blank(self) -> bool:
        return not self.description or not self.amount

    def to_transaction(self, amount: float, date: Optional[str] = None) -> NewTransaction:
        return NewTransaction(
            description=self.description,
            amount=amount,
            type=self.type,
            category=self.category,
            date=date or utc_now_iso(),
        )
