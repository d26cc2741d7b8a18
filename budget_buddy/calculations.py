"""Derived views over the transaction collection.

These are pure functions: they take the store's current list, never
mutate it, and are recomputed on every rerun of the dashboard.  Empty
input is valid and yields zero totals and an empty breakdown.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence

import pandas as pd

from .models import EXPENSE, INCOME, Transaction

FRAME_COLUMNS = ['id', 'date', 'description', 'category', 'type', 'amount', 'signed_amount']


@dataclass(frozen=True)
class Totals:
    income: float = 0.0
    expenses: float = 0.0
    balance: float = 0.0

    def as_dict(self) -> Dict[str, float]:
        return {'income': self.income, 'expenses': self.expenses, 'balance': self.balance}


def transactions_frame(transactions: Sequence[Transaction]) -> pd.DataFrame:
    """Tabulate transactions in collection order.

    ``signed_amount`` is positive for income and negative for expenses;
    ``amount`` stays a positive magnitude.
    """
    if not transactions:
        return pd.DataFrame(columns=FRAME_COLUMNS)
    df = pd.DataFrame([t.to_wire() for t in transactions]).rename(columns={'_id': 'id'})
    df['amount'] = df['amount'].astype(float)
    df['signed_amount'] = df['amount'].where(df['type'] == INCOME, -df['amount'])
    return df[FRAME_COLUMNS]


def totals(transactions: Sequence[Transaction]) -> Totals:
    """Sum income and expenses; ``balance`` is exactly their difference."""
    df = transactions_frame(transactions)
    income = float(df.loc[df['type'] == INCOME, 'amount'].sum())
    expenses = float(df.loc[df['type'] == EXPENSE, 'amount'].sum())
    return Totals(income=income, expenses=expenses, balance=income - expenses)


def category_breakdown(transactions: Sequence[Transaction]) -> List[Dict[str, object]]:
    """Expense totals per category, in order of each category's first expense."""
    df = transactions_frame(transactions)
    expenses = df[df['type'] == EXPENSE]
    if expenses.empty:
        return []
    grouped = expenses.groupby('category', sort=False)['amount'].sum()
    return [{'name': name, 'value': float(value)} for name, value in grouped.items()]
