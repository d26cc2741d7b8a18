"""Unit tests for budget_buddy.calculations."""

from __future__ import annotations

from budget_buddy import calculations as calc
from budget_buddy.models import Transaction


def _txn(id: str, type: str, amount: float, category: str = 'Other', description: str = 'x') -> Transaction:
    return Transaction(
        id=id,
        description=description,
        amount=amount,
        type=type,
        category=category,
        date='2024-01-01T00:00:00.000Z',
    )


def _seed():
    return [
        _txn('1', 'income', 1200, 'Salary', 'Freelance Work'),
        _txn('2', 'expense', 85.5, 'Food', 'Grocery Run'),
    ]


def test_totals_empty_collection_is_all_zero() -> None:
    assert calc.totals([]).as_dict() == {'income': 0, 'expenses': 0, 'balance': 0}


def test_totals_seed_scenario() -> None:
    summary = calc.totals(_seed())
    assert summary.income == 1200
    assert summary.expenses == 85.5
    assert summary.balance == 1114.5


def test_balance_is_income_minus_expenses() -> None:
    transactions = [
        _txn('1', 'income', 0.1),
        _txn('2', 'expense', 0.2),
        _txn('3', 'income', 19.99),
        _txn('4', 'expense', 7.3),
        _txn('5', 'expense', 1000),
    ]
    summary = calc.totals(transactions)
    assert summary.balance == summary.income - summary.expenses
    assert summary.balance < 0


def test_totals_ignores_category_for_direction() -> None:
    # An expense tagged "Salary" still counts as an expense
    summary = calc.totals([_txn('1', 'expense', 50, 'Salary')])
    assert summary.income == 0
    assert summary.expenses == 50


def test_category_breakdown_keeps_first_seen_order() -> None:
    transactions = [
        _txn('1', 'expense', 10, 'Food'),
        _txn('2', 'expense', 5, 'Transport'),
        _txn('3', 'expense', 3, 'Food'),
    ]
    assert calc.category_breakdown(transactions) == [
        {'name': 'Food', 'value': 13},
        {'name': 'Transport', 'value': 5},
    ]


def test_category_breakdown_is_not_sorted() -> None:
    transactions = [
        _txn('1', 'expense', 1, 'Utilities'),
        _txn('2', 'expense', 500, 'Entertainment'),
        _txn('3', 'expense', 2, 'Food'),
    ]
    names = [entry['name'] for entry in calc.category_breakdown(transactions)]
    assert names == ['Utilities', 'Entertainment', 'Food']


def test_category_breakdown_only_counts_expenses() -> None:
    transactions = [
        _txn('1', 'income', 1200, 'Salary'),
        _txn('2', 'expense', 20, 'Food'),
        _txn('3', 'income', 40, 'Other'),
    ]
    breakdown = calc.category_breakdown(transactions)
    assert breakdown == [{'name': 'Food', 'value': 20}]


def test_category_breakdown_empty_inputs() -> None:
    assert calc.category_breakdown([]) == []
    assert calc.category_breakdown([_txn('1', 'income', 10)]) == []


def test_calculations_do_not_mutate_input() -> None:
    transactions = _seed()
    before = list(transactions)
    calc.totals(transactions)
    calc.category_breakdown(transactions)
    assert transactions == before


def test_transactions_frame_keeps_order_and_signs() -> None:
    df = calc.transactions_frame(_seed())
    assert list(df.columns) == calc.FRAME_COLUMNS
    assert list(df['id']) == ['1', '2']
    assert list(df['signed_amount']) == [1200, -85.5]
    assert list(df['amount']) == [1200, 85.5]


def test_transactions_frame_empty() -> None:
    df = calc.transactions_frame([])
    assert df.empty
    assert list(df.columns) == calc.FRAME_COLUMNS
