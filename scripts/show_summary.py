#!/usr/bin/env python3
"""Print totals and the expense breakdown from the configured backend."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from budget_buddy import calculations as calc
from budget_buddy import config
from budget_buddy.api_client import build_api
from budget_buddy.formatting import format_currency
from budget_buddy.store import TransactionStore


def main(limit: int = 20, use_mock: bool = False) -> int:
    config.configure_logging()
    store = TransactionStore(build_api(use_mock=use_mock or None))
    result = store.load()
    if not result.ok:
        print(f"Could not load transactions: {result.error}")
        return 1

    if not store.transactions:
        print("No transactions yet.")
        return 0

    summary = calc.totals(store.transactions)
    print(f"Balance:  {format_currency(summary.balance)}")
    print(f"Income:   {format_currency(summary.income)}")
    print(f"Expenses: {format_currency(summary.expenses)}")

    breakdown = calc.category_breakdown(store.transactions)
    if breakdown:
        print("\nSpending by category:")
        for entry in breakdown:
            print(f"  {entry['name']:<15} {format_currency(entry['value'])}")

    df = calc.transactions_frame(store.transactions)
    print(f"\nMost recent {min(limit, len(df))} of {len(df)} transactions:")
    print(df[['date', 'description', 'category', 'signed_amount']].head(limit).to_string(index=False))
    return 0


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Show budget totals and spending by category.')
    parser.add_argument('--limit', type=int, default=20, help='How many transactions to list')
    parser.add_argument('--mock', action='store_true', help='Use the in-memory mock backend')
    args = parser.parse_args()
    sys.exit(main(limit=args.limit, use_mock=args.mock))
