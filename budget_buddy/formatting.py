"""Formatting utilities for currency, amounts and dates."""

from __future__ import annotations

from typing import Union

import pandas as pd

from .models import CATEGORY_LABELS, Transaction


def format_currency(amount: Union[float, int], include_sign: bool = True) -> str:
    """Format a currency amount with two decimals and thousands separators.

    Example:
        >>> format_currency(1234.56)
        '$1,234.56'
        >>> format_currency(-5)
        '-$5.00'
        >>> format_currency(1234.56, include_sign=False)
        '1,234.56'
    """
    formatted = f"{abs(amount):,.2f}"
    prefix = '-' if amount < 0 else ''
    return f"{prefix}${formatted}" if include_sign else f"{prefix}{formatted}"


def escape_dollar_for_markdown(text: str) -> str:
    """Escape dollar signs so Streamlit markdown does not read them as LaTeX."""
    return text.replace("$", "\\$")


def format_signed_amount(transaction: Transaction) -> str:
    """``+$1,200.00`` for income, ``-$85.50`` for expenses."""
    sign = '+' if transaction.is_income else '-'
    return f"{sign}{format_currency(abs(transaction.amount))}"


def format_display_date(value: str) -> str:
    """Render an ISO timestamp as ``month/day/year`` without zero padding.

    Unparseable input is returned unchanged.
    """
    try:
        parsed = pd.to_datetime(value)
    except (ValueError, TypeError):
        return str(value)
    if pd.isna(parsed):
        return str(value)
    return f"{parsed.month}/{parsed.day}/{parsed.year}"


def category_label(category: str) -> str:
    return CATEGORY_LABELS.get(category, category)
