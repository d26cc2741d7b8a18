"""Streamlit app for BudgetBuddy.

A single page with summary cards, a form to add income or expense
transactions, the list of recent transactions and a donut chart of
spending by category.  State lives in a :class:`TransactionStore` kept in
``st.session_state`` so it survives Streamlit's reruns; form and delete
actions run as widget callbacks.

To run the dashboard from the command line::

    streamlit run budget_buddy/app.py

or use ``run_dashboard.py`` at the project root.
"""

from __future__ import annotations

import os
import sys

import streamlit as st

# Conditional imports to support both ``streamlit run budget_buddy/app.py``
# (no package context) and importing ``budget_buddy.app`` from tests.
if __package__:
    from . import calculations as calc
    from . import config
    from . import formatting as fmt
    from . import visualization as viz
    from .api_client import build_api
    from .models import CATEGORIES, TRANSACTION_TYPES, TYPE_LABELS, FormDraft
    from .store import TransactionStore
else:
    CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
    PARENT_DIR = os.path.dirname(CURRENT_DIR)
    if PARENT_DIR not in sys.path:
        sys.path.insert(0, PARENT_DIR)
    from budget_buddy import calculations as calc  # type: ignore
    from budget_buddy import config  # type: ignore
    from budget_buddy import formatting as fmt  # type: ignore
    from budget_buddy import visualization as viz  # type: ignore
    from budget_buddy.api_client import build_api  # type: ignore
    from budget_buddy.models import CATEGORIES, TRANSACTION_TYPES, TYPE_LABELS, FormDraft  # type: ignore
    from budget_buddy.store import TransactionStore  # type: ignore

STORE_KEY = 'store'
LOADED_KEY = 'store_loaded'
ERROR_KEY = 'last_error'
DRAFT_KEYS = {
    'description': 'draft_description',
    'amount': 'draft_amount',
    'type': 'draft_type',
    'category': 'draft_category',
}


# ---------------------------------------------------------------------------
# Session helpers
# ---------------------------------------------------------------------------


def _sync_widgets(draft: FormDraft) -> None:
    """Push draft values into the form widgets' session keys."""
    for field_name, key in DRAFT_KEYS.items():
        st.session_state[key] = getattr(draft, field_name)


def _draft_from_widgets() -> FormDraft:
    defaults = FormDraft()
    return FormDraft(**{
        field_name: st.session_state.get(key, getattr(defaults, field_name))
        for field_name, key in DRAFT_KEYS.items()
    })


def _get_store() -> TransactionStore:
    """Return the session's store, creating it on the first run."""
    if STORE_KEY not in st.session_state:
        store = TransactionStore(build_api())
        st.session_state[STORE_KEY] = store
        st.session_state[LOADED_KEY] = False
        st.session_state[ERROR_KEY] = None
        _sync_widgets(store.draft)
    return st.session_state[STORE_KEY]


def _record_result(result) -> None:
    """Remember the last failure for display; silent skips are not failures."""
    if result.ok or result.skipped:
        st.session_state[ERROR_KEY] = None
    else:
        st.session_state[ERROR_KEY] = str(result.error)


def _ensure_loaded(store: TransactionStore) -> None:
    """Fetch the collection once per session."""
    if st.session_state.get(LOADED_KEY):
        return
    _record_result(store.load())
    st.session_state[LOADED_KEY] = True


def _handle_submit() -> None:
    store = _get_store()
    result = store.create(_draft_from_widgets())
    if result.ok:
        _sync_widgets(store.draft)
    _record_result(result)


def _handle_delete(transaction_id: str) -> None:
    _record_result(_get_store().remove(transaction_id))


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def render_header(mock_mode: bool) -> None:
    col1, col2 = st.columns([3, 2])
    with col1:
        st.title("👛 BudgetBuddy")
        st.markdown("Track your financial health")
    with col2:
        if mock_mode:
            st.warning("⚠️ Mock Mode (set BUDGETBUDDY_USE_MOCK=0 to connect to the backend)")


def render_summary(summary: calc.Totals) -> None:
    """Render balance, income and expense cards."""
    balance_text = fmt.escape_dollar_for_markdown(fmt.format_currency(summary.balance))
    if summary.balance < 0:
        balance_text = f":red[{balance_text}]"

    col1, col2, col3 = st.columns(3)
    with col1:
        with st.container(border=True):
            st.caption("💲 Total Balance")
            st.markdown(f"### {balance_text}")
    with col2:
        with st.container(border=True):
            st.caption("📈 Total Income")
            st.markdown(f"### {fmt.escape_dollar_for_markdown(fmt.format_currency(summary.income))}")
    with col3:
        with st.container(border=True):
            st.caption("📉 Total Expenses")
            st.markdown(f"### {fmt.escape_dollar_for_markdown(fmt.format_currency(summary.expenses))}")


def render_add_form() -> None:
    """Render the add-transaction form bound to the draft session keys."""
    with st.container(border=True):
        st.subheader("Add Transaction")
        with st.form("add_transaction_form"):
            st.text_input(
                "Description",
                key=DRAFT_KEYS['description'],
                placeholder="Description (e.g. Rent, Coffee)",
            )
            col1, col2 = st.columns(2)
            with col1:
                st.text_input("Amount", key=DRAFT_KEYS['amount'], placeholder="Amount")
            with col2:
                st.selectbox(
                    "Type",
                    options=list(TRANSACTION_TYPES),
                    format_func=lambda value: TYPE_LABELS.get(value, value),
                    key=DRAFT_KEYS['type'],
                )
            st.selectbox(
                "Category",
                options=list(CATEGORIES),
                format_func=fmt.category_label,
                key=DRAFT_KEYS['category'],
            )
            st.form_submit_button(
                "➕ Add Transaction",
                on_click=_handle_submit,
                type="primary",
                use_container_width=True,
            )


def render_transaction_list(store: TransactionStore) -> None:
    with st.container(border=True):
        st.subheader("Recent Transactions")
        if store.loading:
            st.caption("Loading data...")
            return
        if not store.transactions:
            st.caption("No transactions yet.")
            return

        for transaction in store.transactions:
            icon_col, text_col, amount_col, action_col = st.columns([1, 6, 3, 1])
            with icon_col:
                st.markdown("📈" if transaction.is_income else "📉")
            with text_col:
                st.markdown(f"**{fmt.escape_dollar_for_markdown(transaction.description)}**")
                st.caption(f"{transaction.category} • {fmt.format_display_date(transaction.date)}")
            with amount_col:
                amount_text = fmt.escape_dollar_for_markdown(fmt.format_signed_amount(transaction))
                st.markdown(f":green[**{amount_text}**]" if transaction.is_income else f"**{amount_text}**")
            with action_col:
                st.button(
                    "🗑️",
                    key=f"delete_{transaction.id}",
                    help="Delete transaction",
                    on_click=_handle_delete,
                    args=(transaction.id,),
                )

        st.download_button(
            "⬇️ Download CSV",
            data=calc.transactions_frame(store.transactions).to_csv(index=False),
            file_name="transactions.csv",
            mime="text/csv",
        )


def render_spending_breakdown(breakdown) -> None:
    with st.container(border=True):
        st.subheader("Spending Breakdown")
        if breakdown:
            st.plotly_chart(viz.create_category_donut(breakdown), use_container_width=True)
        else:
            st.caption(viz.EMPTY_CHART_TITLE)


def main() -> None:
    """Entry point for the Streamlit app."""
    config.configure_logging()
    st.set_page_config(page_title="BudgetBuddy", page_icon="👛", layout="wide")

    store = _get_store()
    if not st.session_state.get(LOADED_KEY):
        with st.spinner("Loading data..."):
            _ensure_loaded(store)

    render_header(config.use_mock_data())
    if st.session_state.get(ERROR_KEY):
        st.error(st.session_state[ERROR_KEY])

    render_summary(calc.totals(store.transactions))

    left, right = st.columns([2, 1])
    with left:
        render_add_form()
        render_transaction_list(store)
    with right:
        render_spending_breakdown(calc.category_breakdown(store.transactions))


if __name__ == "__main__":  # pragma: no cover
    main()
