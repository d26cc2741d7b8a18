"""In-memory transaction store kept in sync with the backend.

The store owns the ordered list of transactions shown by the dashboard,
the ``loading`` flag for the initial fetch and the add-transaction form
draft.  Every mutating call goes to the backend first and only touches
local state once the backend has confirmed it.  Failures are logged and
handed back to the caller as :class:`~budget_buddy.models.Err` values
instead of being raised.
"""

from __future__ import annotations

import math
from typing import List, Optional, Union

from loguru import logger

from .models import (
    BudgetBuddyError,
    Err,
    FormDraft,
    InvalidAmount,
    Ok,
    Transaction,
    ValidationSkip,
)

StoreResult = Union[Ok, Err]


def parse_amount(text: str) -> float:
    """Read the raw amount text from the form.

    Thousands separators and surrounding whitespace are tolerated; the
    sign is not checked.

    Raises:
        InvalidAmount: if the text is not a finite number.
    """
    cleaned = str(text).strip().replace(',', '')
    try:
        value = float(cleaned)
    except ValueError as exc:
        raise InvalidAmount(f"Amount {text!r} is not a number") from exc
    if not math.isfinite(value):
        raise InvalidAmount(f"Amount {text!r} is not a finite number")
    return value


class TransactionStore:
    """Authoritative local copy of the transaction collection."""

    def __init__(self, api, transactions: Optional[List[Transaction]] = None):
        self.api = api
        self.transactions: List[Transaction] = list(transactions or [])
        self.loading = False
        self.draft = FormDraft()

    def _fail(self, action: str, error: BudgetBuddyError) -> Err:
        logger.error(f"Error {action}: {error}")
        return Err(error)

    def load(self) -> StoreResult:
        """Replace the local collection with the backend's."""
        self.loading = True
        try:
            fetched = self.api.list_transactions()
        except BudgetBuddyError as exc:
            return self._fail('fetching', exc)
        finally:
            self.loading = False
        self.transactions = list(fetched)
        logger.info(f"Loaded {len(self.transactions)} transactions")
        return Ok(self.transactions)

    def create(self, draft: Optional[FormDraft] = None) -> StoreResult:
        """Send ``draft`` (or the store's own draft) to the backend.

        Blank description or amount is a silent no-op.  On success the new
        record is prepended and the draft resets to its defaults; on any
        failure both the collection and the draft are left alone.
        """
        draft = draft if draft is not None else self.draft
        if draft.is_blank():
            logger.debug("Skipping create: description or amount is empty")
            return Err(ValidationSkip("Description and amount are required"))

        try:
            amount = parse_amount(draft.amount)
            saved = self.api.create_transaction(draft.to_transaction(amount))
        except BudgetBuddyError as exc:
            return self._fail('adding', exc)

        self.transactions = [saved] + self.transactions
        self.draft = FormDraft()
        logger.info(f"Added transaction {saved.id} ({saved.type}, {saved.amount:.2f})")
        return Ok(self.transactions)

    def remove(self, transaction_id: str) -> StoreResult:
        """Delete on the backend, then drop every local entry with that id."""
        try:
            self.api.delete_transaction(transaction_id)
        except BudgetBuddyError as exc:
            return self._fail('deleting', exc)
        self.transactions = [t for t in self.transactions if t.id != transaction_id]
        logger.info(f"Deleted transaction {transaction_id}")
        return Ok(self.transactions)
