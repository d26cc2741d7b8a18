"""Tests for wire mapping and the form draft."""

from __future__ import annotations

import pytest

from budget_buddy.models import DecodeFailure, Err, FormDraft, NetworkFailure, Ok, Transaction, ValidationSkip


def test_from_wire_maps_underscore_id() -> None:
    transaction = Transaction.from_wire({
        '_id': 65,
        'description': 'Bus',
        'amount': '3.20',
        'type': 'expense',
        'category': 'Transport',
        'date': '2024-02-02',
    })
    assert transaction.id == '65'
    assert transaction.amount == 3.2
    assert transaction.type == 'expense'
    assert not transaction.is_income
    assert transaction.to_wire()['_id'] == '65'


@pytest.mark.parametrize('payload', [
    [],
    {'_id': '1', 'description': 'x', 'amount': 1, 'type': 'expense', 'category': 'Food'},
    {'_id': '1', 'description': 'x', 'amount': 'lots', 'type': 'expense', 'category': 'Food', 'date': 'd'},
    {'_id': '1', 'description': 'x', 'amount': None, 'type': 'expense', 'category': 'Food', 'date': 'd'},
    {'_id': '1', 'description': 'x', 'amount': 10 ** 400, 'type': 'expense', 'category': 'Food', 'date': 'd'},
    {'_id': '1', 'description': 'x', 'amount': 'NaN', 'type': 'expense', 'category': 'Food', 'date': 'd'},
    {'_id': '1', 'description': 'x', 'amount': 'Infinity', 'type': 'expense', 'category': 'Food', 'date': 'd'},
])
def test_from_wire_rejects_bad_payloads(payload) -> None:
    with pytest.raises(DecodeFailure):
        Transaction.from_wire(payload)


def test_form_draft_defaults() -> None:
    draft = FormDraft()
    assert (draft.description, draft.amount, draft.type, draft.category) == ('', '', 'expense', 'Food')
    assert draft.is_blank()


def test_form_draft_to_transaction_stamps_date() -> None:
    new = FormDraft(description='Pay', amount='10', type='income', category='Salary').to_transaction(10.0)
    assert new.amount == 10.0
    assert new.type == 'income'
    assert new.date.endswith('Z')
    assert 'T' in new.date


def test_result_flags() -> None:
    assert Ok([]).ok
    assert not Err(NetworkFailure('x')).ok
    assert not Err(NetworkFailure('x')).skipped
    assert Err(ValidationSkip('x')).skipped
