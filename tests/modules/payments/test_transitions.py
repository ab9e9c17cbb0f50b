# -*- coding: utf-8 -*-
"""
tests/modules/payments/test_transitions.py

Matriz de transiciones de transacciones y reembolsos.
"""

import pytest

from app.modules.payments.enums import (
    RefundAction,
    RefundStatus,
    TransactionStatus,
    VerificationAction,
)
from app.modules.payments.facades import (
    InvalidStateTransition,
    next_refund_status,
    next_transaction_status,
)


@pytest.mark.parametrize("src,action,dst", [
    (TransactionStatus.PENDING, VerificationAction.APPROVE, TransactionStatus.COMPLETED),
    (TransactionStatus.PENDING, VerificationAction.REJECT, TransactionStatus.FAILED),
])
def test_transaction_allowed_transitions(src, action, dst):
    assert next_transaction_status(src, action) == dst


@pytest.mark.parametrize("src", [
    TransactionStatus.COMPLETED,
    TransactionStatus.FAILED,
    TransactionStatus.CANCELLED,
])
@pytest.mark.parametrize("action", list(VerificationAction))
def test_transaction_terminal_states_reject_any_action(src, action):
    with pytest.raises(InvalidStateTransition):
        next_transaction_status(src, action)


@pytest.mark.parametrize("src,action,allowed", [
    (RefundStatus.PENDING, RefundAction.APPROVE, True),
    (RefundStatus.PENDING, RefundAction.REJECT, True),
    # process sólo desde approved
    (RefundStatus.PENDING, RefundAction.PROCESS, False),
    (RefundStatus.APPROVED, RefundAction.PROCESS, True),
    (RefundStatus.APPROVED, RefundAction.APPROVE, False),
    (RefundStatus.APPROVED, RefundAction.REJECT, False),
    # terminales
    (RefundStatus.REJECTED, RefundAction.APPROVE, False),
    (RefundStatus.PROCESSED, RefundAction.PROCESS, False),
])
def test_refund_transition_matrix(src, action, allowed):
    if allowed:
        assert next_refund_status(src, action) in set(RefundStatus)
    else:
        with pytest.raises(InvalidStateTransition):
            next_refund_status(src, action)


def test_invalid_transition_maps_to_conflict():
    exc = InvalidStateTransition(RefundStatus.REJECTED, RefundAction.APPROVE)
    assert exc.status_code == 409
    assert exc.error_code == "invalid_state_transition"


def test_terminal_refund_states():
    assert RefundStatus.REJECTED.is_terminal
    assert RefundStatus.PROCESSED.is_terminal
    assert not RefundStatus.APPROVED.is_terminal

# Fin del archivo tests/modules/payments/test_transitions.py
