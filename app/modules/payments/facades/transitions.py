# -*- coding: utf-8 -*-
"""
app/modules/payments/facades/transitions.py

Tablas de transición explícitas para transacciones y reembolsos.

    transacción:  (pending, approve) → completed
                  (pending, reject)  → failed

    reembolso:    (pending, approve)  → approved
                  (pending, reject)   → rejected
                  (approved, process) → processed

Cualquier par (estado, acción) fuera de la tabla es InvalidStateTransition.
No hay re-entrada ni transiciones automáticas por tiempo.

Autor: Equipo Backoffice LMS
Fecha: 2026-10-01
"""

from typing import Dict, Tuple

from app.modules.payments.enums import (
    RefundAction,
    RefundStatus,
    TransactionStatus,
    VerificationAction,
    VerificationStatus,
)
from .errors import InvalidStateTransition

TRANSACTION_TRANSITIONS: Dict[Tuple[TransactionStatus, VerificationAction], TransactionStatus] = {
    (TransactionStatus.PENDING, VerificationAction.APPROVE): TransactionStatus.COMPLETED,
    (TransactionStatus.PENDING, VerificationAction.REJECT): TransactionStatus.FAILED,
}

REFUND_TRANSITIONS: Dict[Tuple[RefundStatus, RefundAction], RefundStatus] = {
    (RefundStatus.PENDING, RefundAction.APPROVE): RefundStatus.APPROVED,
    (RefundStatus.PENDING, RefundAction.REJECT): RefundStatus.REJECTED,
    (RefundStatus.APPROVED, RefundAction.PROCESS): RefundStatus.PROCESSED,
}

VERIFICATION_OUTCOME: Dict[VerificationAction, VerificationStatus] = {
    VerificationAction.APPROVE: VerificationStatus.APPROVED,
    VerificationAction.REJECT: VerificationStatus.REJECTED,
}


def next_transaction_status(current: TransactionStatus, action: VerificationAction) -> TransactionStatus:
    try:
        return TRANSACTION_TRANSITIONS[(TransactionStatus(current), VerificationAction(action))]
    except KeyError:
        raise InvalidStateTransition(current, action) from None


def next_refund_status(current: RefundStatus, action: RefundAction) -> RefundStatus:
    try:
        return REFUND_TRANSITIONS[(RefundStatus(current), RefundAction(action))]
    except KeyError:
        raise InvalidStateTransition(current, action) from None


__all__ = [
    "TRANSACTION_TRANSITIONS",
    "REFUND_TRANSITIONS",
    "VERIFICATION_OUTCOME",
    "next_transaction_status",
    "next_refund_status",
]

# Fin del archivo app/modules/payments/facades/transitions.py
