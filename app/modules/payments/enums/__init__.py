# -*- coding: utf-8 -*-
"""
app/modules/payments/enums/__init__.py

Superficie de exportación de enums del módulo Payments.

Incluye:
- TransactionStatus / VerificationStatus
- RefundStatus
- PaymentProvider
- VerificationAction / RefundAction
- HistoryAction

Autor: Equipo Backoffice LMS
Fecha: 27/09/2026
"""

from .admin_action_enum import RefundAction, VerificationAction
from .history_action_enum import HistoryAction
from .payment_provider_enum import PaymentProvider
from .refund_status_enum import RefundStatus
from .transaction_status_enum import TransactionStatus, VerificationStatus

__all__ = [
    "TransactionStatus",
    "VerificationStatus",
    "RefundStatus",
    "PaymentProvider",
    "VerificationAction",
    "RefundAction",
    "HistoryAction",
]

# Fin del archivo app/modules/payments/enums/__init__.py
