# -*- coding: utf-8 -*-
"""
app/modules/payments/repositories/__init__.py

Punto de entrada de repositorios del módulo Payments.

Autor: Equipo Backoffice LMS
Fecha: 2026-09-30
"""

from .payment_transaction_repository import PaymentTransactionRepository
from .refund_repository import RefundRepository
from .payment_history_repository import PaymentHistoryRepository
from .payment_account_repository import PaymentAccountRepository

__all__ = [
    "PaymentTransactionRepository",
    "RefundRepository",
    "PaymentHistoryRepository",
    "PaymentAccountRepository",
]

# Fin del archivo app/modules/payments/repositories/__init__.py
