# -*- coding: utf-8 -*-
"""
app/modules/payments/models/__init__.py

Punto de entrada de modelos ORM del módulo Payments.

- PaymentTransaction
- RefundRequest
- PaymentHistory
- PaymentAccount

Autor: Equipo Backoffice LMS
Fecha: 2026-09-28
"""

from __future__ import annotations

from .payment_transaction_models import PaymentTransaction
from .refund_models import RefundRequest
from .payment_history_models import PaymentHistory
from .payment_account_models import PaymentAccount

__all__ = [
    "PaymentTransaction",
    "RefundRequest",
    "PaymentHistory",
    "PaymentAccount",
]

# Fin del archivo app/modules/payments/models/__init__.py
