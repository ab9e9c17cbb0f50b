# -*- coding: utf-8 -*-
"""
app/modules/payments/services/__init__.py

Servicios de negocio del módulo Payments.

Autor: Equipo Backoffice LMS
Fecha: 2026-10-06
"""

from .checkout_service import CheckoutService
from .payment_account_service import PaymentAccountService
from .refund_service import RefundService
from .transaction_query_service import TransactionQueryService
from .verification_service import PaymentVerificationService

__all__ = [
    "CheckoutService",
    "PaymentAccountService",
    "RefundService",
    "TransactionQueryService",
    "PaymentVerificationService",
]

# Fin del archivo app/modules/payments/services/__init__.py
