# -*- coding: utf-8 -*-
"""
app/modules/payments/schemas/__init__.py

Esquemas Pydantic del módulo Payments.

Autor: Equipo Backoffice LMS
Fecha: 2026-10-07
"""

from .common_schemas import PageMeta, clamp_limit
from .payment_account_schemas import (
    PaymentAccountCreate,
    PaymentAccountListResponse,
    PaymentAccountOut,
    PaymentAccountPublicOut,
    PaymentAccountUpdate,
    mask_secret,
)
from .refund_schemas import (
    CompleteRefundRequest,
    ProcessRefundRequest,
    RefundListResponse,
    RefundOut,
    RefundRequestCreate,
)
from .transaction_schemas import (
    ManualPaymentCreate,
    PaymentHistoryOut,
    PaymentTransactionListResponse,
    PaymentTransactionOut,
    VerifyTransactionRequest,
)

__all__ = [
    "PageMeta",
    "clamp_limit",
    "PaymentAccountCreate",
    "PaymentAccountListResponse",
    "PaymentAccountOut",
    "PaymentAccountPublicOut",
    "PaymentAccountUpdate",
    "mask_secret",
    "CompleteRefundRequest",
    "ProcessRefundRequest",
    "RefundListResponse",
    "RefundOut",
    "RefundRequestCreate",
    "ManualPaymentCreate",
    "PaymentHistoryOut",
    "PaymentTransactionListResponse",
    "PaymentTransactionOut",
    "VerifyTransactionRequest",
]

# Fin del archivo app/modules/payments/schemas/__init__.py
