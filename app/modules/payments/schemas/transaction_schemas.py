# -*- coding: utf-8 -*-
"""
app/modules/payments/schemas/transaction_schemas.py

Esquemas de transacciones de pago manual: envío desde checkout,
acción de verificación del admin y representación de salida.

Los requests aceptan snake_case y el camelCase que envía el panel.

Autor: Equipo Backoffice LMS
Fecha: 2026-10-07
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from app.modules.payments.enums import (
    HistoryAction,
    PaymentProvider,
    TransactionStatus,
    VerificationAction,
    VerificationStatus,
)
from .common_schemas import PageMeta


class ManualPaymentCreate(BaseModel):
    """Request del cliente al reportar un pago manual."""

    course_id: UUID = Field(
        validation_alias=AliasChoices("course_id", "courseId"),
        description="Curso que se compra.",
    )
    payment_method: PaymentProvider = Field(
        validation_alias=AliasChoices("payment_method", "paymentMethod"),
        description="Canal por el que se envió el dinero.",
    )
    payment_reference: Optional[str] = Field(
        default=None,
        max_length=255,
        validation_alias=AliasChoices("payment_reference", "paymentReference"),
        description="ID de transferencia / TID reportado por el cliente.",
    )
    payment_proof_url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("payment_proof_url", "paymentProofUrl"),
        description="URL del comprobante ya subido.",
    )
    promo_code: Optional[str] = Field(
        default=None,
        max_length=50,
        validation_alias=AliasChoices("promo_code", "promoCode"),
    )


class VerifyTransactionRequest(BaseModel):
    """Acción del admin sobre una transacción pendiente."""

    action: VerificationAction
    notes: Optional[str] = Field(default=None, description="Nota libre para la bitácora.")
    rejection_reason: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("rejection_reason", "rejectionReason"),
        description="Motivo explícito de rechazo; si falta se usan las notas.",
    )


class PaymentTransactionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    course_id: UUID
    amount: Decimal
    original_amount: Decimal
    discount_amount: Decimal
    promo_code: Optional[str] = None
    currency: str
    payment_method: PaymentProvider
    payment_reference: Optional[str] = None
    payment_proof_url: Optional[str] = None
    transaction_id: Optional[str] = None
    status: TransactionStatus
    verification_status: VerificationStatus
    verified_by: Optional[UUID] = None
    verified_at: Optional[datetime] = None
    rejection_reason: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class PaymentTransactionListResponse(BaseModel):
    items: List[PaymentTransactionOut]
    meta: PageMeta


class PaymentHistoryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    transaction_id: UUID
    action: HistoryAction
    performed_by: Optional[UUID] = None
    previous_status: Optional[str] = None
    new_status: Optional[str] = None
    notes: Optional[str] = None
    details: Optional[Dict[str, Any]] = None
    created_at: datetime


__all__ = [
    "ManualPaymentCreate",
    "VerifyTransactionRequest",
    "PaymentTransactionOut",
    "PaymentTransactionListResponse",
    "PaymentHistoryOut",
]

# Fin del archivo app/modules/payments/schemas/transaction_schemas.py
