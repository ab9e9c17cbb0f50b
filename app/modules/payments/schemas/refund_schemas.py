# -*- coding: utf-8 -*-
"""
app/modules/payments/schemas/refund_schemas.py

Esquemas para solicitudes de reembolso.

Monto y motivo se validan en el servicio (400 con error_code estable),
no aquí, para que el cliente reciba el mismo formato de error que en las
demás reglas de negocio.

Autor: Equipo Backoffice LMS
Fecha: 2026-10-07
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from app.modules.payments.enums import RefundAction, RefundStatus
from .common_schemas import PageMeta


class RefundRequestCreate(BaseModel):
    """Request del cliente para solicitar un reembolso."""

    transaction_id: UUID = Field(
        validation_alias=AliasChoices("transaction_id", "transactionId"),
        description="Transacción completada que se quiere reembolsar.",
    )
    refund_amount: Decimal = Field(
        validation_alias=AliasChoices("refund_amount", "refundAmount", "amount"),
        description="Monto a reembolsar; no puede exceder lo pagado.",
    )
    reason: str = Field(default="", description="Motivo del reembolso.")


class ProcessRefundRequest(BaseModel):
    """Acción del admin: approve | reject (| process)."""

    action: RefundAction
    notes: Optional[str] = Field(default=None, description="Obligatorias al rechazar.")
    refund_reference: Optional[str] = Field(
        default=None,
        max_length=255,
        validation_alias=AliasChoices("refund_reference", "refundReference"),
        description="Referencia del pago devuelto (ID de transferencia).",
    )


class CompleteRefundRequest(BaseModel):
    """Marca un reembolso aprobado como procesado."""

    refund_reference: Optional[str] = Field(
        default=None,
        max_length=255,
        validation_alias=AliasChoices("refund_reference", "refundReference"),
    )
    notes: Optional[str] = None


class RefundOut(BaseModel):
    """
    Representación de una solicitud de reembolso.
    """
    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(description="ID de la solicitud.")
    transaction_id: UUID
    customer_id: UUID
    course_id: UUID
    refund_amount: Decimal
    reason: str
    status: RefundStatus = Field(description="Estado actual del reembolso.")
    processed_by: Optional[UUID] = None
    processed_at: Optional[datetime] = None
    refund_reference: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime = Field(description="Fecha/hora de creación.")
    updated_at: datetime = Field(description="Última fecha/hora de actualización.")


class RefundListResponse(BaseModel):
    items: List[RefundOut]
    meta: PageMeta


__all__ = [
    "RefundRequestCreate",
    "ProcessRefundRequest",
    "CompleteRefundRequest",
    "RefundOut",
    "RefundListResponse",
]

# Fin del archivo app/modules/payments/schemas/refund_schemas.py
