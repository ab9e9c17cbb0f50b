# -*- coding: utf-8 -*-
"""
app/modules/payments/models/payment_transaction_models.py

Modelo ORM para la tabla payment_transactions.

Una transacción nace `pending` en el checkout manual (el cliente sube el
comprobante) y la muta exactamente una vez el administrador al verificarla.
Nunca se borra.

Invariantes de tabla:
- amount >= 0
- amount = original_amount - discount_amount

Autor: Equipo Backoffice LMS
Fecha: 2026-09-28
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Numeric,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base, utcnow
from app.modules.payments.enums import PaymentProvider, TransactionStatus, VerificationStatus

class PaymentTransaction(Base):
    """Pago manual (transferencia / billetera móvil) pendiente de verificación."""

    __tablename__ = "payment_transactions"
    __table_args__ = (
        CheckConstraint("amount >= 0", name="amount_non_negative"),
        CheckConstraint("discount_amount >= 0", name="discount_non_negative"),
        Index("ix_payment_transactions_status_created", "status", "created_at"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        nullable=False,
        index=True,
        doc="ID del cliente en el servicio de identidad (claim 'sub').",
    )

    course_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("courses.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    amount: Mapped[Decimal] = mapped_column(
        Numeric(12, 2),
        nullable=False,
        doc="Monto a pagar tras aplicar el descuento.",
    )
    original_amount: Mapped[Decimal] = mapped_column(
        Numeric(12, 2),
        nullable=False,
        doc="Precio de lista del curso al momento del checkout.",
    )
    discount_amount: Mapped[Decimal] = mapped_column(
        Numeric(12, 2),
        nullable=False,
        default=Decimal("0"),
    )
    promo_code: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    currency: Mapped[str] = mapped_column(String(3), nullable=False)

    payment_method: Mapped[PaymentProvider] = mapped_column(
        PaymentProvider.as_db_enum(),
        nullable=False,
    )
    payment_reference: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
        doc="Referencia que el cliente reporta (ID de transferencia, TID de billetera).",
    )
    payment_proof_url: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        doc="URL del comprobante subido al almacenamiento externo.",
    )
    transaction_id: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
        doc="ID externo del proveedor, si existe.",
    )

    status: Mapped[TransactionStatus] = mapped_column(
        TransactionStatus.as_db_enum(),
        nullable=False,
        default=TransactionStatus.PENDING,
        index=True,
    )
    verification_status: Mapped[VerificationStatus] = mapped_column(
        VerificationStatus.as_db_enum(),
        nullable=False,
        default=VerificationStatus.PENDING,
    )
    verified_by: Mapped[Optional[UUID]] = mapped_column(Uuid, nullable=True)
    verified_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    rejection_reason: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    notes: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        doc="Bitácora de auditoría: una línea por acción administrativa.",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )

    def __repr__(self) -> str:
        return (
            f"<PaymentTransaction id={self.id} user_id={self.user_id} "
            f"amount={self.amount} status={self.status}>"
        )


__all__ = ["PaymentTransaction"]

# Fin del archivo app/modules/payments/models/payment_transaction_models.py
