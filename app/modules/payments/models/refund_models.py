# -*- coding: utf-8 -*-
"""
app/modules/payments/models/refund_models.py

Modelo ORM para la tabla payment_refunds (solicitudes de reembolso).
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base, utcnow
from app.modules.payments.enums import RefundStatus

class RefundRequest(Base):
    __tablename__ = "payment_refunds"
    __table_args__ = (
        CheckConstraint("refund_amount > 0", name="refund_amount_positive"),
        Index("ix_payment_refunds_transaction_status", "transaction_id", "status"),
        Index("ix_payment_refunds_created_at", "created_at"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    transaction_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("payment_transactions.id", ondelete="RESTRICT"),
        nullable=False,
    )
    customer_id: Mapped[UUID] = mapped_column(Uuid, nullable=False, index=True)
    course_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)

    refund_amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    reason: Mapped[str] = mapped_column(Text, nullable=False)

    status: Mapped[RefundStatus] = mapped_column(
        RefundStatus.as_db_enum(),
        nullable=False,
        default=RefundStatus.PENDING,
        index=True,
    )
    processed_by: Mapped[Optional[UUID]] = mapped_column(Uuid, nullable=True)
    processed_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    refund_reference: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        nullable=False,
    )


__all__ = ["RefundRequest"]

# Fin del archivo app/modules/payments/models/refund_models.py
