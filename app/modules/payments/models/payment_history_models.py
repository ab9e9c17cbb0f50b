# -*- coding: utf-8 -*-
"""
app/modules/payments/models/payment_history_models.py

Modelo ORM para payment_history: bitácora append-only de eventos sobre
transacciones (creación, verificación, reembolsos).

Autor: Equipo Backoffice LMS
Fecha: 2026-09-28
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional
from uuid import UUID, uuid4

from sqlalchemy import JSON, DateTime, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base, utcnow
from app.modules.payments.enums import HistoryAction


class PaymentHistory(Base):
    """Evento inmutable asociado a una transacción."""

    __tablename__ = "payment_history"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    transaction_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("payment_transactions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    action: Mapped[HistoryAction] = mapped_column(HistoryAction.as_db_enum(), nullable=False)
    performed_by: Mapped[Optional[UUID]] = mapped_column(
        Uuid,
        nullable=True,
        doc="Usuario (cliente o admin) que originó el evento.",
    )
    previous_status: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    new_status: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    details: Mapped[Optional[Dict[str, Any]]] = mapped_column(JSON, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    def __repr__(self) -> str:
        return f"<PaymentHistory tx={self.transaction_id} action={self.action}>"


__all__ = ["PaymentHistory"]

# Fin del archivo app/modules/payments/models/payment_history_models.py
