# -*- coding: utf-8 -*-
"""
app/modules/payments/models/payment_account_models.py

Cuentas receptoras que se muestran al cliente en el checkout
(número de Easypaisa/JazzCash, IBAN bancario, merchant de Stripe).

Autor: Equipo Backoffice LMS
Fecha: 2026-09-28
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import Boolean, DateTime, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base, utcnow
from app.modules.payments.enums import PaymentProvider


class PaymentAccount(Base):
    __tablename__ = "payment_accounts"
    __table_args__ = (
        Index("ix_payment_accounts_provider_active", "provider", "is_active"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    provider: Mapped[PaymentProvider] = mapped_column(PaymentProvider.as_db_enum(), nullable=False)
    account_name: Mapped[str] = mapped_column(String(255), nullable=False)
    account_number: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    bank_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    iban: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    merchant_id: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    api_key: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        doc="Credencial del proveedor. Nunca se devuelve en claro por la API.",
    )
    instructions: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )


__all__ = ["PaymentAccount"]

# Fin del archivo app/modules/payments/models/payment_account_models.py
