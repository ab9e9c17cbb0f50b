# -*- coding: utf-8 -*-
"""
app/modules/promotions/models/promo_code_models.py

Modelo ORM para la tabla promo_codes.

Invariantes:
- code único, almacenado en mayúsculas
- discount_value > 0 (y <= 100 si es porcentaje)
- used_count <= usage_limit cuando hay límite
- valid_from <= valid_until cuando ambos existen

Autor: Equipo Backoffice LMS
Fecha: 29/09/2026
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID, uuid4

from sqlalchemy import JSON, Boolean, CheckConstraint, DateTime, Integer, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base, utcnow
from app.modules.promotions.enums import ApplicableType, DiscountType


class PromoCode(Base):
    """Cupón de descuento."""

    __tablename__ = "promo_codes"
    __table_args__ = (
        CheckConstraint("discount_value > 0", name="discount_value_positive"),
        CheckConstraint("used_count >= 0", name="used_count_non_negative"),
        CheckConstraint(
            "usage_limit IS NULL OR used_count <= usage_limit",
            name="used_count_within_limit",
        ),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    code: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    discount_type: Mapped[DiscountType] = mapped_column(DiscountType.as_db_enum(), nullable=False)
    discount_value: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)

    valid_from: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        doc="Sin valor = sin límite inferior.",
    )
    valid_until: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        doc="Sin valor = sin límite superior.",
    )

    usage_limit: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
        doc="Máximo de usos; None = ilimitado.",
    )
    used_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    applicable_type: Mapped[ApplicableType] = mapped_column(
        ApplicableType.as_db_enum(),
        nullable=False,
        default=ApplicableType.ALL,
    )
    applicable_ids: Mapped[Optional[List[str]]] = mapped_column(
        JSON,
        nullable=True,
        doc="IDs (UUID en texto) de cursos/paquetes; vacío = todos los del tipo.",
    )

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )

    def __repr__(self) -> str:
        return f"<PromoCode code={self.code!r} type={self.discount_type} value={self.discount_value}>"


__all__ = ["PromoCode"]

# Fin del archivo app/modules/promotions/models/promo_code_models.py
