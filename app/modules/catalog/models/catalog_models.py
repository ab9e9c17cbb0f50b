# -*- coding: utf-8 -*-
"""
app/modules/catalog/models/catalog_models.py

Modelos ORM del catálogo (lectura): Course y CourseBundle.

Las tablas las mantiene el servicio de contenidos; aquí se mapean sólo las
columnas que los pagos necesitan (título, precio, publicación).

Autor: Equipo Backoffice LMS
Fecha: 26/09/2026
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID, uuid4

from sqlalchemy import Boolean, CheckConstraint, DateTime, Numeric, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base, utcnow


class Course(Base):
    __tablename__ = "courses"
    __table_args__ = (
        CheckConstraint("price >= 0", name="price_non_negative"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[Decimal] = mapped_column(
        Numeric(12, 2),
        nullable=False,
        default=Decimal("0"),
        doc="Precio de lista en la moneda de pagos configurada",
    )
    is_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)

    def __repr__(self) -> str:
        return f"<Course id={self.id} title={self.title!r} price={self.price}>"


class CourseBundle(Base):
    __tablename__ = "course_bundles"
    __table_args__ = (
        CheckConstraint("price >= 0", name="price_non_negative"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=Decimal("0"))
    is_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)

    def __repr__(self) -> str:
        return f"<CourseBundle id={self.id} title={self.title!r} price={self.price}>"


__all__ = ["Course", "CourseBundle"]

# Fin del archivo app/modules/catalog/models/catalog_models.py
