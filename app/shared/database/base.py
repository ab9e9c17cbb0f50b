# -*- coding: utf-8 -*-
"""
app/shared/database/base.py

Base declarativa y convención de nombres para modelos ORM.

Este módulo proporciona:
- Base: clase base declarativa de SQLAlchemy
- NAMING_CONVENTION: convención de nombres para constraints
- as_db_enum: helper genérico para mapear StrEnum de Python a columnas

Autor: Equipo Backoffice LMS
Fecha: 2026-09-22
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Type

from sqlalchemy import Enum as SAEnum
from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# ===== NAMING CONVENTION =====
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


# ===== BASE DECLARATIVA =====
class Base(DeclarativeBase):
    """
    Base declarativa para todos los modelos ORM del backoffice.
    Incluye convención de nombres para constraints.
    """
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


# ===== HELPER GENÉRICO PARA ENUMS =====
def as_db_enum(
    enum_cls: Type[Enum],
    name: str | None = None,
    length: int = 32,
) -> SAEnum:
    """
    Devuelve un tipo Enum de SQLAlchemy basado en un Enum de Python.

    Uso típico:

        from app.shared.database.base import Base, as_db_enum
        from .enums import TransactionStatus

        class PaymentTransaction(Base):
            status: Mapped[TransactionStatus] = mapped_column(
                as_db_enum(TransactionStatus),
                nullable=False,
            )

    - Se persiste como VARCHAR (native_enum=False) para que el mismo modelo
      funcione en PostgreSQL y en SQLite (tests) sin tipos ENUM nativos.
    - Se guardan los `.value` del enum (minúsculas), no los nombres.
    - Si no se pasa `name`, usa `__db_enum_name__` del enum o el nombre
      de la clase en minúsculas.
    """
    enum_name = name or getattr(enum_cls, "__db_enum_name__", enum_cls.__name__.lower())

    def _values(_: object) -> list[str]:
        return [e.value for e in enum_cls]  # type: ignore[arg-type]

    return SAEnum(
        enum_cls,
        name=enum_name,
        native_enum=False,
        length=length,
        validate_strings=True,
        values_callable=_values,
    )


def utcnow() -> datetime:
    """Timestamp UTC consciente de zona horaria (default de columnas)."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime | None) -> datetime | None:
    """
    Normaliza un datetime a UTC consciente.

    SQLite devuelve datetimes naive aunque la columna sea timezone=True;
    se asume que cualquier valor naive ya está en UTC.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


__all__ = ["Base", "NAMING_CONVENTION", "as_db_enum", "utcnow", "as_utc"]

# Fin del archivo app/shared/database/base.py
