# -*- coding: utf-8 -*-
"""
app/modules/payments/enums/transaction_status_enum.py

Estados de una transacción de pago manual y de su verificación.

Ciclo de vida de TransactionStatus:
    pending → completed   (admin aprueba)
    pending → failed      (admin rechaza)

`cancelled` existe en la tabla por compatibilidad con registros históricos
del LMS, pero ningún flujo de este servicio transiciona hacia él.

Autor: Equipo Backoffice LMS
Fecha: 27/09/2026
"""

from enum import StrEnum

from sqlalchemy import Enum as SAEnum

from app.shared.database.base import as_db_enum


class TransactionStatus(StrEnum):
    """Estado de la transacción."""

    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"

    __db_enum_name__ = "transaction_status_enum"

    @classmethod
    def as_db_enum(cls) -> SAEnum:
        return as_db_enum(cls)


class VerificationStatus(StrEnum):
    """Resultado de la revisión manual del comprobante."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    __db_enum_name__ = "verification_status_enum"

    @classmethod
    def as_db_enum(cls) -> SAEnum:
        return as_db_enum(cls)


__all__ = ["TransactionStatus", "VerificationStatus"]

# Fin del archivo app/modules/payments/enums/transaction_status_enum.py
