# -*- coding: utf-8 -*-
"""
app/modules/payments/enums/refund_status_enum.py

Enum de estado de la solicitud de reembolso.

    pending → approved → processed
    pending → rejected

Autor: Equipo Backoffice LMS
Fecha: 27/09/2026
"""

from enum import StrEnum

from sqlalchemy import Enum as SAEnum

from app.shared.database.base import as_db_enum


class RefundStatus(StrEnum):
    """Estado del reembolso."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    PROCESSED = "processed"

    __db_enum_name__ = "refund_status_enum"

    @classmethod
    def as_db_enum(cls) -> SAEnum:
        return as_db_enum(cls)

    @property
    def is_terminal(self) -> bool:
        return self in (RefundStatus.REJECTED, RefundStatus.PROCESSED)


__all__ = ["RefundStatus"]

# Fin del archivo app/modules/payments/enums/refund_status_enum.py
