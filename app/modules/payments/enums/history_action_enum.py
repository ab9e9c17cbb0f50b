# -*- coding: utf-8 -*-
"""
app/modules/payments/enums/history_action_enum.py

Tipos de evento registrados en payment_history (bitácora append-only).

Autor: Equipo Backoffice LMS
Fecha: 27/09/2026
"""

from enum import StrEnum

from sqlalchemy import Enum as SAEnum

from app.shared.database.base import as_db_enum


class HistoryAction(StrEnum):
    CREATED = "created"
    VERIFIED = "verified"
    REJECTED = "rejected"
    REFUND_REQUESTED = "refund_requested"
    REFUND_APPROVED = "refund_approved"
    REFUND_REJECTED = "refund_rejected"
    REFUNDED = "refunded"

    __db_enum_name__ = "payment_history_action_enum"

    @classmethod
    def as_db_enum(cls) -> SAEnum:
        return as_db_enum(cls)


__all__ = ["HistoryAction"]

# Fin del archivo app/modules/payments/enums/history_action_enum.py
