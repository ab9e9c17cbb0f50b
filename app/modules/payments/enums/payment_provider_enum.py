# -*- coding: utf-8 -*-
"""
app/modules/payments/enums/payment_provider_enum.py

Proveedores / métodos de pago aceptados en el checkout manual.

Autor: Equipo Backoffice LMS
Fecha: 27/09/2026
"""

from enum import StrEnum

from sqlalchemy import Enum as SAEnum

from app.shared.database.base import as_db_enum


class PaymentProvider(StrEnum):
    """Canal por el que el cliente envía el dinero."""

    EASYPAISA = "easypaisa"
    JAZZCASH = "jazzcash"
    BANK_TRANSFER = "bank_transfer"
    STRIPE = "stripe"

    __db_enum_name__ = "payment_provider_enum"

    @classmethod
    def as_db_enum(cls) -> SAEnum:
        return as_db_enum(cls)


__all__ = ["PaymentProvider"]

# Fin del archivo app/modules/payments/enums/payment_provider_enum.py
