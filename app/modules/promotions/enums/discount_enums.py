# -*- coding: utf-8 -*-
"""
app/modules/promotions/enums/discount_enums.py

Tipo de descuento y alcance de aplicación de un cupón.

Autor: Equipo Backoffice LMS
Fecha: 29/09/2026
"""

from enum import StrEnum

from sqlalchemy import Enum as SAEnum

from app.shared.database.base import as_db_enum


class DiscountType(StrEnum):
    """percentage: value es 0-100; fixed: value es un monto en moneda."""

    PERCENTAGE = "percentage"
    FIXED = "fixed"

    __db_enum_name__ = "discount_type_enum"

    @classmethod
    def as_db_enum(cls) -> SAEnum:
        return as_db_enum(cls)


class ApplicableType(StrEnum):
    """A qué artículos aplica el cupón."""

    ALL = "all"
    COURSE = "course"
    BUNDLE = "bundle"

    __db_enum_name__ = "promo_applicable_type_enum"

    @classmethod
    def as_db_enum(cls) -> SAEnum:
        return as_db_enum(cls)


__all__ = ["DiscountType", "ApplicableType"]

# Fin del archivo app/modules/promotions/enums/discount_enums.py
