# -*- coding: utf-8 -*-
"""
app/modules/catalog/enums/item_type_enum.py

Tipo de artículo vendible del catálogo.

Autor: Equipo Backoffice LMS
Fecha: 26/09/2026
"""

from enum import StrEnum


class ItemType(StrEnum):
    """Artículo al que se aplica un precio (y potencialmente un cupón)."""

    COURSE = "course"
    BUNDLE = "bundle"

    __db_enum_name__ = "item_type_enum"


__all__ = ["ItemType"]

# Fin del archivo app/modules/catalog/enums/item_type_enum.py
