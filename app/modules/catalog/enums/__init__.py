# -*- coding: utf-8 -*-
"""
app/modules/catalog/enums/__init__.py
"""

from .item_type_enum import ItemType

__all__ = ["ItemType"]

# Fin del archivo app/modules/catalog/enums/__init__.py
