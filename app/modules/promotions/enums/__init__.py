# -*- coding: utf-8 -*-
"""
app/modules/promotions/enums/__init__.py
"""

from .discount_enums import ApplicableType, DiscountType

__all__ = ["DiscountType", "ApplicableType"]

# Fin del archivo app/modules/promotions/enums/__init__.py
