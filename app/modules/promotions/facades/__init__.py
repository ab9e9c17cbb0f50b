# -*- coding: utf-8 -*-
"""
app/modules/promotions/facades/__init__.py
"""

from .errors import (
    DuplicatePromoCode,
    InvalidPromoCode,
    PromoCodeNotFound,
    PromoCodeValidationError,
)

__all__ = [
    "PromoCodeNotFound",
    "InvalidPromoCode",
    "DuplicatePromoCode",
    "PromoCodeValidationError",
]

# Fin del archivo app/modules/promotions/facades/__init__.py
