# -*- coding: utf-8 -*-
"""
app/modules/promotions/services/__init__.py
"""

from .discount_evaluator import (
    DiscountEvaluator,
    DiscountResult,
    OrderTotal,
    compute_discount,
    final_price_for,
)
from .promo_code_service import PromoCodeService

__all__ = [
    "DiscountEvaluator",
    "DiscountResult",
    "OrderTotal",
    "compute_discount",
    "final_price_for",
    "PromoCodeService",
]

# Fin del archivo app/modules/promotions/services/__init__.py
