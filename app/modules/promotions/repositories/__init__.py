# -*- coding: utf-8 -*-
"""
app/modules/promotions/repositories/__init__.py
"""

from .promo_code_repository import PromoCodeRepository

__all__ = ["PromoCodeRepository"]

# Fin del archivo app/modules/promotions/repositories/__init__.py
