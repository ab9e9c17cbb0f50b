# -*- coding: utf-8 -*-
"""
app/modules/promotions/models/__init__.py
"""

from .promo_code_models import PromoCode

__all__ = ["PromoCode"]

# Fin del archivo app/modules/promotions/models/__init__.py
