# -*- coding: utf-8 -*-
"""
app/modules/promotions/schemas/__init__.py
"""

from .promo_code_schemas import (
    PromoCodeCreate,
    PromoCodeListResponse,
    PromoCodeOut,
    PromoCodeStats,
    PromoCodeUpdate,
)
from .validation_schemas import (
    OrderCalculateRequest,
    OrderTotalResponse,
    PromoValidateRequest,
    PromoValidateResponse,
)

__all__ = [
    "PromoCodeCreate",
    "PromoCodeListResponse",
    "PromoCodeOut",
    "PromoCodeStats",
    "PromoCodeUpdate",
    "OrderCalculateRequest",
    "OrderTotalResponse",
    "PromoValidateRequest",
    "PromoValidateResponse",
]

# Fin del archivo app/modules/promotions/schemas/__init__.py
