# -*- coding: utf-8 -*-
"""
app/modules/promotions/routes/__init__.py

Ensamblador de rutas del módulo Promotions (se monta bajo /api).
"""

from fastapi import APIRouter

from .admin_promo_codes import router as admin_promo_codes_router
from .validation import router as validation_router

router = APIRouter()

router.include_router(validation_router)
router.include_router(admin_promo_codes_router)

__all__ = ["router"]

# Fin del archivo app/modules/promotions/routes/__init__.py
