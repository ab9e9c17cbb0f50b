# -*- coding: utf-8 -*-
"""
app/routes/__init__.py

Ensamblador principal de ruteadores.

- /health              (sin prefijo)
- /api/...             payments + promotions

Autor: Equipo Backoffice LMS
Fecha: 2026-10-11
"""

from fastapi import APIRouter

from app.modules.payments.routes import router as payments_router
from app.modules.promotions.routes import router as promotions_router

from .health_routes import router as health_router

api = APIRouter(prefix="/api")
api.include_router(payments_router)
api.include_router(promotions_router)

router = APIRouter()

# Health check sin prefijo adicional
router.include_router(health_router)
router.include_router(api)

__all__ = ["router"]

# Fin del archivo app/routes/__init__.py
