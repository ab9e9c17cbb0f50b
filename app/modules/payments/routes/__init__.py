# -*- coding: utf-8 -*-
"""
app/modules/payments/routes/__init__.py

Ensamblador de rutas REST del módulo Payments (se monta bajo /api).

Incluye:
- /admin/payment-transactions/*
- /payment-transactions, /payment-transactions/mine
- /refunds, /refunds/mine, /admin/refunds/*
- /admin/payment-accounts/*, /payment-accounts/active
- /payments/metrics

Autor: Equipo Backoffice LMS
Fecha: 2026-10-09
"""

from fastapi import APIRouter

from .admin_transactions import router as admin_transactions_router
from .transactions import router as transactions_router
from .refunds import router as refunds_router
from .refunds import admin_router as admin_refunds_router
from .payment_accounts import admin_router as admin_accounts_router
from .payment_accounts import public_router as public_accounts_router
from .metrics import router as metrics_router

router = APIRouter()

router.include_router(admin_transactions_router)
router.include_router(transactions_router)
router.include_router(refunds_router)
router.include_router(admin_refunds_router)
router.include_router(admin_accounts_router)
router.include_router(public_accounts_router)
router.include_router(metrics_router)

__all__ = ["router"]

# Fin del archivo app/modules/payments/routes/__init__.py
