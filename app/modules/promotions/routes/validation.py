# -*- coding: utf-8 -*-
"""
app/modules/promotions/routes/validation.py

Rutas públicas de cupones usadas por el checkout.

Endpoints:
- POST /promo/validate    → descuento aplicable a un artículo
- POST /orders/calculate  → total de la orden con cupón opcional

Autor: Equipo Backoffice LMS
Fecha: 2026-10-10
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.database import get_async_session
from app.modules.catalog.repositories import CatalogRepository
from app.modules.promotions.repositories import PromoCodeRepository
from app.modules.promotions.schemas import (
    OrderCalculateRequest,
    OrderTotalResponse,
    PromoValidateRequest,
    PromoValidateResponse,
)
from app.modules.promotions.services import DiscountEvaluator

router = APIRouter(tags=["promotions:checkout"])


def build_evaluator() -> DiscountEvaluator:
    return DiscountEvaluator(
        promo_repo=PromoCodeRepository(),
        catalog_repo=CatalogRepository(),
    )


@router.post("/promo/validate", response_model=PromoValidateResponse)
async def validate_promo_code(
    payload: PromoValidateRequest,
    session: AsyncSession = Depends(get_async_session),
):
    """
    Valida un cupón para (item_type, item_id).

    404 si el código o el artículo no existen; 400 si el código no puede
    usarse (inactivo, fuera de vigencia, agotado o no aplicable).
    No consume usos del cupón.
    """
    result = await build_evaluator().evaluate(
        session, payload.code, payload.item_type, payload.item_id
    )
    return PromoValidateResponse(
        code=result.code,
        discount_type=result.discount_type,
        discount_value=result.discount_value,
        discount_amount=result.discount_amount,
        original_price=result.original_price,
        final_price=result.final_price,
    )


@router.post("/orders/calculate", response_model=OrderTotalResponse)
async def calculate_order_total(
    payload: OrderCalculateRequest,
    session: AsyncSession = Depends(get_async_session),
):
    total = await build_evaluator().calculate_order_total(
        session, payload.item_type, payload.item_id, payload.promo_code
    )
    return OrderTotalResponse(
        original_price=total.original_price,
        discount_amount=total.discount_amount,
        final_price=total.final_price,
        promo_code=total.promo_code,
    )

# Fin del archivo app/modules/promotions/routes/validation.py
