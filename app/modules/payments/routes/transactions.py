# -*- coding: utf-8 -*-
"""
app/modules/payments/routes/transactions.py

Rutas de cliente para pagos manuales.

Endpoints:
- POST /payment-transactions       → envía un pago manual (201)
- GET  /payment-transactions/mine  → pagos del usuario autenticado

Autor: Equipo Backoffice LMS
Fecha: 2026-10-09
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.database import get_async_session
from app.modules.auth.dependencies import AuthContext, get_current_user
from app.modules.catalog.repositories import CatalogRepository
from app.modules.payments.enums import TransactionStatus
from app.modules.payments.repositories import (
    PaymentHistoryRepository,
    PaymentTransactionRepository,
)
from app.modules.payments.schemas import (
    ManualPaymentCreate,
    PageMeta,
    PaymentTransactionListResponse,
    PaymentTransactionOut,
    clamp_limit,
)
from app.modules.payments.services import CheckoutService, TransactionQueryService
from app.modules.promotions.repositories import PromoCodeRepository
from app.modules.promotions.services import DiscountEvaluator

router = APIRouter(
    prefix="/payment-transactions",
    tags=["payments:transactions"],
)


def build_checkout_service() -> CheckoutService:
    catalog_repo = CatalogRepository()
    return CheckoutService(
        transaction_repo=PaymentTransactionRepository(),
        history_repo=PaymentHistoryRepository(),
        catalog_repo=catalog_repo,
        evaluator=DiscountEvaluator(
            promo_repo=PromoCodeRepository(),
            catalog_repo=catalog_repo,
        ),
    )


@router.post(
    "",
    response_model=PaymentTransactionOut,
    status_code=status.HTTP_201_CREATED,
)
async def submit_manual_payment(
    payload: ManualPaymentCreate,
    session: AsyncSession = Depends(get_async_session),
    user: AuthContext = Depends(get_current_user),
):
    """
    Registra un pago manual pendiente de verificación.

    El monto se calcula en servidor a partir del precio del curso y del
    cupón (si viene); nunca se toma del cliente.
    """
    service = build_checkout_service()
    tx = await service.submit_manual_payment(
        session,
        user_id=user.user_id,
        course_id=payload.course_id,
        payment_method=payload.payment_method,
        payment_reference=payload.payment_reference,
        payment_proof_url=payload.payment_proof_url,
        promo_code=payload.promo_code,
    )
    await session.commit()
    return PaymentTransactionOut.model_validate(tx)


@router.get("/mine", response_model=PaymentTransactionListResponse)
async def list_my_transactions(
    status: Optional[TransactionStatus] = Query(default=None),
    limit: int = Query(default=50, ge=1),
    offset: int = Query(default=0, ge=0),
    session: AsyncSession = Depends(get_async_session),
    user: AuthContext = Depends(get_current_user),
):
    query_service = TransactionQueryService(
        transaction_repo=PaymentTransactionRepository(),
        history_repo=PaymentHistoryRepository(),
    )
    limit = clamp_limit(limit)
    items, total = await query_service.list_transactions(
        session,
        status=status,
        user_id=user.user_id,
        limit=limit,
        offset=offset,
    )
    return PaymentTransactionListResponse(
        items=[PaymentTransactionOut.model_validate(tx) for tx in items],
        meta=PageMeta.build(total, limit, offset),
    )

# Fin del archivo app/modules/payments/routes/transactions.py
