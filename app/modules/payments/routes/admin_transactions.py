# -*- coding: utf-8 -*-
"""
app/modules/payments/routes/admin_transactions.py

Rutas admin de transacciones de pago manual.

Endpoints:
- GET  /admin/payment-transactions
- GET  /admin/payment-transactions/{transaction_id}
- GET  /admin/payment-transactions/{transaction_id}/history
- POST /admin/payment-transactions/{transaction_id}/verify

Autor: Equipo Backoffice LMS
Fecha: 2026-10-09
"""

from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.database import get_async_session
from app.modules.auth.dependencies import AuthContext, require_admin
from app.modules.payments.enums import TransactionStatus, VerificationStatus
from app.modules.payments.repositories import (
    PaymentHistoryRepository,
    PaymentTransactionRepository,
)
from app.modules.payments.schemas import (
    PageMeta,
    PaymentHistoryOut,
    PaymentTransactionListResponse,
    PaymentTransactionOut,
    VerifyTransactionRequest,
    clamp_limit,
)
from app.modules.payments.services import PaymentVerificationService, TransactionQueryService
from app.modules.promotions.repositories import PromoCodeRepository

router = APIRouter(
    prefix="/admin/payment-transactions",
    tags=["admin:payment-transactions"],
)


def build_transaction_services():
    transaction_repo = PaymentTransactionRepository()
    history_repo = PaymentHistoryRepository()

    query_service = TransactionQueryService(
        transaction_repo=transaction_repo,
        history_repo=history_repo,
    )
    verification_service = PaymentVerificationService(
        transaction_repo=transaction_repo,
        history_repo=history_repo,
        promo_repo=PromoCodeRepository(),
    )
    return query_service, verification_service


@router.get("", response_model=PaymentTransactionListResponse)
async def list_transactions(
    status: Optional[TransactionStatus] = Query(default=None),
    verification_status: Optional[VerificationStatus] = Query(default=None),
    user_id: Optional[UUID] = Query(default=None),
    limit: int = Query(default=50, ge=1),
    offset: int = Query(default=0, ge=0),
    session: AsyncSession = Depends(get_async_session),
    admin: AuthContext = Depends(require_admin),
):
    query_service, _ = build_transaction_services()
    limit = clamp_limit(limit)
    items, total = await query_service.list_transactions(
        session,
        status=status,
        verification_status=verification_status,
        user_id=user_id,
        limit=limit,
        offset=offset,
    )
    return PaymentTransactionListResponse(
        items=[PaymentTransactionOut.model_validate(tx) for tx in items],
        meta=PageMeta.build(total, limit, offset),
    )


@router.get("/{transaction_id}", response_model=PaymentTransactionOut)
async def get_transaction(
    transaction_id: UUID,
    session: AsyncSession = Depends(get_async_session),
    admin: AuthContext = Depends(require_admin),
):
    query_service, _ = build_transaction_services()
    tx = await query_service.get(session, transaction_id)
    return PaymentTransactionOut.model_validate(tx)


@router.get("/{transaction_id}/history", response_model=List[PaymentHistoryOut])
async def get_transaction_history(
    transaction_id: UUID,
    session: AsyncSession = Depends(get_async_session),
    admin: AuthContext = Depends(require_admin),
):
    query_service, _ = build_transaction_services()
    rows = await query_service.history(session, transaction_id)
    return [PaymentHistoryOut.model_validate(r) for r in rows]


@router.post("/{transaction_id}/verify", response_model=PaymentTransactionOut)
async def verify_transaction(
    transaction_id: UUID,
    payload: VerifyTransactionRequest,
    session: AsyncSession = Depends(get_async_session),
    admin: AuthContext = Depends(require_admin),
):
    """
    Aprueba o rechaza una transacción pendiente.

    404 si no existe; 409 si ya fue resuelta (incluida la carrera entre dos
    admins: sólo una acción gana).
    """
    _, verification_service = build_transaction_services()
    tx = await verification_service.verify(
        session,
        transaction_id,
        payload.action,
        admin_id=admin.user_id,
        notes=payload.notes,
        rejection_reason=payload.rejection_reason,
    )
    await session.commit()
    return PaymentTransactionOut.model_validate(tx)

# Fin del archivo app/modules/payments/routes/admin_transactions.py
