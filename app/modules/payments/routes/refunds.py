# -*- coding: utf-8 -*-
"""
app/modules/payments/routes/refunds.py

Rutas de reembolsos.

Cliente:
- POST /refunds                       → solicita un reembolso (201)
- GET  /refunds/mine
- GET  /refunds/by-transaction/{transaction_id}   → reembolsos de un pago propio

Admin:
- GET  /admin/refunds
- GET  /admin/refunds/{refund_id}
- POST /admin/refunds/{refund_id}/process   → approve | reject
- POST /admin/refunds/{refund_id}/complete  → approved → processed

Autor: Equipo Backoffice LMS
Fecha: 2026-10-09
"""

from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.database import get_async_session
from app.modules.auth.dependencies import AuthContext, get_current_user, require_admin
from app.modules.payments.enums import RefundStatus
from app.modules.payments.repositories import (
    PaymentHistoryRepository,
    PaymentTransactionRepository,
    RefundRepository,
)
from app.modules.payments.schemas import (
    CompleteRefundRequest,
    PageMeta,
    ProcessRefundRequest,
    RefundListResponse,
    RefundOut,
    RefundRequestCreate,
    clamp_limit,
)
from app.modules.payments.services import RefundService

router = APIRouter(
    prefix="/refunds",
    tags=["payments:refunds"],
)

admin_router = APIRouter(
    prefix="/admin/refunds",
    tags=["admin:refunds"],
)


def build_refund_service() -> RefundService:
    return RefundService(
        refund_repo=RefundRepository(),
        transaction_repo=PaymentTransactionRepository(),
        history_repo=PaymentHistoryRepository(),
    )


# ------------------------------------------------------------------ #
# Cliente
# ------------------------------------------------------------------ #
@router.post(
    "",
    response_model=RefundOut,
    status_code=status.HTTP_201_CREATED,
)
async def request_refund(
    payload: RefundRequestCreate,
    session: AsyncSession = Depends(get_async_session),
    user: AuthContext = Depends(get_current_user),
):
    service = build_refund_service()
    refund = await service.request_refund(
        session,
        customer_id=user.user_id,
        transaction_id=payload.transaction_id,
        refund_amount=payload.refund_amount,
        reason=payload.reason,
    )
    await session.commit()
    return RefundOut.model_validate(refund)


@router.get("/mine", response_model=RefundListResponse)
async def list_my_refunds(
    limit: int = Query(default=50, ge=1),
    offset: int = Query(default=0, ge=0),
    session: AsyncSession = Depends(get_async_session),
    user: AuthContext = Depends(get_current_user),
):
    service = build_refund_service()
    limit = clamp_limit(limit)
    items, total = await service.list_refunds(
        session, customer_id=user.user_id, limit=limit, offset=offset
    )
    return RefundListResponse(
        items=[RefundOut.model_validate(r) for r in items],
        meta=PageMeta.build(total, limit, offset),
    )


@router.get("/by-transaction/{transaction_id}", response_model=List[RefundOut])
async def list_refunds_for_transaction(
    transaction_id: UUID,
    session: AsyncSession = Depends(get_async_session),
    user: AuthContext = Depends(get_current_user),
):
    service = build_refund_service()
    # El admin ve cualquier transacción; el cliente solo las suyas
    owner = None if user.is_admin else user.user_id
    refunds = await service.list_for_transaction(session, transaction_id, customer_id=owner)
    return [RefundOut.model_validate(r) for r in refunds]


# ------------------------------------------------------------------ #
# Admin
# ------------------------------------------------------------------ #
@admin_router.get("", response_model=RefundListResponse)
async def list_refunds(
    status: Optional[RefundStatus] = Query(default=None),
    limit: int = Query(default=50, ge=1),
    offset: int = Query(default=0, ge=0),
    session: AsyncSession = Depends(get_async_session),
    admin: AuthContext = Depends(require_admin),
):
    service = build_refund_service()
    limit = clamp_limit(limit)
    items, total = await service.list_refunds(
        session, status=status, limit=limit, offset=offset
    )
    return RefundListResponse(
        items=[RefundOut.model_validate(r) for r in items],
        meta=PageMeta.build(total, limit, offset),
    )


@admin_router.get("/{refund_id}", response_model=RefundOut)
async def get_refund(
    refund_id: UUID,
    session: AsyncSession = Depends(get_async_session),
    admin: AuthContext = Depends(require_admin),
):
    service = build_refund_service()
    return RefundOut.model_validate(await service.get(session, refund_id))


@admin_router.post("/{refund_id}/process", response_model=RefundOut)
async def process_refund(
    refund_id: UUID,
    payload: ProcessRefundRequest,
    session: AsyncSession = Depends(get_async_session),
    admin: AuthContext = Depends(require_admin),
):
    """
    approve | reject sobre un reembolso pendiente.

    400 si se rechaza sin notas; 404 si no existe; 409 si ya no está pendiente.
    """
    service = build_refund_service()
    refund = await service.process(
        session,
        refund_id,
        payload.action,
        admin_id=admin.user_id,
        notes=payload.notes,
        refund_reference=payload.refund_reference,
    )
    await session.commit()
    return RefundOut.model_validate(refund)


@admin_router.post("/{refund_id}/complete", response_model=RefundOut)
async def complete_refund(
    refund_id: UUID,
    payload: CompleteRefundRequest,
    session: AsyncSession = Depends(get_async_session),
    admin: AuthContext = Depends(require_admin),
):
    """Marca como procesado un reembolso aprobado (requiere referencia)."""
    service = build_refund_service()
    refund = await service.complete(
        session,
        refund_id,
        admin_id=admin.user_id,
        refund_reference=payload.refund_reference,
        notes=payload.notes,
    )
    await session.commit()
    return RefundOut.model_validate(refund)

# Fin del archivo app/modules/payments/routes/refunds.py
