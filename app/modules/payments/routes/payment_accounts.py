# -*- coding: utf-8 -*-
"""
app/modules/payments/routes/payment_accounts.py

Cuentas receptoras.

Admin:
- GET|POST     /admin/payment-accounts
- PATCH|DELETE /admin/payment-accounts/{account_id}

Público (checkout):
- GET /payment-accounts/active

Autor: Equipo Backoffice LMS
Fecha: 2026-10-09
"""

from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.database import get_async_session
from app.modules.auth.dependencies import AuthContext, require_admin
from app.modules.payments.enums import PaymentProvider
from app.modules.payments.repositories import PaymentAccountRepository
from app.modules.payments.schemas import (
    PageMeta,
    PaymentAccountCreate,
    PaymentAccountListResponse,
    PaymentAccountOut,
    PaymentAccountPublicOut,
    PaymentAccountUpdate,
    clamp_limit,
)
from app.modules.payments.services import PaymentAccountService

admin_router = APIRouter(
    prefix="/admin/payment-accounts",
    tags=["admin:payment-accounts"],
)

public_router = APIRouter(
    prefix="/payment-accounts",
    tags=["payments:accounts"],
)


def build_account_service() -> PaymentAccountService:
    return PaymentAccountService(account_repo=PaymentAccountRepository())


@admin_router.get("", response_model=PaymentAccountListResponse)
async def list_accounts(
    provider: Optional[PaymentProvider] = Query(default=None),
    limit: int = Query(default=50, ge=1),
    offset: int = Query(default=0, ge=0),
    session: AsyncSession = Depends(get_async_session),
    admin: AuthContext = Depends(require_admin),
):
    service = build_account_service()
    limit = clamp_limit(limit)
    items, total = await service.list_accounts(
        session, provider=provider, limit=limit, offset=offset
    )
    return PaymentAccountListResponse(
        items=[PaymentAccountOut.model_validate(a) for a in items],
        meta=PageMeta.build(total, limit, offset),
    )


@admin_router.post("", response_model=PaymentAccountOut, status_code=status.HTTP_201_CREATED)
async def create_account(
    payload: PaymentAccountCreate,
    session: AsyncSession = Depends(get_async_session),
    admin: AuthContext = Depends(require_admin),
):
    service = build_account_service()
    account = await service.create(session, payload.model_dump())
    await session.commit()
    return PaymentAccountOut.model_validate(account)


@admin_router.patch("/{account_id}", response_model=PaymentAccountOut)
async def update_account(
    account_id: UUID,
    payload: PaymentAccountUpdate,
    session: AsyncSession = Depends(get_async_session),
    admin: AuthContext = Depends(require_admin),
):
    service = build_account_service()
    account = await service.update(session, account_id, payload.model_dump(exclude_unset=True))
    await session.commit()
    return PaymentAccountOut.model_validate(account)


@admin_router.delete("/{account_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_account(
    account_id: UUID,
    session: AsyncSession = Depends(get_async_session),
    admin: AuthContext = Depends(require_admin),
):
    service = build_account_service()
    await service.delete(session, account_id)
    await session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@public_router.get("/active", response_model=List[PaymentAccountPublicOut])
async def list_active_accounts(
    session: AsyncSession = Depends(get_async_session),
):
    """Instrucciones de pago para el checkout (sin credenciales)."""
    service = build_account_service()
    accounts = await service.list_active(session)
    return [PaymentAccountPublicOut.model_validate(a) for a in accounts]

# Fin del archivo app/modules/payments/routes/payment_accounts.py
