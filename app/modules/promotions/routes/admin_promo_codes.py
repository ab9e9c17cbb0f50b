# -*- coding: utf-8 -*-
"""
app/modules/promotions/routes/admin_promo_codes.py

CRUD admin de cupones.

Endpoints:
- GET    /admin/promo-codes
- POST   /admin/promo-codes
- GET    /admin/promo-codes/stats
- PATCH  /admin/promo-codes/{promo_id}
- DELETE /admin/promo-codes/{promo_id}

Autor: Equipo Backoffice LMS
Fecha: 2026-10-10
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.database import get_async_session
from app.modules.auth.dependencies import AuthContext, require_admin
from app.modules.payments.schemas import PageMeta, clamp_limit
from app.modules.promotions.repositories import PromoCodeRepository
from app.modules.promotions.schemas import (
    PromoCodeCreate,
    PromoCodeListResponse,
    PromoCodeOut,
    PromoCodeStats,
    PromoCodeUpdate,
)
from app.modules.promotions.services import PromoCodeService

router = APIRouter(
    prefix="/admin/promo-codes",
    tags=["admin:promo-codes"],
)


def build_promo_service() -> PromoCodeService:
    return PromoCodeService(promo_repo=PromoCodeRepository())


@router.get("", response_model=PromoCodeListResponse)
async def list_promo_codes(
    is_active: Optional[bool] = Query(default=None),
    limit: int = Query(default=50, ge=1),
    offset: int = Query(default=0, ge=0),
    session: AsyncSession = Depends(get_async_session),
    admin: AuthContext = Depends(require_admin),
):
    service = build_promo_service()
    limit = clamp_limit(limit)
    items, total = await service.list(session, is_active=is_active, limit=limit, offset=offset)
    return PromoCodeListResponse(
        items=[PromoCodeOut.model_validate(p) for p in items],
        meta=PageMeta.build(total, limit, offset),
    )


@router.get("/stats", response_model=PromoCodeStats)
async def promo_code_stats(
    session: AsyncSession = Depends(get_async_session),
    admin: AuthContext = Depends(require_admin),
):
    return PromoCodeStats(**await build_promo_service().stats(session))


@router.post("", response_model=PromoCodeOut, status_code=status.HTTP_201_CREATED)
async def create_promo_code(
    payload: PromoCodeCreate,
    session: AsyncSession = Depends(get_async_session),
    admin: AuthContext = Depends(require_admin),
):
    promo = await build_promo_service().create(session, payload.model_dump())
    await session.commit()
    return PromoCodeOut.model_validate(promo)


@router.patch("/{promo_id}", response_model=PromoCodeOut)
async def update_promo_code(
    promo_id: UUID,
    payload: PromoCodeUpdate,
    session: AsyncSession = Depends(get_async_session),
    admin: AuthContext = Depends(require_admin),
):
    promo = await build_promo_service().update(
        session, promo_id, payload.model_dump(exclude_unset=True)
    )
    await session.commit()
    return PromoCodeOut.model_validate(promo)


@router.delete("/{promo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_promo_code(
    promo_id: UUID,
    session: AsyncSession = Depends(get_async_session),
    admin: AuthContext = Depends(require_admin),
):
    await build_promo_service().delete(session, promo_id)
    await session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)

# Fin del archivo app/modules/promotions/routes/admin_promo_codes.py
