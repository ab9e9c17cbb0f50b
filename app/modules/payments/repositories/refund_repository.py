# -*- coding: utf-8 -*-
"""
app/modules/payments/repositories/refund_repository.py

Repositorio para la tabla payment_refunds.

Responsabilidades:
- Monto ya comprometido en reembolsos de una transacción
- Listado paginado por estado

Autor: Equipo Backoffice LMS
Fecha: 2026-09-30
"""

from decimal import Decimal
from typing import Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.repository import BaseRepository
from app.modules.payments.enums import RefundStatus
from app.modules.payments.models import RefundRequest

# Un reembolso rechazado libera su monto; el resto lo compromete
COMMITTED_REFUND_STATUSES = (
    RefundStatus.PENDING,
    RefundStatus.APPROVED,
    RefundStatus.PROCESSED,
)


class RefundRepository(BaseRepository[RefundRequest]):
    def __init__(self) -> None:
        super().__init__(RefundRequest)

    async def sum_committed_for_transaction(
        self,
        session: AsyncSession,
        transaction_id: UUID,
    ) -> Decimal:
        stmt = select(func.coalesce(func.sum(RefundRequest.refund_amount), 0)).where(
            RefundRequest.transaction_id == transaction_id,
            RefundRequest.status.in_(COMMITTED_REFUND_STATUSES),
        )
        result = await session.execute(stmt)
        return Decimal(str(result.scalar_one()))

    async def list_by_transaction(
        self,
        session: AsyncSession,
        transaction_id: UUID,
    ) -> Sequence[RefundRequest]:
        stmt = (
            select(RefundRequest)
            .where(RefundRequest.transaction_id == transaction_id)
            .order_by(RefundRequest.created_at.asc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def list_filtered(
        self,
        session: AsyncSession,
        *,
        status: Optional[RefundStatus] = None,
        customer_id: Optional[UUID] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> Tuple[Sequence[RefundRequest], int]:
        criteria = []
        if status is not None:
            criteria.append(RefundRequest.status == status)
        if customer_id is not None:
            criteria.append(RefundRequest.customer_id == customer_id)
        total = await self.count(session, *criteria)
        items = await self.list_page(
            session,
            *criteria,
            limit=limit,
            offset=offset,
            order_by=RefundRequest.created_at.desc(),
        )
        return items, total


__all__ = ["RefundRepository", "COMMITTED_REFUND_STATUSES"]

# Fin del archivo app/modules/payments/repositories/refund_repository.py
