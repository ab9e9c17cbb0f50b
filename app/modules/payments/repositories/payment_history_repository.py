# -*- coding: utf-8 -*-
"""
app/modules/payments/repositories/payment_history_repository.py

Repositorio append-only para payment_history.

Autor: Equipo Backoffice LMS
Fecha: 2026-09-30
"""

from typing import Any, Dict, Optional, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.repository import BaseRepository
from app.modules.payments.enums import HistoryAction
from app.modules.payments.models import PaymentHistory


class PaymentHistoryRepository(BaseRepository[PaymentHistory]):
    def __init__(self) -> None:
        super().__init__(PaymentHistory)

    async def record(
        self,
        session: AsyncSession,
        *,
        transaction_id: UUID,
        action: HistoryAction,
        performed_by: Optional[UUID],
        previous_status: Optional[str] = None,
        new_status: Optional[str] = None,
        notes: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> PaymentHistory:
        return await self.create(
            session,
            transaction_id=transaction_id,
            action=action,
            performed_by=performed_by,
            previous_status=previous_status,
            new_status=new_status,
            notes=notes,
            details=details,
        )

    async def list_by_transaction(
        self,
        session: AsyncSession,
        transaction_id: UUID,
    ) -> Sequence[PaymentHistory]:
        stmt = (
            select(PaymentHistory)
            .where(PaymentHistory.transaction_id == transaction_id)
            .order_by(PaymentHistory.created_at.asc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()


__all__ = ["PaymentHistoryRepository"]

# Fin del archivo app/modules/payments/repositories/payment_history_repository.py
