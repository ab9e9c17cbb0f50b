# -*- coding: utf-8 -*-
"""
app/modules/payments/repositories/payment_account_repository.py

Repositorio para payment_accounts.

Autor: Equipo Backoffice LMS
Fecha: 2026-09-30
"""

from typing import Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.repository import BaseRepository
from app.modules.payments.enums import PaymentProvider
from app.modules.payments.models import PaymentAccount


class PaymentAccountRepository(BaseRepository[PaymentAccount]):
    def __init__(self) -> None:
        super().__init__(PaymentAccount)

    async def list_active(self, session: AsyncSession) -> Sequence[PaymentAccount]:
        stmt = (
            select(PaymentAccount)
            .where(PaymentAccount.is_active.is_(True))
            .order_by(PaymentAccount.provider.asc(), PaymentAccount.created_at.asc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def count_active_for_provider(
        self,
        session: AsyncSession,
        provider: PaymentProvider,
        exclude_id: Optional[UUID] = None,
    ) -> int:
        criteria = [PaymentAccount.provider == provider, PaymentAccount.is_active.is_(True)]
        if exclude_id is not None:
            criteria.append(PaymentAccount.id != exclude_id)
        return await self.count(session, *criteria)

    async def list_filtered(
        self,
        session: AsyncSession,
        *,
        provider: Optional[PaymentProvider] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> Tuple[Sequence[PaymentAccount], int]:
        criteria = [PaymentAccount.provider == provider] if provider is not None else []
        total = await self.count(session, *criteria)
        items = await self.list_page(
            session,
            *criteria,
            limit=limit,
            offset=offset,
            order_by=PaymentAccount.created_at.desc(),
        )
        return items, total


__all__ = ["PaymentAccountRepository"]

# Fin del archivo app/modules/payments/repositories/payment_account_repository.py
