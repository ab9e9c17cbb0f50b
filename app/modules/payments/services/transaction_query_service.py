# -*- coding: utf-8 -*-
"""
app/modules/payments/services/transaction_query_service.py

Lecturas de transacciones y su bitácora (panel admin y "mis pagos").

Autor: Equipo Backoffice LMS
Fecha: 2026-10-06
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.payments.enums import TransactionStatus, VerificationStatus
from app.modules.payments.facades import TransactionNotFound
from app.modules.payments.models import PaymentHistory, PaymentTransaction
from app.modules.payments.repositories import (
    PaymentHistoryRepository,
    PaymentTransactionRepository,
)


class TransactionQueryService:
    def __init__(
        self,
        transaction_repo: PaymentTransactionRepository,
        history_repo: PaymentHistoryRepository,
    ) -> None:
        self.transaction_repo = transaction_repo
        self.history_repo = history_repo

    async def get(self, session: AsyncSession, transaction_id: UUID) -> PaymentTransaction:
        tx = await self.transaction_repo.get(session, transaction_id)
        if tx is None:
            raise TransactionNotFound(transaction_id)
        return tx

    async def list_transactions(
        self,
        session: AsyncSession,
        *,
        status: Optional[TransactionStatus] = None,
        verification_status: Optional[VerificationStatus] = None,
        user_id: Optional[UUID] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> Tuple[Sequence[PaymentTransaction], int]:
        return await self.transaction_repo.list_filtered(
            session,
            status=status,
            verification_status=verification_status,
            user_id=user_id,
            limit=limit,
            offset=offset,
        )

    async def history(self, session: AsyncSession, transaction_id: UUID) -> Sequence[PaymentHistory]:
        await self.get(session, transaction_id)
        return await self.history_repo.list_by_transaction(session, transaction_id)


__all__ = ["TransactionQueryService"]

# Fin del archivo app/modules/payments/services/transaction_query_service.py
