# -*- coding: utf-8 -*-
"""
app/modules/payments/repositories/payment_transaction_repository.py

Repositorio para la tabla payment_transactions.

Responsabilidades:
- Listado paginado con filtros (estado, verificación, usuario)
- Lectura con bloqueo de fila (SELECT ... FOR UPDATE)
- Transición de estado con compare-and-swap (heredado de BaseRepository)

Autor: Equipo Backoffice LMS
Fecha: 2026-09-30
"""

from typing import Any, Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.repository import BaseRepository
from app.modules.payments.enums import TransactionStatus, VerificationStatus
from app.modules.payments.models import PaymentTransaction


class PaymentTransactionRepository(BaseRepository[PaymentTransaction]):
    def __init__(self) -> None:
        super().__init__(PaymentTransaction)

    @staticmethod
    def _criteria(
        status: Optional[TransactionStatus] = None,
        verification_status: Optional[VerificationStatus] = None,
        user_id: Optional[UUID] = None,
    ) -> Tuple[Any, ...]:
        criteria = []
        if status is not None:
            criteria.append(PaymentTransaction.status == status)
        if verification_status is not None:
            criteria.append(PaymentTransaction.verification_status == verification_status)
        if user_id is not None:
            criteria.append(PaymentTransaction.user_id == user_id)
        return tuple(criteria)

    async def get_by_id(
        self,
        session: AsyncSession,
        transaction_id: UUID,
        *,
        for_update: bool = False,
    ) -> Optional[PaymentTransaction]:
        """
        Obtiene la transacción; con for_update bloquea la fila hasta el commit.
        """
        stmt = select(PaymentTransaction).where(PaymentTransaction.id == transaction_id)
        if for_update:
            stmt = stmt.with_for_update()

        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_filtered(
        self,
        session: AsyncSession,
        *,
        status: Optional[TransactionStatus] = None,
        verification_status: Optional[VerificationStatus] = None,
        user_id: Optional[UUID] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> Tuple[Sequence[PaymentTransaction], int]:
        """Devuelve (items, total) ordenados del más reciente al más antiguo."""
        criteria = self._criteria(status, verification_status, user_id)
        total = await self.count(session, *criteria)
        items = await self.list_page(
            session,
            *criteria,
            limit=limit,
            offset=offset,
            order_by=PaymentTransaction.created_at.desc(),
        )
        return items, total


__all__ = ["PaymentTransactionRepository"]

# Fin del archivo app/modules/payments/repositories/payment_transaction_repository.py
