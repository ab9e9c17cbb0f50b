# -*- coding: utf-8 -*-
"""
app/modules/payments/services/payment_account_service.py

Administración de las cuentas receptoras mostradas en el checkout.

Se recomienda una sola cuenta activa por proveedor; no se impone, pero se
registra un warning cuando se activa una segunda.

Autor: Equipo Backoffice LMS
Fecha: 2026-10-06
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.base import utcnow
from app.modules.payments.enums import PaymentProvider
from app.modules.payments.facades import PaymentAccountNotFound
from app.modules.payments.models import PaymentAccount
from app.modules.payments.repositories import PaymentAccountRepository

logger = logging.getLogger(__name__)

_EDITABLE_FIELDS = (
    "provider",
    "account_name",
    "account_number",
    "bank_name",
    "iban",
    "merchant_id",
    "api_key",
    "instructions",
    "is_active",
)


class PaymentAccountService:
    def __init__(self, account_repo: PaymentAccountRepository) -> None:
        self.account_repo = account_repo

    async def get(self, session: AsyncSession, account_id: UUID) -> PaymentAccount:
        account = await self.account_repo.get(session, account_id)
        if account is None:
            raise PaymentAccountNotFound(account_id)
        return account

    async def list_accounts(
        self,
        session: AsyncSession,
        *,
        provider: Optional[PaymentProvider] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> Tuple[Sequence[PaymentAccount], int]:
        return await self.account_repo.list_filtered(
            session, provider=provider, limit=limit, offset=offset
        )

    async def list_active(self, session: AsyncSession) -> Sequence[PaymentAccount]:
        return await self.account_repo.list_active(session)

    async def _warn_if_duplicate_active(self, session: AsyncSession, account: PaymentAccount) -> None:
        if not account.is_active:
            return
        others = await self.account_repo.count_active_for_provider(
            session, account.provider, exclude_id=account.id
        )
        if others:
            logger.warning(
                "payment_account_multiple_active provider=%s account_id=%s others=%s",
                account.provider, account.id, others,
            )

    async def create(self, session: AsyncSession, data: Dict[str, Any]) -> PaymentAccount:
        fields = {k: v for k, v in data.items() if k in _EDITABLE_FIELDS}
        account = await self.account_repo.create(session, **fields)
        await self._warn_if_duplicate_active(session, account)
        logger.info("payment_account_created id=%s provider=%s", account.id, account.provider)
        return account

    async def update(self, session: AsyncSession, account_id: UUID, data: Dict[str, Any]) -> PaymentAccount:
        account = await self.get(session, account_id)
        changes = {k: v for k, v in data.items() if k in _EDITABLE_FIELDS}
        for field, value in changes.items():
            setattr(account, field, value)
        account.updated_at = utcnow()
        await session.flush()
        await self._warn_if_duplicate_active(session, account)
        logger.info("payment_account_updated id=%s fields=%s", account.id, sorted(changes))
        return account

    async def delete(self, session: AsyncSession, account_id: UUID) -> None:
        account = await self.get(session, account_id)
        await self.account_repo.delete(session, account)
        logger.info("payment_account_deleted id=%s", account_id)


__all__ = ["PaymentAccountService"]

# Fin del archivo app/modules/payments/services/payment_account_service.py
