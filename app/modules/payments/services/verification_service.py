# -*- coding: utf-8 -*-
"""
app/modules/payments/services/verification_service.py

Verificación manual de transacciones por un administrador.

Flujo verify(transaction_id, action, notes, admin_id):
1. Cargar; inexistente → TransactionNotFound (404)
2. status != pending → TransactionAlreadyProcessed (409)
3. approve → completed/approved; reject → failed/rejected + rejection_reason
4. Agregar línea de auditoría a `notes` y registrar verified_by/verified_at
5. UPDATE ... WHERE id = :id AND status = 'pending' (compare-and-swap);
   0 filas → TransactionAlreadyProcessed (otro admin ganó la carrera)
6. Registrar evento en payment_history
7. Si se aprueba y trae cupón, incrementar su uso (acotado por usage_limit)

Sin reintentos: el cliente reenvía la acción si falla.

Autor: Equipo Backoffice LMS
Fecha: 2026-10-04
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.base import utcnow
from app.modules.payments.enums import HistoryAction, TransactionStatus, VerificationAction
from app.modules.payments.facades import (
    TransactionAlreadyProcessed,
    TransactionNotFound,
    VERIFICATION_OUTCOME,
    next_transaction_status,
)
from app.modules.payments.metrics import record_verification
from app.modules.payments.models import PaymentTransaction
from app.modules.payments.repositories import (
    PaymentHistoryRepository,
    PaymentTransactionRepository,
)
from app.modules.promotions.repositories import PromoCodeRepository

logger = logging.getLogger(__name__)


def build_audit_line(
    verb: str,
    admin_id: UUID,
    at: datetime,
    notes: Optional[str] = None,
) -> str:
    """
    Línea de bitácora legible:

        [2026-10-04T12:00:00+00:00] approved by 5b0c...: Comprobante OK
    """
    line = f"[{at.isoformat()}] {verb} by {admin_id}"
    if notes:
        line = f"{line}: {notes}"
    return line


def append_audit(existing: Optional[str], line: str) -> str:
    if existing and existing.strip():
        return f"{existing.rstrip()}\n{line}"
    return line


class PaymentVerificationService:
    def __init__(
        self,
        transaction_repo: PaymentTransactionRepository,
        history_repo: PaymentHistoryRepository,
        promo_repo: PromoCodeRepository,
    ) -> None:
        self.transaction_repo = transaction_repo
        self.history_repo = history_repo
        self.promo_repo = promo_repo

    async def verify(
        self,
        session: AsyncSession,
        transaction_id: UUID,
        action: VerificationAction,
        *,
        admin_id: UUID,
        notes: Optional[str] = None,
        rejection_reason: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> PaymentTransaction:
        action = VerificationAction(action)

        tx = await self.transaction_repo.get(session, transaction_id)
        if tx is None:
            record_verification(action, "not_found")
            raise TransactionNotFound(transaction_id)

        if tx.status != TransactionStatus.PENDING:
            record_verification(action, "conflict")
            logger.warning(
                "verification_conflict tx_id=%s status=%s action=%s admin_id=%s",
                tx.id, tx.status, action, admin_id,
            )
            raise TransactionAlreadyProcessed(tx.id, tx.status, action)

        previous_status = TransactionStatus(tx.status)
        new_status = next_transaction_status(previous_status, action)
        now = now or utcnow()
        clean_notes = (notes or "").strip() or None

        values = {
            "status": new_status,
            "verification_status": VERIFICATION_OUTCOME[action],
            "verified_by": admin_id,
            "verified_at": now,
            "notes": append_audit(tx.notes, build_audit_line(action.past_tense, admin_id, now, clean_notes)),
            "updated_at": now,
        }
        if action == VerificationAction.REJECT:
            values["rejection_reason"] = (rejection_reason or "").strip() or clean_notes

        swapped = await self.transaction_repo.compare_and_set_status(
            session,
            tx.id,
            expected=TransactionStatus.PENDING,
            values=values,
        )
        if not swapped:
            current = await self.transaction_repo.get_fresh(session, tx.id)
            current_status = current.status if current is not None else "unknown"
            record_verification(action, "conflict")
            logger.warning(
                "verification_lost_race tx_id=%s status=%s action=%s admin_id=%s",
                tx.id, current_status, action, admin_id,
            )
            raise TransactionAlreadyProcessed(tx.id, current_status, action)

        await self.history_repo.record(
            session,
            transaction_id=tx.id,
            action=HistoryAction.VERIFIED if action == VerificationAction.APPROVE else HistoryAction.REJECTED,
            performed_by=admin_id,
            previous_status=previous_status.value,
            new_status=new_status.value,
            notes=clean_notes,
            details={"verification_status": VERIFICATION_OUTCOME[action].value},
        )

        if action == VerificationAction.APPROVE and tx.promo_code:
            incremented = await self.promo_repo.increment_usage(session, tx.promo_code)
            if not incremented:
                # El pago ya se aprobó; el cupón se agotó entre checkout y verificación
                logger.warning(
                    "promo_usage_not_incremented tx_id=%s code=%s",
                    tx.id, tx.promo_code,
                )

        record_verification(action, "success")
        logger.info(
            "transaction_verified tx_id=%s action=%s %s→%s admin_id=%s",
            tx.id, action, previous_status, new_status, admin_id,
        )

        updated = await self.transaction_repo.get_fresh(session, tx.id)
        if updated is None:
            raise TransactionNotFound(tx.id)
        return updated


__all__ = ["PaymentVerificationService", "build_audit_line", "append_audit"]

# Fin del archivo app/modules/payments/services/verification_service.py
