# -*- coding: utf-8 -*-
"""
app/modules/payments/services/refund_service.py

Servicio de reembolsos.

Flujos cubiertos:
- request_refund: el cliente solicita un reembolso (queda `pending`)
- process: el admin aprueba o rechaza una solicitud pendiente
    - reject exige notas (motivo) no vacías; se valida antes de cargar estado
    - approve guarda refund_reference si viene
- complete: el admin marca un reembolso aprobado como `processed`
    (exige refund_reference)

La solicitud bloquea la fila de la transacción (FOR UPDATE) y vuelve a
sumar lo comprometido tras el INSERT.
Todas las transiciones usan compare-and-swap sobre el estado esperado.
El estado de la transacción original no se modifica.

Autor: Equipo Backoffice LMS
Fecha: 2026-10-05
"""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.base import utcnow
from app.modules.payments.enums import HistoryAction, RefundAction, RefundStatus, TransactionStatus
from app.modules.payments.facades import (
    InvalidStateTransition,
    RefundAlreadyProcessed,
    RefundNotFound,
    RefundValidationError,
    TransactionNotFound,
    next_refund_status,
)
from app.modules.payments.metrics import record_refund_action, record_refund_request
from app.modules.payments.models import PaymentTransaction, RefundRequest
from app.modules.payments.repositories import (
    PaymentHistoryRepository,
    PaymentTransactionRepository,
    RefundRepository,
)

logger = logging.getLogger(__name__)

_HISTORY_BY_STATUS = {
    RefundStatus.APPROVED: HistoryAction.REFUND_APPROVED,
    RefundStatus.REJECTED: HistoryAction.REFUND_REJECTED,
    RefundStatus.PROCESSED: HistoryAction.REFUNDED,
}


def _clean(text: Optional[str]) -> Optional[str]:
    return (text or "").strip() or None


class RefundService:
    """
    Procesador de reembolsos: solicitudes de cliente y acciones de admin.
    """

    def __init__(
        self,
        refund_repo: RefundRepository,
        transaction_repo: PaymentTransactionRepository,
        history_repo: PaymentHistoryRepository,
    ) -> None:
        self.refund_repo = refund_repo
        self.transaction_repo = transaction_repo
        self.history_repo = history_repo

    # ------------------------------------------------------------------ #
    # Consultas
    # ------------------------------------------------------------------ #
    async def get(self, session: AsyncSession, refund_id: UUID) -> RefundRequest:
        refund = await self.refund_repo.get(session, refund_id)
        if refund is None:
            raise RefundNotFound(refund_id)
        return refund

    async def list_refunds(
        self,
        session: AsyncSession,
        *,
        status: Optional[RefundStatus] = None,
        customer_id: Optional[UUID] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> Tuple[Sequence[RefundRequest], int]:
        return await self.refund_repo.list_filtered(
            session, status=status, customer_id=customer_id, limit=limit, offset=offset
        )

    async def list_for_transaction(
        self,
        session: AsyncSession,
        transaction_id: UUID,
        *,
        customer_id: Optional[UUID] = None,
    ) -> Sequence[RefundRequest]:
        """
        Reembolsos de una transacción; con customer_id solo si es su dueño.
        """
        tx = await self.transaction_repo.get(session, transaction_id)
        if tx is None or (customer_id is not None and tx.user_id != customer_id):
            raise TransactionNotFound(transaction_id)
        return await self.refund_repo.list_by_transaction(session, transaction_id)

    # ------------------------------------------------------------------ #
    # Solicitud del cliente
    # ------------------------------------------------------------------ #
    async def request_refund(
        self,
        session: AsyncSession,
        *,
        customer_id: UUID,
        transaction_id: UUID,
        refund_amount: Decimal,
        reason: str,
    ) -> RefundRequest:
        clean_reason = _clean(reason)
        if clean_reason is None:
            raise RefundValidationError("A reason is required to request a refund")
        amount = Decimal(refund_amount)
        if amount <= 0:
            raise RefundValidationError("Refund amount must be greater than 0")

        # Bloquea la fila de la transacción: las solicitudes concurrentes
        # sobre el mismo pago se serializan hasta el commit.
        tx = await self.transaction_repo.get_by_id(session, transaction_id, for_update=True)
        if tx is None:
            raise TransactionNotFound(transaction_id)
        if tx.user_id != customer_id:
            raise RefundValidationError("Transaction does not belong to the requesting customer")
        if tx.status != TransactionStatus.COMPLETED:
            raise RefundValidationError(
                f"Only completed transactions can be refunded (status: {tx.status})"
            )

        committed = await self.refund_repo.sum_committed_for_transaction(session, tx.id)
        refundable = Decimal(tx.amount) - committed
        if amount > refundable:
            raise RefundValidationError(
                f"Refund amount {amount} exceeds the refundable balance {refundable}"
            )

        refund = await self.refund_repo.create(
            session,
            transaction_id=tx.id,
            customer_id=customer_id,
            course_id=tx.course_id,
            refund_amount=amount,
            reason=clean_reason,
            status=RefundStatus.PENDING,
        )
        await self._ensure_within_balance(session, tx, amount)
        await self.history_repo.record(
            session,
            transaction_id=tx.id,
            action=HistoryAction.REFUND_REQUESTED,
            performed_by=customer_id,
            new_status=RefundStatus.PENDING.value,
            notes=clean_reason,
            details={"refund_id": str(refund.id), "refund_amount": str(amount)},
        )
        record_refund_request()
        logger.info(
            "refund_requested refund_id=%s tx_id=%s customer_id=%s amount=%s",
            refund.id, tx.id, customer_id, amount,
        )
        return refund

    async def _ensure_within_balance(
        self,
        session: AsyncSession,
        tx: PaymentTransaction,
        amount: Decimal,
    ) -> None:
        """
        Recalcula lo comprometido ya con la nueva fila insertada.

        En motores sin bloqueo de fila (SQLite) otra solicitud puede
        confirmarse entre la lectura del saldo y el INSERT; si la suma
        supera el monto pagado se aborta y el rollback descarta la fila.
        """
        committed = await self.refund_repo.sum_committed_for_transaction(session, tx.id)
        if committed > Decimal(tx.amount):
            logger.warning(
                "refund_overcommit tx_id=%s committed=%s amount=%s",
                tx.id, committed, tx.amount,
            )
            raise RefundValidationError(
                f"Refund amount {amount} exceeds the refundable balance "
                f"{Decimal(tx.amount) - committed + amount}"
            )

    # ------------------------------------------------------------------ #
    # Acciones de admin
    # ------------------------------------------------------------------ #
    async def process(
        self,
        session: AsyncSession,
        refund_id: UUID,
        action: RefundAction,
        *,
        admin_id: UUID,
        notes: Optional[str] = None,
        refund_reference: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> RefundRequest:
        """
        approve/reject sobre un reembolso pendiente.

        `process` se delega a complete() para que el panel pueda usar un
        único endpoint.
        """
        action = RefundAction(action)
        if action == RefundAction.PROCESS:
            return await self.complete(
                session,
                refund_id,
                admin_id=admin_id,
                refund_reference=refund_reference,
                notes=notes,
                now=now,
            )

        clean_notes = _clean(notes)
        if action == RefundAction.REJECT and clean_notes is None:
            record_refund_action(action, "invalid")
            raise RefundValidationError("Notes are required when rejecting a refund")

        refund = await self.refund_repo.get(session, refund_id)
        if refund is None:
            record_refund_action(action, "not_found")
            raise RefundNotFound(refund_id)
        if refund.status != RefundStatus.PENDING:
            record_refund_action(action, "conflict")
            logger.warning(
                "refund_conflict refund_id=%s status=%s action=%s admin_id=%s",
                refund.id, refund.status, action, admin_id,
            )
            raise RefundAlreadyProcessed(refund.id, refund.status, action)

        new_status = next_refund_status(RefundStatus(refund.status), action)
        now = now or utcnow()
        values = {
            "status": new_status,
            "processed_by": admin_id,
            "processed_at": now,
            "updated_at": now,
        }
        if clean_notes is not None:
            values["notes"] = clean_notes
        reference = _clean(refund_reference)
        if action == RefundAction.APPROVE and reference is not None:
            values["refund_reference"] = reference

        return await self._apply(
            session,
            refund,
            expected=RefundStatus.PENDING,
            new_status=new_status,
            values=values,
            action=action,
            admin_id=admin_id,
            notes=clean_notes,
        )

    async def complete(
        self,
        session: AsyncSession,
        refund_id: UUID,
        *,
        admin_id: UUID,
        refund_reference: Optional[str],
        notes: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> RefundRequest:
        """approved → processed; exige la referencia del pago devuelto."""
        action = RefundAction.PROCESS
        reference = _clean(refund_reference)
        if reference is None:
            record_refund_action(action, "invalid")
            raise RefundValidationError("A refund reference is required to complete a refund")

        refund = await self.refund_repo.get(session, refund_id)
        if refund is None:
            record_refund_action(action, "not_found")
            raise RefundNotFound(refund_id)

        current = RefundStatus(refund.status)
        if current.is_terminal:
            record_refund_action(action, "conflict")
            raise RefundAlreadyProcessed(refund.id, current, action)
        try:
            new_status = next_refund_status(current, action)
        except InvalidStateTransition:
            record_refund_action(action, "conflict")
            logger.warning(
                "refund_complete_conflict refund_id=%s status=%s admin_id=%s",
                refund.id, refund.status, admin_id,
            )
            raise

        now = now or utcnow()
        clean_notes = _clean(notes)
        values = {
            "status": new_status,
            "refund_reference": reference,
            "processed_by": admin_id,
            "processed_at": now,
            "updated_at": now,
        }
        if clean_notes is not None:
            values["notes"] = clean_notes

        return await self._apply(
            session,
            refund,
            expected=RefundStatus.APPROVED,
            new_status=new_status,
            values=values,
            action=action,
            admin_id=admin_id,
            notes=clean_notes,
        )

    async def _apply(
        self,
        session: AsyncSession,
        refund: RefundRequest,
        *,
        expected: RefundStatus,
        new_status: RefundStatus,
        values: dict,
        action: RefundAction,
        admin_id: UUID,
        notes: Optional[str],
    ) -> RefundRequest:
        swapped = await self.refund_repo.compare_and_set_status(
            session, refund.id, expected=expected, values=values
        )
        if not swapped:
            current = await self.refund_repo.get_fresh(session, refund.id)
            current_status = current.status if current is not None else "unknown"
            record_refund_action(action, "conflict")
            logger.warning(
                "refund_lost_race refund_id=%s status=%s action=%s admin_id=%s",
                refund.id, current_status, action, admin_id,
            )
            raise RefundAlreadyProcessed(refund.id, current_status, action)

        await self.history_repo.record(
            session,
            transaction_id=refund.transaction_id,
            action=_HISTORY_BY_STATUS[new_status],
            performed_by=admin_id,
            previous_status=expected.value,
            new_status=new_status.value,
            notes=notes,
            details={
                "refund_id": str(refund.id),
                "refund_reference": values.get("refund_reference"),
            },
        )
        record_refund_action(action, "success")
        logger.info(
            "refund_transition refund_id=%s %s→%s admin_id=%s",
            refund.id, expected, new_status, admin_id,
        )

        updated = await self.refund_repo.get_fresh(session, refund.id)
        if updated is None:
            raise RefundNotFound(refund.id)
        return updated


__all__ = ["RefundService"]

# Fin del archivo app/modules/payments/services/refund_service.py
