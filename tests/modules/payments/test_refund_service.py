# -*- coding: utf-8 -*-
"""
tests/modules/payments/test_refund_service.py

Tests de RefundService: solicitud del cliente, approve/reject del admin
y cierre (approved → processed).

Autor: Equipo Backoffice LMS
Fecha: 2026-10-12
"""

from decimal import Decimal
from uuid import uuid4

import pytest

from app.modules.payments.enums import (
    HistoryAction,
    RefundAction,
    RefundStatus,
    TransactionStatus,
)
from app.modules.payments.facades import (
    InvalidStateTransition,
    RefundAlreadyProcessed,
    RefundNotFound,
    RefundValidationError,
    TransactionNotFound,
)
from app.modules.payments.repositories import (
    PaymentHistoryRepository,
    PaymentTransactionRepository,
    RefundRepository,
)
from app.modules.payments.services import RefundService


@pytest.fixture
def service() -> RefundService:
    return RefundService(
        refund_repo=RefundRepository(),
        transaction_repo=PaymentTransactionRepository(),
        history_repo=PaymentHistoryRepository(),
    )


@pytest.fixture
async def completed_tx(make_transaction):
    return await make_transaction(amount="5000.00", status=TransactionStatus.COMPLETED)


# ---------------------------------------------------------------------------
# request_refund
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_request_refund_creates_pending(db_session, service, completed_tx, customer_id):
    refund = await service.request_refund(
        db_session,
        customer_id=customer_id,
        transaction_id=completed_tx.id,
        refund_amount=Decimal("2000"),
        reason="  No pude asistir  ",
    )
    await db_session.commit()

    assert refund.status == RefundStatus.PENDING
    assert refund.refund_amount == Decimal("2000")
    assert refund.reason == "No pude asistir"
    assert refund.course_id == completed_tx.course_id

    history = await PaymentHistoryRepository().list_by_transaction(db_session, completed_tx.id)
    assert [h.action for h in history] == [HistoryAction.REFUND_REQUESTED]


@pytest.mark.asyncio
@pytest.mark.parametrize("amount,reason", [
    ("0", "motivo"),
    ("-10", "motivo"),
    ("100", "   "),
])
async def test_request_refund_rejects_invalid_input(db_session, service, completed_tx, customer_id, amount, reason):
    with pytest.raises(RefundValidationError):
        await service.request_refund(
            db_session,
            customer_id=customer_id,
            transaction_id=completed_tx.id,
            refund_amount=Decimal(amount),
            reason=reason,
        )


@pytest.mark.asyncio
async def test_request_refund_unknown_transaction(db_session, service, customer_id):
    with pytest.raises(TransactionNotFound):
        await service.request_refund(
            db_session,
            customer_id=customer_id,
            transaction_id=uuid4(),
            refund_amount=Decimal("10"),
            reason="motivo",
        )


@pytest.mark.asyncio
async def test_request_refund_requires_owner(db_session, service, completed_tx):
    with pytest.raises(RefundValidationError):
        await service.request_refund(
            db_session,
            customer_id=uuid4(),
            transaction_id=completed_tx.id,
            refund_amount=Decimal("10"),
            reason="motivo",
        )


@pytest.mark.asyncio
async def test_request_refund_requires_completed_transaction(db_session, service, make_transaction, customer_id):
    tx = await make_transaction(status=TransactionStatus.PENDING)
    with pytest.raises(RefundValidationError):
        await service.request_refund(
            db_session,
            customer_id=customer_id,
            transaction_id=tx.id,
            refund_amount=Decimal("10"),
            reason="motivo",
        )


@pytest.mark.asyncio
async def test_request_refund_cannot_exceed_refundable_balance(
    db_session, service, completed_tx, make_refund, customer_id
):
    await make_refund(completed_tx, amount="3000.00", status=RefundStatus.APPROVED)
    # Un rechazo libera su monto
    await make_refund(completed_tx, amount="4000.00", status=RefundStatus.REJECTED)

    with pytest.raises(RefundValidationError):
        await service.request_refund(
            db_session,
            customer_id=customer_id,
            transaction_id=completed_tx.id,
            refund_amount=Decimal("2000.01"),
            reason="resto",
        )

    refund = await service.request_refund(
        db_session,
        customer_id=customer_id,
        transaction_id=completed_tx.id,
        refund_amount=Decimal("2000.00"),
        reason="resto",
    )
    assert refund.status == RefundStatus.PENDING


# ---------------------------------------------------------------------------
# process: approve / reject
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_approve_pending_refund(db_session, service, completed_tx, make_refund, admin_id, fixed_now):
    refund = await make_refund(completed_tx)

    updated = await service.process(
        db_session,
        refund.id,
        RefundAction.APPROVE,
        admin_id=admin_id,
        refund_reference="REF123",
        now=fixed_now,
    )
    await db_session.commit()

    assert updated.status == RefundStatus.APPROVED
    assert updated.processed_by == admin_id
    assert updated.processed_at is not None
    assert updated.refund_reference == "REF123"

    tx = await PaymentTransactionRepository().get_fresh(db_session, completed_tx.id)
    assert tx.status == TransactionStatus.COMPLETED


@pytest.mark.asyncio
async def test_reject_requires_notes(db_session, service, completed_tx, make_refund, admin_id):
    refund = await make_refund(completed_tx)

    with pytest.raises(RefundValidationError):
        await service.process(db_session, refund.id, RefundAction.REJECT, admin_id=admin_id, notes="   ")

    fresh = await RefundRepository().get_fresh(db_session, refund.id)
    assert fresh.status == RefundStatus.PENDING


@pytest.mark.asyncio
async def test_reject_without_notes_is_validated_before_lookup(db_session, service, admin_id):
    with pytest.raises(RefundValidationError):
        await service.process(db_session, uuid4(), RefundAction.REJECT, admin_id=admin_id)


@pytest.mark.asyncio
async def test_reject_pending_refund(db_session, service, completed_tx, make_refund, admin_id):
    refund = await make_refund(completed_tx)

    updated = await service.process(
        db_session, refund.id, RefundAction.REJECT, admin_id=admin_id, notes="Fuera de plazo"
    )

    assert updated.status == RefundStatus.REJECTED
    assert updated.notes == "Fuera de plazo"
    assert updated.refund_reference is None


@pytest.mark.asyncio
async def test_process_unknown_refund(db_session, service, admin_id):
    with pytest.raises(RefundNotFound):
        await service.process(db_session, uuid4(), RefundAction.APPROVE, admin_id=admin_id)


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [RefundStatus.APPROVED, RefundStatus.REJECTED, RefundStatus.PROCESSED])
async def test_process_non_pending_refund_conflicts(
    db_session, service, completed_tx, make_refund, admin_id, status
):
    refund = await make_refund(completed_tx, status=status)

    with pytest.raises(RefundAlreadyProcessed) as exc_info:
        await service.process(db_session, refund.id, RefundAction.APPROVE, admin_id=admin_id)

    assert exc_info.value.status_code == 409


# ---------------------------------------------------------------------------
# complete: approved → processed
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_complete_approved_refund(db_session, service, completed_tx, make_refund, admin_id):
    refund = await make_refund(completed_tx, status=RefundStatus.APPROVED)

    updated = await service.complete(
        db_session, refund.id, admin_id=admin_id, refund_reference="BANK-778"
    )
    await db_session.commit()

    assert updated.status == RefundStatus.PROCESSED
    assert updated.refund_reference == "BANK-778"

    history = await PaymentHistoryRepository().list_by_transaction(db_session, completed_tx.id)
    assert history[-1].action == HistoryAction.REFUNDED


@pytest.mark.asyncio
async def test_complete_requires_reference(db_session, service, completed_tx, make_refund, admin_id):
    refund = await make_refund(completed_tx, status=RefundStatus.APPROVED)

    with pytest.raises(RefundValidationError):
        await service.complete(db_session, refund.id, admin_id=admin_id, refund_reference=" ")


@pytest.mark.asyncio
async def test_complete_pending_refund_is_invalid_transition(
    db_session, service, completed_tx, make_refund, admin_id
):
    refund = await make_refund(completed_tx)

    with pytest.raises(InvalidStateTransition):
        await service.complete(db_session, refund.id, admin_id=admin_id, refund_reference="X1")


@pytest.mark.asyncio
async def test_process_action_delegates_to_complete(db_session, service, completed_tx, make_refund, admin_id):
    refund = await make_refund(completed_tx, status=RefundStatus.APPROVED)

    updated = await service.process(
        db_session, refund.id, RefundAction.PROCESS, admin_id=admin_id, refund_reference="X2"
    )

    assert updated.status == RefundStatus.PROCESSED


@pytest.mark.asyncio
async def test_list_refunds_filters_by_status(db_session, service, completed_tx, make_refund):
    await make_refund(completed_tx, amount="100.00")
    await make_refund(completed_tx, amount="200.00", status=RefundStatus.APPROVED)

    items, total = await service.list_refunds(db_session, status=RefundStatus.APPROVED)

    assert total == 1
    assert items[0].refund_amount == Decimal("200.00")


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [RefundStatus.REJECTED, RefundStatus.PROCESSED])
async def test_complete_closed_refund_is_already_processed(
    db_session, service, completed_tx, make_refund, admin_id, status
):
    refund = await make_refund(completed_tx, status=status)

    with pytest.raises(RefundAlreadyProcessed) as exc_info:
        await service.complete(db_session, refund.id, admin_id=admin_id, refund_reference="X3")

    assert exc_info.value.error_code == "refund_already_processed"


# ---------------------------------------------------------------------------
# Reembolsos por transacción
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_list_for_transaction_scoped_to_owner(
    db_session, service, completed_tx, make_transaction, make_refund, customer_id
):
    await make_refund(completed_tx, amount="100.00")
    await make_refund(completed_tx, amount="200.00", status=RefundStatus.REJECTED)
    other_tx = await make_transaction(status=TransactionStatus.COMPLETED, user_id=uuid4())

    refunds = await service.list_for_transaction(db_session, completed_tx.id, customer_id=customer_id)
    assert sorted(r.refund_amount for r in refunds) == [Decimal("100.00"), Decimal("200.00")]

    with pytest.raises(TransactionNotFound):
        await service.list_for_transaction(db_session, other_tx.id, customer_id=customer_id)

    assert await service.list_for_transaction(db_session, other_tx.id) == []


# ---------------------------------------------------------------------------
# Concurrencia: saldo reembolsable
# ---------------------------------------------------------------------------
class _InterleavingRefundRepository(RefundRepository):
    """Ejecuta otra solicitud justo después de leer lo comprometido."""

    def __init__(self, interleave):
        super().__init__()
        self._interleave = interleave

    async def sum_committed_for_transaction(self, session, transaction_id):
        committed = await super().sum_committed_for_transaction(session, transaction_id)
        if self._interleave is not None:
            interleave, self._interleave = self._interleave, None
            await interleave()
        return committed


@pytest.mark.asyncio
async def test_interleaved_requests_cannot_overcommit(
    db_session, session_factory, service, completed_tx, customer_id
):
    tx_id = completed_tx.id

    async def competing_request():
        async with session_factory() as other:
            await service.request_refund(
                other,
                customer_id=customer_id,
                transaction_id=tx_id,
                refund_amount=Decimal("4000"),
                reason="primera solicitud",
            )
            await other.commit()

    racing = RefundService(
        refund_repo=_InterleavingRefundRepository(competing_request),
        transaction_repo=PaymentTransactionRepository(),
        history_repo=PaymentHistoryRepository(),
    )

    with pytest.raises(RefundValidationError):
        await racing.request_refund(
            db_session,
            customer_id=customer_id,
            transaction_id=tx_id,
            refund_amount=Decimal("4000"),
            reason="segunda solicitud",
        )
    await db_session.rollback()

    committed = await RefundRepository().sum_committed_for_transaction(db_session, tx_id)
    assert committed == Decimal("4000")
    assert committed <= Decimal("5000")

# Fin del archivo tests/modules/payments/test_refund_service.py
