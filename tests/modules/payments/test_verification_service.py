# -*- coding: utf-8 -*-
"""
tests/modules/payments/test_verification_service.py

Tests de PaymentVerificationService sobre SQLite:
- approve / reject con bitácora y evento de historial
- 404 / 409 y carrera perdida en el compare-and-swap
- incremento de uso del cupón al aprobar

Autor: Equipo Backoffice LMS
Fecha: 2026-10-12
"""

from uuid import uuid4

import pytest
from sqlalchemy import update

from app.modules.payments.enums import (
    HistoryAction,
    TransactionStatus,
    VerificationAction,
    VerificationStatus,
)
from app.modules.payments.facades import TransactionAlreadyProcessed, TransactionNotFound
from app.modules.payments.models import PaymentTransaction
from app.modules.payments.repositories import (
    PaymentHistoryRepository,
    PaymentTransactionRepository,
)
from app.modules.payments.services import PaymentVerificationService
from app.modules.payments.services.verification_service import append_audit, build_audit_line
from app.modules.promotions.repositories import PromoCodeRepository


def _service(transaction_repo=None) -> PaymentVerificationService:
    return PaymentVerificationService(
        transaction_repo=transaction_repo or PaymentTransactionRepository(),
        history_repo=PaymentHistoryRepository(),
        promo_repo=PromoCodeRepository(),
    )


class _RacingTransactionRepository(PaymentTransactionRepository):
    """Otro admin resuelve la transacción justo antes del UPDATE condicional."""

    async def compare_and_set_status(self, session, obj_id, *, expected, values):
        await session.execute(
            update(PaymentTransaction)
            .where(PaymentTransaction.id == obj_id)
            .values(status=TransactionStatus.FAILED)
            .execution_options(synchronize_session=False)
        )
        return await super().compare_and_set_status(session, obj_id, expected=expected, values=values)


def test_build_audit_line_format(fixed_now, admin_id):
    line = build_audit_line("approved", admin_id, fixed_now, "Comprobante OK")
    assert line == f"[2026-10-15T12:00:00+00:00] approved by {admin_id}: Comprobante OK"
    assert build_audit_line("rejected", admin_id, fixed_now).endswith(f"rejected by {admin_id}")


def test_append_audit_keeps_previous_lines():
    assert append_audit(None, "b") == "b"
    assert append_audit("  ", "b") == "b"
    assert append_audit("a\n", "b") == "a\nb"


@pytest.mark.asyncio
async def test_approve_pending_transaction(db_session, make_transaction, admin_id, fixed_now):
    tx = await make_transaction(amount="5000.00")

    updated = await _service().verify(
        db_session,
        tx.id,
        VerificationAction.APPROVE,
        admin_id=admin_id,
        notes="Comprobante OK",
        now=fixed_now,
    )
    await db_session.commit()

    assert updated.status == TransactionStatus.COMPLETED
    assert updated.verification_status == VerificationStatus.APPROVED
    assert updated.verified_by == admin_id
    assert updated.verified_at is not None
    assert "approved" in updated.notes
    assert "Comprobante OK" in updated.notes
    assert updated.rejection_reason is None

    history = await PaymentHistoryRepository().list_by_transaction(db_session, tx.id)
    assert [h.action for h in history] == [HistoryAction.VERIFIED]
    assert history[0].previous_status == "pending"
    assert history[0].new_status == "completed"
    assert history[0].performed_by == admin_id


@pytest.mark.asyncio
async def test_reject_uses_notes_as_rejection_reason(db_session, make_transaction, admin_id):
    tx = await make_transaction()

    updated = await _service().verify(
        db_session, tx.id, VerificationAction.REJECT, admin_id=admin_id, notes="  Comprobante ilegible "
    )

    assert updated.status == TransactionStatus.FAILED
    assert updated.verification_status == VerificationStatus.REJECTED
    assert updated.rejection_reason == "Comprobante ilegible"
    assert "rejected" in updated.notes


@pytest.mark.asyncio
async def test_reject_prefers_explicit_reason(db_session, make_transaction, admin_id):
    tx = await make_transaction()

    updated = await _service().verify(
        db_session,
        tx.id,
        VerificationAction.REJECT,
        admin_id=admin_id,
        notes="Revisado por soporte",
        rejection_reason="Monto no coincide",
    )

    assert updated.rejection_reason == "Monto no coincide"


@pytest.mark.asyncio
async def test_verify_unknown_transaction_raises_not_found(db_session, admin_id):
    with pytest.raises(TransactionNotFound):
        await _service().verify(db_session, uuid4(), VerificationAction.APPROVE, admin_id=admin_id)


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [TransactionStatus.COMPLETED, TransactionStatus.FAILED])
async def test_verify_resolved_transaction_conflicts(db_session, make_transaction, admin_id, status):
    tx = await make_transaction(status=status)

    with pytest.raises(TransactionAlreadyProcessed) as exc_info:
        await _service().verify(db_session, tx.id, VerificationAction.APPROVE, admin_id=admin_id)

    assert exc_info.value.status_code == 409
    fresh = await PaymentTransactionRepository().get_fresh(db_session, tx.id)
    assert fresh.status == status
    assert fresh.verified_by is None


@pytest.mark.asyncio
async def test_lost_race_raises_conflict_and_writes_nothing(db_session, make_transaction, admin_id):
    tx = await make_transaction()

    with pytest.raises(TransactionAlreadyProcessed):
        await _service(_RacingTransactionRepository()).verify(
            db_session, tx.id, VerificationAction.APPROVE, admin_id=admin_id, notes="tarde"
        )

    fresh = await PaymentTransactionRepository().get_fresh(db_session, tx.id)
    # Gana la escritura concurrente; la acción perdedora no deja rastro
    assert fresh.status == TransactionStatus.FAILED
    assert fresh.verified_by is None
    assert fresh.notes is None
    assert await PaymentHistoryRepository().list_by_transaction(db_session, tx.id) == []


@pytest.mark.asyncio
async def test_second_verification_after_first_wins(db_session, make_transaction, admin_id):
    tx = await make_transaction()
    service = _service()

    await service.verify(db_session, tx.id, VerificationAction.APPROVE, admin_id=admin_id)
    await db_session.commit()

    with pytest.raises(TransactionAlreadyProcessed):
        await service.verify(db_session, tx.id, VerificationAction.REJECT, admin_id=uuid4(), notes="x")


@pytest.mark.asyncio
async def test_approve_increments_promo_usage(db_session, make_transaction, make_promo, admin_id):
    promo = await make_promo(code="SAVE20", usage_limit=10, used_count=3)
    tx = await make_transaction(amount="4000.00", discount="1000.00", promo_code="SAVE20")

    await _service().verify(db_session, tx.id, VerificationAction.APPROVE, admin_id=admin_id)
    await db_session.commit()

    await db_session.refresh(promo)
    assert promo.used_count == 4


@pytest.mark.asyncio
async def test_approve_with_exhausted_promo_still_completes(db_session, make_transaction, make_promo, admin_id):
    promo = await make_promo(code="LAST5", usage_limit=5, used_count=5)
    tx = await make_transaction(amount="4000.00", discount="1000.00", promo_code="LAST5")

    updated = await _service().verify(db_session, tx.id, VerificationAction.APPROVE, admin_id=admin_id)
    await db_session.commit()

    assert updated.status == TransactionStatus.COMPLETED
    await db_session.refresh(promo)
    assert promo.used_count == 5


@pytest.mark.asyncio
async def test_reject_does_not_touch_promo_usage(db_session, make_transaction, make_promo, admin_id):
    promo = await make_promo(code="SAVE20", used_count=1)
    tx = await make_transaction(promo_code="SAVE20")

    await _service().verify(db_session, tx.id, VerificationAction.REJECT, admin_id=admin_id, notes="no")
    await db_session.commit()

    await db_session.refresh(promo)
    assert promo.used_count == 1

# Fin del archivo tests/modules/payments/test_verification_service.py
