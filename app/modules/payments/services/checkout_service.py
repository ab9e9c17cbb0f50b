# -*- coding: utf-8 -*-
"""
app/modules/payments/services/checkout_service.py

Envío de un pago manual desde el checkout.

El cliente transfiere el dinero fuera de la plataforma y reporta la
referencia y/o el comprobante. Se crea una transacción `pending` con el
descuento ya aplicado; la verificación la hace un admin después.

Autor: Equipo Backoffice LMS
Fecha: 2026-10-06
"""

from __future__ import annotations

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.config import get_settings
from app.modules.catalog.enums import ItemType
from app.modules.catalog.facades import CatalogItemNotFound, CourseNotAvailable
from app.modules.catalog.repositories import CatalogRepository
from app.modules.payments.enums import (
    HistoryAction,
    PaymentProvider,
    TransactionStatus,
    VerificationStatus,
)
from app.modules.payments.facades import CheckoutValidationError
from app.modules.payments.metrics import record_checkout
from app.modules.payments.models import PaymentTransaction
from app.modules.payments.repositories import (
    PaymentHistoryRepository,
    PaymentTransactionRepository,
)
from app.modules.promotions.services import DiscountEvaluator

logger = logging.getLogger(__name__)


class CheckoutService:
    def __init__(
        self,
        transaction_repo: PaymentTransactionRepository,
        history_repo: PaymentHistoryRepository,
        catalog_repo: CatalogRepository,
        evaluator: DiscountEvaluator,
    ) -> None:
        self.transaction_repo = transaction_repo
        self.history_repo = history_repo
        self.catalog_repo = catalog_repo
        self.evaluator = evaluator

    async def submit_manual_payment(
        self,
        session: AsyncSession,
        *,
        user_id: UUID,
        course_id: UUID,
        payment_method: PaymentProvider,
        payment_reference: Optional[str] = None,
        payment_proof_url: Optional[str] = None,
        promo_code: Optional[str] = None,
    ) -> PaymentTransaction:
        reference = (payment_reference or "").strip() or None
        proof_url = (payment_proof_url or "").strip() or None
        if reference is None and proof_url is None:
            raise CheckoutValidationError("A payment reference or a payment proof is required")

        course = await self.catalog_repo.get_course(session, course_id)
        if course is None:
            raise CatalogItemNotFound(ItemType.COURSE, course_id)
        if not course.is_published:
            raise CourseNotAvailable(course_id)

        total = await self.evaluator.calculate_order_total(
            session, ItemType.COURSE, course_id, promo_code
        )

        tx = await self.transaction_repo.create(
            session,
            user_id=user_id,
            course_id=course_id,
            amount=total.final_price,
            original_amount=total.original_price,
            discount_amount=total.discount_amount,
            promo_code=total.promo_code,
            currency=get_settings().payments_currency,
            payment_method=PaymentProvider(payment_method),
            payment_reference=reference,
            payment_proof_url=proof_url,
            status=TransactionStatus.PENDING,
            verification_status=VerificationStatus.PENDING,
        )
        await self.history_repo.record(
            session,
            transaction_id=tx.id,
            action=HistoryAction.CREATED,
            performed_by=user_id,
            new_status=TransactionStatus.PENDING.value,
            details={
                "original_amount": str(total.original_price),
                "discount_amount": str(total.discount_amount),
                "promo_code": total.promo_code,
            },
        )
        record_checkout(tx.payment_method)
        logger.info(
            "manual_payment_submitted tx_id=%s user_id=%s course_id=%s amount=%s promo=%s",
            tx.id, user_id, course_id, tx.amount, tx.promo_code,
        )
        return tx


__all__ = ["CheckoutService"]

# Fin del archivo app/modules/payments/services/checkout_service.py
