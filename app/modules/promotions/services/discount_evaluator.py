# -*- coding: utf-8 -*-
"""
app/modules/promotions/services/discount_evaluator.py

Evaluador de cupones.

Reglas (en este orden):
1. Código inexistente            → PromoCodeNotFound (404)
2. is_active = False             → InvalidPromoCode(inactive)
3. now < valid_from              → InvalidPromoCode(not_started)
4. now > valid_until             → InvalidPromoCode(expired)
5. used_count >= usage_limit     → InvalidPromoCode(usage_limit_reached)
6. no aplica a (tipo, artículo)  → InvalidPromoCode(not_applicable)
7. artículo inexistente          → CatalogItemNotFound (404)

Límites de fecha ausentes = sin límite; usage_limit ausente = ilimitado.

Cálculo:
- percentage: price × value / 100, redondeado a centavos (half-up)
- fixed:      min(value, price)

La evaluación NO incrementa used_count; eso ocurre al aprobar el pago.

Autor: Equipo Backoffice LMS
Fecha: 03/10/2026
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.base import as_utc, utcnow
from app.modules.catalog.enums import ItemType
from app.modules.catalog.facades import CatalogItemNotFound
from app.modules.catalog.repositories import CatalogRepository
from app.modules.payments.metrics import record_promo_evaluation
from app.modules.promotions.enums import ApplicableType, DiscountType
from app.modules.promotions.facades import InvalidPromoCode, PromoCodeNotFound
from app.modules.promotions.models import PromoCode
from app.modules.promotions.repositories import PromoCodeRepository
from app.modules.promotions.repositories.promo_code_repository import normalize_code

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")
ZERO = Decimal("0.00")


@dataclass(frozen=True)
class DiscountResult:
    code: str
    discount_type: DiscountType
    discount_value: Decimal
    original_price: Decimal
    discount_amount: Decimal
    final_price: Decimal


@dataclass(frozen=True)
class OrderTotal:
    original_price: Decimal
    discount_amount: Decimal
    final_price: Decimal
    promo_code: Optional[str] = None


def compute_discount(discount_type: DiscountType, discount_value: Decimal, price: Decimal) -> Decimal:
    """Monto de descuento para un precio; nunca negativo ni mayor que el precio."""
    price = Decimal(price)
    value = Decimal(discount_value)
    if DiscountType(discount_type) == DiscountType.PERCENTAGE:
        amount = (price * value / Decimal(100)).quantize(CENTS, rounding=ROUND_HALF_UP)
    else:
        amount = min(value, price)
    return max(ZERO, min(amount, price)).quantize(CENTS)


def final_price_for(price: Decimal, discount: Decimal) -> Decimal:
    return max(ZERO, Decimal(price) - Decimal(discount)).quantize(CENTS)


def is_applicable(promo: PromoCode, item_type: ItemType, item_id: UUID) -> bool:
    applicable_type = ApplicableType(promo.applicable_type)
    if applicable_type == ApplicableType.ALL:
        return True
    if applicable_type.value != ItemType(item_type).value:
        return False
    ids = {str(i).lower() for i in (promo.applicable_ids or [])}
    # Lista vacía = todos los artículos de ese tipo
    return not ids or str(item_id).lower() in ids


def check_usable(promo: PromoCode, item_type: ItemType, item_id: UUID, now: datetime) -> None:
    """Lanza InvalidPromoCode con la primera regla que falle."""
    now = as_utc(now)
    if not promo.is_active:
        raise InvalidPromoCode(promo.code, "inactive")
    valid_from = as_utc(promo.valid_from)
    if valid_from is not None and now < valid_from:
        raise InvalidPromoCode(promo.code, "not_started")
    valid_until = as_utc(promo.valid_until)
    if valid_until is not None and now > valid_until:
        raise InvalidPromoCode(promo.code, "expired")
    if promo.usage_limit is not None and promo.used_count >= promo.usage_limit:
        raise InvalidPromoCode(promo.code, "usage_limit_reached")
    if not is_applicable(promo, item_type, item_id):
        raise InvalidPromoCode(promo.code, "not_applicable")


class DiscountEvaluator:
    """Valida cupones y calcula totales de orden."""

    def __init__(
        self,
        promo_repo: PromoCodeRepository,
        catalog_repo: CatalogRepository,
    ) -> None:
        self.promo_repo = promo_repo
        self.catalog_repo = catalog_repo

    async def _price_of(self, session: AsyncSession, item_type: ItemType, item_id: UUID) -> Decimal:
        price = await self.catalog_repo.get_price(session, item_type, item_id)
        if price is None:
            raise CatalogItemNotFound(item_type, item_id)
        return price

    async def evaluate(
        self,
        session: AsyncSession,
        code: str,
        item_type: ItemType,
        item_id: UUID,
        now: Optional[datetime] = None,
    ) -> DiscountResult:
        now = now or utcnow()
        normalized = normalize_code(code)

        promo = await self.promo_repo.get_by_code(session, normalized) if normalized else None
        if promo is None:
            record_promo_evaluation("not_found")
            logger.info("promo_evaluation_not_found code=%s", normalized)
            raise PromoCodeNotFound(normalized or code)

        try:
            check_usable(promo, item_type, item_id, now)
        except InvalidPromoCode as exc:
            record_promo_evaluation(exc.reason)
            logger.info(
                "promo_evaluation_invalid code=%s reason=%s item=%s:%s",
                promo.code, exc.reason, item_type, item_id,
            )
            raise

        price = await self._price_of(session, item_type, item_id)
        discount = compute_discount(promo.discount_type, promo.discount_value, price)
        record_promo_evaluation("applied")

        return DiscountResult(
            code=promo.code,
            discount_type=DiscountType(promo.discount_type),
            discount_value=Decimal(promo.discount_value),
            original_price=price.quantize(CENTS),
            discount_amount=discount,
            final_price=final_price_for(price, discount),
        )

    async def calculate_order_total(
        self,
        session: AsyncSession,
        item_type: ItemType,
        item_id: UUID,
        code: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> OrderTotal:
        """
        Total de una orden de un solo artículo, con cupón opcional.

        Un cupón inválido propaga el error: el cliente decide si reintenta
        sin código.
        """
        if code and code.strip():
            result = await self.evaluate(session, code, item_type, item_id, now)
            return OrderTotal(
                original_price=result.original_price,
                discount_amount=result.discount_amount,
                final_price=result.final_price,
                promo_code=result.code,
            )

        price = await self._price_of(session, item_type, item_id)
        return OrderTotal(
            original_price=price.quantize(CENTS),
            discount_amount=ZERO,
            final_price=final_price_for(price, ZERO),
        )


__all__ = [
    "DiscountEvaluator",
    "DiscountResult",
    "OrderTotal",
    "compute_discount",
    "final_price_for",
    "is_applicable",
    "check_usable",
]

# Fin del archivo app/modules/promotions/services/discount_evaluator.py
