# -*- coding: utf-8 -*-
"""
app/modules/promotions/services/promo_code_service.py

Administración de cupones (CRUD + estadísticas).

Validaciones de creación/edición:
- code, discount_type y discount_value obligatorios al crear
- discount_value > 0; porcentaje <= 100
- valid_from <= valid_until cuando ambos existen
- código duplicado → DuplicatePromoCode (409)

Autor: Equipo Backoffice LMS
Fecha: 03/10/2026
"""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.base import as_utc, utcnow
from app.modules.promotions.enums import ApplicableType, DiscountType
from app.modules.promotions.facades import (
    DuplicatePromoCode,
    PromoCodeNotFound,
    PromoCodeValidationError,
)
from app.modules.promotions.models import PromoCode
from app.modules.promotions.repositories import PromoCodeRepository
from app.modules.promotions.repositories.promo_code_repository import normalize_code

logger = logging.getLogger(__name__)

_EDITABLE_FIELDS = (
    "code",
    "description",
    "discount_type",
    "discount_value",
    "valid_from",
    "valid_until",
    "usage_limit",
    "is_active",
    "applicable_type",
    "applicable_ids",
)


def _validate_rules(
    discount_type: DiscountType,
    discount_value: Decimal,
    valid_from: Optional[datetime],
    valid_until: Optional[datetime],
) -> None:
    value = Decimal(discount_value)
    if value <= 0:
        raise PromoCodeValidationError("Discount value must be greater than 0")
    if DiscountType(discount_type) == DiscountType.PERCENTAGE and value > 100:
        raise PromoCodeValidationError("Percentage discount cannot exceed 100%")
    if valid_from is not None and valid_until is not None and as_utc(valid_from) > as_utc(valid_until):
        raise PromoCodeValidationError("valid_from must be before or equal to valid_until")


def _validate_usage_limit(usage_limit: Optional[int]) -> None:
    if usage_limit is not None and usage_limit < 1:
        raise PromoCodeValidationError("usage_limit must be at least 1 when set")


def _normalize_ids(ids: Optional[Sequence[Any]]) -> Optional[list]:
    if ids is None:
        return None
    return [str(i) for i in ids]


class PromoCodeService:
    def __init__(self, promo_repo: PromoCodeRepository) -> None:
        self.promo_repo = promo_repo

    async def get(self, session: AsyncSession, promo_id: UUID) -> PromoCode:
        promo = await self.promo_repo.get(session, promo_id)
        if promo is None:
            raise PromoCodeNotFound(promo_id)
        return promo

    async def list(
        self,
        session: AsyncSession,
        *,
        is_active: Optional[bool] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> Tuple[Sequence[PromoCode], int]:
        return await self.promo_repo.list_filtered(
            session, is_active=is_active, limit=limit, offset=offset
        )

    async def _flush_unique(self, session: AsyncSession, code: str) -> None:
        try:
            await session.flush()
        except IntegrityError as e:
            # Carrera entre dos altas con el mismo código
            await session.rollback()
            raise DuplicatePromoCode(code) from e

    async def create(self, session: AsyncSession, data: Dict[str, Any]) -> PromoCode:
        code = normalize_code(data.get("code") or "")
        if not code:
            raise PromoCodeValidationError("Promo code is required")
        if data.get("discount_type") is None or data.get("discount_value") is None:
            raise PromoCodeValidationError("Discount type and value are required")

        _validate_rules(
            data["discount_type"],
            data["discount_value"],
            data.get("valid_from"),
            data.get("valid_until"),
        )
        _validate_usage_limit(data.get("usage_limit"))

        if await self.promo_repo.get_by_code(session, code) is not None:
            raise DuplicatePromoCode(code)

        promo = PromoCode(
            code=code,
            description=data.get("description"),
            discount_type=DiscountType(data["discount_type"]),
            discount_value=Decimal(data["discount_value"]),
            valid_from=data.get("valid_from"),
            valid_until=data.get("valid_until"),
            usage_limit=data.get("usage_limit"),
            used_count=0,
            is_active=data.get("is_active", True),
            applicable_type=ApplicableType(data.get("applicable_type") or ApplicableType.ALL),
            applicable_ids=_normalize_ids(data.get("applicable_ids")),
        )
        session.add(promo)
        await self._flush_unique(session, code)
        logger.info("promo_code_created id=%s code=%s", promo.id, code)
        return promo

    async def update(self, session: AsyncSession, promo_id: UUID, data: Dict[str, Any]) -> PromoCode:
        """Actualización parcial: sólo las llaves presentes en `data`."""
        promo = await self.get(session, promo_id)
        changes = {k: v for k, v in data.items() if k in _EDITABLE_FIELDS}

        if "code" in changes:
            new_code = normalize_code(changes["code"] or "")
            if not new_code:
                raise PromoCodeValidationError("Promo code is required")
            if new_code != promo.code:
                existing = await self.promo_repo.get_by_code(session, new_code)
                if existing is not None and existing.id != promo.id:
                    raise DuplicatePromoCode(new_code)
            changes["code"] = new_code

        for required in ("discount_type", "discount_value"):
            if required in changes and changes[required] is None:
                raise PromoCodeValidationError("Discount type and value are required")

        _validate_rules(
            changes.get("discount_type", promo.discount_type),
            changes.get("discount_value", promo.discount_value),
            changes.get("valid_from", promo.valid_from),
            changes.get("valid_until", promo.valid_until),
        )

        usage_limit = changes.get("usage_limit", promo.usage_limit)
        _validate_usage_limit(usage_limit)
        if usage_limit is not None and usage_limit < promo.used_count:
            raise PromoCodeValidationError("usage_limit cannot be lower than the current used_count")

        if "applicable_ids" in changes:
            changes["applicable_ids"] = _normalize_ids(changes["applicable_ids"])

        for field, value in changes.items():
            setattr(promo, field, value)
        promo.updated_at = utcnow()

        await self._flush_unique(session, promo.code)
        logger.info("promo_code_updated id=%s fields=%s", promo.id, sorted(changes))
        return promo

    async def delete(self, session: AsyncSession, promo_id: UUID) -> None:
        promo = await self.get(session, promo_id)
        await self.promo_repo.delete(session, promo)
        logger.info("promo_code_deleted id=%s code=%s", promo_id, promo.code)

    async def stats(self, session: AsyncSession, now: Optional[datetime] = None) -> Dict[str, int]:
        return await self.promo_repo.stats(session, now or utcnow())


__all__ = ["PromoCodeService"]

# Fin del archivo app/modules/promotions/services/promo_code_service.py
