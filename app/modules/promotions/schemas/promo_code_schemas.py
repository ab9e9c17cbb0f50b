# -*- coding: utf-8 -*-
"""
app/modules/promotions/schemas/promo_code_schemas.py

Esquemas de administración de cupones.

Los campos obligatorios y las reglas de rango (valor > 0, porcentaje <= 100,
fechas coherentes) se validan en PromoCodeService para responder 400 con
error_code; aquí sólo se tipan.

Autor: Equipo Backoffice LMS
Fecha: 2026-10-08
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from app.modules.payments.schemas import PageMeta
from app.modules.promotions.enums import ApplicableType, DiscountType


class PromoCodeCreate(BaseModel):
    code: Optional[str] = Field(default=None, max_length=50)
    description: Optional[str] = None
    discount_type: Optional[DiscountType] = Field(
        default=None, validation_alias=AliasChoices("discount_type", "discountType")
    )
    discount_value: Optional[Decimal] = Field(
        default=None, validation_alias=AliasChoices("discount_value", "discountValue")
    )
    valid_from: Optional[datetime] = Field(
        default=None, validation_alias=AliasChoices("valid_from", "validFrom")
    )
    valid_until: Optional[datetime] = Field(
        default=None, validation_alias=AliasChoices("valid_until", "validUntil")
    )
    usage_limit: Optional[int] = Field(
        default=None, validation_alias=AliasChoices("usage_limit", "usageLimit", "maxUses")
    )
    is_active: bool = Field(default=True, validation_alias=AliasChoices("is_active", "isActive"))
    applicable_type: ApplicableType = Field(
        default=ApplicableType.ALL,
        validation_alias=AliasChoices("applicable_type", "applicableType"),
    )
    applicable_ids: Optional[List[UUID]] = Field(
        default=None, validation_alias=AliasChoices("applicable_ids", "applicableIds")
    )


class PromoCodeUpdate(BaseModel):
    """Actualización parcial: sólo se aplican los campos enviados."""

    code: Optional[str] = Field(default=None, max_length=50)
    description: Optional[str] = None
    discount_type: Optional[DiscountType] = Field(
        default=None, validation_alias=AliasChoices("discount_type", "discountType")
    )
    discount_value: Optional[Decimal] = Field(
        default=None, validation_alias=AliasChoices("discount_value", "discountValue")
    )
    valid_from: Optional[datetime] = Field(
        default=None, validation_alias=AliasChoices("valid_from", "validFrom")
    )
    valid_until: Optional[datetime] = Field(
        default=None, validation_alias=AliasChoices("valid_until", "validUntil")
    )
    usage_limit: Optional[int] = Field(
        default=None, validation_alias=AliasChoices("usage_limit", "usageLimit", "maxUses")
    )
    is_active: Optional[bool] = Field(default=None, validation_alias=AliasChoices("is_active", "isActive"))
    applicable_type: Optional[ApplicableType] = Field(
        default=None, validation_alias=AliasChoices("applicable_type", "applicableType")
    )
    applicable_ids: Optional[List[UUID]] = Field(
        default=None, validation_alias=AliasChoices("applicable_ids", "applicableIds")
    )


class PromoCodeOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    code: str
    description: Optional[str] = None
    discount_type: DiscountType
    discount_value: Decimal
    valid_from: Optional[datetime] = None
    valid_until: Optional[datetime] = None
    usage_limit: Optional[int] = None
    used_count: int
    is_active: bool
    applicable_type: ApplicableType
    applicable_ids: Optional[List[str]] = None
    created_at: datetime
    updated_at: datetime


class PromoCodeListResponse(BaseModel):
    items: List[PromoCodeOut]
    meta: PageMeta


class PromoCodeStats(BaseModel):
    total: int = Field(ge=0)
    active: int = Field(ge=0)
    expired: int = Field(ge=0)
    total_usage: int = Field(ge=0)


__all__ = [
    "PromoCodeCreate",
    "PromoCodeUpdate",
    "PromoCodeOut",
    "PromoCodeListResponse",
    "PromoCodeStats",
]

# Fin del archivo app/modules/promotions/schemas/promo_code_schemas.py
