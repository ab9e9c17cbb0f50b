# -*- coding: utf-8 -*-
"""
app/modules/promotions/schemas/validation_schemas.py

Esquemas de validación de cupón y cálculo de total de orden.

Autor: Equipo Backoffice LMS
Fecha: 2026-10-08
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import AliasChoices, BaseModel, Field

from app.modules.catalog.enums import ItemType
from app.modules.promotions.enums import DiscountType


class PromoValidateRequest(BaseModel):
    code: str = Field(min_length=1, max_length=50, description="Código tal como lo escribe el cliente.")
    item_type: ItemType = Field(validation_alias=AliasChoices("item_type", "itemType"))
    item_id: UUID = Field(validation_alias=AliasChoices("item_id", "itemId"))


class PromoValidateResponse(BaseModel):
    code: str
    discount_type: DiscountType
    discount_value: Decimal
    discount_amount: Decimal = Field(description="Descuento aplicado al precio del artículo.")
    original_price: Decimal
    final_price: Decimal


class OrderCalculateRequest(BaseModel):
    item_type: ItemType = Field(validation_alias=AliasChoices("item_type", "itemType"))
    item_id: UUID = Field(validation_alias=AliasChoices("item_id", "itemId"))
    promo_code: Optional[str] = Field(
        default=None,
        max_length=50,
        validation_alias=AliasChoices("promo_code", "promoCode"),
    )


class OrderTotalResponse(BaseModel):
    original_price: Decimal
    discount_amount: Decimal
    final_price: Decimal
    promo_code: Optional[str] = None


__all__ = [
    "PromoValidateRequest",
    "PromoValidateResponse",
    "OrderCalculateRequest",
    "OrderTotalResponse",
]

# Fin del archivo app/modules/promotions/schemas/validation_schemas.py
