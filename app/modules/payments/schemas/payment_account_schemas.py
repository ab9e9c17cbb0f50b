# -*- coding: utf-8 -*-
"""
app/modules/payments/schemas/payment_account_schemas.py

Esquemas de cuentas receptoras. La api_key nunca sale en claro: se
serializa enmascarada (últimos 4 caracteres).

Autor: Equipo Backoffice LMS
Fecha: 2026-10-07
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_serializer

from app.modules.payments.enums import PaymentProvider
from .common_schemas import PageMeta


def mask_secret(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    if len(value) <= 4:
        return "****"
    return f"****{value[-4:]}"


class PaymentAccountCreate(BaseModel):
    provider: PaymentProvider
    account_name: str = Field(
        min_length=1,
        max_length=255,
        validation_alias=AliasChoices("account_name", "accountName"),
    )
    account_number: Optional[str] = Field(
        default=None, max_length=64, validation_alias=AliasChoices("account_number", "accountNumber")
    )
    bank_name: Optional[str] = Field(
        default=None, max_length=255, validation_alias=AliasChoices("bank_name", "bankName")
    )
    iban: Optional[str] = Field(default=None, max_length=64)
    merchant_id: Optional[str] = Field(
        default=None, max_length=255, validation_alias=AliasChoices("merchant_id", "merchantId")
    )
    api_key: Optional[str] = Field(default=None, validation_alias=AliasChoices("api_key", "apiKey"))
    instructions: Optional[str] = None
    is_active: bool = Field(default=True, validation_alias=AliasChoices("is_active", "isActive"))


class PaymentAccountUpdate(BaseModel):
    """Actualización parcial; sólo se aplican los campos enviados."""

    provider: Optional[PaymentProvider] = None
    account_name: Optional[str] = Field(
        default=None,
        min_length=1,
        max_length=255,
        validation_alias=AliasChoices("account_name", "accountName"),
    )
    account_number: Optional[str] = Field(
        default=None, max_length=64, validation_alias=AliasChoices("account_number", "accountNumber")
    )
    bank_name: Optional[str] = Field(
        default=None, max_length=255, validation_alias=AliasChoices("bank_name", "bankName")
    )
    iban: Optional[str] = Field(default=None, max_length=64)
    merchant_id: Optional[str] = Field(
        default=None, max_length=255, validation_alias=AliasChoices("merchant_id", "merchantId")
    )
    api_key: Optional[str] = Field(default=None, validation_alias=AliasChoices("api_key", "apiKey"))
    instructions: Optional[str] = None
    is_active: Optional[bool] = Field(default=None, validation_alias=AliasChoices("is_active", "isActive"))


class PaymentAccountOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    provider: PaymentProvider
    account_name: str
    account_number: Optional[str] = None
    bank_name: Optional[str] = None
    iban: Optional[str] = None
    merchant_id: Optional[str] = None
    api_key: Optional[str] = Field(default=None, description="Enmascarada.")
    instructions: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @field_serializer("api_key")
    def _mask_api_key(self, value: Optional[str]) -> Optional[str]:
        return mask_secret(value)


class PaymentAccountPublicOut(BaseModel):
    """Lo que ve el cliente en el checkout (sin credenciales)."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    provider: PaymentProvider
    account_name: str
    account_number: Optional[str] = None
    bank_name: Optional[str] = None
    iban: Optional[str] = None
    instructions: Optional[str] = None


class PaymentAccountListResponse(BaseModel):
    items: List[PaymentAccountOut]
    meta: PageMeta


__all__ = [
    "mask_secret",
    "PaymentAccountCreate",
    "PaymentAccountUpdate",
    "PaymentAccountOut",
    "PaymentAccountPublicOut",
    "PaymentAccountListResponse",
]

# Fin del archivo app/modules/payments/schemas/payment_account_schemas.py
