# -*- coding: utf-8 -*-
"""
app/modules/promotions/facades/errors.py

Excepciones de dominio para cupones.

Autor: Equipo Backoffice LMS
Fecha: 2026-10-01
"""

from app.shared.utils.domain_errors import BusinessRuleError, ConflictError, NotFoundError


class PromoCodeNotFound(NotFoundError):
    """Se lanza cuando el código (o ID) no existe."""
    error_code = "promo_code_not_found"

    def __init__(self, identifier):
        self.identifier = identifier
        super().__init__(f"Promo code not found: {identifier}")


class InvalidPromoCode(BusinessRuleError):
    """
    El código existe pero no puede usarse ahora.

    `reason` es uno de: inactive, not_started, expired, usage_limit_reached,
    not_applicable.
    """
    error_code = "promo_code_invalid"

    def __init__(self, code, reason):
        self.code = code
        self.reason = reason
        super().__init__(f"Invalid or expired promo code: {code} ({reason})")


class DuplicatePromoCode(ConflictError):
    """Se lanza cuando se intenta crear un cupón con código repetido."""
    error_code = "promo_code_duplicate"

    def __init__(self, code):
        self.code = code
        super().__init__(f"Promo code already exists: {code}")


class PromoCodeValidationError(BusinessRuleError):
    """Datos de creación/edición de cupón inconsistentes."""
    error_code = "promo_code_validation_error"


__all__ = [
    "PromoCodeNotFound",
    "InvalidPromoCode",
    "DuplicatePromoCode",
    "PromoCodeValidationError",
]

# Fin del archivo app/modules/promotions/facades/errors.py
