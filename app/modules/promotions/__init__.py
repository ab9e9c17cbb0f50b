# -*- coding: utf-8 -*-
"""
app/modules/promotions/__init__.py

Módulo de cupones / códigos promocionales.

Estructura:
- enums: DiscountType, ApplicableType
- models: PromoCode
- repositories: PromoCodeRepository
- services: DiscountEvaluator (validación y cálculo), PromoCodeService (admin)
- routes: validación pública y CRUD admin

Autor: Equipo Backoffice LMS
Fecha: 29/09/2026
"""

from .enums import ApplicableType, DiscountType
from .models import PromoCode

__all__ = ["ApplicableType", "DiscountType", "PromoCode"]

# Fin del archivo app/modules/promotions/__init__.py
