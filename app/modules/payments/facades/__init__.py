# -*- coding: utf-8 -*-
"""
app/modules/payments/facades/__init__.py

Reglas puras del módulo Payments: excepciones de dominio y tablas de
transición de estado.

Autor: Equipo Backoffice LMS
Fecha: 2026-10-01
"""

from .errors import *  # noqa: F401,F403
from .errors import __all__ as _errors_all
from .transitions import (
    REFUND_TRANSITIONS,
    TRANSACTION_TRANSITIONS,
    VERIFICATION_OUTCOME,
    next_refund_status,
    next_transaction_status,
)

__all__ = [
    *_errors_all,
    "REFUND_TRANSITIONS",
    "TRANSACTION_TRANSITIONS",
    "VERIFICATION_OUTCOME",
    "next_refund_status",
    "next_transaction_status",
]

# Fin del archivo app/modules/payments/facades/__init__.py
