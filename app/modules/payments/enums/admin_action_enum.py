# -*- coding: utf-8 -*-
"""
app/modules/payments/enums/admin_action_enum.py

Acciones que un administrador puede enviar sobre transacciones y reembolsos.

Autor: Equipo Backoffice LMS
Fecha: 27/09/2026
"""

from enum import StrEnum


class VerificationAction(StrEnum):
    """Acción sobre una transacción pendiente."""

    APPROVE = "approve"
    REJECT = "reject"

    @property
    def past_tense(self) -> str:
        return "approved" if self is VerificationAction.APPROVE else "rejected"


class RefundAction(StrEnum):
    """Acción sobre un reembolso."""

    APPROVE = "approve"
    REJECT = "reject"
    PROCESS = "process"


__all__ = ["VerificationAction", "RefundAction"]

# Fin del archivo app/modules/payments/enums/admin_action_enum.py
