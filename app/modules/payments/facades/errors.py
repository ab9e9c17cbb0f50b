# -*- coding: utf-8 -*-
"""
app/modules/payments/facades/errors.py

Excepciones de dominio para verificación de pagos y reembolsos.
Todas heredan de la jerarquía compartida (NotFoundError / ConflictError /
BusinessRuleError) para que el handler global las traduzca a HTTP.

Autor: Equipo Backoffice LMS
Fecha: 2026-10-01
"""

from app.shared.utils.domain_errors import BusinessRuleError, ConflictError, NotFoundError


class TransactionNotFound(NotFoundError):
    """Se lanza cuando no se encuentra una transacción por ID."""
    error_code = "transaction_not_found"

    def __init__(self, transaction_id):
        self.transaction_id = transaction_id
        super().__init__(f"Transaction not found: {transaction_id}")


class RefundNotFound(NotFoundError):
    """Se lanza cuando no se encuentra una solicitud de reembolso por ID."""
    error_code = "refund_not_found"

    def __init__(self, refund_id):
        self.refund_id = refund_id
        super().__init__(f"Refund request not found: {refund_id}")


class PaymentAccountNotFound(NotFoundError):
    error_code = "payment_account_not_found"

    def __init__(self, account_id):
        self.account_id = account_id
        super().__init__(f"Payment account not found: {account_id}")


class InvalidStateTransition(ConflictError):
    """Se lanza cuando la acción no es válida para el estado actual."""
    error_code = "invalid_state_transition"

    def __init__(self, from_state, action, message=None):
        self.from_state = from_state
        self.action = action
        default_msg = f"Invalid transition: {from_state} --{action}-->"
        super().__init__(message or default_msg)


class TransactionAlreadyProcessed(InvalidStateTransition):
    """La transacción ya no está pendiente (otro admin la resolvió)."""
    error_code = "transaction_already_processed"

    def __init__(self, transaction_id, current_status, action=None):
        self.transaction_id = transaction_id
        super().__init__(
            current_status,
            action,
            f"Transaction already processed (status: {current_status})",
        )


class RefundAlreadyProcessed(InvalidStateTransition):
    """El reembolso ya no está pendiente."""
    error_code = "refund_already_processed"

    def __init__(self, refund_id, current_status, action=None):
        self.refund_id = refund_id
        super().__init__(
            current_status,
            action,
            f"Refund request already processed (status: {current_status})",
        )


class RefundValidationError(BusinessRuleError):
    """Datos de la solicitud o de la acción de reembolso inválidos."""
    error_code = "refund_validation_error"


class CheckoutValidationError(BusinessRuleError):
    error_code = "checkout_validation_error"


__all__ = [
    "TransactionNotFound",
    "RefundNotFound",
    "PaymentAccountNotFound",
    "InvalidStateTransition",
    "TransactionAlreadyProcessed",
    "RefundAlreadyProcessed",
    "RefundValidationError",
    "CheckoutValidationError",
]

# Fin del archivo app/modules/payments/facades/errors.py
