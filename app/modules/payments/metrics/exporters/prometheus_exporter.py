# -*- coding: utf-8 -*-
"""
app/modules/payments/metrics/exporters/prometheus_exporter.py

Exporter Prometheus del backoffice de pagos.
Registro dedicado (no el global de prometheus_client) para que los tests
puedan leer contadores sin interferencia de otras librerías.

Autor: Equipo Backoffice LMS
Fecha: 02/10/2026
"""

from datetime import datetime, timezone
import logging

from prometheus_client import (
    CollectorRegistry,
    Counter,
    generate_latest,
    CONTENT_TYPE_LATEST,
)

logger = logging.getLogger(__name__)

# --------------------------------------------------------------------------
# Registro de Prometheus
# --------------------------------------------------------------------------
registry = CollectorRegistry()

NAMESPACE = "lms"
SUBSYSTEM = "payments"

# --------------------------------------------------------------------------
# Definición de métricas
# --------------------------------------------------------------------------
VERIFICATIONS_TOTAL = Counter(
    f"{NAMESPACE}_{SUBSYSTEM}_verifications_total",
    "Acciones de verificación de transacciones por resultado",
    ["action", "outcome"],  # outcome: success/conflict/not_found
    registry=registry,
)

REFUND_ACTIONS_TOTAL = Counter(
    f"{NAMESPACE}_{SUBSYSTEM}_refund_actions_total",
    "Acciones sobre reembolsos por resultado",
    ["action", "outcome"],  # outcome: success/conflict/not_found/invalid
    registry=registry,
)

REFUND_REQUESTS_TOTAL = Counter(
    f"{NAMESPACE}_{SUBSYSTEM}_refund_requests_total",
    "Solicitudes de reembolso creadas por clientes",
    registry=registry,
)

CHECKOUT_SUBMITTED_TOTAL = Counter(
    f"{NAMESPACE}_{SUBSYSTEM}_checkout_submitted_total",
    "Transacciones manuales enviadas por método de pago",
    ["payment_method"],
    registry=registry,
)

PROMO_EVALUATIONS_TOTAL = Counter(
    f"{NAMESPACE}_{SUBSYSTEM}_promo_evaluations_total",
    "Evaluaciones de cupones por resultado",
    ["outcome"],  # outcome: applied/not_found/inactive/not_started/expired/usage_limit_reached/not_applicable
    registry=registry,
)


# --------------------------------------------------------------------------
# Helpers de registro
# --------------------------------------------------------------------------
def record_verification(action: str, outcome: str) -> None:
    VERIFICATIONS_TOTAL.labels(action=str(action), outcome=outcome).inc()


def record_refund_action(action: str, outcome: str) -> None:
    REFUND_ACTIONS_TOTAL.labels(action=str(action), outcome=outcome).inc()


def record_refund_request() -> None:
    REFUND_REQUESTS_TOTAL.inc()


def record_checkout(payment_method: str) -> None:
    CHECKOUT_SUBMITTED_TOTAL.labels(payment_method=str(payment_method)).inc()


def record_promo_evaluation(outcome: str) -> None:
    PROMO_EVALUATIONS_TOTAL.labels(outcome=outcome).inc()


# --------------------------------------------------------------------------
# Export
# --------------------------------------------------------------------------
def render_prometheus_metrics() -> bytes:
    """Serializa el registro en formato de exposición de texto."""
    return generate_latest(registry)


def prometheus_ping() -> dict:
    return {
        "status": "ok",
        "content_type": CONTENT_TYPE_LATEST,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


__all__ = [
    "registry",
    "record_verification",
    "record_refund_action",
    "record_refund_request",
    "record_checkout",
    "record_promo_evaluation",
    "render_prometheus_metrics",
    "prometheus_ping",
]

# Fin del archivo app/modules/payments/metrics/exporters/prometheus_exporter.py
