# -*- coding: utf-8 -*-
"""
app/modules/payments/metrics/__init__.py

Métricas Prometheus del backoffice (verificaciones, reembolsos, cupones).
"""

from .exporters.prometheus_exporter import (
    record_checkout,
    record_promo_evaluation,
    record_refund_action,
    record_refund_request,
    record_verification,
    registry,
    render_prometheus_metrics,
)
from .routes import router_prometheus

__all__ = [
    "registry",
    "record_checkout",
    "record_promo_evaluation",
    "record_refund_action",
    "record_refund_request",
    "record_verification",
    "render_prometheus_metrics",
    "router_prometheus",
]

# Fin del archivo app/modules/payments/metrics/__init__.py
