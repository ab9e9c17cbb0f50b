# -*- coding: utf-8 -*-
"""
app/modules/payments/routes/metrics.py

Montaje de las rutas Prometheus del módulo (/payments/metrics).
"""

from app.modules.payments.metrics.routes import router_prometheus as router

__all__ = ["router"]

# Fin del archivo app/modules/payments/routes/metrics.py
