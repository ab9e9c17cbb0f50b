# -*- coding: utf-8 -*-
"""
app/modules/payments/metrics/routes/routes_prometheus.py

Rutas Prometheus del backoffice de pagos:
- /payments/metrics            → Export en formato Prometheus
- /payments/metrics/ping       → Health simple del exporter

Autor: Equipo Backoffice LMS
Fecha: 02/10/2026
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter
from prometheus_client import CONTENT_TYPE_LATEST
from starlette.responses import Response

from ..exporters.prometheus_exporter import (
    prometheus_ping,
    render_prometheus_metrics,
)

router_prometheus = APIRouter(prefix="/payments", tags=["payments-metrics"])


@router_prometheus.get("/metrics")
async def prometheus_metrics() -> Response:
    """Devuelve las métricas en formato Prometheus para scraping."""
    return Response(render_prometheus_metrics(), media_type=CONTENT_TYPE_LATEST)


@router_prometheus.get("/metrics/ping")
async def ping() -> Dict[str, Any]:
    """Health-check simple del exporter Prometheus."""
    return prometheus_ping()

# Fin del archivo app/modules/payments/metrics/routes/routes_prometheus.py
