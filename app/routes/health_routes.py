# -*- coding: utf-8 -*-
"""
app/routes/health_routes.py

Endpoint básico de health check del backoffice de pagos.

Autor: Equipo Backoffice LMS
Fecha: 2026-10-11
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from app.shared.config import get_settings
from app.shared.database.database import check_database_health

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    summary="Health check del backend",
    description=(
        "Devuelve el estado básico del servicio, incluyendo verificación "
        "simple de conectividad a la base de datos."
    ),
)
async def health_check() -> dict:
    settings = get_settings()

    db_ok = await check_database_health(timeout_s=2.0)

    return {
        "status": "ok" if db_ok else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.python_env,
        "database": {
            "reachable": db_ok,
        },
        "service": {
            "name": settings.app_name,
            "version": settings.app_version,
        },
    }

# Fin del archivo app/routes/health_routes.py
