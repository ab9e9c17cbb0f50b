# -*- coding: utf-8 -*-
"""
app/main.py

Punto de entrada del backoffice de pagos LMS.

- Carga .env antes de leer la configuración
- Logging vía setup_logging (plain / json)
- Lifespan: creación de tablas opcional (DB_AUTO_CREATE) y cierre del engine
- CORS desde CORS_ORIGINS
- Excepciones de dominio → {"detail", "error_code"} UTF-8
- /health y /api/*

Autor: Equipo Backoffice LMS
Fecha: 2026-10-11
"""

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

# ---------------------------------------------------------------------------
# Cargar .env ANTES de cualquier import que lea la configuración
# En producción no se sobrescriben variables ya definidas en el entorno
# ---------------------------------------------------------------------------
from dotenv import load_dotenv

_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
_PYTHON_ENV = os.getenv("PYTHON_ENV", "development").strip().lower()
load_dotenv(dotenv_path=_ENV_PATH, override=_PYTHON_ENV == "development")

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from app.shared.config import get_settings, setup_logging
from app.shared.database.database import create_all_tables, engine
from app.shared.utils.domain_errors import register_domain_exception_handlers
from app.shared.utils.json_response import UTF8JSONResponse, json_response_utf8

settings = get_settings()
setup_logging(settings.log_level, settings.log_format)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ────────── STARTUP ──────────
    if settings.db_auto_create:
        await create_all_tables()
    logger.info("🟢 %s iniciado (env=%s)", settings.app_name, settings.python_env)
    try:
        yield
    finally:
        # ────────── SHUTDOWN ──────────
        await engine.dispose()
        logger.info("🔴 %s apagado.", settings.app_name)


openapi_tags = [
    {"name": "admin:payment-transactions", "description": "Verificación manual de pagos"},
    {"name": "admin:refunds", "description": "Aprobación y procesamiento de reembolsos"},
    {"name": "admin:promo-codes", "description": "Administración de cupones"},
    {"name": "admin:payment-accounts", "description": "Cuentas receptoras del checkout"},
    {"name": "promotions:checkout", "description": "Validación de cupones y totales de orden"},
]

app = FastAPI(
    title=settings.app_name,
    description="Backoffice de verificación de pagos, reembolsos y cupones del LMS",
    version=settings.app_version,
    lifespan=lifespan,
    openapi_tags=openapi_tags,
    default_response_class=UTF8JSONResponse,
)

# ═══════════════════════════════════════════════════════════════════════════════
# CORS
# ═══════════════════════════════════════════════════════════════════════════════
_cors_origins = settings.get_cors_origins()
app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins,
    # allow_credentials no es compatible con el comodín "*"
    allow_credentials=_cors_origins != ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
logger.info("[CORS] allow_origins=%s", _cors_origins)


# ═══════════════════════════════════════════════════════════════════════════════
# Manejadores de excepciones
# ═══════════════════════════════════════════════════════════════════════════════
register_domain_exception_handlers(app)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """HTTPException (401/403/404 de ruta) con charset UTF-8 explícito."""
    return json_response_utf8(
        content={"detail": exc.detail},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


# Incluye router maestro
from app.routes import router as main_router

app.include_router(main_router)


@app.get("/")
async def root():
    return {"service": settings.app_name, "status": "active"}


if __name__ == "__main__":
    uvicorn.run("app.main:app", host=settings.app_host, port=settings.app_port, reload=settings.is_dev)

# Fin del archivo app/main.py
