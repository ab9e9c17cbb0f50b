# -*- coding: utf-8 -*-
"""
app/shared/database/database.py

SQLAlchemy async: PostgreSQL (asyncpg) en despliegues, SQLite (aiosqlite)
en desarrollo local y tests.

Provee:
- engine (create_async_engine)
- SessionLocal (async_sessionmaker)
- Dependencia FastAPI: get_async_session
- create_all_tables() para entornos con DB_AUTO_CREATE
- check_database_health()

Notas:
- Una sesión por request; el commit lo decide la ruta tras la mutación.
- Cualquier error SQLAlchemy dentro del request provoca rollback explícito.
"""

from __future__ import annotations

import asyncio
import logging
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.shared.config import get_settings
from app.shared.database.base import Base

logger = logging.getLogger(__name__)

_settings = get_settings()
DATABASE_URL: str = _settings.database_url
IS_SQLITE = DATABASE_URL.startswith("sqlite")


def _engine_kwargs() -> dict:
    """Argumentos del engine según el driver."""
    kwargs: dict = {"echo": _settings.db_echo_sql}
    if IS_SQLITE:
        # SQLite en memoria: una sola conexión compartida o cada sesión vería otra BD
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in DATABASE_URL:
            kwargs["poolclass"] = StaticPool
        return kwargs

    kwargs.update(
        pool_size=_settings.db_pool_size,
        max_overflow=_settings.db_max_overflow,
        pool_recycle=_settings.db_pool_recycle,
        pool_pre_ping=True,
        connect_args={"server_settings": {"application_name": _settings.app_name}},
    )
    return kwargs


engine = create_async_engine(DATABASE_URL, **_engine_kwargs())

logger.info(
    "[DB] Engine configurado → %s (echo=%s)",
    "sqlite" if IS_SQLITE else f"{_settings.db_host}:{_settings.db_port}/{_settings.db_name}",
    _settings.db_echo_sql,
)

# ── Session factory
SessionLocal = async_sessionmaker(
    bind=engine,
    expire_on_commit=False,
    class_=AsyncSession,
    autoflush=False,
)


# ── Dependencia FastAPI
async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    async with SessionLocal() as session:
        try:
            yield session
        except SQLAlchemyError:
            # Importante: rollback para liberar cualquier transacción/lock
            await session.rollback()
            raise
        finally:
            if session.in_transaction():
                await session.rollback()


# ── Creación de tablas (dev / SQLite)
async def create_all_tables() -> None:
    """Crea las tablas registradas en Base.metadata si no existen."""
    # Importa los modelos para registrarlos en la metadata compartida
    import app.modules.catalog.models  # noqa: F401
    import app.modules.payments.models  # noqa: F401
    import app.modules.promotions.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("[DB] Tablas verificadas/creadas: %s", sorted(Base.metadata.tables))


# ── Health check
async def check_database_health(timeout_s: float = 3.0, sql: str = "SELECT 1") -> bool:
    """
    Verifica conectividad a la base de datos.

    Args:
        timeout_s: Tiempo máximo de espera en segundos
        sql: Query SQL a ejecutar (default: "SELECT 1")

    Returns:
        True si la conexión es exitosa, False en caso contrario
    """
    try:
        async with asyncio.timeout(timeout_s):
            async with engine.connect() as conn:
                await conn.execute(text(sql))
        return True
    except (SQLAlchemyError, OSError, TimeoutError) as exc:
        logger.warning("[DB] Health check fallido: %s", exc)
        return False


__all__ = [
    "engine",
    "SessionLocal",
    "get_async_session",
    "create_all_tables",
    "check_database_health",
]

# Fin del archivo app/shared/database/database.py
