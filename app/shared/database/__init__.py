# -*- coding: utf-8 -*-
"""
app/shared/database/__init__.py

Re-exporta utilidades comunes de base de datos.

Autor: Equipo Backoffice LMS
Fecha: 2026-09-22
"""

from __future__ import annotations

from .database import (
    engine,
    SessionLocal,
    get_async_session,
    check_database_health,
    create_all_tables,
)
from .base import Base, NAMING_CONVENTION, as_db_enum, as_utc, utcnow
from .repository import BaseRepository

__all__ = [
    "engine",
    "SessionLocal",
    "Base",
    "NAMING_CONVENTION",
    "as_db_enum",
    "as_utc",
    "utcnow",
    "BaseRepository",
    "get_async_session",
    "check_database_health",
    "create_all_tables",
]

# Fin del archivo app/shared/database/__init__.py
