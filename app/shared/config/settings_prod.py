# -*- coding: utf-8 -*-
"""
app/shared/config/settings_prod.py

Overrides para entorno de PRODUCCIÓN usando Pydantic v2.
Forza lectura solo desde variables de entorno / secret stores
y activa logging estable (INFO en JSON).

Autor: Equipo Backoffice LMS
Fecha: 22/09/2026
"""

from typing import Literal

from pydantic_settings import SettingsConfigDict

from .settings_base import BaseAppSettings


class ProdSettings(BaseAppSettings):
    # --- Identidad de entorno ---
    python_env: Literal["development", "test", "production"] = "production"

    # --- Logging en prod: nivel estable y formato estructurado ---
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "pretty", "plain"] = "json"

    # Nota: _security_checks de BaseAppSettings exige JWT_SECRET_KEY fuerte,
    # CORS_ORIGINS explícito y DB_AUTO_CREATE desactivado.

    model_config = SettingsConfigDict(
        env_file=None,  # No leemos .env en producción
        extra="ignore",
    )


__all__ = ["ProdSettings"]

# Fin del archivo app/shared/config/settings_prod.py
