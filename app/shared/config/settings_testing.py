# -*- coding: utf-8 -*-
"""
app/shared/config/settings_testing.py

Overrides para entorno de PRUEBAS (test) usando Pydantic v2.
Busca ser determinista: logging moderado, base de datos SQLite en memoria
y secreto JWT fijo para poder firmar tokens en la suite.

Autor: Equipo Backoffice LMS
Fecha: 22/09/2026
"""

from typing import Literal, Optional

from pydantic import SecretStr
from pydantic_settings import SettingsConfigDict

from .settings_base import BaseAppSettings


class EnvTestingSettings(BaseAppSettings):
    # --- Identidad de entorno ---
    python_env: Literal["development", "test", "production"] = "test"

    # --- Logging en test: menos ruido ---
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_format: Literal["json", "pretty", "plain"] = "pretty"

    # --- Base de datos aislada; los tests montan su propio engine ---
    db_url: Optional[str] = "sqlite+aiosqlite:///:memory:"
    db_auto_create: bool = False

    # --- Auth: secreto fijo para firmar tokens en tests ---
    jwt_secret_key: SecretStr = SecretStr("test-secret-for-backoffice-suite-change-me")

    model_config = SettingsConfigDict(
        env_file=".env.test",
        env_file_encoding="utf-8",
        extra="ignore",
    )


__all__ = ["EnvTestingSettings"]

# Fin del archivo app/shared/config/settings_testing.py
