# -*- coding: utf-8 -*-
"""
app/shared/config/__init__.py

Punto único de acceso a la configuración:
    from app.shared.config import settings
    from app.shared.config import get_settings

`settings` es un proxy perezoso: no instancia la configuración al importar
(evita validaciones prematuras en tests que ajustan variables de entorno
antes de tocar cualquier atributo).
"""

from __future__ import annotations

from typing import Any

from .config_loader import get_settings
from .logging_config import setup_logging


class _SettingsProxy:
    __slots__ = ()

    def __getattr__(self, name: str) -> Any:
        return getattr(get_settings(), name)

    def __repr__(self) -> str:
        return f"<SettingsProxy env={get_settings().python_env!r}>"


settings = _SettingsProxy()

__all__ = ["settings", "get_settings", "setup_logging"]

# Fin del archivo app/shared/config/__init__.py
