# -*- coding: utf-8 -*-
"""
app/modules/payments/schemas/common_schemas.py

Esquemas comunes (metadatos de paginación) compartidos por los listados
del backoffice.

Autor: Equipo Backoffice LMS
Fecha: 2026-10-07
"""

from __future__ import annotations

import math

from pydantic import BaseModel, Field

from app.shared.config import get_settings


def clamp_limit(limit: int) -> int:
    """Acota el tamaño de página a PAYMENTS_PAGE_SIZE_MAX."""
    return max(1, min(int(limit), get_settings().payments_page_size_max))


class PageMeta(BaseModel):
    """
    Metadatos de paginación para respuestas con listas.
    """

    total: int = Field(ge=0, description="Número total de registros.")
    limit: int = Field(ge=1, description="Límite de registros por página.")
    offset: int = Field(ge=0, description="Offset actual de la consulta.")
    page: int = Field(ge=1, description="Página actual (1-based).")
    pages: int = Field(ge=0, description="Número total de páginas.")

    @classmethod
    def build(cls, total: int, limit: int, offset: int) -> "PageMeta":
        return cls(
            total=total,
            limit=limit,
            offset=offset,
            page=offset // limit + 1,
            pages=math.ceil(total / limit) if total else 0,
        )


__all__ = ["PageMeta", "clamp_limit"]

# Fin del archivo app/modules/payments/schemas/common_schemas.py
