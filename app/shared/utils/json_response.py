# -*- coding: utf-8 -*-
"""
app/shared/utils/json_response.py

Respuestas JSON con charset UTF-8 explícito.

- UTF8JSONResponse: default_response_class de la app; los motivos de rechazo
  y notas de auditoría llegan con acentos desde el panel de administración.
- error_response: cuerpo de error homogéneo {"detail", "error_code"}.

Autor: Equipo Backoffice LMS
Fecha: 2026-09-24
"""

from typing import Any, Dict, Optional

from fastapi.responses import JSONResponse


class UTF8JSONResponse(JSONResponse):
    """JSONResponse con Content-Type: application/json; charset=utf-8."""
    media_type = "application/json; charset=utf-8"


def json_response_utf8(
    content: Any,
    status_code: int = 200,
    headers: Optional[Dict[str, str]] = None,
) -> UTF8JSONResponse:
    return UTF8JSONResponse(
        content=content,
        status_code=status_code,
        headers=headers,
    )


def error_response(status_code: int, detail: Any, error_code: str) -> UTF8JSONResponse:
    """
    Cuerpo de error estable para el cliente:

        {"detail": "Transaction already processed", "error_code": "transaction_already_processed"}
    """
    return json_response_utf8(
        {"detail": detail, "error_code": error_code},
        status_code=status_code,
    )


__all__ = ["UTF8JSONResponse", "json_response_utf8", "error_response"]

# Fin del archivo app/shared/utils/json_response.py
