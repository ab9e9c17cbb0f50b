# -*- coding: utf-8 -*-
"""
app/shared/utils/domain_errors.py

Excepciones de dominio compartidas y su traducción a HTTP.

Los servicios lanzan estas excepciones (nunca HTTPException); el handler
registrado en main.py las convierte en:

    {"detail": <mensaje>, "error_code": <código estable>}

| Base              | HTTP |
|-------------------|------|
| NotFoundError     | 404  |
| ConflictError     | 409  |
| BusinessRuleError | 400  |

Autor: Equipo Backoffice LMS
Fecha: 2026-09-24
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status

from app.shared.utils.json_response import error_response

logger = logging.getLogger(__name__)


class DomainError(Exception):
    """Raíz de las excepciones de negocio."""
    status_code: int = status.HTTP_400_BAD_REQUEST
    error_code: str = "domain_error"

    def __init__(self, message: str, *, error_code: str | None = None):
        self.message = message
        if error_code:
            self.error_code = error_code
        super().__init__(message)


class NotFoundError(DomainError):
    """El recurso solicitado no existe."""
    status_code = status.HTTP_404_NOT_FOUND
    error_code = "not_found"


class ConflictError(DomainError):
    """El estado actual del recurso impide la operación."""
    status_code = status.HTTP_409_CONFLICT
    error_code = "conflict"


class BusinessRuleError(DomainError):
    """La solicitud viola una regla de negocio (validación o código inválido)."""
    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "validation_error"


async def domain_exception_handler(request: Request, exc: DomainError):
    log = logger.info if exc.status_code == status.HTTP_404_NOT_FOUND else logger.warning
    log(
        "domain_error code=%s status=%s path=%s msg=%s",
        exc.error_code, exc.status_code, request.url.path, exc.message,
    )
    return error_response(exc.status_code, exc.message, exc.error_code)


def register_domain_exception_handlers(app: FastAPI) -> None:
    """Registra el handler para toda la jerarquía DomainError."""
    app.add_exception_handler(DomainError, domain_exception_handler)  # type: ignore[arg-type]


__all__ = [
    "DomainError",
    "NotFoundError",
    "ConflictError",
    "BusinessRuleError",
    "domain_exception_handler",
    "register_domain_exception_handlers",
]

# Fin del archivo app/shared/utils/domain_errors.py
