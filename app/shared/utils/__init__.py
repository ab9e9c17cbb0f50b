# -*- coding: utf-8 -*-
"""
app/shared/utils/__init__.py

Exportación de utilidades HTTP y errores de dominio.

Autor: Equipo Backoffice LMS
Fecha: 2026-09-24
"""

from .domain_errors import (
    BusinessRuleError,
    ConflictError,
    DomainError,
    NotFoundError,
    register_domain_exception_handlers,
)
from .http_exceptions import ForbiddenException, UnauthorizedException
from .json_response import UTF8JSONResponse, error_response, json_response_utf8

__all__ = [
    # Errores de dominio
    "DomainError",
    "NotFoundError",
    "ConflictError",
    "BusinessRuleError",
    "register_domain_exception_handlers",

    # HTTP
    "UnauthorizedException",
    "ForbiddenException",
    "UTF8JSONResponse",
    "json_response_utf8",
    "error_response",
]

# Fin del archivo app/shared/utils/__init__.py
