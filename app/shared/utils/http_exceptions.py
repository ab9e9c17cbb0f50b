# -*- coding: utf-8 -*-
"""
app/shared/utils/http_exceptions.py

Excepciones HTTP de autenticación/autorización del backoffice.

Los errores de negocio (404/409/400) no usan HTTPException: los servicios
lanzan excepciones de dominio (ver domain_errors.py) y un handler global
las traduce. Aquí sólo viven las que emiten directamente las dependencias
de seguridad.

Autor: Equipo Backoffice LMS
Fecha: 2026-09-24
"""

from typing import Any, Dict, Optional

from fastapi import HTTPException, status


class UnauthorizedException(HTTPException):
    """401 - Token ausente, inválido o expirado"""
    def __init__(
        self,
        message: str = "Token inválido o expirado",
        headers: Optional[Dict[str, Any]] = None
    ):
        if headers is None:
            headers = {"WWW-Authenticate": "Bearer"}
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"error": "invalid_token", "message": message},
            headers=headers
        )


class ForbiddenException(HTTPException):
    """403 - Usuario autenticado pero sin el rol requerido"""
    def __init__(
        self,
        message: str = "Admin access required",
        headers: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail={"error": "forbidden", "message": message},
            headers=headers
        )


__all__ = [
    "UnauthorizedException",
    "ForbiddenException",
]

# Fin del archivo app/shared/utils/http_exceptions.py
