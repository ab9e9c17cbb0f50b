# -*- coding: utf-8 -*-
"""
app/modules/auth/dependencies.py

Dependencias de autenticación JWT para FastAPI.

Provee:
- validate_jwt_token: valida el token y construye el AuthContext
- get_current_user: cualquier usuario con token válido (rutas de cliente)
- require_admin: token válido con claim role == ADMIN_ROLE_NAME

El rol viaja en el propio token emitido por el servicio de identidad;
este servicio no mantiene tabla de usuarios.

Autor: Equipo Backoffice LMS
Fecha: 2026-09-25
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from fastapi import Depends

from app.shared.config import get_settings
from app.shared.utils.http_exceptions import ForbiddenException, UnauthorizedException

from .security import TokenDecodeError, decode_access_token, oauth2_scheme

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthContext:
    """Identidad extraída del JWT."""
    user_id: UUID
    role: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == get_settings().admin_role_name


def validate_jwt_token(token: Optional[str]) -> AuthContext:
    """
    Valida un JWT y extrae user_id (claim 'sub') y rol (claim 'role').

    Raises:
        UnauthorizedException (401): token ausente, inválido, expirado o
            con un 'sub' que no es un UUID.
    """
    if not token:
        raise UnauthorizedException("Not authenticated")

    try:
        payload = decode_access_token(token)
    except TokenDecodeError as e:
        raise UnauthorizedException(str(e)) from e

    try:
        user_id = UUID(str(payload["sub"]))
    except ValueError as e:
        raise UnauthorizedException("Token does not contain a valid user identifier") from e

    role = payload.get("role")
    return AuthContext(user_id=user_id, role=str(role) if role else None)


async def get_current_user(
    token: Optional[str] = Depends(oauth2_scheme),
) -> AuthContext:
    """Dependencia para endpoints de cliente autenticado."""
    return validate_jwt_token(token)


async def require_admin(
    token: Optional[str] = Depends(oauth2_scheme),
) -> AuthContext:
    """
    Dependencia que requiere rol admin.

    Raises:
        UnauthorizedException 401: Token inválido
        ForbiddenException 403: Usuario no es admin
    """
    ctx = validate_jwt_token(token)
    if not ctx.is_admin:
        logger.warning("admin_access_denied user_id=%s role=%s", ctx.user_id, ctx.role)
        raise ForbiddenException()
    return ctx


__all__ = [
    "AuthContext",
    "validate_jwt_token",
    "get_current_user",
    "require_admin",
]

# Fin del archivo app/modules/auth/dependencies.py
