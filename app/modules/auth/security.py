# -*- coding: utf-8 -*-
"""
app/modules/auth/security.py

Seguridad del backoffice:
- Esquema OAuth2 (Bearer)
- Creación / decodificación de JWT

Los tokens los emite el servicio de identidad externo con el mismo secreto
compartido; aquí sólo se verifican. create_access_token existe para
herramientas internas y para la suite de tests.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional, Union

from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt  # pip install "python-jose[cryptography]"

from app.shared.config import get_settings

# -----------------------------------------------------------------------------
# Esquema OAuth2 para extraer el token de Authorization: Bearer <token>
# El login vive en el servicio de identidad; tokenUrl sólo documenta OpenAPI.
# -----------------------------------------------------------------------------
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


def _jwt_config() -> tuple[str, str, int]:
    s = get_settings()
    return (
        s.jwt_secret_key.get_secret_value(),
        s.jwt_algorithm,
        int(s.access_token_expire_minutes),
    )


# -----------------------------------------------------------------------------
# Manejo de JWT
# -----------------------------------------------------------------------------
class TokenDecodeError(Exception):
    """Error al decodificar/validar un token JWT."""


def create_access_token(
    subject: Union[str, int],
    role: Optional[str] = None,
    expires_delta: Optional[timedelta] = None,
    **extra: Any,
) -> str:
    """
    Crea un JWT con claims 'sub', 'role' (opcional), 'iat' y 'exp'.
    """
    secret_key, algorithm, expire_minutes = _jwt_config()
    now = datetime.now(tz=timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=expire_minutes))
    to_encode: Dict[str, Any] = {"sub": str(subject), "iat": int(now.timestamp()), "exp": int(expire.timestamp())}
    if role:
        to_encode["role"] = role
    if extra:
        to_encode.update(extra)
    return jwt.encode(to_encode, secret_key, algorithm=algorithm)


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Decodifica y valida un JWT. Lanza TokenDecodeError si es inválido/expirado.
    """
    secret_key, algorithm, _ = _jwt_config()
    try:
        payload = jwt.decode(token, secret_key, algorithms=[algorithm])
    except JWTError as e:
        raise TokenDecodeError("Token inválido o expirado") from e

    sub = payload.get("sub")
    if sub is None or not str(sub).strip():
        raise TokenDecodeError("Token sin 'sub'")
    return payload


__all__ = ["oauth2_scheme", "TokenDecodeError", "create_access_token", "decode_access_token"]

# Fin del archivo app/modules/auth/security.py
