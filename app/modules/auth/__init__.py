# -*- coding: utf-8 -*-
"""
app/modules/auth/__init__.py

Verificación de tokens emitidos por el servicio de identidad.

Expone:
- AuthContext
- get_current_user / require_admin (dependencias FastAPI)
- create_access_token / decode_access_token
"""

from .dependencies import AuthContext, get_current_user, require_admin, validate_jwt_token
from .security import TokenDecodeError, create_access_token, decode_access_token

__all__ = [
    "AuthContext",
    "get_current_user",
    "require_admin",
    "validate_jwt_token",
    "TokenDecodeError",
    "create_access_token",
    "decode_access_token",
]

# Fin del archivo app/modules/auth/__init__.py
