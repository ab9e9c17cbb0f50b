# -*- coding: utf-8 -*-
"""
app/shared/__init__.py

Infraestructura compartida del backoffice: configuración, base de datos
y utilidades HTTP/errores de dominio.

No importa submódulos al cargarse: `app.shared.database` crea el engine
al importarse y los tests ajustan el entorno antes de tocarlo.

Autor: Equipo Backoffice LMS
Fecha: 2026-09-22
"""

# Fin del archivo app/shared/__init__.py
