# -*- coding: utf-8 -*-
"""
app/__init__.py

Paquete principal del backoffice de pagos LMS.

Autor: Equipo Backoffice LMS
Fecha: 2026-09-22
"""

# Fin del archivo app/__init__.py
