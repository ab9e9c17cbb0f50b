# -*- coding: utf-8 -*-
"""
app/modules/catalog/__init__.py

Catálogo de solo lectura (cursos y paquetes de cursos).

El backoffice de pagos no administra el catálogo: sólo consulta el precio
vigente de un artículo para calcular descuentos y montos de checkout.

Autor: Equipo Backoffice LMS
Fecha: 26/09/2026
"""

from .enums import ItemType
from .models import Course, CourseBundle
from .repositories import CatalogRepository

__all__ = ["ItemType", "Course", "CourseBundle", "CatalogRepository"]

# Fin del archivo app/modules/catalog/__init__.py
