# -*- coding: utf-8 -*-
"""
app/modules/catalog/models/__init__.py
"""

from .catalog_models import Course, CourseBundle

__all__ = ["Course", "CourseBundle"]

# Fin del archivo app/modules/catalog/models/__init__.py
