# -*- coding: utf-8 -*-
"""
app/modules/catalog/facades/__init__.py
"""

from .errors import CatalogItemNotFound, CourseNotAvailable

__all__ = ["CatalogItemNotFound", "CourseNotAvailable"]

# Fin del archivo app/modules/catalog/facades/__init__.py
