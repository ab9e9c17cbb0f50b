# -*- coding: utf-8 -*-
"""
app/modules/catalog/repositories/__init__.py
"""

from .catalog_repository import CatalogRepository

__all__ = ["CatalogRepository"]

# Fin del archivo app/modules/catalog/repositories/__init__.py
