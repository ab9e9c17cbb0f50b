# -*- coding: utf-8 -*-
"""
app/modules/catalog/facades/errors.py

Excepciones de dominio del catálogo.

Autor: Equipo Backoffice LMS
Fecha: 2026-10-01
"""

from app.shared.utils.domain_errors import BusinessRuleError, NotFoundError


class CatalogItemNotFound(NotFoundError):
    """Se lanza cuando el curso/paquete referenciado no existe."""
    error_code = "catalog_item_not_found"

    def __init__(self, item_type, item_id):
        self.item_type = item_type
        self.item_id = item_id
        super().__init__(f"{str(item_type).capitalize()} not found: {item_id}")


class CourseNotAvailable(BusinessRuleError):
    """El curso existe pero no está publicado para la venta."""
    error_code = "course_not_available"

    def __init__(self, course_id):
        self.course_id = course_id
        super().__init__(f"Course is not available for purchase: {course_id}")


__all__ = ["CatalogItemNotFound", "CourseNotAvailable"]

# Fin del archivo app/modules/catalog/facades/errors.py
