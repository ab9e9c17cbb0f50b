# -*- coding: utf-8 -*-
"""
app/modules/catalog/repositories/catalog_repository.py

Consultas de precio sobre cursos y paquetes.

Autor: Equipo Backoffice LMS
Fecha: 26/09/2026
"""

from decimal import Decimal
from typing import Optional, Union
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.catalog.enums import ItemType
from app.modules.catalog.models import Course, CourseBundle

CatalogItem = Union[Course, CourseBundle]

_MODEL_BY_TYPE = {
    ItemType.COURSE: Course,
    ItemType.BUNDLE: CourseBundle,
}


class CatalogRepository:
    """Acceso de sólo lectura al catálogo."""

    async def get_item(
        self,
        session: AsyncSession,
        item_type: ItemType,
        item_id: UUID,
    ) -> Optional[CatalogItem]:
        model = _MODEL_BY_TYPE[ItemType(item_type)]
        return await session.get(model, item_id)

    async def get_course(self, session: AsyncSession, course_id: UUID) -> Optional[Course]:
        return await session.get(Course, course_id)

    async def get_price(
        self,
        session: AsyncSession,
        item_type: ItemType,
        item_id: UUID,
    ) -> Optional[Decimal]:
        item = await self.get_item(session, item_type, item_id)
        return None if item is None else Decimal(item.price)


__all__ = ["CatalogRepository", "CatalogItem"]

# Fin del archivo app/modules/catalog/repositories/catalog_repository.py
