# -*- coding: utf-8 -*-
"""
app/shared/database/repository.py

Repositorio base para operaciones async con SQLAlchemy.

Autor: Equipo Backoffice LMS
Fecha: 2026-09-22
"""

from typing import Any, Type, TypeVar, Generic, Sequence, Optional

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")  # modelo ORM


class BaseRepository(Generic[T]):
    """Repositorio asincrónico base para CRUD común."""

    def __init__(self, model: Type[T]):
        self.model = model

    # -------------------------------------------------------------
    # CRUD básico
    # -------------------------------------------------------------
    async def get(self, session: AsyncSession, obj_id: Any) -> Optional[T]:
        return await session.get(self.model, obj_id)

    async def get_fresh(self, session: AsyncSession, obj_id: Any) -> Optional[T]:
        """Relee la fila desde la BD ignorando el estado del identity map."""
        stmt = (
            select(self.model)
            .where(self.model.id == obj_id)  # type: ignore[attr-defined]
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalars().first()

    async def list(self, session: AsyncSession) -> Sequence[T]:
        result = await session.execute(select(self.model))
        return result.scalars().all()

    async def create(self, session: AsyncSession, **kwargs) -> T:
        obj = self.model(**kwargs)
        session.add(obj)
        await session.flush()
        return obj

    async def delete(self, session: AsyncSession, obj: T) -> None:
        await session.delete(obj)
        await session.flush()

    # -------------------------------------------------------------
    # Paginación
    # -------------------------------------------------------------
    async def count(self, session: AsyncSession, *criteria: Any) -> int:
        stmt = select(func.count()).select_from(self.model)
        if criteria:
            stmt = stmt.where(*criteria)
        result = await session.execute(stmt)
        return int(result.scalar_one())

    async def list_page(
        self,
        session: AsyncSession,
        *criteria: Any,
        limit: int,
        offset: int,
        order_by: Any = None,
    ) -> Sequence[T]:
        stmt = select(self.model)
        if criteria:
            stmt = stmt.where(*criteria)
        if order_by is not None:
            stmt = stmt.order_by(order_by)
        stmt = stmt.limit(limit).offset(offset)
        result = await session.execute(stmt)
        return result.scalars().all()

    # -------------------------------------------------------------
    # Compare-and-swap de estado
    # -------------------------------------------------------------
    async def compare_and_set_status(
        self,
        session: AsyncSession,
        obj_id: Any,
        *,
        expected: Any,
        values: dict[str, Any],
    ) -> bool:
        """
        UPDATE condicional: sólo escribe si la fila sigue en `expected`.

        La comparación y la escritura ocurren en la misma sentencia, de modo
        que dos acciones concurrentes sobre el mismo registro no pueden
        aplicar ambas la transición. Devuelve True si se actualizó la fila.
        """
        stmt = (
            update(self.model)
            .where(
                self.model.id == obj_id,  # type: ignore[attr-defined]
                self.model.status == expected,  # type: ignore[attr-defined]
            )
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        result = await session.execute(stmt)
        return result.rowcount == 1

# Fin del archivo app/shared/database/repository.py
