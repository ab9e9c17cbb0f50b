# -*- coding: utf-8 -*-
"""
app/modules/promotions/repositories/promo_code_repository.py

Repositorio para la tabla promo_codes.

Responsabilidades:
- Búsqueda por código (normalizado a mayúsculas)
- Incremento atómico de uso acotado por usage_limit
- Estadísticas agregadas para el panel admin

Autor: Equipo Backoffice LMS
Fecha: 2026-09-30
"""

from datetime import datetime
from typing import Dict, Optional, Sequence, Tuple

from sqlalchemy import func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.database.base import utcnow
from app.shared.database.repository import BaseRepository
from app.modules.promotions.models import PromoCode


def normalize_code(code: str) -> str:
    return (code or "").strip().upper()


class PromoCodeRepository(BaseRepository[PromoCode]):
    def __init__(self) -> None:
        super().__init__(PromoCode)

    async def get_by_code(self, session: AsyncSession, code: str) -> Optional[PromoCode]:
        stmt = select(PromoCode).where(PromoCode.code == normalize_code(code))
        result = await session.execute(stmt)
        return result.scalars().first()

    async def increment_usage(self, session: AsyncSession, code: str) -> bool:
        """
        used_count += 1 en una sola sentencia, sólo si no se alcanzó el límite.

        Devuelve False si el código no existe o ya está agotado.
        """
        stmt = (
            update(PromoCode)
            .where(
                PromoCode.code == normalize_code(code),
                or_(
                    PromoCode.usage_limit.is_(None),
                    PromoCode.used_count < PromoCode.usage_limit,
                ),
            )
            .values(used_count=PromoCode.used_count + 1, updated_at=utcnow())
            .execution_options(synchronize_session=False)
        )
        result = await session.execute(stmt)
        return result.rowcount == 1

    async def list_filtered(
        self,
        session: AsyncSession,
        *,
        is_active: Optional[bool] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> Tuple[Sequence[PromoCode], int]:
        criteria = [PromoCode.is_active.is_(is_active)] if is_active is not None else []
        total = await self.count(session, *criteria)
        items = await self.list_page(
            session,
            *criteria,
            limit=limit,
            offset=offset,
            order_by=PromoCode.created_at.desc(),
        )
        return items, total

    async def stats(self, session: AsyncSession, now: datetime) -> Dict[str, int]:
        stmt = select(
            func.count(PromoCode.id),
            func.count(PromoCode.id).filter(PromoCode.is_active.is_(True)),
            func.count(PromoCode.id).filter(
                PromoCode.valid_until.is_not(None),
                PromoCode.valid_until < now,
            ),
            func.coalesce(func.sum(PromoCode.used_count), 0),
        )
        total, active, expired, total_usage = (await session.execute(stmt)).one()
        return {
            "total": int(total),
            "active": int(active or 0),
            "expired": int(expired or 0),
            "total_usage": int(total_usage or 0),
        }


__all__ = ["PromoCodeRepository", "normalize_code"]

# Fin del archivo app/modules/promotions/repositories/promo_code_repository.py
