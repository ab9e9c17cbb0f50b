# -*- coding: utf-8 -*-
"""
tests/conftest.py

Config global de tests del backoffice de pagos.

- Variables de entorno de prueba ANTES de importar la app
  (PYTHON_ENV=test, SQLite en memoria para el engine global)
- Engine SQLite (aiosqlite) en archivo temporal por test, con el esquema
  completo creado desde Base.metadata
- Sesión de BD, app FastAPI con get_async_session sobreescrito y cliente
  httpx con ciclo de vida (asgi-lifespan)
- Tokens JWT de admin y de cliente
- Factories para cursos, transacciones, reembolsos y cupones

Autor: Equipo Backoffice LMS
Fecha: 2026-10-12
"""

import os
import sys
import pathlib
from collections.abc import AsyncIterator
from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4

import pytest

# -----------------------------------------------------------------------------
# 0) Variables mínimas de entorno (antes de cualquier import de app.*)
# -----------------------------------------------------------------------------
os.environ["PYTHON_ENV"] = "test"
os.environ.setdefault("DB_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-for-backoffice-suite-change-me")
os.environ.setdefault("JWT_ALGORITHM", "HS256")
os.environ.setdefault("PAYMENTS_CURRENCY", "PKR")
os.environ.setdefault("LOG_LEVEL", "WARNING")

# -----------------------------------------------------------------------------
# 1) Asegura la raíz del proyecto en sys.path
# -----------------------------------------------------------------------------
BACKEND_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))
assert (BACKEND_ROOT / "app").exists(), f"'app' no existe en {BACKEND_ROOT}"

from httpx import AsyncClient, ASGITransport
from asgi_lifespan import LifespanManager
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.shared.database.base import Base
from app.shared.database.database import get_async_session

# Registra todos los modelos en la metadata compartida
from app.modules.catalog.models import Course, CourseBundle
from app.modules.payments.enums import (
    PaymentProvider,
    RefundStatus,
    TransactionStatus,
    VerificationStatus,
)
from app.modules.payments.models import PaymentAccount, PaymentTransaction, RefundRequest
from app.modules.promotions.enums import ApplicableType, DiscountType
from app.modules.promotions.models import PromoCode
from app.modules.auth.security import create_access_token

ADMIN_ID = UUID("00000000-0000-0000-0000-0000000000a1")
CUSTOMER_ID = UUID("00000000-0000-0000-0000-0000000000c1")


# -----------------------------------------------------------------------------
# 2) Base de datos
# -----------------------------------------------------------------------------
@pytest.fixture
async def db_engine(tmp_path):
    """Engine aislado por test sobre un archivo SQLite temporal."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'backoffice.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(bind=db_engine, expire_on_commit=False, class_=AsyncSession, autoflush=False)


@pytest.fixture
async def db_session(session_factory) -> AsyncIterator[AsyncSession]:
    async with session_factory() as session:
        yield session


# -----------------------------------------------------------------------------
# 3) App FastAPI y cliente httpx (con ciclo de vida)
# -----------------------------------------------------------------------------
@pytest.fixture
def app(session_factory):
    """
    App principal con la sesión de BD apuntando al engine del test.
    """
    from app.main import app as fastapi_app

    async def _override_get_async_session():
        async with session_factory() as session:
            try:
                yield session
            finally:
                if session.in_transaction():
                    await session.rollback()

    fastapi_app.dependency_overrides[get_async_session] = _override_get_async_session
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
async def async_client(app) -> AsyncIterator[AsyncClient]:
    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            yield client


# -----------------------------------------------------------------------------
# 4) Identidades
# -----------------------------------------------------------------------------
@pytest.fixture
def admin_id() -> UUID:
    return ADMIN_ID


@pytest.fixture
def customer_id() -> UUID:
    return CUSTOMER_ID


@pytest.fixture
def admin_headers() -> dict:
    return {"Authorization": f"Bearer {create_access_token(ADMIN_ID, role='admin')}"}


@pytest.fixture
def user_headers() -> dict:
    return {"Authorization": f"Bearer {create_access_token(CUSTOMER_ID, role='student')}"}


# -----------------------------------------------------------------------------
# 5) Factories (persisten y hacen commit para que las rutas vean los datos)
# -----------------------------------------------------------------------------
@pytest.fixture
def make_course(db_session):
    async def _make(price="5000.00", is_published=True, title="Python desde cero") -> Course:
        course = Course(title=title, price=Decimal(price), is_published=is_published)
        db_session.add(course)
        await db_session.commit()
        return course
    return _make


@pytest.fixture
def make_bundle(db_session):
    async def _make(price="9000.00", title="Ruta backend") -> CourseBundle:
        bundle = CourseBundle(title=title, price=Decimal(price), is_published=True)
        db_session.add(bundle)
        await db_session.commit()
        return bundle
    return _make


@pytest.fixture
def make_transaction(db_session, make_course):
    async def _make(
        amount="5000.00",
        status=TransactionStatus.PENDING,
        user_id=CUSTOMER_ID,
        course=None,
        promo_code=None,
        discount="0.00",
    ) -> PaymentTransaction:
        course = course or await make_course(price=Decimal(amount) + Decimal(discount))
        verification = {
            TransactionStatus.COMPLETED: VerificationStatus.APPROVED,
            TransactionStatus.FAILED: VerificationStatus.REJECTED,
        }.get(status, VerificationStatus.PENDING)
        tx = PaymentTransaction(
            user_id=user_id,
            course_id=course.id,
            amount=Decimal(amount),
            original_amount=Decimal(amount) + Decimal(discount),
            discount_amount=Decimal(discount),
            promo_code=promo_code,
            currency="PKR",
            payment_method=PaymentProvider.BANK_TRANSFER,
            payment_reference=f"TRX-{uuid4().hex[:8]}",
            status=status,
            verification_status=verification,
        )
        db_session.add(tx)
        await db_session.commit()
        return tx
    return _make


@pytest.fixture
def make_refund(db_session):
    async def _make(transaction: PaymentTransaction, amount="2000.00", status=RefundStatus.PENDING) -> RefundRequest:
        refund = RefundRequest(
            transaction_id=transaction.id,
            customer_id=transaction.user_id,
            course_id=transaction.course_id,
            refund_amount=Decimal(amount),
            reason="El curso no era lo que esperaba",
            status=status,
        )
        db_session.add(refund)
        await db_session.commit()
        return refund
    return _make


@pytest.fixture
def make_promo(db_session):
    async def _make(
        code="SAVE20",
        discount_type=DiscountType.PERCENTAGE,
        discount_value="20",
        is_active=True,
        valid_from=None,
        valid_until=None,
        usage_limit=None,
        used_count=0,
        applicable_type=ApplicableType.ALL,
        applicable_ids=None,
    ) -> PromoCode:
        promo = PromoCode(
            code=code,
            discount_type=discount_type,
            discount_value=Decimal(discount_value),
            is_active=is_active,
            valid_from=valid_from,
            valid_until=valid_until,
            usage_limit=usage_limit,
            used_count=used_count,
            applicable_type=applicable_type,
            applicable_ids=applicable_ids,
        )
        db_session.add(promo)
        await db_session.commit()
        return promo
    return _make


@pytest.fixture
def make_account(db_session):
    async def _make(provider=PaymentProvider.EASYPAISA, is_active=True, api_key="sk_live_123456789") -> PaymentAccount:
        account = PaymentAccount(
            provider=provider,
            account_name="LMS Academy",
            account_number="03001234567",
            api_key=api_key,
            instructions="Envía el TID después de transferir",
            is_active=is_active,
        )
        db_session.add(account)
        await db_session.commit()
        return account
    return _make


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 10, 15, 12, 0, tzinfo=timezone.utc)

# Fin del archivo tests/conftest.py
