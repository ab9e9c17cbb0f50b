# -*- coding: utf-8 -*-
"""
tests/modules/promotions/test_discount_evaluator.py

Tests del evaluador de cupones: cálculo puro y reglas de vigencia/uso.

Autor: Equipo Backoffice LMS
Fecha: 2026-10-12
"""

from datetime import timedelta
from decimal import Decimal
from uuid import uuid4

import pytest

from app.modules.catalog.enums import ItemType
from app.modules.catalog.facades import CatalogItemNotFound
from app.modules.catalog.repositories import CatalogRepository
from app.modules.promotions.enums import ApplicableType, DiscountType
from app.modules.promotions.facades import InvalidPromoCode, PromoCodeNotFound
from app.modules.promotions.repositories import PromoCodeRepository
from app.modules.promotions.services import DiscountEvaluator, compute_discount, final_price_for


@pytest.fixture
def evaluator() -> DiscountEvaluator:
    return DiscountEvaluator(promo_repo=PromoCodeRepository(), catalog_repo=CatalogRepository())


# ---------------------------------------------------------------------------
# Cálculo
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("dtype,value,price,expected", [
    (DiscountType.PERCENTAGE, "20", "1000", "200.00"),
    (DiscountType.PERCENTAGE, "100", "1000", "1000.00"),
    # half-up a centavos: 33.335 → 33.34
    (DiscountType.PERCENTAGE, "33.335", "100", "33.34"),
    (DiscountType.FIXED, "150", "1000", "150.00"),
    # fijo mayor que el precio: nunca deja precio negativo
    (DiscountType.FIXED, "1500", "1000", "1000.00"),
    (DiscountType.FIXED, "10", "0", "0.00"),
])
def test_compute_discount(dtype, value, price, expected):
    discount = compute_discount(dtype, Decimal(value), Decimal(price))
    assert discount == Decimal(expected)
    assert final_price_for(Decimal(price), discount) >= 0


# ---------------------------------------------------------------------------
# Evaluación contra la BD
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_percentage_promo_on_course(db_session, evaluator, make_course, make_promo, fixed_now):
    course = await make_course(price="1000.00")
    await make_promo(code="SAVE20", discount_value="20")

    result = await evaluator.evaluate(db_session, " save20 ", ItemType.COURSE, course.id, fixed_now)

    assert result.code == "SAVE20"
    assert result.discount_amount == Decimal("200.00")
    assert result.final_price == Decimal("800.00")
    assert result.original_price == Decimal("1000.00")


@pytest.mark.asyncio
async def test_fixed_promo_never_exceeds_price(db_session, evaluator, make_course, make_promo, fixed_now):
    course = await make_course(price="300.00")
    await make_promo(code="FLAT500", discount_type=DiscountType.FIXED, discount_value="500")

    result = await evaluator.evaluate(db_session, "FLAT500", ItemType.COURSE, course.id, fixed_now)

    assert result.discount_amount == Decimal("300.00")
    assert result.final_price == Decimal("0.00")


@pytest.mark.asyncio
async def test_unknown_code_is_not_found(db_session, evaluator, make_course, fixed_now):
    course = await make_course()
    with pytest.raises(PromoCodeNotFound):
        await evaluator.evaluate(db_session, "NOPE", ItemType.COURSE, course.id, fixed_now)


@pytest.mark.asyncio
async def test_exhausted_code_is_invalid(db_session, evaluator, make_course, make_promo, fixed_now):
    course = await make_course()
    await make_promo(code="FIVE", usage_limit=5, used_count=5)

    with pytest.raises(InvalidPromoCode) as exc_info:
        await evaluator.evaluate(db_session, "FIVE", ItemType.COURSE, course.id, fixed_now)

    assert exc_info.value.reason == "usage_limit_reached"
    assert exc_info.value.status_code == 400


@pytest.mark.asyncio
async def test_expired_code_is_invalid_even_when_active(db_session, evaluator, make_course, make_promo, fixed_now):
    course = await make_course()
    await make_promo(code="OLD", is_active=True, valid_until=fixed_now - timedelta(days=1))

    with pytest.raises(InvalidPromoCode) as exc_info:
        await evaluator.evaluate(db_session, "OLD", ItemType.COURSE, course.id, fixed_now)

    assert exc_info.value.reason == "expired"


@pytest.mark.asyncio
async def test_future_code_is_not_started(db_session, evaluator, make_course, make_promo, fixed_now):
    course = await make_course()
    await make_promo(code="SOON", valid_from=fixed_now + timedelta(hours=1))

    with pytest.raises(InvalidPromoCode) as exc_info:
        await evaluator.evaluate(db_session, "SOON", ItemType.COURSE, course.id, fixed_now)

    assert exc_info.value.reason == "not_started"


@pytest.mark.asyncio
async def test_inactive_is_checked_first(db_session, evaluator, make_course, make_promo, fixed_now):
    course = await make_course()
    await make_promo(
        code="OFF",
        is_active=False,
        valid_until=fixed_now - timedelta(days=1),
        usage_limit=1,
        used_count=1,
    )

    with pytest.raises(InvalidPromoCode) as exc_info:
        await evaluator.evaluate(db_session, "OFF", ItemType.COURSE, course.id, fixed_now)

    assert exc_info.value.reason == "inactive"


@pytest.mark.asyncio
async def test_window_bounds_are_inclusive(db_session, evaluator, make_course, make_promo, fixed_now):
    course = await make_course(price="100.00")
    await make_promo(code="EXACT", valid_from=fixed_now, valid_until=fixed_now)

    result = await evaluator.evaluate(db_session, "EXACT", ItemType.COURSE, course.id, fixed_now)

    assert result.final_price == Decimal("80.00")


@pytest.mark.asyncio
async def test_promo_restricted_to_other_course(db_session, evaluator, make_course, make_promo, fixed_now):
    course = await make_course()
    other = await make_course(title="Otro")
    await make_promo(code="ONLY", applicable_type=ApplicableType.COURSE, applicable_ids=[str(other.id)])

    with pytest.raises(InvalidPromoCode) as exc_info:
        await evaluator.evaluate(db_session, "ONLY", ItemType.COURSE, course.id, fixed_now)
    assert exc_info.value.reason == "not_applicable"

    result = await evaluator.evaluate(db_session, "ONLY", ItemType.COURSE, other.id, fixed_now)
    assert result.code == "ONLY"


@pytest.mark.asyncio
async def test_course_promo_does_not_apply_to_bundle(db_session, evaluator, make_bundle, make_promo, fixed_now):
    bundle = await make_bundle()
    await make_promo(code="COURSES", applicable_type=ApplicableType.COURSE)

    with pytest.raises(InvalidPromoCode):
        await evaluator.evaluate(db_session, "COURSES", ItemType.BUNDLE, bundle.id, fixed_now)


@pytest.mark.asyncio
async def test_unknown_item_is_not_found(db_session, evaluator, make_promo, fixed_now):
    await make_promo(code="SAVE20")
    with pytest.raises(CatalogItemNotFound):
        await evaluator.evaluate(db_session, "SAVE20", ItemType.COURSE, uuid4(), fixed_now)


@pytest.mark.asyncio
async def test_evaluation_does_not_consume_usage(db_session, evaluator, make_course, make_promo, fixed_now):
    course = await make_course()
    promo = await make_promo(code="SAVE20", usage_limit=1)

    await evaluator.evaluate(db_session, "SAVE20", ItemType.COURSE, course.id, fixed_now)
    await evaluator.evaluate(db_session, "SAVE20", ItemType.COURSE, course.id, fixed_now)

    await db_session.refresh(promo)
    assert promo.used_count == 0


@pytest.mark.asyncio
async def test_order_total_without_code(db_session, evaluator, make_bundle):
    bundle = await make_bundle(price="9000.00")

    total = await evaluator.calculate_order_total(db_session, ItemType.BUNDLE, bundle.id, "  ")

    assert total.final_price == Decimal("9000.00")
    assert total.discount_amount == Decimal("0.00")
    assert total.promo_code is None

# Fin del archivo tests/modules/promotions/test_discount_evaluator.py
