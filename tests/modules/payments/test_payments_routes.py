# -*- coding: utf-8 -*-
"""
tests/modules/payments/test_payments_routes.py

Tests end-to-end (httpx + ASGITransport) de las rutas de pagos:
verificación admin, reembolsos, checkout del cliente, cuentas receptoras
y autorización (401 / 403).

Autor: Equipo Backoffice LMS
Fecha: 2026-10-12
"""

from uuid import UUID, uuid4

import pytest

from app.modules.auth.security import create_access_token
from app.modules.payments.enums import RefundStatus, TransactionStatus
from app.modules.payments.repositories import PaymentTransactionRepository, RefundRepository


# ---------------------------------------------------------------------------
# Autorización
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_admin_route_without_token_returns_401(async_client):
    resp = await async_client.get("/api/admin/payment-transactions")
    assert resp.status_code == 401
    assert resp.json()["detail"]["error"] == "invalid_token"


@pytest.mark.asyncio
async def test_admin_route_with_garbage_token_returns_401(async_client):
    resp = await async_client.get(
        "/api/admin/payment-transactions", headers={"Authorization": "Bearer not-a-jwt"}
    )
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_admin_route_with_non_uuid_subject_returns_401(async_client):
    token = create_access_token("user-42", role="admin")
    resp = await async_client.get(
        "/api/admin/payment-transactions", headers={"Authorization": f"Bearer {token}"}
    )
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_admin_route_with_customer_token_returns_403(async_client, user_headers, make_transaction):
    tx = await make_transaction()
    resp = await async_client.post(
        f"/api/admin/payment-transactions/{tx.id}/verify",
        json={"action": "approve"},
        headers=user_headers,
    )
    assert resp.status_code == 403
    assert resp.json()["detail"] == {"error": "forbidden", "message": "Admin access required"}


# ---------------------------------------------------------------------------
# Verificación de transacciones
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_approve_transaction_end_to_end(async_client, admin_headers, admin_id, make_transaction):
    tx = await make_transaction(amount="5000.00")

    resp = await async_client.post(
        f"/api/admin/payment-transactions/{tx.id}/verify",
        json={"action": "approve", "notes": "Comprobante OK"},
        headers=admin_headers,
    )

    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["status"] == "completed"
    assert body["verification_status"] == "approved"
    assert body["verified_by"] == str(admin_id)
    assert "approved" in body["notes"]
    assert body["amount"] == "5000.00"

    again = await async_client.post(
        f"/api/admin/payment-transactions/{tx.id}/verify",
        json={"action": "reject", "notes": "tarde"},
        headers=admin_headers,
    )
    assert again.status_code == 409
    assert again.json()["error_code"] == "transaction_already_processed"


@pytest.mark.asyncio
async def test_reject_transaction_accepts_camel_case(async_client, admin_headers, make_transaction):
    tx = await make_transaction()

    resp = await async_client.post(
        f"/api/admin/payment-transactions/{tx.id}/verify",
        json={"action": "reject", "rejectionReason": "Monto no coincide"},
        headers=admin_headers,
    )

    assert resp.status_code == 200
    assert resp.json()["status"] == "failed"
    assert resp.json()["rejection_reason"] == "Monto no coincide"


@pytest.mark.asyncio
async def test_verify_unknown_transaction_returns_404(async_client, admin_headers):
    resp = await async_client.post(
        f"/api/admin/payment-transactions/{uuid4()}/verify",
        json={"action": "approve"},
        headers=admin_headers,
    )
    assert resp.status_code == 404
    assert resp.json()["error_code"] == "transaction_not_found"


@pytest.mark.asyncio
async def test_verify_with_unknown_action_returns_422(async_client, admin_headers, make_transaction):
    tx = await make_transaction()
    resp = await async_client.post(
        f"/api/admin/payment-transactions/{tx.id}/verify",
        json={"action": "refund"},
        headers=admin_headers,
    )
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_list_transactions_filters_and_paginates(async_client, admin_headers, make_transaction):
    await make_transaction()
    await make_transaction()
    await make_transaction(status=TransactionStatus.COMPLETED)

    resp = await async_client.get(
        "/api/admin/payment-transactions",
        params={"status": "pending", "limit": 1},
        headers=admin_headers,
    )

    assert resp.status_code == 200
    body = resp.json()
    assert len(body["items"]) == 1
    assert body["meta"]["total"] == 2
    assert body["meta"]["pages"] == 2


@pytest.mark.asyncio
async def test_transaction_history_after_approval(async_client, admin_headers, make_transaction):
    tx = await make_transaction()
    await async_client.post(
        f"/api/admin/payment-transactions/{tx.id}/verify",
        json={"action": "approve"},
        headers=admin_headers,
    )

    resp = await async_client.get(f"/api/admin/payment-transactions/{tx.id}/history", headers=admin_headers)

    assert resp.status_code == 200
    assert [h["action"] for h in resp.json()] == ["verified"]


# ---------------------------------------------------------------------------
# Checkout del cliente
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_customer_submits_manual_payment(async_client, user_headers, customer_id, make_course, make_promo):
    course = await make_course(price="1000.00")
    await make_promo(code="SAVE20", discount_value="20")

    resp = await async_client.post(
        "/api/payment-transactions",
        json={
            "courseId": str(course.id),
            "paymentMethod": "easypaisa",
            "paymentReference": "TID-1",
            "promoCode": "save20",
            "amount": "1",
        },
        headers=user_headers,
    )

    assert resp.status_code == 201, resp.text
    body = resp.json()
    assert body["user_id"] == str(customer_id)
    assert body["amount"] == "800.00"
    assert body["status"] == "pending"

    mine = await async_client.get("/api/payment-transactions/mine", headers=user_headers)
    assert mine.json()["meta"]["total"] == 1


@pytest.mark.asyncio
async def test_submit_manual_payment_requires_token(async_client, make_course):
    course = await make_course()
    resp = await async_client.post(
        "/api/payment-transactions",
        json={"courseId": str(course.id), "paymentMethod": "easypaisa", "paymentReference": "TID"},
    )
    assert resp.status_code == 401


# ---------------------------------------------------------------------------
# Reembolsos
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_refund_flow_end_to_end(async_client, db_session, admin_headers, user_headers, make_transaction):
    tx = await make_transaction(amount="5000.00", status=TransactionStatus.COMPLETED)

    created = await async_client.post(
        "/api/refunds",
        json={"transactionId": str(tx.id), "refundAmount": "2000", "reason": "No pude asistir"},
        headers=user_headers,
    )
    assert created.status_code == 201, created.text
    refund_id = created.json()["id"]
    assert created.json()["status"] == "pending"

    approved = await async_client.post(
        f"/api/admin/refunds/{refund_id}/process",
        json={"action": "approve", "refundReference": "REF123"},
        headers=admin_headers,
    )
    assert approved.status_code == 200, approved.text
    assert approved.json()["status"] == "approved"
    assert approved.json()["refund_reference"] == "REF123"

    completed = await async_client.post(
        f"/api/admin/refunds/{refund_id}/complete",
        json={"refundReference": "REF123"},
        headers=admin_headers,
    )
    assert completed.status_code == 200
    assert completed.json()["status"] == "processed"

    refund = await RefundRepository().get_fresh(db_session, UUID(refund_id))
    assert refund.status == RefundStatus.PROCESSED
    original = await PaymentTransactionRepository().get_fresh(db_session, tx.id)
    assert original.status == TransactionStatus.COMPLETED


@pytest.mark.asyncio
async def test_refund_over_amount_returns_400(async_client, user_headers, make_transaction):
    tx = await make_transaction(amount="5000.00", status=TransactionStatus.COMPLETED)

    resp = await async_client.post(
        "/api/refunds",
        json={"transactionId": str(tx.id), "refundAmount": "5000.01", "reason": "todo"},
        headers=user_headers,
    )

    assert resp.status_code == 400
    assert resp.json()["error_code"] == "refund_validation_error"


@pytest.mark.asyncio
async def test_reject_refund_without_notes_returns_400(async_client, admin_headers, make_transaction, make_refund):
    tx = await make_transaction(status=TransactionStatus.COMPLETED)
    refund = await make_refund(tx)

    resp = await async_client.post(
        f"/api/admin/refunds/{refund.id}/process",
        json={"action": "reject"},
        headers=admin_headers,
    )

    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_process_refund_twice_returns_409(async_client, admin_headers, make_transaction, make_refund):
    tx = await make_transaction(status=TransactionStatus.COMPLETED)
    refund = await make_refund(tx)

    first = await async_client.post(
        f"/api/admin/refunds/{refund.id}/process",
        json={"action": "reject", "notes": "Fuera de plazo"},
        headers=admin_headers,
    )
    second = await async_client.post(
        f"/api/admin/refunds/{refund.id}/process",
        json={"action": "approve"},
        headers=admin_headers,
    )

    assert first.status_code == 200
    assert second.status_code == 409


@pytest.mark.asyncio
async def test_get_unknown_refund_returns_404(async_client, admin_headers):
    resp = await async_client.get(f"/api/admin/refunds/{uuid4()}", headers=admin_headers)
    assert resp.status_code == 404
    assert resp.json()["error_code"] == "refund_not_found"


@pytest.mark.asyncio
async def test_list_refunds_by_transaction(
    async_client, admin_headers, user_headers, make_transaction, make_refund
):
    tx = await make_transaction(status=TransactionStatus.COMPLETED)
    refund = await make_refund(tx, amount="1500.00")
    foreign_tx = await make_transaction(status=TransactionStatus.COMPLETED, user_id=uuid4())

    mine = await async_client.get(f"/api/refunds/by-transaction/{tx.id}", headers=user_headers)
    assert mine.status_code == 200
    assert [r["id"] for r in mine.json()] == [str(refund.id)]
    assert mine.json()[0]["refund_amount"] == "1500.00"

    foreign = await async_client.get(f"/api/refunds/by-transaction/{foreign_tx.id}", headers=user_headers)
    assert foreign.status_code == 404

    as_admin = await async_client.get(
        f"/api/refunds/by-transaction/{foreign_tx.id}", headers=admin_headers
    )
    assert as_admin.status_code == 200
    assert as_admin.json() == []


# ---------------------------------------------------------------------------
# Cuentas receptoras
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_payment_accounts_crud_and_public_listing(async_client, admin_headers):
    created = await async_client.post(
        "/api/admin/payment-accounts",
        json={"provider": "jazzcash", "accountName": "LMS Academy", "apiKey": "sk_live_abcdef1234"},
        headers=admin_headers,
    )
    assert created.status_code == 201, created.text
    assert created.json()["api_key"] == "****1234"
    account_id = created.json()["id"]

    public = await async_client.get("/api/payment-accounts/active")
    assert public.status_code == 200
    assert [a["id"] for a in public.json()] == [account_id]
    assert "api_key" not in public.json()[0]

    patched = await async_client.patch(
        f"/api/admin/payment-accounts/{account_id}",
        json={"isActive": False},
        headers=admin_headers,
    )
    assert patched.json()["is_active"] is False
    assert (await async_client.get("/api/payment-accounts/active")).json() == []

    deleted = await async_client.delete(f"/api/admin/payment-accounts/{account_id}", headers=admin_headers)
    assert deleted.status_code == 204


# ---------------------------------------------------------------------------
# Métricas / health
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_prometheus_metrics_exposed(async_client, admin_headers, make_transaction):
    tx = await make_transaction()
    await async_client.post(
        f"/api/admin/payment-transactions/{tx.id}/verify",
        json={"action": "approve"},
        headers=admin_headers,
    )

    resp = await async_client.get("/api/payments/metrics")

    assert resp.status_code == 200
    assert "lms_payments_verifications_total" in resp.text


@pytest.mark.asyncio
async def test_health_endpoint(async_client):
    resp = await async_client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["environment"] == "test"

# Fin del archivo tests/modules/payments/test_payments_routes.py
