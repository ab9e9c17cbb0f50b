# -*- coding: utf-8 -*-
"""
app/modules/payments/__init__.py

Módulo de pagos del backoffice LMS.

Este módulo gestiona:
- Transacciones de pago manual y su verificación por un administrador
- Solicitudes de reembolso (aprobación, rechazo, procesamiento)
- Bitácora de eventos (payment_history)
- Cuentas receptoras mostradas en el checkout

Estructura:
- enums: estados y acciones (TransactionStatus, RefundStatus, ...)
- models: modelos ORM
- repositories: consultas SQLAlchemy
- facades: excepciones de dominio y tablas de transición
- services: reglas de negocio
- schemas: validación y serialización Pydantic
- routes: APIRouter de FastAPI
- metrics: contadores Prometheus

Los subpaquetes se importan explícitamente (p. ej.
`from app.modules.payments.services import RefundService`).

Autor: Equipo Backoffice LMS
Fecha: 26/09/2026
"""

# Fin del archivo app/modules/payments/__init__.py
