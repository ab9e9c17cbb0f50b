# -*- coding: utf-8 -*-
"""
app/modules/payments/metrics/exporters/__init__.py
"""

from .prometheus_exporter import *  # noqa: F401,F403

# Fin del archivo app/modules/payments/metrics/exporters/__init__.py
