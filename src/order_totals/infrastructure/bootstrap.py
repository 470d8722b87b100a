"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from order_totals.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_FILE = Path(__file__).resolve().parents[3] / "data" / "orders.json"


def data_file() -> Path:
    override = os.environ.get("ORDER_TOTALS_DATA")
    return Path(override) if override else _DEFAULT_DATA_FILE


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(data_file())
