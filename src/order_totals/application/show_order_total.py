"""Application service: Show Order Total use case (query)."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from order_totals.application.dto import summary_to_dict
from order_totals.domain.exceptions import EntityNotFoundError, InvalidInputError
from order_totals.domain.model.order import OrderRecord
from order_totals.domain.repository.order_repository import OrderRepository
from order_totals.domain.service.monetary_summary_formatter import (
    OrderMonetarySummaryFormatter,
)

logger = logging.getLogger(__name__)


def resolve_order_total(value: Mapping[str, Any] | None) -> dict[str, Any]:
    """Field-resolver entry point.

    The query framework passes the parent value, with the loaded order
    under ``"model"``.
    """
    order = (value or {}).get("model")
    if not isinstance(order, OrderRecord):
        raise InvalidInputError('"model" value should be specified')
    return summary_to_dict(OrderMonetarySummaryFormatter().format(order))


class ShowOrderTotalHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        formatter: OrderMonetarySummaryFormatter | None = None,
    ) -> None:
        self._order_repo = order_repo
        self._formatter = formatter or OrderMonetarySummaryFormatter()

    def handle(self, increment_id: str) -> dict[str, Any]:
        order = self._order_repo.get_by_increment_id(increment_id)
        if order is None:
            logger.warning("Order #%s not found", increment_id)
            raise EntityNotFoundError(f"Order #{increment_id} not found")
        return summary_to_dict(self._formatter.format(order))
