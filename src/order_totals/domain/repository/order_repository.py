"""Abstract, read-only source of order records."""

from __future__ import annotations

from abc import ABC, abstractmethod

from order_totals.domain.model.order import OrderRecord


class OrderRepository(ABC):

    @abstractmethod
    def get_by_increment_id(self, increment_id: str) -> OrderRecord | None:
        """Return an order by its increment ID, or None if not found."""
