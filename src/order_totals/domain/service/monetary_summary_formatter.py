"""Domain service: Order Monetary Summary.

Reshapes the totals of a loaded order into the nested summary a query
API returns.  No figure is recomputed here: every value comes straight
from the order or from its tax extension data, tagged with the order's
currency.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from order_totals.domain.exceptions import InvalidInputError
from order_totals.domain.model.order import AppliedTaxLine, OrderRecord
from order_totals.domain.model.summary import (
    DEFAULT_DISCOUNT_LABEL,
    DiscountDetail,
    OrderMonetarySummary,
    ShippingHandling,
    TaxDetail,
)
from order_totals.domain.model.value_objects import ZERO, MoneyAmount

logger = logging.getLogger(__name__)


class OrderMonetarySummaryFormatter:

    def format(self, order: OrderRecord | None) -> OrderMonetarySummary:
        """Build the monetary summary of *order*.

        Raises InvalidInputError when *order* is missing or is not an
        OrderRecord.  The whole summary is assembled before returning.
        """
        if not isinstance(order, OrderRecord):
            raise InvalidInputError('"order" value should be specified')

        currency = order.currency_code
        order_taxes = list(order.order_tax_lines)
        shipping_taxes = self._group_shipping_taxes(order)

        logger.debug(
            "Formatting totals for order %s: %d order taxes, %d shipping tax groups",
            order.increment_id,
            len(order_taxes),
            len(shipping_taxes),
        )

        shipping_handling = ShippingHandling(
            amount_excluding_tax=MoneyAmount.of(order.shipping_amount, currency),
            amount_including_tax=MoneyAmount.of(order.shipping_incl_tax, currency),
            total_amount=MoneyAmount.of(order.shipping_amount, currency),
            taxes=self._shipping_tax_details(shipping_taxes, currency),
            discounts=self._discounts(
                order.discount_description, order.shipping_discount_amount, currency
            ),
        )

        return OrderMonetarySummary(
            base_grand_total=MoneyAmount.of(order.base_grand_total, currency),
            grand_total=MoneyAmount.of(order.grand_total, currency),
            subtotal=MoneyAmount.of(order.subtotal, currency),
            total_tax=MoneyAmount.of(order.tax_amount, currency),
            total_shipping=MoneyAmount.of(order.shipping_amount, currency),
            shipping_handling=shipping_handling,
            taxes=self._order_tax_details(order_taxes, currency),
            discounts=self._discounts(
                order.discount_description, order.discount_amount, currency
            ),
        )

    # --- Tax indexes ----------------------------------------------------------

    @staticmethod
    def _group_shipping_taxes(order: OrderRecord) -> list[dict[str | None, AppliedTaxLine]]:
        """Tax lines of every shipping entry, one title-keyed dict per entry.

        A title repeated within one entry replaces the earlier line but
        keeps its slot.
        """
        groups: list[dict[str | None, AppliedTaxLine]] = []
        for entry in order.shipping_tax_entries:
            by_title: dict[str | None, AppliedTaxLine] = {}
            for line in entry.tax_lines:
                by_title[line.title] = line
            if by_title:
                groups.append(by_title)
        return groups

    # --- Detail builders ------------------------------------------------------

    @staticmethod
    def _order_tax_details(
        lines: list[AppliedTaxLine], currency: str
    ) -> tuple[TaxDetail, ...]:
        # A missing percent stays null here.
        return tuple(
            TaxDetail(
                title=line.title,
                amount=MoneyAmount.of(line.amount, currency),
                rate=line.percent,
            )
            for line in lines
        )

    @staticmethod
    def _shipping_tax_details(
        groups: list[dict[str | None, AppliedTaxLine]], currency: str
    ) -> tuple[TaxDetail, ...]:
        # Unlike order taxes, a missing percent becomes a zero rate here.
        return tuple(
            TaxDetail(
                title=line.title,
                amount=MoneyAmount.of(line.amount, currency),
                rate=ZERO if line.percent is None else line.percent,
            )
            for group in groups
            for line in group.values()
        )

    @staticmethod
    def _discounts(
        description: str | None, amount: Decimal | None, currency: str
    ) -> tuple[DiscountDetail, ...]:
        """Zero or one discount entry.

        Emitted when there is a description or a non-zero amount.
        """
        money = MoneyAmount.of(amount, currency)
        if description is None and money.value == ZERO:
            return ()
        return (
            DiscountDetail(
                label=description if description is not None else DEFAULT_DISCOUNT_LABEL,
                amount=money,
            ),
        )
