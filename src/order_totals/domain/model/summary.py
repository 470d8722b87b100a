"""Output types of the monetary summary."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from order_totals.domain.model.value_objects import MoneyAmount

DEFAULT_DISCOUNT_LABEL = "Discount"


@dataclass(frozen=True)
class TaxDetail:
    """A tax as shown to the client; ``rate`` may be null."""

    title: str | None
    amount: MoneyAmount
    rate: Decimal | None = None


@dataclass(frozen=True)
class DiscountDetail:
    label: str
    amount: MoneyAmount


@dataclass(frozen=True)
class ShippingHandling:
    amount_excluding_tax: MoneyAmount
    amount_including_tax: MoneyAmount
    total_amount: MoneyAmount
    taxes: tuple[TaxDetail, ...] = ()
    discounts: tuple[DiscountDetail, ...] = ()


@dataclass(frozen=True)
class OrderMonetarySummary:
    base_grand_total: MoneyAmount
    grand_total: MoneyAmount
    subtotal: MoneyAmount
    total_tax: MoneyAmount
    total_shipping: MoneyAmount
    shipping_handling: ShippingHandling
    taxes: tuple[TaxDetail, ...] = ()
    discounts: tuple[DiscountDetail, ...] = ()

    def money_amounts(self) -> list[MoneyAmount]:
        """Every money figure in the summary, nested ones included."""
        shipping = self.shipping_handling
        amounts = [
            self.base_grand_total,
            self.grand_total,
            self.subtotal,
            self.total_tax,
            self.total_shipping,
            shipping.amount_excluding_tax,
            shipping.amount_including_tax,
            shipping.total_amount,
        ]
        for tax in self.taxes + shipping.taxes:
            amounts.append(tax.amount)
        for discount in self.discounts + shipping.discounts:
            amounts.append(discount.amount)
        return amounts
