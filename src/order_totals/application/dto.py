"""Response serialization — summary objects to plain dictionaries.

The dictionaries mirror the shape a query API returns for an order's
``total`` field.  Decimals are kept as Decimal; turning them into JSON
is the transport's job.
"""

from __future__ import annotations

from typing import Any

from order_totals.domain.model.summary import (
    DiscountDetail,
    OrderMonetarySummary,
    ShippingHandling,
    TaxDetail,
)
from order_totals.domain.model.value_objects import MoneyAmount


def money_to_dict(money: MoneyAmount) -> dict[str, Any]:
    return {"value": money.value, "currency": money.currency}


def tax_to_dict(tax: TaxDetail) -> dict[str, Any]:
    return {"title": tax.title, "amount": money_to_dict(tax.amount), "rate": tax.rate}


def discount_to_dict(discount: DiscountDetail) -> dict[str, Any]:
    return {"label": discount.label, "amount": money_to_dict(discount.amount)}


def shipping_handling_to_dict(shipping: ShippingHandling) -> dict[str, Any]:
    return {
        "amount_excluding_tax": money_to_dict(shipping.amount_excluding_tax),
        "amount_including_tax": money_to_dict(shipping.amount_including_tax),
        "total_amount": money_to_dict(shipping.total_amount),
        "taxes": [tax_to_dict(t) for t in shipping.taxes],
        "discounts": [discount_to_dict(d) for d in shipping.discounts],
    }


def summary_to_dict(summary: OrderMonetarySummary) -> dict[str, Any]:
    return {
        "base_grand_total": money_to_dict(summary.base_grand_total),
        "grand_total": money_to_dict(summary.grand_total),
        "subtotal": money_to_dict(summary.subtotal),
        "total_tax": money_to_dict(summary.total_tax),
        "taxes": [tax_to_dict(t) for t in summary.taxes],
        "discounts": [discount_to_dict(d) for d in summary.discounts],
        "total_shipping": money_to_dict(summary.total_shipping),
        "shipping_handling": shipping_handling_to_dict(summary.shipping_handling),
    }
