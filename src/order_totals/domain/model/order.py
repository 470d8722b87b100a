"""Order record as handed over by the order subsystem.

These types are read-only snapshots: the order, its totals and the tax
breakdowns attached to it as extension data. Nothing here computes a
total; the figures arrive already calculated.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

SHIPPING_TAX_TYPE = "shipping"


@dataclass(frozen=True)
class AppliedTaxLine:
    """One computed tax line (title, percent, amount)."""

    title: str | None = None
    percent: Decimal | None = None
    amount: Decimal | None = None


@dataclass(frozen=True)
class ItemAppliedTax:
    """Taxes applied to a single item, or to the shipping charge.

    ``type`` tells the two apart: ``"shipping"`` for the shipping charge,
    anything else for a product line.
    """

    type: str | None
    applied_taxes: tuple[AppliedTaxLine, ...] | None = None
    item_id: int | None = None

    @property
    def is_shipping(self) -> bool:
        return self.type == SHIPPING_TAX_TYPE

    @property
    def tax_lines(self) -> tuple[AppliedTaxLine, ...]:
        return self.applied_taxes or ()


@dataclass(frozen=True)
class OrderRecord:
    """Fully loaded order, including its tax extension data.

    Any amount may be absent (None); consumers treat an absent amount as
    zero. Absent tax collections behave as empty ones.
    """

    currency_code: str
    base_grand_total: Decimal | None = None
    grand_total: Decimal | None = None
    subtotal: Decimal | None = None
    tax_amount: Decimal | None = None
    shipping_amount: Decimal | None = None
    shipping_incl_tax: Decimal | None = None
    discount_amount: Decimal | None = None
    shipping_discount_amount: Decimal | None = None
    discount_description: str | None = None
    applied_taxes: tuple[AppliedTaxLine, ...] | None = None
    item_applied_taxes: tuple[ItemAppliedTax, ...] | None = None
    increment_id: str | None = None

    @property
    def order_tax_lines(self) -> tuple[AppliedTaxLine, ...]:
        return self.applied_taxes or ()

    @property
    def shipping_tax_entries(self) -> tuple[ItemAppliedTax, ...]:
        return tuple(entry for entry in self.item_applied_taxes or () if entry.is_shipping)
