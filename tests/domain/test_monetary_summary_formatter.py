"""Unit tests for the order monetary summary formatter."""

from decimal import Decimal

import pytest

from order_totals.domain.exceptions import InvalidInputError
from order_totals.domain.model.order import AppliedTaxLine, ItemAppliedTax, OrderRecord
from order_totals.domain.model.summary import TaxDetail
from order_totals.domain.model.value_objects import MoneyAmount
from order_totals.domain.service.monetary_summary_formatter import (
    OrderMonetarySummaryFormatter,
)
from tests.fakes import make_order, shipping_taxes, tax


@pytest.fixture
def formatter():
    return OrderMonetarySummaryFormatter()


# ── Validation ───────────────────────────────────────────────────────────────


class TestInputValidation:

    def test_missing_order_rejected(self, formatter):
        with pytest.raises(InvalidInputError, match="should be specified"):
            formatter.format(None)

    def test_non_order_rejected(self, formatter):
        with pytest.raises(InvalidInputError):
            formatter.format({"currency_code": "USD"})


# ── Top-level amounts ────────────────────────────────────────────────────────


class TestTopLevelAmounts:

    def test_amounts_copied_from_order(self, formatter):
        order = make_order(
            base_grand_total=Decimal("120"),
            grand_total=Decimal("130"),
            tax_amount=Decimal("15"),
            shipping_incl_tax=Decimal("10.70"),
        )
        summary = formatter.format(order)

        assert summary.base_grand_total == MoneyAmount(Decimal("120"), "USD")
        assert summary.grand_total == MoneyAmount(Decimal("130"), "USD")
        assert summary.subtotal == MoneyAmount(Decimal("100.00"), "USD")
        assert summary.total_tax == MoneyAmount(Decimal("15"), "USD")
        assert summary.total_shipping == MoneyAmount(Decimal("10.00"), "USD")

    def test_shipping_handling_amounts(self, formatter):
        order = make_order(shipping_amount=Decimal("8"), shipping_incl_tax=Decimal("9.60"))
        shipping = formatter.format(order).shipping_handling

        assert shipping.amount_excluding_tax.value == Decimal("8")
        assert shipping.amount_including_tax.value == Decimal("9.60")
        assert shipping.total_amount.value == Decimal("8")

    def test_absent_amounts_default_to_zero(self, formatter):
        summary = formatter.format(OrderRecord(currency_code="EUR"))
        assert summary.grand_total == MoneyAmount(Decimal("0"), "EUR")
        assert summary.taxes == ()
        assert summary.discounts == ()
        assert summary.shipping_handling.taxes == ()

    def test_every_amount_uses_order_currency(self, formatter):
        order = make_order(
            currency_code="JPY",
            discount_amount=Decimal("-3"),
            shipping_discount_amount=Decimal("-1"),
            applied_taxes=(tax("VAT", "10", "5"),),
            item_applied_taxes=(shipping_taxes(tax("ShipTax", "7", "1")),),
        )
        amounts = formatter.format(order).money_amounts()

        assert len(amounts) == 12
        assert {m.currency for m in amounts} == {"JPY"}


# ── Order-level taxes ────────────────────────────────────────────────────────


class TestOrderTaxes:

    def test_taxes_keep_source_order_and_rates(self, formatter):
        order = make_order(applied_taxes=(tax("VAT", "10", "5"), tax("GST", "5", "2")))
        taxes = formatter.format(order).taxes

        assert taxes == (
            TaxDetail("VAT", MoneyAmount(Decimal("5"), "USD"), Decimal("10")),
            TaxDetail("GST", MoneyAmount(Decimal("2"), "USD"), Decimal("5")),
        )

    def test_missing_percent_keeps_rate_as_none(self, formatter):
        order = make_order(applied_taxes=(tax("VAT", None, "5"),))
        detail = formatter.format(order).taxes[0]
        assert detail.rate is None

    def test_blank_line_still_gets_null_rate(self, formatter):
        order = make_order(applied_taxes=(AppliedTaxLine(),))
        detail = formatter.format(order).taxes[0]
        assert detail.rate is None
        assert detail.title is None
        assert detail.amount.value == Decimal("0")

    def test_duplicate_titles_are_kept(self, formatter):
        order = make_order(applied_taxes=(tax("VAT", "10", "5"), tax("VAT", "10", "3")))
        assert len(formatter.format(order).taxes) == 2


# ── Shipping taxes ───────────────────────────────────────────────────────────


class TestShippingTaxes:

    def test_only_shipping_entries_are_used(self, formatter):
        order = make_order(
            item_applied_taxes=(
                ItemAppliedTax(type="product", applied_taxes=(tax("VAT", "10", "5"),)),
                shipping_taxes(tax("ShipTax", "7", "1")),
            )
        )
        taxes = formatter.format(order).shipping_handling.taxes

        assert taxes == (
            TaxDetail("ShipTax", MoneyAmount(Decimal("1"), "USD"), Decimal("7")),
        )

    def test_missing_percent_defaults_to_zero(self, formatter):
        order = make_order(item_applied_taxes=(shipping_taxes(tax("ShipTax", None, "1")),))
        detail = formatter.format(order).shipping_handling.taxes[0]
        assert detail.rate == Decimal("0")

    def test_blank_line_still_gets_zero_rate(self, formatter):
        order = make_order(item_applied_taxes=(shipping_taxes(AppliedTaxLine()),))
        (detail,) = formatter.format(order).shipping_handling.taxes
        assert detail.title is None
        assert detail.rate == Decimal("0")
        assert detail.amount.value == Decimal("0")

    def test_outer_then_inner_order(self, formatter):
        order = make_order(
            item_applied_taxes=(
                shipping_taxes(tax("A", "1", "1"), tax("B", "2", "2")),
                shipping_taxes(tax("C", "3", "3")),
            )
        )
        titles = [t.title for t in formatter.format(order).shipping_handling.taxes]
        assert titles == ["A", "B", "C"]

    def test_repeated_title_in_one_entry_replaces_in_place(self, formatter):
        order = make_order(
            item_applied_taxes=(
                shipping_taxes(tax("A", "1", "1"), tax("B", "2", "2"), tax("A", "1", "9")),
            )
        )
        taxes = formatter.format(order).shipping_handling.taxes
        assert [(t.title, t.amount.value) for t in taxes] == [
            ("A", Decimal("9")),
            ("B", Decimal("2")),
        ]

    def test_same_title_in_separate_entries_is_kept_twice(self, formatter):
        order = make_order(
            item_applied_taxes=(
                shipping_taxes(tax("A", "1", "1")),
                shipping_taxes(tax("A", "1", "2")),
            )
        )
        assert len(formatter.format(order).shipping_handling.taxes) == 2

    def test_shipping_entry_without_lines_is_ignored(self, formatter):
        order = make_order(item_applied_taxes=(ItemAppliedTax(type="shipping"),))
        assert formatter.format(order).shipping_handling.taxes == ()


# ── Discounts ────────────────────────────────────────────────────────────────


class TestDiscounts:

    def test_no_discount_without_amount_or_description(self, formatter):
        summary = formatter.format(make_order())
        assert summary.discounts == ()
        assert summary.shipping_handling.discounts == ()

    def test_absent_amount_counts_as_zero(self, formatter):
        summary = formatter.format(make_order(discount_amount=None))
        assert summary.discounts == ()

    def test_amount_without_description_uses_default_label(self, formatter):
        summary = formatter.format(make_order(discount_amount=Decimal("-5")))
        (discount,) = summary.discounts
        assert discount.label == "Discount"
        assert discount.amount == MoneyAmount(Decimal("-5"), "USD")
        assert summary.shipping_handling.discounts == ()

    def test_description_alone_emits_both_discounts(self, formatter):
        summary = formatter.format(make_order(discount_description="SPRING5"))
        assert [d.label for d in summary.discounts] == ["SPRING5"]
        assert [d.label for d in summary.shipping_handling.discounts] == ["SPRING5"]
        assert summary.discounts[0].amount.value == Decimal("0")

    def test_shipping_discount_uses_its_own_amount(self, formatter):
        summary = formatter.format(make_order(shipping_discount_amount=Decimal("-2")))
        assert summary.discounts == ()
        (discount,) = summary.shipping_handling.discounts
        assert discount.label == "Discount"
        assert discount.amount.value == Decimal("-2")


# ── Determinism ──────────────────────────────────────────────────────────────


class TestDeterminism:

    def test_same_input_gives_equal_output(self, formatter):
        order = make_order(
            discount_description="X",
            applied_taxes=(tax("VAT", "10", "5"),),
            item_applied_taxes=(shipping_taxes(tax("ShipTax", "7", "1")),),
        )
        assert formatter.format(order) == formatter.format(order)
        assert formatter.format(order) == OrderMonetarySummaryFormatter().format(order)
