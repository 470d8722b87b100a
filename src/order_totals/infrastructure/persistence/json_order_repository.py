"""JSON-file-backed, read-only implementation of OrderRepository."""

from __future__ import annotations

import json
from pathlib import Path

from order_totals.domain.exceptions import ValidationError
from order_totals.domain.model.order import AppliedTaxLine, ItemAppliedTax, OrderRecord
from order_totals.domain.model.value_objects import to_decimal
from order_totals.domain.repository.order_repository import OrderRepository

_AMOUNT_FIELDS = (
    "base_grand_total",
    "grand_total",
    "subtotal",
    "tax_amount",
    "shipping_amount",
    "shipping_incl_tax",
    "discount_amount",
    "shipping_discount_amount",
)


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- OrderRepository interface --------------------------------------------

    def get_by_increment_id(self, increment_id: str) -> OrderRecord | None:
        for raw in _as_list(self._load_raw(), "Orders file"):
            raw = _as_object(raw, "Order document")
            if str(raw.get("increment_id")) == increment_id:
                return self.to_domain(raw)
        return None

    # --- Deserialization ------------------------------------------------------

    @staticmethod
    def to_domain(raw: dict) -> OrderRecord:
        raw = _as_object(raw, "Order document")
        currency = raw.get("currency_code")
        if not currency:
            raise ValidationError("Order document is missing 'currency_code'")
        if not isinstance(currency, str):
            raise ValidationError(
                f"'currency_code' must be a string, got {type(currency).__name__}"
            )

        applied = raw.get("applied_taxes")
        item_applied = raw.get("item_applied_taxes")
        return OrderRecord(
            currency_code=currency,
            discount_description=raw.get("discount_description"),
            applied_taxes=(
                None
                if applied is None
                else tuple(_tax_line(t) for t in _as_list(applied, "'applied_taxes'"))
            ),
            item_applied_taxes=(
                None
                if item_applied is None
                else tuple(_item_tax(i) for i in _as_list(item_applied, "'item_applied_taxes'"))
            ),
            increment_id=None if raw.get("increment_id") is None else str(raw["increment_id"]),
            **{name: to_decimal(raw.get(name)) for name in _AMOUNT_FIELDS},
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        if not self._file_path.exists():
            return []
        try:
            return json.loads(self._file_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValidationError(f"Cannot read orders from {self._file_path}: {exc}") from exc


def _as_object(raw, what: str) -> dict:
    if not isinstance(raw, dict):
        raise ValidationError(f"{what} must be an object, got {type(raw).__name__}")
    return raw


def _as_list(raw, what: str) -> list:
    if not isinstance(raw, list):
        raise ValidationError(f"{what} must be a list, got {type(raw).__name__}")
    return raw


def _tax_line(raw: dict) -> AppliedTaxLine:
    raw = _as_object(raw, "Tax line")
    return AppliedTaxLine(
        title=raw.get("title"),
        percent=to_decimal(raw.get("percent")),
        amount=to_decimal(raw.get("amount")),
    )


def _item_tax(raw: dict) -> ItemAppliedTax:
    raw = _as_object(raw, "Item tax entry")
    lines = raw.get("applied_taxes")
    return ItemAppliedTax(
        type=raw.get("type"),
        applied_taxes=(
            None if lines is None else tuple(_tax_line(t) for t in _as_list(lines, "'applied_taxes'"))
        ),
        item_id=raw.get("item_id"),
    )
