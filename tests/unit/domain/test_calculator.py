"""Unit tests for the gold value calculator"""

import pytest
from decimal import Decimal
from types import SimpleNamespace

from goldbill.domain.calculator import (
    MAX_AMOUNT,
    MAX_WEIGHT,
    compute_fine_gold,
    compute_gold_value,
    compute_invoice_totals,
    compute_item_amount,
    compute_pure_gold,
    compute_touch_totals,
    quantize_currency,
    to_decimal,
)
from goldbill.domain.errors import ValidationError


class TestComputePureGold:

    def test_22k_item(self):
        assert compute_pure_gold(Decimal("10"), Decimal("91.6")) == Decimal("9.160")

    def test_full_purity_returns_weight(self):
        assert compute_pure_gold("5.5", "100") == Decimal("5.500")

    def test_rounds_half_up_to_three_places(self):
        # 1.001 * 50 / 100 = 0.5005
        assert compute_pure_gold("1.001", "50") == Decimal("0.501")
        # 0.0015 * 100 / 100 = 0.0015
        assert compute_pure_gold("0.0015", "100") == Decimal("0.002")

    def test_float_inputs_go_through_str(self):
        assert compute_pure_gold(10.0, 91.6) == Decimal("9.160")

    def test_result_never_exceeds_weight(self):
        for purity in ("0.01", "22.5", "75", "99.99", "100"):
            assert compute_pure_gold("12.345", purity) <= Decimal("12.345")

    @pytest.mark.parametrize("purity", ["0", "-5", "100.01", "150"])
    def test_purity_out_of_range(self, purity):
        with pytest.raises(ValidationError) as exc_info:
            compute_pure_gold("10", purity)
        assert "purity" in exc_info.value.fields

    def test_reports_every_invalid_field(self):
        with pytest.raises(ValidationError) as exc_info:
            compute_pure_gold("0", "0")
        assert set(exc_info.value.fields) == {"weight", "purity"}

    def test_missing_weight(self):
        with pytest.raises(ValidationError) as exc_info:
            compute_pure_gold(None, "91.6")
        assert exc_info.value.fields == {"weight": "is required"}

    def test_inputs_rounded_to_stored_precision(self):
        # purity 91.666 is stored as 91.67
        assert compute_pure_gold("100", "91.666") == Decimal("91.670")
        # weight 1.0005 is stored as 1.001
        assert compute_pure_gold("1.0005", "100") == Decimal("1.001")

    def test_weight_rounding_to_zero_is_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            compute_pure_gold("0.0004", "100")
        assert "weight" in exc_info.value.fields

    def test_weight_above_column_limit(self):
        with pytest.raises(ValidationError) as exc_info:
            compute_pure_gold("100000000", "91.6")
        assert "weight" in exc_info.value.fields


class TestComputeGoldValue:

    def test_value_at_rate(self):
        assert compute_gold_value(Decimal("9.160"), Decimal("6000")) == Decimal("54960.00")

    def test_zero_weight_is_allowed(self):
        assert compute_gold_value("0", "6000") == Decimal("0.00")

    def test_value_above_column_limit(self):
        with pytest.raises(ValidationError) as exc_info:
            compute_gold_value("9999999.999", "9999999999.99")
        assert "total_value" in exc_info.value.fields

    def test_non_positive_rate(self):
        with pytest.raises(ValidationError) as exc_info:
            compute_gold_value("9.16", "0")
        assert "gold_rate" in exc_info.value.fields

    def test_negative_weight(self):
        with pytest.raises(ValidationError) as exc_info:
            compute_gold_value("-1", "6000")
        assert "pure_gold_weight" in exc_info.value.fields


class TestComputeItemAmount:

    def test_amount_of_rate_item(self):
        assert compute_item_amount("5", "92", "525") == Decimal("2415.00")
        assert compute_item_amount("5", "92", "5250") == Decimal("24150.00")

    def test_pure_weight_is_not_rounded_first(self):
        # 1.001 * 50% = 0.5005 g; rounding first would give 0.501 * 1000 = 501.00
        assert compute_item_amount("1.001", "50", "1000") == Decimal("500.50")

    def test_invalid_rate(self):
        with pytest.raises(ValidationError) as exc_info:
            compute_item_amount("5", "92", "-1")
        assert "rate" in exc_info.value.fields

    def test_amount_uses_rounded_inputs(self):
        # stored as weight 1.001, purity 50.00, rate 1000.56
        amount = compute_item_amount("1.0005", "50", "1000.555")

        assert amount == quantize_currency(Decimal("1.001") * Decimal("50") / 100 * Decimal("1000.56"))
        assert amount == Decimal("500.78")

    def test_amount_above_column_limit(self):
        with pytest.raises(ValidationError) as exc_info:
            compute_item_amount("9999999", "100", "9999999999")
        assert "amount" in exc_info.value.fields


class TestComputeFineGold:

    def test_fine_gold(self):
        assert compute_fine_gold("10.5", "91.6") == Decimal("9.618")

    def test_touch_above_hundred(self):
        with pytest.raises(ValidationError) as exc_info:
            compute_fine_gold("10", "101")
        assert "touch" in exc_info.value.fields


class TestComputeInvoiceTotals:

    def test_totals_with_making_charges_and_tax(self):
        items = [SimpleNamespace(amount=Decimal("2415.00"))]

        totals = compute_invoice_totals(items, Decimal("500"), Decimal("3"))

        assert totals.subtotal == Decimal("2915.00")
        assert totals.tax_amount == Decimal("87.45")
        assert totals.total == Decimal("3002.45")

    def test_total_is_subtotal_plus_tax(self):
        items = [SimpleNamespace(amount=Decimal("1234.56")), SimpleNamespace(amount=Decimal("0.01"))]

        totals = compute_invoice_totals(items, "99.99", "2.5")

        assert totals.total == totals.subtotal + totals.tax_amount
        assert totals.subtotal == Decimal("1334.56")
        assert totals.tax_amount == Decimal("33.36")

    def test_no_items_only_making_charges(self):
        totals = compute_invoice_totals([], "100", "0")
        assert totals == (Decimal("100.00"), Decimal("0.00"), Decimal("100.00"))

    def test_negative_making_charges(self):
        with pytest.raises(ValidationError):
            compute_invoice_totals([], "-1", "3")

    def test_tax_above_hundred(self):
        with pytest.raises(ValidationError) as exc_info:
            compute_invoice_totals([], "0", "100.5")
        assert "tax_percentage" in exc_info.value.fields

    def test_total_above_column_limit(self):
        items = [SimpleNamespace(amount=MAX_AMOUNT)]

        with pytest.raises(ValidationError) as exc_info:
            compute_invoice_totals(items, "0", "3")
        assert "total" in exc_info.value.fields


class TestComputeTouchTotals:

    def test_sums(self):
        items = [
            SimpleNamespace(pieces=2, net_weight=Decimal("10.500"), fine_gold=Decimal("9.618"), old_balance=None),
            SimpleNamespace(pieces=1, net_weight=Decimal("4.250"), fine_gold=Decimal("3.910"), old_balance=Decimal("1.5")),
        ]

        totals = compute_touch_totals(items)

        assert totals.total_pieces == 3
        assert totals.total_net_weight == Decimal("14.750")
        assert totals.total_fine_gold == Decimal("13.528")
        assert totals.total_old_balance == Decimal("1.500")

    def test_net_weight_total_above_column_limit(self):
        item = SimpleNamespace(pieces=1, net_weight=MAX_WEIGHT, fine_gold=MAX_WEIGHT, old_balance=None)

        with pytest.raises(ValidationError) as exc_info:
            compute_touch_totals([item] * 101)
        assert "total_net_weight" in exc_info.value.fields


class TestToDecimal:

    @pytest.mark.parametrize("value", ["abc", "NaN", "Infinity", True, object()])
    def test_rejects_non_numeric(self, value):
        with pytest.raises(ValidationError):
            to_decimal(value, "weight")

    def test_accepts_int(self):
        assert to_decimal(7, "pieces") == Decimal("7")


def test_18k_calculation_with_rate():
    pure = compute_pure_gold("10", "75")

    assert pure == Decimal("7.500")
    assert compute_gold_value(pure, "5250") == Decimal("39375.00")


def test_invoice_totals_are_repeatable():
    items = [SimpleNamespace(amount=Decimal("2415.00"))]

    assert compute_invoice_totals(items, "500", "3") == compute_invoice_totals(items, "500", "3")
