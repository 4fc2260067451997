"""Gold Value Calculator

Pure functions for pure-gold weight, gold value, fine gold and invoice totals.

All arithmetic is done on Decimal values. Inputs are first rounded to the
precision they are stored with (weights 3 decimal places, percentages and
rates 2), so a stored result always matches its stored inputs. Weights are
rounded to 3 decimal places and currency to 2, both ROUND_HALF_UP.
Intermediate products are kept unrounded; only the returned values are
quantized.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Iterable, NamedTuple, Optional
from goldbill.domain.errors import ValidationError

WEIGHT_PRECISION = Decimal("0.001")
CURRENCY_PRECISION = Decimal("0.01")
HUNDRED = Decimal("100")
ZERO = Decimal("0")

# Largest values the storage columns hold
MAX_WEIGHT = Decimal("9999999.999")
MAX_TOTAL_WEIGHT = Decimal("999999999.999")
MAX_RATE = Decimal("9999999999.99")
MAX_AMOUNT = Decimal("999999999999.99")
MAX_PIECES = 2147483647


def quantize_weight(value: Decimal) -> Decimal:
    return value.quantize(WEIGHT_PRECISION, rounding=ROUND_HALF_UP)


def quantize_currency(value: Decimal) -> Decimal:
    return value.quantize(CURRENCY_PRECISION, rounding=ROUND_HALF_UP)


# Percentages and rates are stored with 2 decimal places as well
quantize_percentage = quantize_currency
quantize_rate = quantize_currency


def to_decimal(value: Any, field: str) -> Decimal:
    """
    Coerce a numeric input to Decimal

    Floats go through str() so 0.1 becomes Decimal("0.1"), not its binary expansion.

    Raises:
        ValidationError: value is missing, not numeric, or not finite
    """
    if value is None:
        raise ValidationError({field: "is required"})
    if isinstance(value, bool):
        raise ValidationError({field: "must be a number"})
    if isinstance(value, float):
        value = str(value)
    try:
        result = value if isinstance(value, Decimal) else Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError({field: "must be a number"})
    if not result.is_finite():
        raise ValidationError({field: "must be a finite number"})
    return result


def check_limit(value: Decimal, limit: Decimal, field: str) -> Decimal:
    if value > limit:
        raise ValidationError({field: f"must be at most {limit}"})
    return value


def weight_input(value: Any, field: str = "weight") -> Decimal:
    """Weight > 0, rounded to 3 decimal places"""
    result = quantize_weight(to_decimal(value, field))
    if result <= ZERO:
        raise ValidationError({field: "must be greater than 0"})
    return check_limit(result, MAX_WEIGHT, field)


def percentage_input(value: Any, field: str = "purity") -> Decimal:
    """Percentage in (0, 100], rounded to 2 decimal places"""
    result = quantize_percentage(to_decimal(value, field))
    if result <= ZERO or result > HUNDRED:
        raise ValidationError({field: "must be greater than 0 and at most 100"})
    return result


def rate_input(value: Any, field: str = "rate") -> Decimal:
    """Rate per gram > 0, rounded to 2 decimal places"""
    result = quantize_rate(to_decimal(value, field))
    if result <= ZERO:
        raise ValidationError({field: "must be greater than 0"})
    return check_limit(result, MAX_RATE, field)


def _pure_weight(weight: Any, purity: Any, weight_field: str, purity_field: str) -> Decimal:
    errors = {}
    w = p = None
    try:
        w = weight_input(weight, weight_field)
    except ValidationError as e:
        errors.update(e.fields)
    try:
        p = percentage_input(purity, purity_field)
    except ValidationError as e:
        errors.update(e.fields)
    if errors:
        raise ValidationError(errors)
    return w * p / HUNDRED


def compute_pure_gold(weight: Any, purity: Any) -> Decimal:
    """
    Pure gold weight of an item

    Args:
        weight: gross weight in grams, > 0
        purity: purity percentage in (0, 100]

    Returns:
        weight * purity / 100, rounded to 3 decimal places

    Raises:
        ValidationError: naming every invalid field
    """
    return quantize_weight(_pure_weight(weight, purity, "weight", "purity"))


def compute_gold_value(pure_gold_weight: Any, rate_per_gram: Any) -> Decimal:
    """Value of pure gold at a rate per gram, rounded to 2 decimal places"""
    weight = to_decimal(pure_gold_weight, "pure_gold_weight")
    if weight < ZERO:
        raise ValidationError({"pure_gold_weight": "must not be negative"})
    rate = rate_input(rate_per_gram, "gold_rate")
    return check_limit(quantize_currency(weight * rate), MAX_AMOUNT, "total_value")


def compute_item_amount(weight: Any, purity: Any, rate: Any) -> Decimal:
    """
    Amount of a rate-based invoice item: (weight * purity / 100) * rate

    The pure weight is not rounded before multiplying by the rate.
    """
    pure = _pure_weight(weight, purity, "weight", "purity")
    return check_limit(quantize_currency(pure * rate_input(rate)), MAX_AMOUNT, "amount")


def compute_fine_gold(net_weight: Any, touch: Any) -> Decimal:
    """Fine gold of a touch-based item: net_weight * touch / 100, 3 decimal places"""
    return quantize_weight(_pure_weight(net_weight, touch, "net_weight", "touch"))


class InvoiceTotals(NamedTuple):
    subtotal: Decimal
    tax_amount: Decimal
    total: Decimal


class TouchTotals(NamedTuple):
    total_pieces: int
    total_net_weight: Decimal
    total_fine_gold: Decimal
    total_old_balance: Decimal


def compute_invoice_totals(
    items: Iterable[Any],
    making_charges: Any = ZERO,
    tax_percentage: Any = ZERO,
) -> InvoiceTotals:
    """
    Totals of a rate-based invoice

    subtotal   = sum(item.amount) + making_charges
    tax_amount = subtotal * tax_percentage / 100
    total      = subtotal + tax_amount

    Args:
        items: objects exposing an ``amount`` attribute
        making_charges: fixed fee added before tax, >= 0
        tax_percentage: tax rate in [0, 100]

    Returns:
        InvoiceTotals, each rounded to 2 decimal places
    """
    charges = quantize_currency(to_decimal(making_charges, "making_charges"))
    if charges < ZERO:
        raise ValidationError({"making_charges": "must not be negative"})
    check_limit(charges, MAX_AMOUNT, "making_charges")
    tax = quantize_percentage(to_decimal(tax_percentage, "tax_percentage"))
    if tax < ZERO or tax > HUNDRED:
        raise ValidationError({"tax_percentage": "must be between 0 and 100"})

    items_sum = sum((to_decimal(item.amount, "amount") for item in items), ZERO)
    subtotal = check_limit(quantize_currency(items_sum + charges), MAX_AMOUNT, "subtotal")
    tax_amount = quantize_currency(subtotal * tax / HUNDRED)
    return InvoiceTotals(
        subtotal=subtotal,
        tax_amount=tax_amount,
        total=check_limit(subtotal + tax_amount, MAX_AMOUNT, "total"),
    )


def compute_touch_totals(items: Iterable[Any]) -> TouchTotals:
    """Sums of pieces, net weight, fine gold and old balance over touch-based items"""
    pieces = 0
    net_weight = fine_gold = old_balance = ZERO
    for item in items:
        pieces += item.pieces or 0
        net_weight += to_decimal(item.net_weight, "net_weight")
        fine_gold += to_decimal(item.fine_gold, "fine_gold")
        old_balance += _optional(item.old_balance, "old_balance") or ZERO
    if pieces > MAX_PIECES:
        raise ValidationError({"total_pieces": f"must be at most {MAX_PIECES}"})
    return TouchTotals(
        total_pieces=pieces,
        total_net_weight=check_limit(quantize_weight(net_weight), MAX_TOTAL_WEIGHT, "total_net_weight"),
        total_fine_gold=check_limit(quantize_weight(fine_gold), MAX_TOTAL_WEIGHT, "total_fine_gold"),
        total_old_balance=check_limit(quantize_weight(old_balance), MAX_TOTAL_WEIGHT, "total_old_balance"),
    )


def _optional(value: Any, field: str) -> Optional[Decimal]:
    return None if value is None else to_decimal(value, field)
