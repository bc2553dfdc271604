# storefront/utils/money.py
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Iterable, Tuple

CENT = Decimal("0.01")


def to_decimal(value) -> Decimal:
    # float -> str -> Decimal, zeby 19.99 nie zamienilo sie w 19.989999...
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        raise ValueError(f"Not a number: {value!r}") from e

    # NaN i Infinity nie sa kwota
    if not amount.is_finite():
        raise ValueError(f"Not a finite number: {value!r}")
    return amount


def round_money(amount: Decimal) -> Decimal:
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def lines_total(lines: Iterable[Tuple[object, object]]) -> Decimal:
    """Suma price * quantity po pozycjach, zaokraglona do groszy."""
    total = sum((to_decimal(price) * int(quantity) for price, quantity in lines), Decimal("0.00"))
    return round_money(total)
