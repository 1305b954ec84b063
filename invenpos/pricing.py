import logging
from typing import Iterable, NamedTuple

logger = logging.getLogger("invenpos.pricing")

TAX_RATE = 0.0825


class Totals(NamedTuple):
    subtotal: float
    tax: float
    total: float


def calculate_subtotal(items: Iterable) -> float:
    return sum(i.line_subtotal for i in items)


def calculate_tax(subtotal: float) -> float:
    # unrounded; rounding happens only in format_currency
    return subtotal * TAX_RATE


def calculate_total(items: Iterable, discount: float = 0.0) -> Totals:
    subtotal = calculate_subtotal(items)
    tax = calculate_tax(subtotal)
    total = subtotal + tax - discount
    if total < 0:
        logger.debug("total clamped: discount=%s exceeds %s", discount, subtotal + tax)
        total = 0.0
    return Totals(subtotal=subtotal, tax=tax, total=total)


def calculate_change(total: float, amount_tendered: float) -> float:
    return max(0.0, amount_tendered - total)


def is_sufficient_payment(total: float, amount_tendered: float) -> bool:
    return amount_tendered >= total


def format_currency(amount: float) -> str:
    amount = round(amount, 2)
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"
