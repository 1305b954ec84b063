import itertools
import json
import logging
import uuid
from datetime import datetime, timezone
from typing import Dict

from .config import DEFAULT_BUSINESS, DEFAULT_RECEIPT_BASE_URL
from .errors import EmptyOrderError
from .models import BusinessInfo, Order, PaymentMethod, Transaction

logger = logging.getLogger("invenpos.service")

_sequence = itertools.count(1)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def generate_order_id() -> str:
    # per-process sequence keeps ids unique within a session
    return f"ORD-{next(_sequence):04d}-{uuid.uuid4().hex[:6].upper()}"


def qr_payload(order_id: str, base_url: str) -> str:
    return f"{base_url.rstrip('/')}/{order_id}"


def checkout(
    order: Order,
    payment_method: str,
    receipt_base_url: str = DEFAULT_RECEIPT_BASE_URL,
) -> Transaction:
    """Finalize ``order`` into a Transaction and reset it.

    Store settings are loaded once by the caller (``load_config()``) and
    handed in as ``receipt_base_url``; checkout itself never touches disk.

    Raises ValueError for a payment method outside PaymentMethod and
    EmptyOrderError when there is nothing to sell; the order is left
    untouched in both cases.
    """
    method = PaymentMethod(payment_method)
    if order.is_empty:
        logger.warning("checkout rejected: empty order")
        raise EmptyOrderError("cannot check out an empty order")

    totals = order.totals
    order_id = generate_order_id()
    transaction = Transaction(
        order_id=order_id,
        items=tuple(order.items),
        subtotal=totals.subtotal,
        tax_amount=totals.tax,
        discount_amount=order.discount_amount,
        total=totals.total,
        payment_method=method,
        created_at=_now().isoformat(),
        qr_code_data=qr_payload(order_id, receipt_base_url),
        customer_id=order.customer_id,
        customer_name=order.customer_name,
    )
    order.clear()
    logger.info("checkout order=%s method=%s total=%s", order_id, method.value, transaction.total)
    return transaction


def build_receipt(transaction: Transaction, business: BusinessInfo = DEFAULT_BUSINESS) -> Dict[str, object]:
    receipt = transaction.to_dict()
    receipt["customer_name"] = transaction.customer_name or "Guest"
    receipt["business_info"] = business.to_dict()
    return receipt


def print_receipt(transaction: Transaction, business: BusinessInfo = DEFAULT_BUSINESS) -> str:
    text = json.dumps(build_receipt(transaction, business), ensure_ascii=False)
    print(text)
    return text
