import logging
import uuid
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .errors import InvalidDiscountError
from .pricing import Totals, calculate_total

logger = logging.getLogger("invenpos.models")


class PaymentMethod(str, Enum):
    CASH = "cash"
    CARD = "card"


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    price: float
    category: str = ""


@dataclass(frozen=True)
class LineItem:
    id: str
    product_id: str
    product_name: str
    unit_price: float
    quantity: int = 1

    @property
    def line_subtotal(self) -> float:
        return self.unit_price * self.quantity

    def to_dict(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "product_id": self.product_id,
            "product_name": self.product_name,
            "unit_price": self.unit_price,
            "quantity": self.quantity,
            "line_subtotal": self.line_subtotal,
        }


@dataclass
class Order:
    """The single active cart.

    Totals are derived on read from ``items`` and ``discount_amount``, so
    every mutator leaves the order consistent without a separate
    recalculation step.
    """

    items: List[LineItem] = field(default_factory=list)
    customer_id: Optional[str] = None
    customer_name: Optional[str] = None
    discount_amount: float = 0.0

    @property
    def totals(self) -> Totals:
        return calculate_total(self.items, self.discount_amount)

    @property
    def subtotal(self) -> float:
        return self.totals.subtotal

    @property
    def tax_amount(self) -> float:
        return self.totals.tax

    @property
    def total(self) -> float:
        return self.totals.total

    @property
    def item_count(self) -> int:
        return sum(i.quantity for i in self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def find_item(self, item_id: str) -> Optional[LineItem]:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def find_by_product(self, product_id: str) -> Optional[LineItem]:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None

    def add_item(self, product: Product) -> LineItem:
        existing = self.find_by_product(product.id)
        if existing is not None:
            self.set_quantity(existing.id, existing.quantity + 1)
            return self.find_item(existing.id)

        item = LineItem(
            id=uuid.uuid4().hex,
            product_id=product.id,
            product_name=product.name,
            unit_price=product.price,
        )
        self.items.append(item)
        logger.info("added product=%s price=%s", product.id, product.price)
        return item

    def set_quantity(self, item_id: str, quantity: int) -> None:
        if quantity <= 0:
            self.remove_item(item_id)
            return
        for idx, item in enumerate(self.items):
            if item.id == item_id:
                self.items[idx] = replace(item, quantity=quantity)
                logger.debug("quantity item=%s qty=%s", item_id, quantity)
                return

    def increment(self, item_id: str) -> None:
        item = self.find_item(item_id)
        if item is not None:
            self.set_quantity(item_id, item.quantity + 1)

    def decrement(self, item_id: str) -> None:
        item = self.find_item(item_id)
        if item is not None:
            self.set_quantity(item_id, item.quantity - 1)

    def remove_item(self, item_id: str) -> None:
        # unknown ids are ignored (double-click removal)
        before = len(self.items)
        self.items = [i for i in self.items if i.id != item_id]
        if len(self.items) != before:
            logger.debug("removed item=%s", item_id)

    def set_discount(self, amount: float) -> None:
        if amount < 0:
            logger.warning("rejected negative discount=%s", amount)
            raise InvalidDiscountError(f"discount must not be negative: {amount}")
        self.discount_amount = amount

    def set_customer(self, id: Optional[str] = None, name: Optional[str] = None) -> None:
        self.customer_id = id
        self.customer_name = name

    def clear(self) -> None:
        self.items = []
        self.customer_id = None
        self.customer_name = None
        self.discount_amount = 0.0


@dataclass(frozen=True)
class BusinessInfo:
    name: str
    address: str
    phone: str
    email: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "address": self.address,
            "phone": self.phone,
            "email": self.email,
        }


@dataclass(frozen=True)
class Transaction:
    order_id: str
    items: Tuple[LineItem, ...]
    subtotal: float
    tax_amount: float
    discount_amount: float
    total: float
    payment_method: PaymentMethod
    created_at: str
    qr_code_data: str
    customer_id: Optional[str] = None
    customer_name: Optional[str] = None

    def to_dict(self) -> Dict[str, object]:
        return {
            "order_id": self.order_id,
            "customer_id": self.customer_id,
            "customer_name": self.customer_name,
            "items": [i.to_dict() for i in self.items],
            "subtotal": self.subtotal,
            "tax_amount": self.tax_amount,
            "discount_amount": self.discount_amount,
            "total": self.total,
            "payment_method": self.payment_method.value,
            "created_at": self.created_at,
            "qr_code_data": self.qr_code_data,
        }
