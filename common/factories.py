from dataclasses import dataclass
from typing import List, Optional

from invenpos.models import Order, Product


@dataclass(frozen=True)
class Defaults:
    base_price: float = 10.0


BURGER = Product(id="1", name="Burger", price=8.99, category="Burgers")
FRIES = Product(id="2", name="French Fries", price=3.49, category="Sides")
SODA = Product(id="3", name="Soda", price=1.99, category="Beverages")


def make_products(n: int = 1, base: float = Defaults.base_price) -> List[Product]:
    return [Product(id=f"P-{i}", name=f"Product {i}", price=base + i) for i in range(n)]


def make_order(products: Optional[List[Product]] = None) -> Order:
    o = Order()
    if products:
        for p in products:
            o.add_item(p)
    return o
