import dataclasses

import pytest

from common.factories import BURGER, make_order
from invenpos.models import BusinessInfo, PaymentMethod
from invenpos.service import build_receipt, checkout

BUSINESS = BusinessInfo(name="Test Diner", address="1 Test Way", phone="000", email="t@example.com")


@pytest.mark.contract
def test_transaction_to_dict_shape(fixed_clock):
    # 契约测试：字典结构与键的形状
    t = checkout(make_order([BURGER]), "card")
    d = t.to_dict()
    assert set(d.keys()) == {
        "order_id", "customer_id", "customer_name", "items", "subtotal",
        "tax_amount", "discount_amount", "total", "payment_method",
        "created_at", "qr_code_data",
    }
    assert d["payment_method"] == "card"
    assert d["created_at"] == "2025-01-10T12:00:00+00:00"
    assert set(d["items"][0].keys()) == {
        "id", "product_id", "product_name", "unit_price", "quantity", "line_subtotal",
    }


@pytest.mark.contract
def test_receipt_shape_and_guest_default():
    receipt = build_receipt(checkout(make_order([BURGER]), "cash"), BUSINESS)
    assert receipt["customer_name"] == "Guest"
    assert {"name", "address", "phone", "email"} == set(receipt["business_info"].keys())


@pytest.mark.contract
def test_transaction_is_frozen():
    t = checkout(make_order([BURGER]), PaymentMethod.CASH)
    with pytest.raises(dataclasses.FrozenInstanceError):
        t.total = 0
    with pytest.raises(dataclasses.FrozenInstanceError):
        t.items[0].quantity = 5
    assert isinstance(t.items, tuple)
