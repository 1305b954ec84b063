import json

import pytest

from common.factories import BURGER, FRIES, SODA
from invenpos.access import resolve
from invenpos.config import load_config
from invenpos.models import Order
from invenpos.pricing import calculate_change, format_currency
from invenpos.service import checkout, print_receipt


@pytest.mark.e2e
def test_cashier_sale_and_receipt(capsys, config_dir, fixed_clock):
    # e2e：收银员进入 POS，下单、结账并打印小票
    assert resolve("cashier", "/pos") == "/pos"
    store = load_config()

    order = Order()
    order.set_customer(name="Ada")
    for p in (BURGER, FRIES, SODA, FRIES):
        order.add_item(p)
    order.set_discount(1)

    change = calculate_change(order.total, 50)
    t = checkout(order, "cash", receipt_base_url=store.receipt_base_url())
    text = print_receipt(t, store.business_info())

    # capsys：捕获标准输出
    out = capsys.readouterr().out.strip()
    assert out == text

    payload = json.loads(text)
    assert payload["customer_name"] == "Ada"
    assert payload["business_info"]["name"] == "Test Diner"
    assert payload["qr_code_data"] == f"https://example.com/r/{t.order_id}"
    assert [i["quantity"] for i in payload["items"]] == [1, 2, 1]
    assert format_currency(payload["total"]) == format_currency(t.total)
    assert format_currency(change) == format_currency(50 - t.total)


@pytest.mark.e2e
@pytest.mark.slow
def test_many_sales_on_one_register():
    order = Order()
    totals = []
    for n in range(1, 201):
        for _ in range(n % 5 + 1):
            order.add_item(BURGER)
        totals.append(checkout(order, "card").total)
        assert order.is_empty
    assert all(t > 0 for t in totals)
