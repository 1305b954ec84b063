import logging
from datetime import datetime, timezone

import pytest

from common.factories import make_order
from invenpos import service

# 激活自定义插件
pytest_plugins = [
    "common.plugins.pos_plugin",
]


def pytest_addoption(parser):
    parser.addoption("--env", action="store", default="dev", help="运行环境")


@pytest.fixture(scope="function")
def order():
    return make_order()


@pytest.fixture(scope="function")
def log_capture(caplog):
    caplog.set_level(logging.DEBUG, logger="invenpos")
    return caplog


@pytest.fixture(scope="function")
def fixed_clock(monkeypatch):
    # 固定结账时间戳，提高测试确定性
    moment = datetime(2025, 1, 10, 12, 0, 0, tzinfo=timezone.utc)
    monkeypatch.setattr(service, "_now", lambda: moment)
    return moment


@pytest.fixture(scope="function")
def config_dir(tmp_path, monkeypatch):
    d = tmp_path / "configs"
    d.mkdir()
    (d / "common.yaml").write_text(
        "business:\n"
        "  name: Test Diner\n"
        "  address: 1 Test Way\n"
        "  phone: '000'\n"
        "  email: test@example.com\n"
        "receipt:\n"
        "  base_url: https://example.com/r/\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("INVENPOS_CONFIG_DIR", str(d))
    monkeypatch.setenv("INVENPOS_ENV", "testing")
    yield d
