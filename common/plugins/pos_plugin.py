import os
import time

import pytest

LAYERS = ["unit", "contract", "integration", "e2e"]


# Hook 1: 收集后按测试层级排序，生产环境跳过慢测试
def pytest_collection_modifyitems(config, items):
    """根据环境和标记调整收集到的测试项"""
    env = config.getoption("--env")
    if env == "prod":
        for item in items:
            if item.get_closest_marker("slow"):
                item.add_marker(pytest.mark.skip(reason="生产环境跳过慢测试"))

    def item_priority(item):
        markers = [m.name for m in item.iter_markers()]
        for rank, layer in enumerate(LAYERS):
            if layer in markers:
                return rank
        return len(LAYERS)

    items.sort(key=item_priority)


# Hook 2: 会话开始/结束记录耗时
def pytest_sessionstart(session):
    session.start_time = time.time()


def pytest_sessionfinish(session, exitstatus):
    start = getattr(session, "start_time", None)
    if start is not None:
        print(f"\n测试会话总耗时: {time.time() - start:.2f}秒")


# Hook 3: 按层级统计结果
def pytest_terminal_summary(terminalreporter, exitstatus):
    terminalreporter.write_sep("=", "自定义摘要: 用例统计")
    counts = terminalreporter.stats
    passed = len(counts.get("passed", []))
    failed = len(counts.get("failed", []))
    skipped = len(counts.get("skipped", []))
    xfailed = len(counts.get("xfailed", []))
    terminalreporter.write_line(f"通过: {passed}  失败: {failed}  跳过: {skipped}  xfail: {xfailed}")


# Hook 4: 需要真实配置目录的用例
def pytest_runtest_setup(item):
    if item.get_closest_marker("require_config") and not os.path.isdir(
        os.environ.get("INVENPOS_CONFIG_DIR", "configs")
    ):
        pytest.skip("配置目录不存在，跳过测试")


# Hook 5: 注册标记
def pytest_configure(config):
    config.addinivalue_line("markers", "unit: 单元测试")
    config.addinivalue_line("markers", "contract: 契约测试（数据结构形状）")
    config.addinivalue_line("markers", "integration: 集成测试")
    config.addinivalue_line("markers", "e2e: 端到端测试")
    config.addinivalue_line("markers", "slow: 慢测试，--env=prod 下跳过")
    config.addinivalue_line("markers", "require_config: 需要 configs/ 目录的测试")
