"""
日志模块测试

验证 logger 输出到 stderr、子 logger 向上传播以及按配置调整级别。
"""
import logging

import pytest

from textsplit.core.settings import LoggingConfig
from textsplit.observability.logger import ROOT_LOGGER_NAME, get_logger, setup_logging


@pytest.fixture
def restore_root_logger():
    """测试结束后恢复 textsplit 根 logger 的级别和 handler"""
    root = get_logger()
    level = root.level
    handlers = list(root.handlers)
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def test_get_logger_has_single_stderr_handler():
    """测试重复获取时根 logger 只挂一个 stream handler"""
    root = get_logger()
    get_logger()

    stream_handlers = [h for h in root.handlers if type(h) is logging.StreamHandler]
    assert root.name == ROOT_LOGGER_NAME
    assert len(stream_handlers) == 1


def test_child_logger_propagates_to_root():
    """测试模块 logger 是 textsplit 根 logger 的子 logger"""
    child = get_logger("textsplit.libs.splitter.base_splitter")

    assert child.parent.name.startswith(ROOT_LOGGER_NAME)
    assert not child.handlers
    assert child.propagate


def test_setup_logging_applies_level(restore_root_logger):
    """测试按配置设置日志级别"""
    root = setup_logging(LoggingConfig(log_level="ERROR"))

    assert root is restore_root_logger
    assert root.level == logging.ERROR


def test_setup_logging_verbose_forces_debug(restore_root_logger):
    """测试 verbose 时强制 DEBUG"""
    root = setup_logging(LoggingConfig(log_level="ERROR"), verbose=True)

    assert root.level == logging.DEBUG


def test_setup_logging_log_file(tmp_path, restore_root_logger):
    """测试配置 log_file 时额外写入文件，且重复调用不会重复挂载"""
    log_file = tmp_path / "textsplit.log"
    config = LoggingConfig(log_level="INFO", log_file=str(log_file))

    root = setup_logging(config)
    setup_logging(config)

    file_handlers = [h for h in root.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1

    get_logger("textsplit.test").info("written to file")
    file_handlers[0].flush()

    assert "written to file" in log_file.read_text(encoding="utf-8")
