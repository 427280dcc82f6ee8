"""
日志模块

提供统一的日志接口，输出到 stderr（避免污染 stdout 的切分结果）。
"""
import logging
import os
import sys
from typing import Optional

from textsplit.core.settings import LoggingConfig


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

ROOT_LOGGER_NAME = "textsplit"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    获取 logger 实例

    Args:
        name: logger 名称，默认为 None（使用 textsplit 根 logger）

    Returns:
        logging.Logger: 配置好的 logger 实例
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)

    # 只在 textsplit 根 logger 上挂 handler，子 logger 向上传播
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(logging.WARNING)

    if name is None or name == ROOT_LOGGER_NAME:
        return root
    return logging.getLogger(name)


def setup_logging(config: LoggingConfig, verbose: bool = False) -> logging.Logger:
    """
    根据配置设置日志级别和可选的文件输出

    Args:
        config: 日志配置
        verbose: 为 True 时强制使用 DEBUG 级别

    Returns:
        logging.Logger: textsplit 根 logger
    """
    root = get_logger()
    root.setLevel(logging.DEBUG if verbose else config.log_level)

    if config.log_file:
        already_attached = any(
            isinstance(h, logging.FileHandler) and h.baseFilename == os.path.abspath(config.log_file)
            for h in root.handlers
        )
        if not already_attached:
            file_handler = logging.FileHandler(config.log_file, encoding="utf-8")
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            root.addHandler(file_handler)

    return root
