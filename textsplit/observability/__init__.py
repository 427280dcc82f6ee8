"""
Observability 模块

日志输出（统一写到 stderr，stdout 只承载数据）。
"""
from textsplit.observability.logger import get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging"
]
