"""
Splitter 模块

提供流式切分抽象接口、两种切分模式和工厂实现。
"""
from textsplit.libs.splitter.base_splitter import BaseSplitter
from textsplit.libs.splitter.replace_splitter import ReplaceSplitter
from textsplit.libs.splitter.index_set import IndexSet
from textsplit.libs.splitter.indices_splitter import IndicesSplitter
from textsplit.libs.splitter.splitter_factory import SplitterFactory, parse_indices

__all__ = [
    "BaseSplitter",
    "ReplaceSplitter",
    "IndicesSplitter",
    "IndexSet",
    "SplitterFactory",
    "parse_indices"
]
