"""
Splitter 工厂模块

把命令行的 --idx 索引描述解析为对应的 Splitter 实例：
- 未提供索引描述 → ReplaceSplitter
- 提供索引描述 → IndicesSplitter

索引描述由逗号分隔，每一项是单个非负整数或闭区间 "A-B"（要求 A < B），
每项两侧的空白会被去掉，例如 "1-3, 7, 9-12"。
"""
import re
from typing import Optional

from textsplit.core.errors import ParseError
from textsplit.core.settings import DEFAULT_CHUNK_SIZE, Settings
from textsplit.libs.splitter.base_splitter import BaseSplitter
from textsplit.libs.splitter.index_set import IndexSet
from textsplit.libs.splitter.indices_splitter import IndicesSplitter
from textsplit.libs.splitter.replace_splitter import ReplaceSplitter
from textsplit.observability.logger import get_logger

logger = get_logger(__name__)

# 片段序号上限（32 位无符号整数）
MAX_INDEX = 2 ** 32 - 1

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")


def _parse_unsigned(text: str) -> int:
    """解析一个非负整数，失败时抛出 ParseError"""
    if not text:
        raise ParseError("cannot parse integer from empty string")
    if not _UNSIGNED_RE.fullmatch(text):
        raise ParseError(f"invalid digit found in string: {text!r}")

    value = int(text)
    if value > MAX_INDEX:
        raise ParseError(f"number too large to fit in target type: {text!r}")
    return value


def parse_indices(idx: str) -> IndexSet:
    """
    解析索引描述为片段序号集合

    Args:
        idx: 索引描述，例如 "2,3,4" 或 "1-3,7,8,9-12"

    Returns:
        IndexSet: 所有单值与区间覆盖值的并集（重复值自动合并，区间不展开）

    Raises:
        ParseError: 任一项不是非负整数、区间起点不小于终点、或为空
    """
    ranges = []

    for elem in (token.strip() for token in idx.split(",")):
        if "-" in elem:
            begin_text, end_text = elem.split("-", 1)
            begin = _parse_unsigned(begin_text)
            end = _parse_unsigned(end_text)
            if begin >= end:
                raise ParseError(
                    f"range begin value must be smaller than end value: {elem}"
                )
            ranges.append((begin, end))
        else:
            value = _parse_unsigned(elem)
            ranges.append((value, value))

    return IndexSet(ranges)


class SplitterFactory:
    """
    Splitter 工厂类

    根据索引描述创建对应模式的 Splitter。
    """

    @staticmethod
    def create(
        idx: Optional[str],
        joiner: str,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        encoding: str = "utf-8"
    ) -> BaseSplitter:
        """
        根据索引描述创建 Splitter 实例

        Args:
            idx: 索引描述（可选），None 表示 Replace 模式
            joiner: 输出片段之间的连接符
            chunk_size: 每次读取的字节数
            encoding: 字符编码

        Returns:
            BaseSplitter: Splitter 实例

        Raises:
            ParseError: 索引描述格式错误
        """
        if idx is None:
            logger.debug("未提供索引描述，使用 Replace 模式")
            return ReplaceSplitter(joiner, chunk_size=chunk_size, encoding=encoding)

        indices = parse_indices(idx)
        logger.debug(f"使用 Indices 模式，序号集合: {indices!r}")
        return IndicesSplitter(
            indices, joiner, chunk_size=chunk_size, encoding=encoding
        )

    @staticmethod
    def from_settings(
        settings: Settings,
        idx: Optional[str] = None,
        joiner: Optional[str] = None
    ) -> BaseSplitter:
        """
        使用配置中的默认值创建 Splitter 实例

        Args:
            settings: 配置对象
            idx: 索引描述（可选）
            joiner: 连接符（可选），不提供则使用 settings.splitter.delimiter

        Returns:
            BaseSplitter: Splitter 实例
        """
        splitter_config = settings.splitter
        return SplitterFactory.create(
            idx,
            splitter_config.delimiter if joiner is None else joiner,
            chunk_size=splitter_config.chunk_size,
            encoding=splitter_config.encoding,
        )
