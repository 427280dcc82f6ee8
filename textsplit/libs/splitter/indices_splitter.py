"""
Indices Splitter 实现

只输出序号（从 0 开始，在整个输入流上全局计数）命中索引集合的片段，
命中的片段之间插入连接符。
"""
from typing import BinaryIO, Iterable

from textsplit.core.settings import DEFAULT_CHUNK_SIZE
from textsplit.libs.splitter.base_splitter import BaseSplitter
from textsplit.libs.splitter.index_set import IndexSet
from textsplit.observability.logger import get_logger

logger = get_logger(__name__)


class IndicesSplitter(BaseSplitter):
    """
    Indices 模式

    片段序号与读取块的边界无关：每遇到一个片段序号加 1，
    无论该片段是否被选中。输入会被完整读完。
    """

    def __init__(
        self,
        indices: Iterable[int],
        joiner: str,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        encoding: str = "utf-8"
    ):
        """
        初始化 Indices Splitter

        Args:
            indices: 需要输出的片段序号（IndexSet 或任意整数序列），重复值自动合并
            joiner: 命中片段之间的连接符
            chunk_size: 每次读取的字节数
            encoding: 字符编码
        """
        super().__init__(joiner, chunk_size=chunk_size, encoding=encoding)
        if isinstance(indices, IndexSet):
            self._indices = indices
        else:
            values = list(indices)
            if any(i < 0 for i in values):
                raise ValueError("片段序号不能为负数")
            self._indices = IndexSet.from_values(values)

    def split_stream(
        self,
        input: BinaryIO,
        output: BinaryIO,
        separator: str
    ) -> None:
        seen = 0
        emitted = 0
        for i, piece in enumerate(self.iter_pieces(input, separator)):
            seen = i + 1
            if i not in self._indices:
                continue
            if emitted:
                self._write(output, self._joiner)
            self._write(output, piece)
            emitted += 1

        logger.info(f"Indices 切分完成: 共 {seen} 个片段, 输出 {emitted} 个")

    def get_strategy(self) -> str:
        """获取切分模式名称"""
        return "indices"

    def get_indices(self) -> IndexSet:
        """获取索引集合"""
        return self._indices

    def _key(self) -> tuple:
        return super()._key() + (self._indices.ranges(),)

    def __repr__(self) -> str:
        return f"IndicesSplitter(indices={self._indices!r}, joiner={self._joiner!r})"
