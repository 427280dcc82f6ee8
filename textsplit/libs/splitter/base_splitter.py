"""
Splitter 抽象接口模块

定义统一的流式切分接口。Replace 与 Indices 两种模式都继承此基类，
共享同一个按块读取、增量解码、跨块拼接的片段生成器，
只在"如何输出片段"上有所不同。
"""
import codecs
from abc import ABC, abstractmethod
from typing import BinaryIO, Iterator

from textsplit.core.errors import DecodeError
from textsplit.core.settings import DEFAULT_CHUNK_SIZE
from textsplit.observability.logger import get_logger

logger = get_logger(__name__)


class BaseSplitter(ABC):
    """
    Splitter 抽象基类

    实例在构造后不可变，每次调用 split_stream 都是一次独立的完整流处理。

    Args:
        joiner: 输出片段之间插入的连接符
        chunk_size: 每次从输入读取的字节数
        encoding: 输入解码与输出编码使用的字符编码
    """

    def __init__(
        self,
        joiner: str,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        encoding: str = "utf-8"
    ):
        if chunk_size <= 0:
            raise ValueError(f"chunk_size 必须为正整数，得到: {chunk_size}")
        self._joiner = joiner
        self._chunk_size = chunk_size
        self._encoding = codecs.lookup(encoding).name

    def iter_pieces(self, input: BinaryIO, separator: str) -> Iterator[str]:
        """
        从字节流中按字面分隔符依次产出片段

        分隔符之后尚未闭合的尾部文本会保留到下一次读取再拼接，
        因此跨越两次读取的分隔符和多字节字符都能被正确处理。
        输入为空（一个字节都没读到）时不产出任何片段。

        Args:
            input: 可读的二进制流
            separator: 字面分隔符；为空字符串时每个字符单独成为一个片段，
                       并在首尾各产出一个空片段

        Yields:
            str: 按出现顺序排列的片段

        Raises:
            DecodeError: 输入字节无法按配置的编码解码
            OSError: 读取失败
        """
        decoder = codecs.getincrementaldecoder(self._encoding)()
        # 尚未遇到分隔符的文本片段，只在找到分隔符时才拼接
        carry = []
        # carry 末尾 len(separator) - 1 个字符，用于识别跨块的分隔符
        overlap = max(len(separator) - 1, 0)
        tail = ""
        received = False
        consumed = 0
        chunks = 0

        while True:
            chunk = input.read(self._chunk_size)
            if not chunk:
                break

            if not received and not separator:
                yield ""
            received = True
            chunks += 1

            text = self._decode(decoder, chunk, consumed)
            consumed += len(chunk)
            logger.debug(f"读取第 {chunks} 块: {len(chunk)} 字节")

            if not separator:
                yield from text
                continue

            if separator not in tail + text:
                carry.append(text)
                tail = (tail + text)[-overlap:] if overlap else ""
                continue

            pieces = ("".join(carry) + text).split(separator)
            last = pieces.pop()
            carry = [last]
            tail = last[-overlap:] if overlap else ""
            yield from pieces

        if not received:
            logger.debug("输入为空，未产出任何片段")
            return

        rest = self._decode(decoder, b"", consumed, final=True)
        if separator:
            carry.append(rest)
            if separator in tail + rest:
                yield from "".join(carry).split(separator)
            else:
                yield "".join(carry)
        else:
            yield from rest
            yield ""

        logger.debug(f"输入读取完毕: {chunks} 块, {consumed} 字节")

    def _decode(self, decoder, chunk: bytes, consumed: int, final: bool = False) -> str:
        """增量解码一块字节，把 UnicodeDecodeError 转换为 DecodeError"""
        try:
            return decoder.decode(chunk, final=final)
        except UnicodeDecodeError as e:
            # 增量解码器的 e.start 相对于本次调用时缓冲区的起点，
            # 其中可能包含上一块残留的不完整字符
            pending = len(e.object) - len(chunk)
            offset = consumed - pending + e.start
            raise DecodeError(
                f"input is not valid {self._encoding} at byte {offset}: {e.reason}",
                encoding=self._encoding,
                offset=offset,
            ) from e

    def _write(self, output: BinaryIO, text: str) -> None:
        """按配置的编码写出文本"""
        output.write(text.encode(self._encoding))

    @abstractmethod
    def split_stream(
        self,
        input: BinaryIO,
        output: BinaryIO,
        separator: str
    ) -> None:
        """
        读取整个输入流，切分后把结果写入输出流

        Args:
            input: 可读的二进制流（文件或 stdin.buffer）
            output: 可写的二进制流（stdout.buffer 或 BytesIO）
            separator: 字面分隔符

        Raises:
            DecodeError: 输入字节无法解码
            OSError: 读写失败；已写出的内容不会回滚
        """
        pass

    @abstractmethod
    def get_strategy(self) -> str:
        """
        获取切分模式名称

        Returns:
            str: "replace" 或 "indices"
        """
        pass

    def get_joiner(self) -> str:
        """获取连接符"""
        return self._joiner

    def get_chunk_size(self) -> int:
        """获取每次读取的字节数"""
        return self._chunk_size

    def get_encoding(self) -> str:
        """获取字符编码"""
        return self._encoding

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self), self._key()))

    def _key(self) -> tuple:
        return (self._joiner, self._chunk_size, self._encoding)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(joiner={self._joiner!r})"
