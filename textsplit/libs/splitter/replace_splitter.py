"""
Replace Splitter 实现

切分出的每个片段都原样输出，相邻片段之间插入连接符。
"""
from typing import BinaryIO

from textsplit.libs.splitter.base_splitter import BaseSplitter
from textsplit.observability.logger import get_logger

logger = get_logger(__name__)


class ReplaceSplitter(BaseSplitter):
    """
    Replace 模式

    相当于把输入中的每个分隔符替换为连接符。
    连接符只出现在片段之间，不会出现在开头或结尾。
    """

    def split_stream(
        self,
        input: BinaryIO,
        output: BinaryIO,
        separator: str
    ) -> None:
        count = 0
        for piece in self.iter_pieces(input, separator):
            if count:
                self._write(output, self._joiner)
            self._write(output, piece)
            count += 1

        logger.info(f"Replace 切分完成: 输出 {count} 个片段")

    def get_strategy(self) -> str:
        """获取切分模式名称"""
        return "replace"
