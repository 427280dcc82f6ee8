"""
错误类型模块

定义 textsplit 的错误分类：
- ParseError: --idx 索引描述格式错误
- DecodeError: 输入字节无法按配置的编码解码

I/O 错误直接使用内置的 OSError 体系，不做二次包装。
"""


class TextSplitError(Exception):
    """textsplit 所有自定义错误的基类"""


class ParseError(TextSplitError, ValueError):
    """索引描述（例如 "1-3,7"）无法解析"""


class DecodeError(TextSplitError, ValueError):
    """
    输入内容解码失败

    Attributes:
        encoding: 使用的编码名称
        offset: 出错字节在整个输入流中的偏移量（无法确定时为 None）
    """

    def __init__(self, message: str, encoding: str = "utf-8", offset=None):
        super().__init__(message)
        self.encoding = encoding
        self.offset = offset
