"""
textsplit

一个极简的命令行工具：按字面分隔符流式切分字节流，
再用新的连接符重新拼接，或按索引/区间挑选片段输出。
"""

__version__ = "0.1.0"
