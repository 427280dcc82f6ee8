"""
Libs 模块

可插拔的切分实现。
"""
