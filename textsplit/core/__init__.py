"""
Core 模块

配置加载与错误类型定义。
"""
