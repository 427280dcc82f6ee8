#!/usr/bin/env python3
"""
textsplit 启动入口

等价于安装后的 `textsplit` 命令，方便在源码目录直接运行：
    python main.py --split " " input.txt
"""
import sys

from textsplit.cli import main


if __name__ == "__main__":
    sys.exit(main())
