"""
命令行入口

按字面分隔符切分输入，再用连接符重新拼接或按索引挑选片段。
结果以原始字节写到 stdout；日志和错误信息写到 stderr。
"""
import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from textsplit import __version__
from textsplit.core.settings import DEFAULT_SETTINGS_PATH, Settings, load_settings
from textsplit.libs.splitter.splitter_factory import SplitterFactory
from textsplit.observability.logger import get_logger, setup_logging

logger = get_logger(__name__)

_RED = "\033[31m"
_BOLD_RED = "\033[1;31m"
_RESET = "\033[0m"


def build_parser() -> argparse.ArgumentParser:
    """构建命令行参数解析器"""
    parser = argparse.ArgumentParser(
        prog="textsplit",
        description="An extremely simple CLI tool to split string contents.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  # split on spaces, one word per line
  echo "hello world" | textsplit --split " "

  # keep only the second and fourth comma-separated fields
  textsplit --split "," --idx 1,3 --delimiter "," data.csv

  # keep pieces 0 to 4 and 10
  textsplit -s ";" -i "0-4, 10" input.txt
        """
    )

    parser.add_argument(
        "-s", "--split",
        type=str,
        required=True,
        help="The string on which the input is split"
    )

    parser.add_argument(
        "-d", "--delimiter",
        type=str,
        default=None,
        help="The delimiter for the split elements (default: newline)"
    )

    parser.add_argument(
        "-i", "--idx",
        type=str,
        default=None,
        help=(
            "Only select a given index, indices or index ranges (separated by ','); "
            "ranges are defined in the form of {start}-{end} (i.e. 3-7)"
        )
    )

    parser.add_argument(
        "file",
        nargs="?",
        default=None,
        help="A file to be read as input; if not provided, stdin is used as input"
    )

    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help=f"Settings file (default: {DEFAULT_SETTINGS_PATH} when present)"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug information to stderr"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    return parser


def resolve_settings(config_path: Optional[str]) -> Settings:
    """
    加载配置

    显式指定的配置文件必须存在；未指定时若默认配置文件存在则加载，
    否则使用内置默认值。
    """
    if config_path is not None:
        return load_settings(config_path)
    if Path(DEFAULT_SETTINGS_PATH).is_file():
        return load_settings(DEFAULT_SETTINGS_PATH)
    return Settings()


def format_error(err: BaseException, stream: TextIO) -> str:
    """把错误渲染为单行 "error: <message>"，终端输出时加颜色"""
    message = str(err) or type(err).__name__
    if hasattr(stream, "isatty") and stream.isatty():
        return f"{_BOLD_RED}error:{_RESET} {_RED}{message}{_RESET}"
    return f"error: {message}"


def run(args: argparse.Namespace) -> None:
    """执行一次完整的切分"""
    settings = resolve_settings(args.config)
    setup_logging(settings.logging, verbose=args.verbose)

    splitter = SplitterFactory.from_settings(
        settings, idx=args.idx, joiner=args.delimiter
    )
    logger.debug(f"Splitter: {splitter!r}, 分隔符: {args.split!r}")

    output = sys.stdout.buffer

    if args.file is None:
        logger.debug("从 stdin 读取输入")
        splitter.split_stream(sys.stdin.buffer, output, args.split)
    else:
        logger.debug(f"从文件读取输入: {args.file}")
        with open(args.file, "rb") as f:
            splitter.split_stream(f, output, args.split)

    output.flush()


def _silence_stdout() -> None:
    """stdout 的读端已关闭：把 stdout 重定向到 devnull，避免退出时再次刷新报错"""
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def main(argv: Optional[List[str]] = None) -> int:
    """命令行主入口，返回进程退出码"""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        run(args)
    except BrokenPipeError:
        logger.debug("stdout 已被下游关闭，停止输出")
        _silence_stdout()
        return 1
    except Exception as e:
        logger.debug("切分失败", exc_info=True)
        print(format_error(e, sys.stderr), file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
