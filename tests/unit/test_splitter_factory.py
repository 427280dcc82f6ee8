"""
Splitter Factory 测试

测试索引描述的解析规则和工厂的模式选择。
"""
import io

import pytest

from textsplit.core.errors import ParseError
from textsplit.core.settings import Settings, SplitterConfig
from textsplit.libs.splitter.base_splitter import BaseSplitter
from textsplit.libs.splitter.indices_splitter import IndicesSplitter
from textsplit.libs.splitter.replace_splitter import ReplaceSplitter
from textsplit.libs.splitter.splitter_factory import (
    MAX_INDEX,
    SplitterFactory,
    parse_indices,
)


def test_factory_creates_replace_splitter_without_idx():
    """测试未提供索引描述时创建 Replace 模式"""
    splitter = SplitterFactory.create(None, "\n")

    assert isinstance(splitter, ReplaceSplitter)
    assert splitter.get_strategy() == "replace"
    assert splitter.get_joiner() == "\n"
    assert splitter == ReplaceSplitter("\n")


def test_factory_creates_indices_splitter():
    """测试提供索引描述时创建 Indices 模式"""
    splitter = SplitterFactory.create("2", "\n")

    assert isinstance(splitter, IndicesSplitter)
    assert splitter.get_strategy() == "indices"
    assert splitter.get_joiner() == "\n"
    assert splitter.get_indices() == frozenset({2})


@pytest.mark.parametrize(
    "idx, expected",
    [
        ("2", {2}),
        ("2, 3,4 ", {2, 3, 4}),
        ("1-3", {1, 2, 3}),
        ("1-3,7,8, 9-12 ", {1, 2, 3, 7, 8, 9, 10, 11, 12}),
        ("1-3,7,8,7-12 ", {1, 2, 3, 7, 8, 9, 10, 11, 12}),
        ("0", {0}),
        ("5,5,5", {5}),
        ("+4", {4}),
    ],
)
def test_parse_indices_valid(idx, expected):
    """测试合法索引描述得到去重后的并集"""
    assert parse_indices(idx) == frozenset(expected)


@pytest.mark.parametrize(
    "idx",
    [
        "1-3,7,8,12-7",
        "3-3",
        "0-0",
    ],
)
def test_parse_indices_range_begin_not_smaller(idx):
    """测试区间起点不小于终点时报错"""
    with pytest.raises(ParseError, match="range begin value must be smaller than end value"):
        parse_indices(idx)


@pytest.mark.parametrize(
    "idx",
    [
        "1,2,a",
        "",
        "1,,2",
        "-1",
        "3-",
        "1-2-3",
        "1 - 3",
        "1_0",
        "1.5",
        "４",
    ],
)
def test_parse_indices_invalid(idx):
    """测试非法索引描述报 ParseError"""
    with pytest.raises(ParseError):
        parse_indices(idx)


def test_parse_indices_upper_bound():
    """测试序号上限为 32 位无符号整数"""
    assert parse_indices(str(MAX_INDEX)) == frozenset({MAX_INDEX})

    with pytest.raises(ParseError, match="too large"):
        parse_indices(str(MAX_INDEX + 1))


def test_parse_error_is_value_error():
    """测试 ParseError 同时是 ValueError"""
    with pytest.raises(ValueError):
        SplitterFactory.create("a", "\n")


def test_range_error_message_names_token():
    """测试区间错误信息包含出错的那一项"""
    with pytest.raises(ParseError) as exc_info:
        SplitterFactory.create("1, 9-2", "\n")

    assert str(exc_info.value) == "range begin value must be smaller than end value: 9-2"


def test_factory_from_settings_uses_config_defaults():
    """测试从配置创建时使用配置中的连接符、块大小和编码"""
    settings = Settings(
        splitter=SplitterConfig(delimiter=",", chunk_size=8, encoding="latin-1")
    )

    splitter = SplitterFactory.from_settings(settings)

    assert isinstance(splitter, BaseSplitter)
    assert splitter.get_joiner() == ","
    assert splitter.get_chunk_size() == 8
    assert splitter.get_encoding() == "iso8859-1"


def test_factory_from_settings_joiner_override():
    """测试命令行连接符优先于配置"""
    settings = Settings()

    splitter = SplitterFactory.from_settings(settings, idx="1-2", joiner="|")

    assert isinstance(splitter, IndicesSplitter)
    assert splitter.get_joiner() == "|"
    assert splitter.get_indices() == frozenset({1, 2})


def test_factory_from_settings_empty_joiner_is_kept():
    """测试空字符串连接符不会被配置默认值覆盖"""
    splitter = SplitterFactory.from_settings(Settings(), joiner="")

    assert splitter.get_joiner() == ""


def test_base_splitter_interface():
    """测试 BaseSplitter 是抽象类"""
    with pytest.raises(TypeError):
        BaseSplitter("\n")


def test_parse_indices_full_range_keeps_ranges():
    """测试覆盖全部序号的区间不会展开成逐个整数"""
    indices = parse_indices(f"0-{MAX_INDEX}, 5")

    assert indices.ranges() == ((0, MAX_INDEX),)
    assert MAX_INDEX in indices
    assert len(indices) == MAX_INDEX + 1


def test_factory_full_range_selects_everything():
    """测试全范围索引等同于输出全部片段"""
    splitter = SplitterFactory.create(f"0-{MAX_INDEX}", "\n")
    output = io.BytesIO()

    splitter.split_stream(io.BytesIO(b"a b c"), output, " ")

    assert output.getvalue() == b"a\nb\nc"
