"""
配置加载与校验模块

负责读取 config/settings.yaml 并解析为类型安全的 Settings 对象。
提供配置校验功能，确保字段取值合法。
"""
import codecs
import logging
import os
import yaml
from dataclasses import dataclass, field
from pathlib import Path


DEFAULT_SETTINGS_PATH = "config/settings.yaml"

# 16 KiB，与常见管道缓冲区大小一致
DEFAULT_CHUNK_SIZE = 16 * 1024


@dataclass
class SplitterConfig:
    """切分配置"""
    delimiter: str = "\n"
    chunk_size: int = DEFAULT_CHUNK_SIZE
    encoding: str = "utf-8"


@dataclass
class LoggingConfig:
    """日志配置"""
    log_level: str = "WARNING"
    log_file: str = ""


@dataclass
class Settings:
    """主配置类"""
    splitter: SplitterConfig = field(default_factory=SplitterConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _resolve_env_vars(value: str) -> str:
    """解析环境变量占位符，例如 ${VAR_NAME}"""
    if isinstance(value, str) and value.startswith("${") and value.endswith("}"):
        env_var = value[2:-1]
        return os.getenv(env_var, "")
    return value


def _load_yaml(path: str) -> dict:
    """加载 YAML 文件"""
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"配置文件不存在: {path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None or not isinstance(data, dict):
        raise ValueError(f"配置文件为空或格式错误: {path}")

    return data


def _parse_config(data: dict) -> Settings:
    """解析配置字典为 Settings 对象"""
    splitter_data = data.get("splitter") or {}
    splitter = SplitterConfig(
        delimiter=splitter_data.get("delimiter", "\n"),
        chunk_size=splitter_data.get("chunk_size", DEFAULT_CHUNK_SIZE),
        encoding=splitter_data.get("encoding", "utf-8"),
    )

    logging_data = data.get("logging") or {}
    logging_config = LoggingConfig(
        log_level=str(logging_data.get("log_level", "WARNING")).upper(),
        log_file=_resolve_env_vars(logging_data.get("log_file", "")),
    )

    return Settings(splitter=splitter, logging=logging_config)


def validate_settings(settings: Settings) -> None:
    """
    校验配置字段取值

    Args:
        settings: Settings 对象

    Raises:
        ValueError: 当字段取值非法时抛出，错误信息包含字段路径
    """
    errors = []

    if not isinstance(settings.splitter.delimiter, str):
        errors.append("splitter.delimiter")

    chunk_size = settings.splitter.chunk_size
    if isinstance(chunk_size, bool) or not isinstance(chunk_size, int) or chunk_size <= 0:
        errors.append("splitter.chunk_size")

    try:
        codecs.lookup(settings.splitter.encoding)
    except (LookupError, TypeError):
        errors.append("splitter.encoding")

    if not isinstance(logging.getLevelName(settings.logging.log_level), int):
        errors.append("logging.log_level")

    if errors:
        error_msg = "非法配置字段: " + ", ".join(errors)
        raise ValueError(error_msg)


def load_settings(path: str = DEFAULT_SETTINGS_PATH) -> Settings:
    """
    加载配置文件并返回 Settings 对象

    Args:
        path: 配置文件路径，默认为 "config/settings.yaml"

    Returns:
        Settings: 解析后的配置对象

    Raises:
        FileNotFoundError: 配置文件不存在
        ValueError: 配置文件格式错误或字段取值非法
    """
    data = _load_yaml(path)

    settings = _parse_config(data)

    validate_settings(settings)

    return settings
