"""
描述: feishu_card 全局配置加载器
主要功能:
    - 统一管理序列化与 AppLink 配置 (Settings)
    - 支持 YAML 文件加载与环境变量覆盖 (Env Override)
    - 提供 Pydantic 类型校验
"""

from __future__ import annotations

import os
import re
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from feishu_card.exceptions import ConfigError


_ENV_PATTERN = re.compile(r"\$\{([^}]+)\}")


# region 配置模型定义
class AppLinkSettings(BaseModel):
    """AppLink 配置"""
    host: Literal["applink.feishu.cn", "applink.larksuite.com"] = "applink.feishu.cn"


class SerializationSettings(BaseModel):
    """JSON 序列化配置"""
    ensure_ascii: bool = False
    indent: int | None = None


class LoggingSettings(BaseModel):
    """日志系统配置"""
    level: str = "INFO"
    format: str = "json"


class Settings(BaseModel):
    """配置聚合根"""
    applink: AppLinkSettings = Field(default_factory=AppLinkSettings)
    serialization: SerializationSettings = Field(default_factory=SerializationSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
# endregion


# region 配置加载逻辑
def _expand_env(value: Any) -> Any:
    if isinstance(value, str):
        def replace(match: re.Match[str]) -> str:
            expr = match.group(1)
            if ":-" in expr:
                key, default = expr.split(":-", 1)
                return os.getenv(key, default)
            return os.getenv(expr, "")

        return _ENV_PATTERN.sub(replace, value)
    if isinstance(value, list):
        return [_expand_env(item) for item in value]
    if isinstance(value, dict):
        return {key: _expand_env(val) for key, val in value.items()}
    return value


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"配置文件解析失败: {exc}", config_key=str(path)) from exc
    if not isinstance(data, dict):
        raise ConfigError("配置文件顶层必须是映射", config_key=str(path))
    return _expand_env(data)


def _set_nested(data: dict[str, Any], keys: list[str], value: Any) -> None:
    current = data
    for key in keys[:-1]:
        current = current.setdefault(key, {})
    current[keys[-1]] = value


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """
    应用环境变量覆盖

    优先级: 显式环境变量 > config.yaml > 默认值
    """
    mapping = {
        "FEISHU_CARD_APPLINK_HOST": ["applink", "host"],
        "FEISHU_CARD_JSON_ENSURE_ASCII": ["serialization", "ensure_ascii"],
        "FEISHU_CARD_JSON_INDENT": ["serialization", "indent"],
        "FEISHU_CARD_LOG_LEVEL": ["logging", "level"],
        "FEISHU_CARD_LOG_FORMAT": ["logging", "format"],
    }
    for env_key, path in mapping.items():
        env_value = os.getenv(env_key)
        if env_value is not None and env_value != "":
            _set_nested(data, path, env_value)
    return data


def load_settings(config_path: str | None = None) -> Settings:
    """加载并验证完整配置"""
    path = Path(config_path or os.getenv("CONFIG_PATH", "config.yaml"))
    data = _load_yaml(path)
    data = _apply_env_overrides(data)
    try:
        return Settings.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"配置校验失败: {exc.errors()[0]['msg']}", config_key=str(path)) from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """获取单例配置对象 (LRU Cache)"""
    return load_settings()
# endregion
