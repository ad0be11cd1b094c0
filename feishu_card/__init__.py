"""
描述: 飞书消息卡片与 AppLink 数据模型
主要功能:
    - 消息卡片正文、交互控件的 Pydantic 模型
    - msg_type + content 消息信封
    - AppLink 协议 URL 构造与解析
"""

from __future__ import annotations

from feishu_card.codec import (
    dump,
    dumps,
    load,
    parse_action_module,
    parse_content_module,
    parse_message,
    parse_text,
)
from feishu_card.exceptions import ConfigError, FeishuCardError, SchemaError

__all__ = [
    "load",
    "dump",
    "dumps",
    "parse_text",
    "parse_action_module",
    "parse_content_module",
    "parse_message",
    "FeishuCardError",
    "SchemaError",
    "ConfigError",
]

__version__ = "0.1.0"
