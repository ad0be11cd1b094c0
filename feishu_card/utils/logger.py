"""
描述: 日志工具库
主要功能:
    - JSON 格式化输出 (附带 Schema 解析上下文)
    - 统一日志配置初始化

库本身只通过 logging.getLogger(__name__) 记录日志，不在导入时配置 handler。
"""

from __future__ import annotations

import json
import logging
from typing import Any

from feishu_card.config import LoggingSettings


# 通过 logger.debug(..., extra={...}) 传入的 Schema 上下文字段
CONTEXT_FIELDS = ("schema_model", "schema_field")


# region 日志 Formatter
class JsonFormatter(logging.Formatter):
    """JSON 日志格式化器"""
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in CONTEXT_FIELDS:
            value = getattr(record, key, None)
            if value is not None:
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)
# endregion


# region 日志初始化
def setup_logging(settings: LoggingSettings) -> logging.Handler:
    """
    初始化日志系统，供宿主应用调用

    会移除并关闭根 logger 上已有的全部 handler (basicConfig force=True)，
    宿主已自行配置日志时不要调用，改为只给 feishu_card logger 挂 JsonFormatter。

    参数:
        settings: 日志配置对象
    返回:
        新安装的 handler
    """
    level = getattr(logging, settings.level.upper(), logging.INFO)
    handler = logging.StreamHandler()
    if settings.format == "json":
        handler.setFormatter(JsonFormatter())
    logging.basicConfig(level=level, handlers=[handler], force=True)
    return handler
# endregion
