"""
描述: 卡片序列化边界
主要功能:
    - 将 dict / JSON 文本解析为任意模型或联合类型
    - 将模型导出为 dict / JSON 文本
    - 将校验失败统一转换为 SchemaError
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError

from feishu_card.config import get_settings
from feishu_card.exceptions import SchemaError
from feishu_card.models.actions import ActionModule
from feishu_card.models.base import CardModel
from feishu_card.models.content import ContentModule
from feishu_card.models.elements import Text
from feishu_card.models.message import MsgType


logger = logging.getLogger(__name__)


# region TypeAdapter 缓存
_UNION_NAMES: dict[int, str] = {
    id(ActionModule): "ActionModule",
    id(ContentModule): "ContentModule",
    id(Text): "Text",
    id(MsgType): "MsgType",
}

# 以 id 为键 (Annotated 联合类型不保证可哈希)，同时持有类型引用防止 id 被复用
_ADAPTERS: dict[int, tuple[Any, TypeAdapter[Any]]] = {}


def _adapter(tp: Any) -> TypeAdapter[Any]:
    cached = _ADAPTERS.get(id(tp))
    if cached is None:
        cached = _ADAPTERS.setdefault(id(tp), (tp, TypeAdapter(tp)))
    return cached[1]


def _type_name(tp: Any) -> str:
    if id(tp) in _UNION_NAMES:
        return _UNION_NAMES[id(tp)]
    return getattr(tp, "__name__", None) or repr(tp)
# endregion


# region 解析
def load(tp: Any, data: Any) -> Any:
    """
    按类型解析数据

    参数:
        tp: 模型类或联合类型 (如 ActionModule)
        data: dict，或 JSON 文本 (str / bytes)
    返回:
        解析后的模型实例
    异常:
        SchemaError: 未知 tag、缺少必填字段或字段类型不符
    """
    adapter = _adapter(tp)
    try:
        if isinstance(data, (str, bytes, bytearray)):
            return adapter.validate_json(data)
        return adapter.validate_python(data)
    except ValidationError as exc:
        error = SchemaError.from_validation_error(_type_name(tp), exc)
        logger.debug(
            "Schema 解析失败: %s",
            error.message,
            extra={"schema_model": error.model, "schema_field": error.field},
        )
        raise error from exc


def parse_text(data: Any) -> Any:
    return load(Text, data)


def parse_action_module(data: Any) -> Any:
    return load(ActionModule, data)


def parse_content_module(data: Any) -> Any:
    return load(ContentModule, data)


def parse_message(data: Any) -> Any:
    """解析 msg_type + content 消息信封"""
    return load(MsgType, data)
# endregion


# region 导出
def dump(value: CardModel) -> dict[str, Any]:
    return value.to_dict()


def dumps(value: CardModel) -> str:
    """导出 JSON 文本，ensure_ascii / indent 读取配置 serialization"""
    settings = get_settings().serialization
    return json.dumps(
        value.to_dict(),
        ensure_ascii=settings.ensure_ascii,
        indent=settings.indent,
    )
# endregion
