"""
描述: 卡片模型基类
主要功能:
    - 不可变值对象配置
    - 统一的线上格式导出 (别名 + 省略空字段)
    - 构造与解析失败统一抛出 SchemaError
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from feishu_card.exceptions import SchemaError


class CardModel(BaseModel):
    """所有卡片/AppLink 模型的基类"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def __init__(self, /, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise SchemaError.from_validation_error(type(self).__name__, exc) from exc

    @classmethod
    def model_validate(cls, obj: Any, *args: Any, **kwargs: Any) -> Any:
        try:
            return super().model_validate(obj, *args, **kwargs)
        except ValidationError as exc:
            raise SchemaError.from_validation_error(cls.__name__, exc) from exc

    @classmethod
    def model_validate_json(cls, json_data: Any, *args: Any, **kwargs: Any) -> Any:
        try:
            return super().model_validate_json(json_data, *args, **kwargs)
        except ValidationError as exc:
            raise SchemaError.from_validation_error(cls.__name__, exc) from exc

    def to_dict(self) -> dict[str, Any]:
        """导出为飞书线上 JSON 结构，缺省的可选字段直接省略而不是输出 null"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
