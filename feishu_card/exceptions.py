"""
异常处理模块

统一定义卡片 Schema 相关异常，便于调用方精确捕获
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError


# ============================================
# region 基础异常
# ============================================
class FeishuCardError(Exception):
    """feishu_card 基础异常类"""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"
# endregion
# ============================================


# ============================================
# region Schema 相关异常
# ============================================
def _dotted(loc: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc)


class SchemaError(FeishuCardError):
    """
    卡片/AppLink 数据不符合 Schema

    覆盖三类情况: 未知 tag、缺少必填字段、字段值无法解析为声明类型。
    """

    def __init__(
        self,
        message: str,
        model: str | None = None,
        field: str | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        details: dict[str, Any] = {}
        if model:
            details["model"] = model
        if field:
            details["field"] = field
        if errors:
            details["errors"] = errors
        super().__init__(message, code="SCHEMA_ERROR", details=details)
        self.model = model
        self.field = field
        self.errors = errors or []

    @classmethod
    def from_validation_error(cls, model: str, exc: ValidationError) -> "SchemaError":
        errors = [
            {
                "loc": _dotted(tuple(item.get("loc") or ())),
                "type": item.get("type", ""),
                "msg": item.get("msg", ""),
            }
            for item in exc.errors()
        ]
        first = errors[0] if errors else {"loc": "", "msg": str(exc)}
        field = first["loc"] or None
        location = f" ({field})" if field else ""
        return cls(
            message=f"无法解析 {model}{location}: {first['msg']}",
            model=model,
            field=field,
            errors=errors,
        )
# endregion
# ============================================


# ============================================
# region 配置相关异常
# ============================================
class ConfigError(FeishuCardError):
    """配置错误"""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code="CONFIG_ERROR",
            details={"config_key": config_key} if config_key else {},
        )
# endregion
# ============================================
