"""
描述: 消息卡片交互模块
主要功能:
    - 交互控件: button、selectMenu、overflow、datePicker
    - 交互控件联合类型 ActionModule (按 tag 区分)
    - action 交互模块容器

卡片交互有效期为 30 天，超过有效期的卡片不再响应交互。
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import Field

from feishu_card.models.base import CardModel
from feishu_card.models.elements import ActionConfirm, ActionOption, ActionUrl, Text


ButtonType = Literal["default", "primary", "danger"]

ActionLayout = Literal["bisected", "trisection", "flow"]

SelectTag = Literal["select_static", "select_person"]

PickerTag = Literal["date_picker", "picker_time", "picker_datetime"]


# region 交互控件
class Button(CardModel):
    """按钮"""
    tag: Literal["button"] = "button"
    text: Text
    url: str | None = None
    multi_url: ActionUrl | None = None
    type: ButtonType | None = None
    value: dict[str, Any] | None = None
    confirm: ActionConfirm | None = None


class SelectMenu(CardModel):
    """
    下拉菜单

    select_static 与 select_person 共用同一结构，tag 必须显式给出，
    反序列化后原样保留。
    """
    tag: SelectTag
    placeholder: Text | None = None
    initial_option: str | None = None
    options: list[ActionOption] | None = None
    value: dict[str, Any] | None = None
    confirm: ActionConfirm | None = None


class OverFlow(CardModel):
    """折叠按钮组"""
    tag: Literal["overflow"] = "overflow"
    options: list[ActionOption]
    value: dict[str, Any] | None = None
    confirm: ActionConfirm | None = None


class DatePicker(CardModel):
    """
    日期/时间选择器

    date_picker 使用 initial_date (yyyy-MM-dd)，picker_time 使用 initial_time (HH:mm)，
    picker_datetime 使用 initial_datetime (yyyy-MM-dd HH:mm)。
    """
    tag: PickerTag
    initial_date: str | None = None
    initial_time: str | None = None
    initial_datetime: str | None = None
    placeholder: Text | None = None
    value: dict[str, Any] | None = None
    confirm: ActionConfirm | None = None


ActionModule = Annotated[
    Union[Button, SelectMenu, OverFlow, DatePicker],
    Field(discriminator="tag"),
]
# endregion


# region action 模块
class Action(CardModel):
    """交互模块，窄版样式下默认纵向排列"""
    tag: Literal["action"] = "action"
    actions: list[ActionModule]
    layout: ActionLayout | None = None
# endregion
