"""
描述: 消息卡片正文内容
主要功能:
    - 内容模块: div、markdown、hr、img、note
    - 多列布局: column_set / column
    - 卡片标题 header 与功能属性 config
    - 正文元素联合类型 ContentModule (按 tag 区分)
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import Field, model_validator

from feishu_card.models.actions import Action, ActionModule
from feishu_card.models.base import CardModel
from feishu_card.models.elements import ActionUrl, DivField, Image, Text


TextAlign = Literal["left", "center", "right"]

ImgMode = Literal["fit_horizontal", "crop_center"]

ColumnVerticalAlign = Literal["top", "center", "bottom"]

# 无 tag 区分，按 Image、ActionModule 的顺序尝试，取第一个匹配
Extra = Annotated[Union[Image, ActionModule], Field(union_mode="left_to_right")]

# 彩色标题适合群聊；单聊中建议按状态使用语义色: green 成功、orange 警告、red 异常、grey 失效
HeaderTemplate = Literal[
    "blue",
    "wathet",
    "turquoise",
    "green",
    "yellow",
    "orange",
    "red",
    "carmine",
    "violet",
    "purple",
    "indigo",
    "grey",
]


# region 内容模块
class Div(CardModel):
    """内容模块，extra 可内嵌图片或单个交互控件"""
    tag: Literal["div"] = "div"
    text: Text
    fields: list[DivField] | None = None
    extra: Extra | None = None


class Href(CardModel):
    """markdown 中 $urlVal 占位链接的多端地址"""
    url_val: ActionUrl = Field(alias="urlVal")


class Markdown(CardModel):
    tag: Literal["markdown"] = "markdown"
    content: str
    text_align: TextAlign | None = None
    href: Href | None = None


class Hr(CardModel):
    """分割线"""
    tag: Literal["hr"] = "hr"


class Img(CardModel):
    """图片模块"""
    tag: Literal["img"] = "img"
    img_key: str
    alt: Text
    title: Text | None = None
    custom_width: int | None = Field(default=None, ge=0, le=65535)
    compact_width: bool | None = None
    mode: ImgMode | None = None
    preview: bool | None = None


class Note(CardModel):
    """备注模块，elements 全部为文本或全部为图片"""
    tag: Literal["note"] = "note"
    elements: Union[list[Text], list[Image]]
# endregion


# region 多列布局
class ColumnSetAction(CardModel):
    """点击布局容器时的跳转配置，容器内交互组件优先响应"""
    multi_url: ActionUrl


class Column(CardModel):
    """
    列

    elements 要么全部是嵌套的 column_set，要么全部是普通内容模块。
    """
    tag: Literal["column"] = "column"
    elements: Annotated[
        Union[list[ColumnSet], list[ContentModule]],
        Field(union_mode="left_to_right"),
    ] | None = None
    width: str | None = None
    weight: int | None = Field(default=None, ge=0, le=255)
    vertical_align: ColumnVerticalAlign | None = None

    @model_validator(mode="after")
    def _check_homogeneous(self) -> "Column":
        elements = self.elements or []
        nested = [item for item in elements if isinstance(item, ColumnSet)]
        if nested and len(nested) != len(elements):
            raise ValueError("column.elements 不能混合 column_set 与其他内容模块")
        return self


class ColumnSet(CardModel):
    """多列布局容器"""
    tag: Literal["column_set"] = "column_set"
    columns: list[Column] | None = None
    flex_mode: str | None = None
    background_style: str | None = None
    horizontal_spacing: str | None = None
    action: ColumnSetAction | None = None
# endregion


ContentModule = Annotated[
    Union[Div, Markdown, Hr, Img, Note, ColumnSet, Action],
    Field(discriminator="tag"),
]

Column.model_rebuild()
ColumnSet.model_rebuild()


# region 标题与配置
class Header(CardModel):
    """卡片标题，title 仅支持 plain_text"""
    title: Text
    template: HeaderTemplate | None = None


class Config(CardModel):
    enable_forward: bool | None = None  # 是否允许转发
    update_multi: bool | None = None  # 是否为共享卡片
# endregion
