"""
描述: 消息卡片可内嵌元素
主要功能:
    - text (plain_text / lark_md)
    - image、field
    - 交互元素的公共结构: multi_url、confirm、option、card_link
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import Field, model_validator

from feishu_card.models.base import CardModel


# region text
class _TextContent(CardModel):
    tag: str
    content: str
    lines: int | None = Field(default=None, ge=0)  # 最大显示行数，超出省略


class PlainText(_TextContent):
    """纯文本"""
    tag: Literal["plain_text"] = "plain_text"


class MarkdownText(_TextContent):
    """lark_md 文本"""
    tag: Literal["lark_md"] = "lark_md"


Text = Annotated[Union[PlainText, MarkdownText], Field(discriminator="tag")]
# endregion


# region image / field
class Image(CardModel):
    """可内嵌的图片元素 (div.extra、note.elements)"""
    tag: Literal["img"] = "img"
    img_key: str
    alt: Text
    preview: bool | None = None


class DivField(CardModel):
    """div 中并排展示的字段"""
    is_short: bool
    text: Text
# endregion


# region 交互公共结构
class ActionUrl(CardModel):
    """
    多端跳转链接 multi_url

    四个端的链接需同时提供。
    """
    url: str
    android_url: str
    ios_url: str
    pc_url: str


class ActionConfirm(CardModel):
    """点击后的二次确认弹框"""
    title: Text
    text: Text


class ActionOption(CardModel):
    """
    选项 option

    属性:
        text: 选项显示内容，待选人员时可省略
        value: 选中后回传业务方的数据
        url: 仅 overflow 支持，跳转链接
        multi_url: 仅 overflow 支持，多端跳转链接
    """
    text: Text | None = None
    value: str | None = None
    url: str | None = None
    multi_url: ActionUrl | None = None

    @model_validator(mode="after")
    def _check_target(self) -> "ActionOption":
        if self.url is not None and self.multi_url is not None:
            raise ValueError("url 与 multi_url 互斥")
        if self.value is None and self.url is None and self.multi_url is None:
            raise ValueError("value、url、multi_url 至少填写一个")
        return self


class ActionCardLink(CardModel):
    """整张卡片的点击跳转 card_link"""
    url: str
    pc_url: str | None = None
    ios_url: str | None = None
    android_url: str | None = None
# endregion
