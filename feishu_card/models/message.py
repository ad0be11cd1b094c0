"""
描述: 消息体定义
主要功能:
    - 消息卡片 MsgInteractive (含多语言正文)
    - 消息类型信封 MsgType: msg_type 与 content 为同级字段
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import Field, field_validator, model_validator

from feishu_card.models.base import CardModel
from feishu_card.models.content import Config, ContentModule, Header
from feishu_card.models.elements import ActionCardLink


class Language(str, Enum):
    """语言代码，声明顺序即多语言正文的输出顺序"""

    ZH_CN = "zh_cn"
    EN_US = "en_us"

    @property
    def order(self) -> int:
        return list(Language).index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Language):
            return NotImplemented
        return self.order < other.order


I18nElements = dict[Language, list[ContentModule]]


# region 消息卡片
class MsgInteractive(CardModel):
    """
    消息卡片

    elements 与 i18n_elements 至少提供一个。
    """
    config: Config | None = None
    header: Header | None = None
    card_link: ActionCardLink | None = None
    elements: list[ContentModule] | None = None
    i18n_elements: I18nElements | None = None

    @field_validator("i18n_elements")
    @classmethod
    def _sort_languages(cls, value: I18nElements | None) -> I18nElements | None:
        if value is None:
            return None
        return {language: value[language] for language in sorted(value)}

    @model_validator(mode="after")
    def _require_body(self) -> "MsgInteractive":
        if self.elements is None and self.i18n_elements is None:
            raise ValueError("elements 与 i18n_elements 至少填写一个")
        return self
# endregion


# region 消息内容
class MsgText(CardModel):
    text: str


class MsgImage(CardModel):
    image_key: str


class MsgShareChat(CardModel):
    share_chat_id: str


class MsgShareUser(CardModel):
    user_id: str


class MsgAudio(CardModel):
    file_key: str


class MsgMedia(CardModel):
    file_key: str
    image_key: str | None = None  # 视频封面


class MsgFile(CardModel):
    file_key: str


class MsgSticker(CardModel):
    file_key: str
# endregion


# region 消息类型信封
class TextMessage(CardModel):
    msg_type: Literal["text"] = "text"
    content: MsgText


class InteractiveMessage(CardModel):
    msg_type: Literal["interactive"] = "interactive"
    content: MsgInteractive


class ImageMessage(CardModel):
    msg_type: Literal["image"] = "image"
    content: MsgImage


class ShareChatMessage(CardModel):
    msg_type: Literal["share_chat"] = "share_chat"
    content: MsgShareChat


class ShareUserMessage(CardModel):
    msg_type: Literal["share_user"] = "share_user"
    content: MsgShareUser


class AudioMessage(CardModel):
    msg_type: Literal["audio"] = "audio"
    content: MsgAudio


class MediaMessage(CardModel):
    msg_type: Literal["media"] = "media"
    content: MsgMedia


class FileMessage(CardModel):
    msg_type: Literal["file"] = "file"
    content: MsgFile


class StickerMessage(CardModel):
    msg_type: Literal["sticker"] = "sticker"
    content: MsgSticker


MsgType = Annotated[
    Union[
        TextMessage,
        InteractiveMessage,
        ImageMessage,
        ShareChatMessage,
        ShareUserMessage,
        AudioMessage,
        MediaMessage,
        FileMessage,
        StickerMessage,
    ],
    Field(discriminator="msg_type"),
]


def text_message(text: str) -> TextMessage:
    """构造文本消息"""
    return TextMessage(content=MsgText(text=text))


def interactive_message(card: MsgInteractive) -> InteractiveMessage:
    """构造卡片消息"""
    return InteractiveMessage(content=card)
# endregion
