from __future__ import annotations

from feishu_card.models.actions import (
    Action,
    ActionModule,
    Button,
    DatePicker,
    OverFlow,
    SelectMenu,
)
from feishu_card.models.applink import (
    AppLink,
    AppQuery,
    Host,
    Path,
    QueryBot,
    QueryCalendarEventCreate,
    QueryCalendarView,
    QueryChat,
    QueryDocs,
    QueryMiniProgram,
    QueryPassportSsoLogin,
    QueryTodoDetail,
    QueryTodoView,
    QueryWebApp,
    QueryWebUrl,
    Scheme,
)
from feishu_card.models.base import CardModel
from feishu_card.models.content import (
    Column,
    ColumnSet,
    ColumnSetAction,
    Config,
    ContentModule,
    Div,
    Header,
    Hr,
    Href,
    Img,
    Markdown,
    Note,
)
from feishu_card.models.elements import (
    ActionCardLink,
    ActionConfirm,
    ActionOption,
    ActionUrl,
    DivField,
    Image,
    MarkdownText,
    PlainText,
    Text,
)
from feishu_card.models.message import (
    I18nElements,
    InteractiveMessage,
    Language,
    MsgInteractive,
    MsgText,
    MsgType,
    TextMessage,
    interactive_message,
    text_message,
)

__all__ = [
    "CardModel",
    "PlainText",
    "MarkdownText",
    "Text",
    "Image",
    "DivField",
    "ActionUrl",
    "ActionConfirm",
    "ActionOption",
    "ActionCardLink",
    "Button",
    "SelectMenu",
    "OverFlow",
    "DatePicker",
    "ActionModule",
    "Action",
    "Div",
    "Markdown",
    "Href",
    "Hr",
    "Img",
    "Note",
    "Column",
    "ColumnSet",
    "ColumnSetAction",
    "ContentModule",
    "Header",
    "Config",
    "Language",
    "I18nElements",
    "MsgInteractive",
    "MsgText",
    "TextMessage",
    "InteractiveMessage",
    "MsgType",
    "text_message",
    "interactive_message",
    "Scheme",
    "Host",
    "Path",
    "AppQuery",
    "QueryMiniProgram",
    "QueryWebApp",
    "QueryChat",
    "QueryCalendarView",
    "QueryCalendarEventCreate",
    "QueryTodoDetail",
    "QueryTodoView",
    "QueryDocs",
    "QueryBot",
    "QueryPassportSsoLogin",
    "QueryWebUrl",
    "AppLink",
]
