"""
描述: AppLink 协议模型
主要功能:
    - 固定协议与域名、受限路径枚举
    - 各路径的查询参数结构及其扁平化
    - 拼装/解析 AppLink URL

AppLink 是一个 URL 协议，可用于打开飞书或其中某个功能。
模型本身不做百分号编码，summary、url、lk_target_url 等值需调用方预先 encode。
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Literal

from pydantic import Field

from feishu_card.config import get_settings
from feishu_card.exceptions import SchemaError
from feishu_card.models.base import CardModel


logger = logging.getLogger(__name__)


# region 协议 / 域名 / 路径
class Scheme(str, Enum):
    HTTPS = "https"


class Host(str, Enum):
    FEISHU = "applink.feishu.cn"
    LARK = "applink.larksuite.com"


class Path(str, Enum):
    """路径，不同路径打开不同功能"""

    FEISHU = "/client/op/open"  # 打开飞书
    QR_CODE = "/client/qrcode/main"  # 扫一扫
    MINI_PROGRAM = "/client/mini_program/open"
    WEB_APP = "/client/web_app/open"
    CHAT = "/client/chat/open"
    CALENDAR = "/client/calendar/open"
    CALENDAR_VIEW = "/client/calendar/view"  # 支持指定视图和日期
    CALENDAR_EVENT_CREATE = "/client/calendar/event/create"
    CALENDAR_ACCOUNT = "/client/calendar/account"  # 第三方日历账户管理
    TODO = "/client/todo/open"
    TODO_CREATE = "/client/todo/create"
    TODO_DETAIL = "/client/todo/detail"
    TODO_VIEW = "/client/todo/view"
    DOCS = "/client/docs/open"
    BOT = "/client/bot/open"
    PASSPORT_SSO_LOGIN = "/client/passport/sso_login"
    WEB_URL = "/client/web_url/open"  # PC 端内 web-view 打开指定 URL
# endregion


# region 查询参数
def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class AppQuery(CardModel):
    """查询参数结构基类"""

    def to_query(self) -> dict[str, str]:
        """
        扁平化为 AppLink query

        使用线上字段名，省略未设置字段；bool 输出 true/false，整数输出十进制。
        """
        data = self.model_dump(by_alias=True, exclude_none=True)
        return {key: _query_value(value) for key, value in data.items()}


MiniProgramMode = Literal["sidebar-semi", "appCenter", "window", "window-semi"]

WebAppMode = Literal["appCenter", "window", "sidebar", "window-semi"]

WebUrlMode = Literal["sidebar-semi", "window"]

CalendarViewType = Literal["day", "three_day", "week", "month", "meeting", "list"]

TodoViewTab = Literal["all", "assign_to_me", "assign_from_me", "followed", "completed"]


class QueryMiniProgram(AppQuery):
    """
    打开小程序

    path_android / path_ios / path_pc 在对应客户端上优先于 path。
    height、width 仅在 mode 为 window 时生效；relaunch 仅在传入 path 时生效。
    """
    app_id: str = Field(alias="appId")
    mode: MiniProgramMode | None = None
    height: int | None = Field(default=None, ge=0)
    width: int | None = Field(default=None, ge=0)
    relaunch: bool | None = None
    path: str | None = None
    path_android: str | None = None
    path_ios: str | None = None
    path_pc: str | None = None
    min_lk_ver: str | None = None  # x.y.z，低于该版本显示兼容页


class QueryWebApp(AppQuery):
    """
    打开网页应用

    path 替换 H5 应用 URL 的 path 部分；页面路径含 # 或 ? 时改用 lk_target_url。
    """
    app_id: str = Field(alias="appId")
    mode: WebAppMode | None = None
    height: int | None = Field(default=None, ge=0)
    width: int | None = Field(default=None, ge=0)
    path: str | None = None
    path_android: str | None = None
    path_ios: str | None = None
    path_pc: str | None = None
    lk_target_url: str | None = None
    reload: bool | None = None


class QueryChat(AppQuery):
    """打开聊天页面，openId 与 openChatId 仅填其一"""
    open_id: str | None = Field(default=None, alias="openId")
    open_chat_id: str | None = Field(default=None, alias="openChatId")


class QueryCalendarView(AppQuery):
    type: CalendarViewType | None = None
    date: int | None = Field(default=None, ge=0)  # unix 时间戳


class QueryCalendarEventCreate(AppQuery):
    start_time: int | None = Field(default=None, ge=0, alias="startTime")
    end_time: int | None = Field(default=None, ge=0, alias="endTime")
    summary: str | None = None


class QueryTodoDetail(AppQuery):
    guid: str
    mode: str | None = None  # 默认 im 场景打开；mode=app 在任务 tab 中打开


class QueryTodoView(AppQuery):
    tab: TodoViewTab


class QueryDocs(AppQuery):
    url: str


class QueryBot(AppQuery):
    app_id: str = Field(alias="appId")


class QueryPassportSsoLogin(AppQuery):
    sso_domain: str
    tenant_name: str


class QueryWebUrl(AppQuery):
    url: str
    mode: WebUrlMode
    height: int | None = Field(default=None, ge=0)
    width: int | None = Field(default=None, ge=0)


QUERY_TYPES: dict[Path, type[AppQuery]] = {
    Path.MINI_PROGRAM: QueryMiniProgram,
    Path.WEB_APP: QueryWebApp,
    Path.CHAT: QueryChat,
    Path.CALENDAR_VIEW: QueryCalendarView,
    Path.CALENDAR_EVENT_CREATE: QueryCalendarEventCreate,
    Path.TODO_DETAIL: QueryTodoDetail,
    Path.TODO_VIEW: QueryTodoView,
    Path.DOCS: QueryDocs,
    Path.BOT: QueryBot,
    Path.PASSPORT_SSO_LOGIN: QueryPassportSsoLogin,
    Path.WEB_URL: QueryWebUrl,
}
# endregion


# region AppLink
class AppLink(CardModel):
    scheme: Scheme = Scheme.HTTPS
    host: Host = Host.FEISHU
    path: Path
    query: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def build(
        cls,
        path: Path,
        query: AppQuery | None = None,
        host: Host | None = None,
    ) -> "AppLink":
        """
        按路径与查询参数结构构造 AppLink

        参数:
            path: 目标功能路径
            query: 与 path 对应的查询参数结构
            host: 域名，缺省读取配置 applink.host
        """
        expected = QUERY_TYPES.get(path)
        if query is not None and type(query) is not expected:
            raise SchemaError(
                f"路径 {path.value} 不接受 {type(query).__name__} 参数",
                model="AppLink",
                field="query",
            )
        if host is None:
            host = Host(get_settings().applink.host)
        return cls(host=host, path=path, query=query.to_query() if query is not None else {})

    @property
    def url(self) -> str:
        base = f"{self.scheme.value}://{self.host.value}{self.path.value}"
        if not self.query:
            return base
        pairs = "&".join(f"{key}={value}" for key, value in self.query.items())
        return f"{base}?{pairs}"

    def __str__(self) -> str:
        return self.url

    @classmethod
    def parse(cls, url: str) -> "AppLink":
        """
        解析 AppLink URL，与 url 属性互逆，不做解码

        url 属性不会产生 fragment，带 # 的链接视为非法而不是并入最后一个参数值。
        """
        scheme, sep, rest = url.partition("://")
        if not sep or "#" in rest:
            logger.debug("AppLink 解析失败: %s", url, extra={"schema_model": "AppLink"})
            raise SchemaError(f"不是合法的 AppLink: {url}", model="AppLink")
        location, _, raw_query = rest.partition("?")
        host, slash, path = location.partition("/")
        query: dict[str, str] = {}
        for pair in filter(None, raw_query.split("&")):
            key, _, value = pair.partition("=")
            query[key] = value
        try:
            parts = (Scheme(scheme), Host(host), Path(f"{slash}{path}"))
        except ValueError as exc:
            logger.debug("AppLink 解析失败: %s", url, extra={"schema_model": "AppLink"})
            raise SchemaError(f"不是合法的 AppLink: {url} ({exc})", model="AppLink") from exc
        return cls(scheme=parts[0], host=parts[1], path=parts[2], query=query)
# endregion
