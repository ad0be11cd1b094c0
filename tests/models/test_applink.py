import pytest

from feishu_card import SchemaError
from feishu_card.config import get_settings
from feishu_card.models.applink import (
    QUERY_TYPES,
    AppLink,
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


def test_chat_link_uses_open_chat_id_and_omits_open_id():
    link = AppLink.build(Path.CHAT, QueryChat(open_chat_id="oc_123"))
    assert "openChatId=oc_123" in link.url
    assert "openId" not in link.url
    assert link.url == "https://applink.feishu.cn/client/chat/open?openChatId=oc_123"
    assert str(link) == link.url


def test_link_without_query_has_no_question_mark():
    link = AppLink.build(Path.QR_CODE)
    assert link.url == "https://applink.feishu.cn/client/qrcode/main"


def test_mini_program_query_stringifies_values():
    query = QueryMiniProgram(
        app_id="cli_9f",
        mode="window",
        height=600,
        width=800,
        relaunch=True,
        path="pages/home",
        path_pc="pages/pc_home",
    )
    assert query.to_query() == {
        "appId": "cli_9f",
        "mode": "window",
        "height": "600",
        "width": "800",
        "relaunch": "true",
        "path": "pages/home",
        "path_pc": "pages/pc_home",
    }


def test_web_app_query_false_boolean():
    query = QueryWebApp(app_id="cli_1", reload=False, lk_target_url="https%3A%2F%2Fexample.com%2F%23%2Fa")
    assert query.to_query() == {
        "appId": "cli_1",
        "lk_target_url": "https%3A%2F%2Fexample.com%2F%23%2Fa",
        "reload": "false",
    }


def test_calendar_queries_use_vendor_names():
    assert QueryCalendarView(type="week", date=1700000000).to_query() == {"type": "week", "date": "1700000000"}
    assert QueryCalendarEventCreate(start_time=1, end_time=2, summary="%E5%91%A8%E4%BC%9A").to_query() == {
        "startTime": "1",
        "endTime": "2",
        "summary": "%E5%91%A8%E4%BC%9A",
    }


def test_query_accepts_wire_names_on_parse():
    query = QueryChat.model_validate({"openId": "ou_1"})
    assert query.open_id == "ou_1"
    assert query.open_chat_id is None


def test_model_does_not_percent_encode():
    link = AppLink.build(Path.CALENDAR_EVENT_CREATE, QueryCalendarEventCreate(summary="周会 a&b"))
    assert link.url.endswith("?summary=周会 a&b")


@pytest.mark.parametrize(
    ("path", "query"),
    [
        (Path.TODO_DETAIL, QueryTodoDetail(guid="g_1", mode="app")),
        (Path.TODO_VIEW, QueryTodoView(tab="assign_to_me")),
        (Path.DOCS, QueryDocs(url="https%3A%2F%2Fexample.feishu.cn%2Fdocx%2Fabc")),
        (Path.BOT, QueryBot(app_id="cli_bot")),
        (Path.PASSPORT_SSO_LOGIN, QueryPassportSsoLogin(sso_domain="example.feishu.cn", tenant_name="Example")),
        (Path.WEB_URL, QueryWebUrl(url="https%3A%2F%2Fexample.com", mode="sidebar-semi", height=400)),
    ],
)
def test_build_and_parse_are_inverse(path, query):
    link = AppLink.build(path, query)
    parsed = AppLink.parse(link.url)
    assert parsed == link
    assert parsed.query == query.to_query()


def test_build_rejects_mismatched_query():
    with pytest.raises(SchemaError) as exc_info:
        AppLink.build(Path.BOT, QueryChat(open_id="ou_1"))
    assert exc_info.value.field == "query"


def test_build_rejects_query_for_parameterless_path():
    with pytest.raises(SchemaError):
        AppLink.build(Path.CALENDAR, QueryBot(app_id="cli_1"))


def test_build_reads_host_from_settings(monkeypatch):
    monkeypatch.setenv("FEISHU_CARD_APPLINK_HOST", "applink.larksuite.com")
    get_settings.cache_clear()

    link = AppLink.build(Path.BOT, QueryBot(app_id="cli_1"))
    assert link.host is Host.LARK
    assert link.url == "https://applink.larksuite.com/client/bot/open?appId=cli_1"


def test_explicit_host_overrides_settings(monkeypatch):
    monkeypatch.setenv("FEISHU_CARD_APPLINK_HOST", "applink.larksuite.com")
    get_settings.cache_clear()

    link = AppLink.build(Path.TODO, host=Host.FEISHU)
    assert link.url == "https://applink.feishu.cn/client/todo/open"


@pytest.mark.parametrize(
    "url",
    [
        "http://applink.feishu.cn/client/chat/open",
        "https://example.com/client/chat/open",
        "https://applink.feishu.cn/client/unknown",
        "applink.feishu.cn/client/chat/open",
        "https://applink.feishu.cn/client/chat/open?openId=ou_1#top",
        "https://applink.feishu.cn/client/bot/open#x",
    ],
)
def test_parse_rejects_invalid_links(url):
    with pytest.raises(SchemaError):
        AppLink.parse(url)


def test_fixed_enumerations():
    assert [member.value for member in Scheme] == ["https"]
    assert len(Path) == 17
    assert set(QUERY_TYPES) <= set(Path)


def test_app_link_serializes_enum_values():
    link = AppLink.build(Path.CHAT, QueryChat(open_id="ou_1"))
    assert link.to_dict() == {
        "scheme": "https",
        "host": "applink.feishu.cn",
        "path": "/client/chat/open",
        "query": {"openId": "ou_1"},
    }
