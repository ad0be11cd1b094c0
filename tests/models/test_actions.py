import pytest

from feishu_card import SchemaError, load, parse_action_module
from feishu_card.models.actions import Action, Button, DatePicker, OverFlow, SelectMenu
from feishu_card.models.elements import ActionConfirm, ActionOption, ActionUrl, PlainText


def _confirm() -> ActionConfirm:
    return ActionConfirm(title=PlainText(content="确认"), text=PlainText(content="确定要提交吗？"))


def test_button_without_confirm_omits_key():
    button = Button(text=PlainText(content="提交"))
    data = button.to_dict()
    assert data == {"tag": "button", "text": {"tag": "plain_text", "content": "提交"}}
    assert "confirm" not in data
    assert "type" not in data


def test_button_full_round_trip():
    button = Button(
        text=PlainText(content="提交"),
        multi_url=ActionUrl(
            url="https://example.com",
            android_url="https://example.com/a",
            ios_url="https://example.com/i",
            pc_url="https://example.com/p",
        ),
        type="danger",
        value={"action": "submit", "count": 1, "flags": [True, False]},
        confirm=_confirm(),
    )
    data = button.to_dict()
    assert data["type"] == "danger"
    assert data["value"]["action"] == "submit"
    assert parse_action_module(data) == button


def test_button_rejects_unknown_type():
    with pytest.raises(SchemaError) as exc_info:
        parse_action_module({"tag": "button", "text": {"tag": "plain_text", "content": "x"}, "type": "warning"})
    assert exc_info.value.field == "button.type"


@pytest.mark.parametrize("tag", ["select_static", "select_person"])
def test_select_menu_keeps_tag_on_round_trip(tag):
    menu = SelectMenu(
        tag=tag,
        placeholder=PlainText(content="请选择"),
        initial_option="a",
        options=[ActionOption(text=PlainText(content="A"), value="a"), ActionOption(value="b")],
    )
    data = menu.to_dict()
    assert data["tag"] == tag

    parsed = parse_action_module(data)
    assert isinstance(parsed, SelectMenu)
    assert parsed.tag == tag
    assert parsed == menu


def test_select_person_never_becomes_select_static():
    parsed = parse_action_module({"tag": "select_person", "options": [{"value": "ou_1"}]})
    assert parsed.tag == "select_person"
    assert parsed.to_dict()["tag"] != "select_static"


def test_select_menu_requires_explicit_tag():
    with pytest.raises(SchemaError):
        load(SelectMenu, {"options": [{"value": "a"}]})


@pytest.mark.parametrize(
    ("tag", "field", "value"),
    [
        ("date_picker", "initial_date", "2024-01-01"),
        ("picker_time", "initial_time", "09:30"),
        ("picker_datetime", "initial_datetime", "2024-01-01 09:30"),
    ],
)
def test_date_picker_keeps_tag_on_round_trip(tag, field, value):
    picker = DatePicker(tag=tag, placeholder=PlainText(content="选择"), **{field: value})
    data = picker.to_dict()
    assert data["tag"] == tag
    assert data[field] == value

    parsed = parse_action_module(data)
    assert isinstance(parsed, DatePicker)
    assert parsed.tag == tag
    assert parsed == picker


def test_overflow_round_trip():
    overflow = OverFlow(
        options=[
            ActionOption(text=PlainText(content="文档"), url="https://example.com/doc"),
            ActionOption(text=PlainText(content="删除"), value="delete"),
        ],
        value={"record_id": "rec_1"},
        confirm=_confirm(),
    )
    assert parse_action_module(overflow.to_dict()) == overflow


def test_overflow_requires_options():
    with pytest.raises(SchemaError) as exc_info:
        parse_action_module({"tag": "overflow"})
    assert exc_info.value.field == "overflow.options"


def test_unknown_action_tag_is_rejected():
    with pytest.raises(SchemaError) as exc_info:
        parse_action_module({"tag": "unknown_widget", "text": {"tag": "plain_text", "content": "x"}})
    assert exc_info.value.model == "ActionModule"
    assert exc_info.value.errors


def test_missing_action_tag_is_rejected():
    with pytest.raises(SchemaError):
        parse_action_module({"text": {"tag": "plain_text", "content": "x"}})


def test_action_group_round_trip():
    action = Action(
        actions=[
            Button(text=PlainText(content="同意"), type="primary", value={"ok": True}),
            DatePicker(tag="picker_time", initial_time="10:00"),
        ],
        layout="bisected",
    )
    data = action.to_dict()
    assert data["tag"] == "action"
    assert [item["tag"] for item in data["actions"]] == ["button", "picker_time"]
    assert load(Action, data) == action


def test_action_group_rejects_unknown_layout():
    with pytest.raises(SchemaError):
        load(Action, {"tag": "action", "actions": [], "layout": "grid"})
