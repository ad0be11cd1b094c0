import pytest

from feishu_card.config import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    monkeypatch.setenv("CONFIG_PATH", str(tmp_path / "missing.yaml"))
    for key in (
        "FEISHU_CARD_APPLINK_HOST",
        "FEISHU_CARD_JSON_ENSURE_ASCII",
        "FEISHU_CARD_JSON_INDENT",
        "FEISHU_CARD_LOG_LEVEL",
        "FEISHU_CARD_LOG_FORMAT",
    ):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
