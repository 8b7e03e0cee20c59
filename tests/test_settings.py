# test_settings.py
import pytest

from paybot_dashboard.settings import env_bool, env_int


@pytest.mark.parametrize("raw, expected", [("1", True), ("true", True), ("YES", True), ("on", True), ("0", False), ("false", False), ("", False)])
def test_env_bool(monkeypatch, raw, expected):
    monkeypatch.setenv("PAYBOT_FLAG", raw)
    assert env_bool("PAYBOT_FLAG") is expected


def test_env_bool_default_when_unset(monkeypatch):
    monkeypatch.delenv("PAYBOT_FLAG", raising=False)
    assert env_bool("PAYBOT_FLAG", "1") is True
    assert env_bool("PAYBOT_FLAG") is False


def test_env_int(monkeypatch):
    monkeypatch.setenv("PAYBOT_PAGE", "25")
    assert env_int("PAYBOT_PAGE", 50) == 25
    monkeypatch.delenv("PAYBOT_PAGE")
    assert env_int("PAYBOT_PAGE", 50) == 50
