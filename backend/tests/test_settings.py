import pytest

from contactform.core.settings import Settings


@pytest.mark.parametrize("raw, expected", [("debug", "DEBUG"), (" warning ", "WARNING"), ("LOUD", "INFO"), ("", "INFO")])
def test_log_level_is_normalized(monkeypatch, raw, expected):
    monkeypatch.setenv("LOG_LEVEL", raw)
    assert Settings().log_level == expected


def test_log_level_defaults_to_info(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    assert Settings().log_level == "INFO"
