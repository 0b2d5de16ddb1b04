import json

import pytest

from style_engine.errors import ConfigError
from style_engine.utils.config import Config


def test_defaults_when_file_is_missing(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    config = Config()

    assert config.get("logging.console_level") == "WARNING"
    assert config.get("logging.file") is None
    assert config.get("style.media_type") == "screen"
    assert config.get("style.missing", "fallback") == "fallback"
    assert not (tmp_path / ".wink_style").exists()


def test_file_values_override_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"style": {"media_type": "print"}}))

    config = Config(str(path))

    assert config.get("style.media_type") == "print"
    assert config.get("logging.file_level") == "DEBUG"


def test_set_and_save_round_trip(tmp_path):
    path = tmp_path / "sub" / "config.json"
    path.parent.mkdir()
    path.write_text("{}")
    config = Config(str(path))

    config.set("logging.console_level", "DEBUG")
    config.set("extra.nested.value", 3)
    config.save()

    saved = json.loads(path.read_text())
    assert saved["logging"]["console_level"] == "DEBUG"
    assert Config(str(path)).get("extra.nested.value") == 3


def test_explicit_missing_file_is_an_error(tmp_path):
    with pytest.raises(ConfigError):
        Config(str(tmp_path / "nope.json"))


def test_explicit_broken_file_is_an_error(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")

    with pytest.raises(ConfigError):
        Config(str(path))
