from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from ringfocus.config import CONFIG_ENV_VAR, ConfigError, NavigatorConfig, configure_logging, load_config


def _write(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_missing_file_uses_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)

    assert load_config() == NavigatorConfig()
    assert load_config(tmp_path / "absent.json") == NavigatorConfig()


def test_file_overrides_defaults(tmp_path: Path) -> None:
    path = _write(tmp_path / "ringfocus.json", {"log_level": "debug", "next_keys": ["Tab"], "windows": ["x", "y"]})

    config = load_config(path)

    assert config.log_level == "DEBUG"
    assert config.next_keys == ("Tab",)
    assert config.windows == ("x", "y")
    assert config.previous_keys == NavigatorConfig().previous_keys


def test_environment_variable_points_at_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = _write(tmp_path / "env.json", {"swap_next_keys": ["Shift+L"]})
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    assert load_config().swap_next_keys == ("Shift+L",)


@pytest.mark.parametrize(
    "data",
    [
        {"unknown": 1},
        {"log_level": "LOUD"},
        {"log_level": 10},
        {"next_keys": "Tab"},
        {"windows": ["a", 2]},
        ["not", "an", "object"],
    ],
)
def test_invalid_settings_raise(tmp_path: Path, data: object) -> None:
    path = _write(tmp_path / "bad.json", data)

    with pytest.raises(ConfigError):
        load_config(path)


def test_malformed_json_raises(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigError) as excinfo:
        load_config(path)

    assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)
    assert isinstance(excinfo.value, ValueError)


def test_configure_logging_sets_level(monkeypatch: pytest.MonkeyPatch) -> None:
    root = logging.getLogger()
    monkeypatch.setattr(root, "level", root.level)
    handler = logging.NullHandler()
    root.addHandler(handler)
    try:
        configure_logging("WARNING")
        assert root.level == logging.WARNING
    finally:
        root.removeHandler(handler)
