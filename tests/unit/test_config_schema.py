"""Tests for the config schema module."""

import json
from pathlib import Path

import pytest

from notice_gate.config.schema import AppConfig, validate_config


class TestAppConfig:
    """Tests for AppConfig dataclass."""

    def test_default_values(self) -> None:
        """AppConfig has correct default values."""
        config = AppConfig()
        assert config.settings_file == "settings/options.json"
        assert config.disabled_plugins_file == "settings/disabled_plugins.txt"
        assert config.plugins_dir == "plugins"
        assert config.log_file == "notice_gate.log"
        assert config.log_level == "INFO"
        assert config.window_title == "Notice Gate"
        assert config.notice_width == 500
        assert config.notice_height == 100


class TestValidateConfigHappyPath:
    """Tests for validate_config happy path."""

    def test_valid_config_returns_app_config(self, config_fixtures_path: Path) -> None:
        """Valid config returns AppConfig with no errors."""
        with open(config_fixtures_path / "valid_config.json") as f:
            config_dict = json.load(f)

        config, errors = validate_config(config_dict)

        assert errors == []
        assert config is not None
        assert config.settings_file == "state/options.json"
        assert config.plugins_dir == "extensions"
        assert config.notice_height == 140

    def test_log_level_normalised_to_upper_case(self) -> None:
        config, errors = validate_config({"log_level": "debug"})
        assert errors == []
        assert config is not None
        assert config.log_level == "DEBUG"

    def test_empty_config_uses_defaults(self) -> None:
        config, errors = validate_config({})
        assert errors == []
        assert config == AppConfig()


class TestValidateConfigErrors:
    """Tests for validate_config error reporting."""

    def test_invalid_log_level(self) -> None:
        config, errors = validate_config({"log_level": "LOUD"})
        assert config is None
        assert any("log_level must be one of" in e for e in errors)

    def test_log_level_wrong_type(self) -> None:
        config, errors = validate_config({"log_level": 10})
        assert config is None
        assert errors == ["log_level must be string, got int"]

    @pytest.mark.parametrize(
        "key",
        ["settings_file", "disabled_plugins_file", "plugins_dir", "log_file"],
    )
    def test_path_field_wrong_type(self, key: str) -> None:
        config, errors = validate_config({key: 42})
        assert config is None
        assert errors == [f"{key} must be string, got int"]

    @pytest.mark.parametrize(
        "key",
        ["settings_file", "disabled_plugins_file", "plugins_dir", "log_file"],
    )
    def test_path_field_empty(self, key: str) -> None:
        config, errors = validate_config({key: "  "})
        assert config is None
        assert errors == [f"{key} must not be empty"]

    @pytest.mark.parametrize(
        ("key", "value"),
        [
            ("window_width", 299),
            ("window_height", 199),
            ("notice_width", 100),
            ("notice_height", 79),
            ("notice_width", "500"),
            ("notice_height", True),
        ],
    )
    def test_size_below_minimum_or_wrong_type(self, key: str, value: object) -> None:
        config, errors = validate_config({key: value})
        assert config is None
        assert len(errors) == 1
        assert errors[0].startswith(f"{key} must be integer >=")

    def test_multiple_errors_accumulated(self) -> None:
        config, errors = validate_config(
            {"log_level": "LOUD", "window_width": 1, "plugins_dir": ""}
        )
        assert config is None
        assert len(errors) == 3
