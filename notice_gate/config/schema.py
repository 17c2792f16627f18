"""Configuration schema and validation."""

from dataclasses import dataclass
from typing import Any

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class AppConfig:
    """Application configuration."""

    settings_file: str = "settings/options.json"
    disabled_plugins_file: str = "settings/disabled_plugins.txt"
    plugins_dir: str = "plugins"
    log_file: str = "notice_gate.log"
    log_level: str = "INFO"
    window_title: str = "Notice Gate"
    window_width: int = 640
    window_height: int = 400
    notice_width: int = 500
    notice_height: int = 100


def _validate_str_field(
    config_dict: dict[str, Any],
    key: str,
    default: str,
    errors: list[str],
) -> str:
    """Validate a string configuration field."""
    value = config_dict.get(key, default)
    if not isinstance(value, str):
        errors.append(f"{key} must be string, got {type(value).__name__}")
        return default
    return value


def _validate_path_field(
    config_dict: dict[str, Any],
    key: str,
    default: str,
    errors: list[str],
) -> str:
    """Validate a non-empty path configuration field."""
    value = _validate_str_field(config_dict, key, default, errors)
    if not value.strip():
        errors.append(f"{key} must not be empty")
        return default
    return value


def _validate_int_min_field(
    config_dict: dict[str, Any],
    key: str,
    default: int,
    minimum: int,
    errors: list[str],
) -> int:
    """Validate an integer configuration field with a minimum value."""
    value = config_dict.get(key, default)
    # bool is an int subclass but never a valid size
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        errors.append(f"{key} must be integer >= {minimum}, got {value}")
        return default
    return value


def validate_config(config_dict: dict[str, Any]) -> tuple[AppConfig | None, list[str]]:
    """
    Validate configuration dictionary and return AppConfig or list of errors.

    Returns:
        Tuple of (AppConfig or None, list of error messages)
    """
    errors: list[str] = []
    defaults = AppConfig()

    settings_file = _validate_path_field(
        config_dict, "settings_file", defaults.settings_file, errors
    )
    disabled_plugins_file = _validate_path_field(
        config_dict, "disabled_plugins_file", defaults.disabled_plugins_file, errors
    )
    plugins_dir = _validate_path_field(
        config_dict, "plugins_dir", defaults.plugins_dir, errors
    )
    log_file = _validate_path_field(config_dict, "log_file", defaults.log_file, errors)

    # Validate log_level (unique enum logic)
    log_level = config_dict.get("log_level", defaults.log_level)
    if not isinstance(log_level, str):
        errors.append(f"log_level must be string, got {type(log_level).__name__}")
        log_level = defaults.log_level
    elif log_level.upper() not in VALID_LOG_LEVELS:
        errors.append(f"log_level must be one of {VALID_LOG_LEVELS}, got '{log_level}'")
        log_level = defaults.log_level
    else:
        log_level = log_level.upper()

    window_title = _validate_str_field(
        config_dict, "window_title", defaults.window_title, errors
    )
    window_width = _validate_int_min_field(
        config_dict, "window_width", defaults.window_width, 300, errors
    )
    window_height = _validate_int_min_field(
        config_dict, "window_height", defaults.window_height, 200, errors
    )
    notice_width = _validate_int_min_field(
        config_dict, "notice_width", defaults.notice_width, 200, errors
    )
    notice_height = _validate_int_min_field(
        config_dict, "notice_height", defaults.notice_height, 80, errors
    )

    if errors:
        return None, errors

    return (
        AppConfig(
            settings_file=settings_file,
            disabled_plugins_file=disabled_plugins_file,
            plugins_dir=plugins_dir,
            log_file=log_file,
            log_level=log_level,
            window_title=window_title,
            window_width=window_width,
            window_height=window_height,
            notice_width=notice_width,
            notice_height=notice_height,
        ),
        [],
    )
