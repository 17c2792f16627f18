"""Persistent boolean key-value settings."""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class SettingsStoreError(Exception):
    """Raised when the settings file exists but cannot be understood."""


class SettingsStore(Protocol):
    """Minimal settings contract used by the consent gate."""

    def get_boolean(self, key: str, default: bool = False) -> bool: ...

    def set_value(self, key: str, value: bool) -> None: ...


def _coerce_bool(value: Any, default: bool) -> bool:
    """Interpret a stored value as a boolean, falling back to default."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
    return default


class MemorySettingsStore:
    """Settings held in a dict. Lost when the process exits."""

    def __init__(self, initial: dict[str, Any] | None = None):
        self._values: dict[str, Any] = dict(initial or {})

    def get_boolean(self, key: str, default: bool = False) -> bool:
        return _coerce_bool(self._values.get(key), default)

    def set_value(self, key: str, value: bool) -> None:
        self._values[key] = value


class JsonSettingsStore:
    """
    Settings persisted to a JSON object on disk.

    Every read goes back to the file so values written by another store
    instance (or a previous run) are always visible. Writes replace the
    file atomically.
    """

    def __init__(self, path: str | Path):
        """
        Initialize settings store.

        Args:
            path: Location of the JSON settings file. It does not need to
                exist yet.
        """
        self._path = Path(path)

    @property
    def path(self) -> Path:
        """Get the backing file path."""
        return self._path

    def get_boolean(self, key: str, default: bool = False) -> bool:
        """
        Read a boolean setting.

        Args:
            key: Setting identifier
            default: Value returned when the key is absent or not a boolean

        Returns:
            Stored boolean or default

        Raises:
            SettingsStoreError: If the settings file is corrupt
        """
        return _coerce_bool(self._load().get(key), default)

    def set_value(self, key: str, value: bool) -> None:
        """
        Persist a boolean setting immediately.

        Raises:
            SettingsStoreError: If the existing settings file is corrupt
            OSError: If the file cannot be written
        """
        values = self._load()
        values[key] = bool(value)
        self._save(values)
        logger.debug("Setting %s = %s written to %s", key, value, self._path)

    def _load(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}

        try:
            with open(self._path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise SettingsStoreError(
                f"Invalid JSON in settings file {self._path}: {e}"
            ) from e

        if not isinstance(data, dict):
            raise SettingsStoreError(
                f"Settings file {self._path} must contain a JSON object"
            )
        return data

    def _save(self, values: dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(values, f, indent=2, sort_keys=True)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
