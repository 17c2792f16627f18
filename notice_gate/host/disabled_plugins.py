"""Persistent list of disabled plugin ids."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class DisabledPlugins:
    """
    Disabled plugin ids stored one per line in a text file.

    Blank lines and lines starting with ``#`` are ignored. The file is
    re-read on every query so that changes made before a restart are
    picked up by the relaunched process.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def ids(self) -> set[str]:
        """Get the set of disabled plugin ids."""
        if not self._path.exists():
            return set()

        ids: set[str] = set()
        with open(self._path, encoding="utf-8") as f:
            for line in f:
                entry = line.strip()
                if entry and not entry.startswith("#"):
                    ids.add(entry)
        return ids

    def is_disabled(self, plugin_id: str) -> bool:
        return plugin_id in self.ids()

    def disable(self, plugin_id: str) -> bool:
        """
        Add a plugin id to the disabled list.

        Returns:
            True if the list changed, False if it was already disabled
        """
        ids = self.ids()
        if plugin_id in ids:
            logger.debug("Plugin %s already disabled", plugin_id)
            return False

        ids.add(plugin_id)
        self._write(ids)
        logger.info("Plugin %s disabled", plugin_id)
        return True

    def enable(self, plugin_id: str) -> bool:
        """
        Remove a plugin id from the disabled list.

        Returns:
            True if the list changed, False if it was not disabled
        """
        ids = self.ids()
        if plugin_id not in ids:
            return False

        ids.discard(plugin_id)
        self._write(ids)
        logger.info("Plugin %s enabled", plugin_id)
        return True

    def _write(self, ids: set[str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        content = "".join(f"{plugin_id}\n" for plugin_id in sorted(ids))
        self._path.write_text(content, encoding="utf-8")
