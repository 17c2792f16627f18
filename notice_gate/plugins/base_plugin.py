"""Base class for host plugins."""

import logging
from typing import Any

from ..model.consent import LegalNotice

logger = logging.getLogger(__name__)


class Plugin:
    """
    Base class for plugins discovered by the host.

    Subclasses must set ``plugin_id``. A plugin that needs the user to
    accept terms before use sets ``legal_notice``; the host asks for
    consent once and disables the plugin if the user declines.
    """

    plugin_id: str = ""
    display_name: str = ""
    legal_notice: LegalNotice | None = None

    @property
    def name(self) -> str:
        """Display name, falling back to the plugin id."""
        return self.display_name or self.plugin_id

    def activate(self, window: Any) -> None:
        """
        Called once at startup for every enabled plugin.

        Args:
            window: Host main window
        """
        logger.debug("Plugin %s activated", self.plugin_id)
