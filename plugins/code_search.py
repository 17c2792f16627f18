"""
Code Search - Example plugin with a legal notice.

Searches indexed open source projects for usages of the code under the
cursor. Because search results are copied from third-party projects, the
user must accept the usage terms before the plugin becomes active.

Usage:
    Place this file in the plugins/ directory at the project root.
    The application discovers it at startup and shows the notice once.
"""

import logging
from tkinter import ttk

from notice_gate.model import LegalNotice
from notice_gate.plugins import Plugin

logger = logging.getLogger(__name__)

_MESSAGE = """
<b>IMPORTANT: BY USING THE CODE SEARCH PLUGIN YOU AGREE TO THE TERMS
BELOW. IF YOU DO NOT AGREE, DO NOT USE CODE SEARCH.</b>
<br><br>
Code Search finds source code in public open source repositories and
displays it inside the editor. That code may be protected by copyright
and trademark law. Before copying any of it, make sure its license
allows the use you intend, or obtain permission from the copyright
owner.
<br><br>
Using Code Search is optional. The authors do not encourage copying
code in breach of its license and accept no liability for such use.
<br><br>
<b>Declining or cancelling disables Code Search and restarts the
application.</b>
"""


class CodeSearchPlugin(Plugin):
    """Usage search across public repositories."""

    plugin_id = "code_search"
    display_name = "Code Search"
    legal_notice = LegalNotice(
        title="Code Search",
        message=_MESSAGE,
        settings_key="CodeSearchLegalNotice",
    )

    def activate(self, window) -> None:
        """Add the search status indicator to the main window."""
        self._indicator = ttk.Label(window.root, text="Code Search ready")
        self._indicator.grid(row=2, column=0, sticky="w", padx=5)
        logger.info("Code Search activated")
