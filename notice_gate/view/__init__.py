"""GUI components, no business logic."""

from .legal_notice_dialog import LegalNoticeDialog
from .main_window import MainWindow
from .rich_text import TextSegment, parse_markup, to_plain_text

__all__ = [
    "LegalNoticeDialog",
    "MainWindow",
    "TextSegment",
    "parse_markup",
    "to_plain_text",
]
