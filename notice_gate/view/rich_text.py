"""Minimal rich-text markup for notice bodies.

Only ``<b>``/``</b>`` and ``<br>`` are understood. Source whitespace,
including newlines, collapses to single spaces as it would in HTML.
"""

import html
import re
from dataclasses import dataclass

_TAG_RE = re.compile(r"(<\s*/?\s*b\s*>|<\s*br\s*/?\s*>)", re.IGNORECASE)
_WS_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class TextSegment:
    """A run of text sharing one style."""

    text: str
    bold: bool = False


def parse_markup(markup: str) -> list[TextSegment]:
    """
    Convert notice markup into styled text segments.

    Adjacent runs with the same style are merged. Leading spaces on a line
    and trailing spaces before a line break are dropped.

    Args:
        markup: Text containing optional <b> and <br> tags

    Returns:
        Segments in display order
    """
    segments: list[TextSegment] = []
    bold = False
    at_line_start = True

    for token in _TAG_RE.split(markup):
        if not token:
            continue

        tag = _WS_RE.sub("", token).lower()
        if tag == "<b>":
            bold = True
            continue
        if tag == "</b>":
            bold = False
            continue
        if tag in ("<br>", "<br/>"):
            _strip_trailing_spaces(segments)
            _append(segments, "\n", bold)
            at_line_start = True
            continue

        text = html.unescape(_WS_RE.sub(" ", token))
        if at_line_start:
            text = text.lstrip(" ")
        if not text:
            continue
        _append(segments, text, bold)
        at_line_start = False

    _strip_trailing_spaces(segments)
    return segments


def to_plain_text(segments: list[TextSegment]) -> str:
    """Join segments, discarding style."""
    return "".join(segment.text for segment in segments)


def _append(segments: list[TextSegment], text: str, bold: bool) -> None:
    if segments and segments[-1].bold == bold:
        segments[-1] = TextSegment(segments[-1].text + text, bold)
    else:
        segments.append(TextSegment(text, bold))


def _strip_trailing_spaces(segments: list[TextSegment]) -> None:
    while segments:
        stripped = segments[-1].text.rstrip(" ")
        if stripped:
            segments[-1] = TextSegment(stripped, segments[-1].bold)
            return
        segments.pop()
