"""Consent record and legal notice data types."""

from dataclasses import dataclass
from enum import Enum, auto


class NoticeOutcome(Enum):
    """Terminal user choice on a legal notice dialog."""

    ACCEPTED = auto()
    DECLINED = auto()
    CANCELLED = auto()


def legal_notice_key(plugin_id: str) -> str:
    """Build the default settings key for a plugin's legal notice."""
    return f"{plugin_id}.legal_notice"


@dataclass(frozen=True)
class LegalNotice:
    """
    Text and persistence key for a one-time legal notice.

    The message may contain ``<b>...</b>`` and ``<br>`` markup; plain
    newlines are treated as whitespace.
    """

    title: str
    message: str
    settings_key: str
    accept_text: str = "Accept"
    decline_text: str = "Decline"


@dataclass(frozen=True)
class ConsentRecord:
    """Persisted acceptance state for a single legal notice."""

    key: str
    accepted: bool = False
