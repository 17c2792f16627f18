"""Consent state and persistence, independent of GUI."""

from .consent import ConsentRecord, LegalNotice, NoticeOutcome, legal_notice_key
from .settings_store import (
    JsonSettingsStore,
    MemorySettingsStore,
    SettingsStore,
    SettingsStoreError,
)
from .state_machine import NoticeState, NoticeStateMachine, state_for_outcome

__all__ = [
    "ConsentRecord",
    "LegalNotice",
    "NoticeOutcome",
    "legal_notice_key",
    "JsonSettingsStore",
    "MemorySettingsStore",
    "SettingsStore",
    "SettingsStoreError",
    "NoticeState",
    "NoticeStateMachine",
    "state_for_outcome",
]
