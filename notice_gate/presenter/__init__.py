"""Coordination between consent state and the GUI."""

from .consent_gate import ConsentGate, NoticePrompt, PromptFactory
from .ui_queue import TkTaskQueue, UITaskQueue

__all__ = [
    "ConsentGate",
    "NoticePrompt",
    "PromptFactory",
    "TkTaskQueue",
    "UITaskQueue",
]
