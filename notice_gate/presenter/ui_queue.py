"""Posting work onto the UI thread."""

import tkinter as tk
from typing import Callable, Protocol

Task = Callable[[], None]


class UITaskQueue(Protocol):
    """Anything that can run a callable later on the UI thread."""

    def schedule(self, fn: Task) -> None: ...


class TkTaskQueue:
    """
    UI task queue backed by the Tk event loop.

    Tasks run once the main loop is idle, so a caller inside an event
    handler returns before the task starts.
    """

    def __init__(self, root: tk.Misc):
        self._root = root

    def schedule(self, fn: Task) -> None:
        self._root.after_idle(fn)
