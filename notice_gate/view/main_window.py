"""Host main window."""

import tkinter as tk
from tkinter import ttk

_COLUMNS: tuple[tuple[str, str, int], ...] = (
    ("name", "Plugin", 220),
    ("plugin_id", "ID", 160),
    ("notice", "Legal Notice", 120),
)


class MainWindow:
    """
    Main application window.

    Lists the active plugins and their consent status. Does not contain
    business logic.
    """

    def __init__(
        self,
        root: tk.Tk,
        title: str = "Notice Gate",
        width: int = 640,
        height: int = 400,
    ):
        """
        Initialize main window.

        Args:
            root: Tkinter root window
            title: Window title
            width: Window width
            height: Window height
        """
        self._root = root
        self._root.title(title)
        self._root.geometry(f"{width}x{height}")
        self._create_widgets()

    @property
    def root(self) -> tk.Tk:
        return self._root

    def _create_widgets(self) -> None:
        """Create all GUI widgets."""
        self._root.columnconfigure(0, weight=1)
        self._root.rowconfigure(0, weight=1)

        frame = ttk.LabelFrame(self._root, text="Plugins", padding=5)
        frame.grid(row=0, column=0, sticky="nsew", padx=5, pady=5)
        frame.columnconfigure(0, weight=1)
        frame.rowconfigure(0, weight=1)

        self._plugin_tree = ttk.Treeview(
            frame,
            columns=[name for name, _, _ in _COLUMNS],
            show="headings",
            selectmode="browse",
        )
        for name, heading, width in _COLUMNS:
            self._plugin_tree.heading(name, text=heading)
            self._plugin_tree.column(name, width=width, anchor=tk.W)
        self._plugin_tree.grid(row=0, column=0, sticky="nsew")

        scrollbar = ttk.Scrollbar(
            frame, orient=tk.VERTICAL, command=self._plugin_tree.yview
        )
        self._plugin_tree.configure(yscrollcommand=scrollbar.set)
        scrollbar.grid(row=0, column=1, sticky="ns")

        self._status_var = tk.StringVar(value="Ready")
        status_bar = ttk.Label(
            self._root, textvariable=self._status_var, relief=tk.SUNKEN, padding=2
        )
        status_bar.grid(row=1, column=0, sticky="ew")

    def set_plugins(self, rows: list[tuple[str, str, str]]) -> None:
        """
        Replace the plugin list.

        Args:
            rows: (display name, plugin id, notice status) per plugin
        """
        self._plugin_tree.delete(*self._plugin_tree.get_children())
        for row in rows:
            self._plugin_tree.insert("", tk.END, values=row)

    def set_status(self, text: str) -> None:
        self._status_var.set(text)
