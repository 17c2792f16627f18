"""Modal legal notice dialog."""

import tkinter as tk
import tkinter.font as tkfont
from tkinter import ttk

from ..model.consent import LegalNotice, NoticeOutcome
from .rich_text import parse_markup

DEFAULT_WIDTH = 500
DEFAULT_HEIGHT = 100


class LegalNoticeDialog:
    """
    Modal legal notice shown before a plugin is used.

    Offers Accept, Decline and Cancel. Closing the window or pressing
    Escape counts as Cancel.
    """

    def __init__(
        self,
        owner: tk.Misc | None,
        notice: LegalNotice,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
    ):
        """
        Initialize dialog.

        Args:
            owner: Window the dialog is modal to, or None for the default root
            notice: Title, message and button labels
            width: Width of the message region in pixels
            height: Height of the message region in pixels
        """
        self._owner = owner
        self._notice = notice
        self._width = width
        self._height = height
        self._outcome = NoticeOutcome.CANCELLED
        self._create_dialog()

    def _create_dialog(self) -> None:
        """Create the dialog window and widgets."""
        self._dialog = tk.Toplevel(self._owner)
        self._dialog.title(self._notice.title)
        self._dialog.resizable(False, False)

        # Only set transient if the owner is visible, otherwise the dialog
        # inherits the withdrawn state on some WMs.
        if self._owner is not None and self._owner.winfo_viewable():
            self._dialog.transient(self._owner)

        self._dialog.protocol("WM_DELETE_WINDOW", self._handle_cancel)
        self._dialog.bind("<Escape>", lambda _event: self._handle_cancel())

        body = ttk.Frame(self._dialog)
        body.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Built-in Tk bitmap, no image files needed
        icon = tk.Label(body, bitmap="warning")
        icon.pack(side=tk.LEFT, anchor=tk.N, padx=(0, 10))

        # Fixed-size message region; the text widget fills it.
        text_frame = ttk.Frame(body, width=self._width, height=self._height)
        text_frame.pack_propagate(False)
        text_frame.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)

        scrollbar = ttk.Scrollbar(text_frame, orient=tk.VERTICAL)
        self._text = tk.Text(
            text_frame,
            wrap=tk.WORD,
            yscrollcommand=scrollbar.set,
            padx=5,
            pady=5,
            relief=tk.SOLID,
            borderwidth=1,
        )
        scrollbar.config(command=self._text.yview)
        scrollbar.pack(side=tk.RIGHT, fill=tk.Y)
        self._text.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)

        bold_font = tkfont.nametofont("TkTextFont").copy()
        bold_font.configure(weight="bold")
        self._text.tag_configure("bold", font=bold_font)

        for segment in parse_markup(self._notice.message):
            tags = ("bold",) if segment.bold else ()
            self._text.insert(tk.END, segment.text, tags)
        self._text.config(state=tk.DISABLED)

        btn_frame = ttk.Frame(self._dialog)
        btn_frame.pack(side=tk.BOTTOM, anchor=tk.E, padx=10, pady=(0, 10))

        self._accept_btn = ttk.Button(
            btn_frame,
            text=self._notice.accept_text,
            command=self._handle_accept,
            default=tk.ACTIVE,
        )
        self._accept_btn.pack(side=tk.LEFT, padx=5)

        self._decline_btn = ttk.Button(
            btn_frame, text=self._notice.decline_text, command=self._handle_decline
        )
        self._decline_btn.pack(side=tk.LEFT, padx=5)

        self._cancel_btn = ttk.Button(
            btn_frame, text="Cancel", command=self._handle_cancel
        )
        self._cancel_btn.pack(side=tk.LEFT, padx=5)

        # Return activates the focused button, so it only accepts while
        # Accept has focus.
        for button in (self._accept_btn, self._decline_btn, self._cancel_btn):
            button.bind("<Return>", self._invoke_focused)

        self._center_on_owner()

        # Grabbing an unmapped window fails on X11
        self._dialog.wait_visibility()
        self._dialog.grab_set()
        self._accept_btn.focus_set()

    def _center_on_owner(self) -> None:
        """Center dialog on its owner, or on the screen if it has none."""
        self._dialog.update_idletasks()
        dialog_w = self._dialog.winfo_width()
        dialog_h = self._dialog.winfo_height()

        if self._owner is not None and self._owner.winfo_viewable():
            x = self._owner.winfo_rootx() + (self._owner.winfo_width() - dialog_w) // 2
            y = self._owner.winfo_rooty() + (self._owner.winfo_height() - dialog_h) // 2
        else:
            x = (self._dialog.winfo_screenwidth() - dialog_w) // 2
            y = (self._dialog.winfo_screenheight() - dialog_h) // 2

        self._dialog.geometry(f"+{max(x, 0)}+{max(y, 0)}")

    def _invoke_focused(self, event: tk.Event) -> str:
        event.widget.invoke()
        return "break"

    def _close(self, outcome: NoticeOutcome) -> None:
        self._outcome = outcome
        self._dialog.grab_release()
        self._dialog.destroy()

    def _handle_accept(self) -> None:
        self._close(NoticeOutcome.ACCEPTED)

    def _handle_decline(self) -> None:
        self._close(NoticeOutcome.DECLINED)

    def _handle_cancel(self) -> None:
        """Handle Cancel button, Escape or window close."""
        self._close(NoticeOutcome.CANCELLED)

    def show(self) -> NoticeOutcome:
        """
        Wait for the user's choice.

        Returns:
            The chosen outcome. A dialog destroyed by other means counts
            as cancelled.
        """
        self._dialog.wait_window()
        return self._outcome
