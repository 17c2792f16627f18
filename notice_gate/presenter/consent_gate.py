"""One-time legal notice consent gate."""

import logging
from typing import Any, Callable, Protocol

from ..host.lifecycle import HostLifecycle
from ..model.consent import ConsentRecord, LegalNotice, NoticeOutcome
from ..model.settings_store import SettingsStore
from ..model.state_machine import NoticeStateMachine, state_for_outcome
from .ui_queue import UITaskQueue

logger = logging.getLogger(__name__)


class NoticePrompt(Protocol):
    """A modal prompt that blocks until the user picks an outcome."""

    def show(self) -> NoticeOutcome: ...


PromptFactory = Callable[[Any, LegalNotice], NoticePrompt]


class ConsentGate:
    """
    Asks once for acceptance of a plugin's legal notice.

    Acceptance is persisted in the settings store. Declining, or closing
    the prompt without choosing, disables the plugin and force-restarts
    the host so the plugin is no longer loaded.

    The gate holds no cached consent flag: every query goes to the
    settings store.
    """

    def __init__(
        self,
        plugin_id: str,
        notice: LegalNotice,
        settings: SettingsStore,
        lifecycle: HostLifecycle,
        ui_queue: UITaskQueue,
        prompt_factory: PromptFactory,
    ):
        """
        Initialize consent gate.

        Args:
            plugin_id: Plugin disabled on decline
            notice: Notice text and settings key
            settings: Persistent store holding the consent record
            lifecycle: Host lifecycle used to disable and restart
            ui_queue: Queue the prompt is posted to
            prompt_factory: Builds the prompt from (owner, notice)
        """
        self._plugin_id = plugin_id
        self._notice = notice
        self._settings = settings
        self._lifecycle = lifecycle
        self._ui_queue = ui_queue
        self._prompt_factory = prompt_factory
        self._accept_callbacks: list[Callable[[], None]] = []

    @property
    def plugin_id(self) -> str:
        return self._plugin_id

    @property
    def notice(self) -> LegalNotice:
        return self._notice

    def register_accept_callback(self, callback: Callable[[], None]) -> None:
        """Register a callback run after an acceptance has been persisted."""
        self._accept_callbacks.append(callback)

    def is_accepted(self) -> bool:
        """Return the persisted acceptance, False if never recorded."""
        return self._settings.get_boolean(self._notice.settings_key, False)

    def record(self) -> ConsentRecord:
        """Get the current consent record."""
        return ConsentRecord(key=self._notice.settings_key, accepted=self.is_accepted())

    def present(self, owner: Any) -> None:
        """
        Schedule the notice prompt on the UI thread.

        Does not check is_accepted(); callers do that first. Returns
        immediately without waiting for the user.

        Args:
            owner: Window the prompt is modal to
        """
        logger.info("Scheduling legal notice for plugin %s", self._plugin_id)
        self._ui_queue.schedule(lambda: self._show(owner))

    def handle_outcome(
        self, state_machine: NoticeStateMachine, outcome: NoticeOutcome
    ) -> None:
        """
        Apply the side effects of a dialog outcome.

        Args:
            state_machine: State of the dialog instance the outcome belongs to
            outcome: The user's choice

        Raises:
            ValueError: If this dialog instance already reached an outcome
        """
        new_state = state_for_outcome(outcome)
        # A repeated identical outcome is a no-op for the state machine,
        # but must not re-run the side effects.
        if state_machine.is_terminal:
            raise ValueError(
                f"Invalid state transition: {state_machine.state.name} -> "
                f"{new_state.name} (dialog already answered)"
            )
        state_machine.transition_to(new_state)

        if outcome is NoticeOutcome.ACCEPTED:
            self._settings.set_value(self._notice.settings_key, True)
            logger.info("Legal notice accepted for plugin %s", self._plugin_id)
            for callback in self._accept_callbacks:
                callback()
            return

        logger.info(
            "Legal notice %s for plugin %s, disabling and restarting",
            outcome.name.lower(),
            self._plugin_id,
        )
        self._lifecycle.disable_plugin(self._plugin_id)
        self._lifecycle.restart(force=True)

    def _show(self, owner: Any) -> None:
        state_machine = NoticeStateMachine()
        prompt = self._prompt_factory(owner, self._notice)
        outcome = prompt.show()
        self.handle_outcome(state_machine, outcome)
