"""Legal notice dialog state machine."""

import logging
from enum import Enum, auto
from typing import Callable

from .consent import NoticeOutcome

logger = logging.getLogger(__name__)


class NoticeState(Enum):
    """Dialog states. Everything except SHOWN is terminal."""

    SHOWN = auto()
    ACCEPTED = auto()
    DECLINED = auto()
    CANCELLED = auto()


# Valid state transitions: from_state -> set of valid to_states
_VALID_TRANSITIONS: dict[NoticeState, set[NoticeState]] = {
    NoticeState.SHOWN: {
        NoticeState.ACCEPTED,
        NoticeState.DECLINED,
        NoticeState.CANCELLED,
    },
    NoticeState.ACCEPTED: set(),
    NoticeState.DECLINED: set(),
    NoticeState.CANCELLED: set(),
}

_OUTCOME_STATES: dict[NoticeOutcome, NoticeState] = {
    NoticeOutcome.ACCEPTED: NoticeState.ACCEPTED,
    NoticeOutcome.DECLINED: NoticeState.DECLINED,
    NoticeOutcome.CANCELLED: NoticeState.CANCELLED,
}

StateCallback = Callable[[NoticeState, NoticeState], None]


def state_for_outcome(outcome: NoticeOutcome) -> NoticeState:
    """Map a dialog outcome to its terminal state."""
    return _OUTCOME_STATES[outcome]


class NoticeStateMachine:
    """
    Tracks a single dialog instance from SHOWN to its terminal state.

    Once terminal, no further transition is accepted, which guarantees
    that at most one outcome is acted upon per dialog.
    """

    def __init__(self, initial_state: NoticeState = NoticeState.SHOWN):
        self._state = initial_state
        self._callbacks: list[StateCallback] = []

    @property
    def state(self) -> NoticeState:
        """Get current state."""
        return self._state

    @property
    def is_terminal(self) -> bool:
        """True once the dialog has reached a final outcome."""
        return not _VALID_TRANSITIONS[self._state]

    def register_callback(self, callback: StateCallback) -> None:
        """Register a callback invoked with (old_state, new_state)."""
        self._callbacks.append(callback)

    def can_transition_to(self, new_state: NoticeState) -> bool:
        """Check whether a transition to new_state is valid."""
        return new_state in _VALID_TRANSITIONS[self._state]

    def transition_to(self, new_state: NoticeState) -> bool:
        """
        Transition to a new state.

        Args:
            new_state: Target state

        Returns:
            True if in the target state after the call

        Raises:
            ValueError: If the transition is not valid
        """
        if new_state == self._state:
            return True

        if not self.can_transition_to(new_state):
            raise ValueError(
                f"Invalid state transition: {self._state.name} -> {new_state.name}"
            )

        old_state = self._state
        self._state = new_state
        logger.debug("Notice state: %s -> %s", old_state.name, new_state.name)

        for callback in self._callbacks:
            try:
                callback(old_state, new_state)
            except Exception as e:
                logger.error("State callback error: %s", e)

        return True
