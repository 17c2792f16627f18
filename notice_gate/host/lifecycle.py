"""Host application lifecycle: disabling plugins and restarting."""

import logging
import os
import sys
from typing import Callable, Protocol, Sequence

from .disabled_plugins import DisabledPlugins

logger = logging.getLogger(__name__)

ExecFn = Callable[[str, Sequence[str]], None]
ExitVeto = Callable[[], bool]
ShutdownListener = Callable[[], None]


class HostLifecycle(Protocol):
    """Lifecycle facilities the consent gate relies on."""

    def disable_plugin(self, plugin_id: str) -> None: ...

    def restart(self, force: bool = False) -> bool: ...


class ProcessLifecycle:
    """
    Lifecycle of the running host process.

    Restarting runs the registered shutdown listeners and then replaces
    the current process image with a fresh interpreter started with the
    original command line. The exec function is injectable so tests and
    embedders can observe the restart without losing the process.
    """

    def __init__(
        self,
        disabled_plugins: DisabledPlugins,
        argv: Sequence[str] | None = None,
        executable: str | None = None,
        exec_fn: ExecFn = os.execv,
    ):
        """
        Initialize lifecycle.

        Args:
            disabled_plugins: Persistent disabled plugin list
            argv: Interpreter arguments for the relaunch. Defaults to the
                arguments this interpreter was started with.
            executable: Interpreter path. Defaults to sys.executable.
            exec_fn: Replaces the process, os.execv by default
        """
        self._disabled_plugins = disabled_plugins
        self._argv = list(argv) if argv is not None else list(sys.orig_argv[1:])
        self._executable = executable or sys.executable
        self._exec_fn = exec_fn
        self._exit_vetoes: list[ExitVeto] = []
        self._shutdown_listeners: list[ShutdownListener] = []

    def add_exit_veto(self, veto: ExitVeto) -> None:
        """Register a check that may block a non-forced restart by returning False."""
        self._exit_vetoes.append(veto)

    def add_shutdown_listener(self, listener: ShutdownListener) -> None:
        """Register a teardown action run before the process is replaced."""
        self._shutdown_listeners.append(listener)

    def disable_plugin(self, plugin_id: str) -> None:
        self._disabled_plugins.disable(plugin_id)

    def restart(self, force: bool = False) -> bool:
        """
        Restart the host process.

        Args:
            force: Skip exit vetoes

        Returns:
            False if a veto blocked the restart. When the real exec is used
            a successful restart never returns.
        """
        if not force:
            for veto in self._exit_vetoes:
                if not veto():
                    logger.info("Restart cancelled by exit veto")
                    return False

        logger.info("Restarting %s (force=%s)", self._executable, force)

        for listener in self._shutdown_listeners:
            listener()

        for handler in logging.getLogger().handlers:
            handler.flush()

        self._exec_fn(self._executable, [self._executable, *self._argv])
        return True
