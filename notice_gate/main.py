#!/usr/bin/env python3
"""Notice Gate - Main entry point."""

import argparse
import logging
import sys
import tkinter as tk
from functools import partial
from pathlib import Path
from typing import Any, Callable, Sequence

from .config import AppConfig, load_config
from .host import DisabledPlugins, ProcessLifecycle, create_plugins, scan_plugins
from .host.lifecycle import HostLifecycle
from .logging_config import setup_logging
from .model import JsonSettingsStore, LegalNotice, SettingsStore
from .plugins import Plugin
from .presenter import ConsentGate, PromptFactory, TkTaskQueue, UITaskQueue
from .view import LegalNoticeDialog, MainWindow

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Notice Gate - plugin host with one-time legal notices"
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Path to configuration file (default: packaged default_config.json)",
    )
    parser.add_argument(
        "--reset-consent",
        metavar="PLUGIN_ID",
        help="Forget the legal notice acceptance for a plugin, re-enable it and exit",
    )
    return parser.parse_args(argv)


def build_gates(
    plugins: list[Plugin],
    settings: SettingsStore,
    lifecycle: HostLifecycle,
    ui_queue: UITaskQueue,
    prompt_factory: PromptFactory,
) -> dict[str, ConsentGate]:
    """
    Create a consent gate for every plugin that declares a legal notice.

    Returns:
        Dictionary mapping plugin_id to its ConsentGate
    """
    gates: dict[str, ConsentGate] = {}
    for plugin in plugins:
        if plugin.legal_notice is None:
            continue
        gates[plugin.plugin_id] = ConsentGate(
            plugin_id=plugin.plugin_id,
            notice=plugin.legal_notice,
            settings=settings,
            lifecycle=lifecycle,
            ui_queue=ui_queue,
            prompt_factory=prompt_factory,
        )
    return gates


def notice_status(plugin: Plugin, gates: dict[str, ConsentGate]) -> str:
    """Describe a plugin's consent state for display."""
    gate = gates.get(plugin.plugin_id)
    if gate is None:
        return "-"
    return "Accepted" if gate.is_accepted() else "Pending"


def start_plugins(
    plugins: list[Plugin],
    gates: dict[str, ConsentGate],
    activate: Callable[[Plugin], None],
    owner: Any,
) -> list[str]:
    """
    Activate plugins, gating those with an unanswered legal notice.

    Pending notices are presented one at a time: accepting one activates
    its plugin and then presents the next. Declining restarts the host,
    so the remaining notices are never shown.

    Args:
        plugins: Loaded plugins
        gates: Consent gates by plugin_id
        activate: Called with a plugin once it may run
        owner: Window the prompts are modal to

    Returns:
        Ids of plugins waiting on a notice
    """
    pending: list[tuple[Plugin, ConsentGate]] = []
    for plugin in plugins:
        gate = gates.get(plugin.plugin_id)
        if gate is not None and not gate.is_accepted():
            pending.append((plugin, gate))
        else:
            activate(plugin)

    for index, (plugin, gate) in enumerate(pending):
        gate.register_accept_callback(partial(activate, plugin))
        if index + 1 < len(pending):
            next_gate = pending[index + 1][1]
            gate.register_accept_callback(partial(next_gate.present, owner))

    if pending:
        pending[0][1].present(owner)

    return [plugin.plugin_id for plugin, _ in pending]


def reset_consent(config: AppConfig, plugin_id: str) -> int:
    """
    Clear a recorded acceptance and re-enable the plugin.

    Returns:
        Process exit code
    """
    registry = scan_plugins(Path(config.plugins_dir))
    entry = registry.get(plugin_id)
    if entry is None:
        print(f"Unknown plugin: {plugin_id}", file=sys.stderr)
        return 1

    notice: LegalNotice | None = entry.cls.legal_notice
    if notice is None:
        print(f"Plugin {plugin_id} has no legal notice", file=sys.stderr)
        return 1

    JsonSettingsStore(config.settings_file).set_value(notice.settings_key, False)
    DisabledPlugins(config.disabled_plugins_file).enable(plugin_id)
    logger.info("Consent reset for plugin %s", plugin_id)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    config, errors = load_config(args.config)

    if errors:
        print("Configuration errors:", file=sys.stderr)
        for error in errors:
            print(f"  - {error}", file=sys.stderr)
        return 1

    if config is None:
        print("Failed to load configuration", file=sys.stderr)
        return 1

    setup_logging(log_file=config.log_file, log_level=config.log_level)

    if args.reset_consent:
        return reset_consent(config, args.reset_consent)

    logger.info("Starting Notice Gate")

    settings = JsonSettingsStore(config.settings_file)
    disabled_plugins = DisabledPlugins(config.disabled_plugins_file)
    lifecycle = ProcessLifecycle(disabled_plugins)

    registry = scan_plugins(Path(config.plugins_dir), disabled_plugins.ids())
    plugins = create_plugins(registry)
    logger.info("Loaded %d plugin(s)", len(plugins))

    # Create GUI
    root = tk.Tk()
    window = MainWindow(
        root,
        title=config.window_title,
        width=config.window_width,
        height=config.window_height,
    )
    lifecycle.add_shutdown_listener(root.destroy)

    def prompt_factory(owner: tk.Misc | None, notice: LegalNotice) -> LegalNoticeDialog:
        return LegalNoticeDialog(
            owner, notice, width=config.notice_width, height=config.notice_height
        )

    gates = build_gates(plugins, settings, lifecycle, TkTaskQueue(root), prompt_factory)

    def refresh_plugin_list() -> None:
        window.set_plugins(
            [(p.name, p.plugin_id, notice_status(p, gates)) for p in plugins]
        )

    def activate_plugin(plugin: Plugin) -> None:
        plugin.activate(window)
        refresh_plugin_list()

    pending = start_plugins(plugins, gates, activate_plugin, root)
    if pending:
        logger.info("Awaiting legal notice for: %s", ", ".join(pending))

    refresh_plugin_list()
    window.set_status(f"{len(plugins)} plugin(s) loaded")

    logger.info("Entering main loop")
    try:
        root.mainloop()
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        root.destroy()

    logger.info("Application exited")
    return 0


if __name__ == "__main__":
    sys.exit(main())
