"""Plugin discovery and instantiation."""

import importlib.util
import inspect
import logging
import sys
import types
from dataclasses import dataclass
from pathlib import Path

from ..plugins.base_plugin import Plugin

logger = logging.getLogger(__name__)


@dataclass
class PluginEntry:
    """Registry entry for a discovered plugin."""

    cls: type[Plugin]
    plugin_id: str
    source: Path


def scan_plugins(
    plugins_dir: Path,
    disabled: set[str] | None = None,
) -> dict[str, PluginEntry]:
    """
    Scan a directory for plugin modules.

    Discovers classes that extend Plugin and define a non-empty
    ``plugin_id`` class attribute. Plugins listed in ``disabled`` are
    skipped.

    Args:
        plugins_dir: Path to the directory to scan
        disabled: Plugin ids that must not be loaded

    Returns:
        Dictionary mapping plugin_id to PluginEntry
    """
    disabled = disabled or set()
    registry: dict[str, PluginEntry] = {}

    if not plugins_dir.is_dir():
        logger.debug("Plugins directory not found: %s", plugins_dir)
        return registry

    for py_file in sorted(plugins_dir.glob("*.py")):
        if py_file.name.startswith("_"):
            continue

        try:
            module = _load_module_from_file(py_file.stem, py_file)
        except Exception as e:
            logger.warning("Failed to import plugin module '%s': %s", py_file, e)
            continue

        for name, obj in inspect.getmembers(module, inspect.isclass):
            # Skip classes imported into this module
            if obj.__module__ != module.__name__:
                continue

            if not issubclass(obj, Plugin) or obj is Plugin:
                continue

            plugin_id = getattr(obj, "plugin_id", None)
            if not isinstance(plugin_id, str) or not plugin_id:
                logger.warning(
                    "Plugin class '%s' in '%s' has no plugin_id. Skipping.",
                    name,
                    py_file.name,
                )
                continue

            if plugin_id in disabled:
                logger.info("Plugin %s is disabled, not loading", plugin_id)
                continue

            if plugin_id in registry:
                logger.warning(
                    "Duplicate plugin id '%s' in '%s' replaces '%s'",
                    plugin_id,
                    py_file.name,
                    registry[plugin_id].source.name,
                )

            registry[plugin_id] = PluginEntry(
                cls=obj, plugin_id=plugin_id, source=py_file
            )
            logger.info("Discovered plugin: %s from %s", plugin_id, py_file.name)

    return registry


def create_plugins(registry: dict[str, PluginEntry]) -> list[Plugin]:
    """Instantiate every plugin in the registry, ordered by plugin id."""
    return [registry[plugin_id].cls() for plugin_id in sorted(registry)]


def _load_module_from_file(module_name: str, file_path: Path) -> types.ModuleType:
    """
    Load a Python module directly from a file path.

    Raises:
        ImportError: If the module cannot be loaded
    """
    qualified_name = f"_notice_gate_plugins.{module_name}"
    spec = importlib.util.spec_from_file_location(qualified_name, file_path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot create module spec for {file_path}")

    module = importlib.util.module_from_spec(spec)
    sys.modules[qualified_name] = module
    spec.loader.exec_module(module)
    return module
