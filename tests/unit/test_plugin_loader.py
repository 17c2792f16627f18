"""Tests for plugin discovery."""

from pathlib import Path

import pytest

from notice_gate.host.plugin_loader import PluginEntry, create_plugins, scan_plugins
from notice_gate.plugins import Plugin

_PLUGIN_SOURCE = (
    "from notice_gate.model import LegalNotice\n"
    "from notice_gate.plugins import Plugin\n"
    "\n"
    "class {cls}(Plugin):\n"
    '    plugin_id = "{plugin_id}"\n'
    '    display_name = "{display_name}"\n'
)


@pytest.fixture
def plugins_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "plugins"
    directory.mkdir()
    (directory / "__init__.py").write_text("")
    return directory


def _write_plugin(
    directory: Path, filename: str, cls: str, plugin_id: str, display_name: str = ""
) -> None:
    (directory / filename).write_text(
        _PLUGIN_SOURCE.format(cls=cls, plugin_id=plugin_id, display_name=display_name)
    )


class TestScanPlugins:
    def test_nonexistent_directory_returns_empty(self, tmp_path: Path) -> None:
        assert scan_plugins(tmp_path / "does_not_exist") == {}

    def test_empty_directory_returns_empty(self, plugins_dir: Path) -> None:
        assert scan_plugins(plugins_dir) == {}

    def test_discovers_plugin(self, plugins_dir: Path) -> None:
        _write_plugin(plugins_dir, "search.py", "Search", "search", "Search")

        result = scan_plugins(plugins_dir)

        assert list(result) == ["search"]
        assert issubclass(result["search"].cls, Plugin)
        assert result["search"].source == plugins_dir / "search.py"

    def test_disabled_plugin_skipped(self, plugins_dir: Path) -> None:
        _write_plugin(plugins_dir, "search.py", "Search", "search")
        _write_plugin(plugins_dir, "other.py", "Other", "other")

        result = scan_plugins(plugins_dir, disabled={"search"})

        assert list(result) == ["other"]

    def test_class_without_plugin_id_skipped(self, plugins_dir: Path) -> None:
        _write_plugin(plugins_dir, "blank.py", "Blank", "")
        assert scan_plugins(plugins_dir) == {}

    def test_non_plugin_classes_ignored(self, plugins_dir: Path) -> None:
        (plugins_dir / "helpers.py").write_text(
            "class Helper:\n    plugin_id = 'helper'\n"
        )
        assert scan_plugins(plugins_dir) == {}

    def test_imported_plugin_classes_ignored(self, plugins_dir: Path) -> None:
        """The Plugin base class imported into a module is not registered."""
        (plugins_dir / "empty.py").write_text(
            "from notice_gate.plugins import Plugin\n"
        )
        assert scan_plugins(plugins_dir) == {}

    def test_underscore_files_skipped(self, plugins_dir: Path) -> None:
        _write_plugin(plugins_dir, "_private.py", "Private", "private")
        assert scan_plugins(plugins_dir) == {}

    def test_import_error_skipped(self, plugins_dir: Path) -> None:
        (plugins_dir / "broken.py").write_text("import does_not_exist_anywhere\n")
        _write_plugin(plugins_dir, "good.py", "Good", "good")

        result = scan_plugins(plugins_dir)

        assert list(result) == ["good"]

    def test_duplicate_id_later_file_wins(self, plugins_dir: Path) -> None:
        _write_plugin(plugins_dir, "a_first.py", "First", "dup")
        _write_plugin(plugins_dir, "b_second.py", "Second", "dup")

        result = scan_plugins(plugins_dir)

        assert result["dup"].cls.__name__ == "Second"

    def test_bundled_example_plugin(self) -> None:
        """The shipped plugins/ directory provides a plugin with a notice."""
        bundled = Path(__file__).parents[2] / "plugins"

        result = scan_plugins(bundled)

        assert "code_search" in result
        notice = result["code_search"].cls.legal_notice
        assert notice is not None
        assert notice.settings_key == "CodeSearchLegalNotice"


class TestCreatePlugins:
    def test_instances_sorted_by_id(self) -> None:
        class Beta(Plugin):
            plugin_id = "beta"

        class Alpha(Plugin):
            plugin_id = "alpha"

        registry = {
            "beta": PluginEntry(cls=Beta, plugin_id="beta", source=Path("b.py")),
            "alpha": PluginEntry(cls=Alpha, plugin_id="alpha", source=Path("a.py")),
        }

        plugins = create_plugins(registry)

        assert [type(p) for p in plugins] == [Alpha, Beta]

    def test_name_falls_back_to_plugin_id(self) -> None:
        class Unnamed(Plugin):
            plugin_id = "unnamed"

        assert Unnamed().name == "unnamed"
