"""
Plugin extensions for Notice Gate.

Place plugin modules in this directory. Each plugin class must extend
Plugin from the notice_gate package and define a ``plugin_id`` class
attribute. Plugins listed in the disabled plugins file are not loaded.

A plugin that requires the user to accept terms before use sets
``legal_notice``. The notice is shown once; declining it disables the
plugin and restarts the application.

Example:
    from notice_gate.model import LegalNotice
    from notice_gate.plugins import Plugin

    class MyPlugin(Plugin):
        plugin_id = "my_plugin"
        display_name = "My Plugin"
        legal_notice = LegalNotice(
            title="My Plugin",
            message="<b>Terms</b><br>...",
            settings_key="MyPluginLegalNotice",
        )

See code_search.py for a complete example.
"""
