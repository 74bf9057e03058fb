"""
hc_scaffold: interactive quick-start editor for Holochain scaffold documents.
"""

__version__ = "0.1.0"

from hc_scaffold.core.controller import QuickStart, main
from hc_scaffold.core.document import ConfigDocument, Entry, Function, Properties, Zome
from hc_scaffold.core.yaml_export import to_yaml
from hc_scaffold.dom.storage import LocalStorage
from hc_scaffold.dom.window import Window
from hc_scaffold.errors import BindError, FileParseError, FileReadError, ScaffoldError


def open_editor(lang: str = "en", **kwargs):  # type: ignore[no-untyped-def]
    """Convenience function to open the editor in a new headless window."""
    window = Window(search=f"lang={lang}", **kwargs)
    return window.open(main)


__all__ = [
    "QuickStart",
    "ConfigDocument",
    "Zome",
    "Entry",
    "Function",
    "Properties",
    "Window",
    "LocalStorage",
    "ScaffoldError",
    "BindError",
    "FileReadError",
    "FileParseError",
    "main",
    "open_editor",
    "to_yaml",
    "__version__",
]
