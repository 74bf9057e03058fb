"""View templates for the scaffold editor."""

from hc_scaffold.templates import views
from hc_scaffold.templates.registry import Template, TemplateRegistry

DEFAULT_TEMPLATES = {
    "page": views.page,
    "lang-button": views.lang_button,
    "menu": views.menu,
    "about": views.about,
    "zome": views.zome,
    "zome-entry": views.zome_entry,
    "zome-function": views.zome_function,
}


def default_registry() -> TemplateRegistry:
    """A registry holding the built-in editor views."""
    return TemplateRegistry(DEFAULT_TEMPLATES)


__all__ = [
    "DEFAULT_TEMPLATES",
    "Template",
    "TemplateRegistry",
    "default_registry",
]
