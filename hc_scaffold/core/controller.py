"""QuickStart: the scaffold editor's application controller."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional
from urllib.parse import quote

from hc_scaffold import __version__, i18n
from hc_scaffold.config import (
    DOWNLOAD_FILENAME,
    DOWNLOAD_MIME_TYPE,
    PROJECT_URL,
    RENDER_DEBOUNCE_SECONDS,
    SAVE_JSON_KEY,
)
from hc_scaffold.core.binding import BindingEngine, BindingTarget, EventData, handler
from hc_scaffold.core.document import ConfigDocument, generate_uuid
from hc_scaffold.core.instances import InstanceTracker
from hc_scaffold.core.projection import Projection
from hc_scaffold.core.yaml_export import highlight_block, load_text, to_yaml
from hc_scaffold.dom.element import Element
from hc_scaffold.dom.timers import Timer
from hc_scaffold.dom.window import Window
from hc_scaffold.errors import FileParseError, FileReadError
from hc_scaffold.styles.theme import SIDEBAR_HIDDEN, page_css
from hc_scaffold.templates import TemplateRegistry, default_registry

logger = logging.getLogger(__name__)

Params = Dict[str, Any]


class QuickStart(BindingTarget):
    """Editor for a scaffold document, rendered into a window's root.

    With a recognised ``lang`` query parameter the page editor is shown,
    restored from the document saved in local storage. Otherwise a
    language chooser is shown.

    Parameters
    ----------
    window : Window
        Host providing the root element, storage, timers and file I/O.
    registry : TemplateRegistry, optional
        View templates; the built-in ones if omitted.
    debounce : float
        Idle seconds before edits re-render the YAML panel.

    Examples
    --------
    >>> window = Window(search="lang=en")
    >>> app = window.open(main)
    >>> app.root.query_selector("#appname")
    """

    def __init__(
        self,
        window: Window,
        registry: Optional[TemplateRegistry] = None,
        debounce: float = RENDER_DEBOUNCE_SECONDS,
    ) -> None:
        self.window = window
        self.root = window.root
        self.storage = window.local_storage
        self.registry = registry or default_registry()
        self.engine = BindingEngine(self)
        self.tracker = InstanceTracker(self.registry, self.engine, i18n.get_text)
        self.debounce = debounce
        self.uuid = generate_uuid()

        self.projection: Optional[Projection] = None
        self.page: Optional[Element] = None
        self.yaml_display: Optional[Element] = None
        self._render_timer: Optional[Timer] = None

    def run(self) -> None:
        """Show the editor for the requested locale, or the locale chooser."""
        lang = (self.window.location.get("lang") or "").strip()

        if lang in i18n.list_locales():
            i18n.set_locale(lang)
            logger.info("Starting editor in locale %s", lang)

            page_id = self.tracker.instantiate(self.root, "page", {"name": "", "description": ""})
            page = self.tracker.get(page_id)
            self.page = page.query(".page")
            self.yaml_display = page.query(".yaml-display")
            self.projection = Projection(
                self.tracker, page_id, page.query("#zomes"), uuid=self.uuid
            )

            saved = self._load_saved()
            if saved is not None:
                self.projection.from_document(ConfigDocument.from_dict(saved))
            self._display_yaml()
        else:
            self._render_locale_buttons(self.root)

    # -- access from template binding -- #

    @handler("selectLocale")
    def select_locale(self, params: Params, evt: EventData) -> None:
        """Reload in the chosen language."""
        evt.event.stop_propagation()
        self.window.navigate("lang=" + quote(params["locale"]))

    @handler("newDocument")
    def new_document(self, params: Params, evt: EventData) -> None:
        """Forget the saved document and start over."""
        logger.info("Discarding saved document")
        self.storage.remove_item(SAVE_JSON_KEY)
        self.window.reload()

    @handler("upload")
    def upload(self, params: Params, evt: EventData) -> None:
        """Let the user pick a JSON or YAML document to load."""
        file_input = Element("input", {"type": "file", "style": "display:none"})

        def on_change(event: Any) -> None:
            file_input.remove_event_listener("change", on_change)
            file_input.remove()
            if file_input.files:
                self.window.timers.call_later(0, self._read_upload, file_input.files[0])

        file_input.add_event_listener("change", on_change)
        self.root.append_child(file_input)
        if not self.window.choose_file(file_input):
            file_input.remove()

    @handler("menu")
    def menu(self, params: Params, evt: EventData) -> None:
        self.tracker.instantiate(self.root, "menu", {})

    @handler("dismiss")
    def dismiss(self, params: Params, evt: EventData) -> None:
        self.tracker.remove(params["id"])

    @handler("languageMenu")
    def language_menu(self, params: Params, evt: EventData) -> None:
        evt.event.stop_propagation()
        container = self._menu_container(params["id"])
        self._render_locale_buttons(container, owner=params["id"])

    @handler("about")
    def about(self, params: Params, evt: EventData) -> None:
        evt.event.stop_propagation()
        container = self._menu_container(params["id"])
        self.tracker.instantiate(
            container, "about", {"version": __version__, "url": PROJECT_URL}, owner=params["id"]
        )

    @handler("toggleYaml")
    def toggle_yaml(self, params: Params, evt: EventData) -> None:
        """Hide or show the YAML sidebar."""
        self.page.class_list.toggle(SIDEBAR_HIDDEN)

    @handler("downloadYaml")
    def download_yaml(self, params: Params, evt: EventData) -> None:
        self.window.download(DOWNLOAD_FILENAME, self._gen_yaml(), DOWNLOAD_MIME_TYPE)

    @handler("render")
    def render(self, params: Params, evt: Optional[EventData] = None) -> None:
        """Re-render the YAML panel once edits have been idle for ``debounce``."""
        if self._render_timer is not None:
            self._render_timer.cancel()
        self._render_timer = self.window.timers.call_later(self.debounce, self._flush_render)

    @handler("edit")
    def edit(self, params: Params, evt: EventData) -> None:
        """Copy a form control's state into its instance's edit values."""
        element = evt.element
        if element.get_attribute("type") == "checkbox":
            value: Any = element.checked
        else:
            value = element.value
        self.tracker.get(params["id"]).values[params["field"]] = value
        self.render(params, evt)

    @handler("addZome")
    def add_zome(self, params: Params, evt: EventData) -> None:
        self.projection.add_zome()
        self._display_yaml()

    @handler("deleteZome")
    def delete_zome(self, params: Params, evt: EventData) -> None:
        self.tracker.remove(params["id"])
        self._display_yaml()

    @handler("addZomeEntry")
    def add_zome_entry(self, params: Params, evt: EventData) -> None:
        self.projection.add_entry(params["id"])
        self._display_yaml()

    @handler("deleteZomeEntry")
    def delete_zome_entry(self, params: Params, evt: EventData) -> None:
        self.tracker.remove(params["id"])
        self._display_yaml()

    @handler("addZomeFunction")
    def add_zome_function(self, params: Params, evt: EventData) -> None:
        self.projection.add_function(params["id"])
        self._display_yaml()

    @handler("deleteZomeFunction")
    def delete_zome_function(self, params: Params, evt: EventData) -> None:
        self.tracker.remove(params["id"])
        self._display_yaml()

    # -- output -- #

    def to_document(self) -> ConfigDocument:
        return self.projection.to_document()

    def to_html(self) -> str:
        """Generate the full HTML string."""
        return f"<style>{page_css()}</style>\n{self.root.to_html()}"

    def _repr_html_(self) -> str:
        """Jupyter auto-display."""
        return self.to_html()

    def display(self) -> None:
        """Display in IPython/Jupyter."""
        from IPython.display import HTML
        from IPython.display import display as ipy_display

        ipy_display(HTML(self.to_html()))

    # -- private -- #

    def _load_saved(self) -> Optional[Dict[str, Any]]:
        raw = self.storage.get_item(SAVE_JSON_KEY)
        if raw is None:
            return None
        try:
            saved = json.loads(raw)
        except ValueError:
            logger.warning("Saved document is not valid JSON; starting fresh")
            return None
        if not isinstance(saved, dict):
            logger.warning("Saved document is not an object; starting fresh")
            return None
        return saved

    def _render_locale_buttons(self, container: Element, owner: Optional[str] = None) -> None:
        for locale in i18n.list_locales():
            with i18n.using_locale(locale):
                self.tracker.instantiate(
                    container,
                    "lang-button",
                    {"locale": locale, "langName": i18n.get_text("langName")},
                    owner=owner,
                )

    def _menu_container(self, menu_id: str) -> Element:
        """Empty the menu's content area, dropping what was shown there."""
        for owned in self.tracker.children(menu_id):
            self.tracker.remove(owned.id)
        container = self.tracker.get(menu_id).query(".menu-container")
        container.clear()
        return container

    def _flush_render(self) -> None:
        self._render_timer = None
        self._display_yaml()

    def _display_yaml(self) -> None:
        self.yaml_display.text_content = self._gen_yaml()
        highlight_block(self.yaml_display)
        logger.debug("Re-rendered YAML panel")

    def _gen_yaml(self) -> str:
        """Build the document from the editor, persist it, return its YAML."""
        document = self.projection.to_document()
        self.storage.set_item(SAVE_JSON_KEY, json.dumps(document.to_dict(), ensure_ascii=False))
        return to_yaml(document)

    def _read_upload(self, path: str) -> None:
        name = Path(path).name
        try:
            text = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise FileReadError(name) from e

        document = load_text(text)
        if document is None:
            raise FileParseError(name)

        logger.info("Loaded upload %s", name)
        self.storage.set_item(SAVE_JSON_KEY, json.dumps(document, ensure_ascii=False, default=str))
        self.window.reload()


def main(window: Window) -> QuickStart:
    """Page entrypoint: build and run the editor for ``window``."""
    app = QuickStart(window)
    app.run()
    return app
