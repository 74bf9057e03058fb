"""
Projection between the editor's instance tree and the config document.

The tracked instances' edit values are the editor state. ``to_document``
reads them into a :class:`ConfigDocument`; ``from_document`` builds the
instance tree for a saved document at startup.
"""

import logging
from typing import Any, Dict, List, Optional

from hc_scaffold import i18n
from hc_scaffold.core.document import (
    CRUD_OPERATIONS,
    ConfigDocument,
    Entry,
    Function,
    Properties,
    Zome,
    crud_hint,
    generate_uuid,
)
from hc_scaffold.core.instances import InstanceTracker, TemplateInstance
from hc_scaffold.dom.element import Element

logger = logging.getLogger(__name__)


def zome_values(zome: Optional[Zome] = None) -> Dict[str, Any]:
    zome = zome or Zome()
    return {"name": zome.name, "description": zome.description}


def entry_values(entry: Optional[Entry] = None) -> Dict[str, Any]:
    entry = entry or Entry(name="")
    values: Dict[str, Any] = {
        "name": entry.name,
        "data_format": entry.data_format,
        "sharing": entry.sharing,
    }
    values.update(entry.flags)
    return values


def function_values(function: Optional[Function] = None) -> Dict[str, Any]:
    function = function or Function(name="")
    return {
        "name": function.name,
        "calling_type": function.calling_type,
        "exposure": function.exposure,
    }


def _named(values: Dict[str, Any]) -> bool:
    return bool(str(values.get("name") or "").strip())


class Projection:
    """Reads and writes the document held by a page instance.

    Parameters
    ----------
    tracker : InstanceTracker
        Tracker holding the page and everything inside it.
    page_id : str
        Id of the ``page`` instance; zomes are owned by it.
    zomes_container : Element
        Where zome instances are inserted.
    uuid : str, optional
        Document identifier; a new one is generated if omitted.
    """

    def __init__(
        self,
        tracker: InstanceTracker,
        page_id: str,
        zomes_container: Element,
        uuid: Optional[str] = None,
    ) -> None:
        self.tracker = tracker
        self.page_id = page_id
        self.zomes_container = zomes_container
        self.uuid = uuid or generate_uuid()

    # ------------------------------------------------------------- editing
    def add_zome(self, zome: Optional[Zome] = None) -> str:
        return self.tracker.instantiate(
            self.zomes_container, "zome", zome_values(zome), owner=self.page_id
        )

    def _zome_table(self, zome_id: str, prefix: str) -> Element:
        table = self.tracker.get(zome_id).query(f"#{prefix}-{zome_id}")
        if table is None:
            raise KeyError(f"Zome '{zome_id}' has no {prefix} table")
        return table

    def add_entry(self, zome_id: str, entry: Optional[Entry] = None) -> str:
        table = self._zome_table(zome_id, "zomeentries")
        return self.tracker.instantiate(table, "zome-entry", entry_values(entry), owner=zome_id)

    def add_function(self, zome_id: str, function: Optional[Function] = None) -> str:
        table = self._zome_table(zome_id, "zomefunctions")
        return self.tracker.instantiate(
            table, "zome-function", function_values(function), owner=zome_id
        )

    # ------------------------------------------------------ state -> doc
    def to_document(self) -> ConfigDocument:
        """Build the document for the current editor state.

        Entries and functions with blank names are left out. Each entry's
        CRUD flags yield derived functions ahead of the manual ones.
        """
        page = self.tracker.get(self.page_id).values
        return ConfigDocument(
            uuid=self.uuid,
            name=page.get("name") or "",
            properties=Properties(
                description=page.get("description") or "",
                language=i18n.get_locale(),
            ),
            zomes=[self._zome(z) for z in self.tracker.children(self.page_id, "zome")],
        )

    def _zome(self, instance: TemplateInstance) -> Zome:
        entry_rows = [
            e.values for e in self.tracker.children(instance.id, "zome-entry") if _named(e.values)
        ]
        function_rows = [
            f.values
            for f in self.tracker.children(instance.id, "zome-function")
            if _named(f.values)
        ]

        entries = [self._entry(values) for values in entry_rows]
        functions: List[Function] = []
        for entry in entries:
            functions.extend(self._derived_functions(entry))
        for values in function_rows:
            functions.append(
                Function(
                    name=values["name"],
                    calling_type=values.get("calling_type") or "json",
                    exposure=values.get("exposure") or "public",
                )
            )

        return Zome(
            name=instance.values.get("name") or "",
            description=instance.values.get("description") or "",
            entries=entries,
            functions=functions,
        )

    @staticmethod
    def _entry(values: Dict[str, Any]) -> Entry:
        return Entry(
            name=values["name"],
            data_format=values.get("data_format") or "json",
            sharing=values.get("sharing") or "public",
            hint=crud_hint(
                create=bool(values.get("create")),
                read=bool(values.get("read")),
                update=bool(values.get("update")),
                delete=bool(values.get("delete")),
            ),
        )

    @staticmethod
    def _derived_functions(entry: Entry) -> List[Function]:
        flags = entry.flags
        return [
            Function(
                name=entry.name + suffix,
                calling_type=entry.data_format,
                exposure=entry.sharing,
                hint=f"{letter}:{entry.name}",
            )
            for letter, flag, suffix in CRUD_OPERATIONS
            if flags[flag]
        ]

    # ------------------------------------------------------ doc -> state
    def from_document(self, document: ConfigDocument) -> None:
        """Populate an empty page from ``document``. Startup only.

        Functions derived from entry flags are skipped; ``to_document``
        regenerates them.
        """
        self.uuid = document.uuid
        self.tracker.set_value(self.page_id, "name", document.name)
        self.tracker.set_value(self.page_id, "description", document.properties.description)

        for zome in document.zomes:
            zome_id = self.add_zome(zome)
            for entry in zome.entries:
                self.add_entry(zome_id, entry)
            for function in zome.functions:
                if function.derived:
                    continue
                self.add_function(zome_id, function)
        logger.info(
            "Loaded document %s with %d zome(s)", document.uuid, len(document.zomes)
        )
