"""
Configuration document data structures.

These dataclasses define the scaffold document the editor produces and
persists. ``to_dict`` emits the document's wire keys (``Name``,
``DataFormat``, ``_`` ...) in declaration order.
"""

import json
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

DATA_FORMATS = ("json", "string", "links")
SHARING_OPTIONS = ("public", "partial", "private")
CALLING_TYPES = ("json", "string")
EXPOSURES = ("public", "zome")

# (hint letter, flag name, function-name suffix), in hint order.
CRUD_OPERATIONS = (
    ("c", "create", "Create"),
    ("r", "read", "Read"),
    ("u", "update", "Update"),
    ("d", "delete", "Delete"),
)

EMPTY_HINT = "-"


def generate_uuid() -> str:
    return str(uuid.uuid4())


def crud_hint(create: bool = False, read: bool = False, update: bool = False,
              delete: bool = False) -> str:
    """Encode CRUD flags as ``"crud"`` letters, or ``"-"`` when none are set."""
    flags = {"create": create, "read": read, "update": update, "delete": delete}
    hint = "".join(letter for letter, name, _ in CRUD_OPERATIONS if flags[name])
    return hint or EMPTY_HINT


def parse_crud_hint(hint: Any) -> Dict[str, bool]:
    """Decode an entry hint back into flags by letter presence."""
    if not isinstance(hint, str):
        hint = ""
    return {name: letter in hint for letter, name, _ in CRUD_OPERATIONS}


def is_derived_hint(hint: Any) -> bool:
    """True for function hints of the form ``<letter>:<entry-name>``."""
    return isinstance(hint, str) and hint.find(":") == 1


def _text(data: Dict[str, Any], key: str, default: str = "") -> str:
    """``data[key]`` as a string; YAML may hand back numbers for names."""
    value = data.get(key)
    if value is None or value == "":
        return default
    return str(value)


def _mapping(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _records(value: Any) -> List[Dict[str, Any]]:
    """The mappings in a list, skipping anything else."""
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


@dataclass
class Entry:
    """A data record type in a zome."""

    name: str
    data_format: str = "json"
    sharing: str = "public"
    hint: str = EMPTY_HINT

    @property
    def flags(self) -> Dict[str, bool]:
        return parse_crud_hint(self.hint)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "Name": self.name,
            "DataFormat": self.data_format,
            "Sharing": self.sharing,
            "_": self.hint,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Entry":
        hint = data.get("_")
        return cls(
            name=_text(data, "Name"),
            data_format=_text(data, "DataFormat", "json"),
            sharing=_text(data, "Sharing", "public"),
            hint=hint if isinstance(hint, str) else EMPTY_HINT,
        )


@dataclass
class Function:
    """A callable exposed by a zome.

    ``hint`` is set only on functions derived from an entry's CRUD flags.
    """

    name: str
    calling_type: str = "json"
    exposure: str = "public"
    hint: Optional[str] = None

    @property
    def derived(self) -> bool:
        return is_derived_hint(self.hint)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "Name": self.name,
            "CallingType": self.calling_type,
            "Exposure": self.exposure,
        }
        if self.hint:
            data["_"] = self.hint
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Function":
        return cls(
            name=_text(data, "Name"),
            calling_type=_text(data, "CallingType", "json"),
            exposure=_text(data, "Exposure", "public"),
            hint=_text(data, "_") or None,
        )


@dataclass
class Zome:
    """A named module grouping entries and functions."""

    name: str = ""
    description: str = ""
    entries: List[Entry] = field(default_factory=list)
    functions: List[Function] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "Name": self.name,
            "Description": self.description,
            "Entries": [e.to_dict() for e in self.entries],
            "Functions": [f.to_dict() for f in self.functions],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Zome":
        return cls(
            name=_text(data, "Name"),
            description=_text(data, "Description"),
            entries=[Entry.from_dict(e) for e in _records(data.get("Entries"))],
            functions=[Function.from_dict(f) for f in _records(data.get("Functions"))],
        )


@dataclass
class Properties:
    description: str = ""
    language: str = "en"

    def to_dict(self) -> Dict[str, Any]:
        return {"description": self.description, "language": self.language}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Properties":
        return cls(
            description=_text(data, "description"),
            language=_text(data, "language", "en"),
        )


@dataclass
class ConfigDocument:
    """Complete description of the application being scaffolded.

    Attributes
    ----------
    uuid : str
        Random v4-style identifier, kept across edits and reloads.
    name : str
        Application name.
    properties : Properties
        Free-text description and the locale the document was edited in.
    zomes : List[Zome]
        Zomes in display order.
    """

    uuid: str = field(default_factory=generate_uuid)
    name: str = ""
    properties: Properties = field(default_factory=Properties)
    zomes: List[Zome] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "UUID": self.uuid,
            "Name": self.name,
            "Properties": self.properties.to_dict(),
            "Zomes": [z.to_dict() for z in self.zomes],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ConfigDocument":
        """Build a document, ignoring keys the editor does not model."""
        return cls(
            uuid=_text(data, "UUID") or generate_uuid(),
            name=_text(data, "Name"),
            properties=Properties.from_dict(_mapping(data.get("Properties"))),
            zomes=[Zome.from_dict(z) for z in _records(data.get("Zomes"))],
        )

    def to_json(self, path: Union[str, Path]) -> None:
        """Save document to JSON file."""
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "ConfigDocument":
        """Load document from JSON file."""
        with open(path, encoding="utf-8") as f:
            return cls.from_dict(json.load(f))
