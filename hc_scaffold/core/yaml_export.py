"""
Annotated YAML for scaffold documents, and parsing of uploaded files.

The emitted document adds the fixed scaffold fields (file names, hash
type, nucleus type) around the editor's own fields and precedes each
top-level key with an explanatory comment.
"""

import json
from typing import Any, Dict, Optional, Union

import yaml

from hc_scaffold.core.document import ConfigDocument
from hc_scaffold.dom.element import Element

SCAFFOLD_VERSION = "quick-start-0.0.1"
DOCUMENT_VERSION = 1
PROPERTIES_SCHEMA_FILE = "properties_schema.json"
HASH_TYPE = "sha2-256"
NUCLEUS_TYPE = "js"

COMMENTS = {
    "scaffoldVersion": "Version of the tool that generated this scaffold.",
    "Version": "Version of this application's DNA.",
    "UUID": "Unique identifier; change it to start a separate network.",
    "Name": "Name of the application.",
    "Properties": "Free-form application properties.",
    "PropertiesSchemaFile": "JSON schema file describing Properties.",
    "DHTConfig": "Distributed hash table settings.",
    "Zomes": (
        "Zomes group the entry types and functions of the application.\n"
        "Entries and Functions carrying a \"_\" hint were generated by the\n"
        "quick-start editor; CRUD functions are derived from entry hints."
    ),
}


def scaffold_dict(document: Union[ConfigDocument, Dict[str, Any]]) -> Dict[str, Any]:
    """Lay out ``document`` in scaffold field order with the fixed fields added."""
    if isinstance(document, ConfigDocument):
        document = document.to_dict()

    zomes = []
    for zome in document.get("Zomes") or []:
        name = zome.get("Name", "")
        entries = []
        for entry in zome.get("Entries") or []:
            out = {
                "Name": entry.get("Name", ""),
                "DataFormat": entry.get("DataFormat", "json"),
                "Sharing": entry.get("Sharing", "public"),
            }
            if out["DataFormat"] == "json":
                out["SchemaFile"] = f"{out['Name']}.json"
            out["_"] = entry.get("_", "-")
            entries.append(out)
        functions = []
        for function in zome.get("Functions") or []:
            out = {
                "Name": function.get("Name", ""),
                "CallingType": function.get("CallingType", "json"),
                "Exposure": function.get("Exposure", "public"),
            }
            if function.get("_"):
                out["_"] = function["_"]
            functions.append(out)
        zomes.append(
            {
                "Name": name,
                "Description": zome.get("Description", ""),
                "NucleusType": NUCLEUS_TYPE,
                "CodeFile": f"{name}.js",
                "Entries": entries,
                "Functions": functions,
            }
        )

    return {
        "scaffoldVersion": SCAFFOLD_VERSION,
        "Version": DOCUMENT_VERSION,
        "UUID": document.get("UUID", ""),
        "Name": document.get("Name", ""),
        "Properties": dict(document.get("Properties") or {}),
        "PropertiesSchemaFile": PROPERTIES_SCHEMA_FILE,
        "DHTConfig": {"HashType": HASH_TYPE},
        "Zomes": zomes,
    }


def to_yaml(document: Union[ConfigDocument, Dict[str, Any]]) -> str:
    """Serialize ``document`` as commented, block-style YAML."""
    parts = []
    for key, value in scaffold_dict(document).items():
        for line in COMMENTS.get(key, "").splitlines():
            parts.append(f"# {line}")
        block = yaml.safe_dump(
            {key: value},
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
        parts.append(block.rstrip("\n"))
        parts.append("")
    return "\n".join(parts)


def load_text(text: str) -> Optional[Dict[str, Any]]:
    """Parse uploaded text as JSON, then as YAML.

    Returns
    -------
    dict or None
        The first parse that yields a mapping, or None when neither does.
    """
    try:
        data = json.loads(text)
    except ValueError:
        data = None
    if isinstance(data, dict):
        return data

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError:
        return None
    return data if isinstance(data, dict) else None


def highlight_block(element: Element) -> None:
    """Mark a YAML display element for the syntax highlighter."""
    element.class_list.add("hljs", "yaml")
