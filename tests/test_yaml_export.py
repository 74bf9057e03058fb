"""Tests for scaffold YAML output and upload parsing."""

import yaml

from hc_scaffold.core.document import ConfigDocument, Entry, Function, Properties, Zome
from hc_scaffold.core.yaml_export import (
    COMMENTS,
    highlight_block,
    load_text,
    scaffold_dict,
    to_yaml,
)
from hc_scaffold.dom.element import Element


def _make_document():
    return ConfigDocument(
        uuid="u-1",
        name="blog",
        properties=Properties(description="A blog", language="en"),
        zomes=[
            Zome(
                name="posts",
                description="Posting",
                entries=[
                    Entry(name="post", hint="c"),
                    Entry(name="tag", data_format="string", sharing="private"),
                ],
                functions=[
                    Function(name="postCreate", hint="c:post"),
                    Function(name="search", calling_type="string", exposure="zome"),
                ],
            )
        ],
    )


# --- Layout ---


def test_scaffold_dict_key_order():
    data = scaffold_dict(_make_document())
    assert list(data) == [
        "scaffoldVersion",
        "Version",
        "UUID",
        "Name",
        "Properties",
        "PropertiesSchemaFile",
        "DHTConfig",
        "Zomes",
    ]
    zome = data["Zomes"][0]
    assert list(zome) == ["Name", "Description", "NucleusType", "CodeFile", "Entries", "Functions"]


def test_scaffold_dict_fixed_fields():
    data = scaffold_dict(_make_document())
    assert data["scaffoldVersion"] == "quick-start-0.0.1"
    assert data["Version"] == 1
    assert data["PropertiesSchemaFile"] == "properties_schema.json"
    assert data["DHTConfig"] == {"HashType": "sha2-256"}
    zome = data["Zomes"][0]
    assert zome["NucleusType"] == "js"
    assert zome["CodeFile"] == "posts.js"


def test_schema_file_only_for_json_entries():
    entries = scaffold_dict(_make_document())["Zomes"][0]["Entries"]
    assert entries[0] == {
        "Name": "post",
        "DataFormat": "json",
        "Sharing": "public",
        "SchemaFile": "post.json",
        "_": "c",
    }
    assert "SchemaFile" not in entries[1]
    assert entries[1]["_"] == "-"


def test_function_hint_kept_only_on_derived():
    functions = scaffold_dict(_make_document())["Zomes"][0]["Functions"]
    assert functions[0]["_"] == "c:post"
    assert "_" not in functions[1]


def test_scaffold_dict_accepts_plain_dict():
    assert scaffold_dict({"Name": "x"})["Name"] == "x"
    assert scaffold_dict({})["Zomes"] == []


# --- YAML text ---


def test_yaml_reparses_to_scaffold_dict():
    doc = _make_document()
    assert yaml.safe_load(to_yaml(doc)) == scaffold_dict(doc)


def test_yaml_has_comment_before_each_key():
    lines = to_yaml(_make_document()).splitlines()
    for key in COMMENTS:
        index = next(i for i, line in enumerate(lines) if line.startswith(f"{key}:"))
        assert lines[index - 1].startswith("# ")


def test_yaml_is_block_style_and_unicode():
    text = to_yaml(ConfigDocument(uuid="u", name="ブログ", properties=Properties(description="d")))
    assert "Name: ブログ" in text
    assert "Properties:\n  description: d\n  language: en" in text


# --- Upload parsing ---


def test_load_text_json():
    assert load_text('{"Name": "x"}') == {"Name": "x"}


def test_load_text_yaml():
    assert load_text("Name: x\nZomes: []\n") == {"Name": "x", "Zomes": []}


def test_load_text_rejects_non_mappings():
    assert load_text("[1, 2]") is None
    assert load_text("just words") is None
    assert load_text("") is None


def test_load_text_rejects_invalid():
    assert load_text("a: [unclosed") is None


def test_highlight_block():
    el = Element("pre")
    highlight_block(el)
    assert {"hljs", "yaml"} <= set(el.class_list)
