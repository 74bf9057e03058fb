"""End-to-end tests for the quick-start editor."""

import json

import pytest
import yaml

from hc_scaffold import __version__, i18n, open_editor
from hc_scaffold.config import DOWNLOAD_FILENAME, SAVE_JSON_KEY
from hc_scaffold.core.controller import QuickStart, main
from hc_scaffold.dom.storage import LocalStorage
from hc_scaffold.dom.window import Window
from hc_scaffold.errors import FileParseError, FileReadError

FIXTURE_1 = {
    "scaffoldVersion": "quick-start-0.0.1",
    "Version": 1,
    "UUID": "test-uuid",
    "Name": "test-name",
    "Properties": {"description": "test-description", "language": "en"},
    "PropertiesSchemaFile": "properties_schema.json",
    "DHTConfig": {"HashType": "sha2-256"},
    "Zomes": [
        {
            "Name": "test-zome-name",
            "Description": "test-zome-description",
            "NucleusType": "js",
            "CodeFile": "test-zome-name.js",
            "Entries": [
                {
                    "Name": "test-entry",
                    "DataFormat": "json",
                    "Sharing": "public",
                    "SchemaFile": "test-entry.json",
                    "_": "crud",
                }
            ],
            "Functions": [
                {"Name": "test-entryCreate", "CallingType": "json", "Exposure": "public", "_": "c:test-entry"},
                {"Name": "test-entryRead", "CallingType": "json", "Exposure": "public", "_": "r:test-entry"},
                {"Name": "test-entryUpdate", "CallingType": "json", "Exposure": "public", "_": "u:test-entry"},
                {"Name": "test-entryDelete", "CallingType": "json", "Exposure": "public", "_": "d:test-entry"},
                {"Name": "test-function", "CallingType": "json", "Exposure": "public"},
            ],
        }
    ],
}


@pytest.fixture(autouse=True)
def _english():
    i18n.set_locale("en")
    yield
    i18n.set_locale("en")


def _open(search="lang=en", saved=None, **kwargs):
    storage = LocalStorage()
    if saved is not None:
        storage.set_item(SAVE_JSON_KEY, saved if isinstance(saved, str) else json.dumps(saved))
    window = Window(search=search, storage=storage, **kwargs)
    window.open(main)
    return window


def _button(window, handler_name):
    return window.root.query_selector(f'[data-hc-bind="click:{handler_name}"]')


def _yaml(window):
    return yaml.safe_load(window.root.query_selector(".yaml-display").text_content)


def _type(control, value):
    control.value = value
    control.dispatch_event("input")


# --- Startup ---


def test_language_chooser_without_lang():
    window = _open(search="")
    buttons = window.root.query_selector_all(".hc-lang-button")
    assert [b.text_content for b in buttons] == ["English", "日本語"]
    assert window.root.query_selector(".page") is None


def test_language_chooser_for_unknown_lang():
    window = _open(search="lang=xx")
    assert len(window.root.query_selector_all(".hc-lang-button")) == 2


@pytest.mark.parametrize("lang", ["en", "ja"])
def test_page_title_translated(lang):
    window = _open(search=f"lang={lang}")
    assert i18n.get_locale() == lang
    assert window.root.query_selector(".page form h1").text_content == i18n.get_text("pageTitle")


def test_select_locale_reloads_in_language():
    window = _open(search="")
    ja = window.root.query_selector('[data-hc-locale="ja"]')
    ja.click()
    assert window.location.search == "lang=ja"
    assert isinstance(window.app, QuickStart)
    title = window.root.query_selector(".page form h1").text_content
    assert title == "Holochain スキャフォールド クイックスタート"


def test_loads_saved_document_end_to_end():
    window = _open(saved=FIXTURE_1)
    assert _yaml(window) == FIXTURE_1
    assert window.root.query_selector("#appname").value == "test-name"
    assert window.root.query_selector("#appdesc").value == "test-description"
    assert window.root.query_selector(".zomename").value == "test-zome-name"
    assert len(window.root.query_selector_all(".zome-entry-row")) == 1
    assert len(window.root.query_selector_all(".zome-function-row")) == 1


def test_corrupt_saved_document_starts_fresh():
    window = _open(saved="{not json")
    assert window.root.query_selector("#appname").value == ""
    saved = json.loads(window.local_storage.get_item(SAVE_JSON_KEY))
    assert saved["Zomes"] == []


@pytest.mark.parametrize(
    "saved",
    [
        {"Name": "x", "Properties": "oops", "Zomes": []},
        {"Name": "x", "Zomes": ["oops"]},
        {"Name": "x", "Zomes": [{"Name": "z", "Entries": "oops", "Functions": [3]}]},
    ],
)
def test_wrongly_shaped_saved_document_still_opens(saved):
    window = _open(saved=saved)
    assert window.root.query_selector("#appname").value == "x"
    doc = window.app.to_document()
    assert doc.properties.description == ""
    assert all(z.entries == [] and z.functions == [] for z in doc.zomes)


def test_saved_non_object_starts_fresh():
    window = _open(saved="[1, 2]")
    assert window.app.to_document().zomes == []


def test_language_recorded_in_properties():
    window = _open(search="lang=ja")
    assert window.app.to_document().properties.language == "ja"


# --- Editing ---


def test_remove_entry_and_add_function():
    window = _open(saved=FIXTURE_1)
    window.root.query_selector('.zome-entry-row [data-hc-bind="click:deleteZomeEntry"]').click()
    _button(window, "addZomeFunction").click()
    rows = window.root.query_selector_all(".zome-function-row")
    _type(rows[-1].query_selector(".zome-function-name"), "foo")
    window.timers.advance(1)

    zome = _yaml(window)["Zomes"][0]
    assert zome["Entries"] == []
    assert zome["Functions"] == [
        {"Name": "test-function", "CallingType": "json", "Exposure": "public"},
        {"Name": "foo", "CallingType": "json", "Exposure": "public"},
    ]


def test_remove_only_entry_then_add_function_foo():
    window = _open()
    _button(window, "addZome").click()
    _type(window.root.query_selector(".zomename"), "z")
    _button(window, "addZomeEntry").click()
    row = window.root.query_selector(".zome-entry-row")
    _type(row.query_selector(".zome-entry-name"), "e")
    box = row.query_selector(".zome-entry-create")
    box.checked = True
    box.dispatch_event("change")
    assert [f.name for f in window.app.to_document().zomes[0].functions] == ["eCreate"]

    row.query_selector('[data-hc-bind="click:deleteZomeEntry"]').click()
    _button(window, "addZomeFunction").click()
    _type(window.root.query_selector(".zome-function-name"), "foo")

    zome = window.app.to_document().zomes[0]
    assert zome.entries == []
    assert [f.name for f in zome.functions] == ["foo"]


def test_edit_app_name_rerenders_after_debounce():
    window = _open()
    _type(window.root.query_selector("#appname"), "my-app")
    assert _yaml(window)["Name"] == ""
    window.timers.advance(0.3)
    assert _yaml(window)["Name"] == "my-app"
    assert json.loads(window.local_storage.get_item(SAVE_JSON_KEY))["Name"] == "my-app"


def test_burst_of_edits_renders_once(monkeypatch):
    window = _open()
    app = window.app
    renders = []
    monkeypatch.setattr(app, "_display_yaml", lambda: renders.append(window.timers.now))
    control = window.root.query_selector("#appname")
    for text in ("a", "ab", "abc"):
        _type(control, text)
        window.timers.advance(0.1)
    assert renders == []
    window.timers.advance(0.25)
    assert len(renders) == 1
    assert app.to_document().name == "abc"


def test_crud_checkbox_derives_functions():
    window = _open()
    _button(window, "addZome").click()
    _button(window, "addZomeEntry").click()
    row = window.root.query_selector(".zome-entry-row")
    _type(row.query_selector(".zome-entry-name"), "post")
    for flag in ("create", "delete"):
        box = row.query_selector(f".zome-entry-{flag}")
        box.checked = True
        box.dispatch_event("change")
    sharing = row.query_selector(".zome-entry-sharing")
    sharing.value = "private"
    sharing.dispatch_event("change")

    zome = window.app.to_document().zomes[0]
    assert zome.entries[0].hint == "cd"
    assert [(f.name, f.exposure, f.hint) for f in zome.functions] == [
        ("postCreate", "private", "c:post"),
        ("postDelete", "private", "d:post"),
    ]


def test_unnamed_rows_left_out():
    window = _open()
    _button(window, "addZome").click()
    _button(window, "addZomeEntry").click()
    _button(window, "addZomeFunction").click()
    zome = window.app.to_document().zomes[0]
    assert zome.entries == []
    assert zome.functions == []


def test_delete_zome_drops_its_rows():
    window = _open(saved=FIXTURE_1)
    tracker = window.app.tracker
    _button(window, "deleteZome").click()
    assert window.root.query_selector(".zome") is None
    assert tracker.children(None, "zome-entry") == []
    assert not any(i.name in ("zome", "zome-entry", "zome-function") for i in tracker)
    assert _yaml(window)["Zomes"] == []


# --- Toolbar ---


def test_toggle_yaml_sidebar():
    window = _open()
    page = window.root.query_selector(".page")
    _button(window, "toggleYaml").click()
    assert "sidebar-hidden" in page.class_list
    _button(window, "toggleYaml").click()
    assert "sidebar-hidden" not in page.class_list


def test_download_yaml(tmp_path):
    window = _open(saved=FIXTURE_1, download_dir=tmp_path)
    _button(window, "downloadYaml").click()
    download = window.downloads[0]
    assert download.filename == DOWNLOAD_FILENAME == "hc-scaffold.yml"
    assert download.mime_type == "application/yaml"
    assert yaml.safe_load((tmp_path / DOWNLOAD_FILENAME).read_text(encoding="utf-8")) == FIXTURE_1


def test_new_document_discards_saved():
    window = _open(saved=FIXTURE_1)
    _button(window, "newDocument").click()
    assert window.root.query_selector("#appname").value == ""
    assert window.root.query_selector(".zome") is None
    assert json.loads(window.local_storage.get_item(SAVE_JSON_KEY))["UUID"] != "test-uuid"


# --- Menu ---


def test_menu_language_about_and_dismiss():
    window = _open()
    _button(window, "menu").click()
    overlay = window.root.query_selector(".hc-menu-overlay")
    assert overlay is not None

    _button(window, "languageMenu").click()
    assert len(overlay.query_selector_all(".hc-lang-button")) == 2

    _button(window, "about").click()
    assert overlay.query_selector(".hc-lang-button") is None
    assert overlay.query_selector(".hc-version").text_content == f"Version {__version__}"
    assert window.root.query_selector(".hc-menu-overlay") is overlay

    overlay.click()
    assert window.root.query_selector(".hc-menu-overlay") is None
    assert not any(i.name in ("menu", "about", "lang-button") for i in window.app.tracker)


# --- Upload ---


def _upload(window):
    _button(window, "upload").click()
    window.timers.run_pending()


def test_upload_yaml_document(tmp_path):
    path = tmp_path / "doc.yml"
    path.write_text(yaml.safe_dump(FIXTURE_1, allow_unicode=True), encoding="utf-8")
    window = _open(file_chooser=lambda: path)
    first_app = window.app
    _upload(window)
    assert window.app is not first_app
    assert _yaml(window) == FIXTURE_1


def test_upload_numeric_names(tmp_path):
    path = tmp_path / "numbers.yml"
    path.write_text(
        "Name: 7\nZomes:\n- Name: z\n  Entries:\n  - Name: 2024\n    _: c\n", encoding="utf-8"
    )
    window = _open(file_chooser=lambda: path)
    _upload(window)
    doc = window.app.to_document()
    assert doc.name == "7"
    assert doc.zomes[0].entries[0].name == "2024"
    assert [f.name for f in doc.zomes[0].functions] == ["2024Create"]
    assert _yaml(window)["Zomes"][0]["Functions"][0]["Name"] == "2024Create"


def test_upload_json_document(tmp_path):
    path = tmp_path / "doc.json"
    path.write_text(json.dumps(FIXTURE_1), encoding="utf-8")
    window = _open(file_chooser=lambda: path)
    _upload(window)
    assert window.root.query_selector("#appname").value == "test-name"


def test_upload_unparseable_file(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("a: [unclosed", encoding="utf-8")
    window = _open(saved=FIXTURE_1, file_chooser=lambda: path)
    before = window.local_storage.get_item(SAVE_JSON_KEY)

    with pytest.raises(FileParseError, match="Error Parsing File: bad.txt") as excinfo:
        _upload(window)
    assert excinfo.value.filename == "bad.txt"
    assert window.local_storage.get_item(SAVE_JSON_KEY) == before
    assert window.root.query_selector('input[type="file"]') is None


def test_upload_unreadable_file(tmp_path):
    window = _open(file_chooser=lambda: tmp_path / "missing.yml")
    with pytest.raises(FileReadError, match="Error Reading File: missing.yml"):
        _upload(window)


def test_upload_cancelled():
    window = _open(file_chooser=lambda: None)
    _upload(window)
    assert window.root.query_selector('input[type="file"]') is None
    assert window.timers.pending == 0


# --- Output ---


def test_to_html_includes_styles_and_root():
    html = _open().app.to_html()
    assert html.startswith("<style>")
    assert 'id="hc-scaffold"' in html
    assert "#hc-scaffold" in html


def test_open_editor():
    app = open_editor("ja")
    assert isinstance(app, QuickStart)
    assert app.to_document().properties.language == "ja"
