"""
Markup for the editor's named views.

Each template takes a context mapping holding the translation function
``__``, the instance ``id``, and the template's own data values, and
returns an HTML fragment. Form controls carry ``data-hc-id`` and
``data-hc-field`` so edits land on the owning instance.
"""

import html
from typing import Any, Dict, Iterable

from hc_scaffold.core.document import (
    CALLING_TYPES,
    CRUD_OPERATIONS,
    DATA_FORMATS,
    EXPOSURES,
    SHARING_OPTIONS,
)
from hc_scaffold.styles.theme import BUTTON, CRUD_LABELS, DANGER_BUTTON

Context = Dict[str, Any]


def _esc(value: Any) -> str:
    return html.escape("" if value is None else str(value))


def _field_attrs(ctx: Context, field: str, events: str = "input:edit change:edit") -> str:
    return (
        f'data-hc-bind="{events}" data-hc-id="{_esc(ctx["id"])}" '
        f'data-hc-field="{_esc(field)}"'
    )


def _text_input(ctx: Context, css_class: str, field: str, placeholder: str = "",
                dom_id: str = "") -> str:
    id_attr = f'id="{_esc(dom_id)}" ' if dom_id else ""
    return (
        f'<input {id_attr}class="{css_class}" type="text" '
        f'value="{_esc(ctx.get(field, ""))}" placeholder="{_esc(placeholder)}" '
        f"{_field_attrs(ctx, field)}>"
    )


def _textarea(ctx: Context, css_class: str, field: str, dom_id: str = "") -> str:
    id_attr = f'id="{_esc(dom_id)}" ' if dom_id else ""
    return (
        f'<textarea {id_attr}class="{css_class}" {_field_attrs(ctx, field)}>'
        f"{_esc(ctx.get(field, ''))}</textarea>"
    )


def _select(ctx: Context, css_class: str, field: str, options: Iterable[str]) -> str:
    current = ctx.get(field)
    opts = "".join(
        f'<option value="{_esc(o)}"{" selected" if o == current else ""}>{_esc(o)}</option>'
        for o in options
    )
    return f'<select class="{css_class}" {_field_attrs(ctx, field, "change:edit")}>{opts}</select>'


def _checkbox(ctx: Context, css_class: str, field: str, label: str) -> str:
    checked = " checked" if ctx.get(field) else ""
    return (
        f'<label><input class="{css_class}" type="checkbox"{checked} '
        f'{_field_attrs(ctx, field, "change:edit")}>{_esc(label)}</label>'
    )


def _button(label: str, bind: str, css_class: str = BUTTON, instance_id: str = "") -> str:
    id_attr = f' data-hc-id="{_esc(instance_id)}"' if instance_id else ""
    return (
        f'<button type="button" class="{css_class}" data-hc-bind="{bind}"{id_attr}>'
        f"{_esc(label)}</button>"
    )


# ------------------------------------------------------------------ Page
def page(ctx: Context) -> str:
    __ = ctx["__"]
    return (
        f'<div class="page">'
        f'<form class="hc-form">'
        f'<div class="hc-toolbar">'
        f'{_button("☰", "click:menu")}'
        f'{_button(__("newDocument"), "click:newDocument")}'
        f'{_button(__("upload"), "click:upload")}'
        f'{_button(__("download"), "click:downloadYaml")}'
        f'{_button(__("toggleYaml"), "click:toggleYaml")}'
        f"</div>"
        f"<h1>{_esc(__('pageTitle'))}</h1>"
        f'<label for="appname">{_esc(__("appName"))}</label>'
        f'{_text_input(ctx, "hc-appname", "name", __("appNamePlaceholder"), dom_id="appname")}'
        f'<label for="appdesc">{_esc(__("appDescription"))}</label>'
        f'{_textarea(ctx, "hc-appdesc", "description", dom_id="appdesc")}'
        f"<h2>{_esc(__('zomes'))}</h2>"
        f'<div id="zomes"></div>'
        f'{_button(__("addZome"), "click:addZome")}'
        f"</form>"
        f'<aside class="sidebar">'
        f"<h2>{_esc(__('yamlTitle'))}</h2>"
        f'<pre class="yaml-display"></pre>'
        f"</aside>"
        f"</div>"
    )


def lang_button(ctx: Context) -> str:
    return (
        f'<button type="button" class="{BUTTON} hc-lang-button" '
        f'data-hc-bind="click:selectLocale" data-hc-locale="{_esc(ctx["locale"])}">'
        f'{_esc(ctx["langName"])}</button>'
    )


# ------------------------------------------------------------------ Menu
def menu(ctx: Context) -> str:
    __ = ctx["__"]
    iid = ctx["id"]
    return (
        f'<div class="hc-menu-overlay" data-hc-bind="click:dismiss" data-hc-id="{_esc(iid)}">'
        f'<div class="hc-menu">'
        f'{_button(__("language"), "click:languageMenu", instance_id=iid)}'
        f'{_button(__("about"), "click:about", instance_id=iid)}'
        f'<div class="menu-container"></div>'
        f"</div>"
        f"</div>"
    )


def about(ctx: Context) -> str:
    __ = ctx["__"]
    url = _esc(ctx["url"])
    return (
        f'<div class="hc-about">'
        f"<h2>{_esc(__('pageTitle'))}</h2>"
        f'<p class="hc-version">{_esc(__("version", ctx["version"]))}</p>'
        f'<a href="{url}" target="_blank">{url}</a>'
        f"</div>"
    )


# ----------------------------------------------------------------- Zomes
def zome(ctx: Context) -> str:
    __ = ctx["__"]
    iid = _esc(ctx["id"])
    entry_heads = "".join(
        f"<th>{_esc(__(key))}</th>" for key in ("entryName", "dataFormat", "sharing", "crud")
    )
    function_heads = "".join(
        f"<th>{_esc(__(key))}</th>" for key in ("functionName", "callingType", "exposure")
    )
    return (
        f'<div class="zome" data-hc-instance="{iid}">'
        f'<label>{_esc(__("zomeName"))}</label>'
        f'{_text_input(ctx, "zomename", "name")}'
        f'{_button(__("deleteZome"), "click:deleteZome", DANGER_BUTTON, ctx["id"])}'
        f'<label>{_esc(__("zomeDescription"))}</label>'
        f'{_textarea(ctx, "zomedesc", "description")}'
        f"<h3>{_esc(__('entries'))}</h3>"
        f'<table class="zome-entries" id="zomeentries-{iid}">'
        f"<thead><tr>{entry_heads}<th></th></tr></thead><tbody></tbody></table>"
        f'{_button(__("addEntry"), "click:addZomeEntry", instance_id=ctx["id"])}'
        f"<h3>{_esc(__('functions'))}</h3>"
        f'<table class="zome-functions" id="zomefunctions-{iid}">'
        f"<thead><tr>{function_heads}<th></th></tr></thead><tbody></tbody></table>"
        f'{_button(__("addFunction"), "click:addZomeFunction", instance_id=ctx["id"])}'
        f"</div>"
    )


def zome_entry(ctx: Context) -> str:
    __ = ctx["__"]
    checkboxes = "".join(
        _checkbox(ctx, f"zome-entry-{name}", name, CRUD_LABELS[name])
        for _, name, _ in CRUD_OPERATIONS
    )
    return (
        f'<tr class="zome-entry-row">'
        f'<td>{_text_input(ctx, "zome-entry-name", "name", __("entryName"))}</td>'
        f'<td>{_select(ctx, "zome-entry-data-format", "data_format", DATA_FORMATS)}</td>'
        f'<td>{_select(ctx, "zome-entry-sharing", "sharing", SHARING_OPTIONS)}</td>'
        f"<td>{checkboxes}</td>"
        f'<td>{_button(__("remove"), "click:deleteZomeEntry", DANGER_BUTTON, ctx["id"])}</td>'
        f"</tr>"
    )


def zome_function(ctx: Context) -> str:
    __ = ctx["__"]
    return (
        f'<tr class="zome-function-row">'
        f'<td>{_text_input(ctx, "zome-function-name", "name", __("functionName"))}</td>'
        f'<td>{_select(ctx, "zome-function-calling-type", "calling_type", CALLING_TYPES)}</td>'
        f'<td>{_select(ctx, "zome-function-exposure", "exposure", EXPOSURES)}</td>'
        f'<td>{_button(__("remove"), "click:deleteZomeFunction", DANGER_BUTTON, ctx["id"])}</td>'
        f"</tr>"
    )
