"""Editor colors, CSS class names and the page stylesheet."""

from hc_scaffold.dom.window import ROOT_ID

ACCENT_COLOR = "#00838D"
ACCENT_TEXT_COLOR = "#FFFFFF"
PANEL_COLOR = "#F5F5F5"
BORDER_COLOR = "#000000"
SIDEBAR_WIDTH = "40%"

BUTTON = "hc-btn"
DANGER_BUTTON = "hc-btn hc-btn-danger"
SIDEBAR_HIDDEN = "sidebar-hidden"

# Shown next to each CRUD checkbox, in "crud" order.
CRUD_LABELS = {
    "create": "C",
    "read": "R",
    "update": "U",
    "delete": "D",
}


def page_css() -> str:
    s = f"#{ROOT_ID}"
    return f"""
{s} * {{ box-sizing: border-box; }}
{s} {{ font-family: 'IBM Plex Sans', 'Helvetica Neue', sans-serif; }}
{s} .page {{ display: flex; gap: 16px; }}
{s} .page form {{ flex: 1; padding: 16px; border: 3px solid {BORDER_COLOR}; }}
{s} .page .sidebar {{
  width: {SIDEBAR_WIDTH}; background: {PANEL_COLOR};
  border: 3px solid {BORDER_COLOR}; padding: 16px; overflow: auto;
}}
{s} .page.{SIDEBAR_HIDDEN} .sidebar {{ display: none; }}
{s} .hc-toolbar {{ display: flex; gap: 8px; margin-bottom: 16px; }}
{s} .{BUTTON} {{
  border: 2px solid {BORDER_COLOR}; background: white; cursor: pointer;
  padding: 4px 8px; font-weight: 700; text-transform: uppercase;
}}
{s} .{BUTTON}:hover {{ background: {ACCENT_COLOR}; color: {ACCENT_TEXT_COLOR}; }}
{s} .hc-btn-danger:hover {{ background: #CC0000; }}
{s} .zome {{ border: 2px solid {BORDER_COLOR}; padding: 8px; margin-bottom: 16px; }}
{s} table {{ width: 100%; border-collapse: collapse; }}
{s} th, {s} td {{ border: 1px solid #CCC; padding: 4px; text-align: left; }}
{s} .yaml-display {{ font-family: 'JetBrains Mono', 'Consolas', monospace; font-size: 12px; }}
{s} .hc-menu-overlay {{
  position: fixed; top: 0; left: 0; right: 0; bottom: 0;
  background: rgba(0,0,0,0.5); z-index: 1000;
}}
{s} .hc-menu {{
  background: white; border: 3px solid {BORDER_COLOR};
  width: 320px; margin: 64px auto; padding: 16px;
}}
"""
