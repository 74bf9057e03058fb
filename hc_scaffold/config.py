"""Editor-wide constants."""

SAVE_JSON_KEY = "hc-scaffold-save-json"

DOWNLOAD_FILENAME = "hc-scaffold.yml"
DOWNLOAD_MIME_TYPE = "application/yaml"

# Idle time before a burst of edits re-renders the YAML panel.
RENDER_DEBOUNCE_SECONDS = 0.3

DEFAULT_LOCALE = "en"

PROJECT_URL = "https://github.com/holochain/scaffold"
