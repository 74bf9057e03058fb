"""
Host environment for the editor: location, storage, timers, file I/O.

A ``Window`` owns one live root element at a time. ``reload()`` throws the
whole view away and re-runs the entrypoint against a fresh root, which is
how locale switches, resets and uploads take effect.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union
from urllib.parse import parse_qs

from hc_scaffold.dom.element import Element
from hc_scaffold.dom.storage import LocalStorage
from hc_scaffold.dom.timers import TimerQueue

logger = logging.getLogger(__name__)

ROOT_ID = "hc-scaffold"

PathLike = Union[str, Path]


class Location:
    """The query-string part of the page address."""

    def __init__(self, search: str = "") -> None:
        self.search = search

    @property
    def params(self) -> Dict[str, str]:
        parsed = parse_qs(self.search.lstrip("?"), keep_blank_values=True)
        return {key: values[0] for key, values in parsed.items()}

    def get(self, name: str) -> Optional[str]:
        return self.params.get(name)


@dataclass
class Download:
    """A file handed to the user."""

    filename: str
    data: str
    mime_type: str
    path: Optional[Path] = None


class Window:
    """Browser-like host for one editor page.

    Parameters
    ----------
    search : str
        Initial query string, e.g. ``"lang=en"``.
    storage : LocalStorage, optional
        Persistent store; a fresh in-memory one if omitted.
    timers : TimerQueue, optional
        Timer queue driving deferred work.
    file_chooser : callable, optional
        Called with no arguments when the page asks the user for a file;
        returns a path or ``None`` if the user cancels.
    download_dir : str or Path, optional
        Directory downloads are written to. Downloads are always recorded
        in ``downloads`` as well.
    """

    def __init__(
        self,
        search: str = "",
        storage: Optional[LocalStorage] = None,
        timers: Optional[TimerQueue] = None,
        file_chooser: Optional[Callable[[], Optional[PathLike]]] = None,
        download_dir: Optional[PathLike] = None,
    ) -> None:
        self.location = Location(search)
        self.local_storage = storage if storage is not None else LocalStorage()
        self.timers = timers if timers is not None else TimerQueue()
        self.file_chooser = file_chooser
        self.download_dir = Path(download_dir) if download_dir is not None else None
        self.downloads: List[Download] = []
        self.body = Element("body")
        self.root = self._new_root()
        self.app: Any = None
        self._entrypoint: Optional[Callable[["Window"], Any]] = None

    def _new_root(self) -> Element:
        self.body = Element("body")
        root = Element("div", {"id": ROOT_ID})
        self.body.append_child(root)
        return root

    def open(self, entrypoint: Callable[["Window"], Any]) -> Any:
        """Load the page by running ``entrypoint(window)``; returns its result."""
        self._entrypoint = entrypoint
        self.reload()
        return self.app

    def reload(self) -> None:
        """Discard the view and pending timers, then run the entrypoint again."""
        self.timers.clear()
        self.root = self._new_root()
        self.app = None
        if self._entrypoint is not None:
            logger.debug("Reloading page with query %r", self.location.search)
            self.app = self._entrypoint(self)

    def navigate(self, search: str) -> None:
        """Change the query string, which reloads the page."""
        self.location.search = search
        self.reload()

    def choose_file(self, file_input: Element) -> bool:
        """Ask the user for a file and fire ``change`` on ``file_input``.

        Returns
        -------
        bool
            False when there is no chooser or the user cancelled.
        """
        if self.file_chooser is None:
            return False
        chosen = self.file_chooser()
        if chosen is None:
            return False
        file_input.files = [str(chosen)]
        file_input.dispatch_event("change")
        return True

    def download(self, filename: str, data: str, mime_type: str) -> Download:
        path = None
        if self.download_dir is not None:
            self.download_dir.mkdir(parents=True, exist_ok=True)
            path = self.download_dir / filename
            path.write_text(data, encoding="utf-8")
        download = Download(filename=filename, data=data, mime_type=mime_type, path=path)
        self.downloads.append(download)
        logger.info("Downloaded %s (%d bytes)", filename, len(data))
        return download
