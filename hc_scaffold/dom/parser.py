"""Markup to element-tree parsing."""

from html.parser import HTMLParser
from typing import List

from hc_scaffold.dom.element import VOID_TAGS, Element, Text


class _TreeBuilder(HTMLParser):
    def __init__(self, container: Element) -> None:
        super().__init__(convert_charrefs=True)
        self._stack: List[Element] = [container]

    def handle_starttag(self, tag, attrs):
        element = Element(tag, {name: value or "" for name, value in attrs})
        self._stack[-1].append_child(element)
        if element.tag not in VOID_TAGS:
            self._stack.append(element)

    def handle_startendtag(self, tag, attrs):
        element = Element(tag, {name: value or "" for name, value in attrs})
        self._stack[-1].append_child(element)

    def handle_endtag(self, tag):
        # Close up to the matching open tag; stray end tags are ignored.
        for depth in range(len(self._stack) - 1, 0, -1):
            if self._stack[depth].tag == tag:
                del self._stack[depth:]
                return

    def handle_data(self, data):
        if data:
            self._stack[-1].append_child(Text(data))


def parse_fragment(markup: str, container_tag: str = "div") -> Element:
    """Parse ``markup`` into a detached ``container_tag`` element.

    Parameters
    ----------
    markup : str
        HTML fragment.
    container_tag : str
        Tag of the holder element; ``"table"`` for row fragments.

    Returns
    -------
    Element
        The holder, whose children are the parsed top-level nodes.
    """
    container = Element(container_tag)
    builder = _TreeBuilder(container)
    builder.feed(markup)
    builder.close()
    return container
