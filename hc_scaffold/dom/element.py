"""
Headless element tree for the scaffold editor view.

Elements keep their form state (value, checked, selected option) in their
attributes and children, so ``to_html()`` always reflects what the user
has typed.
"""

import html
import re
from typing import Callable, Dict, Iterator, List, Optional, Tuple, Union

VOID_TAGS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "wbr"}
)

Listener = Callable[["Event"], object]


class Event:
    """A native event travelling from its target up through its ancestors."""

    def __init__(self, type: str) -> None:
        self.type = type
        self.target: Optional["Element"] = None
        self.current_target: Optional["Element"] = None
        self.propagation_stopped = False

    def stop_propagation(self) -> None:
        self.propagation_stopped = True


class Node:
    """Base for everything that can sit in an element's child list."""

    def __init__(self) -> None:
        self.parent: Optional["Element"] = None

    @property
    def text_content(self) -> str:
        return ""

    def to_html(self) -> str:
        raise NotImplementedError


class Text(Node):
    """A run of character data."""

    def __init__(self, data: str = "") -> None:
        super().__init__()
        self.data = data

    @property
    def text_content(self) -> str:
        return self.data

    def to_html(self) -> str:
        return html.escape(self.data, quote=False)

    def __repr__(self) -> str:
        return f"Text({self.data!r})"


class ClassList:
    """Set-like view over an element's ``class`` attribute."""

    def __init__(self, element: "Element") -> None:
        self._element = element

    def _names(self) -> List[str]:
        return self._element.attributes.get("class", "").split()

    def _store(self, names: List[str]) -> None:
        if names:
            self._element.attributes["class"] = " ".join(names)
        else:
            self._element.attributes.pop("class", None)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names())

    def __contains__(self, name: object) -> bool:
        return name in self._names()

    def __len__(self) -> int:
        return len(self._names())

    def contains(self, name: str) -> bool:
        return name in self

    def add(self, *names: str) -> None:
        current = self._names()
        for name in names:
            if name not in current:
                current.append(name)
        self._store(current)

    def remove(self, *names: str) -> None:
        self._store([n for n in self._names() if n not in names])

    def toggle(self, name: str) -> bool:
        """Flip ``name`` and return whether it is now present."""
        if name in self:
            self.remove(name)
            return False
        self.add(name)
        return True


class Element(Node):
    """An HTML element with attributes, children and event listeners."""

    def __init__(self, tag: str, attributes: Optional[Dict[str, str]] = None) -> None:
        super().__init__()
        self.tag = tag.lower()
        self.attributes: Dict[str, str] = dict(attributes or {})
        self.children: List[Node] = []
        self.files: List[str] = []
        self._listeners: Dict[str, List[Listener]] = {}

    def __repr__(self) -> str:
        ident = f"#{self.id}" if self.id else ""
        classes = "".join(f".{c}" for c in self.class_list)
        return f"<Element {self.tag}{ident}{classes}>"

    # ------------------------------------------------------------ attributes
    @property
    def id(self) -> Optional[str]:
        return self.attributes.get("id")

    @property
    def class_list(self) -> ClassList:
        return ClassList(self)

    def get_attribute(self, name: str) -> Optional[str]:
        return self.attributes.get(name)

    def set_attribute(self, name: str, value: str) -> None:
        self.attributes[name] = str(value)

    def remove_attribute(self, name: str) -> None:
        self.attributes.pop(name, None)

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes

    # ----------------------------------------------------------- form state
    @property
    def value(self) -> str:
        if self.tag == "textarea":
            return self.text_content
        if self.tag == "select":
            options = self.query_selector_all("option")
            for option in options:
                if option.has_attribute("selected"):
                    return option.value
            return options[0].value if options else ""
        if self.tag == "option" and "value" not in self.attributes:
            return self.text_content
        return self.attributes.get("value", "")

    @value.setter
    def value(self, value: str) -> None:
        value = "" if value is None else str(value)
        if self.tag == "textarea":
            self.text_content = value
        elif self.tag == "select":
            for option in self.query_selector_all("option"):
                if option.value == value:
                    option.set_attribute("selected", "")
                else:
                    option.remove_attribute("selected")
        else:
            self.set_attribute("value", value)

    @property
    def checked(self) -> bool:
        return "checked" in self.attributes

    @checked.setter
    def checked(self, checked: bool) -> None:
        if checked:
            self.set_attribute("checked", "")
        else:
            self.remove_attribute("checked")

    @property
    def text_content(self) -> str:
        return "".join(child.text_content for child in self.children)

    @text_content.setter
    def text_content(self, text: str) -> None:
        self.clear()
        if text:
            self.append_child(Text(text))

    # --------------------------------------------------------------- tree
    def append_child(self, node: Node) -> Node:
        if node.parent is not None:
            node.parent.remove_child(node)
        self.children.append(node)
        node.parent = self
        return node

    def remove_child(self, node: Node) -> Node:
        self.children.remove(node)
        node.parent = None
        return node

    def remove(self) -> None:
        if self.parent is not None:
            self.parent.remove_child(self)

    def clear(self) -> None:
        for child in list(self.children):
            self.remove_child(child)

    def iter_elements(self) -> Iterator["Element"]:
        """Yield every descendant element, depth-first, excluding self."""
        for child in self.children:
            if isinstance(child, Element):
                yield child
                yield from child.iter_elements()

    # ----------------------------------------------------------- selectors
    def matches(self, selector: str) -> bool:
        return _matches_chain(self, _parse_selector(selector))

    def query_selector_all(self, selector: str) -> List["Element"]:
        chain = _parse_selector(selector)
        return [el for el in self.iter_elements() if _matches_chain(el, chain)]

    def query_selector(self, selector: str) -> Optional["Element"]:
        chain = _parse_selector(selector)
        for el in self.iter_elements():
            if _matches_chain(el, chain):
                return el
        return None

    # -------------------------------------------------------------- events
    def add_event_listener(self, event_type: str, listener: Listener) -> None:
        self._listeners.setdefault(event_type, []).append(listener)

    def remove_event_listener(self, event_type: str, listener: Listener) -> None:
        listeners = self._listeners.get(event_type, [])
        if listener in listeners:
            listeners.remove(listener)

    def listener_count(self, event_type: str) -> int:
        return len(self._listeners.get(event_type, []))

    def dispatch_event(self, event: Union[Event, str]) -> Event:
        """Run listeners on this element, then bubble to each ancestor.

        Listeners run synchronously; a listener that raises aborts dispatch
        and the exception reaches the caller.
        """
        if isinstance(event, str):
            event = Event(event)
        event.target = self
        node: Optional[Element] = self
        while node is not None and not event.propagation_stopped:
            event.current_target = node
            for listener in list(node._listeners.get(event.type, [])):
                listener(event)
            node = node.parent
        event.current_target = None
        return event

    def click(self) -> Event:
        return self.dispatch_event("click")

    # -------------------------------------------------------------- output
    def to_html(self) -> str:
        attrs = "".join(
            f" {name}" if value == "" and name in _BOOLEAN_ATTRIBUTES
            else f' {name}="{html.escape(value)}"'
            for name, value in self.attributes.items()
        )
        if self.tag in VOID_TAGS:
            return f"<{self.tag}{attrs}>"
        inner = "".join(child.to_html() for child in self.children)
        return f"<{self.tag}{attrs}>{inner}</{self.tag}>"


_BOOLEAN_ATTRIBUTES = frozenset({"checked", "selected", "disabled", "hidden", "required", "multiple"})

# ---------------------------------------------------------------- selectors
#
# Supported grammar: compound selectors (tag, #id, .class, [attr], [attr=v])
# joined by the descendant combinator.

_TAG_RE = re.compile(r"\*|[a-zA-Z][\w-]*")
_SIMPLE_RE = re.compile(
    r"#(?P<id>[\w-]+)"
    r"|\.(?P<cls>[\w-]+)"
    r"|\[(?P<attr>[\w-]+)(?:=(?P<quote>[\"']?)(?P<val>.*?)(?P=quote))?\]"
)

_Compound = Tuple[Optional[str], List[Tuple[str, str, Optional[str]]]]


def _parse_compound(text: str) -> _Compound:
    tag: Optional[str] = None
    pos = 0
    match = _TAG_RE.match(text)
    if match:
        tag = None if match.group(0) == "*" else match.group(0).lower()
        pos = match.end()
    tests: List[Tuple[str, str, Optional[str]]] = []
    while pos < len(text):
        match = _SIMPLE_RE.match(text, pos)
        if not match:
            raise ValueError(f"Unsupported selector: {text!r}")
        if match.group("id"):
            tests.append(("attr", "id", match.group("id")))
        elif match.group("cls"):
            tests.append(("class", match.group("cls"), None))
        else:
            tests.append(("attr", match.group("attr"), match.group("val")))
        pos = match.end()
    return tag, tests


def _parse_selector(selector: str) -> List[_Compound]:
    parts = selector.split()
    if not parts:
        raise ValueError("Empty selector")
    return [_parse_compound(part) for part in parts]


def _matches_compound(element: Element, compound: _Compound) -> bool:
    tag, tests = compound
    if tag is not None and element.tag != tag:
        return False
    for kind, name, expected in tests:
        if kind == "class":
            if name not in element.class_list:
                return False
        elif name not in element.attributes:
            return False
        elif expected is not None and element.attributes[name] != expected:
            return False
    return True


def _matches_chain(element: Element, chain: List[_Compound]) -> bool:
    if not _matches_compound(element, chain[-1]):
        return False
    ancestor = element.parent
    for compound in reversed(chain[:-1]):
        while ancestor is not None and not _matches_compound(ancestor, compound):
            ancestor = ancestor.parent
        if ancestor is None:
            return False
        ancestor = ancestor.parent
    return True
