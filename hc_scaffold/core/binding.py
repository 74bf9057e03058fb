"""
Declarative event binding for rendered views.

Markup declares bindings with ``data-hc-bind="event:handler ..."``; every
other ``data-hc-<key>`` attribute on the same element becomes a handler
parameter. ``BindingEngine.scan`` turns a rendered fragment into an explicit
binding table once, and ``bind`` resolves each handler against the target's
``@handler`` table before any listener is attached.
"""

import copy
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

from hc_scaffold.dom.element import Element, Event, Node
from hc_scaffold.errors import BindError

logger = logging.getLogger(__name__)

BIND_ATTRIBUTE = "data-hc-bind"
PARAM_PREFIX = "data-hc-"

_HANDLER_MARK = "_hc_handler"


def handler(name: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Expose a method to markup bindings under ``name``."""

    def mark(func: Callable[..., Any]) -> Callable[..., Any]:
        setattr(func, _HANDLER_MARK, name)
        return func

    return mark


class BindingTarget:
    """Base for objects whose ``@handler`` methods markup can bind to.

    The name-to-method table is built once per class.
    """

    _handler_table: Dict[str, str] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        table: Dict[str, str] = {}
        for klass in reversed(cls.__mro__):
            for attr, value in vars(klass).items():
                name = getattr(value, _HANDLER_MARK, None)
                if name:
                    table[name] = attr
        cls._handler_table = table

    @classmethod
    def handler_names(cls) -> List[str]:
        return sorted(cls._handler_table)

    def resolve_handler(self, name: str) -> Callable[..., Any]:
        attr = self._handler_table.get(name)
        func = getattr(self, attr, None) if attr else None
        if not callable(func):
            raise BindError(f"bad bind {name}")
        return func


@dataclass
class EventData:
    """What a handler learns about the native event that triggered it."""

    element: Element
    event_name: str
    event: Event


@dataclass
class Binding:
    """One row of a view's binding table."""

    element: Element
    event_name: str
    handler_name: str
    params: Dict[str, str] = field(default_factory=dict)


class BindingEngine:
    """Attaches markup-declared bindings to a :class:`BindingTarget`."""

    def __init__(self, target: BindingTarget) -> None:
        self.target = target

    def scan(self, root: Node) -> List[Binding]:
        """Collect the bindings declared in ``root`` and its descendants.

        Children are visited before their parent; each element exactly once.

        Raises
        ------
        BindError
            If a declaration is not of the form ``event:handler``.
        """
        bindings: List[Binding] = []
        self._visit(root, bindings)
        return bindings

    def _visit(self, node: Node, bindings: List[Binding]) -> None:
        if not isinstance(node, Element):
            return
        for child in node.children:
            self._visit(child, bindings)
        declaration = node.get_attribute(BIND_ATTRIBUTE)
        if not declaration:
            return

        params = {
            name[len(PARAM_PREFIX):]: value
            for name, value in node.attributes.items()
            if name.startswith(PARAM_PREFIX) and name != BIND_ATTRIBUTE
        }
        for pair in declaration.split():
            event_name, sep, handler_name = pair.partition(":")
            if not sep or not event_name or not handler_name:
                raise BindError(f"bad bind declaration {pair!r}")
            bindings.append(Binding(node, event_name, handler_name, params))

    def bind(self, root: Node) -> List[Binding]:
        """Scan ``root`` and attach a listener for every binding found.

        All handlers are resolved before any listener is attached, so a bad
        declaration leaves the fragment unbound.

        Returns
        -------
        List[Binding]
            The binding table for ``root``.

        Raises
        ------
        BindError
            If a handler name is unknown to the target.
        """
        bindings = self.scan(root)
        resolved = [(b, self.target.resolve_handler(b.handler_name)) for b in bindings]
        for binding, func in resolved:
            binding.element.add_event_listener(binding.event_name, self._listener(binding, func))
        if bindings:
            logger.debug("Bound %d handler(s) under %r", len(bindings), root)
        return bindings

    @staticmethod
    def _listener(binding: Binding, func: Callable[..., Any]) -> Callable[[Event], Any]:
        def listener(event: Event) -> Any:
            return func(
                copy.deepcopy(binding.params),
                EventData(element=binding.element, event_name=binding.event_name, event=event),
            )

        return listener
