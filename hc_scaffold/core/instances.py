"""Tracking of instantiated templates and their edit values."""

import itertools
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Optional

from hc_scaffold.core.binding import BindingEngine
from hc_scaffold.dom.element import Element, Node
from hc_scaffold.templates.registry import TemplateRegistry

logger = logging.getLogger(__name__)


@dataclass
class TemplateInstance:
    """A rendered template living in the view.

    Attributes
    ----------
    id : str
        ``<template-name>-<n>``, unique per tracker.
    name : str
        Template name.
    parent : Element
        Container the instance was inserted into.
    elements : List[Node]
        Top-level nodes the template produced, in order.
    values : Dict[str, Any]
        Data values the template was rendered with, updated by edits.
    owner : str, optional
        Id of the instance this one belongs to.
    """

    id: str
    name: str
    parent: Element
    elements: List[Node]
    values: Dict[str, Any] = field(default_factory=dict)
    owner: Optional[str] = None

    def query(self, selector: str) -> Optional[Element]:
        """First element matching ``selector`` within this instance."""
        for node in self.elements:
            if not isinstance(node, Element):
                continue
            if node.matches(selector):
                return node
            found = node.query_selector(selector)
            if found is not None:
                return found
        return None

    def control(self, field_name: str) -> Optional[Element]:
        """The form control editing ``field_name`` of this instance."""
        return self.query(f'[data-hc-id="{self.id}"][data-hc-field="{field_name}"]')


class InstanceTracker:
    """Instantiates templates into containers and remembers what they made.

    Parameters
    ----------
    registry : TemplateRegistry
        Source of template markup.
    engine : BindingEngine
        Binds each rendered fragment to the controller.
    translate : callable
        Passed to templates as ``__``.
    """

    def __init__(
        self,
        registry: TemplateRegistry,
        engine: BindingEngine,
        translate: Callable[..., str],
    ) -> None:
        self.registry = registry
        self.engine = engine
        self.translate = translate
        self._instances: Dict[str, TemplateInstance] = {}
        self._counter = itertools.count(1)

    def _gen_id(self, template_name: str) -> str:
        return f"{template_name}-{next(self._counter)}"

    def instantiate(
        self,
        parent: Element,
        template_name: str,
        data: Optional[Dict[str, Any]] = None,
        owner: Optional[str] = None,
    ) -> str:
        """Render ``template_name`` into ``parent`` and track the result.

        Rows rendered into a ``<table>`` go into its ``<tbody>``; anything
        else is appended directly to ``parent``.

        Returns
        -------
        str
            The new instance id.
        """
        instance_id = self._gen_id(template_name)
        values = dict(data or {})
        context = dict(values)
        context["__"] = self.translate
        context["id"] = instance_id

        nodes = self.registry.fragment(template_name, context, parent)
        for node in nodes:
            self.engine.bind(node)

        target = parent
        if parent.tag == "table":
            body = parent.query_selector("tbody")
            if body is None:
                body = Element("tbody")
                parent.append_child(body)
            target = body
        for node in nodes:
            target.append_child(node)

        self._instances[instance_id] = TemplateInstance(
            id=instance_id,
            name=template_name,
            parent=parent,
            elements=nodes,
            values=values,
            owner=owner,
        )
        logger.debug("Instantiated %s into %r", instance_id, parent)
        return instance_id

    def remove(self, instance_id: str) -> None:
        """Detach an instance's elements and forget it and its owned instances.

        Raises
        ------
        KeyError
            If ``instance_id`` is not tracked.
        """
        instance = self._instances[instance_id]
        for node in instance.elements:
            if node.parent is not None:
                node.parent.remove_child(node)
        self._discard(instance_id)
        logger.debug("Removed %s", instance_id)

    def _discard(self, instance_id: str) -> None:
        self._instances.pop(instance_id)
        for owned in [i.id for i in self._instances.values() if i.owner == instance_id]:
            self._discard(owned)

    def get(self, instance_id: str) -> TemplateInstance:
        return self._instances[instance_id]

    def children(self, owner: Optional[str], template_name: Optional[str] = None) -> List[TemplateInstance]:
        """Instances owned by ``owner``, in creation order."""
        return [
            i
            for i in self._instances.values()
            if i.owner == owner and (template_name is None or i.name == template_name)
        ]

    def set_value(self, instance_id: str, field_name: str, value: Any) -> None:
        """Update an edit value and the form control that shows it."""
        instance = self._instances[instance_id]
        instance.values[field_name] = value
        control = instance.control(field_name)
        if control is None:
            return
        if control.get_attribute("type") == "checkbox":
            control.checked = bool(value)
        else:
            control.value = value

    def __contains__(self, instance_id: object) -> bool:
        return instance_id in self._instances

    def __len__(self) -> int:
        return len(self._instances)

    def __iter__(self) -> Iterator[TemplateInstance]:
        return iter(list(self._instances.values()))
