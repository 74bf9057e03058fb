"""Named view templates rendered into detached element fragments."""

from typing import Any, Callable, Dict, List, Optional

from hc_scaffold.dom.element import Element, Node, Text
from hc_scaffold.dom.parser import parse_fragment

Template = Callable[[Dict[str, Any]], str]

_ROW_SECTIONS = ("thead", "tbody", "tfoot")


class TemplateRegistry:
    """Maps template names to callables producing markup.

    Parameters
    ----------
    templates : dict, optional
        Initial ``{name: template}`` mapping.
    """

    def __init__(self, templates: Optional[Dict[str, Template]] = None) -> None:
        self._templates: Dict[str, Template] = dict(templates or {})

    def register(self, name: str, template: Template) -> None:
        self._templates[name] = template

    def names(self) -> List[str]:
        return list(self._templates)

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def render(self, name: str, context: Dict[str, Any]) -> str:
        """Render template ``name``; raises ``KeyError`` for unknown names."""
        return self._templates[name](context)

    def fragment(self, name: str, context: Dict[str, Any], container: Element) -> List[Node]:
        """Render and parse a template into nodes shaped for ``container``.

        A ``<table>`` container gets the fragment's ``<tr>`` rows; any other
        container gets its top-level nodes, minus whitespace-only text.
        The returned nodes are detached.
        """
        markup = self.render(name, context)
        if container.tag == "table":
            holder = parse_fragment(markup, "table")
            nodes: List[Node] = []
            for child in holder.children:
                if not isinstance(child, Element):
                    continue
                if child.tag == "tr":
                    nodes.append(child)
                elif child.tag in _ROW_SECTIONS:
                    nodes.extend(c for c in child.children if isinstance(c, Element) and c.tag == "tr")
        else:
            holder = parse_fragment(markup)
            nodes = [
                c for c in holder.children if not (isinstance(c, Text) and not c.data.strip())
            ]
        for node in nodes:
            if node.parent is not None:
                node.parent.remove_child(node)
        return nodes
