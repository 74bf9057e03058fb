"""Core editor components: document model, binding, instances, projection."""

from hc_scaffold.core.document import (
    ConfigDocument,
    Entry,
    Function,
    Properties,
    Zome,
    crud_hint,
    is_derived_hint,
    parse_crud_hint,
)
from hc_scaffold.core.binding import Binding, BindingEngine, BindingTarget, EventData, handler
from hc_scaffold.core.instances import InstanceTracker, TemplateInstance
from hc_scaffold.core.projection import Projection
from hc_scaffold.core.yaml_export import load_text, to_yaml
from hc_scaffold.core.controller import QuickStart

__all__ = [
    "ConfigDocument",
    "Entry",
    "Function",
    "Properties",
    "Zome",
    "crud_hint",
    "is_derived_hint",
    "parse_crud_hint",
    "Binding",
    "BindingEngine",
    "BindingTarget",
    "EventData",
    "handler",
    "InstanceTracker",
    "TemplateInstance",
    "Projection",
    "load_text",
    "to_yaml",
    "QuickStart",
]
