"""Headless browser model: elements, events, storage, timers, window."""

from hc_scaffold.dom.element import ClassList, Element, Event, Node, Text
from hc_scaffold.dom.parser import parse_fragment
from hc_scaffold.dom.storage import LocalStorage
from hc_scaffold.dom.timers import Timer, TimerQueue
from hc_scaffold.dom.window import Download, Location, Window

__all__ = [
    "ClassList",
    "Element",
    "Event",
    "Node",
    "Text",
    "parse_fragment",
    "LocalStorage",
    "Timer",
    "TimerQueue",
    "Download",
    "Location",
    "Window",
]
