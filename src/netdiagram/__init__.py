"""netdiagram - layered network diagrams with hover and toggle highlighting."""

from netdiagram.events import Click, DiagramEvent, PointerEnter, PointerLeave, Resize
from netdiagram.exceptions import GraphDefinitionError, GraphNotFoundError
from netdiagram.graph import Layer, NetworkGraph, Node, load_graph_file

__all__ = [
    "Click",
    "DiagramEvent",
    "GraphDefinitionError",
    "GraphNotFoundError",
    "Layer",
    "NetworkGraph",
    "Node",
    "PointerEnter",
    "PointerLeave",
    "Resize",
    "load_graph_file",
]
