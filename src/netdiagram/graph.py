"""Layered graph model for network diagrams."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping

import networkx as nx

from netdiagram.exceptions import GraphDefinitionError, GraphNotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence


@dataclass(frozen=True)
class Node:
    """A box in the diagram.

    Attributes:
        id: Unique identifier assigned by the data author
        label: Text shown inside the box
        targets: Ids this node points to, in authoring order. Entries may
            reference any layer, including ids that do not exist.
    """

    id: str
    label: str
    targets: tuple[str, ...] = ()


@dataclass(frozen=True)
class Layer:
    """An ordered column of nodes."""

    id: str
    nodes: tuple[Node, ...] = ()


class NetworkGraph:
    """Immutable directed graph whose nodes are grouped into ordered layers.

    Placement is authored, not computed: layers render left to right in the
    order given and nodes top to bottom within their layer.

    Lookups for unknown ids return empty results instead of raising, so callers
    treat "unknown id" and "no edges" the same way.

    Example:
        >>> graph = NetworkGraph.from_data([
        ...     {"id": "in", "nodes": [{"id": "a", "label": "A", "targets": ["b"]}]},
        ...     {"id": "out", "nodes": [{"id": "b", "label": "B"}]},
        ... ])
        >>> graph.targets("a")
        ('b',)
        >>> graph.targets("missing")
        ()
    """

    def __init__(self, layers: Iterable[Layer]) -> None:
        self._layers = tuple(layers)
        self._nodes = self._build_nodes_dict(self._layers)
        self._layer_by_node = {
            node.id: layer.id for layer in self._layers for node in layer.nodes
        }

    @staticmethod
    def _build_nodes_dict(layers: tuple[Layer, ...]) -> dict[str, Node]:
        nodes: dict[str, Node] = {}
        for layer in layers:
            for node in layer.nodes:
                if node.id in nodes:
                    raise GraphDefinitionError(
                        "duplicate node id", node_id=node.id, layer_id=layer.id
                    )
                nodes[node.id] = node
        return nodes

    @property
    def layers(self) -> tuple[Layer, ...]:
        return self._layers

    @property
    def nodes(self) -> Mapping[str, Node]:
        """Read-only map of node id to Node, in authoring order."""
        return MappingProxyType(self._nodes)

    def iter_nodes(self) -> Iterator[Node]:
        """Yield every node, layer by layer, in authoring order."""
        for layer in self._layers:
            yield from layer.nodes

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def targets(self, node_id: str) -> tuple[str, ...]:
        """Return the authored target ids of a node, or () if it is unknown."""
        node = self._nodes.get(node_id)
        return node.targets if node is not None else ()

    def sources(self, node_id: str) -> tuple[str, ...]:
        """Return ids of nodes that list node_id as a target (one per edge)."""
        return tuple(source for source, target in self.iter_edges() if target == node_id)

    def layer_of(self, node_id: str) -> str | None:
        return self._layer_by_node.get(node_id)

    def iter_edges(self) -> Iterator[tuple[str, str]]:
        """Yield (source_id, target_id) for every authored target.

        Order follows (layer, node within layer, target within node). Edges are
        not deduplicated and dangling targets are included.
        """
        for node in self.iter_nodes():
            for target_id in node.targets:
                yield node.id, target_id

    def dangling_edges(self) -> list[tuple[str, str]]:
        """Edges whose target id does not resolve to a node."""
        return [(s, t) for s, t in self.iter_edges() if t not in self._nodes]

    def to_networkx(self) -> nx.MultiDiGraph:
        """Build a NetworkX view of the resolved edges.

        Nodes carry 'label', 'layer' and 'position' (index within layer)
        attributes. Dangling targets are left out; parallel edges are kept.
        """
        G = nx.MultiDiGraph()
        for layer_index, layer in enumerate(self._layers):
            for position, node in enumerate(layer.nodes):
                G.add_node(
                    node.id,
                    label=node.label,
                    layer=layer.id,
                    layer_index=layer_index,
                    position=position,
                )
        for source, target in self.iter_edges():
            if target in self._nodes:
                G.add_edge(source, target)
        return G

    @classmethod
    def from_data(cls, data: Sequence[Mapping[str, Any]]) -> "NetworkGraph":
        """Build a graph from authored layer data.

        Args:
            data: List of ``{"id": ..., "nodes": [{"id", "label", "targets"}]}``

        Raises:
            GraphDefinitionError: If the layers or a layer's nodes are not a list,
                an id is missing, or targets is not a list
        """
        if not isinstance(data, (list, tuple)):
            raise GraphDefinitionError(
                f"layers must be a list (got {type(data).__name__})"
            )
        layers = []
        for layer_index, raw_layer in enumerate(data):
            if not isinstance(raw_layer, Mapping):
                raise GraphDefinitionError(f"layer #{layer_index} is not a mapping")
            layer_id = str(raw_layer.get("id") or f"layer-{layer_index + 1}")
            raw_nodes = raw_layer.get("nodes", ())
            if not isinstance(raw_nodes, (list, tuple)):
                raise GraphDefinitionError("nodes must be a list", layer_id=layer_id)
            nodes = tuple(_parse_node(raw_node, layer_id) for raw_node in raw_nodes)
            layers.append(Layer(id=layer_id, nodes=nodes))
        return cls(layers)

    def to_data(self) -> list[dict[str, Any]]:
        """Inverse of from_data."""
        return [
            {
                "id": layer.id,
                "nodes": [
                    {"id": n.id, "label": n.label, "targets": list(n.targets)}
                    for n in layer.nodes
                ],
            }
            for layer in self._layers
        ]

    def __repr__(self) -> str:
        return f"NetworkGraph(layers={len(self._layers)}, nodes={len(self._nodes)})"


def _parse_node(raw: Any, layer_id: str) -> Node:
    if not isinstance(raw, Mapping):
        raise GraphDefinitionError("node entry is not a mapping", layer_id=layer_id)
    node_id = raw.get("id")
    if not isinstance(node_id, str) or not node_id:
        raise GraphDefinitionError("node is missing a string id", layer_id=layer_id)
    targets = raw.get("targets", [])
    if not isinstance(targets, (list, tuple)):
        raise GraphDefinitionError(
            "targets must be a list", node_id=node_id, layer_id=layer_id
        )
    label = raw.get("label")
    return Node(
        id=node_id,
        label=str(label) if label is not None else node_id,
        targets=tuple(str(t) for t in targets),
    )


def load_graph_file(path: str | Path) -> NetworkGraph:
    """Load a NetworkGraph from a JSON file of layers.

    Raises:
        GraphNotFoundError: If the file does not exist
        GraphDefinitionError: If the file is not valid graph data
    """
    path = Path(path)
    if not path.is_file():
        raise GraphNotFoundError(str(path), f"Graph file not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise GraphDefinitionError(f"{path} is not valid JSON: {e}") from e
    if isinstance(data, Mapping):
        data = data.get("layers", [])
    return NetworkGraph.from_data(data)
