"""Tests for graph.py - Node, Layer and NetworkGraph."""

import json

import networkx as nx
import pytest

from netdiagram.exceptions import GraphDefinitionError, GraphNotFoundError
from netdiagram.graph import Layer, NetworkGraph, Node, load_graph_file
from netdiagram.sample import SKILLS_NETWORK


class TestNode:
    def test_node_frozen(self):
        """Test Node is immutable."""
        n = Node("a", "A", ("b",))
        with pytest.raises(AttributeError):
            n.label = "changed"

    def test_default_targets_empty(self):
        assert Node("a", "A").targets == ()


class TestNetworkGraph:
    def test_layers_in_authoring_order(self, sample_graph):
        assert [layer.id for layer in sample_graph.layers] == ["layer-1", "layer-2", "layer-3"]

    def test_nodes_in_authoring_order(self, abcd_graph):
        assert list(abcd_graph.nodes) == ["A", "B", "C", "D"]
        assert [n.id for n in abcd_graph.iter_nodes()] == ["A", "B", "C", "D"]

    def test_nodes_mapping_is_read_only(self, abcd_graph):
        with pytest.raises(TypeError):
            abcd_graph.nodes["Z"] = Node("Z", "Z")

    def test_targets_in_authoring_order(self, abcd_graph):
        assert abcd_graph.targets("A") == ("B", "C")

    def test_targets_of_leaf_is_empty(self, abcd_graph):
        assert abcd_graph.targets("D") == ()

    def test_targets_of_unknown_id_is_empty(self, abcd_graph):
        """Unknown ids and nodes without edges look the same."""
        assert abcd_graph.targets("nope") == ()

    def test_sources(self, sample_graph):
        assert sample_graph.sources("proc-algo") == ("skill-py", "skill-ml")
        assert sample_graph.sources("skill-py") == ()

    def test_layer_of(self, abcd_graph):
        assert abcd_graph.layer_of("C") == "mid"
        assert abcd_graph.layer_of("nope") is None

    def test_iter_edges_order(self, abcd_graph):
        assert list(abcd_graph.iter_edges()) == [("A", "B"), ("A", "C"), ("B", "D")]

    def test_iter_edges_keeps_dangling(self, dangling_graph):
        edges = list(dangling_graph.iter_edges())
        assert ("A", "ghost") in edges
        assert dangling_graph.dangling_edges() == [("A", "ghost"), ("B", "phantom")]

    def test_edges_not_deduplicated(self):
        graph = NetworkGraph([Layer("l", (Node("a", "A", ("b", "b")), Node("b", "B")))])
        assert list(graph.iter_edges()) == [("a", "b"), ("a", "b")]

    def test_same_layer_and_backward_targets_allowed(self):
        graph = NetworkGraph.from_data(
            [
                {"id": "l1", "nodes": [{"id": "a", "targets": ["b"]}, {"id": "b", "targets": []}]},
                {"id": "l2", "nodes": [{"id": "c", "targets": ["a"]}]},
            ]
        )
        assert list(graph.iter_edges()) == [("a", "b"), ("c", "a")]

    def test_contains_and_len(self, abcd_graph):
        assert "A" in abcd_graph
        assert "ghost" not in abcd_graph
        assert len(abcd_graph) == 4

    def test_to_networkx(self, dangling_graph):
        G = dangling_graph.to_networkx()
        assert isinstance(G, nx.MultiDiGraph)
        assert set(G.nodes) == {"A", "B"}
        assert list(G.edges()) == [("A", "B")]
        assert G.nodes["B"]["layer"] == "l2"
        assert G.nodes["B"]["layer_index"] == 1


class TestFromData:
    def test_round_trip(self):
        assert NetworkGraph.from_data(SKILLS_NETWORK).to_data() == SKILLS_NETWORK

    def test_label_defaults_to_id(self):
        graph = NetworkGraph.from_data([{"id": "l", "nodes": [{"id": "x"}]}])
        assert graph.nodes["x"].label == "x"

    def test_layer_id_defaults_to_position(self):
        graph = NetworkGraph.from_data([{"nodes": [{"id": "x"}]}])
        assert graph.layers[0].id == "layer-1"

    def test_duplicate_node_id_raises(self):
        data = [
            {"id": "l1", "nodes": [{"id": "x"}]},
            {"id": "l2", "nodes": [{"id": "x"}]},
        ]
        with pytest.raises(GraphDefinitionError) as exc_info:
            NetworkGraph.from_data(data)
        assert exc_info.value.node_id == "x"
        assert exc_info.value.layer_id == "l2"
        assert "duplicate node id" in str(exc_info.value)

    def test_missing_node_id_raises(self):
        with pytest.raises(GraphDefinitionError, match="missing a string id"):
            NetworkGraph.from_data([{"id": "l", "nodes": [{"label": "no id"}]}])

    def test_targets_must_be_list(self):
        with pytest.raises(GraphDefinitionError, match="targets must be a list"):
            NetworkGraph.from_data([{"id": "l", "nodes": [{"id": "x", "targets": "y"}]}])

    def test_layer_must_be_mapping(self):
        with pytest.raises(GraphDefinitionError):
            NetworkGraph.from_data(["not a layer"])

    @pytest.mark.parametrize("data", [5, None, "layers", {"id": "l", "nodes": []}])
    def test_layers_must_be_list(self, data):
        with pytest.raises(GraphDefinitionError, match="layers must be a list"):
            NetworkGraph.from_data(data)

    @pytest.mark.parametrize("nodes", [None, 3, "x", {"id": "x"}])
    def test_nodes_must_be_list(self, nodes):
        with pytest.raises(GraphDefinitionError, match="nodes must be a list") as exc_info:
            NetworkGraph.from_data([{"id": "l", "nodes": nodes}])
        assert exc_info.value.layer_id == "l"


class TestLoadGraphFile:
    def test_load_layer_list(self, tmp_path):
        path = tmp_path / "graph.json"
        path.write_text(json.dumps(SKILLS_NETWORK))
        graph = load_graph_file(path)
        assert len(graph) == 12

    def test_load_layers_key(self, tmp_path):
        path = tmp_path / "graph.json"
        path.write_text(json.dumps({"layers": SKILLS_NETWORK}))
        assert len(load_graph_file(path).layers) == 3

    def test_missing_file(self, tmp_path):
        with pytest.raises(GraphNotFoundError):
            load_graph_file(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "graph.json"
        path.write_text("{not json")
        with pytest.raises(GraphDefinitionError, match="not valid JSON"):
            load_graph_file(path)

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "graph.json"
        path.write_bytes(b'[{"id": "l\xff", "nodes": []}]')
        with pytest.raises(GraphDefinitionError, match="not valid JSON"):
            load_graph_file(path)

    def test_layers_key_null(self, tmp_path):
        path = tmp_path / "graph.json"
        path.write_text(json.dumps({"layers": None}))
        with pytest.raises(GraphDefinitionError, match="layers must be a list"):
            load_graph_file(path)
