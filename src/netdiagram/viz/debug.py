"""Debug utilities for network diagrams.

Spots data problems that show up on screen as a missing line or a node that
never highlights, before anything is drawn.

Usage:
    from netdiagram.viz.debug import find_issues, trace_node

    report = find_issues(graph)
    if report.has_issues:
        print(report.dangling_targets)

    info = trace_node(graph, "proc-algo")
    print(info.incoming_edges, info.outgoing_edges)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from netdiagram.graph import NetworkGraph


@dataclass
class ValidationResult:
    """Result of graph validation."""

    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


@dataclass
class NodeTrace:
    """Trace information for a single node."""

    status: str  # "FOUND" or "NOT_FOUND"
    node_id: str
    label: Optional[str] = None
    layer: Optional[str] = None
    incoming_edges: list[dict[str, str]] = field(default_factory=list)
    outgoing_edges: list[dict[str, str]] = field(default_factory=list)
    dangling_targets: list[str] = field(default_factory=list)
    partial_matches: list[str] = field(default_factory=list)


@dataclass
class IssueReport:
    """Comprehensive issue report."""

    dangling_targets: list[str] = field(default_factory=list)
    self_loops: list[str] = field(default_factory=list)
    duplicate_edges: list[str] = field(default_factory=list)
    disconnected_nodes: list[str] = field(default_factory=list)
    backward_edges: list[str] = field(default_factory=list)

    @property
    def has_issues(self) -> bool:
        """True if anything would render differently than authored.

        Disconnected nodes and backward edges are informational only.
        """
        return bool(self.dangling_targets or self.self_loops or self.duplicate_edges)

    def to_dict(self) -> dict[str, Any]:
        return {
            "dangling_targets": self.dangling_targets,
            "self_loops": self.self_loops,
            "duplicate_edges": self.duplicate_edges,
            "disconnected_nodes": self.disconnected_nodes,
            "backward_edges": self.backward_edges,
        }


def find_issues(graph: NetworkGraph) -> IssueReport:
    """Run every check over the graph.

    - dangling targets: edges to ids with no node (never drawn)
    - self loops: a node listing itself (drawn as a zero-length line)
    - duplicate edges: the same pair listed twice (drawn twice)
    - disconnected nodes: no edges at all
    - backward edges: target sits in the same or an earlier column
    """
    report = IssueReport()
    G = graph.to_networkx()

    report.dangling_targets = [f"{s} -> {t}" for s, t in graph.dangling_edges()]

    for source, target in G.edges():
        if source == target:
            report.self_loops.append(f"{source} -> {target}")

    seen: set[tuple[str, str]] = set()
    for source, target in G.edges():
        if (source, target) in seen:
            report.duplicate_edges.append(f"{source} -> {target}")
        seen.add((source, target))

    report.disconnected_nodes = [node_id for node_id in G.nodes if G.degree(node_id) == 0]

    for source, target in seen:
        if source != target and G.nodes[target]["layer_index"] <= G.nodes[source]["layer_index"]:
            report.backward_edges.append(f"{source} -> {target}")
    report.backward_edges.sort()

    return report


def validate_graph(graph: NetworkGraph) -> ValidationResult:
    """Quick pass/fail view of find_issues.

    Problems are reported as warnings, never errors: the renderer skips
    anything it cannot draw.
    """
    report = find_issues(graph)
    warnings = [f"Dangling target: {e}" for e in report.dangling_targets]
    warnings += [f"Self loop: {e}" for e in report.self_loops]
    warnings += [f"Duplicate edge: {e}" for e in report.duplicate_edges]
    return ValidationResult(valid=not report.has_issues, warnings=warnings)


def trace_node(graph: NetworkGraph, node_id: str) -> NodeTrace:
    """Trace edges into and out of a node ("points from" / "points to")."""
    node = graph.nodes.get(node_id)
    if node is None:
        needle = node_id.lower()
        partial = sorted(n for n in graph.nodes if needle in n.lower())
        return NodeTrace(status="NOT_FOUND", node_id=node_id, partial_matches=partial)

    G = graph.to_networkx()
    return NodeTrace(
        status="FOUND",
        node_id=node_id,
        label=node.label,
        layer=graph.layer_of(node_id),
        incoming_edges=[{"from": s, "to": node_id} for s, _ in G.in_edges(node_id)],
        outgoing_edges=[{"from": node_id, "to": t} for _, t in G.out_edges(node_id)],
        dangling_targets=[t for t in node.targets if t not in graph],
    )
