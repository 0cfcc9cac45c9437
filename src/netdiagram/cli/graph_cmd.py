"""Graph CLI commands: ls, inspect."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path
from typing import Annotated

import typer

from netdiagram.cli._config import load_config
from netdiagram.cli._format import print_json, print_lines, print_table
from netdiagram.exceptions import GraphDefinitionError, GraphNotFoundError
from netdiagram.graph import NetworkGraph, load_graph_file

app = typer.Typer(help="Inspect graph data.")

SAMPLE_TARGET = "sample"


def _import_graph(module_path: str) -> NetworkGraph:
    """Import graph data from 'module:attribute' path.

    The attribute may be a NetworkGraph or a list of layer mappings.

    Examples:
        my_module:graph
        my_package.diagrams:SKILLS
    """
    module_name, attr_name = module_path.rsplit(":", 1)

    try:
        if "." not in sys.path:
            sys.path.insert(0, ".")
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise GraphNotFoundError(module_path, f"Could not import module '{module_name}': {e}") from e

    value = getattr(module, attr_name, None)
    if value is None:
        raise GraphNotFoundError(module_path, f"Module '{module_name}' has no attribute '{attr_name}'")
    if isinstance(value, NetworkGraph):
        return value
    if isinstance(value, (list, tuple)):
        return NetworkGraph.from_data(value)
    raise GraphNotFoundError(
        module_path,
        f"'{module_path}' is not a NetworkGraph or layer list (got {type(value).__name__})",
    )


def _load_from_registry(name: str) -> NetworkGraph:
    """Look up a graph name in [tool.netdiagram.graphs] and load it."""
    config = load_config()
    entry = config.graphs.get(name)
    if entry is None:
        if name == SAMPLE_TARGET:
            from netdiagram.sample import skills_network

            return skills_network()
        raise GraphNotFoundError(name, f"'{name}' not found in [tool.netdiagram.graphs]")
    if ":" in entry and not entry.endswith(".json"):
        return _import_graph(entry)
    path = Path(entry)
    if not path.is_absolute() and config.root is not None:
        path = config.root / path
    return load_graph_file(path)


def resolve_graph(target: str) -> NetworkGraph:
    """Resolve a JSON path, 'module:attr', registry name, or 'sample'.

    Raises:
        GraphNotFoundError: If the target cannot be found
        GraphDefinitionError: If the data is malformed
    """
    if target.endswith(".json") or Path(target).is_file():
        return load_graph_file(target)
    if ":" in target:
        return _import_graph(target)
    return _load_from_registry(target)


def load_graph(target: str) -> NetworkGraph:
    """resolve_graph for CLI commands: prints the problem and exits 1."""
    try:
        return resolve_graph(target)
    except (GraphNotFoundError, GraphDefinitionError) as e:
        print(f"Error: {e}")
        if isinstance(e, GraphNotFoundError) and ":" not in target:
            print("Hint: Use a JSON file, 'module:attribute', or register in pyproject.toml:")
            print(f'  [tool.netdiagram.graphs]\n  {target} = "diagrams/{target}.json"')
        raise typer.Exit(1) from e


@app.command("ls")
def graph_ls(
    as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
    output: Annotated[str | None, typer.Option("--output", help="Write JSON to file")] = None,
):
    """List registered graphs from [tool.netdiagram.graphs]."""
    config = load_config()

    if as_json:
        print_json("graph.ls", {"graphs": config.graphs}, output)
        return

    if not config.graphs:
        print("\n  No graphs registered in pyproject.toml.")
        print("  Add entries under [tool.netdiagram.graphs]:")
        print('    [tool.netdiagram.graphs]\n    skills = "diagrams/skills.json"')
        return

    headers = ["Name", "Source"]
    rows = [[name, path] for name, path in sorted(config.graphs.items())]
    lines = print_table(headers, rows)

    print(f"\n  Registered graphs ({len(config.graphs)}):\n")
    print_lines(lines)


@app.command("inspect")
def graph_inspect(
    target: Annotated[str, typer.Argument(help="JSON file, 'module:attribute', or registered name")],
    as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
    output: Annotated[str | None, typer.Option("--output", help="Write JSON to file")] = None,
):
    """Show graph structure (layers, nodes, targets) and data issues."""
    from netdiagram.viz.debug import find_issues

    graph = load_graph(target)
    report = find_issues(graph)
    edge_count = sum(1 for _ in graph.iter_edges())

    if as_json:
        data = {
            "layers": graph.to_data(),
            "node_count": len(graph),
            "edge_count": edge_count,
            "issues": report.to_dict(),
        }
        print_json("graph.inspect", data, output)
        return

    print(f"\nGraph: {len(graph.layers)} layers | {len(graph)} nodes | {edge_count} edges\n")

    headers = ["Layer", "Node", "Label", "Targets"]
    rows = []
    for layer in graph.layers:
        for node in layer.nodes:
            targets_str = ", ".join(node.targets) if node.targets else "-"
            rows.append([layer.id, node.id, node.label, targets_str])
    print_lines(print_table(headers, rows))

    if report.has_issues:
        print("\n  Issues:")
        for edge in report.dangling_targets:
            print(f"    dangling target: {edge}")
        for edge in report.self_loops:
            print(f"    self loop: {edge}")
        for edge in report.duplicate_edges:
            print(f"    duplicate edge: {edge}")

    if report.disconnected_nodes or report.backward_edges:
        print("\n  Notes:")
        for node_id in report.disconnected_nodes:
            print(f"    '{node_id}' has no connections")
        for edge in report.backward_edges:
            print(f"    backward edge: {edge}")
