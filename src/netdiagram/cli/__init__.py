"""netdiagram CLI - render diagrams and inspect graph data.

Entry point for the `netdiagram` command. Requires ``pip install netdiagram[cli]``.

Commands:
    render          Render a diagram snapshot to SVG or HTML
    graph ls        List registered graphs from pyproject.toml
    graph inspect   Show layers, nodes, edges and data issues
"""

from __future__ import annotations


def _require_typer():
    """Check that typer is available."""
    try:
        import typer  # noqa: F401
    except ImportError:
        import sys

        print("Error: typer is required for the CLI. Install with: pip install netdiagram[cli]", file=sys.stderr)
        raise SystemExit(1) from None


def create_app():
    """Create the Typer app with all subcommands."""
    _require_typer()

    import typer

    from netdiagram.cli.graph_cmd import app as graph_app
    from netdiagram.cli.render_cmd import register_commands

    app = typer.Typer(
        name="netdiagram",
        help="Layered network diagram rendering and inspection CLI.",
        no_args_is_help=True,
    )
    app.add_typer(graph_app, name="graph")
    register_commands(app)

    return app


def main():
    """CLI entry point."""
    app = create_app()
    app()
