"""Project-level configuration from pyproject.toml.

Reads the [tool.netdiagram] section to provide named graph shortcuts
and default viewport settings for the CLI.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_WIDTH = 960
DEFAULT_HEIGHT = 540


@dataclass(frozen=True)
class NetdiagramConfig:
    """Configuration from [tool.netdiagram] in pyproject.toml."""

    graphs: dict[str, str] = field(default_factory=dict)
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    root: Path | None = None


def find_pyproject(start: Path | None = None) -> Path | None:
    """Walk up from start directory to find pyproject.toml."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def load_config(start: Path | None = None) -> NetdiagramConfig:
    """Load [tool.netdiagram] from the nearest pyproject.toml.

    Returns default config if no pyproject.toml or no [tool.netdiagram] section.
    Relative graph file paths are resolved against the pyproject.toml directory.
    """
    path = find_pyproject(start)
    if path is None:
        return NetdiagramConfig()

    if sys.version_info >= (3, 11):
        import tomllib
    else:
        try:
            import tomli as tomllib
        except ImportError:
            return NetdiagramConfig()

    with open(path, "rb") as f:
        data = tomllib.load(f)

    section = data.get("tool", {}).get("netdiagram", {})
    if not section:
        return NetdiagramConfig()

    return NetdiagramConfig(
        graphs=section.get("graphs", {}),
        width=int(section.get("width", DEFAULT_WIDTH)),
        height=int(section.get("height", DEFAULT_HEIGHT)),
        root=path.parent,
    )
