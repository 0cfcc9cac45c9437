"""Exceptions for netdiagram.

Only authoring mistakes raise. Rendering and highlighting never fail because
of bad data: unresolved endpoints are skipped and unknown ids match nothing.
"""

from __future__ import annotations


class GraphDefinitionError(Exception):
    """Graph data is malformed and cannot be loaded.

    Raised when building a NetworkGraph from authored layer data that has a
    missing id, a duplicate node id, or a targets value that is not a list.

    Attributes:
        reason: Short description of what is wrong
        node_id: Offending node id, if the problem is node-scoped
        layer_id: Layer containing the problem, if known
        message: Human-readable error message
    """

    def __init__(
        self,
        reason: str,
        *,
        node_id: str | None = None,
        layer_id: str | None = None,
        message: str | None = None,
    ) -> None:
        self.reason = reason
        self.node_id = node_id
        self.layer_id = layer_id
        self.message = message or self._default_message()
        super().__init__(self.message)

    def _default_message(self) -> str:
        msg = f"Invalid graph definition: {self.reason}"
        where = []
        if self.layer_id is not None:
            where.append(f"layer '{self.layer_id}'")
        if self.node_id is not None:
            where.append(f"node '{self.node_id}'")
        if where:
            msg += f" ({', '.join(where)})"
        return msg


class GraphNotFoundError(Exception):
    """A graph target could not be resolved to graph data.

    Raised by the loaders when a path does not exist, a module attribute is
    missing, or a registry name is not configured.

    Attributes:
        target: The path, 'module:attribute' or registry name that was given
        message: Human-readable error message
    """

    def __init__(self, target: str, message: str | None = None) -> None:
        self.target = target
        self.message = message or f"Could not load graph data from '{target}'"
        super().__init__(self.message)
