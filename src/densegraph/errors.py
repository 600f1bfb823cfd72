from __future__ import annotations

"""Exception hierarchy raised at the graph construction boundary."""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .graph.diagnostics import Diagnostic


class GraphError(RuntimeError):
    """Base exception for graph-related failures."""

    def __init__(self, message: str, diagnostic: Optional[Diagnostic] = None) -> None:
        super().__init__(message)
        self.diagnostic = diagnostic


class ResourceExhaustedError(GraphError):
    """
    Raised when a graph cannot be allocated.

    Either the requested node count is outside ``[0, max_nodes]`` or the
    matrix buffer could not be allocated.
    """
    pass
