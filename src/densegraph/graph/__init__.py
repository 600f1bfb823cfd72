"""
densegraph.graph
================

Dense adjacency-matrix graph subsystem.

Public API:

- Graph            : directed/undirected graph over a contiguous bool matrix.
- GraphType        : DIRECTED / UNDIRECTED.
- create, destroy  : handle-style lifecycle; create returns None on failure.
- directed, undirected, has_edge, add_edge, remove_edge
                   : None-tolerant wrappers around the Graph methods.
- render           : lazy DOT line generator.
- print_graph      : write the DOT rendering to a stream (stdout by default).
- Diagnostic, ErrorKind, ValidationResult, *Reporter
                   : validation failure reporting.

All other modules in this package are considered internal implementation details.
"""

from __future__ import annotations

from .core import Graph, GraphType
from .diagnostics import (
    CollectingReporter,
    Diagnostic,
    DiagnosticReporter,
    ErrorKind,
    LoggingReporter,
    ValidationResult,
)
from .api import (
    add_edge,
    create,
    destroy,
    directed,
    has_edge,
    print_graph,
    remove_edge,
    render,
    undirected,
)

__all__ = [
    "Graph",
    "GraphType",
    "CollectingReporter",
    "Diagnostic",
    "DiagnosticReporter",
    "ErrorKind",
    "LoggingReporter",
    "ValidationResult",
    "add_edge",
    "create",
    "destroy",
    "directed",
    "has_edge",
    "print_graph",
    "remove_edge",
    "render",
    "undirected",
]
