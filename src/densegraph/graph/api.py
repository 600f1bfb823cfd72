from __future__ import annotations

"""
Handle-style functions over :class:`Graph`.

Every function accepts ``None`` in place of a graph and degrades to a safe
default: queries answer False, mutators report an INVALID_HANDLE
diagnostic and do nothing.
"""

from typing import IO, Iterator, Optional

from ..config import get_settings
from ..errors import ResourceExhaustedError
from ..logs import getLogger
from .core import Graph, GraphType, ModeLike
from .diagnostics import Diagnostic, DiagnosticReporter, ErrorKind, LoggingReporter
from .dot import empty_render, render as _render_graph, write_lines

logger = getLogger(__name__)


def _report_missing(operation: str, reporter: Optional[DiagnosticReporter]) -> None:
    if reporter is None:
        reporter = LoggingReporter()
    reporter.report(
        Diagnostic(
            kind=ErrorKind.INVALID_HANDLE,
            operation=operation,
            detail="Unable to access graph data.",
        )
    )


def create(
    node_count: int,
    mode: Optional[ModeLike] = None,
    *,
    max_nodes: Optional[int] = None,
    reporter: Optional[DiagnosticReporter] = None,
) -> Optional[Graph]:
    """
    Create a graph, or return None if it cannot be allocated.

    `mode` defaults to the configured default mode (directed unless
    overridden). Failures are logged at ERROR level.
    """
    if mode is None:
        mode = GraphType(get_settings().graph.default_mode)
    try:
        return Graph(node_count, mode, max_nodes=max_nodes, reporter=reporter)
    except ResourceExhaustedError as exc:
        logger.error("%s", exc)
        return None


def destroy(graph: Optional[Graph]) -> None:
    if graph is None:
        return
    graph.destroy()


def directed(graph: Optional[Graph]) -> bool:
    return graph is not None and graph.directed


def undirected(graph: Optional[Graph]) -> bool:
    return graph is not None and graph.undirected


def has_edge(graph: Optional[Graph], src: int, dest: int) -> bool:
    if graph is None:
        return False
    return graph.has_edge(src, dest)


def add_edge(
    graph: Optional[Graph],
    src: int,
    dest: int,
    *,
    reporter: Optional[DiagnosticReporter] = None,
) -> bool:
    """
    Add (src, dest). `reporter` only applies when `graph` is None; a live
    graph reports through its own reporter.
    """
    if graph is None:
        _report_missing("add_edge", reporter)
        return False
    return graph.add_edge(src, dest)


def remove_edge(
    graph: Optional[Graph],
    src: int,
    dest: int,
    *,
    reporter: Optional[DiagnosticReporter] = None,
) -> None:
    if graph is None:
        _report_missing("remove_edge", reporter)
        return
    graph.remove_edge(src, dest)


def render(graph: Optional[Graph]) -> Iterator[str]:
    """
    Yield DOT lines for `graph`.

    An absent graph renders as an empty ``digraph`` and logs a warning.
    """
    if graph is None:
        logger.warning("Rendering an absent graph as an empty digraph")
        return empty_render()
    return _render_graph(graph)


def print_graph(graph: Optional[Graph], file: Optional[IO[str]] = None) -> None:
    """Write the DOT rendering of `graph` to `file` (stdout by default)."""
    write_lines(render(graph), file)
