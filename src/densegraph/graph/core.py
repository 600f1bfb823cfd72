from __future__ import annotations

from enum import Enum
from typing import Iterator, Optional, Tuple, Union

import numpy as np

from ..config import get_settings
from ..errors import ResourceExhaustedError
from ..logs import getLogger
from .diagnostics import (
    VALID,
    Diagnostic,
    DiagnosticReporter,
    ErrorKind,
    LoggingReporter,
    ValidationResult,
)

logger = getLogger(__name__)


class GraphType(str, Enum):
    DIRECTED = "directed"
    UNDIRECTED = "undirected"


ModeLike = Union[GraphType, str]


def _coerce_mode(mode: ModeLike) -> GraphType:
    try:
        return GraphType(mode)
    except ValueError:
        raise ValueError(
            f"Unknown graph mode {mode!r}; expected one of {[m.value for m in GraphType]}"
        ) from None


def _is_index(value: object) -> bool:
    # bool is an int subclass but never a node index
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


class Graph:
    """
    Directed or undirected graph backed by a dense boolean adjacency matrix.

    Structure:
      - Nodes are 0..node_count-1, fixed at construction.
      - Edges live in one contiguous numpy bool buffer of length
        node_count**2; cell (src, dest) is at src * node_count + dest.
      - Undirected graphs keep (src, dest) and (dest, src) equal after
        every mutation.

    The graph owns its buffer exclusively. `destroy()` releases it; after
    that every query answers False and every mutator reports an
    INVALID_HANDLE diagnostic.
    """

    __slots__ = (
        "_mode",
        "_node_count",
        "_edges",
        "_reporter",
    )

    # ------------------------------------------------------------------ #
    # Construction
    # ------------------------------------------------------------------ #
    def __init__(
        self,
        node_count: int,
        mode: ModeLike = GraphType.DIRECTED,
        *,
        max_nodes: Optional[int] = None,
        reporter: Optional[DiagnosticReporter] = None,
    ) -> None:
        if max_nodes is None:
            max_nodes = get_settings().graph.max_nodes

        self._mode = _coerce_mode(mode)
        self._reporter: DiagnosticReporter = (
            reporter if reporter is not None else LoggingReporter()
        )
        self._edges: Optional[np.ndarray] = None

        if not _is_index(node_count) or node_count < 0 or node_count > max_nodes:
            diagnostic = Diagnostic(
                kind=ErrorKind.RESOURCE_EXHAUSTED,
                operation="Graph.create",
                detail=(
                    f"Unable to create a graph with {node_count!r} nodes. "
                    f"Max number of nodes is set to {max_nodes}."
                ),
            )
            raise ResourceExhaustedError(diagnostic.format(), diagnostic)

        self._node_count = int(node_count)
        try:
            self._edges = np.zeros(self._node_count * self._node_count, dtype=np.bool_)
        except MemoryError:
            diagnostic = Diagnostic(
                kind=ErrorKind.RESOURCE_EXHAUSTED,
                operation="Graph.create",
                detail="Failed to allocate memory for adjacency matrix.",
            )
            raise ResourceExhaustedError(diagnostic.format(), diagnostic) from None

        logger.debug(
            "Created %s graph with %d nodes", self._mode.value, self._node_count
        )

    def destroy(self) -> None:
        """Release the matrix buffer. Calling this more than once is a no-op."""
        if self._edges is None:
            return
        self._edges = None
        logger.debug("Destroyed %s graph with %d nodes", self._mode.value, self._node_count)

    def __enter__(self) -> Graph:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.destroy()

    def __copy__(self) -> Graph:
        raise TypeError("Graph owns its matrix exclusively and cannot be copied")

    def __deepcopy__(self, memo: dict) -> Graph:
        raise TypeError("Graph owns its matrix exclusively and cannot be copied")

    # ------------------------------------------------------------------ #
    # Properties
    # ------------------------------------------------------------------ #
    @property
    def mode(self) -> GraphType:
        return self._mode

    @property
    def node_count(self) -> int:
        return self._node_count

    @property
    def directed(self) -> bool:
        return self._mode is GraphType.DIRECTED

    @property
    def undirected(self) -> bool:
        return self._mode is GraphType.UNDIRECTED

    @property
    def is_destroyed(self) -> bool:
        return self._edges is None

    @property
    def reporter(self) -> DiagnosticReporter:
        return self._reporter

    def __len__(self) -> int:
        return self._node_count

    def __bool__(self) -> bool:
        # a zero-node graph is still a live graph
        return True

    # ------------------------------------------------------------------ #
    # Validation
    # ------------------------------------------------------------------ #
    def validate(self, src: object, dest: object, operation: str) -> ValidationResult:
        """
        Check that the matrix is allocated and both indices lie in
        [0, node_count). Does not report; callers forward failures to
        the reporter.
        """
        if self._edges is None:
            return ValidationResult(
                Diagnostic(
                    kind=ErrorKind.INVALID_HANDLE,
                    operation=operation,
                    detail="Unable to access graph data.",
                )
            )
        if not (self._in_range(src) and self._in_range(dest)):
            return ValidationResult(
                Diagnostic(
                    kind=ErrorKind.INDEX_OUT_OF_RANGE,
                    operation=operation,
                    detail=f"Node index out of range: ({src!r}, {dest!r}).",
                    node_count=self._node_count,
                )
            )
        return VALID

    def _in_range(self, index: object) -> bool:
        return _is_index(index) and 0 <= index < self._node_count  # type: ignore[operator]

    def _cell(self, src: int, dest: int) -> int:
        return int(src) * self._node_count + int(dest)

    # ------------------------------------------------------------------ #
    # Edge queries / mutation
    # ------------------------------------------------------------------ #
    def has_edge(self, src: int, dest: int) -> bool:
        """Return whether (src, dest) is present; False for any invalid input."""
        if self._edges is None or not (self._in_range(src) and self._in_range(dest)):
            return False
        return bool(self._edges[self._cell(src, dest)])

    def add_edge(self, src: int, dest: int) -> bool:
        """
        Add the edge (src, dest), mirrored when undirected.

        Returns True if the edge is present afterwards (both directions for
        undirected graphs). Adding an existing edge is a successful no-op.
        """
        result = self.validate(src, dest, "Graph.add_edge")
        if not result:
            self._reporter.report(result.diagnostic)  # type: ignore[arg-type]
            return False

        edges = self._edges
        if edges is None:
            return False
        forward = self._cell(src, dest)
        backward = self._cell(dest, src)

        if not edges[forward]:
            edges[forward] = True
            if self.undirected and not edges[backward]:
                edges[backward] = True

        if self.directed:
            return bool(edges[forward])
        return bool(edges[forward] and edges[backward])

    def remove_edge(self, src: int, dest: int) -> None:
        """Remove the edge (src, dest), mirrored when undirected. Absent edges are ignored."""
        result = self.validate(src, dest, "Graph.remove_edge")
        if not result:
            self._reporter.report(result.diagnostic)  # type: ignore[arg-type]
            return

        edges = self._edges
        if edges is None:
            return
        forward = self._cell(src, dest)
        backward = self._cell(dest, src)

        if edges[forward]:
            edges[forward] = False
            if self.undirected and edges[backward]:
                edges[backward] = False

    # ------------------------------------------------------------------ #
    # Structural accessors
    # ------------------------------------------------------------------ #
    def edges(self) -> Iterator[Tuple[int, int]]:
        """
        Yield present edges as (src, dest) in row-major order.

        For undirected graphs each pair is yielded once with src <= dest.
        """
        n = self._node_count
        for row in range(n):
            # buffer may be released between yields
            if self._edges is None:
                return
            start = row if self.undirected else 0
            cols = np.flatnonzero(self._edges[row * n + start:(row + 1) * n])
            for col in cols:
                yield row, start + int(col)

    def num_edges(self) -> int:
        """Number of edges; undirected pairs and self-loops count once."""
        if self._edges is None:
            return 0
        if self.directed:
            return int(np.count_nonzero(self._edges))
        matrix = self._edges.reshape(self._node_count, self._node_count)
        return int(np.count_nonzero(np.triu(matrix)))

    def to_numpy(self) -> np.ndarray:
        """
        Return a copy of the adjacency matrix with shape (node_count, node_count).

        A destroyed graph yields an all-False matrix.
        """
        n = self._node_count
        if self._edges is None:
            return np.zeros((n, n), dtype=np.bool_)
        return self._edges.reshape(n, n).copy()

    def to_dot(self) -> str:
        """Render the graph as DOT text (newline-terminated)."""
        from .dot import render  # local import avoids cycles

        return "\n".join(render(self)) + "\n"

    # ------------------------------------------------------------------ #
    # Introspection
    # ------------------------------------------------------------------ #
    def __repr__(self) -> str:
        state = "destroyed" if self._edges is None else f"num_edges={self.num_edges()}"
        return (
            f"Graph(node_count={self._node_count}, "
            f"mode={self._mode.value}, "
            f"{state})"
        )
