from __future__ import annotations

"""Graphviz DOT rendering for dense graphs."""

import sys
from typing import IO, Iterator, Optional

from .core import Graph

DIRECTED_KEYWORD = "digraph"
UNDIRECTED_KEYWORD = "graph"
DIRECTED_CONNECTOR = "->"
UNDIRECTED_CONNECTOR = "--"


def render(graph: Graph) -> Iterator[str]:
    """
    Yield the DOT lines for `graph`, without line terminators.

        digraph {          graph {
          0 -> 1;            0 -- 1;
        }                  }

    Edges are listed row-major; undirected graphs only walk the upper
    triangle so every pair appears once. Each call starts a fresh pass.
    """
    directed = graph.directed
    keyword = DIRECTED_KEYWORD if directed else UNDIRECTED_KEYWORD
    connector = DIRECTED_CONNECTOR if directed else UNDIRECTED_CONNECTOR

    yield f"{keyword} {{"
    for src, dest in graph.edges():
        yield f"  {src} {connector} {dest};"
    yield "}"


def empty_render() -> Iterator[str]:
    """Output for an absent graph: an empty directed graph."""
    yield f"{DIRECTED_KEYWORD} {{"
    yield "}"


def write_lines(lines: Iterator[str], file: Optional[IO[str]] = None) -> None:
    """Write rendered lines to `file` (stdout by default) and flush."""
    stream = sys.stdout if file is None else file
    for line in lines:
        stream.write(line)
        stream.write("\n")
    stream.flush()
