from __future__ import annotations

"""Diagnostic values and reporters for graph validation failures."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Protocol

from ..logs import getLogger

logger = getLogger("densegraph.graph")


class ErrorKind(str, Enum):
    RESOURCE_EXHAUSTED = "resource_exhausted"
    INVALID_HANDLE = "invalid_handle"
    INDEX_OUT_OF_RANGE = "index_out_of_range"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """
    A single validation failure.

    ``node_count`` is set for range errors so the valid interval
    ``[0, node_count)`` can be reported.
    """

    kind: ErrorKind
    operation: str
    detail: str
    node_count: Optional[int] = None

    @property
    def valid_range(self) -> Optional[tuple[int, int]]:
        if self.node_count is None:
            return None
        return (0, self.node_count)

    def format(self) -> str:
        text = f"[error] In `{self.operation}`: {self.detail}"
        if self.kind is ErrorKind.INDEX_OUT_OF_RANGE and self.node_count is not None:
            text += f" Interval must be in the range [0, {self.node_count})."
        return text

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of the shared edge-argument check."""

    diagnostic: Optional[Diagnostic] = None

    @property
    def ok(self) -> bool:
        return self.diagnostic is None

    def __bool__(self) -> bool:
        return self.ok


VALID = ValidationResult()


class DiagnosticReporter(Protocol):
    """Protocol for sinks receiving validation diagnostics."""

    def report(self, diagnostic: Diagnostic) -> None:
        """Deliver a :class:`Diagnostic`."""


class LoggingReporter:
    """Default reporter: writes diagnostics to the ``densegraph.graph`` logger."""

    def report(self, diagnostic: Diagnostic) -> None:
        logger.error("%s", diagnostic.format())


class CollectingReporter:
    """Keeps every diagnostic in memory; useful in tests and batch callers."""

    def __init__(self) -> None:
        self.diagnostics: List[Diagnostic] = []

    def report(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    def clear(self) -> None:
        self.diagnostics.clear()

    def __len__(self) -> int:
        return len(self.diagnostics)
