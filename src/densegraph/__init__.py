try:
    from ._version import version as __version__  # populated by setuptools-scm
except ModuleNotFoundError:
    __version__ = "0.0.0"

from .config import AppSettings, ConfigError, get_settings
from .errors import GraphError, ResourceExhaustedError
from .graph import (
    CollectingReporter,
    Diagnostic,
    DiagnosticReporter,
    ErrorKind,
    Graph,
    GraphType,
    LoggingReporter,
    ValidationResult,
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
from .logs import configure_logging

__all__ = [
    "__version__",
    "AppSettings",
    "ConfigError",
    "configure_logging",
    "get_settings",
    "CollectingReporter",
    "Diagnostic",
    "DiagnosticReporter",
    "ErrorKind",
    "Graph",
    "GraphError",
    "GraphType",
    "LoggingReporter",
    "ResourceExhaustedError",
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
