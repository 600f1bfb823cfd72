from __future__ import annotations

import pytest

import densegraph as dg
from densegraph import CollectingReporter, ErrorKind, GraphType


def test_create_returns_graph():
    graph = dg.create(5, GraphType.UNDIRECTED)
    assert graph is not None
    assert dg.undirected(graph)
    assert not dg.directed(graph)
    assert graph.node_count == 5


def test_create_defaults_to_directed():
    graph = dg.create(3)
    assert dg.directed(graph)


def test_create_default_mode_from_settings(monkeypatch):
    monkeypatch.setenv("DENSEGRAPH_GRAPH__DEFAULT_MODE", "undirected")
    assert dg.undirected(dg.create(3))


def test_create_over_limit_returns_none(caplog):
    with caplog.at_level("ERROR", logger="densegraph"):
        assert dg.create(2049, GraphType.DIRECTED) is None
    assert "2049" in caplog.text


def test_create_respects_max_nodes_override():
    assert dg.create(10, max_nodes=8) is None
    assert dg.create(8, max_nodes=8) is not None


def test_create_allocation_failure_returns_none(monkeypatch):
    def _fail(*args, **kwargs):
        raise MemoryError

    monkeypatch.setattr("densegraph.graph.core.np.zeros", _fail)
    assert dg.create(4) is None


def test_none_handle_queries():
    assert not dg.directed(None)
    assert not dg.undirected(None)
    assert not dg.has_edge(None, 0, 0)
    dg.destroy(None)


def test_none_handle_mutators_report():
    reporter = CollectingReporter()
    assert not dg.add_edge(None, 0, 1, reporter=reporter)
    dg.remove_edge(None, 0, 1, reporter=reporter)
    assert [d.kind for d in reporter.diagnostics] == [ErrorKind.INVALID_HANDLE] * 2
    assert [d.operation for d in reporter.diagnostics] == ["add_edge", "remove_edge"]


def test_none_handle_mutator_logs_by_default(caplog):
    with caplog.at_level("ERROR", logger="densegraph.graph"):
        assert not dg.add_edge(None, 0, 1)
    assert "Unable to access graph data" in caplog.text


def test_round_trip_directed():
    graph = dg.create(3)
    assert dg.add_edge(graph, 0, 1)
    assert dg.has_edge(graph, 0, 1)
    assert not dg.has_edge(graph, 1, 0)
    dg.remove_edge(graph, 0, 1)
    assert not dg.has_edge(graph, 0, 1)
    dg.destroy(graph)


def test_round_trip_undirected():
    graph = dg.create(3, GraphType.UNDIRECTED)
    assert dg.add_edge(graph, 2, 1)
    assert dg.has_edge(graph, 1, 2) and dg.has_edge(graph, 2, 1)
    dg.remove_edge(graph, 1, 2)
    assert not dg.has_edge(graph, 1, 2)
    assert not dg.has_edge(graph, 2, 1)


def test_bounds_at_node_count():
    reporter = CollectingReporter()
    graph = dg.create(4, reporter=reporter)
    assert not dg.has_edge(graph, 4, 0)
    assert not dg.add_edge(graph, 0, 4)
    dg.remove_edge(graph, 4, 4)
    assert len(reporter) == 2
    assert all(d.kind is ErrorKind.INDEX_OUT_OF_RANGE for d in reporter.diagnostics)


def test_destroy_then_use():
    reporter = CollectingReporter()
    graph = dg.create(2, reporter=reporter)
    dg.add_edge(graph, 0, 1)
    dg.destroy(graph)
    dg.destroy(graph)
    assert not dg.has_edge(graph, 0, 1)
    assert not dg.add_edge(graph, 0, 1)
    assert reporter.diagnostics[-1].kind is ErrorKind.INVALID_HANDLE


def test_render_none_is_empty_digraph(caplog):
    with caplog.at_level("WARNING", logger="densegraph"):
        assert list(dg.render(None)) == ["digraph {", "}"]
    assert "absent graph" in caplog.text


def test_print_graph_sample(capsys):
    graph = dg.create(5, GraphType.UNDIRECTED)
    for src, dest in [(0, 0), (0, 1), (0, 2), (1, 2), (1, 3), (2, 4), (3, 1), (3, 0)]:
        dg.add_edge(graph, src, dest)
    dg.print_graph(graph)
    dg.destroy(graph)

    assert capsys.readouterr().out == (
        "graph {\n"
        "  0 -- 0;\n"
        "  0 -- 1;\n"
        "  0 -- 2;\n"
        "  0 -- 3;\n"
        "  1 -- 2;\n"
        "  1 -- 3;\n"
        "  2 -- 4;\n"
        "}\n"
    )


def test_print_graph_none(capsys):
    dg.print_graph(None)
    assert capsys.readouterr().out == "digraph {\n}\n"


@pytest.mark.parametrize("mode", ["directed", "undirected"])
def test_create_accepts_mode_strings(mode):
    graph = dg.create(2, mode)
    assert graph.mode is GraphType(mode)


def test_create_forwards_empty_reporter():
    reporter = CollectingReporter()
    graph = dg.create(2, reporter=reporter)
    assert graph.reporter is reporter
    dg.remove_edge(graph, 0, 2)
    assert len(reporter) == 1


def test_create_zero_nodes_is_a_live_graph():
    graph = dg.create(0)
    assert graph is not None
    assert graph
    assert list(dg.render(graph)) == ["digraph {", "}"]
