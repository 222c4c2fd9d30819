from sdpgraph import tester
from sdpgraph.generate import format_adjacency, graph_filename
from sdpgraph.graph import Graph
from sdpgraph.tester import GraphStats, evaluate_graph, results_by_n, results_by_p, run

CYCLE5 = [
    [0, 1, 0, 0, 1],
    [1, 0, 1, 0, 0],
    [0, 1, 0, 1, 0],
    [0, 0, 1, 0, 1],
    [1, 0, 0, 1, 0],
]
TRIANGLE = [[0, 1, 1], [1, 0, 1], [1, 1, 0]]


def _stats(value):
    return GraphStats(value, value, value, value, value, value, float(value))


def test_evaluate_triangle():
    graph = Graph.from_text(format_adjacency(TRIANGLE), seed=4)
    stats = evaluate_graph(graph, repeats=1)
    assert stats.greedy_colors == graph.n
    assert stats.sdp_colors_low == graph.n
    assert stats.sdp_colors_zero == graph.n
    assert stats.sdp_colors_high == graph.n
    assert stats.greedy_clique == graph.n
    assert 0 <= stats.sdp_clique <= graph.n
    assert stats.delta == graph.max_degree()


def test_evaluate_cycle_matches_greedy():
    graph = Graph.from_text(format_adjacency(CYCLE5), seed=1)
    stats = evaluate_graph(graph, repeats=1)
    assert stats.greedy_colors == graph.greedy_color()[0]
    assert stats.greedy_clique == len(graph.greedy_clique())
    assert stats.sdp_colors_zero <= graph.n


def test_results_by_n_identical_entries_keep_values():
    stats = {(5, 0.0): _stats(2), (5, 0.5): _stats(2)}
    rows = results_by_n(stats)
    assert [name for name, _ in rows] == [5]
    assert rows[0][1] == _stats(2).as_row()


def test_results_by_n_sorted_and_grouped():
    stats = {(10, 0.0): _stats(1), (5, 0.0): _stats(3), (5, 0.1): _stats(3)}
    rows = results_by_n(stats)
    assert [name for name, _ in rows] == [5, 10]
    assert rows[1][1] == _stats(1).as_row()


def test_results_by_p_groups_by_probability():
    stats = {(5, 0.5): _stats(4), (10, 0.5): _stats(4), (5, 0.0): _stats(1)}
    rows = results_by_p(stats)
    assert [name for name, _ in rows] == [0.0, 0.5]
    assert rows[1][1] == _stats(4).as_row()


def test_run_writes_tables(tmp_path, monkeypatch):
    monkeypatch.setattr(tester, "SIZES", (5,))
    monkeypatch.setattr(tester, "PROBABILITIES", (0.0, 0.5))
    source = tmp_path / "graphs"
    source.mkdir()
    for p in (0.0, 0.5):
        (source / graph_filename(5, p)).write_text(format_adjacency(CYCLE5))
    out = tmp_path / "out"
    stats = run(source, out, 1)
    assert set(stats) == {(5, 0.0), (5, 0.5)}
    by_n = (out / "results_by_n").read_text().splitlines()
    assert len(by_n) == 1
    assert by_n[0].split()[0] == "5"
    assert len(by_n[0].split()) == 1 + len(GraphStats.__dataclass_fields__)
    by_p = (out / "results_by_p").read_text().splitlines()
    assert [line.split()[0] for line in by_p] == ["0", "0.5"]