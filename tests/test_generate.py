import random

import pytest

from sdpgraph import generate
from sdpgraph.generate import (
    format_adjacency,
    generate_adjacency,
    graph_filename,
    main,
    write_graph,
)
from sdpgraph.graph import Graph, parse_adjacency


def test_graph_filename_matches_source_format():
    assert graph_filename(5, 0.05) == "graph5_0.05"
    assert graph_filename(95, 0.95) == "graph95_0.95"


def test_graph_filename_zero_probability():
    assert graph_filename(10, 0.0) == "graph10_0.00"


def test_adjacency_is_symmetric_and_square():
    matrix = generate_adjacency(12, 0.4, random.Random(3))
    assert len(matrix) == 12
    assert all(len(row) == 12 for row in matrix)
    assert all(matrix[i][j] == matrix[j][i] for i in range(12) for j in range(12))
    assert {v for row in matrix for v in row} <= {0, 1}


def test_probability_one_gives_all_ones():
    matrix = generate_adjacency(6, 1.0, random.Random(1))
    assert all(v == 1 for row in matrix for v in row)


def test_probability_zero_gives_no_edges():
    matrix = generate_adjacency(6, 0.0, random.Random(1))
    assert all(v == 0 for row in matrix for v in row)


def test_same_seed_same_matrix():
    a = generate_adjacency(8, 0.5, random.Random(42))
    b = generate_adjacency(8, 0.5, random.Random(42))
    assert a == b


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        generate_adjacency(-1, 0.5)


def test_format_round_trips_through_parser():
    matrix = generate_adjacency(7, 0.5, random.Random(9))
    parsed = parse_adjacency(format_adjacency(matrix))
    assert parsed == [[bool(v) for v in row] for row in matrix]


def test_format_first_line_is_vertex_count():
    text = format_adjacency([[0, 1], [1, 0]])
    assert text.splitlines() == ["2", "0 1", "1 0"]


def test_format_rejects_non_square():
    with pytest.raises(ValueError):
        format_adjacency([[0, 1], [1]])


def test_write_graph_creates_loadable_file(tmp_path):
    path = write_graph(tmp_path / "graphs", 10, 0.3, random.Random(5))
    assert path.name == graph_filename(10, 0.3)
    graph = Graph.from_file(path)
    assert graph.n == 10


def test_main_writes_every_graph(tmp_path):
    assert main([str(tmp_path), "--seed", "1"]) == 0
    files = list(tmp_path.iterdir())
    assert len(files) == len(generate.SIZES) * len(generate.PROBABILITIES)
    assert (tmp_path / graph_filename(95, 0.95)).exists()


def test_main_is_reproducible_with_seed(tmp_path):
    first, second = tmp_path / "a", tmp_path / "b"
    main([str(first), "--seed", "7"])
    main([str(second), "--seed", "7"])
    name = graph_filename(20, 0.5)
    assert (first / name).read_text() == (second / name).read_text()