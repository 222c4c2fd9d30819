import pytest

from sdpgraph.cli import build_parser, main
from sdpgraph.generate import format_adjacency
from sdpgraph.graph import Graph

TRIANGLE = [[0, 1, 1], [1, 0, 1], [1, 1, 0]]


@pytest.fixture
def triangle_file(tmp_path):
    path = tmp_path / "triangle"
    path.write_text(format_adjacency(TRIANGLE))
    return path


def test_parser_reads_flags():
    args = build_parser().parse_args(["-print", "-clique", "graph"])
    assert args.print_graph and args.clique
    assert not args.color
    assert args.file == "graph"


def test_unknown_option_rejected():
    with pytest.raises(SystemExit):
        main(["-bogus", "graph"])


def test_print_matches_describe(triangle_file, capsys):
    assert main(["-print", str(triangle_file)]) == 0
    out = capsys.readouterr().out
    assert out == Graph.from_file(triangle_file).describe()


def test_delta_color_output(triangle_file, capsys):
    main(["-delta_color", str(triangle_file)])
    lines = capsys.readouterr().out.splitlines()
    count, colors = Graph.from_file(triangle_file).greedy_color()
    assert lines[0] == f"(delta+1)-colored graph with {count} colors"
    assert lines[1] == " Colors are:"
    assert [int(v) for v in lines[2].split()] == colors


def test_greedy_clique_output(triangle_file, capsys):
    main(["-greedy_clique", str(triangle_file)])
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Greedy algorithm found clique of size 3"
    assert [int(v) for v in lines[2].split()] == [0, 1, 2]


def test_sdp_color_output_is_valid(triangle_file, capsys):
    main(["-color", str(triangle_file)])
    lines = capsys.readouterr().out.splitlines()
    colors = [int(v) for v in lines[2].split()]
    assert Graph.from_file(triangle_file).is_valid_coloring(colors)
    assert lines[0] == f"SDP-colored graph with {max(colors)} colors"


def test_missing_file_fails(tmp_path, capsys):
    assert main(["-print", str(tmp_path / "absent")]) == 1
    assert "Failed to open a file" in capsys.readouterr().err


def test_malformed_file_fails(tmp_path):
    path = tmp_path / "bad"
    path.write_text("3\n0 1\n")
    assert main(["-print", str(path)]) == 1