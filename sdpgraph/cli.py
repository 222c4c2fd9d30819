"""Command line front end running the graph algorithms on one file."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Sequence

from .graph import Graph, GraphFormatError
from .sdp import SDPError

__all__ = ["build_parser", "main"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sdpgraph",
        usage="%(prog)s [options] file",
        description="Colour graphs and search for cliques with greedy and semidefinite algorithms.",
        allow_abbrev=False,
    )
    parser.add_argument("-print", dest="print_graph", action="store_true", help="print graph")
    parser.add_argument("-delta_color", action="store_true", help="color the graph with delta+1 algorithm")
    parser.add_argument("-color", action="store_true", help="color the graph with SDP algorithm")
    parser.add_argument("-greedy_clique", action="store_true", help="find clique using greedy algorithm")
    parser.add_argument("-clique", action="store_true", help="find clique using SDP algorithm")
    parser.add_argument("file", help="adjacency matrix file")
    return parser


def _report(task: Callable[[], tuple[int, list[int]]], header: str, label: str, failure: str) -> None:
    try:
        count, values = task()
    except (ValueError, SDPError):
        print(failure, file=sys.stderr)
        return
    print(header.format(count))
    print(f" {label}:")
    print("".join(f"{v} " for v in values))


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        graph = Graph.from_file(args.file)
    except OSError:
        print(f"Failed to open a file {args.file}", file=sys.stderr)
        return 1
    except GraphFormatError as exc:
        print(f"Invalid file format: {exc}", file=sys.stderr)
        return 1

    if args.print_graph:
        print(graph.describe(), end="")
    if args.delta_color:
        _report(
            graph.greedy_color,
            "(delta+1)-colored graph with {} colors",
            "Colors are",
            "error while (delta+1)-coloring graph",
        )
    if args.color:
        _report(
            lambda: graph.color(0.0),
            "SDP-colored graph with {} colors",
            "Colors are",
            "error while SDP-coloring graph",
        )
    if args.greedy_clique:
        _report(
            lambda: _sized(graph.greedy_clique()),
            "Greedy algorithm found clique of size {}",
            "Vertices in clique are",
            "error while finding clique using greedy algorithm",
        )
    if args.clique:
        _report(
            lambda: _sized(graph.find_max_clique()),
            "SDP algorithm found clique of size {}",
            "Vertices in clique are",
            "error while finding clique using SDP algorithm",
        )
    return 0


def _sized(vertices: list[int]) -> tuple[int, list[int]]:
    return len(vertices), vertices


if __name__ == "__main__":
    raise SystemExit(main())