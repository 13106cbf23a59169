"""Interactive route finder over a weighted graph file."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

from routefinder.weighted_graph import Coord, WeightedGraph


def format_path(path: Sequence[Coord]) -> str:
    """Render a coordinate path as ``(x, y) -> (x, y)``."""
    return " -> ".join(f"({x:g}, {y:g})" for x, y in path)


def _parse_coord(text: str) -> Coord | None:
    parts = text.split()
    if len(parts) < 2:
        return None
    try:
        return float(parts[0]), float(parts[1])
    except ValueError:
        return None


class _Session:
    def __init__(self, input_stream: TextIO, output_stream: TextIO) -> None:
        self._input = input_stream
        self._output = output_stream

    def say(self, text: str) -> None:
        self._output.write(text + "\n")

    def ask(self, prompt: str) -> str:
        self._output.write(prompt)
        line = self._input.readline()
        if not line:
            return "q"
        return line.rstrip("\r\n")

    def ask_coord(self, graph: WeightedGraph, label: str, final_quit: str) -> Coord | None:
        answer = self.ask(f"Enter {label} coordinate (formatted as 'x y') or 'q' to quit: ")
        if answer == "q":
            self.say("Exiting program.")
            return None
        coord = _parse_coord(answer)
        while coord is None or graph.id_from_coords(coord) is None:
            self.say("Cannot find coordinates...")
            answer = self.ask(f"Re-enter {label} coordinate (formatted as 'x y') or 'q' to quit: ")
            if answer == "q":
                self.say(final_quit)
                return None
            coord = _parse_coord(answer)
        return coord


def run_route_finder(input_stream: TextIO, output_stream: TextIO) -> None:
    """Load a graph file and answer shortest-path queries until the user quits."""
    session = _Session(input_stream, output_stream)
    filename = session.ask("Enter a file or 'q' to quit: ")
    if filename == "q":
        session.say("Exiting program.")
        return
    try:
        graph = WeightedGraph.read_file(filename)
    except (OSError, ValueError) as exc:
        session.say(f"Error: {exc}. Try running again with correct graph.")
        return
    session.say(f"Graph loaded successfully from {filename}")

    while True:
        start = session.ask_coord(graph, "a start", "Exiting... Thanks for using our program!!")
        if start is None:
            return
        session.say("Start node found!")
        end = session.ask_coord(graph, "an end", "Exiting program.")
        if end is None:
            return
        session.say("End node found!")

        try:
            path = graph.dijkstras(start, end)
            weight = graph.path_weight(path)
        except ValueError as exc:
            session.say(f"Error: {exc}")
            return

        if weight == 0:
            session.say("No path between these points")
        else:
            session.say(
                f"The shortest path from ({start[0]:g}, {start[1]:g}) "
                f"to ({end[0]:g}, {end[1]:g}) is: "
            )
            session.say(f"{format_path(path)} with a weight of: {weight:g}")


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive route finder on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="routefinder",
        description="Find shortest routes between coordinates in a weighted graph file.",
    )
    parser.parse_args(argv)
    print("\n\n=== Welcome to Denison Route Finder! ===")
    print("\nNotice: You may input 'q' at anytime to terminate this program.")
    run_route_finder(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())