"""Cities joined by one-way roads with travel times, as matrix and list."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from typing import TextIO

MAX_CITIES = 20


class CityGraph:
    """Directed graph of named cities; a travel time of 0 means no road."""

    def __init__(self, cities: Iterable[str]) -> None:
        names = list(cities)
        if len(names) > MAX_CITIES:
            raise ValueError(f"at most {MAX_CITIES} cities are supported")
        if len(set(names)) != len(names):
            raise ValueError("city names must be unique")
        self._cities = names
        self._index = {name: position for position, name in enumerate(names)}
        self._times = [[0] * len(names) for _ in names]

    @property
    def cities(self) -> list[str]:
        return list(self._cities)

    def set_time(self, source: str, target: str, minutes: int) -> None:
        """Set the travel time from source to target; 0 removes the road."""
        for city in (source, target):
            if city not in self._index:
                raise KeyError(city)
        self._times[self._index[source]][self._index[target]] = int(minutes)

    def matrix(self) -> list[list[int]]:
        """Copy of the adjacency matrix of travel times."""
        return [list(row) for row in self._times]

    def adjacency(self) -> dict[str, list[tuple[str, int]]]:
        """Each city's reachable neighbours with times, in city order."""
        return {
            city: [(self._cities[column], time) for column, time in enumerate(row) if time != 0]
            for city, row in zip(self._cities, self._times)
        }

    def paths(self) -> list[tuple[str, str, int]]:
        """Every road as (source, target, minutes)."""
        return [
            (source, target, time)
            for source, neighbours in self.adjacency().items()
            for target, time in neighbours
        ]

    def format_matrix(self) -> str:
        lines = ["Adjacency Matrix:", "\t" + "".join(f"{city}\t" for city in self._cities)]
        for city, row in zip(self._cities, self._times):
            lines.append(f"{city}\t" + "".join(f"{time}\t" for time in row))
        return "\n".join(lines) + "\n"

    def format_adjacency(self) -> str:
        parts = ["Adjacency List:\n"]
        for city, neighbours in self.adjacency().items():
            line = city + "".join(
                (" --> " if time > 0 else "") + target for target, time in neighbours
            )
            parts.append(line + "\n")
        parts.append("\nPaths and time required:\n")
        for source, target, time in self.paths():
            parts.append(f"{source} --> {target} [Time: {time} min]\n")
        return "".join(parts)


def _reader(stream: TextIO):
    words = (word for line in stream for word in line.split())

    def read(convert=str):
        try:
            return convert(next(words))
        except (StopIteration, ValueError):
            raise EOFError from None

    return read


def _read_graph(read, out: TextIO) -> CityGraph:
    out.write(f"\nEnter number of cities (max {MAX_CITIES}): ")
    count = read(int)
    out.write("Enter names of cities:\n")
    names = []
    for number in range(1, count + 1):
        out.write(f"City {number}: ")
        names.append(read())
    graph = CityGraph(names)
    for source in names:
        for target in names:
            out.write(f"\nIs there a path from {source} to {target}? (y/n): ")
            if read()[0] in "yY":
                out.write(f"Enter time in minutes from {source} to {target}: ")
                graph.set_time(source, target, read(int))
    return graph


def main(argv=None) -> int:
    """Run the interactive city graph menu."""
    argparse.ArgumentParser(description="City road graph").parse_args(argv)
    out = sys.stdout
    read = _reader(sys.stdin)
    graph = CityGraph([])
    try:
        while True:
            out.write(
                "\n\nMenu:\n1. Enter Graph\n2. Display Adjacency Matrix\n"
                "3. Display Adjacency List\n4. Exit\nEnter your choice: "
            )
            choice = read(int)
            if choice == 1:
                try:
                    graph = _read_graph(read, out)
                except ValueError as error:
                    out.write(f"\n{error}\n")
            elif choice == 2:
                out.write("\n\n" + graph.format_matrix())
            elif choice == 3:
                out.write("\n\n" + graph.format_adjacency())
            elif choice == 4:
                break
            else:
                out.write("Invalid choice. Try again.\n")
    except EOFError:
        pass
    return 0