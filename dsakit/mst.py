"""Cheapest set of phone connections joining all branches (Prim's algorithm)."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Optional, TextIO


@dataclass(frozen=True)
class Connection:
    """Link between two branches (numbered from 1) and its charge."""

    first: int
    second: int
    charge: int


class BranchNetwork:
    """Undirected network of branches; a charge of 0 means no connection."""

    def __init__(self, branches: int) -> None:
        if branches < 0:
            raise ValueError("number of branches cannot be negative")
        self._charges = [[0] * branches for _ in range(branches)]

    def connect(self, first: int, second: int, charge: int) -> None:
        """Connect two branches, numbered from 1, in both directions."""
        count = len(self._charges)
        for branch in (first, second):
            if not 1 <= branch <= count:
                raise ValueError(f"branch {branch} is not between 1 and {count}")
        self._charges[first - 1][second - 1] = charge
        self._charges[second - 1][first - 1] = charge

    def matrix(self) -> list[list[int]]:
        return [list(row) for row in self._charges]

    def minimum_spanning_tree(self) -> list[Connection]:
        """Connections chosen by Prim's algorithm, starting from branch 1.

        Raises ValueError when some branch cannot be reached.
        """
        count = len(self._charges)
        if count == 0:
            return []
        in_tree = [False] * count
        in_tree[0] = True
        chosen: list[Connection] = []
        for _ in range(count - 1):
            best: Optional[Connection] = None
            for source, row in enumerate(self._charges):
                if not in_tree[source]:
                    continue
                for target, charge in enumerate(row):
                    if in_tree[target] or charge == 0:
                        continue
                    if best is None or charge < best.charge:
                        best = Connection(source + 1, target + 1, charge)
            if best is None:
                raise ValueError("not all branches are connected")
            in_tree[best.second - 1] = True
            chosen.append(best)
        return chosen

    def minimum_cost(self) -> int:
        return sum(connection.charge for connection in self.minimum_spanning_tree())


def _reader(stream: TextIO):
    words = (word for line in stream for word in line.split())

    def read(convert=str):
        try:
            return convert(next(words))
        except (StopIteration, ValueError):
            raise EOFError from None

    return read


def _read_network(read, out: TextIO) -> BranchNetwork:
    out.write("Enter the no. of branches: ")
    network = BranchNetwork(read(int))
    out.write("\nEnter the no. of connections: ")
    for _ in range(read(int)):
        out.write("Enter the end branches of connections (1-based index): ")
        first, second = read(int), read(int)
        out.write("Enter the phone company charges for this connection: ")
        network.connect(first, second, read(int))
    return network


def main(argv=None) -> int:
    """Run the interactive minimum spanning tree menu."""
    argparse.ArgumentParser(description="Minimum cost branch connections").parse_args(argv)
    out = sys.stdout
    read = _reader(sys.stdin)
    network = BranchNetwork(0)
    try:
        while True:
            out.write("==========PRIM'S ALGORITHM=================\n")
            out.write("\n1. INPUT\n2. DISPLAY\n3. MINIMUM\n4. EXIT\n")
            out.write("Enter your choice: ")
            choice = read(int)
            if choice == 1:
                out.write("INPUT YOUR VALUES\n")
                try:
                    network = _read_network(read, out)
                except ValueError as error:
                    out.write(f"{error}\n")
            elif choice == 2:
                out.write("DISPLAY THE CONTENTS\n")
                out.write("\nAdjacency matrix:\n")
                for row in network.matrix():
                    out.write("".join(f"{charge} " for charge in row) + "\n")
            elif choice == 3:
                out.write("MINIMUM SPANNING TREE\n")
                try:
                    tree = network.minimum_spanning_tree()
                except ValueError as error:
                    out.write(f"{error}\n")
                    continue
                for link in tree:
                    out.write(
                        f"Minimum cost connection is {link.first} --> {link.second}"
                        f" with charge: {link.charge}\n"
                    )
                total = sum(link.charge for link in tree)
                out.write(f"The minimum total cost of connections of all branches is: {total}\n")
            elif choice == 4:
                out.write("Exiting...\n")
                break
            else:
                out.write("Invalid choice. Please try again.\n")
    except EOFError:
        pass
    return 0