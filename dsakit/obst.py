"""Optimal binary search tree built from search probabilities."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TextIO


@dataclass(frozen=True)
class OptimalBST:
    """Weight, cost and root tables of an optimal BST.

    Entry [i][j] describes the subtree over keys i+1..j; roots hold
    1-based key positions, 0 for an empty subtree.
    """

    keys: tuple
    weights: tuple[tuple[float, ...], ...]
    costs: tuple[tuple[float, ...], ...]
    roots: tuple[tuple[int, ...], ...]

    @property
    def cost(self) -> float:
        return self.costs[0][len(self.keys)]

    def root_key(self):
        return self.keys[self.roots[0][len(self.keys)] - 1]

    def _subtree(self, first: int, last: int) -> str:
        root = self.roots[first][last]
        if root == 0:
            return " NULL\n"
        key = self.keys[root - 1]
        return (
            f" :: {key}"
            f"\nLeft child of {key} is " + self._subtree(first, root - 1)
            + f"\nRight child of {key} is " + self._subtree(root, last)
        )

    def describe(self) -> str:
        """Text walk of the tree naming every node's children."""
        n = len(self.keys)
        root = self.roots[0][n]
        key = self.keys[root - 1]
        return (
            f"Root node is {key}\n"
            f"\nLeft child of {key} is " + self._subtree(0, root - 1)
            + f"\nRight child of {key} is " + self._subtree(root, n)
        )


def build_optimal_bst(
    keys: Sequence, success: Sequence[float], failure: Sequence[float]
) -> OptimalBST:
    """Build the tables for sorted keys, their hit and n+1 miss probabilities."""
    n = len(keys)
    if n == 0:
        raise ValueError("at least one key is required")
    if len(success) != n:
        raise ValueError("need one success probability per key")
    if len(failure) != n + 1:
        raise ValueError("need one more failure probability than keys")
    p = [0.0] + [float(value) for value in success]
    q = [float(value) for value in failure]
    w = [[0.0] * (n + 1) for _ in range(n + 1)]
    c = [[0.0] * (n + 1) for _ in range(n + 1)]
    r = [[0] * (n + 1) for _ in range(n + 1)]
    for i in range(n + 1):
        w[i][i] = q[i]
    for i in range(n):
        w[i][i + 1] = q[i] + q[i + 1] + p[i + 1]
        r[i][i + 1] = i + 1
        c[i][i + 1] = w[i][i + 1]
    for size in range(2, n + 1):
        for i in range(n - size + 1):
            j = i + size
            w[i][j] = w[i][j - 1] + p[j] + q[j]
            k = min(range(r[i][j - 1], r[i + 1][j] + 1), key=lambda k: c[i][k - 1] + c[k][j])
            c[i][j] = w[i][j] + c[i][k - 1] + c[k][j]
            r[i][j] = k
    return OptimalBST(
        keys=tuple(keys),
        weights=tuple(map(tuple, w)),
        costs=tuple(map(tuple, c)),
        roots=tuple(map(tuple, r)),
    )


def _reader(stream: TextIO):
    words = (word for line in stream for word in line.split())

    def read(convert=str):
        try:
            return convert(next(words))
        except (StopIteration, ValueError):
            raise EOFError from None

    return read


def main(argv=None) -> int:
    """Read keys and probabilities, then print the optimal tree."""
    argparse.ArgumentParser(description="Optimal binary search tree").parse_args(argv)
    out = sys.stdout
    read = _reader(sys.stdin)
    try:
        out.write("\nHow many elements are there in the tree? : ")
        n = read(int)
        out.write(f"\nEnter {n} elements :")
        keys = [read(int) for _ in range(n)]
        out.write(f"\nEnter {n} successful probabilities : ")
        success = [read(float) for _ in range(n)]
        out.write(f"\nEnter {n + 1} failure probabilities : ")
        failure = [read(float) for _ in range(n + 1)]
    except EOFError:
        return 1
    try:
        tree = build_optimal_bst(keys, success, failure)
    except ValueError as error:
        out.write(f"\n{error}\n")
        return 1
    out.write(tree.describe())
    return 0