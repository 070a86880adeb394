"""Height-balanced (AVL) keyword dictionary with an interactive menu."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import NamedTuple, Optional, TextIO


class SearchResult(NamedTuple):
    """Meaning of a found keyword and how many nodes were compared."""

    meaning: str
    comparisons: int


@dataclass(eq=False)
class _Node:
    keyword: str
    meaning: str
    left: Optional[_Node] = None
    right: Optional[_Node] = None
    height: int = 0


def _height(node: Optional[_Node]) -> int:
    return -1 if node is None else node.height


def _refresh(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _balance(node: _Node) -> int:
    return _height(node.left) - _height(node.right)


def _rotate_left(node: _Node) -> _Node:
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    _refresh(node)
    _refresh(pivot)
    return pivot


def _rotate_right(node: _Node) -> _Node:
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    _refresh(node)
    _refresh(pivot)
    return pivot


class AVLDictionary:
    """Keyword/meaning dictionary kept balanced by AVL rotations."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._size = 0

    def insert(self, keyword: str, meaning: str) -> bool:
        """Add a keyword; return False and keep the old entry if it exists."""
        self._root, added = self._insert(self._root, keyword, meaning)
        if added:
            self._size += 1
        return added

    def _insert(self, node: Optional[_Node], keyword: str, meaning: str) -> tuple[_Node, bool]:
        if node is None:
            return _Node(keyword, meaning), True
        if keyword < node.keyword:
            node.left, added = self._insert(node.left, keyword, meaning)
            if _balance(node) == 2:
                if keyword < node.left.keyword:
                    node = _rotate_right(node)
                else:
                    node.left = _rotate_left(node.left)
                    node = _rotate_right(node)
        elif keyword > node.keyword:
            node.right, added = self._insert(node.right, keyword, meaning)
            if _balance(node) == -2:
                if keyword > node.right.keyword:
                    node = _rotate_left(node)
                else:
                    node.right = _rotate_right(node.right)
                    node = _rotate_left(node)
        else:
            added = False
        _refresh(node)
        return node, added

    def search(self, keyword: str) -> SearchResult:
        """Find a keyword, counting comparisons; raise KeyError if absent."""
        node = self._root
        comparisons = 0
        while node is not None:
            comparisons += 1
            if node.keyword == keyword:
                return SearchResult(node.meaning, comparisons)
            node = node.left if keyword < node.keyword else node.right
        raise KeyError(keyword)

    def _walk(self, node: Optional[_Node], order: str) -> Iterator[tuple[str, str]]:
        if node is None:
            return
        entry = (node.keyword, node.meaning)
        if order == "pre":
            yield entry
        yield from self._walk(node.left, order)
        if order == "in":
            yield entry
        yield from self._walk(node.right, order)
        if order == "post":
            yield entry

    def preorder(self) -> list[tuple[str, str]]:
        return list(self._walk(self._root, "pre"))

    def inorder(self) -> list[tuple[str, str]]:
        return list(self._walk(self._root, "in"))

    def postorder(self) -> list[tuple[str, str]]:
        return list(self._walk(self._root, "post"))

    def height(self) -> int:
        """Height of the tree; -1 when empty, 0 for a single node."""
        return _height(self._root)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, keyword: object) -> bool:
        if not isinstance(keyword, str):
            return False
        try:
            self.search(keyword)
        except KeyError:
            return False
        return True


def _reader(stream: TextIO):
    words = (word for line in stream for word in line.split())

    def read(convert=str):
        try:
            return convert(next(words))
        except (StopIteration, ValueError):
            raise EOFError from None

    return read


def _print_entries(entries: list[tuple[str, str]], out: TextIO) -> None:
    for keyword, meaning in entries:
        out.write(f"{keyword} : {meaning}\n")


def main(argv=None) -> int:
    """Read keywords interactively, then offer traversals and search."""
    argparse.ArgumentParser(description="AVL keyword dictionary").parse_args(argv)
    out = sys.stdout
    read = _reader(sys.stdin)
    tree = AVLDictionary()
    try:
        while True:
            out.write("Enter keyword and meaning: ")
            keyword, meaning = read(), read()
            if not tree.insert(keyword, meaning):
                out.write("\nKeyword already exists. Skipping...\n")
            out.write("Continue? (1/0): ")
            if read(int) != 1:
                break
        while True:
            out.write("\nMenu:\n1. Preorder\n2. Inorder\n3. Postorder\n4. Search\n0. Exit\nChoice: ")
            choice = read(int)
            if choice == 0:
                break
            if choice == 1:
                _print_entries(tree.preorder(), out)
            elif choice == 2:
                _print_entries(tree.inorder(), out)
            elif choice == 3:
                _print_entries(tree.postorder(), out)
            elif choice == 4:
                out.write("Enter word to search: ")
                word = read()
                try:
                    result = tree.search(word)
                except KeyError:
                    out.write("Word not found.\n")
                else:
                    out.write(f"Found {word} with meaning: {result.meaning}\n")
                    out.write(f"Comparisons made: {result.comparisons}\n")
            else:
                out.write("Invalid choice\n")
    except EOFError:
        pass
    return 0