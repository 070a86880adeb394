"""Keyword dictionary stored in an unbalanced binary search tree."""

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


class KeywordDictionary:
    """Keywords with meanings; equal keywords are stored to the right."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._size = 0

    def insert(self, keyword: str, meaning: str) -> None:
        new = _Node(keyword, meaning)
        self._size += 1
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if keyword < node.keyword:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def _find(self, keyword: str) -> tuple[_Node, int]:
        node = self._root
        comparisons = 0
        while node is not None:
            comparisons += 1
            if keyword == node.keyword:
                return node, comparisons
            node = node.left if keyword < node.keyword else node.right
        raise KeyError(keyword)

    def search(self, keyword: str) -> SearchResult:
        """Find a keyword; raise KeyError if it is absent."""
        node, comparisons = self._find(keyword)
        return SearchResult(node.meaning, comparisons)

    def update(self, keyword: str, meaning: str) -> None:
        """Replace a keyword's meaning; raise KeyError if it is absent."""
        node, _ = self._find(keyword)
        node.meaning = meaning

    def delete(self, keyword: str) -> None:
        """Remove a keyword; raise KeyError if it is absent."""
        self._root = self._delete(self._root, keyword)
        self._size -= 1

    def _delete(self, node: Optional[_Node], keyword: str) -> Optional[_Node]:
        if node is None:
            raise KeyError(keyword)
        if keyword < node.keyword:
            node.left = self._delete(node.left, keyword)
        elif keyword > node.keyword:
            node.right = self._delete(node.right, keyword)
        elif node.left is None:
            return node.right
        elif node.right is None:
            return node.left
        else:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.keyword, node.meaning = successor.keyword, successor.meaning
            node.right = self._delete(node.right, successor.keyword)
        return node

    def items(self) -> Iterator[tuple[str, str]]:
        """Yield (keyword, meaning) pairs in keyword order."""
        stack: list[_Node] = []
        node = self._root
        while node is not None or stack:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.keyword, node.meaning
            node = node.right

    def __len__(self) -> int:
        return self._size


def _reader(stream: TextIO):
    words = (word for line in stream for word in line.split())

    def read(convert=str):
        try:
            return convert(next(words))
        except (StopIteration, ValueError):
            raise EOFError from None

    return read


def main(argv=None) -> int:
    """Run the interactive dictionary menu."""
    argparse.ArgumentParser(description="Keyword dictionary").parse_args(argv)
    out = sys.stdout
    read = _reader(sys.stdin)
    book = KeywordDictionary()
    try:
        while True:
            out.write(
                "\n\nMenu:\n1. Create\n2. Display\n3. Search\n4. Update\n5. Delete\n"
                "Enter your choice: "
            )
            choice = read(int)
            if not 1 <= choice <= 5:
                out.write("\nInvalid Choice.")
                break
            if choice == 1:
                while True:
                    out.write("\nEnter Keyword: ")
                    keyword = read()
                    out.write("Enter Meaning: ")
                    book.insert(keyword, read())
                    out.write("\nDo you want to add more? (1 = Yes / 0 = No): ")
                    if read(int) != 1:
                        break
            elif len(book) == 0:
                out.write("\nNo Keywords Added." if choice == 2 else "\nDictionary is Empty.")
            elif choice == 2:
                for keyword, meaning in book.items():
                    out.write(f"\nKeyword: {keyword}\tMeaning: {meaning}")
            elif choice == 3:
                out.write("\nEnter Keyword to Search: ")
                try:
                    result = book.search(read())
                except KeyError:
                    out.write("\nKeyword Not Found.")
                else:
                    out.write(f"\nNumber of Comparisons: {result.comparisons}")
                    out.write("\nKeyword Found.")
            elif choice == 4:
                out.write("\nEnter Keyword to Update: ")
                keyword = read()
                try:
                    book.search(keyword)
                except KeyError:
                    out.write("\nKeyword Not Found.")
                else:
                    out.write(f'\nEnter New Meaning for Keyword "{keyword}": ')
                    book.update(keyword, read())
                    out.write("\nMeaning Updated.")
            else:
                out.write("\nEnter Keyword to Delete: ")
                try:
                    book.delete(read())
                except KeyError:
                    out.write("\nElement Not Found")
    except EOFError:
        pass
    return 0