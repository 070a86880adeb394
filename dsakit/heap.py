"""Min- and max-heap construction over student marks."""

from __future__ import annotations

import argparse
import operator
import sys
from collections.abc import Callable, Iterable
from typing import TextIO


def _sift_down(items: list, start: int, higher: Callable[[object, object], bool]) -> None:
    size = len(items)
    value = items[start]
    pos = start
    child = 2 * pos + 1
    while child < size:
        if child + 1 < size and higher(items[child + 1], items[child]):
            child += 1
        if not higher(items[child], value):
            break
        items[pos] = items[child]
        pos = child
        child = 2 * pos + 1
    items[pos] = value


def _build(values: Iterable, higher: Callable[[object, object], bool]) -> list:
    items = list(values)
    for start in reversed(range(len(items) // 2)):
        _sift_down(items, start, higher)
    return items


def build_min_heap(values: Iterable) -> list:
    """Return a new list arranged as a min-heap."""
    return _build(values, operator.lt)


def build_max_heap(values: Iterable) -> list:
    """Return a new list arranged as a max-heap."""
    return _build(values, operator.gt)


def _reader(stream: TextIO):
    words = (word for line in stream for word in line.split())

    def read(convert=str):
        try:
            return convert(next(words))
        except (StopIteration, ValueError):
            raise EOFError from None

    return read


def main(argv=None) -> int:
    """Read marks and show them as a min- or max-heap on request."""
    argparse.ArgumentParser(description="Heap of student marks").parse_args(argv)
    out = sys.stdout
    read = _reader(sys.stdin)
    try:
        out.write("\nEnter number of students: ")
        count = read(int)
        marks = []
        for number in range(1, count + 1):
            out.write(f"Enter mark of student {number} : ")
            marks.append(read(int))
        while True:
            out.write("\n1. MIN Heap\n2. MAX Heap\n3. Exit")
            out.write("\nEnter your choice: ")
            choice = read(int)
            if choice == 1:
                marks = build_min_heap(marks)
                out.write("Min Heap:\n" + "".join(f"{m} " for m in marks) + "\n")
            elif choice == 2:
                marks = build_max_heap(marks)
                out.write("Max Heap:\n" + "".join(f"{m} " for m in marks) + "\n")
            elif choice == 3:
                out.write("Exiting...\n")
                break
            else:
                out.write("Invalid choice. Try again.\n")
    except EOFError:
        pass
    return 0