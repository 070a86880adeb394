"""Binary search tree of integers with traversals, height, minimum and mirror."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Optional, TextIO


@dataclass(eq=False)
class _Node:
    value: int
    left: Optional[_Node] = None
    right: Optional[_Node] = None


class BinarySearchTree:
    """Unbalanced BST; equal values go to the left subtree."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._count = 0

    def insert(self, value) -> None:
        new = _Node(value)
        self._count += 1
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if value > node.value:
                if node.right is None:
                    node.right = new
                    return
                node = node.right
            else:
                if node.left is None:
                    node.left = new
                    return
                node = node.left

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path."""
        levels = 0
        layer = [self._root] if self._root else []
        while layer:
            levels += 1
            layer = [child for node in layer for child in (node.left, node.right) if child]
        return levels

    def minimum(self):
        """Leftmost value; raise ValueError on an empty tree."""
        if self._root is None:
            raise ValueError("Tree is empty.")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.value

    def mirror(self) -> None:
        """Swap left and right children throughout the tree, in place."""
        stack = [self._root] if self._root else []
        while stack:
            node = stack.pop()
            node.left, node.right = node.right, node.left
            stack.extend(child for child in (node.left, node.right) if child)

    def __contains__(self, value) -> bool:
        node = self._root
        while node is not None:
            if value == node.value:
                return True
            node = node.right if value > node.value else node.left
        return False

    def __len__(self) -> int:
        return self._count

    def inorder(self) -> list:
        result, stack, node = [], [], self._root
        while node is not None or stack:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def preorder(self) -> list:
        result, stack = [], [self._root] if self._root else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            stack.extend(child for child in (node.right, node.left) if child)
        return result

    def postorder(self) -> list:
        pending, visited = [self._root] if self._root else [], []
        while pending:
            node = pending.pop()
            visited.append(node)
            pending.extend(child for child in (node.left, node.right) if child)
        return [node.value for node in reversed(visited)]


def _reader(stream: TextIO):
    words = (word for line in stream for word in line.split())

    def read(convert=str):
        try:
            return convert(next(words))
        except (StopIteration, ValueError):
            raise EOFError from None

    return read


_MENU = (
    "\nMenu:\n"
    "1) Insert new node\n"
    "2) Number of nodes in longest path (Height)\n"
    "3) Minimum value\n"
    "4) Mirror tree\n"
    "5) Search\n"
    "6) Inorder\n"
    "7) Preorder\n"
    "8) Postorder\n"
    "Enter your choice: "
)


def _tabbed(values: list) -> str:
    return "".join(f"{value}\t" for value in values)


def main(argv=None) -> int:
    """Run the interactive tree menu."""
    argparse.ArgumentParser(description="Binary search tree").parse_args(argv)
    out = sys.stdout
    read = _reader(sys.stdin)
    tree = BinarySearchTree()
    try:
        while True:
            out.write(_MENU)
            choice = read(int)
            if choice == 1:
                while True:
                    out.write("Enter the data: ")
                    tree.insert(read(int))
                    out.write("Do you want to insert more values? (y/n): ")
                    answer = read()[0]
                    out.write("\n")
                    if answer != "y":
                        break
                out.write(f"Total number of nodes: {len(tree)}\n")
            elif choice == 2:
                out.write(f"Height of the tree: {tree.height()}\n")
            elif choice == 3:
                out.write("Minimum element: ")
                try:
                    out.write(f"{tree.minimum()}\n")
                except ValueError as error:
                    out.write(f"{error}\n")
            elif choice == 4:
                tree.mirror()
                out.write("Mirrored tree (Inorder): " + _tabbed(tree.inorder()))
            elif choice == 5:
                out.write("Enter the key to search: ")
                out.write("KEY FOUND\n" if read(int) in tree else "KEY NOT FOUND\n")
            elif choice == 6:
                out.write("*INORDER*\n" + _tabbed(tree.inorder()))
            elif choice == 7:
                out.write("*PREORDER*\n" + _tabbed(tree.preorder()))
            elif choice == 8:
                out.write("*POSTORDER*\n" + _tabbed(tree.postorder()))
            else:
                out.write("Invalid choice.\n")
            out.write("\nDo you want to continue? (y/n): ")
            if read()[0] != "y":
                break
    except EOFError:
        pass
    return 0