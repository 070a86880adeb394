"""Expression trees built from prefix expressions, with iterative traversals."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Optional

_OPERATORS = frozenset("+-*/")


@dataclass(eq=False)
class ExpressionNode:
    """Operand letter or operator with its two subtrees."""

    data: str
    left: Optional[ExpressionNode] = None
    right: Optional[ExpressionNode] = None


def build_from_prefix(prefix: str) -> Optional[ExpressionNode]:
    """Build a tree from a prefix string of letters and + - * /.

    Other characters are ignored; an operator short of operands gets
    empty subtrees. Returns None when nothing was built.
    """
    stack: list[ExpressionNode] = []
    for char in reversed(prefix):
        if char.isascii() and char.isalpha():
            stack.append(ExpressionNode(char))
        elif char in _OPERATORS:
            left = stack.pop() if stack else None
            right = stack.pop() if stack else None
            stack.append(ExpressionNode(char, left, right))
    return stack.pop() if stack else None


def postorder(root: Optional[ExpressionNode]) -> list[str]:
    """Postorder symbols, collected without recursion."""
    pending = [root] if root else []
    visited: list[ExpressionNode] = []
    while pending:
        node = pending.pop()
        visited.append(node)
        pending.extend(child for child in (node.left, node.right) if child)
    return [node.data for node in reversed(visited)]


def inorder(root: Optional[ExpressionNode]) -> list[str]:
    """Inorder symbols, collected without recursion."""
    result: list[str] = []
    stack: list[ExpressionNode] = []
    node = root
    while node is not None or stack:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.data)
        node = node.right
    return result


def main(argv=None) -> int:
    """Read a prefix expression and print its postorder and inorder forms."""
    argparse.ArgumentParser(description="Prefix expression tree").parse_args(argv)
    out = sys.stdout
    out.write("Enter prefix Expression: ")
    words = sys.stdin.read().split()
    root = build_from_prefix(words[0] if words else "")
    if root is not None:
        out.write("\nPostorder Traversal: " + "".join(f"{s} " for s in postorder(root)))
        out.write("\nInorder Traversal: " + "".join(f"{s} " for s in inorder(root)))
    return 0