"""Binary tree nodes and depth-first traversals."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass
class TreeNode:
    """A binary tree node with optional left and right children."""

    data: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def inorder(root: Optional[TreeNode]) -> Iterator[int]:
    """Yield values as left subtree, node, right subtree."""
    if root is None:
        return
    yield from inorder(root.left)
    yield root.data
    yield from inorder(root.right)


def preorder(root: Optional[TreeNode]) -> Iterator[int]:
    """Yield values as node, left subtree, right subtree."""
    if root is None:
        return
    yield root.data
    yield from preorder(root.left)
    yield from preorder(root.right)


def postorder(root: Optional[TreeNode]) -> Iterator[int]:
    """Yield values as left subtree, right subtree, node."""
    if root is None:
        return
    yield from postorder(root.left)
    yield from postorder(root.right)
    yield root.data