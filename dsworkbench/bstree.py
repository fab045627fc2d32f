"""Binary search tree with the four classic traversals."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

DEFAULT_VALUES = (10, 20, 30, 5, 15, 25)


@dataclass
class TreeNode:
    """A node of a binary search tree."""

    data: int
    left: TreeNode | None = None
    right: TreeNode | None = None


class BSTree:
    """A binary search tree that ignores duplicate keys."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: TreeNode | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, data: int) -> bool:
        """Insert ``data``; return False if it was already present."""
        if self.root is None:
            self.root = TreeNode(data)
            self._size += 1
            return True
        node = self.root
        while True:
            if data < node.data:
                if node.left is None:
                    node.left = TreeNode(data)
                    break
                node = node.left
            elif data > node.data:
                if node.right is None:
                    node.right = TreeNode(data)
                    break
                node = node.right
            else:
                return False
        self._size += 1
        return True

    def __contains__(self, data: object) -> bool:
        node = self.root
        while node is not None:
            if data == node.data:
                return True
            node = node.left if data < node.data else node.right  # type: ignore[operator]
        return False

    def __len__(self) -> int:
        return self._size

    def preorder(self) -> list[int]:
        """Values in root, left, right order."""
        return list(self._walk(self.root, "pre"))

    def inorder(self) -> list[int]:
        """Values in left, root, right order (sorted)."""
        return list(self._walk(self.root, "in"))

    def postorder(self) -> list[int]:
        """Values in left, right, root order."""
        return list(self._walk(self.root, "post"))

    def level_order(self) -> list[int]:
        """Values level by level, left to right."""
        if self.root is None:
            return []
        result = []
        queue = deque([self.root])
        while queue:
            node = queue.popleft()
            result.append(node.data)
            if node.left:
                queue.append(node.left)
            if node.right:
                queue.append(node.right)
        return result

    def _walk(self, node: TreeNode | None, order: str) -> Iterator[int]:
        if node is None:
            return
        if order == "pre":
            yield node.data
        yield from self._walk(node.left, order)
        if order == "in":
            yield node.data
        yield from self._walk(node.right, order)
        if order == "post":
            yield node.data


def format_traversal(values: Iterable[int]) -> str:
    """Render values as ``->a->b->c``."""
    return "".join(f"->{value}" for value in values)


def format_report(tree: BSTree) -> str:
    """Render all four traversals of ``tree``, one per line."""
    return "\n".join(
        [
            "先序遍历:" + format_traversal(tree.preorder()),
            "中序遍历:" + format_traversal(tree.inorder()),
            "后序遍历:" + format_traversal(tree.postorder()),
            "层序遍历:" + format_traversal(tree.level_order()),
        ]
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Build a BST and print its traversals.")
    parser.add_argument("values", nargs="*", type=int, help="keys to insert")
    args = parser.parse_args(argv)
    tree = BSTree(args.values or DEFAULT_VALUES)
    print(format_report(tree))
    return 0