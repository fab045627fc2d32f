"""Binary trees threaded for in-order or pre-order traversal."""

from __future__ import annotations

import argparse
import enum
import sys
from collections.abc import Iterator
from dataclasses import dataclass, field

EMPTY_MARK = "#"


class Tag(enum.IntEnum):
    """Whether a child pointer is a real link or a thread."""

    LINK = 0
    THREAD = 1


@dataclass(eq=False)
class ThreadNode:
    """A tree node whose empty child pointers may hold threads."""

    data: str
    left: ThreadNode | None = field(default=None, repr=False)
    right: ThreadNode | None = field(default=None, repr=False)
    ltag: Tag = Tag.LINK
    rtag: Tag = Tag.LINK


def parse_preorder(text: str) -> ThreadNode | None:
    """Build a tree from pre-order characters, ``#`` marking an empty child.

    Whitespace is ignored; characters after the tree is complete are ignored.
    """
    chars: Iterator[str] = (ch for ch in text if not ch.isspace())

    def build() -> ThreadNode | None:
        try:
            ch = next(chars)
        except StopIteration:
            raise ValueError("input ended before the tree was complete") from None
        if ch == EMPTY_MARK:
            return None
        node = ThreadNode(ch)
        node.left = build()
        node.right = build()
        return node

    return build()


def inorder_thread(root: ThreadNode | None) -> None:
    """Turn empty child pointers into in-order predecessor/successor threads."""
    pre: ThreadNode | None = None

    def visit(node: ThreadNode | None) -> None:
        nonlocal pre
        if node is None:
            return
        visit(node.left)
        if node.left is None:
            node.ltag = Tag.THREAD
            node.left = pre
        if pre is not None and pre.right is None:
            pre.rtag = Tag.THREAD
            pre.right = node
        pre = node
        visit(node.right)

    visit(root)


def inorder_traverse(root: ThreadNode | None) -> list[str]:
    """In-order values of a tree prepared by :func:`inorder_thread`."""
    result = []
    node = root
    while node is not None:
        while node.ltag is Tag.LINK:
            if node.left is None:
                raise ValueError("tree is not in-order threaded")
            node = node.left
        result.append(node.data)
        while node.rtag is Tag.THREAD and node.right is not None:
            node = node.right
            result.append(node.data)
        node = node.right
    return result


def preorder_thread(root: ThreadNode | None) -> None:
    """Turn empty child pointers into pre-order predecessor/successor threads."""
    pre: ThreadNode | None = None

    def visit(node: ThreadNode | None) -> None:
        nonlocal pre
        if node is None:
            return
        if node.left is None:
            node.left = pre
            node.ltag = Tag.THREAD
        if pre is not None and pre.right is None:
            pre.right = node
            pre.rtag = Tag.THREAD
        pre = node
        if node.ltag is Tag.LINK:
            visit(node.left)
        if node.rtag is Tag.LINK:
            visit(node.right)

    visit(root)


def preorder_traverse(root: ThreadNode | None) -> list[str]:
    """Pre-order values of a tree prepared by :func:`preorder_thread`."""
    result = []
    node = root
    while node is not None:
        result.append(node.data)
        node = node.left if node.ltag is Tag.LINK else node.right
    return result


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Read a pre-order tree from stdin and print a threaded traversal."
    )
    parser.add_argument(
        "--preorder", action="store_true", help="thread and traverse in pre-order"
    )
    args = parser.parse_args(argv)
    if args.preorder:
        print("请输入二叉树的结点数据（#表示空结点）：")
    else:
        print("输入前序二叉树（用'#'表示空结点）:")
    try:
        root = parse_preorder(sys.stdin.read())
    except ValueError as exc:
        parser.error(str(exc))
    if args.preorder:
        preorder_thread(root)
        print("先序线索二叉树遍历结果：")
        values = preorder_traverse(root)
    else:
        inorder_thread(root)
        print("输出中序序列:")
        values = inorder_traverse(root)
    print("".join(f"{value} " for value in values))
    return 0