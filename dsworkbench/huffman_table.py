"""Huffman tree stored as a static table of weights and index links."""

from __future__ import annotations

import argparse
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

DEFAULT_WEIGHTS = (10, 20, 30, 40)


@dataclass
class HTNode:
    """One row of a Huffman table; links are 1-based indices, 0 means none."""

    weight: int = 0
    parent: int = 0
    lchild: int = 0
    rchild: int = 0


def _select(table: Sequence[HTNode], end: int) -> tuple[int, int]:
    """Indices of the two lightest parentless rows among ``1 .. end``."""
    s1 = s2 = 0
    min1 = min2 = math.inf
    for index, node in enumerate(table[1 : end + 1], start=1):
        if node.parent != 0:
            continue
        if node.weight < min1:
            min2, s2 = min1, s1
            min1, s1 = node.weight, index
        elif node.weight < min2:
            min2, s2 = node.weight, index
    return s1, s2


def build_huffman_table(weights: Iterable[int]) -> list[HTNode]:
    """Build the table for ``weights``.

    The result has ``2 * n`` rows: row 0 is an unused placeholder, rows
    ``1 .. n`` are the leaves in input order and rows ``n + 1 .. 2n - 1``
    are the merged nodes, the last of them being the root.
    """
    leaves = [HTNode(weight) for weight in weights]
    if not leaves:
        raise ValueError("at least one weight is required")
    count = len(leaves)
    table = [HTNode(), *leaves, *(HTNode() for _ in range(count - 1))]
    for index in range(count + 1, 2 * count):
        s1, s2 = _select(table, index - 1)
        table[s1].parent = index
        table[s2].parent = index
        merged = table[index]
        merged.lchild = s1
        merged.rchild = s2
        merged.weight = table[s1].weight + table[s2].weight
    return table


def format_table(table: Sequence[HTNode], count: int) -> str:
    """Render rows ``1 .. count`` of ``table``, one per line."""
    return "\n".join(
        f"Node {index}: Weight = {node.weight}, Parent = {node.parent}, "
        f"Left Child = {node.lchild}, Right Child = {node.rchild}"
        for index, node in enumerate(table[1 : count + 1], start=1)
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Build a Huffman table and print its leaves.")
    parser.add_argument("weights", nargs="*", type=int, help="leaf weights")
    args = parser.parse_args(argv)
    weights = args.weights or list(DEFAULT_WEIGHTS)
    table = build_huffman_table(weights)
    print("Huffman Tree:")
    print(format_table(table, len(weights)))
    return 0