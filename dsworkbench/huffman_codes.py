"""Linked Huffman tree built with a binary min-heap, and its codes."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

DEFAULT_SYMBOLS = "abcdef"
DEFAULT_FREQS = (5, 9, 12, 13, 16, 45)
INTERNAL_SYMBOL = "$"


@dataclass
class HuffmanNode:
    """A node of a Huffman tree; leaves carry a symbol."""

    data: str
    freq: int
    left: HuffmanNode | None = None
    right: HuffmanNode | None = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


class _MinHeap:
    """Array-backed min-heap ordered by node frequency."""

    def __init__(self, nodes: Iterable[HuffmanNode]) -> None:
        self.items = list(nodes)
        for index in range((len(self.items) - 2) // 2, -1, -1):
            self._sift_down(index)

    def __len__(self) -> int:
        return len(self.items)

    def _sift_down(self, index: int) -> None:
        items = self.items
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < len(items) and items[child].freq < items[smallest].freq:
                    smallest = child
            if smallest == index:
                return
            items[smallest], items[index] = items[index], items[smallest]
            index = smallest

    def pop(self) -> HuffmanNode:
        top = self.items[0]
        last = self.items.pop()
        if self.items:
            self.items[0] = last
            self._sift_down(0)
        return top

    def push(self, node: HuffmanNode) -> None:
        items = self.items
        items.append(node)
        index = len(items) - 1
        while index and node.freq < items[(index - 1) // 2].freq:
            parent = (index - 1) // 2
            items[index] = items[parent]
            index = parent
        items[index] = node


def build_huffman_tree(symbols: Sequence[str], freqs: Sequence[int]) -> HuffmanNode:
    """Build a Huffman tree for ``symbols`` with matching ``freqs``."""
    if len(symbols) != len(freqs):
        raise ValueError("symbols and frequencies differ in length")
    if not symbols:
        raise ValueError("at least one symbol is required")
    heap = _MinHeap(HuffmanNode(symbol, freq) for symbol, freq in zip(symbols, freqs))
    while len(heap) > 1:
        left = heap.pop()
        right = heap.pop()
        heap.push(HuffmanNode(INTERNAL_SYMBOL, left.freq + right.freq, left, right))
    return heap.pop()


def _iter_codes(node: HuffmanNode, prefix: str = "") -> Iterator[tuple[str, str]]:
    if node.left is not None:
        yield from _iter_codes(node.left, prefix + "0")
    if node.right is not None:
        yield from _iter_codes(node.right, prefix + "1")
    if node.is_leaf():
        yield node.data, prefix


def huffman_codes(root: HuffmanNode) -> dict[str, str]:
    """Map each leaf symbol to its code, left edges being ``0``."""
    return dict(_iter_codes(root))


def format_codes(root: HuffmanNode) -> str:
    """Render ``symbol: code`` lines in left-to-right leaf order."""
    return "\n".join(f"{symbol}: {code}" for symbol, code in _iter_codes(root))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print Huffman codes for a set of symbols.")
    parser.add_argument("--symbols", default=DEFAULT_SYMBOLS, help="one character per symbol")
    parser.add_argument("--freqs", nargs="+", type=int, default=list(DEFAULT_FREQS))
    args = parser.parse_args(argv)
    try:
        root = build_huffman_tree(args.symbols, args.freqs)
    except ValueError as exc:
        parser.error(str(exc))
    print("Character Huffman Codes:")
    print(format_codes(root))
    return 0