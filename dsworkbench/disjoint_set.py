"""Disjoint-set union with path compression and union by rank."""

from __future__ import annotations

import argparse
import sys


class DisjointSet:
    """Union-find over the elements ``0 .. size-1``."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.parent = list(range(size))
        self.rank = [0] * size

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self.parent):
            raise IndexError(f"element {x} out of range")

    def find(self, x: int) -> int:
        """Return the representative of ``x``, compressing the path."""
        self._check(x)
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; return False if already joined."""
        root_x, root_y = self.find(x), self.find(y)
        if root_x == root_y:
            return False
        if self.rank[root_x] < self.rank[root_y]:
            self.parent[root_x] = root_y
        elif self.rank[root_x] > self.rank[root_y]:
            self.parent[root_y] = root_x
        else:
            self.parent[root_y] = root_x
            self.rank[root_x] += 1
        return True

    def connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)


def run_commands(text: str) -> list[str]:
    """Run ``n m`` followed by ``m`` lines of ``op x y``; return query answers.

    ``op`` 0 merges, ``op`` 1 asks whether ``x`` and ``y`` are joined.
    """
    tokens = text.split()
    try:
        numbers = [int(token) for token in tokens]
    except ValueError as exc:
        raise ValueError(f"malformed input: {exc}") from None
    if len(numbers) < 2:
        raise ValueError("missing element and operation counts")
    n, m = numbers[0], numbers[1]
    ops = numbers[2:]
    if len(ops) < 3 * m:
        raise ValueError("fewer operations than announced")
    dsu = DisjointSet(n)
    answers = []
    for start in range(0, 3 * m, 3):
        op, x, y = ops[start : start + 3]
        if op == 0:
            dsu.union(x, y)
        elif op == 1:
            answers.append("Yes" if dsu.connected(x, y) else "No")
    return answers


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Answer union-find queries read from stdin.")
    parser.parse_args(argv)
    for answer in run_commands(sys.stdin.read()):
        print(answer)
    return 0