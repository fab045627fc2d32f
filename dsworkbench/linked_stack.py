"""Stack built on a singly linked list."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


class StackEmptyError(IndexError):
    """Raised when reading from an empty stack."""


@dataclass
class _Node:
    data: Any
    next: _Node | None = None


class LinkedStack:
    """A LIFO stack; iteration runs from top to bottom."""

    def __init__(self) -> None:
        self._top: _Node | None = None
        self._size = 0

    def push(self, value: Any) -> None:
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._top is None:
            raise StackEmptyError("Stack is empty")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.data

    def peek(self) -> Any:
        if self._top is None:
            raise StackEmptyError("Stack is empty")
        return self._top.data

    def is_empty(self) -> bool:
        return self._top is None

    def clear(self) -> None:
        self._top = None
        self._size = 0

    def __iter__(self) -> Iterator[Any]:
        node = self._top
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Demonstrate a linked stack.")
    parser.parse_args(argv)
    stack = LinkedStack()
    stack.push(1)
    stack.push(2)
    print(f"Element in the stack on the top: {stack.pop()}")
    if stack.is_empty():
        print("Stack is empty")
    else:
        print("".join(f"{value} " for value in stack))
    stack.clear()
    return 0