"""Singly linked list with a sentinel head node."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


class ListEmptyError(IndexError):
    """Raised when removing from an empty list."""


@dataclass
class _Node:
    data: Any = None
    next: _Node | None = None


class LinkedList:
    """A singly linked list; positions are counted from 1."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head = _Node()
        self._tail = self._head
        self._size = 0
        for value in values:
            self.insert_tail(value)

    def insert_head(self, value: Any) -> None:
        node = _Node(value, self._head.next)
        self._head.next = node
        if self._tail is self._head:
            self._tail = node
        self._size += 1

    def insert_tail(self, value: Any) -> None:
        node = _Node(value)
        self._tail.next = node
        self._tail = node
        self._size += 1

    def is_empty(self) -> bool:
        return self._head.next is None

    def remove_at(self, position: int) -> Any:
        """Remove and return the value at ``position`` (1-based)."""
        if self.is_empty():
            raise ListEmptyError("list is empty")
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} out of range")
        prev = self._head
        for _ in range(position - 1):
            prev = prev.next  # type: ignore[assignment]
        node = prev.next
        assert node is not None
        prev.next = node.next
        if node is self._tail:
            self._tail = prev
        self._size -= 1
        return node.data

    def remove_value(self, value: Any) -> int:
        """Remove every node holding ``value``; return how many went."""
        removed = 0
        prev = self._head
        while prev.next is not None:
            if prev.next.data == value:
                prev.next = prev.next.next
                removed += 1
            else:
                prev = prev.next
        self._tail = prev
        self._size -= removed
        return removed

    def clear(self) -> None:
        self._head.next = None
        self._tail = self._head
        self._size = 0

    def __iter__(self) -> Iterator[Any]:
        node = self._head.next
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Demonstrate a linked list.")
    parser.parse_args(argv)
    items = LinkedList()
    items.insert_head(2)
    items.insert_tail(2)
    print(f"按位置删除节点: {items.remove_at(1)}")
    print(f"按值删除节点: 链表中此值的个数是{items.remove_value(1)}")
    if items.is_empty():
        print("遍历: 链表为空!!")
    else:
        print("遍历: " + "".join(f"{value} " for value in items))
    items.clear()
    return 0