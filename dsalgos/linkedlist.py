"""A singly linked list of integers with an interactive menu."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import TextIO


@dataclass(slots=True)
class _Node:
    data: int
    next: _Node | None = None


class SinglyLinkedList:
    """A singly linked list that appends at the tail."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Append a value at the end of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def search(self, value: int) -> int | None:
        """Return the 1-based position of the first match, or None."""
        for position, data in enumerate(self, start=1):
            if data == value:
                return position
        return None

    def delete(self, value: int) -> None:
        """Remove the first node holding value; raise ValueError if absent."""
        prev: _Node | None = None
        node = self._head
        while node is not None and node.data != value:
            prev, node = node, node.next
        if node is None:
            raise ValueError(f"value {value} not found")
        if prev is None:
            self._head = node.next
        else:
            prev.next = node.next
        if node is self._tail:
            self._tail = prev
        self._size -= 1

    def render(self) -> str:
        """Return the list as 'a -> b -> NULL'."""
        return "".join(f"{value} -> " for value in self) + "NULL"

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


_MENU = "\n--- Menu ---\n1. Insert\n2. Search\n3. Delete\n4. Display\n5. Exit"


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def _read_value(tokens: Iterator[str], prompt: str) -> int | None:
    """Prompt for an integer; None at end of input."""
    _prompt(prompt)
    token = next(tokens, None)
    if token is None:
        return None
    return int(token)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive list menu on standard input and output."""
    items = SinglyLinkedList()
    tokens = _tokens(sys.stdin)
    while True:
        print(_MENU)
        _prompt("Enter choice: ")
        token = next(tokens, None)
        if token is None:
            print()
            return 0
        try:
            choice = int(token)
        except ValueError:
            print("Invalid choice!")
            continue

        if choice == 5:
            print("Exiting...")
            return 0
        if choice == 4:
            print(f"Linked List: {items.render()}")
            continue
        if choice not in (1, 2, 3):
            print("Invalid choice!")
            continue

        action = {1: "insert", 2: "search", 3: "delete"}[choice]
        try:
            value = _read_value(tokens, f"Enter value to {action}: ")
        except ValueError:
            print("Invalid value!")
            continue
        if value is None:
            print()
            return 0

        if choice == 1:
            items.insert(value)
            print(f"Inserted: {value}")
        elif choice == 2:
            position = items.search(value)
            if position is None:
                print(f"Value {value} not found!")
            else:
                print(f"Value {value} found at position {position}")
        else:
            try:
                items.delete(value)
            except ValueError:
                print("Value not found!")
            else:
                print(f"Deleted: {value}")