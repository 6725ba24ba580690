"""Classic sorting algorithms, each returning a new sorted list."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import TextIO

_ADDRESS_SLOTS = 100
_BUCKETS = 10


def _require_non_negative(items: Sequence[int], name: str) -> None:
    if any(item < 0 for item in items):
        raise ValueError(f"{name} accepts only non-negative integers")


def _insertion_sorted(items: list) -> list:
    """Sort a list in place by straight insertion and return it."""
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def address_calculation_sort(values: Iterable[int]) -> list[int]:
    """Distribute values into 100 slots by value % 100, sort each slot, concatenate.

    Slots are emitted in address order, so values of 100 or more are ordered
    by their remainder first.
    """
    items = list(values)
    _require_non_negative(items, "address calculation sort")
    slots: list[list[int]] = [[] for _ in range(_ADDRESS_SLOTS)]
    for item in items:
        slots[item % _ADDRESS_SLOTS].append(item)
    for slot in slots:
        bubble = bubble_sort(slot)
        slot[:] = bubble
    return [item for slot in slots for item in slot]


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Sort values in [0, 1) by spreading them over ten buckets."""
    items = list(values)
    if any(not 0 <= item < 1 for item in items):
        raise ValueError("bucket sort accepts only values in [0, 1)")
    buckets: list[list[float]] = [[] for _ in range(_BUCKETS)]
    for item in items:
        buckets[int(item * _BUCKETS)].append(item)
    return [item for bucket in buckets for item in _insertion_sorted(bucket)]


def _sift_down(items: list[int], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[int]) -> list[int]:
    """Sort with a binary max-heap."""
    items = list(values)
    size = len(items)
    for root in reversed(range(size // 2)):
        _sift_down(items, size, root)
    for end in reversed(range(1, size)):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Sort by straight insertion."""
    return _insertion_sorted(list(values))


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) < 2:
        return items
    middle = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def _radix_exchange(items: list[int], left: int, right: int, bit: int) -> None:
    if left >= right or bit < 0:
        return
    i, j = left, right
    while i <= j:
        while i <= j and not (items[i] >> bit) & 1:
            i += 1
        while i <= j and (items[j] >> bit) & 1:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
    _radix_exchange(items, left, j, bit - 1)
    _radix_exchange(items, j + 1, right, bit - 1)


def radix_exchange_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers by partitioning on bits from the highest set bit down."""
    items = list(values)
    if not items:
        return items
    _require_non_negative(items, "radix exchange sort")
    top_bit = max(items).bit_length() - 1
    _radix_exchange(items, 0, len(items) - 1, top_bit)
    return items


def _counting_pass(items: list[int], key: Callable[[int], int], width: int) -> list[int]:
    """Stable counting sort of items by key, whose values lie in range(width)."""
    counts = [0] * width
    for item in items:
        counts[key(item)] += 1
    for k in range(1, width):
        counts[k] += counts[k - 1]
    output = [0] * len(items)
    for item in reversed(items):
        counts[key(item)] -= 1
        output[counts[key(item)]] = item
    return output


def radix_sort(values: Iterable[int]) -> list[int]:
    """Least-significant-digit radix sort of non-negative integers in base 10."""
    items = list(values)
    if not items:
        return items
    _require_non_negative(items, "radix sort")
    largest = max(items)
    exp = 1
    while largest // exp > 0:
        items = _counting_pass(items, lambda item, e=exp: (item // e) % 10, 10)
        exp *= 10
    return items


def selection_sort(values: Iterable[int]) -> list[int]:
    """Sort by repeatedly selecting the smallest remaining value."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def shell_sort(values: Iterable[int]) -> list[int]:
    """Shell sort with gaps n/2, n/4, ..., 1."""
    items = list(values)
    gap = len(items) // 2
    while gap > 0:
        for i in range(gap, len(items)):
            current = items[i]
            j = i
            while j >= gap and items[j - gap] > current:
                items[j] = items[j - gap]
                j -= gap
            items[j] = current
        gap //= 2
    return items


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Sort by repeated adjacent swaps."""
    items = list(values)
    for done in range(len(items) - 1):
        for j in range(len(items) - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def counting_sort(values: Iterable[int]) -> list[int]:
    """Stable counting sort of non-negative integers."""
    items = list(values)
    if not items:
        return items
    _require_non_negative(items, "counting sort")
    return _counting_pass(items, lambda item: item, max(items) + 1)


def _partition(items: list[int], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable[int]) -> list[int]:
    """Quicksort with the last element of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _partition(items, low, high)
            pending.append((pivot + 1, high))
            pending.append((low, pivot - 1))
    return items


@dataclass(frozen=True)
class _Algorithm:
    sort: Callable[[list], list]
    prompt: str
    parse: Callable[[str], int | float] = int
    show: Callable[[int | float], str] = str


_ALGORITHMS: dict[str, _Algorithm] = {
    "address": _Algorithm(address_calculation_sort, "Enter {n} elements: "),
    "bucket": _Algorithm(
        bucket_sort,
        "Enter {n} elements (between 0 and 1): ",
        parse=float,
        show=lambda value: f"{value:f}",
    ),
    "heap": _Algorithm(heap_sort, "Enter {n} elements: "),
    "insertion": _Algorithm(insertion_sort, "Enter {n} elements: "),
    "merge": _Algorithm(merge_sort, "Enter {n} elements: "),
    "radix-exchange": _Algorithm(radix_exchange_sort, "Enter {n} non-negative integers: "),
    "radix": _Algorithm(radix_sort, "Enter {n} elements: "),
    "selection": _Algorithm(selection_sort, "Enter {n} elements: "),
    "shell": _Algorithm(shell_sort, "Enter {n} elements: "),
    "bubble": _Algorithm(bubble_sort, "Enter {n} elements: "),
    "counting": _Algorithm(counting_sort, "Enter {n} elements (non-negative integers): "),
    "quick": _Algorithm(quick_sort, "Enter {n} elements: "),
}


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next_token(tokens: Iterator[str]) -> str:
    token = next(tokens, None)
    if token is None:
        raise ValueError("input ended before all values were read")
    return token


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a count and that many values from standard input and print them sorted."""
    parser = argparse.ArgumentParser(
        prog="dsalgos-sort",
        description="Sort numbers read from standard input.",
    )
    parser.add_argument(
        "algorithm",
        nargs="?",
        default="quick",
        choices=sorted(_ALGORITHMS),
        help="sorting algorithm to use (default: quick)",
    )
    args = parser.parse_args(argv)
    algorithm = _ALGORITHMS[args.algorithm]

    tokens = _tokens(sys.stdin)
    try:
        _prompt("Enter number of elements: ")
        count = int(_next_token(tokens))
        if count < 0:
            raise ValueError("number of elements must be non-negative")
        _prompt(algorithm.prompt.format(n=count))
        values = [algorithm.parse(_next_token(tokens)) for _ in range(count)]
        result = algorithm.sort(values)
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1

    print("Sorted array: " + "".join(f"{algorithm.show(value)} " for value in result))
    return 0