# dsalgos

A small collection of classic data structures and algorithms in plain Python,
with no dependencies beyond the standard library.

- **Sorting** (`dsalgos.sorting`): address calculation, bucket, heap,
  insertion, merge, radix exchange, radix (LSD, base 10), selection, shell,
  bubble, counting and quick sort.
- **Expressions** (`dsalgos.expression`): infix to postfix conversion and
  evaluation of single-digit integer arithmetic with `+ - * /` and parentheses.
- **Singly linked list** (`dsalgos.linkedlist`): insert, search, delete and
  display.
- **Grids** (`dsalgos.grid`): read a rows × columns table of integers and
  print it.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

### Sorting

Every sort takes an iterable and returns a new list; the input is not changed.

```python
from dsalgos.sorting import heap_sort, merge_sort, quick_sort, radix_sort

heap_sort([5, 2, 9, 1])     # [1, 2, 5, 9]
merge_sort([3, 3, 1])       # [1, 3, 3]
quick_sort([10, -4, 7])     # [-4, 7, 10]
radix_sort([170, 45, 75])   # [45, 75, 170]
```

The available functions are `address_calculation_sort`, `bucket_sort`,
`heap_sort`, `insertion_sort`, `merge_sort`, `radix_exchange_sort`,
`radix_sort`, `selection_sort`, `shell_sort`, `bubble_sort`, `counting_sort`
and `quick_sort`.

Some of them restrict their input and raise `ValueError` otherwise:

- `bucket_sort` accepts only values in the range `[0, 1)`.
- `counting_sort`, `radix_sort`, `radix_exchange_sort` and
  `address_calculation_sort` accept only non-negative integers.

`address_calculation_sort` places each value in one of 100 slots by
`value % 100`, sorts each slot and concatenates the slots in order. Values
below 100 come out fully sorted; values of 100 or more are grouped by their
remainder first, so the result is not in plain numeric order.

### Expressions

Operands are single digits. Characters other than digits, `+ - * /` and
parentheses are ignored. Division truncates toward zero.

```python
from dsalgos.expression import infix_to_postfix, evaluate_postfix, evaluate

infix_to_postfix("2+3*4")     # "234*+"
infix_to_postfix("(1+2)*3")   # "12+3*"
evaluate_postfix("234*+")     # 14
evaluate("(1+2)*3")           # 9
evaluate("7/2")               # 3
```

`evaluate_postfix` and `evaluate` raise `ValueError` when an operator lacks an
operand or the expression has none, and `ZeroDivisionError` on division by
zero. `precedence(op)` (2 for `*` and `/`, 1 for `+` and `-`, 0 otherwise) and
`is_operator(char)` are available as well.

### Singly linked list

```python
from dsalgos.linkedlist import SinglyLinkedList

items = SinglyLinkedList([1, 2, 3])
items.insert(4)        # appends at the end
items.search(3)        # 3 (1-based position), or None if absent
items.delete(2)        # raises ValueError if the value is absent
list(items)            # [1, 3, 4]
len(items)             # 3
items.render()         # "1 -> 3 -> 4 -> NULL"
```

### Grids

```python
from dsalgos.grid import parse_grid, format_grid

grid = parse_grid(["1", "2", "3", "4"], 2, 2)   # [[1, 2], [3, 4]]
format_grid(grid)                               # "1 2 \n3 4 \n"
```

`parse_grid` reads values row by row and raises `ValueError` on negative
dimensions, on a token that is not an integer, or when the tokens run out.

## Command-line tools

| Command              | What it does                                               |
|----------------------|------------------------------------------------------------|
| `dsalgos-expr`       | Evaluate the infix expression given as its one argument    |
| `dsalgos-sort`       | Read a count and that many numbers from stdin, print them sorted |
| `dsalgos-linkedlist` | Interactive menu on stdin for building a singly linked list |
| `dsalgos-grid`       | Read rows, columns and values from stdin and print the grid |

```
$ dsalgos-expr "2+3*4"
Result: 14
```

`dsalgos-sort` takes an optional algorithm name, one of `address`, `bubble`,
`bucket`, `counting`, `heap`, `insertion`, `merge`, `quick`, `radix`,
`radix-exchange`, `selection` and `shell`; the default is `quick`.

```
$ echo "4 5 2 9 1" | dsalgos-sort heap
Enter number of elements: Enter 4 elements: Sorted array: 1 2 5 9
```

`dsalgos-linkedlist` shows a menu (1 Insert, 2 Search, 3 Delete, 4 Display,
5 Exit) and stops at choice 5 or at the end of input.

## Limitations

- Expressions handle single-digit operands only; multi-digit numbers, unary
  minus and variables are not supported.
- The linked list lives only in memory; the menu tool does not save or load
  its contents.