# ftkit

A small library of everyday helpers: string utilities with C-library
semantics, decimal-length counting for fixed-width integers, writing
text and numbers to file descriptors, sequence iteration and mapping,
None-terminated string tables, and a singly linked list.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `ftkit.strings`

- `strlen(text)`: length of the text; `None` counts as 0.
- `strchr(text, char)`: the tail of `text` from the first `char`, or `None`.
- `strcmp(s1, s2)`, `strcmp_lowercase(s1, s2)`: difference of the first
  differing character codes, 0 when equal; the second ignores ASCII case.
- `to_lower(char)`: lower-cases an ASCII capital letter.
- `itoa(number)`, `signed_num_to_str(number)`, `unsigned_num_to_str(number)`:
  decimal text of a 32-bit signed, 64-bit signed or 64-bit unsigned
  integer; values outside the range raise `OverflowError`.
- `substr(text, start, end)`: characters from `start` to `end` inclusive;
  `None` when `text` is `None` or `start > end`.
- `strjoin(s1, s2)`: concatenation, either side may be `None`; `None` if both are.
- `split(text, char)`: splits on runs of `char`.
- `index_of(text, char)`, `last_index_of(text, char)`: position or -1.
- `trim(text, charset)`: strips characters of `charset` from both ends; when
  every character is in the set, the first character is kept.
- `is_in_set(char, charset)`, `has_set(text, charset)`: membership test, and
  the tail of `text` from its first character found in `charset`.
- `strncpy(src, size)`: `src` cut or padded with NUL characters to `size`.
- `memcpy(dest, src, n)`: copies `n` bytes of `src` into a writable buffer
  `dest` (such as a `bytearray`) and returns `dest`.

Functions that take a single character raise `ValueError` for anything
that is not a one-character string.

### `ftkit.numbers`

`int_len`, `long_len`, `signed_number_len`, `unsigned_number_len` count the
decimal digits of a number of the matching width. Zero and every negative
number count as 1. Out-of-range values raise `OverflowError`.

### `ftkit.output`

`putchar(fd, char)` writes one byte, `putstr(fd, text)` writes UTF-8 text
(`None` writes nothing), `putendl(fd, text)` adds a newline and
`putnbr(fd, number)` writes a 32-bit signed integer in decimal.

### `ftkit.arrays`

`array_foreach(items, func)` calls `func` on every item.
`array_map(items, func)` returns a new list of results; with no items or
no function it returns `items` itself.

### `ftkit.tables`

`table_len(table)` counts entries before the first `None` (a missing table
has 0). `table_clear(table)` empties the list in place.

### `ftkit.linked_list`

`Node` holds `data` and `next`. `LinkedList` supports `len()`, iteration,
`push_front`, `push_back`, `last`, `at`, `find`, `foreach`, `foreach_if`,
`print`, `clear`, `remove_if`, `merge`, `reverse`, `sort`, `sorted_insert`,
`sorted_merge` and `to_strs`. Comparison functions follow the C convention:
negative, zero or positive.

- `LinkedList.from_strs(strs)` pushes each string to the front, so the
  result holds them in reverse order.
- `merge(other)` moves the nodes of `other` to the end; `other` is left empty.
- `sort(cmp)` is a quicksort that swaps node data in place.
- `to_strs(length)` returns at most `length` items from the front, `None`
  for an empty list or a non-positive length, and raises `TypeError` on a
  non-string element.

## Examples

```python
from ftkit.strings import itoa, trim, index_of
from ftkit.numbers import int_len

itoa(-42)               # "-42"
trim("  hello  ", " ")  # "hello"
index_of("hello", "l")  # 2
int_len(12345)          # 5
```

```python
from ftkit.output import putendl, putnbr

putendl(1, "hello")     # writes "hello\n" to standard output
putnbr(1, -2147483648)  # writes "-2147483648"
```

```python
from ftkit.linked_list import LinkedList

def cmp(a, b):
    return (a > b) - (a < b)

lst = LinkedList([3, 1, 2])
lst.push_front(5)
lst.sort(cmp)
list(lst)               # [1, 2, 3, 5]
lst.sorted_insert(4, cmp)
list(lst)               # [1, 2, 3, 4, 5]
lst.reverse()
len(lst)                # 5
```

## Scope

This is a library only: it has no command-line program.