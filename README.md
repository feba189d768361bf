# ftkit

A small toolkit of everyday helpers with no dependencies beyond the
standard library.

## Modules

- `ftkit.chars`: ASCII classification and case conversion. `is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper` and `to_lower`
  each take an integer code or a one-character string. The case converters
  return the same kind of value they were given.
- `ftkit.memory`: operations on byte buffers.
  - `fill(buf, value, n)` and `zero(buf, n)` set bytes in a `bytearray`.
  - `copy(dest, src, n)` copies bytes into `dest`.
  - `move(buf, dest, src, n)` copies between offsets of one buffer and handles overlapping regions.
  - `find_byte(data, value, n)` returns an index or `None`.
  - `compare(a, b, n)` returns 0 or the difference of the first bytes that differ.
  - `allocate_zeroed(count, size)` returns a zero-filled `bytearray` and raises `OverflowError` past a 32-bit total.
- `ftkit.text`: string searching, comparison, copying and parsing.
  - `length`.
  - `find_char` and `rfind_char` return an index or `None`. Searching for `"\0"` gives `len(s)`.
  - `find_bounded(big, little, n)` finds `little` only where it lies wholly within `big[:n]`.
  - `compare_n(s1, s2, n)` compares at most `n` characters.
  - `bounded_copy(src, size)` and `bounded_concat(dst, src, size)` return a `Bounded(text, length)` named tuple. A `length` of at least `size` means the text was truncated.
  - `parse_int(s)` skips leading whitespace, accepts one sign, and stops at the first non-digit. A string with no digits gives 0.
- `ftkit.output`: `put_char`, `put_str`, `put_endl` and `put_number` write to
  a text stream, which is standard output when none is given.
- `ftkit.transform`: building strings.
  - `int_to_str`.
  - `split(s, sep)` drops empty pieces.
  - `trim(s, charset)`.
  - `substring(s, start, length)` gives an empty string when `start` is past the end.
  - `join`.
  - `map_indexed(s, func)` calls `func(index, char)` for each character.
  - `iter_indexed(chars, func)` calls `func(index, char)` and updates a mutable sequence in place wherever `func` returns a character.
- `ftkit.printf`: `format_string(fmt, *args)` and `printf(fmt, *args, stream=None)`.
  - Supported conversions are `%c %s %d %i %u %x %X %p`. A `%` followed by any other character produces a single `%`, so `%%` gives `%`.
  - `%d` and `%i` treat integers as 32-bit signed. `%u`, `%x` and `%X` treat them as 32-bit unsigned.
  - `%s` of `None` gives `(null)`. `%p` of `None` or `0` gives `(nil)`.
  - `printf` returns the number of characters written.
- `ftkit.linked_list`: `Node` and `LinkedList`, a singly linked list.
  - Insertion: `push_front` and `push_back`.
  - Access and traversal: `last`, `len()`, iteration and `for_each`.
  - `map` returns a new list.
  - `clear(delete=None)` passes each value to `delete` when it is given.
- `ftkit.line_reader`: reading line by line.
  - `LineReader(source, buffer_size=5)` reads from an integer file descriptor or from any object with a `read(size)` method.
  - `get_next_line(fd)` keeps separate state for each file descriptor and returns `bytes`.
  - Lines keep their trailing newline. The last line may have none. `None` marks the end.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from ftkit.text import parse_int
from ftkit.transform import split, trim
from ftkit.printf import format_string

parse_int("   -42abc")          # -42
split("  hello  world ", " ")   # ["hello", "world"]
trim("xxhixx", "x")             # "hi"
format_string("%s has %d items (%x)", "box", 12, 255)
# "box has 12 items (ff)"
```

```python
from ftkit.linked_list import LinkedList

items = LinkedList()
items.push_back(1)
items.push_back(2)
items.push_front(0)
list(items)                        # [0, 1, 2]
len(items)                         # 3
list(items.map(lambda x: x * 10))  # [0, 10, 20]
```

```python
from ftkit.line_reader import LineReader

with open("notes.txt") as handle:
    for line in LineReader(handle):
        print(line, end="")
```

When `LineReader` is given a file descriptor, it reads with `os.read` and
yields `bytes`.

## What it does not do

ftkit is a library only. It installs no command-line program. Its printf
supports no flags, field widths or precisions.